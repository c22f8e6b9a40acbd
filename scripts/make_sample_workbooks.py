"""Write sample schedule workbooks in the formats seen in real exports.

Usage:
    python scripts/make_sample_workbooks.py
    python scripts/make_sample_workbooks.py --out data/samples

Output (one .xlsx per format):
    standard.xlsx  - service records + staff list sheet
    hyphen.xlsx    - "09:00-10:00" and "13:00~14:30" mixed
    tilde.xlsx     - full-width tilde "09:00～10:30"
    dirty.xlsx     - spaces, text wrappers and slashes around the times
    complex.xlsx   - numeric approved-hours column next to the real range column
    external.xlsx  - another agency's headers (案號, 服務時間起迄, 照服員姓名)
"""

import argparse
from pathlib import Path

from openpyxl import Workbook

STAFF_SHEET = [
    {"員編": "A001", "姓名": "王小明"},
    {"員編": "A002", "姓名": "李大華"},
    {"員編": "A003", "姓名": "張小美"},  # no shifts, fully free
]

SAMPLES: dict[str, list[tuple[str, list[dict]]]] = {
    "standard": [
        (
            "Service Records",
            [
                {"服務日期": "2023-12-15", "服務時間": "09:00~10:00", "服務人員": "王小明"},
                {"服務日期": "2023-12-15", "服務時間": "13:00~14:30", "服務人員": "王小明"},
                {"服務日期": "2023-12-15", "服務時間": "08:00~12:00", "服務人員": "李大華"},
            ],
        ),
        ("Staff List", STAFF_SHEET),
    ],
    "hyphen": [
        (
            "Service Records",
            [
                {"服務日期": "2023-11-22", "服務時間": "09:00-10:00", "服務人員": "TestStaff"},
                {"服務日期": "2023-11-22", "服務時間": "13:00~14:30", "服務人員": "TestStaff"},
            ],
        ),
        ("Staff List", [{"員編": "T001", "姓名": "TestStaff"}]),
    ],
    "tilde": [
        (
            "Tilde Data",
            [
                {"服務日期": "2023-12-06", "服務時間": "09:00～10:30", "服務人員": "TildeUser"},
                {"服務日期": "2023-12-06", "服務時間": "13:00~14:00", "服務人員": "TildeUser"},
            ],
        ),
    ],
    "dirty": [
        (
            "Dirty Data",
            [
                {"服務日期": "2023-12-07", "服務時間": "09:00 - 10:30", "服務人員": "UserSpace"},
                {"服務日期": "2023-12-07", "服務時間": "11:00～ 12:00", "服務人員": "UserFullWidthSpace"},
                {"服務日期": "2023-12-07", "服務時間": "Start 13:00 End 14:00", "服務人員": "UserText"},
                {"服務日期": "2023-12-07", "服務時間": "15:00/16:00", "服務人員": "UserSlash"},
            ],
        ),
    ],
    "complex": [
        (
            "Complex Data",
            [
                {
                    "服務項目": "居家服務",
                    "核定服務時間": 1.5,
                    "服務時間起迄": "09:30~11:00",
                    "照服員姓名": "ComplexUser",
                    "服務日期": "2023-12-05",
                },
            ],
        ),
    ],
    "external": [
        (
            "External Data",
            [
                {"案號": "A123", "服務日期": "2023-12-01", "服務時間起迄": "08:00-10:00", "照服員姓名": "ExternalUser"},
                {"案號": "A124", "服務日期": "2023-12-01", "服務時間起迄": "14:00~16:00", "照服員姓名": "ExternalUser"},
            ],
        ),
    ],
}


def write_workbook(path: Path, sheets: list[tuple[str, list[dict]]]) -> None:
    """Write `sheets` (title, rows) to `path`, header row from the first row's keys."""
    wb = Workbook()
    wb.remove(wb.active)
    for title, rows in sheets:
        ws = wb.create_sheet(title)
        headers = list(rows[0].keys())
        ws.append(headers)
        for row in rows:
            ws.append([row.get(h) for h in headers])
    path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(path)


def main() -> None:
    parser = argparse.ArgumentParser(description="Write sample schedule workbooks.")
    parser.add_argument(
        "--out",
        type=Path,
        default=Path("data/samples"),
        help="Output directory (default: data/samples).",
    )
    args = parser.parse_args()

    for name, sheets in SAMPLES.items():
        path = args.out / f"{name}.xlsx"
        write_workbook(path, sheets)
        print(f"Created {path}")


if __name__ == "__main__":
    main()
