"""Run one absentee scan, for use from cron or another external timer.

Usage: python scripts/run_absentee_scan.py "Shift 1" [YYYY-MM-DD]
"""

from __future__ import annotations

import sys

from _bootstrap import load_settings

from src.shift_attendance.shift_attendance.common.datetime_utils import parse_iso_date
from src.shift_attendance.shift_attendance.container import build_container


def main(argv: list[str]) -> int:
    if not argv:
        print(__doc__.strip())
        return 2

    settings = load_settings()
    container = build_container(
        db_config=dict(settings.DB_CONFIG),
        timezone=settings.TIMEZONE,
        smtp=settings.SMTP,
        admin_email=settings.ADMIN_EMAIL,
    )
    work_date = parse_iso_date(argv[1]) if len(argv) > 1 else None
    report = container.absentee_scanner.run(argv[0], work_date)

    print(
        f"{report.shift_name} {report.work_date}: absent={len(report.absentees)} "
        f"notified={len(report.notified)} failed={len(report.failed)} skipped={len(report.skipped)}"
    )
    return 1 if report.failed else 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
