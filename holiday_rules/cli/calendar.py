"""Tabulate holiday dates for a year.

Usage (after pip install):
    holiday-calendar
    holiday-calendar --year 2027 --holidays thanksgiving "memorial day"
"""

import argparse
import sys
from datetime import date

from tabulate import tabulate

from holiday_rules.config import get_settings
from holiday_rules.exceptions import InvalidDateError, UnknownHolidayError
from holiday_rules.holidays import ALL_HOLIDAYS, parse_holiday
from holiday_rules.service.holiday_service import HolidayService


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Holiday dates for a year")
    parser.add_argument(
        "--year",
        type=int,
        default=date.today().year,
        help="Calendar year (default: current year)",
    )
    parser.add_argument(
        "--holidays",
        nargs="+",
        default=None,
        help="Holiday names to show (default: all predefined holidays)",
    )
    args = parser.parse_args(argv)

    if args.holidays:
        try:
            holidays = [parse_holiday(n) for n in args.holidays]
        except UnknownHolidayError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1
    else:
        holidays = list(ALL_HOLIDAYS)

    svc = HolidayService(holidays=holidays)
    rows = []
    for holiday in svc.holidays:
        try:
            d = svc.resolve(holiday, args.year)
            when, weekday = d.strftime(settings.display.date_format), d.strftime("%A")
        except InvalidDateError:
            when, weekday = "-", "-"
        rows.append({
            "Holiday": holiday.label,
            "Rule": holiday.rule.describe(),
            "Date": when,
            "Weekday": weekday,
        })

    print(f"Holidays in {args.year}\n")
    print(tabulate(rows, headers="keys", tablefmt=settings.display.table_format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
