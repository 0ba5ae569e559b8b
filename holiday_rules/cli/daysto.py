"""Count the days until holidays or dates.

Usage (after pip install):
    holiday-daysto thanksgiving christmas
    holiday-daysto "fourth of july" 2027-01-01 --as-of 2026-06-01
"""

import argparse
import sys
from datetime import date

from holiday_rules.exceptions import UnknownHolidayError
from holiday_rules.holidays import parse_holiday
from holiday_rules.service.holiday_service import HolidayService


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a YYYY-MM-DD date: {value!r}") from None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Days until holidays or dates")
    parser.add_argument(
        "names",
        nargs="+",
        help="Holiday names (e.g. thanksgiving, \"mother's day\") or YYYY-MM-DD dates",
    )
    parser.add_argument(
        "--as-of",
        type=_parse_date,
        default=None,
        help="Count from this date instead of today (YYYY-MM-DD)",
    )
    args = parser.parse_args(argv)

    today = args.as_of or date.today()
    svc = HolidayService(holidays=[])
    status = 0
    for name in args.names:
        try:
            holiday = parse_holiday(name)
        except UnknownHolidayError:
            # Fall back to a literal date
            try:
                target = date.fromisoformat(name)
            except ValueError:
                print(f"Unknown holiday: '{name}'", file=sys.stderr)
                status = 1
                continue
            print(f"Days until {name}: {(target - today).days}")
        else:
            print(f"Days until {holiday.label}: {svc.days_until(holiday, as_of=today)}")
    return status


if __name__ == "__main__":
    sys.exit(main())
