"""Service facade over rule resolution and the predefined holidays."""

from holiday_rules.service.holiday_service import HolidayService

__all__ = ["HolidayService"]
