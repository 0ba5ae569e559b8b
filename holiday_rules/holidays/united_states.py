"""Holidays and recurring dates in the United States."""

from __future__ import annotations

from holiday_rules.models.holiday import Month, NthWeekday, Weekday, new_fixed, new_nth

# 3rd Monday in January
MLK_DAY = new_nth("Martin Luther King Jr. Day", NthWeekday.THIRD, Weekday.MONDAY, Month.JANUARY)
GROUNDHOG_DAY = new_fixed("Groundhog Day", Month.FEBRUARY, 2)
SUPER_BOWL_SUNDAY = new_nth("Super Bowl Sunday", NthWeekday.FIRST, Weekday.SUNDAY, Month.FEBRUARY)
PRESIDENTS_DAY = new_nth("Presidents' Day", NthWeekday.THIRD, Weekday.MONDAY, Month.FEBRUARY)
VALENTINES_DAY = new_fixed("Valentine's Day", Month.FEBRUARY, 14)
DST_START = new_nth("Daylight Saving Time Starts", NthWeekday.SECOND, Weekday.SUNDAY, Month.MARCH)
APRIL_FOOLS_DAY = new_fixed("April Fools' Day", Month.APRIL, 1)
KENTUCKY_DERBY = new_nth("Kentucky Derby", NthWeekday.FIRST, Weekday.SATURDAY, Month.MAY)
MOTHERS_DAY = new_nth("Mother's Day", NthWeekday.SECOND, Weekday.SUNDAY, Month.MAY)
MEMORIAL_DAY = new_nth("Memorial Day", NthWeekday.LAST, Weekday.MONDAY, Month.MAY)
FLAG_DAY = new_fixed("Flag Day", Month.JUNE, 14)
FATHERS_DAY = new_nth("Father's Day", NthWeekday.THIRD, Weekday.SUNDAY, Month.JUNE)
INDEPENDENCE_DAY = new_fixed("Independence Day", Month.JULY, 4)
LABOR_DAY = new_nth("Labor Day", NthWeekday.FIRST, Weekday.MONDAY, Month.SEPTEMBER)
COLUMBUS_DAY = new_nth("Columbus Day", NthWeekday.SECOND, Weekday.MONDAY, Month.OCTOBER)
HALLOWEEN = new_fixed("Halloween", Month.OCTOBER, 31)
DST_END = new_nth("Daylight Saving Time Ends", NthWeekday.FIRST, Weekday.SUNDAY, Month.NOVEMBER)
VETERANS_DAY = new_fixed("Veterans Day", Month.NOVEMBER, 11)
THANKSGIVING = new_nth("Thanksgiving", NthWeekday.FOURTH, Weekday.THURSDAY, Month.NOVEMBER)
