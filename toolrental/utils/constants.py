# toolrental/utils/constants.py

"""
Global constants for date formats and day types.
These constants are imported by both models and services.
"""

# Input date format (ISO, used when checkout dates arrive as strings)
DATE_FMT = "%Y-%m-%d"

# Agreement display formats
DISPLAY_DATE_FMT = "%m/%d/%y"
CURRENCY_SYMBOL = "$"


class DayType:
    WEEKDAY = "weekday"
    WEEKEND = "weekend"
    HOLIDAY = "holiday"


# date.weekday(): Monday == 0 ... Sunday == 6
WEEKEND_DAYS = frozenset({5, 6})
