"""Chargeable-day counting over a rental period."""

from datetime import date, timedelta

from ..models.policy import ChargePolicy
from ..utils.constants import DayType, WEEKEND_DAYS


class ChargeDayCounter:
    """
    Count the days a renter pays for.

    The rental period is (checkout_date, due_date]: billing starts the day
    after checkout and includes the due date, so a 3-day rental looks at
    exactly 3 days.
    """

    @staticmethod
    def classify_day(day: date, holidays=None) -> str:
        """Holiday (if the calendar says so), else weekday/weekend."""
        if holidays is not None and holidays.is_holiday(day):
            return DayType.HOLIDAY
        return DayType.WEEKEND if day.weekday() in WEEKEND_DAYS else DayType.WEEKDAY

    @staticmethod
    def is_chargeable(day_type: str, policy: ChargePolicy) -> bool:
        if day_type == DayType.HOLIDAY:
            return policy.holiday_chargeable
        if day_type == DayType.WEEKEND:
            return policy.weekend_chargeable
        return policy.weekday_chargeable

    @staticmethod
    def iter_rental_days(checkout_date: date, due_date: date):
        """Yield checkout_date+1 .. due_date inclusive (nothing if due <= checkout)."""
        for offset in range(1, (due_date - checkout_date).days + 1):
            yield checkout_date + timedelta(days=offset)

    @staticmethod
    def count_charge_days(checkout_date: date, due_date: date, policy: ChargePolicy, holidays=None) -> int:
        """
        Number of chargeable days in (checkout_date, due_date] under `policy`.
        Without a holiday calendar no day is a holiday, so only the weekday and
        weekend flags matter.
        """
        count = 0
        for day in ChargeDayCounter.iter_rental_days(checkout_date, due_date):
            day_type = ChargeDayCounter.classify_day(day, holidays)
            if ChargeDayCounter.is_chargeable(day_type, policy):
                count += 1
        return count
