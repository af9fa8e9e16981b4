"""
Charge-day counting: the period is (checkout, due] and each day is billed
according to the category's weekday/weekend/holiday flags.
"""

from datetime import date, timedelta

import pytest

from toolrental.models.holiday import HolidayCalendar
from toolrental.models.policy import ChargePolicy, lookup
from toolrental.models.tool import ToolCategory
from toolrental.services.charge_days import ChargeDayCounter
from toolrental.utils.constants import DayType

EVERY_DAY = ChargePolicy(ToolCategory.LADDER, "1.00", True, True, True)
WEEKDAYS_ONLY = ChargePolicy(ToolCategory.JACKHAMMER, "1.00", True, False, False)
WEEKENDS_ONLY = ChargePolicy(ToolCategory.CHAINSAW, "1.00", False, True, False)


def count(start, days, policy, holidays=None):
    return ChargeDayCounter.count_charge_days(start, start + timedelta(days=days), policy, holidays)


def test_all_days_chargeable_counts_every_rental_day():
    # 2024-07-01 is a Monday; Tue..Sat
    assert count(date(2024, 7, 1), 5, EVERY_DAY) == 5


def test_weekend_skipped_for_weekday_only_policy():
    # Friday checkout: Sat, Sun, Mon -> only Monday
    assert count(date(2024, 7, 5), 3, WEEKDAYS_ONLY) == 1


def test_single_day_rental_looks_only_at_due_date():
    friday = date(2024, 7, 5)
    assert count(friday, 1, WEEKDAYS_ONLY) == 0  # due Saturday
    assert count(friday, 1, WEEKENDS_ONLY) == 1


def test_checkout_date_is_never_counted():
    sunday = date(2024, 6, 30)
    # Sunday itself is excluded, the due date Monday is a weekday
    assert count(sunday, 1, WEEKENDS_ONLY) == 0


@pytest.mark.parametrize("days", [1, 2, 6, 7, 13, 30, 365])
def test_count_never_exceeds_rental_days(days):
    start = date(2024, 2, 27)
    for policy in (EVERY_DAY, WEEKDAYS_ONLY, WEEKENDS_ONLY):
        n = count(start, days, policy)
        assert 0 <= n <= days
    assert count(start, days, EVERY_DAY) == days


def test_full_week_splits_five_and_two():
    start = date(2024, 7, 1)
    assert count(start, 7, WEEKDAYS_ONLY) == 5
    assert count(start, 7, WEEKENDS_ONLY) == 2


def test_due_date_not_after_checkout_counts_nothing():
    d = date(2024, 7, 1)
    assert ChargeDayCounter.count_charge_days(d, d, EVERY_DAY) == 0
    assert ChargeDayCounter.count_charge_days(d, d - timedelta(days=3), EVERY_DAY) == 0


def test_iter_rental_days_spans_period():
    days = list(ChargeDayCounter.iter_rental_days(date(2024, 12, 30), date(2025, 1, 2)))
    assert days == [date(2024, 12, 31), date(2025, 1, 1), date(2025, 1, 2)]


def test_classify_day():
    assert ChargeDayCounter.classify_day(date(2024, 7, 5)) == DayType.WEEKDAY
    assert ChargeDayCounter.classify_day(date(2024, 7, 6)) == DayType.WEEKEND
    assert ChargeDayCounter.classify_day(date(2024, 7, 7)) == DayType.WEEKEND
    cal = HolidayCalendar([date(2024, 7, 4)])
    assert ChargeDayCounter.classify_day(date(2024, 7, 4), cal) == DayType.HOLIDAY
    assert ChargeDayCounter.classify_day(date(2024, 7, 4)) == DayType.WEEKDAY


def test_holiday_flag_inert_without_calendar():
    no_holiday_charge = ChargePolicy(ToolCategory.LADDER, "1.00", True, True, False)
    assert count(date(2024, 7, 3), 1, no_holiday_charge) == 1  # July 4th, no calendar given


def test_holiday_not_charged_when_policy_excludes_it(july_holidays):
    jackhammer = lookup(ToolCategory.JACKHAMMER)
    # Thu 2015-07-02: Fri(holiday) Sat Sun Mon Tue Wed
    assert count(date(2015, 7, 2), 6, jackhammer) == 4
    assert count(date(2015, 7, 2), 6, jackhammer, july_holidays) == 3


def test_holiday_charged_when_policy_includes_it(july_holidays):
    chainsaw = lookup(ToolCategory.CHAINSAW)
    # Fri(holiday, charged) Sat Sun Mon Tue
    assert count(date(2015, 7, 2), 5, chainsaw, july_holidays) == 3


def test_weekend_holiday_uses_holiday_flag():
    cal = HolidayCalendar([date(2020, 7, 4)])  # a Saturday
    ladder = lookup(ToolCategory.LADDER)
    assert count(date(2020, 7, 3), 1, ladder) == 1
    assert count(date(2020, 7, 3), 1, ladder, cal) == 0
