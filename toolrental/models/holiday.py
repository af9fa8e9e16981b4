from __future__ import annotations

from datetime import date
from typing import Iterable


class HolidayCalendar:
    """
    Fixed set of holiday dates.

    The checkout never works out holiday rules itself; whoever builds the
    service decides which dates count (observed dates included). Any object
    with an `is_holiday(day) -> bool` method can be used in its place.
    """

    def __init__(self, days: Iterable[date] = ()):
        self._days = frozenset(days)

    def is_holiday(self, day: date) -> bool:
        return day in self._days

    def __contains__(self, day) -> bool:
        return day in self._days

    def __len__(self) -> int:
        return len(self._days)

    def __repr__(self) -> str:
        return f"HolidayCalendar({sorted(self._days)!r})"


