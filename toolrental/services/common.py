"""Shared service helpers: date coercion and money rounding."""

from datetime import datetime, date
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation

import pytz

from ..config import Config
from ..utils.constants import DATE_FMT

CENT = Decimal("0.01")


# -------- date helpers --------
def parse_date(s: str) -> date:
    """Parse YYYY-MM-DD string to date."""
    return datetime.strptime(s, DATE_FMT).date()


def business_tz():
    """Timezone used to read the calendar date of aware datetimes."""
    return pytz.timezone(Config.TIMEZONE)


def as_date(x) -> date:
    """
    Coerce any date-like to a naive calendar date.
    - date -> itself
    - naive datetime -> its date part
    - aware datetime -> date in the business timezone
    - 'YYYY-MM-DD' or ISO with T -> parsed date part
    Raise ValueError on anything else.
    """
    if isinstance(x, datetime):
        if x.tzinfo is not None:
            return x.astimezone(business_tz()).date()
        return x.date()
    if isinstance(x, date):
        return x
    if isinstance(x, str):
        base = x.strip().split("T", 1)[0].split(" ", 1)[0]
        return parse_date(base)
    raise ValueError(f"Unsupported date: {x!r}")


# -------- money helpers --------
def to_decimal(value) -> Decimal:
    """Convert int/float/str/Decimal to Decimal without float noise (1.99 -> Decimal('1.99'))."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Not a money amount: {value!r}")
    try:
        return Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"Not a money amount: {value!r}") from e


def round_money(x) -> Decimal:
    """Round half-up (away from zero) to whole cents."""
    return to_decimal(x).quantize(CENT, rounding=ROUND_HALF_UP)
