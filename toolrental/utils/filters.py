"""Display formatting for rental agreements (dates, money, percents)."""
import sys
from datetime import date, datetime
from decimal import Decimal

from .constants import CURRENCY_SYMBOL, DISPLAY_DATE_FMT


def fmt_date(value) -> str:
    """
    Format a date as MM/DD/YY.
    Accepts date/datetime or 'YYYY-MM-DD'; on parse error returns the original
    value so the printout never goes blank.
    """
    if value is None:
        return ""
    if isinstance(value, (date, datetime)):
        return value.strftime(DISPLAY_DATE_FMT)

    s = str(value).strip()
    try:
        return date.fromisoformat(s.split("T", 1)[0]).strftime(DISPLAY_DATE_FMT)
    except ValueError:
        return s


def fmt_currency(value) -> str:
    """$#,##0.00, e.g. Decimal('1234.5') -> '$1,234.50'."""
    amount = value if isinstance(value, Decimal) else Decimal(str(value))
    sign = "-" if amount < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(amount):,.2f}"


def fmt_percent(value) -> str:
    """Whole percent, e.g. 20 -> '20%'."""
    return f"{int(value)}%"


def agreement_lines(agreement) -> list:
    """(label, formatted value) pairs in printout order."""
    return [
        ("Tool code", agreement.tool_code),
        ("Tool type", agreement.tool_type),
        ("Tool brand", agreement.brand),
        ("Rental days", str(agreement.rental_days)),
        ("Check out date", fmt_date(agreement.checkout_date)),
        ("Due date", fmt_date(agreement.due_date)),
        ("Daily rental charge", fmt_currency(agreement.daily_charge)),
        ("Charge days", str(agreement.charge_days)),
        ("Pre-discount charge", fmt_currency(agreement.pre_discount_charge)),
        ("Discount percent", fmt_percent(agreement.discount_percent)),
        ("Discount amount", fmt_currency(agreement.discount_amount)),
        ("Final charge", fmt_currency(agreement.final_charge)),
    ]


def format_agreement(agreement) -> str:
    return "\n".join(f"{label}: {value}" for label, value in agreement_lines(agreement))


def print_agreement(agreement, file=None) -> None:
    """Write the agreement text to `file` (stdout by default)."""
    print(format_agreement(agreement), file=file or sys.stdout)
