from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from ..exceptions import CheckoutError
from .tool import ToolCategory


@dataclass(frozen=True)
class RentalRequest:
    """Checkout input, built per call and never stored."""
    tool_code: str
    rental_days: int
    discount_percent: int
    checkout_date: date


@dataclass(frozen=True)
class RentalAgreement:
    """
    Result of a successful checkout. Money fields are Decimal with two places.
    Handed to the caller (e.g. the agreement printer) as-is.
    """
    tool_code: str
    category: ToolCategory
    brand: str
    rental_days: int
    checkout_date: date
    due_date: date
    daily_charge: Decimal
    charge_days: int
    pre_discount_charge: Decimal
    discount_percent: int
    discount_amount: Decimal
    final_charge: Decimal

    @property
    def tool_type(self) -> str:
        return self.category.type_name

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly snapshot: ISO dates, money as '0.00' strings."""
        return {
            "tool_code": self.tool_code,
            "tool_type": self.tool_type,
            "brand": self.brand,
            "rental_days": self.rental_days,
            "checkout_date": self.checkout_date.isoformat(),
            "due_date": self.due_date.isoformat(),
            "daily_charge": str(self.daily_charge),
            "charge_days": self.charge_days,
            "pre_discount_charge": str(self.pre_discount_charge),
            "discount_percent": self.discount_percent,
            "discount_amount": str(self.discount_amount),
            "final_charge": str(self.final_charge),
        }


@dataclass(frozen=True)
class CheckoutResult:
    """
    Either an agreement or the error that stopped the checkout, never both.
    Callers check `ok` (or call `unwrap()` to get the agreement or raise).
    """
    agreement: Optional[RentalAgreement] = None
    error: Optional[CheckoutError] = None

    def __post_init__(self):
        if (self.agreement is None) == (self.error is None):
            raise ValueError("CheckoutResult needs exactly one of agreement or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        return "OK" if self.ok else self.error.message

    @classmethod
    def success(cls, agreement: RentalAgreement) -> "CheckoutResult":
        return cls(agreement=agreement)

    @classmethod
    def failure(cls, error: CheckoutError) -> "CheckoutResult":
        return cls(error=error)

    def unwrap(self) -> RentalAgreement:
        if self.error is not None:
            raise self.error
        return self.agreement
