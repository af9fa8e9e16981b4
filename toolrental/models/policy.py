from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from ..exceptions import UnknownCategoryError
from ..services.common import round_money, to_decimal
from .tool import ToolCategory


@dataclass(frozen=True)
class ChargePolicy:
    """
    Per-category charge rules: the daily rate and which day types are billed.
    Floats and strings are stored as Decimal via str(), so 1.99 stays 1.99,
    always with two places ("1.5" -> 1.50). Sub-cent rates are rejected.
    """
    category: ToolCategory
    daily_charge: Decimal
    weekday_chargeable: bool
    weekend_chargeable: bool
    holiday_chargeable: bool

    def __post_init__(self):
        charge = to_decimal(self.daily_charge)
        if charge < 0:
            raise ValueError(f"Daily charge must be >= 0 (got {charge})")
        cents = round_money(charge)
        if cents != charge:
            raise ValueError(f"Daily charge must be whole cents (got {charge})")
        # frozen dataclass: bypass __setattr__ to normalise the field
        object.__setattr__(self, "daily_charge", cents)


class PolicyTable:
    """Read-only category -> ChargePolicy lookup."""

    def __init__(self, policies: Mapping[ToolCategory, ChargePolicy]):
        for category, policy in policies.items():
            if policy.category is not category:
                raise ValueError(
                    f"Policy for {category.type_name} is registered under {policy.category.type_name}")
        self._policies = MappingProxyType(dict(policies))

    def lookup(self, category: ToolCategory) -> ChargePolicy:
        """Return the policy for `category` or raise UnknownCategoryError."""
        policy = self._policies.get(category)
        if policy is None:
            name = getattr(category, "type_name", category)
            raise UnknownCategoryError(f"Error: no charge policy for tool category '{name}'")
        return policy

    def categories(self):
        return list(self._policies.keys())

    def __contains__(self, category) -> bool:
        return category in self._policies

    def __len__(self) -> int:
        return len(self._policies)


DEFAULT_POLICIES = PolicyTable({
    ToolCategory.LADDER: ChargePolicy(
        ToolCategory.LADDER, Decimal("1.99"),
        weekday_chargeable=True, weekend_chargeable=True, holiday_chargeable=False,
    ),
    ToolCategory.CHAINSAW: ChargePolicy(
        ToolCategory.CHAINSAW, Decimal("1.49"),
        weekday_chargeable=True, weekend_chargeable=False, holiday_chargeable=True,
    ),
    ToolCategory.JACKHAMMER: ChargePolicy(
        ToolCategory.JACKHAMMER, Decimal("2.99"),
        weekday_chargeable=True, weekend_chargeable=False, holiday_chargeable=False,
    ),
})


def lookup(category: ToolCategory) -> ChargePolicy:
    """Look up a category in the default policy table."""
    return DEFAULT_POLICIES.lookup(category)
