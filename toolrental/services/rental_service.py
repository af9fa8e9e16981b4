"""Checkout service: validate a rental request and build the agreement."""

import logging
from datetime import timedelta
from typing import Optional

from ..exceptions import (
    CheckoutError,
    InvalidCheckoutDateError,
    InvalidDiscountPercentError,
    InvalidRentalDayCountError,
    ToolNotFoundError,
)
from ..models.agreement import CheckoutResult, RentalAgreement, RentalRequest
from ..models.inventory import Inventory
from ..models.policy import DEFAULT_POLICIES, PolicyTable
from .charge_calculator import ChargeCalculator
from .charge_days import ChargeDayCounter
from .common import as_date

logger = logging.getLogger(__name__)


def _is_int(x) -> bool:
    """True for real integers; bools are rejected."""
    return isinstance(x, int) and not isinstance(x, bool)


class RentalService:
    """
    Checkout of a single tool.
    The inventory, policy table and holiday calendar are fixed at construction,
    so one service can be shared by any number of callers.
    """

    def __init__(
            self,
            inventory: Inventory,
            policies: PolicyTable = DEFAULT_POLICIES,
            holidays=None,
    ):
        self.inventory = inventory
        self.policies = policies
        self.holidays = holidays

    def checkout(self, tool_code: str, rental_days: int, discount_percent: int, checkout_date) -> CheckoutResult:
        """
        Validate the request and compute the rental agreement.
        Checks run in order (tool, rental days, discount, date, policy) and the
        first failure is returned; nothing is computed for a rejected request.

        Returns:
            CheckoutResult with either `agreement` or `error` set.
        """
        try:
            agreement = self._checkout(tool_code, rental_days, discount_percent, checkout_date)
        except CheckoutError as e:
            logger.warning(f"Checkout rejected: {e.message}", extra={"tool_code": tool_code})
            return CheckoutResult.failure(e)

        logger.info(
            f"Checkout {agreement.tool_code}: {agreement.rental_days} days from "
            f"{agreement.checkout_date.isoformat()}, {agreement.charge_days} charge days, "
            f"final {agreement.final_charge}",
            extra={"tool_code": agreement.tool_code},
        )
        return CheckoutResult.success(agreement)

    # --------------- internals ---------------
    def _checkout(self, tool_code, rental_days, discount_percent, checkout_date) -> RentalAgreement:
        # --- tool lookup ---
        tool = self.inventory.resolve_tool(tool_code)
        if tool is None:
            raise ToolNotFoundError(f"Error: tool with code '{tool_code}' not found")

        # --- request validation ---
        if not _is_int(rental_days) or rental_days < 1:
            raise InvalidRentalDayCountError(
                f"Error: rental day count must be 1 or greater (got {rental_days!r})")

        if not _is_int(discount_percent) or not (0 <= discount_percent <= 100):
            raise InvalidDiscountPercentError(
                f"Error: discount percent must be between 0 and 100 (got {discount_percent!r})")

        try:
            day0 = as_date(checkout_date)
        except (TypeError, ValueError):
            raise InvalidCheckoutDateError(f"Error: invalid checkout date {checkout_date!r}") from None

        request = RentalRequest(tool.code, rental_days, discount_percent, day0)
        policy = self.policies.lookup(tool.category)

        # --- charge days + money ---
        try:
            due_date = request.checkout_date + timedelta(days=request.rental_days)
        except OverflowError:
            raise InvalidRentalDayCountError(
                f"Error: rental day count {rental_days} runs past the last supported date") from None
        charge_days = ChargeDayCounter.count_charge_days(
            request.checkout_date, due_date, policy, self.holidays)
        pre, discount, final = ChargeCalculator.charges(
            charge_days, policy.daily_charge, request.discount_percent)

        return RentalAgreement(
            tool_code=tool.code,
            category=tool.category,
            brand=tool.brand,
            rental_days=request.rental_days,
            checkout_date=request.checkout_date,
            due_date=due_date,
            daily_charge=policy.daily_charge,
            charge_days=charge_days,
            pre_discount_charge=pre,
            discount_percent=request.discount_percent,
            discount_amount=discount,
            final_charge=final,
        )


def checkout(
        tool_code: str,
        rental_days: int,
        discount_percent: int,
        checkout_date,
        inventory: Optional[Inventory] = None,
) -> CheckoutResult:
    """One-off checkout against the default inventory (or the one given)."""
    if inventory is None:
        inventory = Inventory.default()
    return RentalService(inventory).checkout(
        tool_code, rental_days, discount_percent, checkout_date)
