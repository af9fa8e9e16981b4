from decimal import Decimal

from .common import round_money, to_decimal

HUNDRED = Decimal(100)


class ChargeCalculator:
    """Money math for an agreement. Every result is rounded half-up to the cent."""

    @staticmethod
    def pre_discount_charge(charge_days: int, daily_charge) -> Decimal:
        return round_money(charge_days * to_decimal(daily_charge))

    @staticmethod
    def discount_amount(pre_discount_charge, discount_percent: int) -> Decimal:
        # 20% of 7.96 is 1.592 -> 1.59; 10% of 3.98 is 0.398 -> 0.40
        return round_money(to_decimal(pre_discount_charge) * discount_percent / HUNDRED)

    @staticmethod
    def final_charge(pre_discount_charge, discount_amount) -> Decimal:
        return round_money(to_decimal(pre_discount_charge) - to_decimal(discount_amount))

    @staticmethod
    def charges(charge_days: int, daily_charge, discount_percent: int):
        """Return (pre_discount_charge, discount_amount, final_charge)."""
        pre = ChargeCalculator.pre_discount_charge(charge_days, daily_charge)
        discount = ChargeCalculator.discount_amount(pre, discount_percent)
        return pre, discount, ChargeCalculator.final_charge(pre, discount)
