"""
Order and Cart financial calculators.

Both the client cart (preview) and order creation (authoritative) compute
totals here, so the two can never disagree on rounding or on the delivery
fee tier.

Usage:
    from orders.calculators import OrderCalculator, DeliveryFeePolicy

    calculator = OrderCalculator(DeliveryFeePolicy())
    totals = calculator.calculate_totals([(Decimal("8.99"), 2), (Decimal("3.99"), 1)])
    totals.total  # Decimal("24.96")
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_EVEN
from typing import Iterable, Tuple, Union

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def quantize(amount: Union[Decimal, int, str]) -> Decimal:
    """Round an amount to cents using banker's rounding."""
    return Decimal(amount).quantize(CENT, rounding=ROUND_HALF_EVEN)


@dataclass(frozen=True)
class DeliveryFeePolicy:
    """
    Flat delivery fee, waived once the subtotal reaches the threshold.
    """

    fee: Decimal = Decimal("2.99")
    free_threshold: Decimal = Decimal("25.00")

    def __post_init__(self):
        object.__setattr__(self, "fee", quantize(self.fee))
        object.__setattr__(self, "free_threshold", quantize(self.free_threshold))
        if self.fee < 0 or self.free_threshold < 0:
            raise ValueError("Delivery fee and free delivery threshold must not be negative.")

    def fee_for(self, subtotal: Decimal) -> Decimal:
        if quantize(subtotal) >= self.free_threshold:
            return ZERO
        return self.fee


@dataclass(frozen=True)
class OrderTotals:
    subtotal: Decimal
    delivery_fee: Decimal
    total: Decimal

    def as_dict(self):
        return {
            "subtotal": self.subtotal,
            "delivery_fee": self.delivery_fee,
            "total": self.total,
        }

    def differs_from(self, subtotal=None, delivery_fee=None, total=None):
        """
        Names of the given client-side amounts that do not match these totals.
        Amounts left as None are not compared.
        """
        claimed = {"subtotal": subtotal, "delivery_fee": delivery_fee, "total": total}
        return [
            name
            for name, value in claimed.items()
            if value is not None and quantize(value) != getattr(self, name)
        ]


class OrderCalculator:
    """
    Computes subtotal, delivery fee and total from (unit price, quantity) lines.
    """

    def __init__(self, fee_policy: DeliveryFeePolicy):
        self.fee_policy = fee_policy

    @staticmethod
    def calculate_subtotal(lines: Iterable[Tuple[Decimal, int]]) -> Decimal:
        # Start with Decimal('0.00') so an empty iterable still yields a Decimal
        return quantize(sum((Decimal(price) * quantity for price, quantity in lines), ZERO))

    def calculate_totals(self, lines: Iterable[Tuple[Decimal, int]]) -> OrderTotals:
        subtotal = self.calculate_subtotal(lines)
        delivery_fee = self.fee_policy.fee_for(subtotal)
        return OrderTotals(
            subtotal=subtotal,
            delivery_fee=delivery_fee,
            total=quantize(subtotal + delivery_fee),
        )
