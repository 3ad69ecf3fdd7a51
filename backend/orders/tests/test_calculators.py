"""
Order calculator tests.

These run without a database: the calculator only sees (price, quantity)
pairs and a delivery fee policy.
"""
import pytest
from decimal import Decimal

from orders.calculators import DeliveryFeePolicy, OrderCalculator, quantize


class TestDeliveryFeePolicy:
    """Flat fee below the threshold, free at or above it"""

    def test_fee_charged_below_threshold(self, fee_policy):
        assert fee_policy.fee_for(Decimal('24.99')) == Decimal('2.99')

    def test_free_at_exact_threshold(self, fee_policy):
        assert fee_policy.fee_for(Decimal('25.00')) == Decimal('0.00')

    def test_free_above_threshold(self, fee_policy):
        assert fee_policy.fee_for(Decimal('80.10')) == Decimal('0.00')

    def test_configured_values_are_used(self):
        policy = DeliveryFeePolicy(fee=Decimal('4.50'), free_threshold=Decimal('40'))
        assert policy.fee_for(Decimal('39.99')) == Decimal('4.50')
        assert policy.fee_for(Decimal('40.00')) == Decimal('0.00')

    def test_negative_values_rejected(self):
        with pytest.raises(ValueError):
            DeliveryFeePolicy(fee=Decimal('-1'))


class TestOrderCalculator:
    """Subtotal, delivery fee and total for a list of lines"""

    def test_reference_cart_totals(self, fee_policy):
        """
        2 x 8.99 + 1 x 3.99 = 21.97, below 25.00 so the 2.99 fee applies.
        """
        totals = OrderCalculator(fee_policy).calculate_totals([
            (Decimal('8.99'), 2),
            (Decimal('3.99'), 1),
        ])

        assert totals.subtotal == Decimal('21.97')
        assert totals.delivery_fee == Decimal('2.99')
        assert totals.total == Decimal('24.96')

    def test_subtotal_at_threshold_delivers_free(self, fee_policy):
        totals = OrderCalculator(fee_policy).calculate_totals([
            (Decimal('12.50'), 2),
        ])

        assert totals.subtotal == Decimal('25.00')
        assert totals.delivery_fee == Decimal('0.00')
        assert totals.total == Decimal('25.00')

    def test_empty_lines_give_zero_subtotal(self):
        assert OrderCalculator.calculate_subtotal([]) == Decimal('0.00')

    def test_total_is_subtotal_plus_fee(self, fee_policy):
        totals = OrderCalculator(fee_policy).calculate_totals([
            (Decimal('1.10'), 3),
            (Decimal('7.25'), 1),
        ])
        assert totals.total == totals.subtotal + totals.delivery_fee

    def test_differs_from_names_mismatched_amounts(self, fee_policy):
        totals = OrderCalculator(fee_policy).calculate_totals([(Decimal('8.99'), 2)])

        mismatched = totals.differs_from(
            subtotal=Decimal('17.98'), delivery_fee=Decimal('0'), total=None
        )

        assert mismatched == ['delivery_fee']

    def test_quantize_uses_bankers_rounding(self):
        assert quantize(Decimal('0.125')) == Decimal('0.12')
        assert quantize(Decimal('0.135')) == Decimal('0.14')
