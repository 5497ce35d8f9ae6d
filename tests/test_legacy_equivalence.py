"""
Regression tests pinning the refactored components to their code smell versions.
These should fail if a refactoring changes observable behavior.
"""
import pytest
import sys
import os
from decimal import Decimal

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from order_pricing.config.settings import Settings
from order_pricing.engine import (
    OrderPricingPipeline, InvalidOrderError, Customer, CustomerTier, LineItem, Order, OrderStatus,
)
from order_pricing.legacy import customer_types
from order_pricing.legacy.order_processor import LongMethodOrderProcessor
from order_pricing.policy import PolymorphicTierResolver

ORDER_CASES = [
    # (tier, items, expected_total)
    (CustomerTier.REGULAR, [("P001", "Laptop", "999.99", 1), ("P002", "Mouse", "29.99", 2)], Decimal("1006.97")),
    (CustomerTier.PREMIUM, [("P003", "Monitor", "299.99", 1)], Decimal("256.49")),
    (CustomerTier.REGULAR, [("P004", "Gaming PC", "1200.00", 1)], Decimal("1140.00")),
    (CustomerTier.PREMIUM, [("P005", "Workstation", "1500.00", 1)], Decimal("1282.50")),
    (CustomerTier.REGULAR, [("P002", "Mouse", "29.99", 1)], Decimal("29.99")),
    (CustomerTier.PREMIUM, [("P006", "Headset", "110.00", 1)], Decimal("99.00")),
    (CustomerTier.VIP, [("P008", "Desk", "200.00", 1)], Decimal("171.00")),
    (CustomerTier.VIP, [("P005", "Workstation", "1500.00", 1)], Decimal("1282.50")),
]


def build_order(order_id, tier, items):
    order = Order(order_id, Customer("C001", "Test User", "test@example.com", tier=tier))
    for item in items:
        order.add_item(LineItem(*item))
    return order


@pytest.fixture
def legacy():
    return LongMethodOrderProcessor(verbose=False)


@pytest.fixture
def pipeline():
    return OrderPricingPipeline(settings=Settings(verbose=False))


@pytest.mark.parametrize("tier, items, expected", ORDER_CASES,
                         ids=lambda v: v.value if isinstance(v, CustomerTier) else (str(v) if isinstance(v, Decimal) else None))
def test_same_totals(legacy, pipeline, tier, items, expected):
    smell_order = build_order("O-smell", tier, items)
    refactored_order = build_order("O-refactored", tier, items)

    legacy.process_order(smell_order)
    pipeline.process(refactored_order)

    assert abs(smell_order.total - expected) < Decimal("0.01"), \
        f"Long method total {smell_order.total} != {expected}"
    assert smell_order.total == refactored_order.total
    assert smell_order.status == refactored_order.status == OrderStatus.PROCESSED


def test_same_validation_errors(legacy, pipeline):
    empty = Order("O005", Customer("C005", "Test User", "test@example.com"))
    no_customer = Order("O006", None)
    no_customer.add_item(LineItem("P006", "Product", "100.00", 1))

    for order in (None, empty, no_customer):
        with pytest.raises(InvalidOrderError):
            legacy.process_order(order)
        with pytest.raises(InvalidOrderError):
            pipeline.process(order)


def test_legacy_processor_prints_save_message(capsys):
    order = build_order("O001", CustomerTier.PREMIUM, [("P001", "Laptop", "999.99", 1)])
    LongMethodOrderProcessor().process_order(order)
    assert "Order processed and saved: O001" in capsys.readouterr().out


def test_switch_and_polymorphic_agree():
    resolver = PolymorphicTierResolver()
    amount = 150.0
    for customer_type in ("REGULAR", "PREMIUM", "VIP", "UNKNOWN"):
        switch_discount = customer_types.calculate_discount(customer_type, amount)
        switch_message = customer_types.get_welcome_message(customer_type)
        quote = resolver.quote(customer_type, amount)

        assert abs(switch_discount - float(quote.discount_amount)) < 0.01
        assert switch_message == quote.message


def test_switch_values():
    assert customer_types.calculate_discount("REGULAR", 100.0) == pytest.approx(5.0)
    assert customer_types.calculate_discount("PREMIUM", 100.0) == pytest.approx(10.0)
    assert customer_types.calculate_discount("VIP", 100.0) == pytest.approx(15.0)
    assert customer_types.calculate_discount("UNKNOWN", 100.0) == 0.0
    assert customer_types.get_welcome_message("UNKNOWN") == "Welcome!"


def test_process_customer_prints_summary(capsys):
    final = customer_types.process_customer("VIP", 300.0)
    out = capsys.readouterr().out
    assert final == pytest.approx(255.0)
    assert "Customer Type: VIP" in out
    assert "Message: Welcome VIP! Exclusive offers await you." in out
