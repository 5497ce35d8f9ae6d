import pytest
import sys
import os
from decimal import Decimal

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from order_pricing.engine import Customer, CustomerTier, LineItem, Order, OrderStatus


def test_new_order_is_pending_with_zero_total():
    order = Order("O001", Customer("C001", "John Doe", "john@example.com"))
    assert order.status == OrderStatus.PENDING
    assert order.total == Decimal("0")
    assert order.items == ()


def test_items_view_is_a_snapshot():
    order = Order("O001", None)
    order.add_item(LineItem("P001", "Laptop", "999.99", 1))
    items = order.items
    order.add_item(LineItem("P002", "Mouse", "29.99", 2))

    assert isinstance(items, tuple)
    assert len(items) == 1
    assert len(order.items) == 2


def test_line_item_coerces_float_price():
    item = LineItem("P001", "Monitor", 299.99, 2)
    assert item.unit_price == Decimal("299.99")
    assert item.line_total == Decimal("599.98")


def test_line_item_is_immutable():
    item = LineItem("P001", "Monitor", "299.99", 1)
    with pytest.raises(AttributeError):
        item.quantity = 5


@pytest.mark.parametrize("price, qty", [("-1.00", 1), ("10.00", 0), ("10.00", -2)])
def test_line_item_rejects_invalid_values(price, qty):
    with pytest.raises(ValueError):
        LineItem("P001", "Bad", price, qty)


def test_customer_tier_from_premium_flag():
    assert Customer("C1", "A", "a@example.com").tier == CustomerTier.REGULAR
    assert Customer("C2", "B", "b@example.com", premium=True).tier == CustomerTier.PREMIUM


def test_customer_premium_from_tier():
    assert Customer("C3", "C", "c@example.com", tier=CustomerTier.VIP).premium is True
    assert Customer("C4", "D", "d@example.com", premium=True, tier=CustomerTier.REGULAR).premium is False


def test_customer_tier_parsed_from_label():
    customer = Customer("C5", "E", "e@example.com", tier=" vip ")
    assert customer.tier == CustomerTier.VIP
    assert customer.premium is True


def test_customer_unknown_tier_label_raises():
    with pytest.raises(ValueError, match="Unknown tier for customer C6"):
        Customer("C6", "F", "f@example.com", tier="gold")


@pytest.mark.parametrize("label, expected", [
    ("VIP", CustomerTier.VIP),
    (" premium ", CustomerTier.PREMIUM),
    (CustomerTier.REGULAR, CustomerTier.REGULAR),
    ("GOLD", None),
    (None, None),
])
def test_tier_from_label(label, expected):
    assert CustomerTier.from_label(label) == expected
