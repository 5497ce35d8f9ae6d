"""
Long Method version of the order processor.

Validation, totaling, discounting, status update and saving all live in
one method. Kept for comparison with engine/pricing_pipeline.py; both
must produce the same totals and errors.
"""
from decimal import Decimal

from ..engine.models import Order, OrderStatus
from ..engine.pricing_pipeline import InvalidOrderError


class LongMethodOrderProcessor:

    def __init__(self, verbose: bool = True):
        self.verbose = verbose

    def process_order(self, order: Order):
        # Validate order
        if order is None:
            raise InvalidOrderError("Order cannot be None")
        if not order.items:
            raise InvalidOrderError(f"Order {order.order_id} must contain at least one item")
        if order.customer is None:
            raise InvalidOrderError(f"Order {order.order_id} must have a customer")

        # Calculate total
        total = Decimal("0")
        for item in order.items:
            item_price = item.unit_price
            quantity = item.quantity
            item_total = item_price * quantity
            total += item_total

        # Apply discounts
        if order.customer.premium:
            total = total * Decimal("0.9")  # 10% discount for premium customers
        if total > Decimal("100.0"):
            total = total * Decimal("0.95")  # 5% discount for orders over $100

        # Update order
        order.total = total
        order.status = OrderStatus.PROCESSED

        # Simulate saving to database
        if self.verbose:
            print(f"Order processed and saved: {order.order_id}")
