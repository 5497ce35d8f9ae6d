"""
Order Pricing Pipeline - Validate → Total → Discount → Commit → Notify.

Refactored from the long-method processor (see legacy/order_processor.py)
by extracting one method per step:
- Validation fails loud with InvalidOrderError before any mutation
- Totals are recomputed from a snapshot of the items on every call
- Premium and bulk discounts compound in a fixed order
- Trace of every step recorded on the order
"""
from decimal import Decimal
from typing import Callable, Optional

from ..config.settings import get_settings, Settings
from ..policy import discount_policy
from .models import CustomerTier, LineItem, Order, OrderStatus, TraceStep


Notifier = Callable[[str], None]


class InvalidOrderError(ValueError):
    """Raised when an order cannot be processed."""


class OrderPricingPipeline:
    """
    Prices an order in place.

    Pipeline order:
    1. Validate order, items, and customer
    2. Sum unit price × quantity over all items
    3. Premium customers (any premium tier): apply the PREMIUM rate from the discount resolver
    4. Running total above the bulk threshold: apply the bulk rate
    5. Commit total and PROCESSED status
    6. Notify the persist/notify collaborator with the order id
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        resolver: Optional['discount_policy.DiscountPolicyResolver'] = None,
        notifier: Optional[Notifier] = None,
    ):
        self.settings = settings or get_settings()
        self.resolver = resolver or discount_policy.PolymorphicTierResolver()
        self.notifier = notifier or self._print_notifier

    def process(self, order: Order) -> None:
        """
        Price and commit an order.

        Args:
            order: Order to process; mutated in place

        Raises:
            InvalidOrderError: order missing, empty, or without customer
        """
        self._validate_order(order)
        items = order.items
        total = self._calculate_order_total(items)
        discounted_total, trace = self._apply_discounts(order, total)
        self._update_order_status(order, discounted_total, trace)
        self._save_order(order)

    def _validate_order(self, order: Optional[Order]):
        if order is None:
            raise InvalidOrderError("Order cannot be None")
        if not order.items:
            raise InvalidOrderError(f"Order {order.order_id} must contain at least one item")
        if order.customer is None:
            raise InvalidOrderError(f"Order {order.order_id} must have a customer")

    def _calculate_order_total(self, items: tuple[LineItem, ...]) -> Decimal:
        return sum((self._calculate_item_total(item) for item in items), Decimal("0"))

    def _calculate_item_total(self, item: LineItem) -> Decimal:
        return item.unit_price * item.quantity

    def _apply_discounts(self, order: Order, total: Decimal) -> tuple[Decimal, list[TraceStep]]:
        """
        Apply premium then bulk discount.

        The bulk threshold is checked against the post-premium amount,
        so the two rules compound.

        Returns (discounted_total, trace_steps).
        """
        customer = order.customer
        trace = [TraceStep("Subtotal", f"{len(order.items)} item(s), unit price × quantity", self._money(total))]
        discounted = total

        if customer.premium:
            rate = self.resolver.discount_rate(CustomerTier.PREMIUM)
            discounted = discounted * (1 - rate)
            trace.append(TraceStep(
                "Premium Discount",
                f"Premium customer ({customer.tier.value}), {rate * 100:.0f}% off",
                self._money(discounted),
            ))

        if discounted > self.settings.bulk_threshold:
            discounted = discounted * (1 - self.settings.bulk_discount_rate)
            trace.append(TraceStep(
                "Bulk Discount",
                f"Over {self._money(self.settings.bulk_threshold)}, "
                f"{self.settings.bulk_discount_rate * 100:.0f}% off",
                self._money(discounted),
            ))

        return discounted, trace

    def _update_order_status(self, order: Order, total: Decimal, trace: list[TraceStep]):
        order.trace = trace
        order.total = total
        order.status = OrderStatus.PROCESSED
        order.add_trace("Status", "Order committed", order.status.value)

    def _save_order(self, order: Order):
        self.notifier(order.order_id)

    def _print_notifier(self, order_id: str):
        if self.settings.verbose:
            print(f"Order processed and saved: {order_id}")

    def _money(self, value: Decimal) -> str:
        return f"${value:.{self.settings.money_places}f}"
