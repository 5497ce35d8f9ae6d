"""
Data models for the order pricing pipeline.

Uses dataclasses for structured, type-safe data representation.
Money values are Decimal throughout.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional, Union


Number = Union[Decimal, float, int, str]


def to_decimal(value: Number) -> Decimal:
    """Coerce a money value to Decimal, going through str() for floats."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class CustomerTier(str, Enum):
    """Customer classification driving discount rate and welcome message."""
    REGULAR = "REGULAR"
    PREMIUM = "PREMIUM"
    VIP = "VIP"

    @classmethod
    def from_label(cls, label) -> Optional['CustomerTier']:
        """
        Parse an external tier label.

        Returns None for anything unrecognized instead of raising, so callers
        can fall back to the default discount and greeting.
        """
        if isinstance(label, cls):
            return label
        if label is None:
            return None
        try:
            return cls(str(label).strip().upper())
        except ValueError:
            return None


class OrderStatus(str, Enum):
    """Order lifecycle states. Only PENDING → PROCESSED is exercised."""
    PENDING = "PENDING"
    PROCESSED = "PROCESSED"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


@dataclass
class TraceStep:
    """A single step in the pricing trace."""
    step: str
    description: str
    value: Optional[str] = None


@dataclass
class Customer:
    """A customer placing orders. tier accepts a CustomerTier or its label."""
    customer_id: str
    name: str
    email: str
    premium: bool = False
    tier: Optional[CustomerTier] = None

    def __post_init__(self):
        if self.tier is None:
            self.tier = CustomerTier.PREMIUM if self.premium else CustomerTier.REGULAR
        else:
            tier = CustomerTier.from_label(self.tier)
            if tier is None:
                raise ValueError(f"Unknown tier for customer {self.customer_id}: {self.tier!r}")
            self.tier = tier
            self.premium = self.tier != CustomerTier.REGULAR


@dataclass(frozen=True)
class LineItem:
    """A single product line on an order. Immutable after creation."""
    product_id: str
    name: str
    unit_price: Decimal
    quantity: int

    def __post_init__(self):
        price = to_decimal(self.unit_price)
        if price < 0:
            raise ValueError(f"Unit price for {self.product_id} cannot be negative: {price}")
        if int(self.quantity) <= 0:
            raise ValueError(f"Quantity for {self.product_id} must be positive: {self.quantity}")
        object.__setattr__(self, 'unit_price', price)
        object.__setattr__(self, 'quantity', int(self.quantity))

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity


@dataclass
class Order:
    """
    An order owned by a customer.

    Items are appended through add_item() and exposed as a tuple, so the
    pipeline always works on a snapshot. total and status are only
    written by the pricing pipeline.
    """
    order_id: str
    customer: Optional[Customer]
    total: Decimal = Decimal("0")
    status: OrderStatus = OrderStatus.PENDING
    trace: list[TraceStep] = field(default_factory=list)
    _items: list[LineItem] = field(default_factory=list, repr=False)

    @property
    def items(self) -> tuple[LineItem, ...]:
        return tuple(self._items)

    def add_item(self, item: LineItem):
        """Append a line item."""
        self._items.append(item)

    def add_trace(self, step: str, description: str, value: str = None):
        """Add a step to the order-level trace."""
        self.trace.append(TraceStep(step=step, description=description, value=value))

    def get_trace_text(self) -> str:
        """Get human-readable trace as formatted text."""
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"• {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"• {t.step}: {t.description}")
        return "\n".join(lines)
