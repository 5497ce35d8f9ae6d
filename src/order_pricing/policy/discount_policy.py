"""
Discount Policy - Resolves discount rate and welcome message for a customer tier.

Two interchangeable resolvers:
1. TierTableResolver - tag dispatch over a lookup table keyed by tier
2. PolymorphicTierResolver - one handler object per tier

Unknown tiers fall back to a zero rate and a generic greeting.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

from ..engine.models import CustomerTier, Number, to_decimal


TierKey = Union[CustomerTier, str, None]

FALLBACK_RATE = Decimal("0.0")
FALLBACK_MESSAGE = "Welcome!"


@dataclass(frozen=True)
class Quote:
    """Discount quote for an amount at a given tier."""
    discount_amount: Decimal
    message: str
    final_amount: Decimal


def _normalize_key(tier: TierKey) -> Optional[Union[CustomerTier, str]]:
    """Map a tier or raw label to a lookup key. Known labels become CustomerTier."""
    if tier is None:
        return None
    parsed = CustomerTier.from_label(tier)
    if parsed is not None:
        return parsed
    return str(tier).strip().upper()


class DiscountPolicyResolver(ABC):
    """Maps a customer tier to a discount rate and welcome message."""

    @abstractmethod
    def discount_rate(self, tier: TierKey) -> Decimal:
        """Discount rate for the tier, FALLBACK_RATE if unknown."""

    @abstractmethod
    def welcome_message(self, tier: TierKey) -> str:
        """Welcome message for the tier, FALLBACK_MESSAGE if unknown."""

    def quote(self, tier: TierKey, amount: Number) -> Quote:
        """
        Compose rate and message for an amount.

        Args:
            tier: CustomerTier, raw label, or None
            amount: Amount before discount

        Returns:
            Quote with discount amount, message, and final amount
        """
        amount = to_decimal(amount)
        discount = amount * self.discount_rate(tier)
        return Quote(
            discount_amount=discount,
            message=self.welcome_message(tier),
            final_amount=amount - discount,
        )


class TierTableResolver(DiscountPolicyResolver):
    """Tag dispatch: one lookup table row per known tier."""

    RATES = {
        CustomerTier.REGULAR: Decimal("0.05"),
        CustomerTier.PREMIUM: Decimal("0.10"),
        CustomerTier.VIP: Decimal("0.15"),
    }

    MESSAGES = {
        CustomerTier.REGULAR: "Welcome! Enjoy your shopping.",
        CustomerTier.PREMIUM: "Welcome back! You have premium benefits.",
        CustomerTier.VIP: "Welcome VIP! Exclusive offers await you.",
    }

    def discount_rate(self, tier: TierKey) -> Decimal:
        return self.RATES.get(CustomerTier.from_label(tier), FALLBACK_RATE)

    def welcome_message(self, tier: TierKey) -> str:
        return self.MESSAGES.get(CustomerTier.from_label(tier), FALLBACK_MESSAGE)


class TierHandler(ABC):
    """Behavior for a single customer tier."""

    tier: Union[CustomerTier, str]

    @property
    @abstractmethod
    def rate(self) -> Decimal:
        """Discount rate for this tier."""

    @abstractmethod
    def welcome_message(self) -> str:
        """Greeting shown to customers of this tier."""

    def calculate_discount(self, amount: Number) -> Decimal:
        """Discount amount for an order amount."""
        return to_decimal(amount) * self.rate


class RegularHandler(TierHandler):
    tier = CustomerTier.REGULAR
    rate = Decimal("0.05")

    def welcome_message(self) -> str:
        return "Welcome! Enjoy your shopping."


class PremiumHandler(TierHandler):
    tier = CustomerTier.PREMIUM
    rate = Decimal("0.10")

    def welcome_message(self) -> str:
        return "Welcome back! You have premium benefits."


class VipHandler(TierHandler):
    tier = CustomerTier.VIP
    rate = Decimal("0.15")

    def welcome_message(self) -> str:
        return "Welcome VIP! Exclusive offers await you."


DEFAULT_HANDLERS = (RegularHandler, PremiumHandler, VipHandler)


class PolymorphicTierResolver(DiscountPolicyResolver):
    """
    Handler-per-tier dispatch.

    New tiers are added with register(); callers such as the pricing
    pipeline keep working against the DiscountPolicyResolver interface.
    """

    def __init__(self, handlers: Optional[list[TierHandler]] = None):
        self.handlers: dict = {}
        for handler in handlers if handlers is not None else [cls() for cls in DEFAULT_HANDLERS]:
            self.register(handler)

    def register(self, handler: TierHandler):
        """Add a handler, replacing any existing handler for the same tier."""
        self.handlers[_normalize_key(handler.tier)] = handler

    def handler_for(self, tier: TierKey) -> Optional[TierHandler]:
        """Look up the handler for a tier, None if unregistered."""
        return self.handlers.get(_normalize_key(tier))

    def discount_rate(self, tier: TierKey) -> Decimal:
        handler = self.handler_for(tier)
        return to_decimal(handler.rate) if handler else FALLBACK_RATE

    def welcome_message(self, tier: TierKey) -> str:
        handler = self.handler_for(tier)
        return handler.welcome_message() if handler else FALLBACK_MESSAGE

    def quote(self, tier: TierKey, amount: Number) -> Quote:
        handler = self.handler_for(tier)
        if handler is None:
            return super().quote(tier, amount)
        amount = to_decimal(amount)
        discount = handler.calculate_discount(amount)
        return Quote(
            discount_amount=discount,
            message=handler.welcome_message(),
            final_amount=amount - discount,
        )
