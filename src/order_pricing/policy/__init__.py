"""Policy subpackage - tier discount resolution."""
from .discount_policy import (
    DiscountPolicyResolver,
    PolymorphicTierResolver,
    Quote,
    TierHandler,
    TierTableResolver,
)

__all__ = ['DiscountPolicyResolver', 'PolymorphicTierResolver', 'Quote', 'TierHandler', 'TierTableResolver']
