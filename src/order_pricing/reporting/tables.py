"""
Reporting tables for quotes and orders.

Builds pandas DataFrames for the demo script and for side-by-side
comparison of the discount resolvers.
"""
from typing import Optional

import pandas as pd

from ..engine.models import CustomerTier, Number, Order, to_decimal
from ..policy.discount_policy import DiscountPolicyResolver, PolymorphicTierResolver

QUOTE_COLUMNS = ['Tier', 'Rate', 'Discount', 'Message', 'Final Amount']
LINE_COLUMNS = ['Product ID', 'Name', 'Unit Price', 'Quantity', 'Total']


def quote_table(
    amount: Number,
    resolver: Optional[DiscountPolicyResolver] = None,
    tiers: Optional[list] = None,
) -> pd.DataFrame:
    """
    Quote an amount for every tier.

    Args:
        amount: Amount before discount
        resolver: Resolver to quote with (defaults to the polymorphic resolver)
        tiers: Tiers or raw labels to include (defaults to all known tiers)

    Returns:
        DataFrame with one row per tier
    """
    resolver = resolver or PolymorphicTierResolver()
    tiers = list(tiers) if tiers is not None else list(CustomerTier)
    amount = to_decimal(amount)

    rows = []
    for tier in tiers:
        quote = resolver.quote(tier, amount)
        rows.append({
            'Tier': tier.value if isinstance(tier, CustomerTier) else str(tier),
            'Rate': float(resolver.discount_rate(tier)),
            'Discount': float(quote.discount_amount),
            'Message': quote.message,
            'Final Amount': float(quote.final_amount),
        })
    return pd.DataFrame(rows, columns=QUOTE_COLUMNS)


def compare_resolvers(
    amount: Number,
    left: DiscountPolicyResolver,
    right: DiscountPolicyResolver,
    tiers: Optional[list] = None,
) -> pd.DataFrame:
    """Quote with two resolvers and flag rows where they disagree."""
    left_df = quote_table(amount, left, tiers)
    right_df = quote_table(amount, right, tiers)

    merged = left_df.merge(right_df, on='Tier', suffixes=(' (left)', ' (right)'))
    merged['Match'] = (
        (merged['Rate (left)'] == merged['Rate (right)']) &
        (merged['Discount (left)'] == merged['Discount (right)']) &
        (merged['Message (left)'] == merged['Message (right)']) &
        (merged['Final Amount (left)'] == merged['Final Amount (right)'])
    )
    return merged


def order_lines_table(order: Order) -> pd.DataFrame:
    """One row per line item with its extension."""
    rows = [
        {
            'Product ID': item.product_id,
            'Name': item.name,
            'Unit Price': float(item.unit_price),
            'Quantity': item.quantity,
            'Total': float(item.line_total),
        }
        for item in order.items
    ]
    return pd.DataFrame(rows, columns=LINE_COLUMNS)
