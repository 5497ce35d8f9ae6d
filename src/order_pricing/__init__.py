"""
Order Pricing Package

Code smell samples paired with their refactorings over a small order domain.
Prices orders using Validate → Total → Discount → Commit pipeline with tier-based discounts.
"""

__version__ = "1.0.0"
