"""
Centralized settings for the order pricing package.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class Settings:
    """Pricing policy constants with sensible defaults."""

    # Bulk order rule: orders above the threshold get the bulk discount
    bulk_threshold: Decimal = Decimal("100.00")
    bulk_discount_rate: Decimal = Decimal("0.05")

    # Decimal places used when presenting money values
    money_places: int = 2

    # Print progress and notification messages
    verbose: bool = True

    @classmethod
    def load(cls, verbose: bool = True) -> 'Settings':
        """Build the default settings."""
        return cls(verbose=verbose)


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings
