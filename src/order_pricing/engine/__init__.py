"""Engine subpackage - order model and pricing pipeline."""
from .pricing_pipeline import OrderPricingPipeline, InvalidOrderError
from .models import Customer, CustomerTier, LineItem, Order, OrderStatus

__all__ = [
    'OrderPricingPipeline', 'InvalidOrderError',
    'Customer', 'CustomerTier', 'LineItem', 'Order', 'OrderStatus',
]
