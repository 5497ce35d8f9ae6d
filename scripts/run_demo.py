"""
Walk through each code smell and its refactoring on sample data.
"""
import sys
from datetime import date
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from order_pricing.engine import OrderPricingPipeline, Customer, CustomerTier, LineItem, Order
from order_pricing.legacy import customer_types, user_factory
from order_pricing.legacy.order_processor import LongMethodOrderProcessor
from order_pricing.policy import PolymorphicTierResolver, TierTableResolver
from order_pricing.reporting.tables import compare_resolvers, order_lines_table, quote_table
from order_pricing.services.user_service import Address, UserRegistration, UserService

SEPARATOR = "\n" + "=" * 50 + "\n"


def show_order(label: str, order: Order):
    print(f"{label}:")
    print(f"Order: {order.order_id} for {order.customer.name}")
    print(f"Total: ${order.total}")
    print(f"Status: {order.status.value}")


def demo_long_method():
    print("🐛 LONG METHOD CODE SMELL")
    customer = Customer("C001", "John Doe", "john@example.com", premium=True)
    order = Order("O001", customer)
    order.add_item(LineItem("P001", "Laptop", "999.99", 1))
    order.add_item(LineItem("P002", "Mouse", "29.99", 2))

    show_order("Before processing", order)
    LongMethodOrderProcessor().process_order(order)
    show_order("\nAfter processing", order)


def demo_long_method_refactored():
    print("✅ LONG METHOD REFACTORED")
    customer = Customer("C002", "Jane Smith", "jane@example.com", premium=True)
    order = Order("O002", customer)
    order.add_item(LineItem("P003", "Monitor", "299.99", 1))
    order.add_item(LineItem("P004", "Keyboard", "89.99", 1))

    print(order_lines_table(order).to_string(index=False))
    show_order("\nBefore processing", order)
    OrderPricingPipeline().process(order)
    show_order("\nAfter processing", order)
    print("\nTrace:")
    print(order.get_trace_text())


def demo_switch_statements():
    print("🐛 SWITCH STATEMENTS CODE SMELL")
    for customer_type, amount in (("REGULAR", 100.0), ("PREMIUM", 200.0), ("VIP", 300.0)):
        print(f"\nProcessing {customer_type.title()} Customer:")
        customer_types.process_customer(customer_type, amount)


def demo_switch_statements_refactored():
    print("✅ SWITCH STATEMENTS REFACTORED")
    resolver = PolymorphicTierResolver()
    customers = [
        (Customer("C101", "John Doe", "john@example.com", tier=CustomerTier.REGULAR), 100),
        (Customer("C102", "Jane Smith", "jane@example.com", tier=CustomerTier.PREMIUM), 200),
        (Customer("C103", "Bob Wilson", "bob@example.com", tier=CustomerTier.VIP), 300),
    ]
    for customer, amount in customers:
        print(f"\nProcessing {customer.tier.value.title()} Customer:")
        quote = resolver.quote(customer.tier, amount)
        handler = resolver.handler_for(customer.tier)
        print(f"Customer Type: {type(handler).__name__}")
        print(f"Customer Name: {customer.name}")
        print(f"Amount: ${amount}")
        print(f"Discount: ${quote.discount_amount}")
        print(f"Message: {quote.message}")
        print(f"Final Amount: ${quote.final_amount}")

    print("\nAll tiers at $150:")
    print(quote_table(150, resolver).to_string(index=False))
    print("\nTable vs handler dispatch:")
    comparison = compare_resolvers(150, TierTableResolver(), resolver)
    print(comparison[['Tier', 'Match']].to_string(index=False))


def demo_long_parameter_list():
    print("🐛 LONG PARAMETER LIST CODE SMELL")
    print("Creating user with 12 parameters:")
    user_factory.create_user(
        "Alice", "Johnson", "alice@example.com", "555-123-4567",
        "123 Main St", "New York", "NY", "10001", "USA",
        date(1990, 5, 15), "password123", True,
    )
    print("\nUpdating user profile with 10 parameters:")
    user_factory.update_user_profile(
        1, "Alice", "Johnson", "alice@example.com", "555-123-4567",
        "123 Main St", "New York", "NY", "10001", "USA",
    )


def demo_long_parameter_list_refactored():
    print("✅ LONG PARAMETER LIST REFACTORED")
    print("Creating user with parameter object:")
    address = Address(street="456 Oak Ave", city="Los Angeles", state="CA", zip_code="90210", country="USA")
    registration = UserRegistration(
        first_name="Bob",
        last_name="Wilson",
        email="bob@example.com",
        phone_number="555-987-6543",
        address=address,
        date_of_birth=date(1985, 8, 20),
        password="password456",
        active=False,
    )
    service = UserService()
    service.create_user(registration)
    print("\nUpdating user profile with parameter object:")
    service.update_user_profile(2, registration)


def main():
    print("🧹 Clean Code Examples")
    print("======================\n")

    demos = [
        demo_long_method,
        demo_long_method_refactored,
        demo_switch_statements,
        demo_switch_statements_refactored,
        demo_long_parameter_list,
        demo_long_parameter_list_refactored,
    ]
    for demo in demos:
        demo()
        print(SEPARATOR)


if __name__ == "__main__":
    main()
