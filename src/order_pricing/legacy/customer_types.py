"""
Switch Statements version of the tier discount rules.

Every function branches on the raw customer type string, so adding a
tier means editing each of them. See policy/discount_policy.py for the
polymorphic replacement.
"""


def calculate_discount(customer_type: str, amount: float) -> float:
    if customer_type == "REGULAR":
        return amount * 0.05  # 5% discount
    elif customer_type == "PREMIUM":
        return amount * 0.10  # 10% discount
    elif customer_type == "VIP":
        return amount * 0.15  # 15% discount
    else:
        return 0.0


def get_welcome_message(customer_type: str) -> str:
    if customer_type == "REGULAR":
        return "Welcome! Enjoy your shopping."
    elif customer_type == "PREMIUM":
        return "Welcome back! You have premium benefits."
    elif customer_type == "VIP":
        return "Welcome VIP! Exclusive offers await you."
    else:
        return "Welcome!"


def process_customer(customer_type: str, amount: float) -> float:
    """Print a discount summary and return the final amount."""
    discount = calculate_discount(customer_type, amount)
    message = get_welcome_message(customer_type)

    print(f"Customer Type: {customer_type}")
    print(f"Amount: ${amount}")
    print(f"Discount: ${discount}")
    print(f"Message: {message}")
    print(f"Final Amount: ${amount - discount}")
    return amount - discount
