"""
Long Parameter List version of user creation.

create_user takes twelve positional values whose order callers must get
right. services/user_service.py groups them into parameter objects.
"""
import re
from datetime import date
from typing import Optional

from ..services.user_service import EMAIL_PATTERN, User


def _required(value: Optional[str], message: str):
    if value is None or not value.strip():
        raise ValueError(message)


def create_user(
    first_name: str,
    last_name: str,
    email: str,
    phone_number: str,
    address: str,
    city: str,
    state: str,
    zip_code: str,
    country: str,
    date_of_birth: date,
    password: str,
    is_active: bool,
    verbose: bool = True,
) -> User:
    # Validate all parameters
    _required(first_name, "First name is required")
    _required(last_name, "Last name is required")
    if email is None or not re.match(EMAIL_PATTERN, email):
        raise ValueError("Valid email is required")
    _required(phone_number, "Phone number is required")
    _required(address, "Address is required")
    _required(city, "City is required")
    _required(state, "State is required")
    _required(zip_code, "Zip code is required")
    _required(country, "Country is required")
    if date_of_birth is None:
        raise ValueError("Date of birth is required")
    if password is None or len(password) < 8:
        raise ValueError("Password must be at least 8 characters")

    # Create user object
    user = User(
        first_name=first_name,
        last_name=last_name,
        email=email,
        phone_number=phone_number,
        address=address,
        city=city,
        state=state,
        zip_code=zip_code,
        country=country,
        date_of_birth=date_of_birth,
        password=password,
        active=is_active,
    )

    # Simulate saving to database
    if verbose:
        print(f"User created: {user.first_name} {user.last_name}")

    return user


def update_user_profile(
    user_id: int,
    first_name: str,
    last_name: str,
    email: str,
    phone_number: str,
    address: str,
    city: str,
    state: str,
    zip_code: str,
    country: str,
) -> list[str]:
    """Print and return the profile summary lines."""
    lines = [
        f"Updating user profile for ID: {user_id}",
        f"Name: {first_name} {last_name}",
        f"Email: {email}",
        f"Address: {address}, {city}, {state} {zip_code}, {country}",
    ]
    for line in lines:
        print(line)
    return lines
