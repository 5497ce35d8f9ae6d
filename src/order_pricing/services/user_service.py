"""
User Service - Builds user records from registration parameter objects.

Replaces the twelve-argument create_user in legacy/user_factory.py:
related values travel together in Address and UserRegistration, and
validation lives on the models.
"""
from dataclasses import dataclass
from datetime import date
from typing import Optional
import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..config.settings import get_settings


EMAIL_PATTERN = r"^[A-Za-z0-9+_.-]+@(.+)$"
MIN_PASSWORD_LENGTH = 8


@dataclass
class User:
    """Flat user record."""
    first_name: str
    last_name: str
    email: str
    phone_number: str
    address: str
    city: str
    state: str
    zip_code: str
    country: str
    date_of_birth: date
    password: str
    active: bool = True
    user_id: Optional[int] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Address(BaseModel):
    """Postal address parameter object."""
    model_config = ConfigDict(frozen=True)

    street: str
    city: str
    state: str
    zip_code: str
    country: str

    def __str__(self) -> str:
        return f"{self.street}, {self.city}, {self.state} {self.zip_code}, {self.country}"


class UserRegistration(BaseModel):
    """Registration parameter object."""
    model_config = ConfigDict(frozen=True)

    first_name: Optional[str] = Field(default=None, validate_default=True)
    last_name: Optional[str] = Field(default=None, validate_default=True)
    email: Optional[str] = Field(default=None, validate_default=True)
    phone_number: Optional[str] = Field(default=None, validate_default=True)
    address: Optional[Address] = Field(default=None, validate_default=True)
    date_of_birth: Optional[date] = Field(default=None, validate_default=True)
    password: Optional[str] = Field(default=None, validate_default=True)
    active: bool = True

    @field_validator('first_name', 'last_name', 'phone_number')
    @classmethod
    def _not_blank(cls, value, info):
        if value is None or not value.strip():
            label = info.field_name.replace('_', ' ').capitalize()
            raise ValueError(f"{label} is required")
        return value

    @field_validator('email')
    @classmethod
    def _valid_email(cls, value):
        if value is None or not re.match(EMAIL_PATTERN, value):
            raise ValueError("Valid email is required")
        return value

    @field_validator('address', 'date_of_birth')
    @classmethod
    def _present(cls, value, info):
        if value is None:
            label = info.field_name.replace('_', ' ').capitalize()
            raise ValueError(f"{label} is required")
        return value

    @field_validator('password')
    @classmethod
    def _password_length(cls, value):
        if value is None or len(value) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        return value

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class UserService:
    """Creates and updates user records from registration data."""

    def __init__(self, verbose: Optional[bool] = None):
        self.verbose = get_settings().verbose if verbose is None else verbose

    def create_user(self, registration: UserRegistration) -> User:
        """Build a user record from a validated registration."""
        user = self._build_user(registration)
        if self.verbose:
            print(f"User created: {user.full_name}")
        return user

    def update_user_profile(self, user_id: int, profile: UserRegistration) -> User:
        """Build the updated record for an existing user id."""
        user = self._build_user(profile, user_id=user_id)
        if self.verbose:
            print(f"Updating user profile for ID: {user_id}")
            print(f"Name: {profile.full_name}")
            print(f"Email: {profile.email}")
            print(f"Address: {profile.address}")
        return user

    def _build_user(self, data: UserRegistration, user_id: Optional[int] = None) -> User:
        address = data.address
        return User(
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            phone_number=data.phone_number,
            address=address.street,
            city=address.city,
            state=address.state,
            zip_code=address.zip_code,
            country=address.country,
            date_of_birth=data.date_of_birth,
            password=data.password,
            active=data.active,
            user_id=user_id,
        )
