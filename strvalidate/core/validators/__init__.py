"""
Validator implementations.

Provides fixed-pattern validators for identity card and mobile phone
numbers, and configurable validators for usernames and passwords.
"""

from .base_validator import BaseValidator, ValidationError
from .id_card_validator import IDCardValidator
from .password_validator import PasswordValidator
from .phone_validator import MobilePhoneValidator
from .regex_validator import RegexValidator
from .username_validator import UsernameValidator

__all__ = [
    "BaseValidator",
    "ValidationError",
    "RegexValidator",
    "IDCardValidator",
    "MobilePhoneValidator",
    "UsernameValidator",
    "PasswordValidator",
]
