"""
strvalidate: validators for ID card numbers, mobile phone numbers,
usernames and passwords.
"""

from strvalidate.api import (
    validate_id_card_no,
    validate_mobile_phone_num,
    validate_password,
    validate_username,
)
from strvalidate.core.models import (
    LengthMode,
    PasswordConfig,
    PasswordFailure,
    UsernameConfig,
    ValidationResult,
)
from strvalidate.core.rules import (
    PasswordConfigBuilder,
    RuleConfigLoader,
    StringValidator,
    UsernameConfigBuilder,
)
from strvalidate.core.validators import ValidationError

__version__ = "0.1.0"

__all__ = [
    "validate_id_card_no",
    "validate_mobile_phone_num",
    "validate_username",
    "validate_password",
    "PasswordConfig",
    "UsernameConfig",
    "LengthMode",
    "PasswordFailure",
    "ValidationResult",
    "ValidationError",
    "StringValidator",
    "RuleConfigLoader",
    "PasswordConfigBuilder",
    "UsernameConfigBuilder",
]
