"""
Data models for string validation.

All models use Pydantic for runtime validation and are frozen once built.
"""

from .password_config import PasswordConfig
from .username_config import LengthMode, UsernameConfig
from .validation_result import FAILURE_MESSAGES, PasswordFailure, ValidationResult

__all__ = [
    "PasswordConfig",
    "UsernameConfig",
    "LengthMode",
    "ValidationResult",
    "PasswordFailure",
    "FAILURE_MESSAGES",
]
