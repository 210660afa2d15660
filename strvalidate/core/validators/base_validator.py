"""
Base validator interface for all string validators.

All validators inherit from BaseValidator and implement check().
"""

from abc import ABC, abstractmethod
from typing import Any

from strvalidate.core.models import PasswordFailure, ValidationResult


class ValidationError(ValueError):
    """Raised by BaseValidator.ensure() when a value is rejected."""

    def __init__(self, rule_type: str, reason: PasswordFailure | None = None, message: str | None = None):
        self.rule_type = rule_type
        self.reason = reason
        self.message = message or (reason.message if reason else f"invalid {rule_type}")
        super().__init__(f"[{rule_type}] {self.message}")


class BaseValidator(ABC):
    """
    Abstract base class for all validators.

    Validators are stateless apart from their immutable configuration, so a
    single instance can be shared between threads.
    """

    def __init__(self, config: Any = None):
        """
        Initialize validator.

        Args:
            config: Frozen configuration model, or None for fixed-rule validators
        """
        self.config = config

    @abstractmethod
    def check(self, value: Any) -> ValidationResult:
        """
        Validate a value against this rule set.

        Args:
            value: The candidate string

        Returns:
            ValidationResult; never raises for bad input
        """
        pass

    @property
    @abstractmethod
    def rule_type(self) -> str:
        """Return the rule type identifier."""
        pass

    def is_valid(self, value: Any) -> bool:
        return self.check(value).passed

    def ensure(self, value: Any) -> Any:
        """
        Return value unchanged if it is valid, otherwise raise.

        Meant for use inside pydantic field validators, where a ValueError
        becomes a field error.

        Raises:
            ValidationError: If the value is rejected
        """
        result = self.check(value)
        if not result.passed:
            raise ValidationError(self.rule_type, result.reason)
        return value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(config={self.config!r})"
