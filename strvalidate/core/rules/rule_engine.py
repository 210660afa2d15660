"""
Rule engine dispatching candidate strings to the validator for their domain.

The engine owns one validator per domain, built once from immutable
configuration, and produces a ValidationResult for every value.
"""

import logging
from pathlib import Path
from typing import Any, Iterable

from strvalidate.core.models import PasswordConfig, UsernameConfig, ValidationResult
from strvalidate.core.validators import (
    BaseValidator,
    IDCardValidator,
    MobilePhoneValidator,
    PasswordValidator,
    UsernameValidator,
)

from .rule_config import RuleConfigLoader

logger = logging.getLogger(__name__)


class StringValidator:
    """
    Stateless evaluator for all validation domains.

    Domains:
        id_card: 15- or 18-digit identity card number
        mobile_phone: 11-digit mobile phone number
        username: configurable via UsernameConfig
        password: configurable via PasswordConfig
    """

    def __init__(
        self,
        password_config: PasswordConfig | None = None,
        username_config: UsernameConfig | None = None,
    ):
        """
        Initialize the engine.

        Args:
            password_config: Password rule set (defaults when None)
            username_config: Username rule set (defaults when None)
        """
        self.password_config = password_config or PasswordConfig()
        self.username_config = username_config or UsernameConfig()
        self.validators: dict[str, BaseValidator] = {}
        self._build_validators()

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> "StringValidator":
        """Create an engine from a YAML rule file (see RuleConfigLoader)."""
        password_config, username_config = RuleConfigLoader(config_path).load()
        logger.debug(f"Loaded validation rules from {config_path}")
        return cls(password_config=password_config, username_config=username_config)

    def _build_validators(self) -> None:
        """Build one validator instance per domain."""
        for validator in (
            IDCardValidator(),
            MobilePhoneValidator(),
            UsernameValidator(self.username_config),
            PasswordValidator(self.password_config),
        ):
            self.validators[validator.rule_type] = validator

    def get_validator(self, kind: str) -> BaseValidator:
        """
        Look up the validator for a domain.

        Raises:
            ValueError: If the domain is unknown
        """
        validator = self.validators.get(kind)
        if validator is None:
            raise ValueError(
                f"Unknown validation kind: {kind}. Expected one of: {', '.join(self.validators)}"
            )
        return validator

    def validate(self, kind: str, value: Any) -> ValidationResult:
        """
        Validate a single value.

        Args:
            kind: Domain name (id_card, mobile_phone, username, password)
            value: Candidate string

        Returns:
            ValidationResult for the value
        """
        result = self.get_validator(kind).check(value)
        logger.debug(
            "Validated value",
            extra={
                "kind": kind,
                "passed": result.passed,
                "reason": result.reason.value if result.reason else None,
            },
        )
        return result

    def validate_batch(self, kind: str, values: Iterable[Any]) -> list[ValidationResult]:
        """
        Validate many values for the same domain.

        Returns:
            List of ValidationResult objects, one per value, in input order
        """
        validator = self.get_validator(kind)
        return [validator.check(value) for value in values]

    def get_rule_summary(self) -> dict[str, Any]:
        """
        Get summary of registered domains and their rule sets.

        Returns:
            Dictionary with domain names and effective configuration
        """
        return {
            "kinds": list(self.validators),
            "password": self.password_config.model_dump(),
            "username": self.username_config.model_dump(mode="json"),
        }
