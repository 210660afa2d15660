"""
ValidationResult model representing the outcome of validating one candidate string.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator


class PasswordFailure(str, Enum):
    """
    Reason a password was rejected.

    Only the first failing check is reported, in this order: encoding,
    length, digit, upper, lower, special.
    """

    INVALID_ENCODING = "invalid_encoding"
    INVALID_LENGTH = "invalid_length"
    MISSING_DIGIT = "missing_digit"
    MISSING_UPPER = "missing_upper"
    MISSING_LOWER = "missing_lower"
    MISSING_SPECIAL = "missing_special"

    @property
    def message(self) -> str:
        return FAILURE_MESSAGES[self]


FAILURE_MESSAGES = {
    PasswordFailure.INVALID_ENCODING: "password consists of invalid UTF-8 text",
    PasswordFailure.INVALID_LENGTH: "invalid password length",
    PasswordFailure.MISSING_DIGIT: "password should have at least one number",
    PasswordFailure.MISSING_UPPER: "password should have at least one upper-case letter",
    PasswordFailure.MISSING_LOWER: "password should have at least one lower-case letter",
    PasswordFailure.MISSING_SPECIAL: "password should have at least one special character",
}


class ValidationResult(BaseModel):
    """
    Outcome of validating a single value (ephemeral, never persisted).

    A result is truthy exactly when it passed, so it can be used directly
    in a boolean context.

    Attributes:
        rule_type: Which validator produced the result ("password", "username", ...)
        passed: Overall validation status
        reason: First failing check; only password validation reports one
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "rule_type": "password",
                "passed": False,
                "reason": "missing_special",
            }
        },
    )

    rule_type: str
    passed: bool
    reason: PasswordFailure | None = None

    @field_validator("reason")
    @classmethod
    def check_passed_consistency(cls, v, info):
        """Validate that passed=True implies there is no failure reason."""
        if info.data.get("passed") and v is not None:
            raise ValueError("passed=True but a failure reason is set")
        return v

    @property
    def message(self) -> str:
        """Human-readable failure message, empty when the value passed."""
        if self.reason is None:
            return ""
        return self.reason.message

    def __bool__(self) -> bool:
        return self.passed

    @classmethod
    def ok(cls, rule_type: str) -> "ValidationResult":
        return cls(rule_type=rule_type, passed=True)

    @classmethod
    def fail(cls, rule_type: str, reason: PasswordFailure | None = None) -> "ValidationResult":
        return cls(rule_type=rule_type, passed=False, reason=reason)
