"""
PasswordValidator - validates passwords and reports the first failed rule.
"""

import logging
from typing import Any

from strvalidate.core.models import PasswordConfig, PasswordFailure, ValidationResult
from strvalidate.utils.text import classify, codepoint_length, decode_utf8

from .base_validator import BaseValidator

logger = logging.getLogger(__name__)


class PasswordValidator(BaseValidator):
    """
    Validates passwords.

    Checks run in a fixed order and stop at the first failure:

    1. encoding: bytes must be valid UTF-8, str must hold no surrogates
    2. length: codepoint count within [min_length, max_length]
    3. required classes, in order digit, upper, lower, special

    Character classes are collected in one pass over the password, whether
    or not the corresponding requirement is enabled.
    """

    def __init__(self, config: PasswordConfig | None = None):
        super().__init__(config or PasswordConfig())

    def check(self, value: Any) -> ValidationResult:
        if not isinstance(value, (str, bytes)):
            return self._fail(PasswordFailure.INVALID_ENCODING)

        password = decode_utf8(value)
        if password is None:
            return self._fail(PasswordFailure.INVALID_ENCODING)

        length = codepoint_length(password)
        if length < self.config.min_length or length > self.config.max_length:
            return self._fail(PasswordFailure.INVALID_LENGTH)

        classes = classify(password)
        requirements = (
            (self.config.require_digit, classes.has_digit, PasswordFailure.MISSING_DIGIT),
            (self.config.require_upper, classes.has_upper, PasswordFailure.MISSING_UPPER),
            (self.config.require_lower, classes.has_lower, PasswordFailure.MISSING_LOWER),
            (self.config.require_special, classes.has_special, PasswordFailure.MISSING_SPECIAL),
        )
        for required, present, reason in requirements:
            if required and not present:
                return self._fail(reason)

        return ValidationResult.ok(self.rule_type)

    def _fail(self, reason: PasswordFailure) -> ValidationResult:
        # Never log the password itself.
        logger.debug("Password rejected", extra={"reason": reason.value})
        return ValidationResult.fail(self.rule_type, reason)

    @property
    def rule_type(self) -> str:
        return "password"
