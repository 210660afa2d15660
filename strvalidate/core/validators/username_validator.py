"""
UsernameValidator - validates usernames against a configurable rule set.
"""

import logging
from typing import Any

from strvalidate.core.models import LengthMode, UsernameConfig, ValidationResult
from strvalidate.utils.text import (
    codepoint_length,
    display_width,
    is_ascii_digit,
    is_combining_mark,
    is_letter,
)

from .base_validator import BaseValidator

logger = logging.getLogger(__name__)


class UsernameValidator(BaseValidator):
    """
    Validates usernames.

    A username may contain Unicode letters of any script (with the combining
    marks that follow them, such as Indic vowel signs), ASCII digits and,
    when enabled, ".", "-" and "_". Its effective length is the codepoint
    count, or the display width when ``length_mode`` is ``display_width``:
        "中文汉字" -> 4 Han characters, display width 8
        "abcd1234" -> 8 Latin letters and digits, display width 8
    """

    def __init__(self, config: UsernameConfig | None = None):
        super().__init__(config or UsernameConfig())
        self.separators = self.config.allowed_separators

    def _allowed_chars(self, username: str) -> bool:
        # A combining mark is only allowed directly after a letter or another mark.
        after_letter = False
        for char in username:
            if is_letter(char):
                after_letter = True
            elif is_combining_mark(char) and after_letter:
                continue
            elif is_ascii_digit(char) or char in self.separators:
                after_letter = False
            else:
                return False
        return True

    def effective_length(self, username: str) -> int:
        if self.config.length_mode == LengthMode.DISPLAY_WIDTH:
            return display_width(username)
        return codepoint_length(username)

    def check(self, value: Any) -> ValidationResult:
        if not isinstance(value, str) or not value:
            return ValidationResult.fail(self.rule_type)

        if not self._allowed_chars(value):
            logger.debug("Username rejected: disallowed character")
            return ValidationResult.fail(self.rule_type)

        length = self.effective_length(value)
        if length < self.config.min_length or length > self.config.max_length:
            logger.debug(
                "Username rejected: length out of bounds",
                extra={"length": length, "length_mode": self.config.length_mode.value},
            )
            return ValidationResult.fail(self.rule_type)

        return ValidationResult.ok(self.rule_type)

    @property
    def rule_type(self) -> str:
        return "username"
