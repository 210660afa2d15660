"""
RegexValidator - validates values against one or more regular expressions.
"""

import re
from re import Pattern
from typing import Any

from strvalidate.core.models import ValidationResult

from .base_validator import BaseValidator


class RegexValidator(BaseValidator):
    """
    Validates that a value fully matches at least one of a list of patterns.

    Patterns are tried in order and the first full match wins. Non-string
    values never match.
    """

    def __init__(self, patterns: list[str | Pattern], flags: int = 0, rule_type: str = "regex"):
        super().__init__()

        if not patterns:
            raise ValueError("RegexValidator requires at least one pattern")

        self._rule_type = rule_type
        self.patterns: list[Pattern] = []
        for pattern in patterns:
            try:
                if isinstance(pattern, str):
                    self.patterns.append(re.compile(pattern, flags))
                elif isinstance(pattern, Pattern):
                    self.patterns.append(pattern)
                else:
                    raise ValueError(f"Pattern must be string or compiled Pattern, got {type(pattern)}")
            except re.error as e:
                raise ValueError(f"Invalid regex pattern: {e}")

    def matches(self, value: Any) -> bool:
        if not isinstance(value, str):
            return False
        return any(pattern.fullmatch(value) for pattern in self.patterns)

    def check(self, value: Any) -> ValidationResult:
        if self.matches(value):
            return ValidationResult.ok(self.rule_type)
        return ValidationResult.fail(self.rule_type)

    @property
    def rule_type(self) -> str:
        return self._rule_type

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(patterns={[p.pattern for p in self.patterns]})"
