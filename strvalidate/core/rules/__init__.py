"""
Validation engine and rule configuration management.
"""

from .rule_config import PasswordConfigBuilder, RuleConfigLoader, UsernameConfigBuilder
from .rule_engine import StringValidator

__all__ = [
    "StringValidator",
    "RuleConfigLoader",
    "PasswordConfigBuilder",
    "UsernameConfigBuilder",
]
