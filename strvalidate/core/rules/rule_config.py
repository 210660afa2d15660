"""
Rule configuration management.

Loads password and username rule sets from YAML files and provides
fluent builders for constructing them in code.
"""

from pathlib import Path
from typing import Any

import yaml

from strvalidate.core.models import LengthMode, PasswordConfig, UsernameConfig

KNOWN_SECTIONS = {
    "password": PasswordConfig,
    "username": UsernameConfig,
}


class RuleConfigLoader:
    """
    Loads validation rule sets from YAML configuration files.

    Expected YAML format (both sections optional):
    ```yaml
    password:
      min_length: 9
      require_digit: true
      require_special: true

    username:
      min_length: 4
      allow_dot: false
      length_mode: display_width
    ```
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the rule config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Rule configuration file not found: {config_path}")

    def load_raw(self) -> dict[str, dict[str, Any]]:
        """
        Read the YAML file and return its sections as plain dictionaries.

        Raises:
            ValueError: If the file is not valid YAML, not a mapping or has unknown sections
        """
        with open(self.config_path, encoding="utf-8") as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {self.config_path}: {e}")

        if config is None:
            return {}

        if not isinstance(config, dict):
            raise ValueError("Configuration file must contain a mapping at the top level")

        unknown = set(config) - set(KNOWN_SECTIONS)
        if unknown:
            raise ValueError(f"Unknown configuration section(s): {', '.join(sorted(unknown))}")

        sections = {}
        for name, options in config.items():
            if options is None:
                options = {}
            if not isinstance(options, dict):
                raise ValueError(f"Section '{name}' must be a mapping of option names to values")
            sections[name] = options
        return sections

    def load(self) -> tuple[PasswordConfig, UsernameConfig]:
        """
        Load both rule sets from a single read of the file.

        Raises:
            pydantic.ValidationError: If a section holds an unknown option or bad value
        """
        sections = self.load_raw()
        return (
            PasswordConfig(**sections.get("password", {})),
            UsernameConfig(**sections.get("username", {})),
        )


class PasswordConfigBuilder:
    """
    Programmatically build a PasswordConfig.

    Usage:
        config = PasswordConfigBuilder().min_length(9).require_digit().require_special().build()
    """

    def __init__(self):
        self.options: dict[str, Any] = {}

    def min_length(self, length: int) -> "PasswordConfigBuilder":
        self.options["min_length"] = length
        return self

    def max_length(self, length: int) -> "PasswordConfigBuilder":
        self.options["max_length"] = length
        return self

    def require_digit(self, flag: bool = True) -> "PasswordConfigBuilder":
        self.options["require_digit"] = flag
        return self

    def require_upper(self, flag: bool = True) -> "PasswordConfigBuilder":
        self.options["require_upper"] = flag
        return self

    def require_lower(self, flag: bool = True) -> "PasswordConfigBuilder":
        self.options["require_lower"] = flag
        return self

    def require_special(self, flag: bool = True) -> "PasswordConfigBuilder":
        """At least one symbol or punctuation character."""
        self.options["require_special"] = flag
        return self

    def require_all(self) -> "PasswordConfigBuilder":
        """Enable all four character-class requirements."""
        return self.require_digit().require_upper().require_lower().require_special()

    def build(self) -> PasswordConfig:
        """Build and return the frozen configuration."""
        return PasswordConfig(**self.options)


class UsernameConfigBuilder:
    """
    Programmatically build a UsernameConfig.

    Usage:
        config = UsernameConfigBuilder().min_length(8).allow_dot(False).build()
    """

    def __init__(self):
        self.options: dict[str, Any] = {}

    def min_length(self, length: int) -> "UsernameConfigBuilder":
        self.options["min_length"] = length
        return self

    def max_length(self, length: int) -> "UsernameConfigBuilder":
        self.options["max_length"] = length
        return self

    def allow_dot(self, flag: bool = True) -> "UsernameConfigBuilder":
        self.options["allow_dot"] = flag
        return self

    def allow_hyphen(self, flag: bool = True) -> "UsernameConfigBuilder":
        self.options["allow_hyphen"] = flag
        return self

    def allow_underscore(self, flag: bool = True) -> "UsernameConfigBuilder":
        self.options["allow_underscore"] = flag
        return self

    def length_mode(self, mode: LengthMode | str) -> "UsernameConfigBuilder":
        self.options["length_mode"] = mode
        return self

    def build(self) -> UsernameConfig:
        """Build and return the frozen configuration."""
        return UsernameConfig(**self.options)
