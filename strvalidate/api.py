"""
Functional validation API.

Each function takes the candidate string plus, for usernames and passwords,
an optional config and/or keyword overrides of individual options:

    >>> validate_mobile_phone_num("13800138000")
    True
    >>> validate_username("mio-cat")
    True
    >>> result = validate_password("Password12", min_length=9, require_special=True)
    >>> result.passed, result.reason.value
    (False, 'missing_special')
"""

from typing import Any

from strvalidate.core.models import PasswordConfig, UsernameConfig, ValidationResult
from strvalidate.core.validators import (
    IDCardValidator,
    MobilePhoneValidator,
    PasswordValidator,
    UsernameValidator,
)

_id_card_validator = IDCardValidator()
_mobile_phone_validator = MobilePhoneValidator()
_default_username_validator = UsernameValidator()
_default_password_validator = PasswordValidator()


def _resolve(model: type, config: Any, options: dict[str, Any]):
    """
    Apply keyword overrides on top of config (or the defaults).

    Raises:
        pydantic.ValidationError: If an option is unknown or the result is inconsistent
    """
    if config is None:
        return model(**options)
    if not options:
        return config
    return model(**{**config.model_dump(), **options})


def validate_id_card_no(id_card_no: str) -> bool:
    """Valid if id_card_no is a 15-digit or 18-digit identity card number."""
    return _id_card_validator.is_valid(id_card_no)


def validate_mobile_phone_num(number: str) -> bool:
    """Valid if number is exactly 11 ASCII digits."""
    return _mobile_phone_validator.is_valid(number)


def validate_username(username: str, config: UsernameConfig | None = None, **options: Any) -> bool:
    """
    Validate a username.

    Args:
        username: username to validate
        config: rule set; defaults to UsernameConfig()
        **options: overrides for min_length (6), max_length (64), allow_dot (True),
                   allow_hyphen (True), allow_underscore (True), length_mode ("codepoints")

    Returns:
        True for valid or False for invalid.
    """
    if config is None and not options:
        return _default_username_validator.is_valid(username)
    return UsernameValidator(_resolve(UsernameConfig, config, options)).is_valid(username)


def validate_password(
    password: str | bytes, config: PasswordConfig | None = None, **options: Any
) -> ValidationResult:
    """
    Validate a password.

    Args:
        password: password to validate, as str or UTF-8 bytes
        config: rule set; defaults to PasswordConfig()
        **options: overrides for min_length (8), max_length (64), require_digit (False),
                   require_upper (False), require_lower (False), require_special (False)

    Returns:
        ValidationResult that is truthy when valid; on failure ``reason`` holds
        the first failed check.
    """
    if config is None and not options:
        return _default_password_validator.check(password)
    return PasswordValidator(_resolve(PasswordConfig, config, options)).check(password)
