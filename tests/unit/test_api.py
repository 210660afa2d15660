"""
Unit tests for the functional validation API.
"""

import pytest
from pydantic import ValidationError

import strvalidate
from strvalidate import (
    PasswordConfig,
    PasswordFailure,
    UsernameConfig,
    validate_id_card_no,
    validate_mobile_phone_num,
    validate_password,
    validate_username,
)


class TestFixedPatternFunctions:
    """Tests for validate_id_card_no and validate_mobile_phone_num"""

    def test_id_card_no(self):
        """Test ID card numbers"""
        assert validate_id_card_no("31010419810101400X") is True
        assert validate_id_card_no("310104600101001") is True
        assert validate_id_card_no("31010419810101400Y") is False

    def test_mobile_phone_num(self):
        """Test phone numbers"""
        assert validate_mobile_phone_num("13800138000") is True
        assert validate_mobile_phone_num("10000") is False


class TestValidateUsername:
    """Tests for validate_username"""

    def test_defaults(self):
        """Test default rules"""
        assert validate_username("mio-cat") is True
        assert validate_username("aaaa") is False

    def test_keyword_overrides(self):
        """Test options given as keywords"""
        assert validate_username("aaaa", min_length=4) is True
        assert validate_username("mio-cat", allow_hyphen=False) is False
        assert validate_username("中文汉字", length_mode="display_width") is True

    def test_config_object(self):
        """Test an explicit config"""
        config = UsernameConfig(min_length=8, allow_dot=False)
        assert validate_username("Michael.Learns", config=config) is False
        assert validate_username("13800138000", config) is True

    def test_overrides_applied_on_top_of_config(self):
        """Test keywords override fields of a given config"""
        config = UsernameConfig(min_length=8, allow_dot=False)
        assert validate_username("Mike.Rock", config, allow_dot=True) is True
        assert config.allow_dot is False

    def test_unknown_option(self):
        """Test unrecognized option names raise"""
        with pytest.raises(ValidationError):
            validate_username("mio-cat", no_hyphen=True)


class TestValidatePassword:
    """Tests for validate_password"""

    def test_result_is_truthy_when_valid(self):
        """Test result works in a boolean context"""
        assert validate_password("Password1")
        assert not validate_password("aaa123")

    def test_keyword_overrides(self):
        """Test requirements given as keywords"""
        result = validate_password(
            "Password12",
            min_length=9,
            require_digit=True,
            require_upper=True,
            require_lower=True,
            require_special=True,
        )
        assert result.passed is False
        assert result.reason == PasswordFailure.MISSING_SPECIAL
        assert result.message == "password should have at least one special character"

    def test_config_object(self, strict_password_config):
        """Test an explicit config"""
        assert validate_password("Password2@", strict_password_config).passed is True
        assert validate_password("aaaabbbb", config=strict_password_config).reason \
            == PasswordFailure.INVALID_LENGTH

    def test_overrides_applied_on_top_of_config(self, strict_password_config):
        """Test keywords override fields of a given config"""
        result = validate_password("Password12", strict_password_config, require_special=False)
        assert result.passed is True

    def test_customized_rules(self):
        """Test relaxed rules accept shorter passwords"""
        config = PasswordConfig(min_length=6, require_digit=True, require_lower=True)
        assert validate_password("aaa123", config).passed is True
        assert validate_password("#ABCD1234", config).reason == PasswordFailure.MISSING_LOWER

    def test_max_below_min_is_caller_error(self):
        """Test inconsistent bounds raise rather than silently failing"""
        with pytest.raises(ValidationError):
            validate_password("Password1", min_length=10, max_length=5)

    def test_min_override_above_default_max_is_caller_error(self):
        """Test a min_length override above the default max_length raises"""
        with pytest.raises(ValidationError):
            validate_password("x" * 80, min_length=100)

        with pytest.raises(ValidationError):
            validate_username("a" * 80, min_length=100)

    def test_bytes_input(self):
        """Test bytes are accepted and malformed bytes rejected"""
        assert validate_password(b"Password1").passed is True
        assert validate_password(b"\xffPassword1").reason == PasswordFailure.INVALID_ENCODING


class TestPackageExports:
    """Tests for the package namespace"""

    def test_public_names(self):
        """Test every name in __all__ is importable"""
        for name in strvalidate.__all__:
            assert hasattr(strvalidate, name)
