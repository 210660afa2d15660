"""
Pytest configuration and fixtures for strvalidate tests

This module provides shared fixtures for unit and integration tests.
"""
import pytest

from strvalidate.core.models import PasswordConfig


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual validators and models"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that exercise the engine, YAML loading or CLI together"
    )


# =======================
# CONFIGURATION FIXTURES
# =======================

@pytest.fixture
def strict_password_config() -> PasswordConfig:
    """
    Password rule set with every character-class requirement enabled

    Returns:
        PasswordConfig with min_length=9 and all four requirements on
    """
    return PasswordConfig(
        min_length=9,
        require_digit=True,
        require_upper=True,
        require_lower=True,
        require_special=True,
    )


@pytest.fixture
def rules_file(tmp_path):
    """
    Write a YAML rule file and return a factory producing its path

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Callable taking YAML text and returning the written file's path
    """
    def _write(content: str, name: str = "rules.yaml"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
