"""
Unit tests for logging setup.
"""

import io
import json
import logging

from strvalidate.api import validate_password
from strvalidate.observability.logger import resolve_level, setup_logger


class TestSetupLogger:
    """Tests for setup_logger"""

    def test_json_format(self):
        """Test JSON output carries the context fields"""
        stream = io.StringIO()
        logger = setup_logger("strvalidate.test.json", level="INFO", stream=stream)

        logger.info("hello", extra={"kind": "password"})

        record = json.loads(stream.getvalue().strip())
        assert record["message"] == "hello"
        assert record["level"] == "INFO"
        assert record["logger"] == "strvalidate.test.json"
        assert record["kind"] == "password"
        assert "timestamp" in record

    def test_text_format(self):
        """Test text output for local development"""
        stream = io.StringIO()
        logger = setup_logger("strvalidate.test.text", level="INFO", format_type="text", stream=stream)

        logger.info("hello")

        assert " - strvalidate.test.text - INFO - hello" in stream.getvalue()

    def test_level_filters(self):
        """Test messages below the level are dropped"""
        stream = io.StringIO()
        logger = setup_logger("strvalidate.test.level", level="WARNING", stream=stream)

        logger.info("hidden")

        assert stream.getvalue() == ""

    def test_no_duplicate_handlers(self):
        """Test repeated setup replaces the handler"""
        setup_logger("strvalidate.test.dupes", stream=io.StringIO())
        logger = setup_logger("strvalidate.test.dupes", stream=io.StringIO())
        assert len(logger.handlers) == 1
        assert logger.propagate is False


class TestResolveLevel:
    """Tests for resolve_level"""

    def test_explicit_level(self):
        """Test explicit level name wins"""
        assert resolve_level("debug") == logging.DEBUG

    def test_environment_level(self, monkeypatch):
        """Test LOG_LEVEL environment variable is used"""
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert resolve_level() == logging.ERROR

    def test_unknown_level_defaults_to_info(self, monkeypatch):
        """Test unknown names fall back to INFO"""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert resolve_level("verbose") == logging.INFO


class TestLibraryLogging:
    """Tests for log output of the validators"""

    def test_password_never_logged(self):
        """Test rejected passwords log their reason but not their value"""
        stream = io.StringIO()
        setup_logger("strvalidate", level="DEBUG", stream=stream)

        validate_password("SecretPass", require_digit=True)

        output = stream.getvalue()
        assert "missing_digit" in output
        assert "SecretPass" not in output
