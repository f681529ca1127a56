"""
Tests for logging configuration
"""
import io
import json
import logging

import pytest
from pythonjsonlogger.json import JsonFormatter

from escalator.logging_config import ContextAdapter, get_logger, setup_structured_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Put the root logger back the way pytest left it"""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestSetupStructuredLogging:
    """Test root logger setup"""

    def test_json_output(self):
        """Test JSON lines carry renamed and static fields"""
        stream = io.StringIO()
        setup_structured_logging("INFO", log_format="json", extra_fields={"component": "escalator"},
                                 stream=stream)

        logging.getLogger("escalator.test").info("escalated")

        record = json.loads(stream.getvalue().strip())
        assert record["message"] == "escalated"
        assert record["level"] == "INFO"
        assert record["name"] == "escalator.test"
        assert record["component"] == "escalator"
        assert "timestamp" in record

    def test_json_formatter_without_deprecation(self, recwarn):
        """Test JSON output uses the current python-json-logger module"""
        root = setup_structured_logging("INFO", log_format="json", stream=io.StringIO())

        assert isinstance(root.handlers[0].formatter, JsonFormatter)
        assert not [w for w in recwarn if issubclass(w.category, DeprecationWarning)]

    def test_text_output(self):
        """Test plain text format"""
        stream = io.StringIO()
        setup_structured_logging("DEBUG", log_format="text", stream=stream)

        logging.getLogger("escalator.test").debug("plain")

        assert " - escalator.test - DEBUG - plain" in stream.getvalue()

    def test_level_filters(self):
        """Test records below the level are dropped"""
        stream = io.StringIO()
        root = setup_structured_logging("WARNING", json_format=False, stream=stream)

        logging.getLogger("escalator.test").info("hidden")

        assert root.level == logging.WARNING
        assert stream.getvalue() == ""

    def test_replaces_handlers(self):
        """Test repeated setup leaves a single handler"""
        setup_structured_logging("INFO", stream=io.StringIO())
        root = setup_structured_logging("INFO", stream=io.StringIO())

        assert len(root.handlers) == 1


class TestGetLogger:
    """Test context loggers"""

    def test_plain_logger(self):
        assert isinstance(get_logger("escalator.test"), logging.Logger)

    def test_context_adapter(self):
        """Test context is merged into each record"""
        stream = io.StringIO()
        setup_structured_logging("INFO", log_format="json", stream=stream)

        logger = get_logger("escalator.test", {"platform": "AWS"})
        logger.info("escalated")

        assert isinstance(logger, ContextAdapter)
        assert json.loads(stream.getvalue().strip())["platform"] == "AWS"
