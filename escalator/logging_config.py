"""
Structured Logging Configuration
JSON logging for escalation runs inside CI and test harnesses
"""

import logging
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

JSON_FORMATS = ("json", "structured")


def setup_structured_logging(
    log_level: str = "INFO",
    json_format: Optional[bool] = None,
    log_format: str = "json",
    extra_fields: Optional[dict] = None,
    stream=None,
) -> logging.Logger:
    """
    Setup structured logging

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_format: Force JSON format on or off (None = decide from log_format)
        log_format: Configured LOG_FORMAT value (json, structured or text)
        extra_fields: Static fields added to every JSON log entry
        stream: Output stream, stderr by default so stdout stays machine readable

    Returns:
        Configured root logger
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    use_json = log_format.lower() in JSON_FORMATS if json_format is None else json_format

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)

    if use_json:
        formatter = JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={"asctime": "timestamp", "levelname": "level"},
            static_fields=extra_fields or {},
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    handler.setFormatter(formatter)

    root_logger.addHandler(handler)
    return root_logger


class ContextAdapter(logging.LoggerAdapter):
    """Adds fixed context to every record"""

    def process(self, msg, kwargs):
        kwargs.setdefault("extra", {}).update(self.extra)
        return msg, kwargs


def get_logger(name: str, extra_context: Optional[dict] = None):
    """
    Get a logger with optional extra context

    Args:
        name: Logger name (usually __name__)
        extra_context: Additional context to include in all log messages

    Returns:
        Logger instance, wrapped in a ContextAdapter when context is given
    """
    logger = logging.getLogger(name)
    if extra_context:
        return ContextAdapter(logger, extra_context)
    return logger
