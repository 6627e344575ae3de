"""Structured logging for the fxtx traffic generator.

Usage:
    import logging

    from fxtx.logging import set_extra_context, setup_logging

    setup_logging(debug=True)
    logger = logging.getLogger(__name__)
    set_extra_context(generator="truck-01")
    logger.info("Generating message", extra={"index": 3, "count": 41})
"""

from fxtx.logging.config import LogFormat, LoggingConfig, LogLevel
from fxtx.logging.context import clear_context, get_extra_context, set_extra_context
from fxtx.logging.formatters import HumanFormatter, JSONFormatter
from fxtx.logging.logger import is_configured, reset_logging, setup_logging

__all__ = [
    "HumanFormatter",
    "JSONFormatter",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "clear_context",
    "get_extra_context",
    "is_configured",
    "reset_logging",
    "set_extra_context",
    "setup_logging",
]
