"""Root logger setup for the generator process.

fxtx installs a single named handler on the root logger. Handlers that
other code has attached to the root logger are left alone.
"""

import logging
import sys
from typing import TextIO

from fxtx.logging.config import LogFormat, LoggingConfig, get_logging_config
from fxtx.logging.formatters import HumanFormatter, JSONFormatter

_HANDLER_NAME = "fxtx"


def _installed_handler() -> logging.Handler | None:
    for handler in logging.getLogger().handlers:
        if handler.get_name() == _HANDLER_NAME:
            return handler
    return None


def _build_formatter(config: LoggingConfig, output: TextIO) -> logging.Formatter:
    if config.log_format == LogFormat.HUMAN:
        return HumanFormatter(use_colors=output.isatty())
    return JSONFormatter(
        service_name=config.service_name,
        include_timestamp=config.include_timestamp,
        include_location=config.include_location,
    )


def setup_logging(
    config: LoggingConfig | None = None,
    stream: TextIO | None = None,
    *,
    debug: bool = False,
    force: bool = False,
) -> None:
    """Install the fxtx handler on the root logger.

    Args:
        config: Logging settings. When omitted, ``debug`` selects
            ``LoggingConfig.for_debug()``; otherwise settings are read from
            the environment.
        stream: Output stream for log lines. Defaults to sys.stderr.
        debug: Use debug settings when no config is given.
        force: Replace a handler installed by an earlier call.
    """
    installed = _installed_handler()
    if installed is not None and not force:
        return

    if config is None:
        config = LoggingConfig.for_debug() if debug else get_logging_config()

    root_logger = logging.getLogger()
    if installed is not None:
        root_logger.removeHandler(installed)

    output = stream or sys.stderr
    handler = logging.StreamHandler(output)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(_build_formatter(config, output))

    root_logger.addHandler(handler)
    root_logger.setLevel(config.log_level.value)


def is_configured() -> bool:
    """Return True if the fxtx handler is installed."""
    return _installed_handler() is not None


def reset_logging() -> None:
    """Remove the fxtx handler and drop cached logging settings."""
    installed = _installed_handler()
    if installed is not None:
        logging.getLogger().removeHandler(installed)

    get_logging_config.cache_clear()
