"""Command-line entry point.

Loads settings and the generator configuration, builds the engine, and
runs it until every generator returns or the process is signalled.
"""

from __future__ import annotations

import argparse
import logging
import signal
import sys
from typing import TYPE_CHECKING

from pydantic import ValidationError

from fxtx.config import FxtxSettings, get_settings
from fxtx.exceptions import ConfigLoadError, StartupError
from fxtx.generator.config_file import load_generator_config
from fxtx.generator.engine import GeneratorEngine
from fxtx.logging import setup_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

logger = logging.getLogger(__name__)

_EXIT_OK = 0
_EXIT_FAILURE = 1


def build_parser(settings: FxtxSettings) -> argparse.ArgumentParser:
    """Build the argument parser, using settings as flag defaults."""
    parser = argparse.ArgumentParser(
        prog="fxtx",
        description="Replay waypoint files as templated TCP messages.",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=settings.config,
        help="Config file (env: CONFIG)",
    )
    parser.add_argument(
        "--debug",
        action=argparse.BooleanOptionalAction,
        default=settings.debug,
        help="Debug logging mode (env: DEBUG)",
    )
    parser.add_argument(
        "--dest",
        type=str,
        default=settings.dest,
        help="Destination host:port (env: DEST)",
    )
    parser.add_argument(
        "--tcpTimeout",
        dest="tcp_timeout",
        type=int,
        default=settings.timeout,
        help="TCP timeout in seconds (env: TIMEOUT)",
    )
    return parser


def run(arguments: argparse.Namespace) -> int:
    """Build the engine from parsed arguments and run it.

    Returns:
        Process exit status.
    """
    setup_logging(debug=arguments.debug)

    logger.info("Loading configuration...")
    try:
        generator_config = load_generator_config(arguments.config)
    except ConfigLoadError as error:
        logger.critical("Config file error", extra=error.to_log_dict())
        return _EXIT_FAILURE

    try:
        engine = GeneratorEngine.from_config(
            generator_config,
            destination=arguments.dest,
            timeout_seconds=arguments.tcp_timeout,
        )
    except StartupError as error:
        logger.critical("Error instantiating engine", extra=error.to_log_dict())
        return _EXIT_FAILURE
    except ValidationError:
        logger.exception("Invalid engine settings")
        return _EXIT_FAILURE

    _install_signal_handlers(engine)

    logger.info(
        "Run fxtx...",
        extra={"destination": arguments.dest, "generator_count": len(engine.generators)},
    )
    engine.run()
    return _EXIT_OK


def _install_signal_handlers(engine: GeneratorEngine) -> None:
    def signal_handler(signal_number: int, _frame: FrameType | None) -> None:
        logger.info("Received shutdown signal", extra={"signal": signal.Signals(signal_number).name})
        engine.stop()

    for signal_name in (signal.SIGINT, signal.SIGTERM):
        signal.signal(signal_name, signal_handler)


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point: load settings, parse flags, and run the engine."""
    try:
        settings = get_settings()
    except ValidationError as error:
        print(f"Invalid environment settings: {error}", file=sys.stderr)
        sys.exit(_EXIT_FAILURE)

    arguments = build_parser(settings).parse_args(argv)
    sys.exit(run(arguments))


if __name__ == "__main__":
    main()
