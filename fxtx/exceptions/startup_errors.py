"""Errors raised while building the engine, before any generator runs."""

from typing import Any, ClassVar

from fxtx.exceptions.base import FxtxError


class StartupError(FxtxError):
    """Base class for errors that abort engine construction."""

    error_code: ClassVar[str] = "STARTUP_ERROR"


class ConfigLoadError(StartupError):
    """Generator configuration file is missing, unreadable, or invalid."""

    error_code: ClassVar[str] = "CONFIG_LOAD_ERROR"

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize config load error with the offending path.

        Args:
            message: Description of the failure.
            path: Path of the configuration file.
            context: Additional context information.
        """
        context_dict = context or {}
        if path is not None:
            context_dict["path"] = path
        super().__init__(message, context=context_dict)


class WaypointLoadError(StartupError):
    """Waypoint file could not be read."""

    error_code: ClassVar[str] = "WAYPOINT_LOAD_ERROR"

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize waypoint load error with the offending path.

        Args:
            message: Description of the failure.
            path: Path of the waypoint file.
            context: Additional context information.
        """
        context_dict = context or {}
        if path is not None:
            context_dict["path"] = path
        super().__init__(message, context=context_dict)


class WaypointParseError(WaypointLoadError):
    """Waypoint file was read but its contents are not valid waypoints."""

    error_code: ClassVar[str] = "WAYPOINT_PARSE_ERROR"


class EmptyWaypointSetError(StartupError):
    """Waypoint file holds no waypoints.

    The engine treats this as recoverable and skips the generator.
    """

    error_code: ClassVar[str] = "EMPTY_WAYPOINT_SET"


class TemplateCompileError(StartupError):
    """Message template has invalid syntax."""

    error_code: ClassVar[str] = "TEMPLATE_COMPILE_ERROR"

    def __init__(
        self,
        message: str,
        *,
        line: int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize template compile error with the failing line.

        Args:
            message: Description of the syntax error.
            line: Template line number reported by the template engine.
            context: Additional context information.
        """
        context_dict = context or {}
        if line is not None:
            context_dict["line"] = line
        super().__init__(message, context=context_dict)
