"""Errors raised inside a running generator loop.

These never leave the loop that raised them.
"""

from typing import Any, ClassVar

from fxtx.exceptions.base import FxtxError


class RuntimeFailure(FxtxError):
    """Base class for per-iteration failures."""

    error_code: ClassVar[str] = "RUNTIME_FAILURE"


class RenderError(RuntimeFailure):
    """Template execution failed; terminates the owning loop."""

    error_code: ClassVar[str] = "RENDER_ERROR"


class TransportError(RuntimeFailure):
    """Base class for per-send TCP failures; the loop keeps going."""

    error_code: ClassVar[str] = "TRANSPORT_ERROR"

    def __init__(
        self,
        message: str,
        *,
        destination: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize transport error with the destination address.

        Args:
            message: Description of the failure.
            destination: The host:port that was being contacted.
            context: Additional context information.
        """
        context_dict = context or {}
        if destination is not None:
            context_dict["destination"] = destination
        super().__init__(message, context=context_dict)


class DialError(TransportError):
    """Connection to the destination could not be established."""

    error_code: ClassVar[str] = "DIAL_ERROR"


class WriteError(TransportError):
    """Message could not be written to an open connection."""

    error_code: ClassVar[str] = "WRITE_ERROR"


class CloseError(TransportError):
    """Connection could not be closed cleanly."""

    error_code: ClassVar[str] = "CLOSE_ERROR"
