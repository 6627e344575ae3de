"""fxtx exception hierarchy.

Architecture:
    FxtxError (base)
    ├── StartupError (aborts engine construction)
    │   ├── ConfigLoadError
    │   ├── WaypointLoadError
    │   │   └── WaypointParseError
    │   ├── EmptyWaypointSetError
    │   └── TemplateCompileError
    └── RuntimeFailure (isolated to one generator loop)
        ├── RenderError
        └── TransportError
            ├── DialError
            ├── WriteError
            └── CloseError

Usage:
    from fxtx.exceptions import DialError

    try:
        sender.send(payload)
    except DialError as error:
        logger.error("unable to connect", extra=error.to_log_dict())
"""

from fxtx.exceptions.base import FxtxError
from fxtx.exceptions.runtime_errors import (
    CloseError,
    DialError,
    RenderError,
    RuntimeFailure,
    TransportError,
    WriteError,
)
from fxtx.exceptions.startup_errors import (
    ConfigLoadError,
    EmptyWaypointSetError,
    StartupError,
    TemplateCompileError,
    WaypointLoadError,
    WaypointParseError,
)

__all__ = [
    "CloseError",
    "ConfigLoadError",
    "DialError",
    "EmptyWaypointSetError",
    "FxtxError",
    "RenderError",
    "RuntimeFailure",
    "StartupError",
    "TemplateCompileError",
    "TransportError",
    "WaypointLoadError",
    "WaypointParseError",
    "WriteError",
]
