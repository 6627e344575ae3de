"""Type definitions shared between generator loops and their collaborators."""

from collections.abc import Callable
from typing import Protocol

from fxtx.waypoints.models import WaypointFileType, WaypointSet


class MessageSender(Protocol):
    """Anything that can deliver one rendered message."""

    def send(self, payload: str) -> None:
        """Deliver ``payload``; raise a TransportError subclass on failure."""
        ...


# Resolves a waypoint file reference into an ordered set
WaypointLoader = Callable[[str, WaypointFileType], WaypointSet]

# Values handed to a message template
TemplateParams = dict[str, float]
