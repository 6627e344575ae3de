"""Waypoint file loading.

Reads GPX-style XML: a ``gpx`` root element whose ``wpt`` children carry
``lat`` and ``lon`` attributes. Element names are matched without their
XML namespace, so both bare and GPX 1.1 namespaced documents load.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ElementTree
from pathlib import Path

from fxtx.exceptions import EmptyWaypointSetError, WaypointLoadError, WaypointParseError
from fxtx.waypoints.models import Waypoint, WaypointFileType, WaypointSet

logger = logging.getLogger(__name__)

_ROOT_ELEMENT = "gpx"
_WAYPOINT_ELEMENT = "wpt"


def load_waypoints(
    path: str | Path,
    file_type: WaypointFileType = WaypointFileType.GPX,
) -> WaypointSet:
    """Load an ordered waypoint set from a file.

    Args:
        path: Location of the waypoint file.
        file_type: Format of the file.

    Returns:
        Waypoints in document order. May be empty.

    Raises:
        WaypointLoadError: If the file cannot be read.
        WaypointParseError: If the file contents are not valid waypoints.
    """
    logger.info("Loading waypoint file", extra={"waypoint_file": str(path)})

    try:
        data = Path(path).read_bytes()
    except OSError as error:
        raise WaypointLoadError(
            f"error opening waypoint file: {error}",
            path=str(path),
        ) from error

    if file_type == WaypointFileType.GPX:
        return parse_gpx(data, source=str(path))

    raise WaypointParseError(
        f"unsupported waypoint file type: {file_type}",
        path=str(path),
    )


def parse_gpx(data: bytes | str, *, source: str = "<memory>") -> WaypointSet:
    """Parse GPX XML into waypoints.

    Args:
        data: Raw XML document.
        source: Name of the document, used in error context.

    Returns:
        Waypoints in document order.

    Raises:
        WaypointParseError: If the XML is malformed, the root is not ``gpx``,
            or a waypoint has a missing or non-numeric coordinate.
    """
    try:
        root = ElementTree.fromstring(data)
    except ElementTree.ParseError as error:
        raise WaypointParseError(
            f"error unmarshaling waypoints: {error}",
            path=source,
        ) from error

    if _local_name(root.tag) != _ROOT_ELEMENT:
        raise WaypointParseError(
            f"expected element type <{_ROOT_ELEMENT}> but have <{_local_name(root.tag)}>",
            path=source,
        )

    waypoints: list[Waypoint] = []
    for position, element in enumerate(
        child for child in root if _local_name(child.tag) == _WAYPOINT_ELEMENT
    ):
        waypoints.append(
            Waypoint(
                latitude=_coordinate(element, "lat", position=position, source=source),
                longitude=_coordinate(element, "lon", position=position, source=source),
            )
        )

    return tuple(waypoints)


def require_waypoints(waypoints: WaypointSet, *, source: str) -> WaypointSet:
    """Return the waypoints, or raise if there are none.

    Raises:
        EmptyWaypointSetError: If the set is empty.
    """
    if not waypoints:
        raise EmptyWaypointSetError(
            "waypoint file contains no waypoints",
            context={"path": source},
        )
    return waypoints


def _coordinate(element: ElementTree.Element, name: str, *, position: int, source: str) -> float:
    raw_value = element.get(name)
    if raw_value is None:
        raise WaypointParseError(
            f"waypoint {position} is missing the '{name}' attribute",
            path=source,
        )
    try:
        return float(raw_value)
    except ValueError as error:
        raise WaypointParseError(
            f"waypoint {position} has a non-numeric '{name}' attribute: {raw_value!r}",
            path=source,
        ) from error


def _local_name(tag: str) -> str:
    """Strip a ``{namespace}`` prefix from an element tag."""
    return tag.rpartition("}")[2]
