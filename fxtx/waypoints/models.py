"""Waypoint data models."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class WaypointFileType(StrEnum):
    """Supported waypoint file formats."""

    GPX = "gpx"


class Waypoint(BaseModel):
    """A single latitude/longitude position."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float


WaypointSet = tuple[Waypoint, ...]
