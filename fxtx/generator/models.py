"""Generator data models."""

from dataclasses import dataclass, field
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from fxtx.renderer.renderer import MessageRenderer
from fxtx.transport.sender import split_destination
from fxtx.waypoints.models import WaypointFileType, WaypointSet


class LoopState(StrEnum):
    """Lifecycle state of a generator loop."""

    STARTING = "starting"
    RUNNING = "running"
    TERMINATED = "terminated"


class GeneratorSpec(BaseModel):
    """One generator as declared in the configuration file."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    description: str = Field(default="")
    frequency: int = Field(default=0, ge=0)
    index_offset: int = Field(default=0, ge=0)
    waypoint_file: str = Field(min_length=1)
    waypoint_file_type: WaypointFileType = Field(default=WaypointFileType.GPX)
    template: str


class GeneratorConfig(BaseModel):
    """Top-level generator configuration file contents."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    start_offset: float = Field(default=0.0, ge=0.0)
    generators: list[GeneratorSpec] = Field(default_factory=list)


class CompiledGenerator(BaseModel):
    """A generator spec paired with its loaded waypoints and compiled template."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    spec: GeneratorSpec
    waypoints: WaypointSet
    renderer: MessageRenderer

    @property
    def description(self) -> str:
        """Return the generator's label."""
        return self.spec.description


class EngineConfig(BaseModel):
    """Engine-wide settings shared read-only by every loop."""

    model_config = ConfigDict(frozen=True)

    destination: str = Field(default="127.0.0.1:30000")
    timeout_seconds: float = Field(default=10.0, ge=0.0)
    start_offset_seconds: float = Field(default=0.0, ge=0.0)

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, value: str) -> str:
        """Validate destination is a host:port pair."""
        split_destination(value)
        return value


@dataclass
class Cursor:
    """Position of a loop within its waypoint set.

    Owned by exactly one loop.
    """

    size: int
    index: int = field(default=0)
    count: int = field(default=0)

    @classmethod
    def start(cls, *, index_offset: int, size: int) -> "Cursor":
        """Create a cursor at the configured offset.

        Offsets at or beyond the last waypoint fall back to the first one.
        """
        index = index_offset if index_offset < size - 1 else 0
        return cls(size=size, index=index)

    def advance(self) -> None:
        """Move to the next waypoint, wrapping at the end of the set."""
        self.count += 1
        self.index += 1
        if self.index >= self.size:
            self.index = 0
