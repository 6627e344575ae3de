"""Tests for generator data models."""

import pytest
from pydantic import ValidationError

from fxtx.generator.models import (
    CompiledGenerator,
    Cursor,
    EngineConfig,
    GeneratorConfig,
    GeneratorSpec,
    LoopState,
)
from fxtx.renderer.renderer import MessageRenderer
from fxtx.waypoints.models import Waypoint, WaypointFileType


def _make_spec(**overrides):
    """Create a GeneratorSpec for testing."""
    defaults = {
        "description": "truck-01",
        "frequency": 5,
        "waypoint_file": "route.gpx",
        "template": "{{.lat}},{{.lon}}",
    }
    defaults.update(overrides)
    return GeneratorSpec(**defaults)


class TestLoopState:
    def test_values(self):
        assert [state.value for state in LoopState] == ["starting", "running", "terminated"]


class TestGeneratorSpec:
    def test_accepts_camel_case_keys(self):
        spec = GeneratorSpec.model_validate(
            {
                "description": "truck-01",
                "frequency": 5,
                "waypointFile": "route.gpx",
                "waypointFileType": "gpx",
                "indexOffset": 2,
                "template": "{{.lat}}",
            }
        )
        assert spec.waypoint_file == "route.gpx"
        assert spec.waypoint_file_type == WaypointFileType.GPX
        assert spec.index_offset == 2

    def test_accepts_snake_case_names(self):
        spec = _make_spec(index_offset=3)
        assert spec.index_offset == 3

    def test_defaults(self):
        spec = GeneratorSpec.model_validate({"waypointFile": "route.gpx", "template": "x"})
        assert spec.description == ""
        assert spec.frequency == 0
        assert spec.index_offset == 0
        assert spec.waypoint_file_type == WaypointFileType.GPX

    def test_negative_frequency_rejected(self):
        with pytest.raises(ValidationError):
            _make_spec(frequency=-1)

    def test_negative_index_offset_rejected(self):
        with pytest.raises(ValidationError):
            _make_spec(index_offset=-1)

    def test_unknown_waypoint_file_type_rejected(self):
        with pytest.raises(ValidationError):
            _make_spec(waypoint_file_type="kml")

    def test_unknown_key_ignored(self):
        spec = GeneratorSpec.model_validate({"waypointFile": "route.gpx", "template": "x", "frequncy": 2})
        assert spec.frequency == 0

    def test_template_required(self):
        with pytest.raises(ValidationError):
            GeneratorSpec.model_validate({"waypointFile": "route.gpx"})

    def test_is_immutable(self):
        spec = _make_spec()
        with pytest.raises(ValidationError):
            spec.frequency = 1


class TestGeneratorConfig:
    def test_defaults(self):
        config = GeneratorConfig()
        assert config.start_offset == 0.0
        assert config.generators == []

    def test_start_offset_alias(self):
        config = GeneratorConfig.model_validate({"startOffset": 2, "generators": []})
        assert config.start_offset == 2.0

    def test_negative_start_offset_rejected(self):
        with pytest.raises(ValidationError):
            GeneratorConfig.model_validate({"startOffset": -1})


class TestCompiledGenerator:
    def test_pairs_spec_with_waypoints_and_renderer(self):
        spec = _make_spec()
        renderer = MessageRenderer.compile(spec.template)
        waypoints = (Waypoint(latitude=1.0, longitude=2.0),)

        compiled = CompiledGenerator(spec=spec, waypoints=waypoints, renderer=renderer)

        assert compiled.description == "truck-01"
        assert compiled.waypoints == waypoints
        assert compiled.renderer is renderer

    def test_is_immutable(self):
        spec = _make_spec()
        compiled = CompiledGenerator(
            spec=spec,
            waypoints=(Waypoint(latitude=1.0, longitude=2.0),),
            renderer=MessageRenderer.compile(spec.template),
        )
        with pytest.raises(ValidationError):
            compiled.waypoints = ()


class TestEngineConfig:
    def test_defaults(self):
        config = EngineConfig()
        assert config.destination == "127.0.0.1:30000"
        assert config.timeout_seconds == 10.0
        assert config.start_offset_seconds == 0.0

    def test_invalid_destination_rejected(self):
        with pytest.raises(ValidationError):
            EngineConfig(destination="no-port")

    def test_zero_timeout_allowed(self):
        assert EngineConfig(timeout_seconds=0).timeout_seconds == 0.0

    def test_negative_timeout_rejected(self):
        with pytest.raises(ValidationError):
            EngineConfig(timeout_seconds=-1)


class TestCursor:
    @pytest.mark.parametrize(
        ("index_offset", "size", "expected_index"),
        [
            (0, 3, 0),
            (1, 3, 1),
            (2, 3, 0),
            (7, 3, 0),
            (0, 1, 0),
            (4, 8, 4),
        ],
    )
    def test_start_clamps_offset(self, index_offset, size, expected_index):
        cursor = Cursor.start(index_offset=index_offset, size=size)
        assert cursor.index == expected_index
        assert cursor.count == 0

    def test_advance_wraps(self):
        cursor = Cursor.start(index_offset=0, size=2)
        cursor.advance()
        assert cursor.index == 1
        cursor.advance()
        assert cursor.index == 0
        assert cursor.count == 2

    @pytest.mark.parametrize(("index_offset", "size"), [(0, 1), (0, 4), (2, 4), (3, 7)])
    def test_returns_to_start_after_full_cycle(self, index_offset, size):
        cursor = Cursor.start(index_offset=index_offset, size=size)
        start = cursor.index
        for _ in range(size):
            cursor.advance()
        assert cursor.index == start
        assert cursor.count == size
