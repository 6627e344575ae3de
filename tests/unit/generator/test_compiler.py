"""Tests for building compiled generators from configuration."""

import logging

import pytest

from fxtx.exceptions import TemplateCompileError, WaypointLoadError, WaypointParseError
from fxtx.generator.compiler import compile_generator, compile_generators
from fxtx.generator.models import GeneratorConfig, GeneratorSpec
from fxtx.waypoints.models import Waypoint, WaypointFileType


def _make_spec(description="truck-01", waypoint_file="route.gpx", template="{{.lat}},{{.lon}}"):
    """Create a GeneratorSpec for testing."""
    return GeneratorSpec(
        description=description,
        frequency=1,
        waypoint_file=waypoint_file,
        template=template,
    )


def _make_loader(waypoints_by_file):
    """Create a loader that serves waypoints from a dictionary and records calls."""
    calls = []

    def loader(path, file_type):
        calls.append((path, file_type))
        return waypoints_by_file[path]

    loader.calls = calls
    return loader


_ROUTE = (
    Waypoint(latitude=1.0, longitude=2.0),
    Waypoint(latitude=3.0, longitude=4.0),
)


class TestCompileGenerator:
    def test_pairs_spec_waypoints_and_renderer(self):
        spec = _make_spec()
        loader = _make_loader({"route.gpx": _ROUTE})

        compiled = compile_generator(spec, loader=loader)

        assert compiled.spec is spec
        assert compiled.waypoints == _ROUTE
        assert compiled.renderer.render({"lat": 1.0, "lon": 2.0}) == "1.0,2.0"

    def test_passes_file_type_to_loader(self):
        loader = _make_loader({"route.gpx": _ROUTE})
        compile_generator(_make_spec(), loader=loader)
        assert loader.calls == [("route.gpx", WaypointFileType.GPX)]

    def test_does_not_mutate_spec(self):
        spec = _make_spec()
        before = spec.model_dump()
        compile_generator(spec, loader=_make_loader({"route.gpx": _ROUTE}))
        assert spec.model_dump() == before


class TestCompileGenerators:
    def test_compiles_in_order(self):
        config = GeneratorConfig(
            generators=[
                _make_spec(description="a", waypoint_file="a.gpx"),
                _make_spec(description="b", waypoint_file="b.gpx"),
            ]
        )
        loader = _make_loader({"a.gpx": _ROUTE, "b.gpx": _ROUTE[:1]})

        compiled = compile_generators(config, loader=loader)

        assert [generator.description for generator in compiled] == ["a", "b"]
        assert len(compiled[1].waypoints) == 1

    def test_skips_empty_waypoint_set_with_warning(self, caplog):
        caplog.set_level(logging.INFO)
        config = GeneratorConfig(
            generators=[
                _make_spec(description="empty", waypoint_file="empty.gpx"),
                _make_spec(description="full", waypoint_file="full.gpx"),
            ]
        )
        loader = _make_loader({"empty.gpx": (), "full.gpx": _ROUTE})

        compiled = compile_generators(config, loader=loader)

        assert [generator.description for generator in compiled] == ["full"]
        warnings = [record for record in caplog.records if record.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert warnings[0].description == "empty"

    def test_broken_template_is_fatal_even_without_waypoints(self):
        config = GeneratorConfig(
            generators=[_make_spec(waypoint_file="empty.gpx", template="{{ lat ")],
        )
        with pytest.raises(TemplateCompileError):
            compile_generators(config, loader=_make_loader({"empty.gpx": ()}))

    def test_broken_template_aborts_all(self):
        config = GeneratorConfig(
            generators=[
                _make_spec(description="good", waypoint_file="a.gpx"),
                _make_spec(description="bad", waypoint_file="b.gpx", template="{% if %}"),
            ]
        )
        with pytest.raises(TemplateCompileError):
            compile_generators(config, loader=_make_loader({"a.gpx": _ROUTE, "b.gpx": _ROUTE}))

    @pytest.mark.parametrize("error_class", [WaypointLoadError, WaypointParseError])
    def test_waypoint_errors_propagate(self, error_class):
        def failing_loader(path, file_type):
            raise error_class("cannot load", path=path)

        config = GeneratorConfig(generators=[_make_spec()])
        with pytest.raises(error_class):
            compile_generators(config, loader=failing_loader)

    def test_no_generators(self):
        assert compile_generators(GeneratorConfig(), loader=_make_loader({})) == []
