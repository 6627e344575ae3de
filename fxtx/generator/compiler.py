"""Build compiled generators from configuration.

Compilation is a pure step: specs are never mutated, and each result pairs
a spec with the waypoints and renderer that were built for it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fxtx.exceptions import EmptyWaypointSetError
from fxtx.generator.models import CompiledGenerator
from fxtx.renderer.renderer import MessageRenderer
from fxtx.waypoints.loader import load_waypoints, require_waypoints

if TYPE_CHECKING:
    from fxtx.generator.models import GeneratorConfig, GeneratorSpec
    from fxtx.types import WaypointLoader

logger = logging.getLogger(__name__)


def compile_generator(spec: GeneratorSpec, *, loader: WaypointLoader = load_waypoints) -> CompiledGenerator:
    """Load waypoints and compile the template for one generator.

    The template is compiled even when the waypoint set turns out to be
    empty, so a broken template is always reported.

    Raises:
        WaypointLoadError: If the waypoint file cannot be read.
        WaypointParseError: If the waypoint file is malformed.
        TemplateCompileError: If the template is invalid.
        EmptyWaypointSetError: If the waypoint file holds no waypoints.
    """
    logger.info("Loading generator", extra={"description": spec.description})

    waypoints = loader(spec.waypoint_file, spec.waypoint_file_type)
    renderer = MessageRenderer.compile(spec.template)
    require_waypoints(waypoints, source=spec.waypoint_file)

    logger.info(
        "Generator compiled",
        extra={"description": spec.description, "waypoint_count": len(waypoints)},
    )
    return CompiledGenerator(spec=spec, waypoints=waypoints, renderer=renderer)


def compile_generators(
    config: GeneratorConfig,
    *,
    loader: WaypointLoader = load_waypoints,
) -> list[CompiledGenerator]:
    """Compile every configured generator, skipping those without waypoints.

    Args:
        config: Validated generator configuration.
        loader: Waypoint loader, replaceable in tests.

    Returns:
        Compiled generators in configuration order.

    Raises:
        WaypointLoadError: If any waypoint file cannot be read.
        WaypointParseError: If any waypoint file is malformed.
        TemplateCompileError: If any template is invalid.
    """
    compiled: list[CompiledGenerator] = []
    for spec in config.generators:
        try:
            compiled.append(compile_generator(spec, loader=loader))
        except EmptyWaypointSetError as error:
            logger.warning(
                "Generator has no waypoints and will not be started",
                extra={"description": spec.description, **error.to_log_dict()},
            )
    return compiled
