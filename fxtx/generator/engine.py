"""Generator engine: runs every compiled generator concurrently."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from fxtx.generator.compiler import compile_generators
from fxtx.generator.loop import GeneratorLoop
from fxtx.generator.models import EngineConfig
from fxtx.transport.sender import TcpSender
from fxtx.waypoints.loader import load_waypoints

if TYPE_CHECKING:
    from collections.abc import Sequence

    from fxtx.generator.models import CompiledGenerator, GeneratorConfig
    from fxtx.types import MessageSender, WaypointLoader

logger = logging.getLogger(__name__)


class GeneratorEngine:
    """Launches one loop thread per compiled generator and waits for them.

    Successive launches can be staggered by a fixed start offset. Loops
    share nothing mutable except the stop signal.
    """

    def __init__(
        self,
        generators: Sequence[CompiledGenerator],
        config: EngineConfig,
        *,
        sender: MessageSender | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            generators: Compiled generators to run, in launch order.
            config: Destination, timeout and start offset.
            sender: Message sender shared by all loops. Defaults to a
                TcpSender for the configured destination.
        """
        self._generators = tuple(generators)
        self._config = config
        self._sender = sender or TcpSender(config.destination, config.timeout_seconds)
        self._stop_event = threading.Event()
        self._loops: list[GeneratorLoop] = []
        self._threads: list[threading.Thread] = []
        self._started = False

    @classmethod
    def from_config(
        cls,
        generator_config: GeneratorConfig,
        *,
        destination: str,
        timeout_seconds: float,
        loader: WaypointLoader = load_waypoints,
        sender: MessageSender | None = None,
    ) -> GeneratorEngine:
        """Compile a generator configuration into a ready-to-run engine.

        Raises:
            WaypointLoadError: If any waypoint file cannot be read.
            WaypointParseError: If any waypoint file is malformed.
            TemplateCompileError: If any template is invalid.
            pydantic.ValidationError: If destination or timeout are invalid.
        """
        engine_config = EngineConfig(
            destination=destination,
            timeout_seconds=timeout_seconds,
            start_offset_seconds=generator_config.start_offset,
        )
        generators = compile_generators(generator_config, loader=loader)
        return cls(generators, engine_config, sender=sender)

    @property
    def generators(self) -> tuple[CompiledGenerator, ...]:
        """Return the compiled generators this engine runs."""
        return self._generators

    @property
    def loops(self) -> tuple[GeneratorLoop, ...]:
        """Return the loops launched so far."""
        return tuple(self._loops)

    @property
    def is_stopping(self) -> bool:
        """Return whether stop() has been called."""
        return self._stop_event.is_set()

    def run(self) -> None:
        """Launch every generator and block until all of them return.

        Raises:
            RuntimeError: If the engine has already been run.
        """
        if self._started:
            raise RuntimeError("Generator engine can only be run once")
        self._started = True

        start_offset = self._config.start_offset_seconds
        logger.info(
            "Launching generators",
            extra={"generator_count": len(self._generators), "start_offset": start_offset},
        )

        for position, generator in enumerate(self._generators):
            if position > 0 and start_offset > 0:
                logger.debug("Waiting start offset before next launch", extra={"start_offset": start_offset})
                if self._stop_event.wait(start_offset):
                    break

            self._launch(position, generator)

        for thread in self._threads:
            thread.join()

        logger.warning("All generators returned.")

    def stop(self) -> None:
        """Signal every loop to exit at its next iteration boundary."""
        logger.info("Stop signal received")
        self._stop_event.set()

    def _launch(self, position: int, generator: CompiledGenerator) -> None:
        loop = GeneratorLoop(generator, self._sender, self._stop_event)
        thread = threading.Thread(
            target=loop.run,
            name=f"generator-{position}",
            daemon=True,
        )
        self._loops.append(loop)
        self._threads.append(thread)
        thread.start()
