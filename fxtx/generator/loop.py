"""Per-generator send loop.

Walks a waypoint set circularly: render a message for the current
waypoint, send it, sleep for the generator's frequency, advance. Runs
until its template fails to render or the stop signal is set.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fxtx.exceptions import RenderError, TransportError
from fxtx.generator.models import Cursor, LoopState
from fxtx.logging.context import clear_context, set_extra_context

if TYPE_CHECKING:
    import threading

    from fxtx.generator.models import CompiledGenerator
    from fxtx.types import MessageSender, TemplateParams

logger = logging.getLogger(__name__)


class GeneratorLoop:
    """Drives one compiled generator.

    The cursor is private to the loop; the compiled generator and sender
    are shared read-only with other loops.
    """

    def __init__(
        self,
        generator: CompiledGenerator,
        sender: MessageSender,
        stop_event: threading.Event,
    ) -> None:
        """Initialize the loop.

        Args:
            generator: Waypoints, renderer and cadence to replay.
            sender: Delivers each rendered message.
            stop_event: Set to end the loop at its next iteration boundary.
        """
        self._generator = generator
        self._sender = sender
        self._stop_event = stop_event
        self._state = LoopState.STARTING
        self._cursor = Cursor.start(
            index_offset=generator.spec.index_offset,
            size=len(generator.waypoints),
        )

    @property
    def state(self) -> LoopState:
        """Return the current loop state."""
        return self._state

    @property
    def cursor(self) -> Cursor:
        """Return the loop's cursor."""
        return self._cursor

    @property
    def description(self) -> str:
        """Return the generator's label."""
        return self._generator.description

    def run(self) -> LoopState:
        """Run until the template fails or the stop signal is set.

        Returns:
            The final loop state.
        """
        set_extra_context(generator=self.description)
        logger.info("Starting generator", extra={"index": self._cursor.index})

        self._state = LoopState.RUNNING
        frequency = self._generator.spec.frequency

        try:
            while not self._stop_event.is_set():
                if not self._send_current():
                    break

                logger.debug("Wait on interval after send.", extra={"frequency": frequency})
                if self._stop_event.wait(frequency):
                    break

                self._cursor.advance()
        finally:
            self._state = LoopState.TERMINATED
            logger.info("Generator stopped", extra={"count": self._cursor.count})
            clear_context()

        return self._state

    def _send_current(self) -> bool:
        """Render and send the message for the current waypoint.

        Returns:
            False if the template failed and the loop must end.
        """
        waypoint = self._generator.waypoints[self._cursor.index]
        params: TemplateParams = {"lat": waypoint.latitude, "lon": waypoint.longitude}

        logger.info(
            "Generating message",
            extra={"index": self._cursor.index, "count": self._cursor.count},
        )

        try:
            message = self._generator.renderer.render(params)
        except RenderError as error:
            logger.error(
                "Error executing message template. Exiting generator.",
                extra=error.to_log_dict(),
            )
            return False

        logger.debug("Sending rendered message.", extra={"rendered_message": message})

        try:
            self._sender.send(message)
        except TransportError as error:
            logger.error("Send failed: %s", error.message, extra=error.to_log_dict())

        return True
