"""One-shot TCP message sender.

Every send dials a new connection, writes a single newline-terminated
message, and closes the connection. Connections are never pooled or reused.
"""

from __future__ import annotations

import logging
import socket

from fxtx.exceptions import CloseError, DialError, WriteError

logger = logging.getLogger(__name__)

_MESSAGE_TERMINATOR = b"\n"
_ENCODING = "utf-8"


def split_destination(destination: str) -> tuple[str, int]:
    """Split ``host:port`` (or ``[v6addr]:port``) into its parts.

    Raises:
        ValueError: If the port is missing or not a valid TCP port.
    """
    host, separator, port_text = destination.rpartition(":")
    if not separator or not host:
        raise ValueError(f"destination must be host:port, got '{destination}'")

    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]

    try:
        port = int(port_text)
    except ValueError as error:
        raise ValueError(f"destination port must be an integer, got '{port_text}'") from error

    if not 0 < port < 65536:
        raise ValueError(f"destination port out of range: {port}")

    return host, port


class TcpSender:
    """Sends messages to a fixed TCP destination.

    Holds only immutable configuration, so a single instance can be shared
    by every generator loop.
    """

    def __init__(self, destination: str, timeout_seconds: float) -> None:
        """Initialize the sender.

        Args:
            destination: Target address as host:port.
            timeout_seconds: Bound on connecting and on each write; 0 means no bound.

        Raises:
            ValueError: If the destination is not a valid host:port.
        """
        self._destination = destination
        self._address = split_destination(destination)
        self._timeout_seconds = timeout_seconds

    @property
    def _socket_timeout(self) -> float | None:
        # zero disables the timeout
        return self._timeout_seconds or None

    @property
    def destination(self) -> str:
        """Return the configured host:port."""
        return self._destination

    def send(self, payload: str) -> None:
        """Deliver one message over a fresh connection.

        Args:
            payload: Message text; a newline terminator is appended.

        Raises:
            DialError: If the connection cannot be established.
            WriteError: If the message cannot be encoded or written.
        """
        try:
            data = payload.encode(_ENCODING) + _MESSAGE_TERMINATOR
        except UnicodeEncodeError as error:
            raise WriteError(
                f"unable to write: {error}",
                destination=self._destination,
            ) from error

        try:
            connection = socket.create_connection(self._address, timeout=self._socket_timeout)
        except OSError as error:
            raise DialError(
                f"unable to connect: {error}",
                destination=self._destination,
            ) from error

        try:
            connection.sendall(data)
        except OSError as error:
            raise WriteError(
                f"unable to write: {error}",
                destination=self._destination,
            ) from error
        finally:
            self._close(connection)

    def _close(self, connection: socket.socket) -> None:
        try:
            connection.close()
        except OSError as error:
            close_error = CloseError(
                f"unable to close tcp connection: {error}",
                destination=self._destination,
            )
            logger.error("unable to close tcp connection", extra=close_error.to_log_dict())

    def __repr__(self) -> str:
        return f"TcpSender(destination={self._destination!r}, timeout_seconds={self._timeout_seconds!r})"
