"""Line-oriented TCP service that describes cron expressions.

Each connection carries one request: the client sends an expression, the
server answers with its description (or the error text) and closes the
connection. Connections are served on their own threads.

Usage:
    >>> from cronspeak.config import ServiceConfig
    >>> from cronspeak.server import CronServer
    >>>
    >>> with CronServer(ServiceConfig(host="127.0.0.1", port=0)) as server:
    ...     server.start()
    ...     host, port = server.address
    ...     # ... clients connect ...
    ...     server.stop()
"""

from __future__ import annotations

import logging
import socketserver
import threading
from typing import Any

from cronspeak.api import describe
from cronspeak.config import ServiceConfig
from cronspeak.scheduling.errors import CronParseError
from cronspeak.scheduling.presets import first_line

logger = logging.getLogger(__name__)


def respond(request: str, banner: str = "") -> str:
    """Build the reply for one raw request.

    Only the first line of the request is translated. A successful
    description is followed by a blank line and the banner; an error is
    answered with its message alone.
    """
    line = first_line(request)
    try:
        text = describe(line)
    except CronParseError as e:
        logger.info("Rejected %r: %s", line, e)
        return str(e)
    return f"{text}\n\n{banner}"


class TranslationHandler(socketserver.BaseRequestHandler):
    """Reads one request from a connection and writes back the reply."""

    server: "CronServer"

    def handle(self) -> None:
        config = self.server.config
        self.request.settimeout(config.read_timeout)
        try:
            data = self.request.recv(config.buffer_size)
        except OSError as e:
            logger.warning("read ERR from %s: %s", self.client_address, e)
            return

        request = data.decode("utf-8", errors="replace")
        logger.debug("Request from %s: %r", self.client_address, request)
        reply = respond(request, config.banner)
        try:
            self.request.sendall(reply.encode("utf-8"))
        except OSError as e:
            logger.warning("write ERR to %s: %s", self.client_address, e)


class CronServer(socketserver.ThreadingTCPServer):
    """Threaded TCP server answering one cron expression per connection."""

    allow_reuse_address = True
    daemon_threads = True

    def __init__(self, config: ServiceConfig | None = None) -> None:
        self.config = config or ServiceConfig()
        self._thread: threading.Thread | None = None
        super().__init__((self.config.host, self.config.port), TranslationHandler)

    @property
    def address(self) -> tuple[str, int]:
        """The bound (host, port), with the real port when 0 was requested."""
        host, port = self.server_address[:2]
        return str(host), int(port)

    def start(self) -> None:
        """Serve in a background thread."""
        if self._thread is not None:
            return
        self._thread = threading.Thread(
            target=self.serve_forever,
            name="cronspeak-server",
            daemon=True,
        )
        self._thread.start()
        logger.info("Listening on %s:%d", *self.address)

    def stop(self) -> None:
        """Stop a server started with :meth:`start`."""
        if self._thread is None:
            return
        self.shutdown()
        self._thread.join()
        self._thread = None
        logger.info("Stopped")

    def handle_error(self, request: Any, client_address: Any) -> None:
        logger.exception("Unhandled error serving %s", client_address)


def serve(config: ServiceConfig | None = None) -> None:
    """Run the service in the foreground until interrupted."""
    with CronServer(config) as server:
        logger.info("Listening on %s:%d", *server.address)
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            logger.info("Interrupted, shutting down")
