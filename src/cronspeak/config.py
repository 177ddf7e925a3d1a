"""Service configuration and logging setup.

Environment variables:
    CRONSPEAK_HOST: Address to listen on (default: 0.0.0.0)
    CRONSPEAK_PORT: Port to listen on (default: 6000)
    CRONSPEAK_READ_TIMEOUT: Seconds to wait for a request (default: 30)
    CRONSPEAK_BUFFER_SIZE: Bytes read per request (default: 64)
    CRONSPEAK_BANNER: Text appended after a successful description
    CRONSPEAK_LOG_LEVEL: Logging level (default: INFO)
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, replace
from typing import Any, Mapping, TextIO

DEFAULT_BANNER = "\U0001f426 \x1b[36;1m@cronspeak\x1b[0m "

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass(frozen=True)
class ServiceConfig:
    """Settings for the translation service.

    Attributes:
        host: Address to bind.
        port: Port to bind; 0 picks a free port.
        read_timeout: Seconds to wait for a client's request.
        buffer_size: Maximum bytes read from one request.
        banner: Text written after a successful description.
        log_level: Logging level name.
    """

    host: str = "0.0.0.0"
    port: int = 6000
    read_timeout: float = 30.0
    buffer_size: int = 64
    banner: str = DEFAULT_BANNER
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if not 0 <= self.port <= 65535:
            raise ValueError(f"port must be between 0 and 65535, got {self.port}")
        if self.read_timeout <= 0:
            raise ValueError(f"read_timeout must be positive, got {self.read_timeout}")
        if self.buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {self.buffer_size}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ServiceConfig":
        """Build a config from environment variables.

        Malformed numeric values fall back to the defaults.
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        def get_int(key: str, default: int) -> int:
            try:
                return int(env.get(key, default))
            except ValueError:
                return default

        def get_float(key: str, default: float) -> float:
            try:
                return float(env.get(key, default))
            except ValueError:
                return default

        return cls(
            host=env.get("CRONSPEAK_HOST", defaults.host),
            port=get_int("CRONSPEAK_PORT", defaults.port),
            read_timeout=get_float("CRONSPEAK_READ_TIMEOUT", defaults.read_timeout),
            buffer_size=get_int("CRONSPEAK_BUFFER_SIZE", defaults.buffer_size),
            banner=env.get("CRONSPEAK_BANNER", defaults.banner),
            log_level=env.get("CRONSPEAK_LOG_LEVEL", defaults.log_level).upper(),
        )

    def with_overrides(self, **overrides: Any) -> "ServiceConfig":
        """Return a copy with the non-None overrides applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


class _PackageHandler(logging.StreamHandler):
    """Stream handler installed by configure_logging()."""


def configure_logging(level: str | int = "INFO", stream: TextIO | None = None) -> logging.Logger:
    """Send cronspeak's log records to a stream.

    Calling this again replaces the previously installed handler.

    Returns:
        The package logger.
    """
    logger = logging.getLogger("cronspeak")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    for handler in list(logger.handlers):
        if isinstance(handler, _PackageHandler):
            logger.removeHandler(handler)

    handler = _PackageHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
