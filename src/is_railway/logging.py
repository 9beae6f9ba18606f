"""
Logging for configuration changes, using loguru.

The library reports what it changed through a small ``LogSink`` interface
(``warn`` / ``info`` with a details mapping). The default sink forwards to
loguru with the details bound as extra fields; embedders can pass
``NullSink`` or their own implementation instead.

Applications that want to see these events can call ``setup_logging()`` at
startup, or configure loguru directly.
"""

from __future__ import annotations

import sys
from typing import Protocol, runtime_checkable

from loguru import logger

from is_railway.types import LogDetails


@runtime_checkable
class LogSink(Protocol):
    """Interface for receiving configuration events."""

    def warn(self, message: str, details: LogDetails) -> None: ...

    def info(self, message: str, details: LogDetails) -> None: ...


class LoguruSink:
    """Forward events to loguru, details bound as ``extra`` fields."""

    def warn(self, message: str, details: LogDetails) -> None:
        logger.bind(**details).warning(message)

    def info(self, message: str, details: LogDetails) -> None:
        logger.bind(**details).info(message)


class NullSink:
    """Discard every event."""

    def warn(self, message: str, details: LogDetails) -> None:
        pass

    def info(self, message: str, details: LogDetails) -> None:
        pass


default_sink: LogSink = LoguruSink()


_CONSOLE_FORMAT = "<level>[{level.name}]</level> {message} <dim>{extra}</dim>"


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    library_only: bool = False,
    serialize: bool = False,
) -> list[int]:
    """
    Route is_railway's configuration events to stderr and optionally a file.

    The library only emits INFO (``sslmode=disable`` added) and WARNING
    (``rejectUnauthorized`` overridden) events, so the default level shows both.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR).
        log_file: Path to a log file. If None, only logs to stderr.
        library_only: Drop records that don't come from the is_railway package.
        serialize: Write the log file as JSON lines, details included as
            ``record.extra``.

    Returns:
        The loguru handler ids that were added, for ``logger.remove()``.
    """
    log_filter = "is_railway" if library_only else None

    logger.remove()
    handler_ids = [logger.add(sys.stderr, level=level, format=_CONSOLE_FORMAT, filter=log_filter)]

    if log_file:
        handler_ids.append(
            logger.add(
                log_file,
                level=level,
                format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message} | {extra}",
                filter=log_filter,
                serialize=serialize,
            )
        )
    return handler_ids
