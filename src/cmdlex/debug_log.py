"""Debug logging captured into an in-memory ring buffer.

The CLI installs :class:`DebugLogHandler` on the root logger when ``--debug``
is given and dumps the buffer to stderr when the command finishes.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass

from cmdlex.limits import MAX_LOG_LINES, MAX_LOG_MESSAGE_LENGTH


@dataclass(slots=True)
class LogEntry:
    """A captured log entry."""

    group: str  # Level name (DEBUG, INFO, WARNING, ERROR, etc.)
    message: str
    timestamp: float


log_buffer: deque[LogEntry] = deque(maxlen=MAX_LOG_LINES)


class DebugLogHandler(logging.Handler):
    """Logging handler that captures logs to the debug buffer."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            if len(msg) > MAX_LOG_MESSAGE_LENGTH:
                msg = msg[:MAX_LOG_MESSAGE_LENGTH] + "... [truncated]"
            log_buffer.append(
                LogEntry(group=record.levelname, message=msg, timestamp=record.created)
            )
        except Exception:
            self.handleError(record)


_handler: DebugLogHandler | None = None


def setup_debug_logging(level: int = logging.DEBUG) -> None:
    """Attach the buffer handler to the ``cmdlex`` logger.

    This is idempotent - calling it again only updates the level.
    """
    global _handler

    package_logger = logging.getLogger("cmdlex")
    package_logger.setLevel(level)
    if _handler is not None:
        return

    _handler = DebugLogHandler()
    _handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    package_logger.addHandler(_handler)
    package_logger.debug("Debug logging initialized")


def teardown_debug_logging() -> None:
    """Detach the buffer handler, if installed."""
    global _handler

    if _handler is None:
        return
    package_logger = logging.getLogger("cmdlex")
    package_logger.removeHandler(_handler)
    package_logger.setLevel(logging.NOTSET)
    _handler = None


def clear_log_buffer() -> None:
    """Clear the log buffer."""
    log_buffer.clear()


def format_log_buffer() -> list[str]:
    """Return buffered entries as ``LEVEL message`` lines, oldest first."""
    return [f"{entry.group:<7} {entry.message}" for entry in log_buffer]
