"""In-memory activity log with separate informational and error channels."""

import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timezone

INFO = "info"
ERROR = "error"


@dataclass(frozen=True, slots=True)
class LogEntry:
    message: str
    timestamp: datetime
    level: str = INFO


class ActivityLog:
    """Append-only record of timestamped messages.

    One instance is built at application startup and handed to the components
    that need it. Every entry is also forwarded to a stdlib logger so it shows
    up in the regular log output.
    """

    def __init__(self, logger_name: str = "app.activity") -> None:
        self._entries: list[LogEntry] = []
        self._lock = threading.Lock()
        self._logger = logging.getLogger(logger_name)

    @property
    def entries(self) -> tuple[LogEntry, ...]:
        with self._lock:
            return tuple(self._entries)

    @property
    def count(self) -> int:
        with self._lock:
            return len(self._entries)

    def info(self, message: str) -> None:
        self._append(message, INFO)
        self._logger.info(message)

    def error(self, message: str) -> None:
        self._append(message, ERROR)
        self._logger.error(message)

    def _append(self, message: str, level: str) -> None:
        entry = LogEntry(message=message, timestamp=datetime.now(timezone.utc), level=level)
        with self._lock:
            self._entries.append(entry)
