"""
In-memory log buffer for inspecting recent parser/CLI activity.

RingBufferLogHandler is a regular logging.Handler holding the most recent
records in a bounded deque. It is never installed globally; whoever wants
the buffer attaches it to a logger and owns it.

Usage:
    handler = RingBufferLogHandler(capacity=500)
    logging.getLogger("txleg_core").addHandler(handler)
    ...
    errors = handler.get_logs(level="ERROR", limit=20)
"""
import itertools
import logging
import threading
from collections import Counter, deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

DEFAULT_CAPACITY = 1000


@dataclass
class StoredLog:
    id: str
    timestamp: str
    level: str
    message: str
    logger_name: str
    data: dict[str, Any] = field(default_factory=dict)

    def matches(self, search_lower: str) -> bool:
        if search_lower in self.message.lower():
            return True
        return any(search_lower in str(v).lower() for v in self.data.values())


class RingBufferLogHandler(logging.Handler):
    """Bounded buffer of formatted log records; oldest records are dropped first."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY, level: int = logging.NOTSET):
        super().__init__(level)
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._records: deque[StoredLog] = deque(maxlen=capacity)
        self._ids = itertools.count(1)
        self._buffer_lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
        except Exception:
            self.handleError(record)
            return

        data = getattr(record, "data", None)
        entry = StoredLog(
            id=f"log_{next(self._ids)}",
            timestamp=datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            level=record.levelname,
            message=message,
            logger_name=record.name,
            data=dict(data) if isinstance(data, dict) else {},
        )
        with self._buffer_lock:
            self._records.append(entry)

    def get_logs(
        self,
        level: Optional[str] = None,
        search: Optional[str] = None,
        limit: Optional[int] = None,
        after: Optional[str] = None,
    ) -> list[StoredLog]:
        """
        Return stored logs, newest first.

        Args:
            level: Only this level name ("all" or None for every level)
            search: Case-insensitive substring of the message or extra data
            limit: Maximum number of entries returned
            after: Only entries logged after the entry with this id (for polling);
                ignored if the id is no longer in the buffer
        """
        with self._buffer_lock:
            result = list(self._records)

        if level and level.lower() != "all":
            result = [log for log in result if log.level == level.upper()]

        if search:
            search_lower = search.lower()
            result = [log for log in result if log.matches(search_lower)]

        if after:
            for index, log in enumerate(result):
                if log.id == after:
                    result = result[index + 1:]
                    break

        result.reverse()
        if limit:
            result = result[:limit]
        return result

    def clear(self) -> None:
        with self._buffer_lock:
            self._records.clear()

    def stats(self) -> dict[str, Any]:
        with self._buffer_lock:
            levels = Counter(log.level for log in self._records)
            total = len(self._records)
        return {"total": total, "by_level": dict(levels)}
