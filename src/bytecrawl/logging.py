"""Session logging and audit trail.

Every game session keeps a bounded, in-memory record of what happened
to it: directories made and removed, files created and edited, and
commands that failed.  Nothing is written to disk; ``debug log`` is the
only way to read the record back.

Records are tagged with a severity (``LogLevel``) and the component
that produced them (``"fs"`` or ``"shell"``).  Once the buffer reaches
its capacity the oldest records are dropped first.
"""

from collections import deque
from dataclasses import dataclass
from enum import IntEnum

DEFAULT_CAPACITY = 1000


class LogLevel(IntEnum):
    """How serious an event is; higher is worse."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class LogEntry:
    """One event in the session log.

    Attributes:
        level: Severity of the event.
        message: What happened, e.g. ``"Created directory /vault"``.
        source: Which component reported it (``"fs"`` or ``"shell"``).

    """

    level: LogLevel
    message: str
    source: str

    def __str__(self) -> str:
        """Format as ``[LEVEL] source: message``."""
        return f"[{self.level.name}] {self.source}: {self.message}"


class Logger:
    """Bounded event buffer shared by a session's components."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        """Create an empty log that keeps at most *capacity* entries."""
        self._buffer: deque[LogEntry] = deque(maxlen=capacity)

    @property
    def entries(self) -> list[LogEntry]:
        """Return a copy of the retained entries, oldest first."""
        return list(self._buffer)

    def log(self, level: LogLevel, message: str, *, source: str) -> None:
        """Record an event, evicting the oldest one if the log is full."""
        self._buffer.append(LogEntry(level=level, message=message, source=source))

    def filter(
        self,
        *,
        min_level: LogLevel | None = None,
        source: str | None = None,
    ) -> list[LogEntry]:
        """Return the entries at or above *min_level* from *source*.

        Either criterion may be omitted to match everything.
        """
        return [
            entry
            for entry in self._buffer
            if (min_level is None or entry.level >= min_level)
            and (source is None or entry.source == source)
        ]

    def render(self, min_level: LogLevel = LogLevel.INFO) -> str:
        """Return the entries at or above *min_level*, one per line."""
        return "\n".join(str(entry) for entry in self.filter(min_level=min_level))

    def clear(self) -> None:
        """Forget every entry."""
        self._buffer.clear()
