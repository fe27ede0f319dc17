"""
Log entry data structure
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Tuple

from asyncapi_exporter.core.log_level import LogLevel


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class LogEntry:
    """
    Log entry data structure.

    Contains all information about a single log call that passed the
    logger's gates and is about to be written.
    """

    level: LogLevel
    message: str
    label: str = "default"
    args: Tuple[Any, ...] = ()
    timestamp: datetime = field(default_factory=_utc_now)

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.message, str):
            self.message = str(self.message)
        self.args = tuple(self.args)

    @property
    def iso_timestamp(self) -> str:
        """Timestamp as ISO-8601 with millisecond precision and a Z suffix."""
        stamp = self.timestamp.astimezone(timezone.utc).isoformat(timespec="milliseconds")
        return stamp.replace("+00:00", "Z")

    def __str__(self) -> str:
        """String representation."""
        return f"{self.iso_timestamp} {self.level.value.upper()} [{self.label}]: {self.message}"
