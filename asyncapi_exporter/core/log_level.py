"""
Log level enumeration

Severities are ordered by position, not by importance: ``info`` comes
first and ``debug`` last, so ``debug`` is the most permissive threshold.
"""

from enum import Enum
from typing import Any, Optional, Tuple


class LogLevel(str, Enum):
    """
    Log level enumeration.

    Declaration order is the filter order. Members compare equal to their
    lower-case names so they can be handed to sinks as plain strings.
    """

    SILENT = "silent"   # No output
    INFO = "info"       # Informational messages
    WARN = "warn"       # Warning messages
    ERROR = "error"     # Error messages
    DEBUG = "debug"     # Everything

    def __str__(self) -> str:
        """String representation of log level."""
        return self.value

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        level = cls.coerce(level_str)
        if level is None:
            raise ValueError(f"Invalid log level: {level_str}")
        return level

    @classmethod
    def coerce(cls, value: Any) -> Optional["LogLevel"]:
        """Return the matching LogLevel, or None if value is not one."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.lower())
        except ValueError:
            return None

    @property
    def position(self) -> int:
        """Index of this level in LOG_LEVELS."""
        return LOG_LEVELS.index(self)

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this level.

        Returns:
            ANSI escape sequence
        """
        colors = {
            LogLevel.DEBUG: "\033[36m",     # Cyan
            LogLevel.INFO: "\033[32m",      # Green
            LogLevel.WARN: "\033[33m",      # Yellow
            LogLevel.ERROR: "\033[31m",     # Red
        }
        return colors.get(self, "\033[0m")

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return "\033[0m"


LOG_LEVELS: Tuple[LogLevel, ...] = tuple(LogLevel)

DEFAULT_LOG_LEVEL = LogLevel.ERROR


def is_valid_log_level(level: Any) -> bool:
    """Check whether level names a severity, ignoring case."""
    return LogLevel.coerce(level) is not None


def should_publish_log(current_level: Any, level: Any) -> bool:
    """
    Decide whether a message at ``level`` passes the ``current_level`` threshold.

    Args:
        current_level: Threshold configured on the logger. Invalid values
                       are treated as DEFAULT_LOG_LEVEL.
        level: Severity of the message. Invalid values never pass.

    Returns:
        True if level sits at or before current_level in LOG_LEVELS
    """
    threshold = LogLevel.coerce(current_level) or DEFAULT_LOG_LEVEL
    message_level = LogLevel.coerce(level)
    if message_level is None:
        return False
    return message_level.position <= threshold.position
