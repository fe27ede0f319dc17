"""
Logger configuration management
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from asyncapi_exporter.core.log_level import DEFAULT_LOG_LEVEL, LogLevel

#: Custom emit function: ``sink(level, message, *args)``
Sink = Callable[..., None]

DEFAULT_LABEL = "default"


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    Invalid values are replaced by defaults instead of raising, so a
    misconfigured logger never takes the host process down.
    """

    label: str = DEFAULT_LABEL
    level: Any = DEFAULT_LOG_LEVEL
    disabled: bool = False
    sink: Optional[Sink] = None

    # Console settings
    colored: bool = True

    def __post_init__(self):
        """Normalize configuration after initialization."""
        self.level = LogLevel.coerce(self.level) or DEFAULT_LOG_LEVEL
        if not self.label:
            self.label = DEFAULT_LABEL
        self.disabled = bool(self.disabled)
        if self.sink is not None and not callable(self.sink):
            self.sink = None

    @property
    def enabled(self) -> bool:
        return not self.disabled

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls, label: str = DEFAULT_LABEL) -> "LoggerConfig":
        """Create configuration that lets every message through."""
        return cls(label=label, level=LogLevel.DEBUG)

    @classmethod
    def silent_config(cls, label: str = DEFAULT_LABEL) -> "LoggerConfig":
        """Create configuration that produces no output."""
        return cls(label=label, level=LogLevel.SILENT)
