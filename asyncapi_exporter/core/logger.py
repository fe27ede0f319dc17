"""
Main Logger class - leveled, labeled logger with child derivation
"""

from __future__ import annotations
from typing import Any, Optional

from asyncapi_exporter.core.log_entry import LogEntry
from asyncapi_exporter.core.log_level import LogLevel, should_publish_log
from asyncapi_exporter.core.logger_config import LoggerConfig, Sink
from asyncapi_exporter.writers.console_writer import ConsoleWriter

# Default of Logger.child(sink=...): keep the parent's sink
_INHERIT: Any = object()


class Logger:
    """
    Leveled logger.

    Messages pass when their level sits at or before the current threshold
    in LOG_LEVELS. With a sink configured the raw ``(level, message, *args)``
    call goes to the sink; otherwise the entry is formatted and written to
    the console streams.

    A writer that fails (closed stream, broken pipe) does not raise into
    the caller; the entry is counted as dropped.
    """

    def __init__(self, config: Optional[LoggerConfig] = None, writer: Optional[Any] = None):
        self._config = config or LoggerConfig.default()
        self._level: LogLevel = self._config.level
        self._writer = writer or ConsoleWriter(colored=self._config.colored)
        self._metrics = {"logged": 0, "dropped": 0}

    @property
    def label(self) -> str:
        return self._config.label

    @property
    def enabled(self) -> bool:
        return self._config.enabled

    @property
    def sink(self) -> Optional[Sink]:
        return self._config.sink

    def get_log_level(self) -> LogLevel:
        """Return the current threshold."""
        return self._level

    def set_log_level(self, level: Any) -> LogLevel:
        """
        Change the threshold.

        Args:
            level: LogLevel or level name (case-insensitive)

        Returns:
            The threshold after the call. Invalid input leaves it unchanged
            and is reported at error level, subject to the usual gates.
        """
        new_level = LogLevel.coerce(level)
        if new_level is None:
            self.error(f"Invalid log level: {level}")
        else:
            self._level = new_level
        return self._level

    def log(self, level: Any, message: str, *args: Any) -> None:
        """Log a message at the given level."""
        level = LogLevel.coerce(level)
        if level is None or level is LogLevel.SILENT:
            return
        if not self.enabled or not should_publish_log(self._level, level):
            return

        if self.sink is not None:
            self.sink(level, message, *args)
            return

        try:
            self._writer.write(LogEntry(level=level, message=message, label=self.label, args=args))
        except Exception:
            self._metrics["dropped"] += 1
            return
        self._metrics["logged"] += 1

    def get_metrics(self) -> dict:
        """Get counts of written and dropped console entries."""
        return self._metrics.copy()

    def silent(self, message: str, *args: Any) -> None:
        """Accepted for symmetry; never produces output."""
        self.log(LogLevel.SILENT, message, *args)

    def info(self, message: str, *args: Any) -> None:
        """Log info message."""
        self.log(LogLevel.INFO, message, *args)

    def warn(self, message: str, *args: Any) -> None:
        """Log warning message."""
        self.log(LogLevel.WARN, message, *args)

    def error(self, message: str, *args: Any) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, message, *args)

    def debug(self, message: str, *args: Any) -> None:
        """Log debug message."""
        self.log(LogLevel.DEBUG, message, *args)

    def child(
        self,
        label: Optional[str] = None,
        level: Any = None,
        disabled: Optional[bool] = None,
        sink: Optional[Sink] = _INHERIT,
    ) -> "Logger":
        """
        Derive a new logger from this one.

        Args:
            label: Appended to this logger's label as "parent:label"
            level: Threshold of the child (default: this logger's current one)
            disabled: Disabled state (default: inherited)
            sink: Custom emit function (default: inherited); None removes
                  an inherited sink so the child writes to the console

        Returns:
            Independent Logger; later changes on either side do not propagate
        """
        config = LoggerConfig(
            label=f"{self.label}:{label}" if label else self.label,
            level=self._level if level is None else level,
            disabled=(not self.enabled) if disabled is None else disabled,
            sink=self.sink if sink is _INHERIT else sink,
            colored=self._config.colored,
        )
        return Logger(config, writer=self._writer)

    def __repr__(self) -> str:
        return f"Logger(label={self.label!r}, level={self._level.value!r}, enabled={self.enabled})"


def create_logger(
    label: str = "default",
    level: Any = LogLevel.ERROR,
    disabled: bool = False,
    sink: Optional[Sink] = None,
    colored: bool = True,
) -> Logger:
    """
    Create a root logger.

    Args:
        label: Scope shown in every line as "[label]:"
        level: Threshold; invalid values fall back to "error"
        disabled: Turn every emit call into a no-op
        sink: Custom ``sink(level, message, *args)`` replacing console output
        colored: Use ANSI colors for console output

    Example:
        logger = create_logger(label="cli", level="info")
        export_logger = logger.child(label="export")
        export_logger.info("Output written to: schema.json")
    """
    return Logger(LoggerConfig(label=label, level=level, disabled=disabled, sink=sink, colored=colored))
