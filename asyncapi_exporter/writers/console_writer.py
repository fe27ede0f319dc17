"""Console writer routing each severity to its stream"""

import sys
from typing import Optional, TextIO

from asyncapi_exporter.core.log_entry import LogEntry
from asyncapi_exporter.core.log_level import LogLevel
from asyncapi_exporter.formatters.text_formatter import BaseFormatter, TextFormatter


class ConsoleWriter:
    """Write logs to stdout/stderr with optional colors."""

    def __init__(
        self,
        colored: bool = True,
        stream: Optional[TextIO] = None,
        warn_stream: Optional[TextIO] = None,
        error_stream: Optional[TextIO] = None,
        formatter: Optional[BaseFormatter] = None,
    ):
        """
        Initialize console writer.

        Args:
            colored: Use ANSI color codes (ignored when formatter is given)
            stream: Output stream for info/debug (default: sys.stdout)
            warn_stream: Output stream for warn (default: sys.stderr)
            error_stream: Output stream for error (default: sys.stderr)
            formatter: Log formatter (default: TextFormatter)

        Streams left as None are looked up on every write so that
        redirections of sys.stdout/sys.stderr are honored.
        """
        self.colored = colored
        self._stream = stream
        self._warn_stream = warn_stream
        self._error_stream = error_stream
        self.formatter = formatter or TextFormatter(colored=colored)

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stdout

    @property
    def warn_stream(self) -> TextIO:
        return self._warn_stream or sys.stderr

    @property
    def error_stream(self) -> TextIO:
        return self._error_stream or sys.stderr

    def stream_for(self, level: LogLevel) -> Optional[TextIO]:
        """Return the destination stream for level, or None for silent."""
        if level is LogLevel.SILENT:
            return None
        if level is LogLevel.ERROR:
            return self.error_stream
        if level is LogLevel.WARN:
            return self.warn_stream
        return self.stream

    def write(self, entry: LogEntry):
        """Write log entry to console."""
        target = self.stream_for(entry.level)
        if target is None:
            return

        msg = self.formatter.format(entry)
        # Trailing arguments are handed to print() as-is
        print(msg, *entry.args, file=target)
        target.flush()
