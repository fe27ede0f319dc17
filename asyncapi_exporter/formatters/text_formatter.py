"""
Text formatter

Renders ``<timestamp> <LEVEL> [<label>]: <message>``, optionally with
ANSI colors.
"""

from abc import ABC, abstractmethod

from asyncapi_exporter.core.log_entry import LogEntry

DIM = "\033[2m"
BRIGHT = "\033[1m"
RESET = "\033[0m"


class BaseFormatter(ABC):
    """Converts a LogEntry into the line written to a stream, without its trailing args."""

    @abstractmethod
    def format(self, entry: LogEntry) -> str:
        pass

    def __call__(self, entry: LogEntry) -> str:
        return self.format(entry)


class TextFormatter(BaseFormatter):
    """
    Format log entries using a customizable template.

    Supports placeholders for the LogEntry fields.
    """

    DEFAULT_TEMPLATE = "{timestamp} {level} {scope} {message}"

    def __init__(self, template: str = None, colored: bool = False):
        """
        Initialize text formatter.

        Args:
            template: Format template with placeholders.
                     Available placeholders:
                     - {timestamp}: ISO-8601 UTC timestamp
                     - {level}: Upper-case level name
                     - {label}: Logger label
                     - {scope}: Label rendered as "[label]:"
                     - {message}: Log message
            colored: Wrap timestamp, level and scope in ANSI codes

        Example:
            # Default format
            formatter = TextFormatter()

            # Without timestamps
            formatter = TextFormatter("{level} {scope} {message}")
        """
        self.template = template or self.DEFAULT_TEMPLATE
        self.colored = colored

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry using the template.

        Args:
            entry: Log entry to format

        Returns:
            Formatted string
        """
        timestamp = entry.iso_timestamp
        level = entry.level.value.upper()
        scope = f"[{entry.label}]:"

        if self.colored:
            timestamp = f"{DIM}{timestamp}{RESET}"
            level = f"{entry.level.color_code}{level}{entry.level.reset_code}"
            scope = f"{BRIGHT}{scope}{RESET}"

        format_dict = {
            "timestamp": timestamp,
            "level": level,
            "label": entry.label,
            "scope": scope,
            "message": entry.message,
        }

        try:
            return self.template.format(**format_dict)
        except KeyError as e:
            # Fallback if template has unknown placeholder
            return f"[FORMAT ERROR: {e}] {entry.message}"

    def __repr__(self) -> str:
        """String representation."""
        return f"TextFormatter(template='{self.template}', colored={self.colored})"
