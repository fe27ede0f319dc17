"""
Log level lifecycle around a command

Global ``--verbose``/``--silent`` flags change the threshold of the root
logger and the SDK adapter before a command runs; both return to the
default threshold afterwards.
"""

from contextlib import contextmanager
from typing import Iterator

from asyncapi_exporter.core.log_level import LogLevel
from asyncapi_exporter.core.logger import Logger
from asyncapi_exporter.sdk_logging import SdkConsoleLogger, map_to_sdk_log_level


class LogLevelController:
    """Apply and restore log levels for one command execution."""

    def __init__(self, logger: Logger, sdk_logger: SdkConsoleLogger, default_level: LogLevel = LogLevel.ERROR):
        self.logger = logger
        self.sdk_logger = sdk_logger
        self.default_level = default_level

    def _apply(self, level: LogLevel) -> None:
        self.logger.set_log_level(level)
        self.sdk_logger.set_log_level(map_to_sdk_log_level(level))

    def before(self, verbose: bool = False, silent: bool = False) -> LogLevel:
        """Switch levels for the flags; silent overrules verbose."""
        if silent:
            self._apply(LogLevel.SILENT)
        elif verbose:
            self._apply(LogLevel.DEBUG)
        return self.logger.get_log_level()

    def after(self) -> LogLevel:
        """Restore the default threshold."""
        self._apply(self.default_level)
        return self.logger.get_log_level()

    @contextmanager
    def scope(self, verbose: bool = False, silent: bool = False) -> Iterator[LogLevel]:
        """
        Context manager form of before()/after().

        Example:
            with controller.scope(verbose=args.verbose, silent=args.silent):
                run_export(...)
        """
        level = self.before(verbose=verbose, silent=silent)
        try:
            yield level
        finally:
            self.after()
