"""
Event Portal SDK logging adapter

The SDK side uses its own numeric severity scale where lower numbers are
more severe and a message passes when ``level <= threshold``.
"""

from enum import IntEnum
from typing import Any, Optional

from asyncapi_exporter.core.log_level import LogLevel
from asyncapi_exporter.core.logger import Logger, create_logger


class SdkLogLevel(IntEnum):
    """Severity scale of the Event Portal SDK logger."""

    SILENT = 0
    FATAL_ERROR = 1
    ERROR = 2
    WARN = 3
    INFO = 4
    DEBUG = 5
    TRACE = 6


def map_to_sdk_log_level(level: Any) -> SdkLogLevel:
    """Translate a LogLevel (or its name) to the SDK scale."""
    level = LogLevel.coerce(level)
    if level is LogLevel.DEBUG:
        return SdkLogLevel.DEBUG
    if level is LogLevel.INFO:
        return SdkLogLevel.INFO
    if level is LogLevel.WARN:
        return SdkLogLevel.WARN
    if level is LogLevel.ERROR:
        return SdkLogLevel.ERROR
    return SdkLogLevel.SILENT


def _to_log_level(level: SdkLogLevel) -> LogLevel:
    if level <= SdkLogLevel.ERROR:
        return LogLevel.ERROR
    if level == SdkLogLevel.WARN:
        return LogLevel.WARN
    if level == SdkLogLevel.INFO:
        return LogLevel.INFO
    return LogLevel.DEBUG


class SdkConsoleLogger:
    """
    Console logger handed to the SDK layer.

    Filtering happens on the SDK scale; emitted lines go through a Logger
    labelled with the application name that lets everything through.
    """

    def __init__(
        self,
        app_name: str,
        log_level: SdkLogLevel = SdkLogLevel.INFO,
        logger: Optional[Logger] = None,
    ):
        self.app_name = app_name
        self._log_level = SdkLogLevel(log_level)
        self._logger = logger or create_logger(label=app_name, level=LogLevel.DEBUG)

    def get_log_level(self) -> SdkLogLevel:
        return self._log_level

    def set_log_level(self, log_level: SdkLogLevel) -> SdkLogLevel:
        self._log_level = SdkLogLevel(log_level)
        return self._log_level

    def is_enabled_for(self, level: SdkLogLevel) -> bool:
        return self._log_level != SdkLogLevel.SILENT and level <= self._log_level

    def log(self, level: SdkLogLevel, code: str, message: str, details: Optional[dict] = None) -> None:
        if level == SdkLogLevel.SILENT or not self.is_enabled_for(level):
            return
        args = (details,) if details else ()
        self._logger.log(_to_log_level(level), f"{code}: {message}", *args)

    def fatal_error(self, code: str, message: str, details: Optional[dict] = None) -> None:
        self.log(SdkLogLevel.FATAL_ERROR, code, message, details)

    def error(self, code: str, message: str, details: Optional[dict] = None) -> None:
        self.log(SdkLogLevel.ERROR, code, message, details)

    def warn(self, code: str, message: str, details: Optional[dict] = None) -> None:
        self.log(SdkLogLevel.WARN, code, message, details)

    def info(self, code: str, message: str, details: Optional[dict] = None) -> None:
        self.log(SdkLogLevel.INFO, code, message, details)

    def debug(self, code: str, message: str, details: Optional[dict] = None) -> None:
        self.log(SdkLogLevel.DEBUG, code, message, details)

    def trace(self, code: str, message: str, details: Optional[dict] = None) -> None:
        self.log(SdkLogLevel.TRACE, code, message, details)

    def __repr__(self) -> str:
        return f"SdkConsoleLogger(app_name={self.app_name!r}, log_level={self._log_level.name})"
