"""
Core module for logger system

This module contains the fundamental classes:
- Logger: Main logger class and the create_logger factory
- LogEntry: Log entry data structure
- LogLevel: Log level enumeration and the positional filter rule
- LoggerConfig: Configuration management
"""

from asyncapi_exporter.core.logger import Logger, create_logger
from asyncapi_exporter.core.log_entry import LogEntry
from asyncapi_exporter.core.log_level import (
    LOG_LEVELS,
    LogLevel,
    is_valid_log_level,
    should_publish_log,
)
from asyncapi_exporter.core.logger_config import LoggerConfig

__all__ = [
    "Logger",
    "create_logger",
    "LogEntry",
    "LogLevel",
    "LOG_LEVELS",
    "is_valid_log_level",
    "should_publish_log",
    "LoggerConfig",
]
