"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

AsyncAPI Exporter - export AsyncAPI documents from Solace Event Portal
with a small leveled logger
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from asyncapi_exporter.core.logger import Logger, create_logger
from asyncapi_exporter.core.log_entry import LogEntry
from asyncapi_exporter.core.log_level import (
    LOG_LEVELS,
    LogLevel,
    is_valid_log_level,
    should_publish_log,
)
from asyncapi_exporter.core.logger_config import LoggerConfig

# Import submodules (not all classes by default)
from asyncapi_exporter import formatters
from asyncapi_exporter import writers

__all__ = [
    "Logger",
    "create_logger",
    "LogEntry",
    "LogLevel",
    "LOG_LEVELS",
    "is_valid_log_level",
    "should_publish_log",
    "LoggerConfig",
    "formatters",
    "writers",
]
