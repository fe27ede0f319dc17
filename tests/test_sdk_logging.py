"""Tests for the SDK logging adapter"""

import pytest
from unittest.mock import Mock

from asyncapi_exporter import LogLevel, create_logger
from asyncapi_exporter.sdk_logging import SdkConsoleLogger, SdkLogLevel, map_to_sdk_log_level


@pytest.mark.parametrize(
    "level,expected",
    [
        (LogLevel.DEBUG, SdkLogLevel.DEBUG),
        (LogLevel.INFO, SdkLogLevel.INFO),
        (LogLevel.WARN, SdkLogLevel.WARN),
        (LogLevel.ERROR, SdkLogLevel.ERROR),
        (LogLevel.SILENT, SdkLogLevel.SILENT),
        ("Debug", SdkLogLevel.DEBUG),
        ("banana", SdkLogLevel.SILENT),
        (None, SdkLogLevel.SILENT),
    ],
)
def test_map_to_sdk_log_level(level, expected):
    assert map_to_sdk_log_level(level) is expected


class TestSdkConsoleLogger:
    """Test SdkConsoleLogger filtering and forwarding."""

    def make(self, level):
        sink = Mock()
        logger = create_logger(label="app", level="debug", sink=sink)
        return SdkConsoleLogger("app", level, logger=logger), sink

    def test_levels(self):
        sdk_logger, _ = self.make(SdkLogLevel.INFO)
        assert sdk_logger.get_log_level() == SdkLogLevel.INFO
        assert sdk_logger.set_log_level(SdkLogLevel.DEBUG) == SdkLogLevel.DEBUG

    def test_filters_on_sdk_scale(self):
        sdk_logger, sink = self.make(SdkLogLevel.WARN)

        sdk_logger.error("E1", "broken")
        sdk_logger.warn("W1", "careful")
        sdk_logger.info("I1", "hello")
        sdk_logger.debug("D1", "details")

        assert sink.call_count == 2
        sink.assert_any_call("error", "E1: broken")
        sink.assert_any_call("warn", "W1: careful")

    def test_silent_blocks_everything(self):
        sdk_logger, sink = self.make(SdkLogLevel.SILENT)

        sdk_logger.fatal_error("F", "dead")
        sdk_logger.error("E", "broken")

        sink.assert_not_called()

    def test_level_translation(self):
        sdk_logger, sink = self.make(SdkLogLevel.TRACE)

        sdk_logger.fatal_error("F", "x")
        sdk_logger.info("I", "x")
        sdk_logger.trace("T", "x")

        levels = [c[0][0] for c in sink.call_args_list]
        assert levels == [LogLevel.ERROR, LogLevel.INFO, LogLevel.DEBUG]

    def test_details_forwarded(self):
        sdk_logger, sink = self.make(SdkLogLevel.DEBUG)

        sdk_logger.debug("REQUEST", "GET /x", {"params": {}})

        sink.assert_called_once_with("debug", "REQUEST: GET /x", {"params": {}})

    def test_default_logger_label(self, capsys):
        sdk_logger = SdkConsoleLogger("asyncapi-export", SdkLogLevel.ERROR)

        sdk_logger.error("E", "broken")

        assert "[asyncapi-export]:" in capsys.readouterr().err
