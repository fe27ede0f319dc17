"""Formatters module - Log message formatting"""

from asyncapi_exporter.formatters.text_formatter import BaseFormatter, TextFormatter

__all__ = ["BaseFormatter", "TextFormatter"]
