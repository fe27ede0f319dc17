"""Writers module - Log output handlers"""

from asyncapi_exporter.writers.console_writer import ConsoleWriter

__all__ = ["ConsoleWriter"]
