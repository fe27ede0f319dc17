"""CLI module - argument parsing, prompts and the export command"""

from asyncapi_exporter.cli.main import build_parser, main

__all__ = ["build_parser", "main"]
