"""Exceptions raised by the exporter outside the logging core"""

from typing import Optional


class ExporterError(Exception):
    """Base class for errors that end a command with exit status 1."""


class CredentialsError(ExporterError):
    """No usable Solace Cloud token."""


class MissingTokenError(CredentialsError):
    def __init__(self):
        super().__init__("No Solace Cloud Token found")


class SecretFileNotFoundError(CredentialsError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Secret file not found: {path}")


class SecretFileUnreadableError(CredentialsError):
    def __init__(self, path: str, reason: str = ""):
        self.path = path
        message = f"Secret file could not be read: {path}"
        super().__init__(f"{message} ({reason})" if reason else message)


class EventPortalError(ExporterError):
    """Request to the Event Portal API failed."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class PromptCancelled(Exception):
    """The user aborted an interactive selection."""
