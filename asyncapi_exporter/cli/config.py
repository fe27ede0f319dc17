"""CLI configuration"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from asyncapi_exporter.cli.credentials import DEFAULT_TOKEN_ENV_VARS
from asyncapi_exporter.client.event_portal import DEFAULT_BASE_URL
from asyncapi_exporter.core.log_level import LogLevel

CLI_NAME = "asyncapi-export"
ROOT_LABEL = "cli"


@dataclass
class CliConfig:
    """Settings the CLI reads before parsing arguments."""

    base_url: str = DEFAULT_BASE_URL
    default_log_level: LogLevel = LogLevel.ERROR
    # Checked in order; the first one set wins
    token_env_vars: Tuple[str, ...] = DEFAULT_TOKEN_ENV_VARS

    def __post_init__(self):
        self.default_log_level = LogLevel.from_string(self.default_log_level)
        if not self.base_url:
            raise ValueError("base_url must not be empty")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CliConfig":
        """Create configuration from environment variables."""
        environ = os.environ if environ is None else environ
        return cls(base_url=environ.get("EP_API_BASE_URL") or DEFAULT_BASE_URL)
