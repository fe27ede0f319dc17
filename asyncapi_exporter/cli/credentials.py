"""Solace Cloud token resolution"""

import os
from pathlib import Path
from typing import Iterable, Mapping, Optional

from asyncapi_exporter.core.logger import Logger
from asyncapi_exporter.exceptions import (
    MissingTokenError,
    SecretFileNotFoundError,
    SecretFileUnreadableError,
)

DEFAULT_TOKEN_ENV_VARS = ("SOLACE_CLOUD_TOKEN", "CLI_SOLACE_CLOUD_TOKEN")


def resolve_token(
    logger: Logger,
    token: Optional[str] = None,
    secret_file: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
    env_vars: Iterable[str] = DEFAULT_TOKEN_ENV_VARS,
) -> str:
    """
    Find the Solace Cloud token.

    Precedence: secret file, then the token option, then the first
    environment variable in env_vars that is set.

    Raises:
        SecretFileNotFoundError: secret_file does not exist
        SecretFileUnreadableError: secret_file cannot be read as UTF-8 text
        MissingTokenError: no source provided a token
    """
    environ = os.environ if environ is None else environ

    resolved = next((environ[name] for name in env_vars if environ.get(name)), None)

    if token:
        resolved = token
        logger.debug("Using Solace Cloud Token from command line option")

    if secret_file:
        path = Path(secret_file).expanduser().resolve()
        if not path.is_file():
            raise SecretFileNotFoundError(secret_file)
        try:
            resolved = path.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as e:
            raise SecretFileUnreadableError(secret_file, str(e)) from e
        logger.debug("Using Solace Cloud Token from secret file: " + secret_file)

    if not resolved:
        raise MissingTokenError()
    return resolved
