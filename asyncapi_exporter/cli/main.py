"""
Command-line entry point

One root logger is created here and passed to every collaborator; the
SDK adapter gets a matching level and both follow --verbose/--silent for
the duration of a command.
"""

import argparse
from typing import Callable, List, Mapping, Optional

from asyncapi_exporter import __version__
from asyncapi_exporter.cli.config import CLI_NAME, ROOT_LABEL, CliConfig
from asyncapi_exporter.cli.credentials import resolve_token
from asyncapi_exporter.cli.export import (
    ASYNC_API_VERSIONS,
    FORMATS,
    INCLUDED_EXTENSIONS,
    SCHEMA_SOURCES,
    ExportOptions,
    run_export,
)
from asyncapi_exporter.cli.hooks import LogLevelController
from asyncapi_exporter.cli.prompts import Prompter
from asyncapi_exporter.client.event_portal import EventPortalClient
from asyncapi_exporter.core.logger import Logger, create_logger
from asyncapi_exporter.exceptions import ExporterError, PromptCancelled
from asyncapi_exporter.sdk_logging import SdkConsoleLogger, map_to_sdk_log_level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=CLI_NAME,
        description="Export AsyncAPI documents from Solace Event Portal",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output")
    parser.add_argument(
        "--silent", action="store_true", help="Enable silent mode. This will overrule verbose"
    )
    parser.add_argument("--solace-cloud-token", help="Solace Cloud Token")
    parser.add_argument(
        "--secret-file", help="Path to an optional secret file which contains the Solace Cloud Token"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    export = subparsers.add_parser("export", help="Export an AsyncAPI document")
    export.add_argument("--format", choices=FORMATS, required=True)
    export.add_argument(
        "--output", "--out", required=True, help="Path to the output file (including filename)"
    )
    export.add_argument("--async-api-version", choices=ASYNC_API_VERSIONS)
    export.add_argument("--included-extensions", choices=INCLUDED_EXTENSIONS)
    export.add_argument(
        "--shared", action="store_true", help="Select shared Event API (only applicable for Event APIs)"
    )
    export.add_argument("--application-domain", help="ID of the desired application domain")
    export.add_argument("--schema-source", choices=SCHEMA_SOURCES, help="Source of the schema")
    export.add_argument(
        "--application",
        help="ID of the desired application. Will only be applied when --schema-source is application",
    )
    export.add_argument(
        "--application-version",
        help="Version ID of the desired application. Will only be applied when --schema-source is application",
    )
    export.add_argument(
        "--event-api",
        help="ID of the desired Event API. Will only be applied when --schema-source is event_api",
    )
    export.add_argument(
        "--event-api-version",
        help="Version ID of the desired Event API. Will only be applied when --schema-source is event_api",
    )
    export.set_defaults(handler=export_command)

    return parser


def export_command(args: argparse.Namespace, client: EventPortalClient, prompter: Prompter, logger: Logger) -> int:
    options = ExportOptions(
        format=args.format,
        output=args.output,
        async_api_version=args.async_api_version,
        included_extensions=args.included_extensions,
        shared=args.shared,
        application_domain=args.application_domain,
        schema_source=args.schema_source,
        application=args.application,
        application_version=args.application_version,
        event_api=args.event_api,
        event_api_version=args.event_api_version,
    )
    run_export(options, client, prompter, logger)
    return 0


def main(
    argv: Optional[List[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
    client_factory: Callable[..., EventPortalClient] = EventPortalClient,
    prompter: Optional[Prompter] = None,
    logger: Optional[Logger] = None,
) -> int:
    """
    Run the CLI.

    Returns:
        Exit status: 0 on success or cancelled selection, 1 on errors.
        argparse exits with 2 on usage errors.
    """
    config = CliConfig.from_env(environ)
    logger = logger or create_logger(label=ROOT_LABEL, level=config.default_log_level)
    sdk_logger = SdkConsoleLogger(CLI_NAME, map_to_sdk_log_level(config.default_log_level))
    controller = LogLevelController(logger, sdk_logger, default_level=config.default_log_level)

    args = build_parser().parse_args(argv)

    with controller.scope(verbose=args.verbose, silent=args.silent):
        try:
            token = resolve_token(
                logger,
                token=args.solace_cloud_token,
                secret_file=args.secret_file,
                environ=environ,
                env_vars=config.token_env_vars,
            )
            client = client_factory(token, base_url=config.base_url, sdk_logger=sdk_logger)
            logger.debug("EP Client initialized")
            try:
                return args.handler(args, client, prompter or Prompter(), logger)
            finally:
                client.close()
        except PromptCancelled:
            logger.warn("You can't exit the selection")
            return 0
        except ExporterError as e:
            logger.error(str(e))
            return 1


def run() -> None:
    raise SystemExit(main())
