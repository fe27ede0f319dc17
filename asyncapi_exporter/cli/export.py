"""
Export command

Walks from an application domain down to one application or event API
version and writes its AsyncAPI document. Every step that was given as an
option skips its prompt.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from asyncapi_exporter.cli.output import write_output
from asyncapi_exporter.cli.prompts import Choice, Prompter, find_title
from asyncapi_exporter.client.event_portal import EventPortalClient
from asyncapi_exporter.core.logger import Logger

FORMATS = ("json", "yaml")
ASYNC_API_VERSIONS = ("2.0.0", "2.2.0", "2.5.0")
INCLUDED_EXTENSIONS = ("all", "parent", "version", "none")
SCHEMA_SOURCES = ("application", "event_api")

SCHEMA_SOURCE_CHOICES = [
    Choice(title="Application", value="application"),
    Choice(title="Event API", value="event_api"),
]


@dataclass
class ExportOptions:
    """Options of the export command."""

    format: str
    output: str
    async_api_version: Optional[str] = None
    included_extensions: Optional[str] = None
    shared: bool = False
    application_domain: Optional[str] = None
    schema_source: Optional[str] = None
    application: Optional[str] = None
    application_version: Optional[str] = None
    event_api: Optional[str] = None
    event_api_version: Optional[str] = None

    def __post_init__(self):
        if self.format not in FORMATS:
            raise ValueError(f"format must be one of {FORMATS}")
        if not self.output:
            raise ValueError("output must not be empty")


def _data(envelope: Optional[Dict[str, Any]]) -> Optional[List[Dict[str, Any]]]:
    if not envelope:
        return None
    return envelope.get("data")


def _count(envelope: Dict[str, Any]) -> Any:
    return ((envelope.get("meta") or {}).get("pagination") or {}).get("count")


class ExportCommand:
    """One run of the export flow."""

    def __init__(self, options: ExportOptions, client: EventPortalClient, prompter: Prompter, logger: Logger):
        self.options = options
        self.client = client
        self.prompter = prompter
        self.logger = logger.child(label="export")
        self.output_logger = logger.child(label="output")

    def run(self) -> Optional[Path]:
        """
        Execute the flow.

        Returns:
            Path of the written document, or None if the flow stopped early
        """
        domain_id = self._select_application_domain()
        if not domain_id:
            return None

        source = self._select_schema_source()
        if not source:
            return None

        if source == "application":
            schema = self._export_application(domain_id)
        elif source == "event_api":
            schema = self._export_event_api(domain_id)
        else:
            self.logger.error("Invalid schema source selected: " + str(source), {"source": source})
            return None

        if schema is None:
            return None

        content = json.dumps(schema) if self.options.format == "json" else str(schema)
        return write_output(content, self.options.output, self.output_logger)

    def _select_application_domain(self) -> Optional[str]:
        if self.options.application_domain:
            self.logger.debug(
                "Using application domain provided by flag.",
                {"application_domain": self.options.application_domain},
            )
            return self.options.application_domain

        envelope = self.client.get_application_domains()
        domains = _data(envelope)
        if domains is None:
            self.logger.error("No application domains found")
            return None
        self.logger.debug(
            f"Retrieved {_count(envelope)} application domains from Event Portal", envelope.get("meta")
        )

        choices = [Choice(d.get("name"), d.get("id"), d.get("description")) for d in domains]
        if not choices:
            self.logger.info("No application domains found", {"choices": choices})
            return None

        domain_id = self.prompter.autocomplete("Select an application domain", choices)
        self.logger.debug(f"Selected application domain: {find_title(choices, domain_id)}", {"id": domain_id})
        if not domain_id:
            self.logger.error("No application domain specified", {"application_domain": domain_id})
        return domain_id

    def _select_schema_source(self) -> Optional[str]:
        if self.options.schema_source:
            self.logger.debug(
                "Using schema source provided by flag.", {"schemaSource": self.options.schema_source}
            )
            return self.options.schema_source

        source = self.prompter.select(
            "Where do you want to export the AsyncAPI schema from?", SCHEMA_SOURCE_CHOICES
        )
        self.logger.debug(
            f"Selected schema source: {find_title(SCHEMA_SOURCE_CHOICES, source)}", {"source": source}
        )
        if not source:
            self.logger.error("No schema source specified", {"schema_source": source})
        return source

    def _async_api_params(self) -> Dict[str, Any]:
        return {
            "format": self.options.format,
            "async_api_version": self.options.async_api_version,
            "included_extensions": self.options.included_extensions,
        }

    def _export_application(self, domain_id: str) -> Optional[Any]:
        application_id = self.options.application
        if application_id:
            self.logger.debug("Using application provided by flag.", {"application": application_id})
        else:
            self.logger.debug("Retrieving applications for application domain", {"application_domain": domain_id})
            envelope = self.client.get_applications(domain_id)
            applications = _data(envelope)
            if applications is None:
                self.logger.error(
                    "Failed to retrieve applications for application domain", {"application_domain": domain_id}
                )
                return None
            self.logger.debug(
                f"Retrieved {_count(envelope)} applications from Event Portal",
                {"application_domain": domain_id, "meta": envelope.get("meta")},
            )

            choices = [Choice(a.get("name"), a.get("id")) for a in applications]
            if not choices:
                self.logger.info("No applications found", {"choices": choices})
                return None
            application_id = self.prompter.select("Select an application", choices)
            self.logger.debug(
                f"Selected application: {find_title(choices, application_id)}",
                {"id": application_id, "application_domain": domain_id},
            )
        if not application_id:
            self.logger.error("No application is specified", {"application": application_id})
            return None

        version_id = self.options.application_version
        if version_id:
            self.logger.debug("Using version ID for application provided by flag.", {"application": application_id})
        else:
            versions = _data(self.client.get_application_versions([application_id]))
            if versions is None:
                self.logger.error("Failed to retrieve application versions", {"application": [application_id]})
                return None

            choices = [Choice(v.get("version"), v.get("id"), v.get("description")) for v in versions]
            if not choices:
                self.logger.info("No application versions found", {"choices": choices})
                return None
            version_id = self.prompter.select("Select an application version to export", choices)
            self.logger.debug(
                f"Selected application version: {find_title(choices, version_id)}",
                {"id": version_id, "application_domain": domain_id, "application": application_id},
            )
        if not version_id:
            self.logger.error("No version ID for the application is specified", {"application": application_id})
            return None

        params = self._async_api_params()
        details = {**params, "application_version": version_id, "application": application_id}
        self.logger.debug("Retrieving AsyncAPI schema for application version", details)
        schema = self.client.get_async_api_for_application_version(version_id, **params)
        self.logger.debug("Retrieved AsyncAPI schema for application version", details)
        return schema

    def _export_event_api(self, domain_id: str) -> Optional[Any]:
        shared = self.options.shared
        event_api_id = self.options.event_api
        if event_api_id:
            self.logger.debug("Using Event API provided by flag.", {"eventApi": event_api_id})
        else:
            self.logger.debug("Retrieving Event APIs for application domain", {"application_domain": domain_id})
            event_apis = _data(self.client.get_event_apis([domain_id], shared=shared))
            if event_apis is None:
                self.logger.error(
                    "Failed to retrieve Event APIs for application domain",
                    {"application_domain": domain_id, "shared": shared},
                )
                return None

            choices = [Choice(e.get("name") or e.get("id"), e.get("id")) for e in event_apis]
            if not choices:
                self.logger.info(
                    "No Event APIs found for application domain", {"application_domain": domain_id, "shared": shared}
                )
                return None
            event_api_id = self.prompter.select("Select an Event API", choices)
            self.logger.debug(
                f"Selected Event API: {find_title(choices, event_api_id)}",
                {"id": event_api_id, "application_domain": domain_id},
            )
        if not event_api_id:
            self.logger.error("No Event API ID specified", {"eventApi": event_api_id})
            return None

        version_id = self.options.event_api_version
        if version_id:
            self.logger.debug("Using Event API Version ID provided by flag", {"eventApiVersion": version_id})
        else:
            versions = _data(self.client.get_event_api_versions([event_api_id]))
            if versions is None:
                self.logger.error("Failed to retrieve Event API versions", {"eventApi": event_api_id})
                return None

            choices = [Choice(v.get("version") or "", v.get("id"), v.get("description")) for v in versions]
            if not choices:
                self.logger.info("No Event API versions found", {"eventApi": event_api_id})
                return None
            version_id = self.prompter.select("Select an Event API version to export", choices)
            self.logger.debug(
                f"Selected Event API version: {find_title(choices, version_id)}",
                {"id": version_id, "application_domain": domain_id, "eventApi": event_api_id},
            )
        if not version_id:
            self.logger.error("No Event API Version ID specified", {"eventApi": event_api_id})
            return None

        params = self._async_api_params()
        details = {**params, "event_api_version": version_id}
        self.logger.debug("Retrieving AsyncAPI schema for event API version", details)
        schema = self.client.get_async_api_for_event_api_version(version_id, **params)
        self.logger.debug("Retrieved AsyncAPI schema for event API version", details)
        return schema


def run_export(options: ExportOptions, client: EventPortalClient, prompter: Prompter, logger: Logger) -> Optional[Path]:
    """Run the export flow; see ExportCommand.run."""
    return ExportCommand(options, client, prompter, logger).run()
