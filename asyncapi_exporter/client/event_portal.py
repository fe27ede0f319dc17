"""
Event Portal REST client

Covers the read-only endpoints needed to locate a version and download
its AsyncAPI document.
"""

from typing import Any, Dict, Iterable, Optional, Union

import requests

from asyncapi_exporter.exceptions import EventPortalError
from asyncapi_exporter.sdk_logging import SdkConsoleLogger

DEFAULT_BASE_URL = "https://api.solace.cloud"
ARCHITECTURE_PATH = "/api/v2/architecture"


class EventPortalClient:
    """Thin wrapper around requests.Session for the Event Portal v2 API."""

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        sdk_logger: Optional[SdkConsoleLogger] = None,
        timeout: float = 30,
    ):
        """
        Initialize client.

        Args:
            token: Solace Cloud API token, sent as a bearer token
            base_url: API root (default: https://api.solace.cloud)
            session: Session to reuse (default: a new requests.Session)
            sdk_logger: Receives request/response traces at debug level
            timeout: Per-request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.sdk_logger = sdk_logger
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
        })

    def _trace(self, code: str, message: str, details: Optional[dict] = None) -> None:
        if self.sdk_logger is not None:
            self.sdk_logger.debug(code, message, details)

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> requests.Response:
        url = f"{self.base_url}{ARCHITECTURE_PATH}{path}"
        params = {k: v for k, v in (params or {}).items() if v is not None}
        self._trace("REQUEST", f"GET {url}", {"params": params})

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise EventPortalError(f"Request to {url} failed: {e}") from e

        self._trace("RESPONSE", f"GET {url} -> {response.status_code}")
        if not response.ok:
            raise EventPortalError(
                f"Event Portal returned {response.status_code} for {path}",
                status_code=response.status_code,
                body=response.text,
            )
        return response

    def _get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        response = self._get(path, params)
        try:
            return response.json()
        except ValueError as e:
            raise EventPortalError(
                f"Invalid JSON from {path}", status_code=response.status_code, body=response.text
            ) from e

    @staticmethod
    def _join(ids: Iterable[str]) -> str:
        return ",".join(ids)

    def get_application_domains(self) -> Dict[str, Any]:
        return self._get_json("/applicationDomains")

    def get_applications(self, application_domain_id: str) -> Dict[str, Any]:
        return self._get_json("/applications", {"applicationDomainId": application_domain_id})

    def get_application_versions(self, application_ids: Iterable[str]) -> Dict[str, Any]:
        return self._get_json("/applicationVersions", {"applicationIds": self._join(application_ids)})

    def get_event_apis(self, application_domain_ids: Iterable[str], shared: bool = False) -> Dict[str, Any]:
        params = {"applicationDomainIds": self._join(application_domain_ids)}
        if shared:
            params["shared"] = "true"
        return self._get_json("/eventApis", params)

    def get_event_api_versions(self, event_api_ids: Iterable[str]) -> Dict[str, Any]:
        return self._get_json("/eventApiVersions", {"eventApiIds": self._join(event_api_ids)})

    def _get_async_api(
        self,
        path: str,
        format: str,
        async_api_version: Optional[str],
        included_extensions: Optional[str],
    ) -> Union[Dict[str, Any], str]:
        params = {
            "format": format,
            "asyncApiVersion": async_api_version,
            "includedExtensions": included_extensions,
        }
        if format == "json":
            return self._get_json(path, params)
        return self._get(path, params).text

    def get_async_api_for_application_version(
        self,
        application_version_id: str,
        format: str = "json",
        async_api_version: Optional[str] = None,
        included_extensions: Optional[str] = None,
    ) -> Union[Dict[str, Any], str]:
        """
        Download the AsyncAPI document of an application version.

        Returns:
            Parsed document for format "json", raw text for "yaml"
        """
        return self._get_async_api(
            f"/applicationVersions/{application_version_id}/asyncApi",
            format, async_api_version, included_extensions,
        )

    def get_async_api_for_event_api_version(
        self,
        event_api_version_id: str,
        format: str = "json",
        async_api_version: Optional[str] = None,
        included_extensions: Optional[str] = None,
    ) -> Union[Dict[str, Any], str]:
        """
        Download the AsyncAPI document of an event API version.

        Returns:
            Parsed document for format "json", raw text for "yaml"
        """
        return self._get_async_api(
            f"/eventApiVersions/{event_api_version_id}/asyncApi",
            format, async_api_version, included_extensions,
        )

    def close(self):
        self.session.close()
