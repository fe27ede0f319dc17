"""Tests for the Event Portal client"""

import pytest
import requests
from unittest.mock import MagicMock, Mock

from asyncapi_exporter.client import EventPortalClient
from asyncapi_exporter.exceptions import EventPortalError


def make_response(status_code=200, json_data=None, text=""):
    response = Mock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.text = text
    response.json.return_value = json_data
    return response


@pytest.fixture
def session():
    session = MagicMock()
    session.headers = {}
    session.get.return_value = make_response(json_data={"data": [], "meta": {}})
    return session


@pytest.fixture
def client(session):
    return EventPortalClient("tok", base_url="https://ep.example.com/", session=session)


class TestEventPortalClient:
    """Test request construction and error mapping."""

    def test_auth_header(self, client, session):
        assert session.headers["Authorization"] == "Bearer tok"

    def test_application_domains(self, client, session):
        assert client.get_application_domains() == {"data": [], "meta": {}}
        session.get.assert_called_once_with(
            "https://ep.example.com/api/v2/architecture/applicationDomains", params={}, timeout=30
        )

    def test_applications(self, client, session):
        client.get_applications("dom1")
        args, kwargs = session.get.call_args
        assert args[0].endswith("/api/v2/architecture/applications")
        assert kwargs["params"] == {"applicationDomainId": "dom1"}

    def test_application_versions(self, client, session):
        client.get_application_versions(["a1", "a2"])
        assert session.get.call_args[1]["params"] == {"applicationIds": "a1,a2"}

    def test_event_apis(self, client, session):
        client.get_event_apis(["dom1"])
        assert session.get.call_args[1]["params"] == {"applicationDomainIds": "dom1"}

        client.get_event_apis(["dom1"], shared=True)
        assert session.get.call_args[1]["params"] == {"applicationDomainIds": "dom1", "shared": "true"}

    def test_event_api_versions(self, client, session):
        client.get_event_api_versions(["e1"])
        assert session.get.call_args[1]["params"] == {"eventApiIds": "e1"}

    def test_async_api_json(self, client, session):
        session.get.return_value = make_response(json_data={"asyncapi": "2.5.0"})

        doc = client.get_async_api_for_application_version("v1", format="json", async_api_version="2.5.0")

        assert doc == {"asyncapi": "2.5.0"}
        args, kwargs = session.get.call_args
        assert args[0].endswith("/applicationVersions/v1/asyncApi")
        assert kwargs["params"] == {"format": "json", "asyncApiVersion": "2.5.0"}

    def test_async_api_yaml(self, client, session):
        session.get.return_value = make_response(text="asyncapi: 2.5.0\n")

        doc = client.get_async_api_for_event_api_version("ev1", format="yaml", included_extensions="none")

        assert doc == "asyncapi: 2.5.0\n"
        args, kwargs = session.get.call_args
        assert args[0].endswith("/eventApiVersions/ev1/asyncApi")
        assert kwargs["params"] == {"format": "yaml", "includedExtensions": "none"}

    def test_http_error(self, client, session):
        session.get.return_value = make_response(status_code=401, text="unauthorized")

        with pytest.raises(EventPortalError) as exc_info:
            client.get_application_domains()

        assert exc_info.value.status_code == 401
        assert exc_info.value.body == "unauthorized"

    def test_connection_error(self, client, session):
        session.get.side_effect = requests.ConnectionError("down")

        with pytest.raises(EventPortalError):
            client.get_application_domains()

    def test_invalid_json(self, client, session):
        response = make_response()
        response.json.side_effect = ValueError("no json")
        session.get.return_value = response

        with pytest.raises(EventPortalError):
            client.get_applications("dom1")

    def test_traces_requests(self, session):
        sdk_logger = Mock()
        client = EventPortalClient("tok", session=session, sdk_logger=sdk_logger)

        client.get_application_domains()

        codes = [c[0][0] for c in sdk_logger.debug.call_args_list]
        assert codes == ["REQUEST", "RESPONSE"]
