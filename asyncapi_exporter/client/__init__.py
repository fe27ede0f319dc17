"""Client module - Event Portal REST access"""

from asyncapi_exporter.client.event_portal import DEFAULT_BASE_URL, EventPortalClient

__all__ = ["EventPortalClient", "DEFAULT_BASE_URL"]
