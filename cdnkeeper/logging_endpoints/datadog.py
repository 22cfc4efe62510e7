"""Datadog logging endpoints.

Creating an endpoint requires the Datadog API ``token``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from cdnkeeper.logging_endpoints import _base

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "Datadog",
    "DatadogInput",
    "list_datadog_endpoints",
    "create_datadog_endpoint",
    "get_datadog_endpoint",
    "update_datadog_endpoint",
    "delete_datadog_endpoint",
]

KIND = "datadog"


class Datadog(_base.LoggingEndpoint):
    """A Datadog logging endpoint."""

    region: Optional[str] = None

    token: Optional[str] = None


class DatadogInput(_base.LoggingInput):
    region: Optional[str] = None

    token: Optional[str] = None


def list_datadog_endpoints(
    client: Client, service_id: str, service_version: int
) -> List[Datadog]:
    return _base.list_endpoints(
        client, Datadog, KIND, service_id, service_version
    )


def create_datadog_endpoint(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> Datadog:
    return _base.create_endpoint(
        client,
        Datadog,
        DatadogInput,
        KIND,
        service_id,
        service_version,
        fields,
        check=_base.require_token,
    )


def get_datadog_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> Datadog:
    return _base.get_endpoint(
        client, Datadog, KIND, service_id, service_version, name
    )


def update_datadog_endpoint(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> Datadog:
    return _base.update_endpoint(
        client,
        Datadog,
        DatadogInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_datadog_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _base.delete_endpoint(client, KIND, service_id, service_version, name)
