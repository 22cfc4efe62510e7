"""New Relic Logs logging endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from cdnkeeper.logging_endpoints import _base

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "NewRelic",
    "NewRelicInput",
    "list_newrelic_endpoints",
    "create_newrelic_endpoint",
    "get_newrelic_endpoint",
    "update_newrelic_endpoint",
    "delete_newrelic_endpoint",
]

KIND = "newrelic"


class NewRelic(_base.LoggingEndpoint):
    """A New Relic logging endpoint."""

    token: Optional[str] = None

    region: Optional[str] = None


class NewRelicInput(_base.LoggingInput):
    token: Optional[str] = None

    region: Optional[str] = None


def list_newrelic_endpoints(
    client: Client, service_id: str, service_version: int
) -> List[NewRelic]:
    return _base.list_endpoints(
        client, NewRelic, KIND, service_id, service_version
    )


def create_newrelic_endpoint(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> NewRelic:
    return _base.create_endpoint(
        client,
        NewRelic,
        NewRelicInput,
        KIND,
        service_id,
        service_version,
        fields,
    )


def get_newrelic_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> NewRelic:
    return _base.get_endpoint(
        client, NewRelic, KIND, service_id, service_version, name
    )


def update_newrelic_endpoint(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> NewRelic:
    return _base.update_endpoint(
        client,
        NewRelic,
        NewRelicInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_newrelic_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _base.delete_endpoint(client, KIND, service_id, service_version, name)
