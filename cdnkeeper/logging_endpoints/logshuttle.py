"""Log Shuttle logging endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from cdnkeeper.logging_endpoints import _base

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "Logshuttle",
    "LogshuttleInput",
    "list_logshuttle_endpoints",
    "create_logshuttle_endpoint",
    "get_logshuttle_endpoint",
    "update_logshuttle_endpoint",
    "delete_logshuttle_endpoint",
]

KIND = "logshuttle"


class Logshuttle(_base.LoggingEndpoint):
    """A Log Shuttle logging endpoint."""

    token: Optional[str] = None

    url: Optional[str] = None


class LogshuttleInput(_base.LoggingInput):
    token: Optional[str] = None

    url: Optional[str] = None


def list_logshuttle_endpoints(
    client: Client, service_id: str, service_version: int
) -> List[Logshuttle]:
    return _base.list_endpoints(
        client, Logshuttle, KIND, service_id, service_version
    )


def create_logshuttle_endpoint(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> Logshuttle:
    return _base.create_endpoint(
        client,
        Logshuttle,
        LogshuttleInput,
        KIND,
        service_id,
        service_version,
        fields,
    )


def get_logshuttle_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> Logshuttle:
    return _base.get_endpoint(
        client, Logshuttle, KIND, service_id, service_version, name
    )


def update_logshuttle_endpoint(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> Logshuttle:
    return _base.update_endpoint(
        client,
        Logshuttle,
        LogshuttleInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_logshuttle_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _base.delete_endpoint(client, KIND, service_id, service_version, name)
