"""Loggly logging endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from cdnkeeper.logging_endpoints import _base

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "Loggly",
    "LogglyInput",
    "list_loggly_endpoints",
    "create_loggly_endpoint",
    "get_loggly_endpoint",
    "update_loggly_endpoint",
    "delete_loggly_endpoint",
]

KIND = "loggly"


class Loggly(_base.LoggingEndpoint):
    """A Loggly logging endpoint."""

    token: Optional[str] = None


class LogglyInput(_base.LoggingInput):
    token: Optional[str] = None


def list_loggly_endpoints(
    client: Client, service_id: str, service_version: int
) -> List[Loggly]:
    return _base.list_endpoints(
        client, Loggly, KIND, service_id, service_version
    )


def create_loggly_endpoint(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> Loggly:
    return _base.create_endpoint(
        client,
        Loggly,
        LogglyInput,
        KIND,
        service_id,
        service_version,
        fields,
    )


def get_loggly_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> Loggly:
    return _base.get_endpoint(
        client, Loggly, KIND, service_id, service_version, name
    )


def update_loggly_endpoint(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> Loggly:
    return _base.update_endpoint(
        client,
        Loggly,
        LogglyInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_loggly_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _base.delete_endpoint(client, KIND, service_id, service_version, name)
