"""Logentries logging endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from cdnkeeper.encoding import Compatibool
from cdnkeeper.logging_endpoints import _base

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "Logentries",
    "LogentriesInput",
    "list_logentries_endpoints",
    "create_logentries_endpoint",
    "get_logentries_endpoint",
    "update_logentries_endpoint",
    "delete_logentries_endpoint",
]

KIND = "logentries"


class Logentries(_base.LoggingEndpoint):
    """A Logentries logging endpoint."""

    port: Optional[int] = None

    use_tls: Optional[Compatibool] = None

    token: Optional[str] = None

    region: Optional[str] = None


class LogentriesInput(_base.LoggingInput):
    port: Optional[int] = None

    use_tls: Optional[Compatibool] = None

    token: Optional[str] = None

    region: Optional[str] = None


def list_logentries_endpoints(
    client: Client, service_id: str, service_version: int
) -> List[Logentries]:
    return _base.list_endpoints(
        client, Logentries, KIND, service_id, service_version
    )


def create_logentries_endpoint(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> Logentries:
    return _base.create_endpoint(
        client,
        Logentries,
        LogentriesInput,
        KIND,
        service_id,
        service_version,
        fields,
    )


def get_logentries_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> Logentries:
    return _base.get_endpoint(
        client, Logentries, KIND, service_id, service_version, name
    )


def update_logentries_endpoint(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> Logentries:
    return _base.update_endpoint(
        client,
        Logentries,
        LogentriesInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_logentries_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _base.delete_endpoint(client, KIND, service_id, service_version, name)
