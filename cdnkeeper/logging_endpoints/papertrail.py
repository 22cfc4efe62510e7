"""Papertrail logging endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from cdnkeeper.logging_endpoints import _base

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "Papertrail",
    "PapertrailInput",
    "list_papertrail_endpoints",
    "create_papertrail_endpoint",
    "get_papertrail_endpoint",
    "update_papertrail_endpoint",
    "delete_papertrail_endpoint",
]

KIND = "papertrail"


class Papertrail(_base.LoggingEndpoint):
    """A Papertrail logging endpoint."""

    address: Optional[str] = None

    port: Optional[int] = None


class PapertrailInput(_base.LoggingInput):
    address: Optional[str] = None

    port: Optional[int] = None


def list_papertrail_endpoints(
    client: Client, service_id: str, service_version: int
) -> List[Papertrail]:
    return _base.list_endpoints(
        client, Papertrail, KIND, service_id, service_version
    )


def create_papertrail_endpoint(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> Papertrail:
    return _base.create_endpoint(
        client,
        Papertrail,
        PapertrailInput,
        KIND,
        service_id,
        service_version,
        fields,
    )


def get_papertrail_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> Papertrail:
    return _base.get_endpoint(
        client, Papertrail, KIND, service_id, service_version, name
    )


def update_papertrail_endpoint(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> Papertrail:
    return _base.update_endpoint(
        client,
        Papertrail,
        PapertrailInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_papertrail_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _base.delete_endpoint(client, KIND, service_id, service_version, name)
