"""Sumo Logic logging endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from cdnkeeper.logging_endpoints import _base

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "Sumologic",
    "SumologicInput",
    "list_sumologic_endpoints",
    "create_sumologic_endpoint",
    "get_sumologic_endpoint",
    "update_sumologic_endpoint",
    "delete_sumologic_endpoint",
]

KIND = "sumologic"


class Sumologic(_base.LoggingEndpoint):
    """A Sumo Logic logging endpoint."""

    url: Optional[str] = None

    address: Optional[str] = None

    message_type: Optional[str] = None


class SumologicInput(_base.LoggingInput):
    url: Optional[str] = None

    address: Optional[str] = None

    message_type: Optional[str] = None


def list_sumologic_endpoints(
    client: Client, service_id: str, service_version: int
) -> List[Sumologic]:
    return _base.list_endpoints(
        client, Sumologic, KIND, service_id, service_version
    )


def create_sumologic_endpoint(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> Sumologic:
    return _base.create_endpoint(
        client,
        Sumologic,
        SumologicInput,
        KIND,
        service_id,
        service_version,
        fields,
    )


def get_sumologic_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> Sumologic:
    return _base.get_endpoint(
        client, Sumologic, KIND, service_id, service_version, name
    )


def update_sumologic_endpoint(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> Sumologic:
    return _base.update_endpoint(
        client,
        Sumologic,
        SumologicInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_sumologic_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _base.delete_endpoint(client, KIND, service_id, service_version, name)
