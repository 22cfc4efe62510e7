"""Honeycomb logging endpoints.

Creating an endpoint requires the Honeycomb write key as ``token``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from cdnkeeper.logging_endpoints import _base

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "Honeycomb",
    "HoneycombInput",
    "list_honeycomb_endpoints",
    "create_honeycomb_endpoint",
    "get_honeycomb_endpoint",
    "update_honeycomb_endpoint",
    "delete_honeycomb_endpoint",
]

KIND = "honeycomb"


class Honeycomb(_base.LoggingEndpoint):
    """A Honeycomb logging endpoint."""

    dataset: Optional[str] = None

    token: Optional[str] = None


class HoneycombInput(_base.LoggingInput):
    dataset: Optional[str] = None

    token: Optional[str] = None


def list_honeycomb_endpoints(
    client: Client, service_id: str, service_version: int
) -> List[Honeycomb]:
    return _base.list_endpoints(
        client, Honeycomb, KIND, service_id, service_version
    )


def create_honeycomb_endpoint(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> Honeycomb:
    return _base.create_endpoint(
        client,
        Honeycomb,
        HoneycombInput,
        KIND,
        service_id,
        service_version,
        fields,
        check=_base.require_token,
    )


def get_honeycomb_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> Honeycomb:
    return _base.get_endpoint(
        client, Honeycomb, KIND, service_id, service_version, name
    )


def update_honeycomb_endpoint(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> Honeycomb:
    return _base.update_endpoint(
        client,
        Honeycomb,
        HoneycombInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_honeycomb_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _base.delete_endpoint(client, KIND, service_id, service_version, name)
