"""Scalyr logging endpoints.

Creating an endpoint requires the Scalyr write ``token``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from cdnkeeper.logging_endpoints import _base

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "Scalyr",
    "ScalyrInput",
    "list_scalyr_endpoints",
    "create_scalyr_endpoint",
    "get_scalyr_endpoint",
    "update_scalyr_endpoint",
    "delete_scalyr_endpoint",
]

KIND = "scalyr"


class Scalyr(_base.LoggingEndpoint):
    """A Scalyr logging endpoint."""

    region: Optional[str] = None

    token: Optional[str] = None


class ScalyrInput(_base.LoggingInput):
    region: Optional[str] = None

    token: Optional[str] = None


def list_scalyr_endpoints(
    client: Client, service_id: str, service_version: int
) -> List[Scalyr]:
    return _base.list_endpoints(
        client, Scalyr, KIND, service_id, service_version
    )


def create_scalyr_endpoint(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> Scalyr:
    return _base.create_endpoint(
        client,
        Scalyr,
        ScalyrInput,
        KIND,
        service_id,
        service_version,
        fields,
        check=_base.require_token,
    )


def get_scalyr_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> Scalyr:
    return _base.get_endpoint(
        client, Scalyr, KIND, service_id, service_version, name
    )


def update_scalyr_endpoint(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> Scalyr:
    return _base.update_endpoint(
        client,
        Scalyr,
        ScalyrInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_scalyr_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _base.delete_endpoint(client, KIND, service_id, service_version, name)
