"""OpenStack Swift logging endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from cdnkeeper.logging_endpoints import _base

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "Openstack",
    "OpenstackInput",
    "list_openstack_endpoints",
    "create_openstack_endpoint",
    "get_openstack_endpoint",
    "update_openstack_endpoint",
    "delete_openstack_endpoint",
]

KIND = "openstack"


class Openstack(_base.LoggingEndpoint):
    """An OpenStack logging endpoint."""

    url: Optional[str] = None

    access_key: Optional[str] = None

    bucket_name: Optional[str] = None

    user: Optional[str] = None

    path: Optional[str] = None

    period: Optional[int] = None

    gzip_level: Optional[int] = None

    compression_codec: Optional[str] = None

    message_type: Optional[str] = None

    timestamp_format: Optional[str] = None

    public_key: Optional[str] = None


class OpenstackInput(_base.LoggingInput):
    url: Optional[str] = None

    access_key: Optional[str] = None

    bucket_name: Optional[str] = None

    user: Optional[str] = None

    path: Optional[str] = None

    period: Optional[int] = None

    gzip_level: Optional[int] = None

    compression_codec: Optional[str] = None

    message_type: Optional[str] = None

    timestamp_format: Optional[str] = None

    public_key: Optional[str] = None


def list_openstack_endpoints(
    client: Client, service_id: str, service_version: int
) -> List[Openstack]:
    return _base.list_endpoints(
        client, Openstack, KIND, service_id, service_version
    )


def create_openstack_endpoint(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> Openstack:
    return _base.create_endpoint(
        client,
        Openstack,
        OpenstackInput,
        KIND,
        service_id,
        service_version,
        fields,
    )


def get_openstack_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> Openstack:
    return _base.get_endpoint(
        client, Openstack, KIND, service_id, service_version, name
    )


def update_openstack_endpoint(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> Openstack:
    return _base.update_endpoint(
        client,
        Openstack,
        OpenstackInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_openstack_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _base.delete_endpoint(client, KIND, service_id, service_version, name)
