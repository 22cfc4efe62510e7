"""Rackspace Cloud Files logging endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from cdnkeeper.logging_endpoints import _base

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "Cloudfiles",
    "CloudfilesInput",
    "list_cloudfiles_endpoints",
    "create_cloudfiles_endpoint",
    "get_cloudfiles_endpoint",
    "update_cloudfiles_endpoint",
    "delete_cloudfiles_endpoint",
]

KIND = "cloudfiles"


class Cloudfiles(_base.LoggingEndpoint):
    """A Rackspace Cloud Files logging endpoint."""

    access_key: Optional[str] = None

    bucket_name: Optional[str] = None

    region: Optional[str] = None

    user: Optional[str] = None

    path: Optional[str] = None

    period: Optional[int] = None

    gzip_level: Optional[int] = None

    compression_codec: Optional[str] = None

    message_type: Optional[str] = None

    timestamp_format: Optional[str] = None

    public_key: Optional[str] = None


class CloudfilesInput(_base.LoggingInput):
    access_key: Optional[str] = None

    bucket_name: Optional[str] = None

    region: Optional[str] = None

    user: Optional[str] = None

    path: Optional[str] = None

    period: Optional[int] = None

    gzip_level: Optional[int] = None

    compression_codec: Optional[str] = None

    message_type: Optional[str] = None

    timestamp_format: Optional[str] = None

    public_key: Optional[str] = None


def list_cloudfiles_endpoints(
    client: Client, service_id: str, service_version: int
) -> List[Cloudfiles]:
    return _base.list_endpoints(
        client, Cloudfiles, KIND, service_id, service_version
    )


def create_cloudfiles_endpoint(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> Cloudfiles:
    return _base.create_endpoint(
        client,
        Cloudfiles,
        CloudfilesInput,
        KIND,
        service_id,
        service_version,
        fields,
    )


def get_cloudfiles_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> Cloudfiles:
    return _base.get_endpoint(
        client, Cloudfiles, KIND, service_id, service_version, name
    )


def update_cloudfiles_endpoint(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> Cloudfiles:
    return _base.update_endpoint(
        client,
        Cloudfiles,
        CloudfilesInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_cloudfiles_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _base.delete_endpoint(client, KIND, service_id, service_version, name)
