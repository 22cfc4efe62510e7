"""DigitalOcean Spaces logging endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from cdnkeeper.logging_endpoints import _base

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "DigitalOcean",
    "DigitalOceanInput",
    "list_digitalocean_endpoints",
    "create_digitalocean_endpoint",
    "get_digitalocean_endpoint",
    "update_digitalocean_endpoint",
    "delete_digitalocean_endpoint",
]

KIND = "digitalocean"


class DigitalOcean(_base.LoggingEndpoint):
    """A DigitalOcean Spaces logging endpoint."""

    bucket_name: Optional[str] = None

    domain: Optional[str] = None

    access_key: Optional[str] = None

    secret_key: Optional[str] = None

    path: Optional[str] = None

    period: Optional[int] = None

    gzip_level: Optional[int] = None

    compression_codec: Optional[str] = None

    message_type: Optional[str] = None

    timestamp_format: Optional[str] = None

    public_key: Optional[str] = None


class DigitalOceanInput(_base.LoggingInput):
    bucket_name: Optional[str] = None

    domain: Optional[str] = None

    access_key: Optional[str] = None

    secret_key: Optional[str] = None

    path: Optional[str] = None

    period: Optional[int] = None

    gzip_level: Optional[int] = None

    compression_codec: Optional[str] = None

    message_type: Optional[str] = None

    timestamp_format: Optional[str] = None

    public_key: Optional[str] = None


def list_digitalocean_endpoints(
    client: Client, service_id: str, service_version: int
) -> List[DigitalOcean]:
    return _base.list_endpoints(
        client, DigitalOcean, KIND, service_id, service_version
    )


def create_digitalocean_endpoint(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> DigitalOcean:
    return _base.create_endpoint(
        client,
        DigitalOcean,
        DigitalOceanInput,
        KIND,
        service_id,
        service_version,
        fields,
    )


def get_digitalocean_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> DigitalOcean:
    return _base.get_endpoint(
        client, DigitalOcean, KIND, service_id, service_version, name
    )


def update_digitalocean_endpoint(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> DigitalOcean:
    return _base.update_endpoint(
        client,
        DigitalOcean,
        DigitalOceanInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_digitalocean_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _base.delete_endpoint(client, KIND, service_id, service_version, name)
