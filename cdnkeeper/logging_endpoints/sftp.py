"""SFTP logging endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from cdnkeeper.logging_endpoints import _base

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "SFTP",
    "SFTPInput",
    "list_sftp_endpoints",
    "create_sftp_endpoint",
    "get_sftp_endpoint",
    "update_sftp_endpoint",
    "delete_sftp_endpoint",
]

KIND = "sftp"


class SFTP(_base.LoggingEndpoint):
    """An SFTP logging endpoint."""

    address: Optional[str] = None

    port: Optional[int] = None

    user: Optional[str] = None

    password: Optional[str] = None

    secret_key: Optional[str] = None

    ssh_known_hosts: Optional[str] = None

    path: Optional[str] = None

    period: Optional[int] = None

    gzip_level: Optional[int] = None

    compression_codec: Optional[str] = None

    message_type: Optional[str] = None

    timestamp_format: Optional[str] = None

    public_key: Optional[str] = None


class SFTPInput(_base.LoggingInput):
    address: Optional[str] = None

    port: Optional[int] = None

    user: Optional[str] = None

    password: Optional[str] = None

    secret_key: Optional[str] = None

    ssh_known_hosts: Optional[str] = None

    path: Optional[str] = None

    period: Optional[int] = None

    gzip_level: Optional[int] = None

    compression_codec: Optional[str] = None

    message_type: Optional[str] = None

    timestamp_format: Optional[str] = None

    public_key: Optional[str] = None


def list_sftp_endpoints(
    client: Client, service_id: str, service_version: int
) -> List[SFTP]:
    return _base.list_endpoints(
        client, SFTP, KIND, service_id, service_version
    )


def create_sftp_endpoint(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> SFTP:
    return _base.create_endpoint(
        client,
        SFTP,
        SFTPInput,
        KIND,
        service_id,
        service_version,
        fields,
    )


def get_sftp_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> SFTP:
    return _base.get_endpoint(
        client, SFTP, KIND, service_id, service_version, name
    )


def update_sftp_endpoint(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> SFTP:
    return _base.update_endpoint(
        client,
        SFTP,
        SFTPInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_sftp_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _base.delete_endpoint(client, KIND, service_id, service_version, name)
