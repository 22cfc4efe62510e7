"""FTP logging endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from cdnkeeper.logging_endpoints import _base

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "FTP",
    "FTPInput",
    "list_ftp_endpoints",
    "create_ftp_endpoint",
    "get_ftp_endpoint",
    "update_ftp_endpoint",
    "delete_ftp_endpoint",
]

KIND = "ftp"


class FTP(_base.LoggingEndpoint):
    """An FTP logging endpoint."""

    address: Optional[str] = None

    port: Optional[int] = None

    user: Optional[str] = None

    password: Optional[str] = None

    path: Optional[str] = None

    period: Optional[int] = None
    """Seconds between log file uploads."""

    gzip_level: Optional[int] = None

    compression_codec: Optional[str] = None

    message_type: Optional[str] = None

    timestamp_format: Optional[str] = None

    public_key: Optional[str] = None


class FTPInput(_base.LoggingInput):
    address: Optional[str] = None

    port: Optional[int] = None

    user: Optional[str] = None

    password: Optional[str] = None

    path: Optional[str] = None

    period: Optional[int] = None

    gzip_level: Optional[int] = None

    compression_codec: Optional[str] = None

    message_type: Optional[str] = None

    timestamp_format: Optional[str] = None

    public_key: Optional[str] = None


def list_ftp_endpoints(
    client: Client, service_id: str, service_version: int
) -> List[FTP]:
    return _base.list_endpoints(
        client, FTP, KIND, service_id, service_version
    )


def create_ftp_endpoint(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> FTP:
    return _base.create_endpoint(
        client,
        FTP,
        FTPInput,
        KIND,
        service_id,
        service_version,
        fields,
    )


def get_ftp_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> FTP:
    return _base.get_endpoint(
        client, FTP, KIND, service_id, service_version, name
    )


def update_ftp_endpoint(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> FTP:
    return _base.update_endpoint(
        client,
        FTP,
        FTPInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_ftp_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _base.delete_endpoint(client, KIND, service_id, service_version, name)
