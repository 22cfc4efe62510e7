"""Google Cloud Storage logging endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from cdnkeeper.logging_endpoints import _base

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "GCS",
    "GCSInput",
    "list_gcs_endpoints",
    "create_gcs_endpoint",
    "get_gcs_endpoint",
    "update_gcs_endpoint",
    "delete_gcs_endpoint",
]

KIND = "gcs"


class GCS(_base.LoggingEndpoint):
    """A Google Cloud Storage logging endpoint."""

    bucket_name: Optional[str] = None

    user: Optional[str] = None

    secret_key: Optional[str] = None

    account_name: Optional[str] = None

    path: Optional[str] = None

    period: Optional[int] = None

    gzip_level: Optional[int] = None

    compression_codec: Optional[str] = None

    message_type: Optional[str] = None

    timestamp_format: Optional[str] = None

    public_key: Optional[str] = None


class GCSInput(_base.LoggingInput):
    bucket_name: Optional[str] = None

    user: Optional[str] = None

    secret_key: Optional[str] = None

    account_name: Optional[str] = None

    path: Optional[str] = None

    period: Optional[int] = None

    gzip_level: Optional[int] = None

    compression_codec: Optional[str] = None

    message_type: Optional[str] = None

    timestamp_format: Optional[str] = None

    public_key: Optional[str] = None


def list_gcs_endpoints(
    client: Client, service_id: str, service_version: int
) -> List[GCS]:
    return _base.list_endpoints(
        client, GCS, KIND, service_id, service_version
    )


def create_gcs_endpoint(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> GCS:
    return _base.create_endpoint(
        client,
        GCS,
        GCSInput,
        KIND,
        service_id,
        service_version,
        fields,
    )


def get_gcs_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> GCS:
    return _base.get_endpoint(
        client, GCS, KIND, service_id, service_version, name
    )


def update_gcs_endpoint(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> GCS:
    return _base.update_endpoint(
        client,
        GCS,
        GCSInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_gcs_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _base.delete_endpoint(client, KIND, service_id, service_version, name)
