"""Azure Blob Storage logging endpoints (``logging/azureblob``)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from cdnkeeper.logging_endpoints import _base

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "BlobStorage",
    "BlobStorageInput",
    "list_blob_storage_endpoints",
    "create_blob_storage_endpoint",
    "get_blob_storage_endpoint",
    "update_blob_storage_endpoint",
    "delete_blob_storage_endpoint",
]

KIND = "azureblob"


class BlobStorage(_base.LoggingEndpoint):
    """An Azure Blob Storage logging endpoint."""

    account_name: Optional[str] = None

    container: Optional[str] = None

    sas_token: Optional[str] = None
    """Shared access signature with write access to the container."""

    file_max_bytes: Optional[int] = None

    path: Optional[str] = None

    period: Optional[int] = None

    gzip_level: Optional[int] = None

    compression_codec: Optional[str] = None

    message_type: Optional[str] = None

    timestamp_format: Optional[str] = None

    public_key: Optional[str] = None


class BlobStorageInput(_base.LoggingInput):
    account_name: Optional[str] = None

    container: Optional[str] = None

    sas_token: Optional[str] = None

    file_max_bytes: Optional[int] = None

    path: Optional[str] = None

    period: Optional[int] = None

    gzip_level: Optional[int] = None

    compression_codec: Optional[str] = None

    message_type: Optional[str] = None

    timestamp_format: Optional[str] = None

    public_key: Optional[str] = None


def list_blob_storage_endpoints(
    client: Client, service_id: str, service_version: int
) -> List[BlobStorage]:
    return _base.list_endpoints(
        client, BlobStorage, KIND, service_id, service_version
    )


def create_blob_storage_endpoint(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> BlobStorage:
    return _base.create_endpoint(
        client,
        BlobStorage,
        BlobStorageInput,
        KIND,
        service_id,
        service_version,
        fields,
    )


def get_blob_storage_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> BlobStorage:
    return _base.get_endpoint(
        client, BlobStorage, KIND, service_id, service_version, name
    )


def update_blob_storage_endpoint(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> BlobStorage:
    return _base.update_endpoint(
        client,
        BlobStorage,
        BlobStorageInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_blob_storage_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _base.delete_endpoint(client, KIND, service_id, service_version, name)
