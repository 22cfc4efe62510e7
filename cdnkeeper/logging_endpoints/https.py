"""Generic HTTPS logging endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from cdnkeeper.logging_endpoints import _base

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "HTTPS",
    "HTTPSInput",
    "list_https_endpoints",
    "create_https_endpoint",
    "get_https_endpoint",
    "update_https_endpoint",
    "delete_https_endpoint",
]

KIND = "https"


class HTTPS(_base.LoggingEndpoint):
    """An HTTPS logging endpoint."""

    url: Optional[str] = None

    method: Optional[str] = None

    content_type: Optional[str] = None

    header_name: Optional[str] = None

    header_value: Optional[str] = None

    json_format: Optional[str] = None
    """How JSON log lines are batched: ``0`` (none), ``1`` (array) or
    ``2`` (newline delimited).
    """

    message_type: Optional[str] = None

    request_max_bytes: Optional[int] = None

    request_max_entries: Optional[int] = None

    tls_ca_cert: Optional[str] = None

    tls_client_cert: Optional[str] = None

    tls_client_key: Optional[str] = None

    tls_hostname: Optional[str] = None


class HTTPSInput(_base.LoggingInput):
    url: Optional[str] = None

    method: Optional[str] = None

    content_type: Optional[str] = None

    header_name: Optional[str] = None

    header_value: Optional[str] = None

    json_format: Optional[str] = None

    message_type: Optional[str] = None

    request_max_bytes: Optional[int] = None

    request_max_entries: Optional[int] = None

    tls_ca_cert: Optional[str] = None

    tls_client_cert: Optional[str] = None

    tls_client_key: Optional[str] = None

    tls_hostname: Optional[str] = None


def list_https_endpoints(
    client: Client, service_id: str, service_version: int
) -> List[HTTPS]:
    return _base.list_endpoints(
        client, HTTPS, KIND, service_id, service_version
    )


def create_https_endpoint(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> HTTPS:
    return _base.create_endpoint(
        client,
        HTTPS,
        HTTPSInput,
        KIND,
        service_id,
        service_version,
        fields,
    )


def get_https_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> HTTPS:
    return _base.get_endpoint(
        client, HTTPS, KIND, service_id, service_version, name
    )


def update_https_endpoint(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> HTTPS:
    return _base.update_endpoint(
        client,
        HTTPS,
        HTTPSInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_https_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _base.delete_endpoint(client, KIND, service_id, service_version, name)
