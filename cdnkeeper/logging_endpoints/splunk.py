"""Splunk logging endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from cdnkeeper.encoding import Compatibool
from cdnkeeper.logging_endpoints import _base

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "Splunk",
    "SplunkInput",
    "list_splunk_endpoints",
    "create_splunk_endpoint",
    "get_splunk_endpoint",
    "update_splunk_endpoint",
    "delete_splunk_endpoint",
]

KIND = "splunk"


class Splunk(_base.LoggingEndpoint):
    """A Splunk HTTP Event Collector logging endpoint."""

    url: Optional[str] = None

    token: Optional[str] = None
    """HTTP Event Collector token."""

    use_tls: Optional[Compatibool] = None

    request_max_bytes: Optional[int] = None

    request_max_entries: Optional[int] = None

    tls_ca_cert: Optional[str] = None

    tls_client_cert: Optional[str] = None

    tls_client_key: Optional[str] = None

    tls_hostname: Optional[str] = None


class SplunkInput(_base.LoggingInput):
    url: Optional[str] = None

    token: Optional[str] = None

    use_tls: Optional[Compatibool] = None

    request_max_bytes: Optional[int] = None

    request_max_entries: Optional[int] = None

    tls_ca_cert: Optional[str] = None

    tls_client_cert: Optional[str] = None

    tls_client_key: Optional[str] = None

    tls_hostname: Optional[str] = None


def list_splunk_endpoints(
    client: Client, service_id: str, service_version: int
) -> List[Splunk]:
    return _base.list_endpoints(
        client, Splunk, KIND, service_id, service_version
    )


def create_splunk_endpoint(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> Splunk:
    return _base.create_endpoint(
        client,
        Splunk,
        SplunkInput,
        KIND,
        service_id,
        service_version,
        fields,
    )


def get_splunk_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> Splunk:
    return _base.get_endpoint(
        client, Splunk, KIND, service_id, service_version, name
    )


def update_splunk_endpoint(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> Splunk:
    return _base.update_endpoint(
        client,
        Splunk,
        SplunkInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_splunk_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _base.delete_endpoint(client, KIND, service_id, service_version, name)
