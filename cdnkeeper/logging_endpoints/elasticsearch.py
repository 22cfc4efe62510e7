"""Elasticsearch logging endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from cdnkeeper.logging_endpoints import _base

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "Elasticsearch",
    "ElasticsearchInput",
    "list_elasticsearch_endpoints",
    "create_elasticsearch_endpoint",
    "get_elasticsearch_endpoint",
    "update_elasticsearch_endpoint",
    "delete_elasticsearch_endpoint",
]

KIND = "elasticsearch"


class Elasticsearch(_base.LoggingEndpoint):
    """An Elasticsearch logging endpoint."""

    url: Optional[str] = None

    index: Optional[str] = None

    pipeline: Optional[str] = None

    user: Optional[str] = None

    password: Optional[str] = None

    request_max_bytes: Optional[int] = None

    request_max_entries: Optional[int] = None

    tls_ca_cert: Optional[str] = None

    tls_client_cert: Optional[str] = None

    tls_client_key: Optional[str] = None

    tls_hostname: Optional[str] = None


class ElasticsearchInput(_base.LoggingInput):
    url: Optional[str] = None

    index: Optional[str] = None

    pipeline: Optional[str] = None

    user: Optional[str] = None

    password: Optional[str] = None

    request_max_bytes: Optional[int] = None

    request_max_entries: Optional[int] = None

    tls_ca_cert: Optional[str] = None

    tls_client_cert: Optional[str] = None

    tls_client_key: Optional[str] = None

    tls_hostname: Optional[str] = None


def list_elasticsearch_endpoints(
    client: Client, service_id: str, service_version: int
) -> List[Elasticsearch]:
    return _base.list_endpoints(
        client, Elasticsearch, KIND, service_id, service_version
    )


def create_elasticsearch_endpoint(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> Elasticsearch:
    return _base.create_endpoint(
        client,
        Elasticsearch,
        ElasticsearchInput,
        KIND,
        service_id,
        service_version,
        fields,
    )


def get_elasticsearch_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> Elasticsearch:
    return _base.get_endpoint(
        client, Elasticsearch, KIND, service_id, service_version, name
    )


def update_elasticsearch_endpoint(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> Elasticsearch:
    return _base.update_endpoint(
        client,
        Elasticsearch,
        ElasticsearchInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_elasticsearch_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _base.delete_endpoint(client, KIND, service_id, service_version, name)
