"""Google BigQuery logging endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from cdnkeeper.logging_endpoints import _base

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "BigQuery",
    "BigQueryInput",
    "list_bigquery_endpoints",
    "create_bigquery_endpoint",
    "get_bigquery_endpoint",
    "update_bigquery_endpoint",
    "delete_bigquery_endpoint",
]

KIND = "bigquery"


class BigQuery(_base.LoggingEndpoint):
    """A Google BigQuery logging endpoint."""

    project_id: Optional[str] = None

    dataset: Optional[str] = None

    table: Optional[str] = None

    template_suffix: Optional[str] = None
    """BigQuery table name suffix template, such as ``%Y%m%d``."""

    user: Optional[str] = None

    secret_key: Optional[str] = None

    account_name: Optional[str] = None


class BigQueryInput(_base.LoggingInput):
    project_id: Optional[str] = None

    dataset: Optional[str] = None

    table: Optional[str] = None

    template_suffix: Optional[str] = None

    user: Optional[str] = None

    secret_key: Optional[str] = None

    account_name: Optional[str] = None


def list_bigquery_endpoints(
    client: Client, service_id: str, service_version: int
) -> List[BigQuery]:
    return _base.list_endpoints(
        client, BigQuery, KIND, service_id, service_version
    )


def create_bigquery_endpoint(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> BigQuery:
    return _base.create_endpoint(
        client,
        BigQuery,
        BigQueryInput,
        KIND,
        service_id,
        service_version,
        fields,
    )


def get_bigquery_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> BigQuery:
    return _base.get_endpoint(
        client, BigQuery, KIND, service_id, service_version, name
    )


def update_bigquery_endpoint(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> BigQuery:
    return _base.update_endpoint(
        client,
        BigQuery,
        BigQueryInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_bigquery_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _base.delete_endpoint(client, KIND, service_id, service_version, name)
