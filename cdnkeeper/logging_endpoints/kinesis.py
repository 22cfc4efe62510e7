"""Amazon Kinesis logging endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from cdnkeeper.logging_endpoints import _base

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "Kinesis",
    "KinesisInput",
    "list_kinesis_endpoints",
    "create_kinesis_endpoint",
    "get_kinesis_endpoint",
    "update_kinesis_endpoint",
    "delete_kinesis_endpoint",
]

KIND = "kinesis"


class Kinesis(_base.LoggingEndpoint):
    """An Amazon Kinesis logging endpoint."""

    topic: Optional[str] = None

    region: Optional[str] = None

    access_key: Optional[str] = None

    secret_key: Optional[str] = None

    iam_role: Optional[str] = None


class KinesisInput(_base.LoggingInput):
    topic: Optional[str] = None

    region: Optional[str] = None

    access_key: Optional[str] = None

    secret_key: Optional[str] = None

    iam_role: Optional[str] = None


def list_kinesis_endpoints(
    client: Client, service_id: str, service_version: int
) -> List[Kinesis]:
    return _base.list_endpoints(
        client, Kinesis, KIND, service_id, service_version
    )


def create_kinesis_endpoint(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> Kinesis:
    return _base.create_endpoint(
        client,
        Kinesis,
        KinesisInput,
        KIND,
        service_id,
        service_version,
        fields,
    )


def get_kinesis_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> Kinesis:
    return _base.get_endpoint(
        client, Kinesis, KIND, service_id, service_version, name
    )


def update_kinesis_endpoint(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> Kinesis:
    return _base.update_endpoint(
        client,
        Kinesis,
        KinesisInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_kinesis_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _base.delete_endpoint(client, KIND, service_id, service_version, name)
