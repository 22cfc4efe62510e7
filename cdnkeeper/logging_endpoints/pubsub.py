"""Google Cloud Pub/Sub logging endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from cdnkeeper.logging_endpoints import _base

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "Pubsub",
    "PubsubInput",
    "list_pubsub_endpoints",
    "create_pubsub_endpoint",
    "get_pubsub_endpoint",
    "update_pubsub_endpoint",
    "delete_pubsub_endpoint",
]

KIND = "pubsub"


class Pubsub(_base.LoggingEndpoint):
    """A Google Cloud Pub/Sub logging endpoint."""

    project_id: Optional[str] = None

    topic: Optional[str] = None

    user: Optional[str] = None

    secret_key: Optional[str] = None

    account_name: Optional[str] = None


class PubsubInput(_base.LoggingInput):
    project_id: Optional[str] = None

    topic: Optional[str] = None

    user: Optional[str] = None

    secret_key: Optional[str] = None

    account_name: Optional[str] = None


def list_pubsub_endpoints(
    client: Client, service_id: str, service_version: int
) -> List[Pubsub]:
    return _base.list_endpoints(
        client, Pubsub, KIND, service_id, service_version
    )


def create_pubsub_endpoint(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> Pubsub:
    return _base.create_endpoint(
        client,
        Pubsub,
        PubsubInput,
        KIND,
        service_id,
        service_version,
        fields,
    )


def get_pubsub_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> Pubsub:
    return _base.get_endpoint(
        client, Pubsub, KIND, service_id, service_version, name
    )


def update_pubsub_endpoint(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> Pubsub:
    return _base.update_endpoint(
        client,
        Pubsub,
        PubsubInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_pubsub_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _base.delete_endpoint(client, KIND, service_id, service_version, name)
