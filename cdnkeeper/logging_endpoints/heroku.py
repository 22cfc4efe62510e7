"""Heroku log drain logging endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from cdnkeeper.logging_endpoints import _base

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "Heroku",
    "HerokuInput",
    "list_heroku_endpoints",
    "create_heroku_endpoint",
    "get_heroku_endpoint",
    "update_heroku_endpoint",
    "delete_heroku_endpoint",
]

KIND = "heroku"


class Heroku(_base.LoggingEndpoint):
    """A Heroku logging endpoint."""

    token: Optional[str] = None

    url: Optional[str] = None


class HerokuInput(_base.LoggingInput):
    token: Optional[str] = None

    url: Optional[str] = None


def list_heroku_endpoints(
    client: Client, service_id: str, service_version: int
) -> List[Heroku]:
    return _base.list_endpoints(
        client, Heroku, KIND, service_id, service_version
    )


def create_heroku_endpoint(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> Heroku:
    return _base.create_endpoint(
        client,
        Heroku,
        HerokuInput,
        KIND,
        service_id,
        service_version,
        fields,
    )


def get_heroku_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> Heroku:
    return _base.get_endpoint(
        client, Heroku, KIND, service_id, service_version, name
    )


def update_heroku_endpoint(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> Heroku:
    return _base.update_endpoint(
        client,
        Heroku,
        HerokuInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_heroku_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _base.delete_endpoint(client, KIND, service_id, service_version, name)
