"""Gzip compression settings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from cdnkeeper import _crud
from cdnkeeper._models import FormInput, VersionedResource

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "Gzip",
    "GzipInput",
    "list_gzips",
    "create_gzip",
    "get_gzip",
    "update_gzip",
    "delete_gzip",
]

KIND = "gzip"


class Gzip(VersionedResource):
    """A gzip configuration in a service version."""

    name: Optional[str] = None

    content_types: Optional[str] = None

    extensions: Optional[str] = None

    cache_condition: Optional[str] = None


class GzipInput(FormInput):
    name: Optional[str] = None

    content_types: Optional[str] = None

    extensions: Optional[str] = None

    cache_condition: Optional[str] = None


def list_gzips(
    client: Client, service_id: str, service_version: int
) -> List[Gzip]:
    return _crud.list_versioned(
        client, Gzip, KIND, service_id, service_version
    )


def create_gzip(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> Gzip:
    return _crud.create_versioned(
        client,
        Gzip,
        GzipInput,
        KIND,
        service_id,
        service_version,
        fields,
    )


def get_gzip(
    client: Client, service_id: str, service_version: int, name: str
) -> Gzip:
    return _crud.get_versioned(
        client, Gzip, KIND, service_id, service_version, name
    )


def update_gzip(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> Gzip:
    return _crud.update_versioned(
        client,
        Gzip,
        GzipInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_gzip(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _crud.delete_versioned(client, KIND, service_id, service_version, name)
