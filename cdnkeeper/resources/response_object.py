"""Response objects: synthetic responses served from the edge."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from cdnkeeper import _crud
from cdnkeeper._models import FormInput, VersionedResource

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "ResponseObject",
    "ResponseObjectInput",
    "list_response_objects",
    "create_response_object",
    "get_response_object",
    "update_response_object",
    "delete_response_object",
]

KIND = "response_object"


class ResponseObject(VersionedResource):
    """A synthetic response in a service version."""

    name: Optional[str] = None

    status: Optional[int] = None

    response: Optional[str] = None

    content: Optional[str] = None

    content_type: Optional[str] = None

    cache_condition: Optional[str] = None

    request_condition: Optional[str] = None


class ResponseObjectInput(FormInput):
    name: Optional[str] = None

    status: Optional[int] = None

    response: Optional[str] = None

    content: Optional[str] = None

    content_type: Optional[str] = None

    cache_condition: Optional[str] = None

    request_condition: Optional[str] = None


def list_response_objects(
    client: Client, service_id: str, service_version: int
) -> List[ResponseObject]:
    return _crud.list_versioned(
        client, ResponseObject, KIND, service_id, service_version
    )


def create_response_object(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> ResponseObject:
    return _crud.create_versioned(
        client,
        ResponseObject,
        ResponseObjectInput,
        KIND,
        service_id,
        service_version,
        fields,
    )


def get_response_object(
    client: Client, service_id: str, service_version: int, name: str
) -> ResponseObject:
    return _crud.get_versioned(
        client, ResponseObject, KIND, service_id, service_version, name
    )


def update_response_object(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> ResponseObject:
    return _crud.update_versioned(
        client,
        ResponseObject,
        ResponseObjectInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_response_object(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _crud.delete_versioned(client, KIND, service_id, service_version, name)
