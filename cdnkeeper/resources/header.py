"""Header manipulations.

Header rules set, append, delete or rewrite request and response headers at
a given point of request processing (see `HeaderType`).
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Annotated, Any, List, Optional, Union

from pydantic import BeforeValidator

from cdnkeeper import _crud
from cdnkeeper._models import FormInput, VersionedResource
from cdnkeeper.encoding import Compatibool, known_member

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "HeaderAction",
    "HeaderType",
    "Header",
    "HeaderInput",
    "list_headers",
    "create_header",
    "get_header",
    "update_header",
    "delete_header",
]

KIND = "header"


class HeaderAction(str, enum.Enum):
    """What a header rule does."""

    set = "set"

    append = "append"

    delete = "delete"

    regex = "regex"
    """Replace the first match of ``regex`` with ``substitution``."""

    regex_repeat = "regex_repeat"
    """Replace every match of ``regex`` with ``substitution``."""


class HeaderType(str, enum.Enum):
    """The stage of request processing a header rule applies to."""

    request = "request"

    fetch = "fetch"

    cache = "cache"

    response = "response"


_HeaderActionName = Annotated[
    Union[HeaderAction, str], BeforeValidator(known_member(HeaderAction))
]

_HeaderTypeName = Annotated[
    Union[HeaderType, str], BeforeValidator(known_member(HeaderType))
]


class Header(VersionedResource):
    """A header rule in a service version."""

    name: Optional[str] = None

    action: Optional[_HeaderActionName] = None

    type: Optional[_HeaderTypeName] = None

    dst: Optional[str] = None
    """Name of the header to set (such as ``http.X-Served-By``)."""

    src: Optional[str] = None
    """VCL expression the header value is taken from."""

    regex: Optional[str] = None

    substitution: Optional[str] = None

    ignore_if_set: Optional[Compatibool] = None

    priority: Optional[int] = None

    cache_condition: Optional[str] = None

    request_condition: Optional[str] = None

    response_condition: Optional[str] = None


class HeaderInput(FormInput):
    name: Optional[str] = None

    action: Optional[HeaderAction] = None

    type: Optional[HeaderType] = None

    dst: Optional[str] = None

    src: Optional[str] = None

    regex: Optional[str] = None

    substitution: Optional[str] = None

    ignore_if_set: Optional[Compatibool] = None

    priority: Optional[int] = None

    cache_condition: Optional[str] = None

    request_condition: Optional[str] = None

    response_condition: Optional[str] = None


def list_headers(
    client: Client, service_id: str, service_version: int
) -> List[Header]:
    return _crud.list_versioned(
        client, Header, KIND, service_id, service_version
    )


def create_header(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> Header:
    return _crud.create_versioned(
        client,
        Header,
        HeaderInput,
        KIND,
        service_id,
        service_version,
        fields,
    )


def get_header(
    client: Client, service_id: str, service_version: int, name: str
) -> Header:
    return _crud.get_versioned(
        client, Header, KIND, service_id, service_version, name
    )


def update_header(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> Header:
    return _crud.update_versioned(
        client,
        Header,
        HeaderInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_header(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _crud.delete_versioned(client, KIND, service_id, service_version, name)
