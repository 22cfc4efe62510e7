"""Directors: groups of backends with a load-balancing policy.

Backends are attached to a director with
`cdnkeeper.resources.director_backend.create_director_backend`.
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Annotated, Any, List, Optional, Union

from pydantic import BeforeValidator

from cdnkeeper import _crud
from cdnkeeper._models import FormInput, VersionedResource
from cdnkeeper.encoding import known_member

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "DirectorType",
    "Director",
    "DirectorInput",
    "list_directors",
    "create_director",
    "get_director",
    "update_director",
    "delete_director",
]

KIND = "director"


class DirectorType(enum.IntEnum):
    """Load-balancing policy of a director."""

    RANDOM = 1

    ROUND_ROBIN = 2

    HASH = 3

    CLIENT = 4


_DirectorTypeCode = Annotated[
    Union[DirectorType, int], BeforeValidator(known_member(DirectorType))
]


class Director(VersionedResource):
    """A director in a service version."""

    name: Optional[str] = None

    comment: Optional[str] = None

    quorum: Optional[int] = None
    """Percentage of capacity that must be healthy for the director to be
    up.
    """

    retries: Optional[int] = None

    capacity: Optional[int] = None

    shield: Optional[str] = None

    type: Optional[_DirectorTypeCode] = None
    """Load-balancing policy. Codes without a `DirectorType` member are kept
    as plain integers.
    """

    backends: Optional[List[str]] = None
    """Names of the backends in the director."""


class DirectorInput(FormInput):
    name: Optional[str] = None

    comment: Optional[str] = None

    quorum: Optional[int] = None

    retries: Optional[int] = None

    capacity: Optional[int] = None

    shield: Optional[str] = None

    type: Optional[DirectorType] = None


def list_directors(
    client: Client, service_id: str, service_version: int
) -> List[Director]:
    return _crud.list_versioned(
        client, Director, KIND, service_id, service_version
    )


def create_director(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> Director:
    return _crud.create_versioned(
        client,
        Director,
        DirectorInput,
        KIND,
        service_id,
        service_version,
        fields,
    )


def get_director(
    client: Client, service_id: str, service_version: int, name: str
) -> Director:
    return _crud.get_versioned(
        client, Director, KIND, service_id, service_version, name
    )


def update_director(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> Director:
    return _crud.update_versioned(
        client,
        Director,
        DirectorInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_director(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _crud.delete_versioned(client, KIND, service_id, service_version, name)
