"""Edge dictionaries: versioned key-value containers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from cdnkeeper import _crud
from cdnkeeper._models import FormInput, VersionedResource
from cdnkeeper.encoding import Compatibool

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "Dictionary",
    "DictionaryInput",
    "list_dictionaries",
    "create_dictionary",
    "get_dictionary",
    "update_dictionary",
    "delete_dictionary",
]

KIND = "dictionary"


class Dictionary(VersionedResource):
    """An edge dictionary in a service version."""

    id: Optional[str] = None

    name: Optional[str] = None

    write_only: Optional[Compatibool] = None


class DictionaryInput(FormInput):
    name: Optional[str] = None

    write_only: Optional[Compatibool] = None


def list_dictionaries(
    client: Client, service_id: str, service_version: int
) -> List[Dictionary]:
    return _crud.list_versioned(
        client, Dictionary, KIND, service_id, service_version
    )


def create_dictionary(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> Dictionary:
    return _crud.create_versioned(
        client,
        Dictionary,
        DictionaryInput,
        KIND,
        service_id,
        service_version,
        fields,
    )


def get_dictionary(
    client: Client, service_id: str, service_version: int, name: str
) -> Dictionary:
    return _crud.get_versioned(
        client, Dictionary, KIND, service_id, service_version, name
    )


def update_dictionary(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> Dictionary:
    return _crud.update_versioned(
        client,
        Dictionary,
        DictionaryInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_dictionary(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _crud.delete_versioned(client, KIND, service_id, service_version, name)
