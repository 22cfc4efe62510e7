"""Conditions: VCL expressions that control when other objects apply."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from cdnkeeper import _crud
from cdnkeeper._models import FormInput, VersionedResource

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "Condition",
    "ConditionInput",
    "list_conditions",
    "create_condition",
    "get_condition",
    "update_condition",
    "delete_condition",
]

KIND = "condition"


class Condition(VersionedResource):
    """A condition in a service version."""

    name: Optional[str] = None

    statement: Optional[str] = None

    type: Optional[str] = None

    priority: Optional[int] = None

    comment: Optional[str] = None


class ConditionInput(FormInput):
    name: Optional[str] = None

    statement: Optional[str] = None

    type: Optional[str] = None

    priority: Optional[int] = None

    comment: Optional[str] = None


def list_conditions(
    client: Client, service_id: str, service_version: int
) -> List[Condition]:
    return _crud.list_versioned(
        client, Condition, KIND, service_id, service_version
    )


def create_condition(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> Condition:
    return _crud.create_versioned(
        client,
        Condition,
        ConditionInput,
        KIND,
        service_id,
        service_version,
        fields,
    )


def get_condition(
    client: Client, service_id: str, service_version: int, name: str
) -> Condition:
    return _crud.get_versioned(
        client, Condition, KIND, service_id, service_version, name
    )


def update_condition(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> Condition:
    return _crud.update_versioned(
        client,
        Condition,
        ConditionInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_condition(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _crud.delete_versioned(client, KIND, service_id, service_version, name)
