"""Access control lists."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from cdnkeeper import _crud
from cdnkeeper._models import FormInput, VersionedResource

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "ACL",
    "ACLInput",
    "list_acls",
    "create_acl",
    "get_acl",
    "update_acl",
    "delete_acl",
]

KIND = "acl"


class ACL(VersionedResource):
    """An access control list in a service version."""

    id: Optional[str] = None

    name: Optional[str] = None


class ACLInput(FormInput):
    name: Optional[str] = None


def list_acls(
    client: Client, service_id: str, service_version: int
) -> List[ACL]:
    return _crud.list_versioned(
        client, ACL, KIND, service_id, service_version
    )


def create_acl(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> ACL:
    return _crud.create_versioned(
        client,
        ACL,
        ACLInput,
        KIND,
        service_id,
        service_version,
        fields,
    )


def get_acl(
    client: Client, service_id: str, service_version: int, name: str
) -> ACL:
    return _crud.get_versioned(
        client, ACL, KIND, service_id, service_version, name
    )


def update_acl(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> ACL:
    return _crud.update_versioned(
        client,
        ACL,
        ACLInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_acl(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _crud.delete_versioned(client, KIND, service_id, service_version, name)
