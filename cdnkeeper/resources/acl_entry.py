"""Entries of access control lists.

Like dictionary items, ACL entries are not versioned.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence

from pydantic import BaseModel, Field
from structlog import get_logger

from cdnkeeper._crud import (
    MAX_PER_PAGE,
    check_status,
    iter_pages,
    require,
    sort_by,
)
from cdnkeeper._models import (
    MAX_BATCH_OPERATIONS,
    BatchOperation,
    FormInput,
    Resource,
)
from cdnkeeper._urls import service_path
from cdnkeeper.encoding import Compatibool, decode_body, decode_list
from cdnkeeper.exceptions import FieldError

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "ACLEntry",
    "ACLEntryInput",
    "BatchACLEntry",
    "list_acl_entries",
    "create_acl_entry",
    "get_acl_entry",
    "update_acl_entry",
    "delete_acl_entry",
    "batch_modify_acl_entries",
]

logger = get_logger(__name__)


class ACLEntry(Resource):
    """An IP address or subnet in an access control list."""

    id: Optional[str] = None

    service_id: Optional[str] = None

    acl_id: Optional[str] = None

    ip: Optional[str] = None

    subnet: Optional[int] = None
    """Number of bits of the subnet mask applied to ``ip``."""

    negated: Optional[Compatibool] = None
    """Whether the entry excludes, rather than includes, matching
    addresses.
    """

    comment: Optional[str] = None


class ACLEntryInput(FormInput):
    ip: Optional[str] = None

    subnet: Optional[int] = None

    negated: Optional[Compatibool] = None

    comment: Optional[str] = None


class BatchACLEntry(BaseModel):
    """One operation of a batch update."""

    op: BatchOperation

    entry_id: Optional[str] = Field(None, serialization_alias="id")
    """ID of the entry to update or delete."""

    ip: Optional[str] = None

    subnet: Optional[int] = None

    negated: Optional[bool] = None

    comment: Optional[str] = None


def _acl_path(service_id: str, acl_id: str, *segments: str) -> str:
    return service_path(service_id, "acl", acl_id, *segments)


def list_acl_entries(
    client: Client,
    service_id: str,
    acl_id: str,
    direction: Optional[str] = None,
    sort: Optional[str] = None,
    per_page: int = MAX_PER_PAGE,
) -> List[ACLEntry]:
    """List every entry of an ACL, sorted by IP address.

    The API paginates ACL entries; all pages are fetched.
    """
    require(("service_id", service_id), ("acl_id", acl_id))
    params: Dict[str, Any] = {}
    if direction:
        params["direction"] = direction
    if sort:
        params["sort"] = sort
    entries: List[ACLEntry] = []
    path = _acl_path(service_id, acl_id, "entries")
    for response in iter_pages(client, path, params, per_page):
        entries.extend(decode_list(response, ACLEntry))
    return sort_by(entries, lambda entry: entry.ip)


def create_acl_entry(
    client: Client, service_id: str, acl_id: str, **fields: Any
) -> ACLEntry:
    """Add an entry (``ip``, ``subnet``, ``negated``, ``comment``) to an
    ACL.
    """
    require(("service_id", service_id), ("acl_id", acl_id))
    form = ACLEntryInput(**fields).to_form()
    response = client.post_form(_acl_path(service_id, acl_id, "entry"), form)
    entry = decode_body(response, ACLEntry)
    logger.info(
        "Created Fastly ACL entry",
        service_id=service_id,
        acl_id=acl_id,
        entry_id=entry.id,
    )
    return entry


def get_acl_entry(
    client: Client, service_id: str, acl_id: str, entry_id: str
) -> ACLEntry:
    require(
        ("service_id", service_id),
        ("acl_id", acl_id),
        ("entry_id", entry_id),
    )
    response = client.get(_acl_path(service_id, acl_id, "entry", entry_id))
    return decode_body(response, ACLEntry)


def update_acl_entry(
    client: Client,
    service_id: str,
    acl_id: str,
    entry_id: str,
    **fields: Any,
) -> ACLEntry:
    """Update an ACL entry.

    Only the given fields are changed (the request is a PATCH).
    """
    require(
        ("service_id", service_id),
        ("acl_id", acl_id),
        ("entry_id", entry_id),
    )
    form = ACLEntryInput(**fields).to_form()
    response = client.patch_form(
        _acl_path(service_id, acl_id, "entry", entry_id), form
    )
    return decode_body(response, ACLEntry)


def delete_acl_entry(
    client: Client, service_id: str, acl_id: str, entry_id: str
) -> None:
    require(
        ("service_id", service_id),
        ("acl_id", acl_id),
        ("entry_id", entry_id),
    )
    response = client.delete(_acl_path(service_id, acl_id, "entry", entry_id))
    check_status(response)
    logger.info(
        "Deleted Fastly ACL entry",
        service_id=service_id,
        acl_id=acl_id,
        entry_id=entry_id,
    )


def batch_modify_acl_entries(
    client: Client,
    service_id: str,
    acl_id: str,
    entries: Sequence[BatchACLEntry],
) -> None:
    """Apply up to 1000 create, update or delete operations to an ACL in one
    request.
    """
    require(("service_id", service_id), ("acl_id", acl_id))
    if len(entries) > MAX_BATCH_OPERATIONS:
        raise FieldError(
            "entries",
            f"at most {MAX_BATCH_OPERATIONS} operations are allowed",
        )
    body = {
        "entries": [
            entry.model_dump(mode="json", by_alias=True, exclude_none=True)
            for entry in entries
        ]
    }
    response = client.patch_json(
        _acl_path(service_id, acl_id, "entries"), body
    )
    check_status(response)
    logger.info(
        "Batch modified Fastly ACL entries",
        service_id=service_id,
        acl_id=acl_id,
        count=len(entries),
    )
