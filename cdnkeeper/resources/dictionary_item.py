"""Items of edge dictionaries.

Dictionary items are not versioned: changes apply immediately to the
dictionary, whichever service version it was created in.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence

from pydantic import BaseModel
from structlog import get_logger

from cdnkeeper._crud import check_status, require, sort_by
from cdnkeeper._models import (
    MAX_BATCH_OPERATIONS,
    BatchOperation,
    FormInput,
    Resource,
)
from cdnkeeper._urls import service_path
from cdnkeeper.encoding import decode_body, decode_list
from cdnkeeper.exceptions import FieldError

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "DictionaryItem",
    "DictionaryItemInput",
    "BatchDictionaryItem",
    "list_dictionary_items",
    "create_dictionary_item",
    "get_dictionary_item",
    "update_dictionary_item",
    "delete_dictionary_item",
    "batch_modify_dictionary_items",
]

logger = get_logger(__name__)


class DictionaryItem(Resource):
    """A key-value pair in an edge dictionary."""

    service_id: Optional[str] = None

    dictionary_id: Optional[str] = None

    item_key: Optional[str] = None

    item_value: Optional[str] = None


class DictionaryItemInput(FormInput):
    item_key: Optional[str] = None

    item_value: Optional[str] = None


class BatchDictionaryItem(BaseModel):
    """One operation of a batch update."""

    op: BatchOperation

    item_key: str

    item_value: Optional[str] = None


def _dictionary_path(
    service_id: str, dictionary_id: str, *segments: str
) -> str:
    return service_path(service_id, "dictionary", dictionary_id, *segments)


def list_dictionary_items(
    client: Client, service_id: str, dictionary_id: str
) -> List[DictionaryItem]:
    """List the items of a dictionary, sorted by key."""
    require(("service_id", service_id), ("dictionary_id", dictionary_id))
    path = _dictionary_path(service_id, dictionary_id, "items")
    response = client.get(path)
    return sort_by(
        decode_list(response, DictionaryItem), lambda item: item.item_key
    )


def create_dictionary_item(
    client: Client, service_id: str, dictionary_id: str, **fields: Any
) -> DictionaryItem:
    """Add an item (``item_key``, ``item_value``) to a dictionary."""
    require(("service_id", service_id), ("dictionary_id", dictionary_id))
    form = DictionaryItemInput(**fields).to_form()
    response = client.post_form(
        _dictionary_path(service_id, dictionary_id, "item"), form
    )
    item = decode_body(response, DictionaryItem)
    logger.info(
        "Created Fastly dictionary item",
        service_id=service_id,
        dictionary_id=dictionary_id,
        item_key=item.item_key,
    )
    return item


def get_dictionary_item(
    client: Client, service_id: str, dictionary_id: str, item_key: str
) -> DictionaryItem:
    require(
        ("service_id", service_id),
        ("dictionary_id", dictionary_id),
        ("item_key", item_key),
    )
    response = client.get(
        _dictionary_path(service_id, dictionary_id, "item", item_key)
    )
    return decode_body(response, DictionaryItem)


def update_dictionary_item(
    client: Client,
    service_id: str,
    dictionary_id: str,
    item_key: str,
    item_value: str,
) -> DictionaryItem:
    require(
        ("service_id", service_id),
        ("dictionary_id", dictionary_id),
        ("item_key", item_key),
    )
    form = DictionaryItemInput(item_value=item_value).to_form()
    response = client.put_form(
        _dictionary_path(service_id, dictionary_id, "item", item_key), form
    )
    return decode_body(response, DictionaryItem)


def delete_dictionary_item(
    client: Client, service_id: str, dictionary_id: str, item_key: str
) -> None:
    require(
        ("service_id", service_id),
        ("dictionary_id", dictionary_id),
        ("item_key", item_key),
    )
    response = client.delete(
        _dictionary_path(service_id, dictionary_id, "item", item_key)
    )
    check_status(response)
    logger.info(
        "Deleted Fastly dictionary item",
        service_id=service_id,
        dictionary_id=dictionary_id,
        item_key=item_key,
    )


def batch_modify_dictionary_items(
    client: Client,
    service_id: str,
    dictionary_id: str,
    items: Sequence[BatchDictionaryItem],
) -> None:
    """Apply up to 1000 create, update, upsert or delete operations to a
    dictionary in one request.

    Raises
    ------
    cdnkeeper.exceptions.FieldError
        Raised if there are more than 1000 operations.
    cdnkeeper.exceptions.NotOKError
        Raised if the API doesn't report an ``ok`` status.
    """
    require(("service_id", service_id), ("dictionary_id", dictionary_id))
    if len(items) > MAX_BATCH_OPERATIONS:
        raise FieldError(
            "items", f"at most {MAX_BATCH_OPERATIONS} operations are allowed"
        )
    body: Dict[str, Any] = {
        "items": [
            item.model_dump(mode="json", exclude_none=True) for item in items
        ]
    }
    response = client.patch_json(
        _dictionary_path(service_id, dictionary_id, "items"), body
    )
    check_status(response)
    logger.info(
        "Batch modified Fastly dictionary items",
        service_id=service_id,
        dictionary_id=dictionary_id,
        count=len(items),
    )
