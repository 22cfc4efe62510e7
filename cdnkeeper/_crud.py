"""Shared request pipeline for versioned configuration resources.

Most Fastly configuration objects (backends, conditions, logging endpoints,
and so on) live at ``/service/{id}/version/{n}/{kind}[/{name}]`` and share
the same list, create, get, update and delete semantics. The resource
modules build on these helpers.
"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Type,
    TypeVar,
)
from urllib.parse import parse_qs, urlparse

from structlog import get_logger

from cdnkeeper._urls import versioned_path
from cdnkeeper.encoding import StatusResponse, decode_body, decode_list
from cdnkeeper.exceptions import FieldError, NotOKError

if TYPE_CHECKING:
    import requests

    from cdnkeeper._models import FormInput, Resource
    from cdnkeeper.client import Client

__all__ = [
    "require",
    "check_status",
    "sort_by",
    "sort_by_name",
    "iter_pages",
    "list_versioned",
    "create_versioned",
    "get_versioned",
    "update_versioned",
    "delete_versioned",
]

R = TypeVar("R", bound="Resource")

MAX_PER_PAGE = 100
"""Largest page size the API accepts."""

logger = get_logger(__name__)


def require(*identifiers: Any) -> None:
    """Check that required identifiers are set.

    Parameters
    ----------
    *identifiers
        ``(field_name, value)`` pairs, checked in order.

    Raises
    ------
    cdnkeeper.exceptions.FieldError
        Raised for the first pair whose value is empty (``""``, ``0`` or
        `None`).
    """
    for field_name, value in identifiers:
        if not value:
            raise FieldError(field_name)


def check_status(response: requests.Response) -> StatusResponse:
    """Decode a ``{"status": ...}`` body, raising `NotOKError` unless the
    status is ``ok``.
    """
    status = decode_body(response, StatusResponse)
    if not status.ok:
        raise NotOKError(
            f"not ok: status={status.status!r} msg={status.msg!r}"
        )
    return status


def sort_by(items: Iterable[R], key: Callable[[R], Any]) -> List[R]:
    """Stable sort where `None` keys sort first."""

    def sort_key(item: R) -> Any:
        value = key(item)
        return (value is not None, value if value is not None else "")

    return sorted(items, key=sort_key)


def sort_by_name(items: Iterable[R]) -> List[R]:
    return sort_by(items, lambda item: getattr(item, "name", None))


def iter_pages(
    client: Client,
    path: str,
    params: Optional[Mapping[str, Any]] = None,
    per_page: int = MAX_PER_PAGE,
) -> Iterator[requests.Response]:
    """Request every page of a paginated collection.

    Pages are requested, starting from the first, until a response's
    ``Link`` header no longer advertises a ``rel="next"`` page.

    Yields
    ------
    response : requests.Response
        The response for each page.
    """
    if per_page <= 0:
        per_page = MAX_PER_PAGE
    page: Optional[int] = 1
    while page is not None:
        page_params: Dict[str, Any] = dict(params or {})
        page_params["page"] = page
        page_params["per_page"] = per_page
        response = client.get(path, params=page_params)
        yield response
        page = _next_page(response.links)


def _next_page(links: Mapping[str, Mapping[str, str]]) -> Optional[int]:
    next_link = links.get("next")
    if not next_link:
        return None
    query = parse_qs(urlparse(next_link["url"]).query)
    try:
        return int(query["page"][0])
    except (KeyError, IndexError, ValueError):
        return None


def list_versioned(
    client: Client,
    model: Type[R],
    kind: str,
    service_id: str,
    service_version: int,
) -> List[R]:
    """List resources of a kind in a service version, sorted by name."""
    require(("service_id", service_id), ("service_version", service_version))
    path = versioned_path(service_id, service_version, *kind.split("/"))
    response = client.get(path)
    return sort_by_name(decode_list(response, model))


def create_versioned(
    client: Client,
    model: Type[R],
    form_model: Type[FormInput],
    kind: str,
    service_id: str,
    service_version: int,
    fields: dict,
    health_check_headers: bool = False,
) -> R:
    """Create a resource in a service version.

    ``fields`` are validated against ``form_model`` before the request is
    sent, so an unknown field raises `pydantic.ValidationError`.
    """
    require(("service_id", service_id), ("service_version", service_version))
    form = form_model(**fields).to_form()
    path = versioned_path(service_id, service_version, *kind.split("/"))
    response = client.post_form(
        path, form, health_check_headers=health_check_headers
    )
    resource = decode_body(response, model)
    logger.info(
        "Created Fastly resource",
        kind=kind,
        service_id=service_id,
        service_version=service_version,
        name=form.get("name"),
    )
    return resource


def get_versioned(
    client: Client,
    model: Type[R],
    kind: str,
    service_id: str,
    service_version: int,
    name: str,
) -> R:
    """Get a named resource from a service version."""
    require(
        ("service_id", service_id),
        ("service_version", service_version),
        ("name", name),
    )
    path = versioned_path(service_id, service_version, *kind.split("/"), name)
    response = client.get(path)
    return decode_body(response, model)


def update_versioned(
    client: Client,
    model: Type[R],
    form_model: Type[FormInput],
    kind: str,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str],
    fields: dict,
    health_check_headers: bool = False,
) -> R:
    """Update a named resource in a service version.

    ``new_name`` renames the resource (it is sent as the ``name`` form
    field).
    """
    require(
        ("service_id", service_id),
        ("service_version", service_version),
        ("name", name),
    )
    form = form_model(**fields).to_form()
    if new_name is not None:
        form["name"] = new_name
    path = versioned_path(service_id, service_version, *kind.split("/"), name)
    response = client.put_form(
        path, form, health_check_headers=health_check_headers
    )
    resource = decode_body(response, model)
    logger.info(
        "Updated Fastly resource",
        kind=kind,
        service_id=service_id,
        service_version=service_version,
        name=name,
    )
    return resource


def delete_versioned(
    client: Client,
    kind: str,
    service_id: str,
    service_version: int,
    name: str,
) -> None:
    """Delete a named resource from a service version."""
    require(
        ("service_id", service_id),
        ("service_version", service_version),
        ("name", name),
    )
    path = versioned_path(service_id, service_version, *kind.split("/"), name)
    response = client.delete(path)
    check_status(response)
    logger.info(
        "Deleted Fastly resource",
        kind=kind,
        service_id=service_id,
        service_version=service_version,
        name=name,
    )
