"""Fastly services.

A service is the top-level container for a site's CDN configuration. Its
configuration is organized in numbered versions (see
`cdnkeeper.resources.version`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional

from pydantic import Field
from structlog import get_logger

from cdnkeeper._crud import (
    MAX_PER_PAGE,
    check_status,
    iter_pages,
    require,
    sort_by_name,
)
from cdnkeeper._models import FormInput, Resource
from cdnkeeper._urls import service_path, to_safe_url
from cdnkeeper.encoding import Compatibool, decode_body, decode_list
from cdnkeeper.resources.version import Version

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "Service",
    "ServiceDetail",
    "ServiceDomain",
    "ServiceInput",
    "list_services",
    "iter_services",
    "create_service",
    "get_service",
    "get_service_details",
    "update_service",
    "delete_service",
    "search_service",
    "list_service_domains",
]

logger = get_logger(__name__)


class Service(Resource):
    """A Fastly service."""

    id: Optional[str] = None

    name: Optional[str] = None

    comment: Optional[str] = None

    customer_id: Optional[str] = None

    type: Optional[str] = None
    """Service type: ``vcl`` or ``wasm``."""

    active_version: Optional[int] = Field(None, alias="version")
    """Number of the active version (the ``version`` key in the API)."""

    versions: Optional[List[Version]] = None


class ServiceDetail(Resource):
    """A service with its active and latest version expanded."""

    id: Optional[str] = None

    name: Optional[str] = None

    comment: Optional[str] = None

    customer_id: Optional[str] = None

    type: Optional[str] = None

    active_version: Optional[Version] = None

    version: Optional[Version] = None

    versions: Optional[List[Version]] = None


class ServiceDomain(Resource):
    """A domain name attached to any version of a service."""

    name: Optional[str] = None

    comment: Optional[str] = None

    locked: Optional[Compatibool] = None

    service_id: Optional[str] = None

    service_version: Optional[int] = Field(None, alias="version")


class ServiceInput(FormInput):
    name: Optional[str] = None

    comment: Optional[str] = None

    type: Optional[str] = None


def _list_params(
    direction: Optional[str],
    sort: Optional[str],
    page: Optional[int],
    per_page: Optional[int],
) -> Dict[str, Any]:
    params: Dict[str, Any] = {}
    if direction:
        params["direction"] = direction
    if page:
        params["page"] = page
    if per_page:
        params["per_page"] = per_page
    if sort:
        params["sort"] = sort
    return params


def list_services(
    client: Client,
    direction: Optional[str] = None,
    sort: Optional[str] = None,
    page: Optional[int] = None,
    per_page: Optional[int] = None,
) -> List[Service]:
    """List services in the account, sorted by name.

    Parameters
    ----------
    client : cdnkeeper.client.Client
        The API client.
    direction : str, optional
        Sort direction for the API (``ascend`` or ``descend``).
    sort : str, optional
        Field the API sorts on before paginating.
    page : int, optional
        Page number to fetch.
    per_page : int, optional
        Number of services per page.
    """
    response = client.get(
        "/service", params=_list_params(direction, sort, page, per_page)
    )
    return sort_by_name(decode_list(response, Service))


def iter_services(
    client: Client,
    per_page: int = MAX_PER_PAGE,
    direction: Optional[str] = None,
    sort: Optional[str] = None,
) -> Iterator[Service]:
    """Iterate over every service in the account, page by page.

    Pages are requested until the response's ``Link`` header no longer
    advertises a ``next`` page. Services are yielded sorted by name within
    each page.
    """
    params = _list_params(direction, sort, None, None)
    for response in iter_pages(client, "/service", params, per_page):
        for service in sort_by_name(decode_list(response, Service)):
            yield service


def create_service(client: Client, **fields: Any) -> Service:
    """Create a service.

    Parameters
    ----------
    client : cdnkeeper.client.Client
        The API client.
    **fields
        Fields of `ServiceInput`: ``name``, ``comment`` and ``type``.
    """
    form = ServiceInput(**fields).to_form()
    response = client.post_form("/service", form)
    service = decode_body(response, Service)
    logger.info(
        "Created Fastly service", service_id=service.id, name=service.name
    )
    return service


def get_service(client: Client, service_id: str) -> Service:
    """Get a service.

    This endpoint doesn't report the active version number, so it is filled
    in from the active entry of the service's ``versions``.

    If no service exists for the ID, the API responds with a 400 status
    rather than 404.
    """
    require(("service_id", service_id))
    response = client.get(service_path(service_id))
    service = decode_body(response, Service)
    for version in service.versions or []:
        if version.active:
            service.active_version = version.number
            break
    return service


def get_service_details(client: Client, service_id: str) -> ServiceDetail:
    require(("service_id", service_id))
    response = client.get(service_path(service_id, "details"))
    return decode_body(response, ServiceDetail)


def update_service(client: Client, service_id: str, **fields: Any) -> Service:
    """Update a service's ``name`` or ``comment``."""
    require(("service_id", service_id))
    form = ServiceInput(**fields).to_form()
    response = client.put_form(service_path(service_id), form)
    service = decode_body(response, Service)
    logger.info("Updated Fastly service", service_id=service_id)
    return service


def delete_service(client: Client, service_id: str) -> None:
    require(("service_id", service_id))
    response = client.delete(service_path(service_id))
    check_status(response)
    logger.info("Deleted Fastly service", service_id=service_id)


def search_service(client: Client, name: str) -> Service:
    """Find a service by its name.

    If no service has the name, the API responds with a 400 status rather
    than 404.
    """
    require(("name", name))
    response = client.get(
        to_safe_url("service", "search"), params={"name": name}
    )
    return decode_body(response, Service)


def list_service_domains(
    client: Client, service_id: str
) -> List[ServiceDomain]:
    """List the domains of every version of a service, sorted by name."""
    require(("service_id", service_id))
    response = client.get(service_path(service_id, "domain"))
    return sort_by_name(decode_list(response, ServiceDomain))
