"""Fastly cache purging.

See https://developer.fastly.com/reference/api/purging/ for more information
about the purge API.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional

from structlog import get_logger

from cdnkeeper._crud import require
from cdnkeeper._models import Resource
from cdnkeeper._urls import service_path
from cdnkeeper.encoding import decode_body

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = ["Purge", "purge_url", "purge_key", "purge_all"]

SOFT_PURGE_HEADER = "Fastly-Soft-Purge"

logger = get_logger(__name__)


class Purge(Resource):
    """Status of a purge request."""

    status: Optional[str] = None

    id: Optional[str] = None


def _purge_headers(soft: bool) -> Optional[Dict[str, str]]:
    if soft:
        return {SOFT_PURGE_HEADER: "1"}
    return None


def purge_url(client: Client, url: str, soft: bool = False) -> Purge:
    """Instant purge of an individual URL.

    Parameters
    ----------
    client : cdnkeeper.client.Client
        The API client.
    url : str
        The cached URL, such as ``www.example.com/index.html``.
    soft : bool
        Mark the content as stale instead of removing it.
    """
    require(("url", url))
    logger.info("Fastly URL purge", url=url, soft=soft)
    response = client.post(
        "/purge/" + url.lstrip("/"), headers=_purge_headers(soft)
    )
    return decode_body(response, Purge)


def purge_key(
    client: Client, service_id: str, key: str, soft: bool = False
) -> Purge:
    """Instant purge of URLs tagged with a surrogate key.

    See https://developer.fastly.com/reference/api/purging/#purge-tag for
    more information.
    """
    require(("service_id", service_id), ("key", key))
    path = service_path(service_id, "purge", key)
    logger.info(
        "Fastly key purge", path=path, surrogate_key=key, soft=soft
    )
    response = client.post(path, headers=_purge_headers(soft))
    return decode_body(response, Purge)


def purge_all(client: Client, service_id: str, soft: bool = False) -> Purge:
    """Instant purge of everything cached for a service."""
    require(("service_id", service_id))
    path = service_path(service_id, "purge_all")
    logger.info("Fastly purge all", path=path, soft=soft)
    response = client.post(path, headers=_purge_headers(soft))
    return decode_body(response, Purge)
