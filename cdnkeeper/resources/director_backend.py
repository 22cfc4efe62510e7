"""Membership of backends in directors."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from pydantic import Field
from structlog import get_logger

from cdnkeeper._crud import check_status, require
from cdnkeeper._models import VersionedResource
from cdnkeeper._urls import versioned_path
from cdnkeeper.encoding import decode_body

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "DirectorBackend",
    "create_director_backend",
    "get_director_backend",
    "delete_director_backend",
]

logger = get_logger(__name__)


class DirectorBackend(VersionedResource):
    """The link between a director and one of its backends."""

    director: Optional[str] = Field(None, alias="director_name")

    backend: Optional[str] = Field(None, alias="backend_name")


def _director_backend_path(
    service_id: str, service_version: int, director: str, backend: str
) -> str:
    require(
        ("service_id", service_id),
        ("service_version", service_version),
        ("director", director),
        ("backend", backend),
    )
    return versioned_path(
        service_id, service_version, "director", director, "backend", backend
    )


def create_director_backend(
    client: Client,
    service_id: str,
    service_version: int,
    director: str,
    backend: str,
) -> DirectorBackend:
    """Add a backend to a director."""
    path = _director_backend_path(
        service_id, service_version, director, backend
    )
    response = client.post(path)
    logger.info(
        "Added backend to Fastly director",
        service_id=service_id,
        service_version=service_version,
        director=director,
        backend=backend,
    )
    return decode_body(response, DirectorBackend)


def get_director_backend(
    client: Client,
    service_id: str,
    service_version: int,
    director: str,
    backend: str,
) -> DirectorBackend:
    path = _director_backend_path(
        service_id, service_version, director, backend
    )
    response = client.get(path)
    return decode_body(response, DirectorBackend)


def delete_director_backend(
    client: Client,
    service_id: str,
    service_version: int,
    director: str,
    backend: str,
) -> None:
    """Remove a backend from a director."""
    path = _director_backend_path(
        service_id, service_version, director, backend
    )
    response = client.delete(path)
    check_status(response)
    logger.info(
        "Removed backend from Fastly director",
        service_id=service_id,
        service_version=service_version,
        director=director,
        backend=backend,
    )
