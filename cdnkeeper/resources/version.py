"""Service configuration versions.

A version is a snapshot of a service's configuration. Versioned resources
(backends, domains, logging endpoints...) can only be changed on a version
that is neither active nor locked; `clone_version` produces an editable
copy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Tuple

from structlog import get_logger

from cdnkeeper._crud import require, sort_by
from cdnkeeper._models import FormInput, Resource
from cdnkeeper._urls import service_path, versioned_path
from cdnkeeper.encoding import (
    Compatibool,
    StatusResponse,
    decode_body,
    decode_list,
)

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "Version",
    "VersionInput",
    "list_versions",
    "latest_version",
    "create_version",
    "get_version",
    "update_version",
    "activate_version",
    "deactivate_version",
    "clone_version",
    "validate_version",
    "lock_version",
]

logger = get_logger(__name__)


class Version(Resource):
    """A service configuration version."""

    number: Optional[int] = None

    service_id: Optional[str] = None

    comment: Optional[str] = None

    active: Optional[Compatibool] = None

    deployed: Optional[Compatibool] = None

    locked: Optional[Compatibool] = None

    staging: Optional[Compatibool] = None

    testing: Optional[Compatibool] = None


class VersionInput(FormInput):
    comment: Optional[str] = None


def list_versions(client: Client, service_id: str) -> List[Version]:
    """List a service's versions, sorted by version number."""
    require(("service_id", service_id))
    response = client.get(service_path(service_id, "version"))
    return sort_by(decode_list(response, Version), lambda v: v.number)


def latest_version(client: Client, service_id: str) -> Optional[Version]:
    """Get the most recently created version of a service.

    Returns `None` if the service has no versions.
    """
    versions = list_versions(client, service_id)
    if not versions:
        return None
    return versions[-1]


def create_version(
    client: Client, service_id: str, comment: Optional[str] = None
) -> Version:
    """Create an empty service version."""
    require(("service_id", service_id))
    form = VersionInput(comment=comment).to_form()
    response = client.post_form(service_path(service_id, "version"), form)
    version = decode_body(response, Version)
    logger.info(
        "Created Fastly service version",
        service_id=service_id,
        service_version=version.number,
    )
    return version


def get_version(
    client: Client, service_id: str, service_version: int
) -> Version:
    require(("service_id", service_id), ("service_version", service_version))
    response = client.get(versioned_path(service_id, service_version))
    return decode_body(response, Version)


def update_version(
    client: Client,
    service_id: str,
    service_version: int,
    comment: Optional[str] = None,
) -> Version:
    require(("service_id", service_id), ("service_version", service_version))
    form = VersionInput(comment=comment).to_form()
    response = client.put_form(
        versioned_path(service_id, service_version), form
    )
    return decode_body(response, Version)


def _version_action(
    client: Client, service_id: str, service_version: int, action: str
) -> Version:
    require(("service_id", service_id), ("service_version", service_version))
    response = client.put(versioned_path(service_id, service_version, action))
    version = decode_body(response, Version)
    logger.info(
        "Fastly service version action",
        action=action,
        service_id=service_id,
        service_version=service_version,
    )
    return version


def activate_version(
    client: Client, service_id: str, service_version: int
) -> Version:
    """Activate a version, deploying its configuration."""
    return _version_action(client, service_id, service_version, "activate")


def deactivate_version(
    client: Client, service_id: str, service_version: int
) -> Version:
    """Deactivate a version."""
    return _version_action(client, service_id, service_version, "deactivate")


def clone_version(
    client: Client, service_id: str, service_version: int
) -> Version:
    """Copy a version into a new, editable version.

    Returns
    -------
    version : Version
        The new version.
    """
    return _version_action(client, service_id, service_version, "clone")


def lock_version(
    client: Client, service_id: str, service_version: int
) -> Version:
    """Lock a version so that it can't be edited."""
    return _version_action(client, service_id, service_version, "lock")


def validate_version(
    client: Client, service_id: str, service_version: int
) -> Tuple[bool, str]:
    """Validate a version's configuration.

    Returns
    -------
    valid : bool
        `True` if the configuration is valid.
    message : str
        Validation messages from the API (empty if there are none).
    """
    require(("service_id", service_id), ("service_version", service_version))
    response = client.get(
        versioned_path(service_id, service_version, "validate")
    )
    status = decode_body(response, StatusResponse)
    return status.ok, status.msg or ""
