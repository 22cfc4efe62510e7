"""Health checks that monitor backend availability.

Custom request headers are given as a list of ``"Name: value"`` strings.
They are sent in the special format the health check endpoint expects (see
`cdnkeeper.encoding.encode_form`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from cdnkeeper import _crud
from cdnkeeper._models import FormInput, VersionedResource

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "HealthCheck",
    "HealthCheckInput",
    "list_health_checks",
    "create_health_check",
    "get_health_check",
    "update_health_check",
    "delete_health_check",
]

KIND = "healthcheck"


class HealthCheck(VersionedResource):
    """A health check in a service version."""

    name: Optional[str] = None

    comment: Optional[str] = None

    method: Optional[str] = None

    host: Optional[str] = None

    path: Optional[str] = None

    http_version: Optional[str] = None

    expected_response: Optional[int] = None

    check_interval: Optional[int] = None

    initial: Optional[int] = None

    threshold: Optional[int] = None
    """Number of successful checks (out of ``window``) for the backend to
    be healthy.
    """

    timeout: Optional[int] = None

    window: Optional[int] = None

    headers: Optional[List[str]] = None
    """Custom request headers, as ``"Name: value"`` strings."""


class HealthCheckInput(FormInput):
    name: Optional[str] = None

    comment: Optional[str] = None

    method: Optional[str] = None

    host: Optional[str] = None

    path: Optional[str] = None

    http_version: Optional[str] = None

    expected_response: Optional[int] = None

    check_interval: Optional[int] = None

    initial: Optional[int] = None

    threshold: Optional[int] = None

    timeout: Optional[int] = None

    window: Optional[int] = None

    headers: Optional[List[str]] = None


def list_health_checks(
    client: Client, service_id: str, service_version: int
) -> List[HealthCheck]:
    return _crud.list_versioned(
        client, HealthCheck, KIND, service_id, service_version
    )


def create_health_check(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> HealthCheck:
    return _crud.create_versioned(
        client,
        HealthCheck,
        HealthCheckInput,
        KIND,
        service_id,
        service_version,
        fields,
        health_check_headers=True,
    )


def get_health_check(
    client: Client, service_id: str, service_version: int, name: str
) -> HealthCheck:
    return _crud.get_versioned(
        client, HealthCheck, KIND, service_id, service_version, name
    )


def update_health_check(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> HealthCheck:
    return _crud.update_versioned(
        client,
        HealthCheck,
        HealthCheckInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
        health_check_headers=True,
    )


def delete_health_check(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _crud.delete_versioned(client, KIND, service_id, service_version, name)
