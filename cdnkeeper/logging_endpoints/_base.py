"""Fields and operations shared by every logging endpoint variant.

Logging endpoints stream a service's request logs to a third-party
provider. Each provider has its own collection at
``/service/{id}/version/{n}/logging/{kind}``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, List, Optional, Type, TypeVar

from cdnkeeper import _crud
from cdnkeeper._models import FormInput, VersionedResource

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "LoggingEndpoint",
    "LoggingInput",
    "list_endpoints",
    "create_endpoint",
    "get_endpoint",
    "update_endpoint",
    "delete_endpoint",
    "require_token",
]

E = TypeVar("E", bound="LoggingEndpoint")


class LoggingEndpoint(VersionedResource):
    """Base model for logging endpoint resources."""

    name: Optional[str] = None

    format: Optional[str] = None
    """Apache-style log format string."""

    format_version: Optional[int] = None
    """Version of the custom logging format (1 or 2)."""

    placement: Optional[str] = None

    response_condition: Optional[str] = None
    """Name of the condition that gates logging."""


class LoggingInput(FormInput):
    """Base model for logging endpoint form fields."""

    name: Optional[str] = None

    format: Optional[str] = None

    format_version: Optional[int] = None

    placement: Optional[str] = None

    response_condition: Optional[str] = None


InputCheck = Callable[[LoggingInput], None]
"""Validates form fields beyond the required identifiers."""


def list_endpoints(
    client: Client,
    model: Type[E],
    kind: str,
    service_id: str,
    service_version: int,
) -> List[E]:
    return _crud.list_versioned(
        client, model, f"logging/{kind}", service_id, service_version
    )


def create_endpoint(
    client: Client,
    model: Type[E],
    form_model: Type[LoggingInput],
    kind: str,
    service_id: str,
    service_version: int,
    fields: dict,
    check: Optional[InputCheck] = None,
) -> E:
    """Create a logging endpoint, running ``check`` on the validated form
    fields after the identifiers are checked.
    """
    _crud.require(
        ("service_id", service_id), ("service_version", service_version)
    )
    if check is not None:
        check(form_model(**fields))
    return _crud.create_versioned(
        client,
        model,
        form_model,
        f"logging/{kind}",
        service_id,
        service_version,
        fields,
    )


def get_endpoint(
    client: Client,
    model: Type[E],
    kind: str,
    service_id: str,
    service_version: int,
    name: str,
) -> E:
    return _crud.get_versioned(
        client, model, f"logging/{kind}", service_id, service_version, name
    )


def update_endpoint(
    client: Client,
    model: Type[E],
    form_model: Type[LoggingInput],
    kind: str,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str],
    fields: dict,
    check: Optional[InputCheck] = None,
) -> E:
    _crud.require(
        ("service_id", service_id),
        ("service_version", service_version),
        ("name", name),
    )
    if check is not None:
        check(form_model(**fields))
    return _crud.update_versioned(
        client,
        model,
        form_model,
        f"logging/{kind}",
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_endpoint(
    client: Client, kind: str, service_id: str, service_version: int, name: str
) -> None:
    _crud.delete_versioned(
        client, f"logging/{kind}", service_id, service_version, name
    )


def require_token(form: Any) -> None:
    """Require the ``token`` field on create."""
    _crud.require(("token", getattr(form, "token", None)))
