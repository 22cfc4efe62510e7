"""Domains served by a service."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from pydantic import BaseModel

from cdnkeeper import _crud
from cdnkeeper._crud import require
from cdnkeeper._models import FormInput, VersionedResource
from cdnkeeper._urls import versioned_path
from cdnkeeper.encoding import Compatibool
from cdnkeeper.exceptions import FieldError

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "Domain",
    "DomainInput",
    "DomainValidationResult",
    "list_domains",
    "create_domain",
    "get_domain",
    "update_domain",
    "delete_domain",
    "check_domain",
    "check_domains",
]

KIND = "domain"


class Domain(VersionedResource):
    """A domain in a service version."""

    name: Optional[str] = None

    comment: Optional[str] = None


class DomainInput(FormInput):
    name: Optional[str] = None

    comment: Optional[str] = None


class DomainValidationResult(BaseModel):
    """DNS check result for a domain.

    The API reports each result as a ``[domain, cname, valid]`` array.
    """

    domain: Domain

    cname: Optional[str] = None
    """The CNAME the domain resolves to."""

    valid: Optional[Compatibool] = None
    """Whether the domain's DNS points at Fastly, or `None` if the API
    couldn't tell.
    """

    @classmethod
    def from_tuple(cls, data: Any) -> DomainValidationResult:
        """Build a result from the API's three-element array."""
        if not isinstance(data, list) or len(data) != 3:
            raise ValueError(
                f"unexpected domain check result, want 3 items: {data!r}"
            )
        domain, cname, valid = data
        return cls(
            domain=Domain.model_validate(domain), cname=cname, valid=valid
        )


def list_domains(
    client: Client, service_id: str, service_version: int
) -> List[Domain]:
    return _crud.list_versioned(
        client, Domain, KIND, service_id, service_version
    )


def create_domain(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> Domain:
    """Add a domain (``name``, ``comment``) to a service version."""
    return _crud.create_versioned(
        client,
        Domain,
        DomainInput,
        KIND,
        service_id,
        service_version,
        fields,
    )


def get_domain(
    client: Client, service_id: str, service_version: int, name: str
) -> Domain:
    return _crud.get_versioned(
        client, Domain, KIND, service_id, service_version, name
    )


def update_domain(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    comment: Optional[str] = None,
) -> Domain:
    """Rename a domain or change its comment.

    Raises
    ------
    cdnkeeper.exceptions.FieldError
        Raised if neither ``new_name`` nor ``comment`` is given.
    """
    require(
        ("service_id", service_id),
        ("service_version", service_version),
        ("name", name),
    )
    if new_name is None and comment is None:
        raise FieldError(
            "new_name", "at least one of new_name or comment is required"
        )
    return _crud.update_versioned(
        client,
        Domain,
        DomainInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        {"comment": comment},
    )


def delete_domain(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _crud.delete_versioned(client, KIND, service_id, service_version, name)


def check_domain(
    client: Client, service_id: str, service_version: int, name: str
) -> DomainValidationResult:
    """Check the DNS configuration of a domain."""
    require(
        ("service_id", service_id),
        ("service_version", service_version),
        ("name", name),
    )
    path = versioned_path(service_id, service_version, KIND, name, "check")
    response = client.get(path)
    return DomainValidationResult.from_tuple(response.json())


def check_domains(
    client: Client, service_id: str, service_version: int
) -> List[DomainValidationResult]:
    """Check the DNS configuration of every domain in a service version."""
    require(("service_id", service_id), ("service_version", service_version))
    path = versioned_path(service_id, service_version, KIND, "check_all")
    response = client.get(path)
    return [
        DomainValidationResult.from_tuple(item)
        for item in response.json() or []
    ]
