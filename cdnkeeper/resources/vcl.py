"""Custom VCL files.

One uploaded VCL file per service version is marked ``main``; the others can
be included from it. `get_generated_vcl` returns the complete VCL that
Fastly compiles for a version.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from cdnkeeper import _crud
from cdnkeeper._crud import require
from cdnkeeper._models import FormInput, VersionedResource
from cdnkeeper._urls import versioned_path
from cdnkeeper.encoding import Compatibool, decode_body

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "VCL",
    "VCLInput",
    "list_vcls",
    "create_vcl",
    "get_vcl",
    "update_vcl",
    "delete_vcl",
    "activate_vcl",
    "get_generated_vcl",
]

KIND = "vcl"


class VCL(VersionedResource):
    """A custom VCL file in a service version."""

    name: Optional[str] = None

    content: Optional[str] = None

    main: Optional[Compatibool] = None
    """Whether this is the main VCL file of the version."""


class VCLInput(FormInput):
    name: Optional[str] = None

    content: Optional[str] = None

    main: Optional[Compatibool] = None


def list_vcls(
    client: Client, service_id: str, service_version: int
) -> List[VCL]:
    return _crud.list_versioned(
        client, VCL, KIND, service_id, service_version
    )


def create_vcl(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> VCL:
    return _crud.create_versioned(
        client,
        VCL,
        VCLInput,
        KIND,
        service_id,
        service_version,
        fields,
    )


def get_vcl(
    client: Client, service_id: str, service_version: int, name: str
) -> VCL:
    return _crud.get_versioned(
        client, VCL, KIND, service_id, service_version, name
    )


def update_vcl(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> VCL:
    return _crud.update_versioned(
        client,
        VCL,
        VCLInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_vcl(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _crud.delete_versioned(client, KIND, service_id, service_version, name)


def activate_vcl(
    client: Client, service_id: str, service_version: int, name: str
) -> VCL:
    """Make a VCL file the main VCL of its version."""
    require(
        ("service_id", service_id),
        ("service_version", service_version),
        ("name", name),
    )
    path = versioned_path(service_id, service_version, KIND, name, "main")
    response = client.put(path)
    return decode_body(response, VCL)


def get_generated_vcl(
    client: Client, service_id: str, service_version: int
) -> VCL:
    """Get the VCL generated for a version from its configuration."""
    require(("service_id", service_id), ("service_version", service_version))
    path = versioned_path(service_id, service_version, "generated_vcl")
    response = client.get(path)
    return decode_body(response, VCL)
