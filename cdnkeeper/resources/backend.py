"""Backends: the origin servers a service fetches content from."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from cdnkeeper import _crud
from cdnkeeper._models import FormInput, VersionedResource
from cdnkeeper.encoding import Compatibool

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "Backend",
    "BackendInput",
    "list_backends",
    "create_backend",
    "get_backend",
    "update_backend",
    "delete_backend",
]

KIND = "backend"


class Backend(VersionedResource):
    """A backend in a service version."""

    name: Optional[str] = None

    address: Optional[str] = None
    """Hostname or IPv4/IPv6 address of the origin."""

    port: Optional[int] = None

    comment: Optional[str] = None

    auto_loadbalance: Optional[Compatibool] = None

    between_bytes_timeout: Optional[int] = None

    connect_timeout: Optional[int] = None

    error_threshold: Optional[int] = None

    first_byte_timeout: Optional[int] = None

    healthcheck: Optional[str] = None
    """Name of the health check that monitors this backend."""

    hostname: Optional[str] = None

    max_conn: Optional[int] = None

    max_tls_version: Optional[str] = None

    min_tls_version: Optional[str] = None

    override_host: Optional[str] = None

    request_condition: Optional[str] = None

    shield: Optional[str] = None

    ssl_ca_cert: Optional[str] = None

    ssl_cert_hostname: Optional[str] = None

    ssl_check_cert: Optional[Compatibool] = None

    ssl_ciphers: Optional[str] = None

    ssl_client_cert: Optional[str] = None

    ssl_client_key: Optional[str] = None

    ssl_hostname: Optional[str] = None

    ssl_sni_hostname: Optional[str] = None

    use_ssl: Optional[Compatibool] = None

    weight: Optional[int] = None


class BackendInput(FormInput):
    """Form fields for creating or updating a backend."""

    name: Optional[str] = None

    address: Optional[str] = None

    port: Optional[int] = None

    comment: Optional[str] = None

    auto_loadbalance: Optional[Compatibool] = None

    between_bytes_timeout: Optional[int] = None

    connect_timeout: Optional[int] = None

    error_threshold: Optional[int] = None

    first_byte_timeout: Optional[int] = None

    healthcheck: Optional[str] = None

    max_conn: Optional[int] = None

    max_tls_version: Optional[str] = None

    min_tls_version: Optional[str] = None

    override_host: Optional[str] = None

    request_condition: Optional[str] = None

    shield: Optional[str] = None

    ssl_ca_cert: Optional[str] = None

    ssl_cert_hostname: Optional[str] = None

    ssl_check_cert: Optional[Compatibool] = None

    ssl_ciphers: Optional[str] = None

    ssl_client_cert: Optional[str] = None

    ssl_client_key: Optional[str] = None

    ssl_hostname: Optional[str] = None

    ssl_sni_hostname: Optional[str] = None

    use_ssl: Optional[Compatibool] = None

    weight: Optional[int] = None


def list_backends(
    client: Client, service_id: str, service_version: int
) -> List[Backend]:
    """List the backends of a service version, sorted by name."""
    return _crud.list_versioned(
        client, Backend, KIND, service_id, service_version
    )


def create_backend(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> Backend:
    """Create a backend.

    Parameters
    ----------
    client : cdnkeeper.client.Client
        The API client.
    service_id : str
        ID of the service.
    service_version : int
        An editable version of the service.
    **fields
        Fields of `BackendInput`, such as ``name``, ``address`` and
        ``port``.

    Returns
    -------
    backend : Backend
        The created backend.
    """
    return _crud.create_versioned(
        client,
        Backend,
        BackendInput,
        KIND,
        service_id,
        service_version,
        fields,
    )


def get_backend(
    client: Client, service_id: str, service_version: int, name: str
) -> Backend:
    return _crud.get_versioned(
        client, Backend, KIND, service_id, service_version, name
    )


def update_backend(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> Backend:
    """Update a backend. Pass ``new_name`` to rename it."""
    return _crud.update_versioned(
        client,
        Backend,
        BackendInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_backend(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _crud.delete_versioned(client, KIND, service_id, service_version, name)
