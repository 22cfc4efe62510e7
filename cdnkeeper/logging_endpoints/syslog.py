"""Syslog logging endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from cdnkeeper.encoding import Compatibool
from cdnkeeper.logging_endpoints import _base

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "Syslog",
    "SyslogInput",
    "list_syslog_endpoints",
    "create_syslog_endpoint",
    "get_syslog_endpoint",
    "update_syslog_endpoint",
    "delete_syslog_endpoint",
]

KIND = "syslog"


class Syslog(_base.LoggingEndpoint):
    """A syslog logging endpoint."""

    address: Optional[str] = None

    hostname: Optional[str] = None

    ipv4: Optional[str] = None
    """IPv4 address of the syslog server, when ``address`` is a hostname."""

    port: Optional[int] = None

    token: Optional[str] = None

    message_type: Optional[str] = None

    use_tls: Optional[Compatibool] = None

    tls_ca_cert: Optional[str] = None

    tls_client_cert: Optional[str] = None

    tls_client_key: Optional[str] = None

    tls_hostname: Optional[str] = None


class SyslogInput(_base.LoggingInput):
    address: Optional[str] = None

    hostname: Optional[str] = None

    ipv4: Optional[str] = None

    port: Optional[int] = None

    token: Optional[str] = None

    message_type: Optional[str] = None

    use_tls: Optional[Compatibool] = None

    tls_ca_cert: Optional[str] = None

    tls_client_cert: Optional[str] = None

    tls_client_key: Optional[str] = None

    tls_hostname: Optional[str] = None


def list_syslog_endpoints(
    client: Client, service_id: str, service_version: int
) -> List[Syslog]:
    return _base.list_endpoints(
        client, Syslog, KIND, service_id, service_version
    )


def create_syslog_endpoint(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> Syslog:
    return _base.create_endpoint(
        client,
        Syslog,
        SyslogInput,
        KIND,
        service_id,
        service_version,
        fields,
    )


def get_syslog_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> Syslog:
    return _base.get_endpoint(
        client, Syslog, KIND, service_id, service_version, name
    )


def update_syslog_endpoint(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> Syslog:
    return _base.update_endpoint(
        client,
        Syslog,
        SyslogInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_syslog_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _base.delete_endpoint(client, KIND, service_id, service_version, name)
