"""Apache Kafka logging endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from cdnkeeper.encoding import Compatibool
from cdnkeeper.logging_endpoints import _base

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "Kafka",
    "KafkaInput",
    "list_kafka_endpoints",
    "create_kafka_endpoint",
    "get_kafka_endpoint",
    "update_kafka_endpoint",
    "delete_kafka_endpoint",
]

KIND = "kafka"


class Kafka(_base.LoggingEndpoint):
    """A Kafka logging endpoint."""

    brokers: Optional[str] = None
    """Comma-separated list of Kafka brokers (``host:port``)."""

    topic: Optional[str] = None

    required_acks: Optional[str] = None
    """Number of acknowledgements the leader waits for: ``1``, ``0`` or
    ``-1`` (all in-sync replicas).
    """

    compression_codec: Optional[str] = None

    auth_method: Optional[str] = None

    user: Optional[str] = None

    password: Optional[str] = None

    parse_log_keyvals: Optional[Compatibool] = None

    request_max_bytes: Optional[int] = None

    use_tls: Optional[Compatibool] = None

    tls_ca_cert: Optional[str] = None

    tls_client_cert: Optional[str] = None

    tls_client_key: Optional[str] = None

    tls_hostname: Optional[str] = None


class KafkaInput(_base.LoggingInput):
    brokers: Optional[str] = None

    topic: Optional[str] = None

    required_acks: Optional[str] = None

    compression_codec: Optional[str] = None

    auth_method: Optional[str] = None

    user: Optional[str] = None

    password: Optional[str] = None

    parse_log_keyvals: Optional[Compatibool] = None

    request_max_bytes: Optional[int] = None

    use_tls: Optional[Compatibool] = None

    tls_ca_cert: Optional[str] = None

    tls_client_cert: Optional[str] = None

    tls_client_key: Optional[str] = None

    tls_hostname: Optional[str] = None


def list_kafka_endpoints(
    client: Client, service_id: str, service_version: int
) -> List[Kafka]:
    return _base.list_endpoints(
        client, Kafka, KIND, service_id, service_version
    )


def create_kafka_endpoint(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> Kafka:
    return _base.create_endpoint(
        client,
        Kafka,
        KafkaInput,
        KIND,
        service_id,
        service_version,
        fields,
    )


def get_kafka_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> Kafka:
    return _base.get_endpoint(
        client, Kafka, KIND, service_id, service_version, name
    )


def update_kafka_endpoint(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> Kafka:
    return _base.update_endpoint(
        client,
        Kafka,
        KafkaInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_kafka_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _base.delete_endpoint(client, KIND, service_id, service_version, name)
