"""Amazon S3 logging endpoints.

When ``server_side_encryption`` is ``aws:kms``, creating or updating an
endpoint also requires ``server_side_encryption_kms_key_id``.
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Any, List, Optional

from cdnkeeper.exceptions import FieldError
from cdnkeeper.logging_endpoints import _base

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "S3Redundancy",
    "S3ServerSideEncryption",
    "S3AccessControlList",
    "S3",
    "S3Input",
    "list_s3_endpoints",
    "create_s3_endpoint",
    "get_s3_endpoint",
    "update_s3_endpoint",
    "delete_s3_endpoint",
]

KIND = "s3"


class S3Redundancy(str, enum.Enum):
    """S3 storage classes."""

    standard = "standard"

    intelligent_tiering = "intelligent_tiering"

    standard_ia = "standard_ia"

    onezone_ia = "onezone_ia"

    glacier_ir = "glacier_ir"

    glacier = "glacier"

    deep_archive = "deep_archive"

    reduced_redundancy = "reduced_redundancy"


class S3ServerSideEncryption(str, enum.Enum):
    """S3 server-side encryption algorithms."""

    aes = "AES256"

    kms = "aws:kms"


class S3AccessControlList(str, enum.Enum):
    """Canned ACLs applied to uploaded log files."""

    private = "private"

    public_read = "public-read"

    public_read_write = "public-read-write"

    aws_exec_read = "aws-exec-read"

    authenticated_read = "authenticated-read"

    bucket_owner_read = "bucket-owner-read"

    bucket_owner_full_control = "bucket-owner-full-control"


class S3(_base.LoggingEndpoint):
    """An Amazon S3 logging endpoint."""

    bucket_name: Optional[str] = None

    domain: Optional[str] = None
    """S3 endpoint domain, for S3-compatible storage providers."""

    access_key: Optional[str] = None

    secret_key: Optional[str] = None

    iam_role: Optional[str] = None
    """ARN of an IAM role, used instead of an access key and secret."""

    acl: Optional[str] = None

    redundancy: Optional[str] = None

    server_side_encryption: Optional[str] = None

    server_side_encryption_kms_key_id: Optional[str] = None

    path: Optional[str] = None

    period: Optional[int] = None
    """Seconds between log file uploads."""

    gzip_level: Optional[int] = None

    compression_codec: Optional[str] = None

    message_type: Optional[str] = None

    timestamp_format: Optional[str] = None

    public_key: Optional[str] = None
    """PGP public key used to encrypt log files before upload."""


class S3Input(_base.LoggingInput):
    bucket_name: Optional[str] = None

    domain: Optional[str] = None

    access_key: Optional[str] = None

    secret_key: Optional[str] = None

    iam_role: Optional[str] = None

    acl: Optional[S3AccessControlList] = None

    redundancy: Optional[S3Redundancy] = None

    server_side_encryption: Optional[S3ServerSideEncryption] = None

    server_side_encryption_kms_key_id: Optional[str] = None

    path: Optional[str] = None

    period: Optional[int] = None

    gzip_level: Optional[int] = None

    compression_codec: Optional[str] = None

    message_type: Optional[str] = None

    timestamp_format: Optional[str] = None

    public_key: Optional[str] = None


def check_kms_key(form: Any) -> None:
    """Require a KMS key ID for ``aws:kms`` server-side encryption."""
    if (
        form.server_side_encryption == S3ServerSideEncryption.kms
        and not form.server_side_encryption_kms_key_id
    ):
        raise FieldError("server_side_encryption_kms_key_id")


def list_s3_endpoints(
    client: Client, service_id: str, service_version: int
) -> List[S3]:
    return _base.list_endpoints(client, S3, KIND, service_id, service_version)


def create_s3_endpoint(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> S3:
    return _base.create_endpoint(
        client,
        S3,
        S3Input,
        KIND,
        service_id,
        service_version,
        fields,
        check=check_kms_key,
    )


def get_s3_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> S3:
    return _base.get_endpoint(
        client, S3, KIND, service_id, service_version, name
    )


def update_s3_endpoint(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> S3:
    return _base.update_endpoint(
        client,
        S3,
        S3Input,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
        check=check_kms_key,
    )


def delete_s3_endpoint(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _base.delete_endpoint(client, KIND, service_id, service_version, name)
