"""Tests for the cdnkeeper.logging_endpoints package."""

from __future__ import annotations

import importlib
from types import ModuleType
from typing import Any, Callable
from urllib.parse import parse_qs

import pytest
import responses

from cdnkeeper.client import Client
from cdnkeeper.exceptions import FieldError
from cdnkeeper.logging_endpoints.s3 import (
    S3ServerSideEncryption,
    create_s3_endpoint,
    update_s3_endpoint,
)
from conftest import SERVICE_ID, versioned_url

# (module name, function name infix, URL kind)
ENDPOINTS = [
    ("bigquery", "bigquery", "bigquery"),
    ("blobstorage", "blob_storage", "azureblob"),
    ("cloudfiles", "cloudfiles", "cloudfiles"),
    ("datadog", "datadog", "datadog"),
    ("digitalocean", "digitalocean", "digitalocean"),
    ("elasticsearch", "elasticsearch", "elasticsearch"),
    ("ftp", "ftp", "ftp"),
    ("gcs", "gcs", "gcs"),
    ("heroku", "heroku", "heroku"),
    ("honeycomb", "honeycomb", "honeycomb"),
    ("https", "https", "https"),
    ("kafka", "kafka", "kafka"),
    ("kinesis", "kinesis", "kinesis"),
    ("logentries", "logentries", "logentries"),
    ("loggly", "loggly", "loggly"),
    ("logshuttle", "logshuttle", "logshuttle"),
    ("newrelic", "newrelic", "newrelic"),
    ("openstack", "openstack", "openstack"),
    ("papertrail", "papertrail", "papertrail"),
    ("pubsub", "pubsub", "pubsub"),
    ("s3", "s3", "s3"),
    ("scalyr", "scalyr", "scalyr"),
    ("sftp", "sftp", "sftp"),
    ("splunk", "splunk", "splunk"),
    ("sumologic", "sumologic", "sumologic"),
    ("syslog", "syslog", "syslog"),
]

TOKEN_REQUIRED = ["datadog", "honeycomb", "scalyr"]


def load(module_name: str) -> ModuleType:
    return importlib.import_module(
        f"cdnkeeper.logging_endpoints.{module_name}"
    )


def operation(module: ModuleType, template: str, infix: str) -> Callable:
    function: Callable[..., Any] = getattr(module, template.format(infix))
    return function


@pytest.mark.parametrize("module_name, infix, kind", ENDPOINTS)
@responses.activate
def test_endpoint_crud(
    client: Client, module_name: str, infix: str, kind: str
) -> None:
    module = load(module_name)
    collection_url = versioned_url("logging", kind)
    item_url = versioned_url("logging", kind, "logs")
    record = {
        "name": "logs",
        "format": "%h %t",
        "format_version": "2",
        "placement": "",
        "service_id": SERVICE_ID,
        "version": "1",
    }
    responses.add(
        responses.GET,
        collection_url,
        json=[dict(record, name="zz"), record],
        status=200,
    )
    responses.add(responses.POST, collection_url, json=record, status=200)
    responses.add(responses.GET, item_url, json=record, status=200)
    responses.add(
        responses.PUT, item_url, json=dict(record, name="logs2"), status=200
    )
    responses.add(
        responses.DELETE, item_url, json={"status": "ok"}, status=200
    )

    endpoints = operation(module, "list_{}_endpoints", infix)(
        client, SERVICE_ID, 1
    )
    assert [e.name for e in endpoints] == ["logs", "zz"]
    assert endpoints[0].format_version == 2
    assert endpoints[0].placement is None
    assert endpoints[0].service_version == 1

    create_fields = {"name": "logs", "format": "%h %t"}
    if module_name in TOKEN_REQUIRED:
        create_fields["token"] = "secret"
    created = operation(module, "create_{}_endpoint", infix)(
        client, SERVICE_ID, 1, **create_fields
    )
    assert created.name == "logs"
    assert parse_qs(responses.calls[1].request.body) == {
        k: [v] for k, v in create_fields.items()
    }

    fetched = operation(module, "get_{}_endpoint", infix)(
        client, SERVICE_ID, 1, "logs"
    )
    assert fetched.format == "%h %t"

    updated = operation(module, "update_{}_endpoint", infix)(
        client, SERVICE_ID, 1, "logs", new_name="logs2"
    )
    assert updated.name == "logs2"
    assert responses.calls[3].request.body == "name=logs2"

    operation(module, "delete_{}_endpoint", infix)(
        client, SERVICE_ID, 1, "logs"
    )
    assert len(responses.calls) == 5


@pytest.mark.parametrize("module_name", TOKEN_REQUIRED)
def test_create_requires_token(client: Client, module_name: str) -> None:
    module = load(module_name)
    create = operation(module, "create_{}_endpoint", module_name)

    with pytest.raises(FieldError) as exc_info:
        create(client, SERVICE_ID, 1, name="logs")
    assert exc_info.value.field == "token"


@pytest.mark.parametrize("module_name", TOKEN_REQUIRED)
def test_create_checks_ids_before_token(
    client: Client, module_name: str
) -> None:
    module = load(module_name)
    create = operation(module, "create_{}_endpoint", module_name)

    with pytest.raises(FieldError) as exc_info:
        create(client, SERVICE_ID, 0, name="logs")
    assert exc_info.value.field == "service_version"


def test_s3_kms_requires_key_id(client: Client) -> None:
    with pytest.raises(FieldError) as exc_info:
        create_s3_endpoint(
            client,
            SERVICE_ID,
            1,
            name="logs",
            bucket_name="my-logs",
            server_side_encryption=S3ServerSideEncryption.kms,
        )
    assert exc_info.value.field == "server_side_encryption_kms_key_id"

    with pytest.raises(FieldError):
        update_s3_endpoint(
            client,
            SERVICE_ID,
            1,
            "logs",
            server_side_encryption="aws:kms",
        )


@responses.activate
def test_s3_kms_with_key_id(client: Client) -> None:
    responses.add(
        responses.POST,
        versioned_url("logging", "s3"),
        json={"name": "logs", "server_side_encryption": "aws:kms"},
        status=200,
    )

    endpoint = create_s3_endpoint(
        client,
        SERVICE_ID,
        1,
        name="logs",
        server_side_encryption="aws:kms",
        server_side_encryption_kms_key_id="key-1",
    )

    assert endpoint.server_side_encryption == "aws:kms"
    assert parse_qs(responses.calls[0].request.body) == {
        "name": ["logs"],
        "server_side_encryption": ["aws:kms"],
        "server_side_encryption_kms_key_id": ["key-1"],
    }
