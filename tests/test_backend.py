"""Tests for the cdnkeeper.resources.backend module."""

from __future__ import annotations

from urllib.parse import parse_qs

import pydantic
import pytest
import responses

from cdnkeeper.client import Client
from cdnkeeper.exceptions import FieldError, HTTPError, NotOKError
from cdnkeeper.resources.backend import (
    create_backend,
    delete_backend,
    get_backend,
    list_backends,
    update_backend,
)
from conftest import SERVICE_ID, versioned_url


@responses.activate
def test_list_backends_sorted_by_name(client: Client) -> None:
    responses.add(
        responses.GET,
        versioned_url("backend"),
        json=[
            {"name": "origin-b", "address": "b.example.com", "port": 443},
            {"name": "origin-a", "address": "a.example.com", "port": "80"},
        ],
        status=200,
    )

    backends = list_backends(client, SERVICE_ID, 1)

    assert [b.name for b in backends] == ["origin-a", "origin-b"]
    assert backends[0].port == 80


@responses.activate
def test_create_backend(client: Client) -> None:
    responses.add(
        responses.POST,
        versioned_url("backend"),
        json={
            "name": "origin",
            "address": "example.com",
            "port": 443,
            "use_ssl": True,
            "service_id": SERVICE_ID,
            "version": 1,
            "created_at": "2020-06-01T12:00:00Z",
            "ssl_ca_cert": "",
        },
        status=200,
    )

    backend = create_backend(
        client,
        SERVICE_ID,
        1,
        name="origin",
        address="example.com",
        port=443,
        use_ssl=True,
    )

    assert backend.name == "origin"
    assert backend.use_ssl is True
    assert backend.service_version == 1
    assert backend.created_at is not None
    assert backend.created_at.year == 2020
    assert backend.ssl_ca_cert is None

    request = responses.calls[0].request
    assert parse_qs(request.body) == {
        "name": ["origin"],
        "address": ["example.com"],
        "port": ["443"],
        "use_ssl": ["1"],
    }


def test_create_backend_unknown_field(client: Client) -> None:
    with pytest.raises(pydantic.ValidationError):
        create_backend(client, SERVICE_ID, 1, name="origin", colour="blue")


@pytest.mark.parametrize(
    "service_id, service_version, field",
    [
        ("", 1, "service_id"),
        (SERVICE_ID, 0, "service_version"),
        ("", 0, "service_id"),
    ],
)
def test_create_backend_missing_ids(
    client: Client, service_id: str, service_version: int, field: str
) -> None:
    with pytest.raises(FieldError) as exc_info:
        create_backend(client, service_id, service_version, name="origin")
    assert exc_info.value.field == field


@responses.activate
def test_get_backend(client: Client) -> None:
    responses.add(
        responses.GET,
        versioned_url("backend", "my%20origin"),
        json={"name": "my origin", "address": "example.com"},
        status=200,
    )

    backend = get_backend(client, SERVICE_ID, 1, "my origin")

    assert backend.name == "my origin"


def test_get_backend_missing_name(client: Client) -> None:
    with pytest.raises(FieldError) as exc_info:
        get_backend(client, SERVICE_ID, 1, "")
    assert exc_info.value.field == "name"


@responses.activate
def test_get_backend_not_found(client: Client) -> None:
    responses.add(
        responses.GET,
        versioned_url("backend", "nope"),
        json={"msg": "Record not found"},
        status=404,
    )

    with pytest.raises(HTTPError) as exc_info:
        get_backend(client, SERVICE_ID, 1, "nope")
    assert exc_info.value.is_not_found


@responses.activate
def test_update_backend_rename(client: Client) -> None:
    responses.add(
        responses.PUT,
        versioned_url("backend", "origin"),
        json={"name": "origin-2", "port": 8080},
        status=200,
    )

    backend = update_backend(
        client, SERVICE_ID, 1, "origin", new_name="origin-2", port=8080
    )

    assert backend.name == "origin-2"
    request = responses.calls[0].request
    assert parse_qs(request.body) == {"port": ["8080"], "name": ["origin-2"]}


@responses.activate
def test_delete_backend(client: Client) -> None:
    responses.add(
        responses.DELETE,
        versioned_url("backend", "origin"),
        json={"status": "ok"},
        status=200,
    )

    delete_backend(client, SERVICE_ID, 1, "origin")

    assert len(responses.calls) == 1


@responses.activate
def test_delete_backend_not_ok(client: Client) -> None:
    responses.add(
        responses.DELETE,
        versioned_url("backend", "origin"),
        json={"status": "error", "msg": "in use"},
        status=200,
    )

    with pytest.raises(NotOKError):
        delete_backend(client, SERVICE_ID, 1, "origin")
