"""Tests for the cdnkeeper.resources.vcl module."""

from __future__ import annotations

from urllib.parse import parse_qs

import responses

from cdnkeeper.client import Client
from cdnkeeper.resources.vcl import (
    activate_vcl,
    create_vcl,
    get_generated_vcl,
)
from conftest import SERVICE_ID, versioned_url

MAIN_VCL = "sub vcl_recv {\n#FASTLY recv\n}\n"


@responses.activate
def test_create_vcl(client: Client) -> None:
    responses.add(
        responses.POST,
        versioned_url("vcl"),
        json={"name": "main", "content": MAIN_VCL, "main": True},
        status=200,
    )

    vcl = create_vcl(
        client, SERVICE_ID, 1, name="main", content=MAIN_VCL, main=True
    )

    assert vcl.main is True
    assert parse_qs(responses.calls[0].request.body) == {
        "name": ["main"],
        "content": [MAIN_VCL],
        "main": ["1"],
    }


@responses.activate
def test_activate_vcl(client: Client) -> None:
    responses.add(
        responses.PUT,
        versioned_url("vcl", "custom", "main"),
        json={"name": "custom", "main": "1"},
        status=200,
    )

    vcl = activate_vcl(client, SERVICE_ID, 1, "custom")

    assert vcl.name == "custom"
    assert vcl.main is True


@responses.activate
def test_get_generated_vcl(client: Client) -> None:
    responses.add(
        responses.GET,
        versioned_url("generated_vcl"),
        json={"content": MAIN_VCL, "version": 1, "service_id": SERVICE_ID},
        status=200,
    )

    vcl = get_generated_vcl(client, SERVICE_ID, 1)

    assert vcl.content == MAIN_VCL
    assert vcl.service_version == 1
