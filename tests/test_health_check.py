"""Tests for the cdnkeeper.resources.health_check module."""

from __future__ import annotations

from urllib.parse import unquote_plus

import responses

from cdnkeeper.client import Client
from cdnkeeper.resources.health_check import (
    create_health_check,
    list_health_checks,
    update_health_check,
)
from conftest import SERVICE_ID, versioned_url


@responses.activate
def test_create_health_check_with_headers(client: Client) -> None:
    responses.add(
        responses.POST,
        versioned_url("healthcheck"),
        json={
            "name": "origin-check",
            "path": "/status",
            "check_interval": "60000",
            "headers": ["Host: example.com", "User-Agent: fastly"],
        },
        status=200,
    )

    check = create_health_check(
        client,
        SERVICE_ID,
        1,
        name="origin-check",
        path="/status",
        check_interval=60000,
        headers=["Host: example.com", "User-Agent: fastly"],
    )

    assert check.check_interval == 60000
    assert check.headers == ["Host: example.com", "User-Agent: fastly"]

    body = responses.calls[0].request.body
    fields, headers = body.split("&headers=")
    assert fields == "name=origin-check&path=%2Fstatus&check_interval=60000"
    assert unquote_plus(headers) == (
        '["Host:example.com","User-Agent:fastly"]'
    )


@responses.activate
def test_update_health_check_headers(client: Client) -> None:
    responses.add(
        responses.PUT,
        versioned_url("healthcheck", "origin-check"),
        json={"name": "origin-check", "headers": ["X-Check: 1"]},
        status=200,
    )

    update_health_check(
        client, SERVICE_ID, 1, "origin-check", headers=["X-Check: 1"]
    )

    body = responses.calls[0].request.body
    assert body == "headers=%5B%22X-Check%3A1%22%5D"


@responses.activate
def test_list_health_checks(client: Client) -> None:
    responses.add(
        responses.GET,
        versioned_url("healthcheck"),
        json=[{"name": "b"}, {"name": "a", "headers": None}],
        status=200,
    )

    checks = list_health_checks(client, SERVICE_ID, 1)

    assert [c.name for c in checks] == ["a", "b"]
    assert checks[0].headers is None
