"""Tests for the cdnkeeper.resources.service module."""

from __future__ import annotations

import pytest
import responses
from responses import matchers

from cdnkeeper.client import Client
from cdnkeeper.exceptions import FieldError, HTTPError
from cdnkeeper.resources.service import (
    create_service,
    delete_service,
    get_service,
    get_service_details,
    iter_services,
    list_service_domains,
    list_services,
    search_service,
    update_service,
)
from conftest import ENDPOINT, SERVICE_ID

SERVICES_URL = f"{ENDPOINT}/service"
SERVICE_URL = f"{ENDPOINT}/service/{SERVICE_ID}"


@responses.activate
def test_list_services(client: Client) -> None:
    responses.add(
        responses.GET,
        SERVICES_URL,
        json=[
            {"id": "2", "name": "www", "version": 4, "type": "vcl"},
            {"id": "1", "name": "docs", "version": 1, "type": "vcl"},
        ],
        status=200,
        match=[
            matchers.query_param_matcher(
                {"direction": "ascend", "per_page": "20"}
            )
        ],
    )

    services = list_services(client, direction="ascend", per_page=20)

    assert [s.name for s in services] == ["docs", "www"]
    assert services[1].active_version == 4


@responses.activate
def test_iter_services_follows_links(client: Client) -> None:
    responses.add(
        responses.GET,
        SERVICES_URL,
        json=[{"id": "a", "name": "alpha"}],
        status=200,
        headers={"Link": f'<{SERVICES_URL}?page=2&per_page=1>; rel="next"'},
        match=[matchers.query_param_matcher({"page": "1", "per_page": "1"})],
    )
    responses.add(
        responses.GET,
        SERVICES_URL,
        json=[{"id": "b", "name": "beta"}],
        status=200,
        headers={
            "Link": (
                f'<{SERVICES_URL}?page=1&per_page=1>; rel="first", '
                f'<{SERVICES_URL}?page=2&per_page=1>; rel="last"'
            )
        },
        match=[matchers.query_param_matcher({"page": "2", "per_page": "1"})],
    )

    services = list(iter_services(client, per_page=1))

    assert [s.id for s in services] == ["a", "b"]
    assert len(responses.calls) == 2


@responses.activate
def test_create_service(client: Client) -> None:
    responses.add(
        responses.POST,
        SERVICES_URL,
        json={"id": SERVICE_ID, "name": "docs", "customer_id": "c1"},
        status=200,
    )

    service = create_service(client, name="docs", comment="Docs site")

    assert service.id == SERVICE_ID
    assert responses.calls[0].request.body == "name=docs&comment=Docs+site"


@responses.activate
def test_get_service_fills_active_version(client: Client) -> None:
    responses.add(
        responses.GET,
        SERVICE_URL,
        json={
            "id": SERVICE_ID,
            "name": "docs",
            "versions": [
                {"number": 1, "active": False},
                {"number": 2, "active": True},
                {"number": 3, "active": False},
            ],
        },
        status=200,
    )

    service = get_service(client, SERVICE_ID)

    assert service.active_version == 2
    assert service.versions is not None
    assert len(service.versions) == 3


def test_get_service_requires_id(client: Client) -> None:
    with pytest.raises(FieldError) as exc_info:
        get_service(client, "")
    assert exc_info.value.field == "service_id"


@responses.activate
def test_get_service_details(client: Client) -> None:
    responses.add(
        responses.GET,
        f"{SERVICE_URL}/details",
        json={
            "id": SERVICE_ID,
            "name": "docs",
            "active_version": {"number": 2, "active": True},
            "version": {"number": 3, "active": False},
        },
        status=200,
    )

    details = get_service_details(client, SERVICE_ID)

    assert details.active_version is not None
    assert details.active_version.number == 2
    assert details.version is not None
    assert details.version.number == 3


@responses.activate
def test_update_and_delete_service(client: Client) -> None:
    responses.add(
        responses.PUT,
        SERVICE_URL,
        json={"id": SERVICE_ID, "name": "renamed"},
        status=200,
    )
    responses.add(
        responses.DELETE, SERVICE_URL, json={"status": "ok"}, status=200
    )

    service = update_service(client, SERVICE_ID, name="renamed")
    assert service.name == "renamed"

    delete_service(client, SERVICE_ID)
    assert responses.calls[1].request.method == "DELETE"


@responses.activate
def test_search_service(client: Client) -> None:
    responses.add(
        responses.GET,
        f"{SERVICES_URL}/search",
        json={"id": SERVICE_ID, "name": "docs site"},
        status=200,
        match=[matchers.query_param_matcher({"name": "docs site"})],
    )

    service = search_service(client, "docs site")

    assert service.id == SERVICE_ID


@responses.activate
def test_search_service_missing(client: Client) -> None:
    responses.add(
        responses.GET,
        f"{SERVICES_URL}/search",
        json={"msg": "Bad request", "detail": "Cannot find service"},
        status=400,
    )

    with pytest.raises(HTTPError) as exc_info:
        search_service(client, "nope")
    assert exc_info.value.status_code == 400


@responses.activate
def test_list_service_domains(client: Client) -> None:
    responses.add(
        responses.GET,
        f"{SERVICE_URL}/domain",
        json=[
            {"name": "www.example.com", "version": 2, "locked": "1"},
            {"name": "example.com", "version": 1, "locked": "0"},
        ],
        status=200,
    )

    domains = list_service_domains(client, SERVICE_ID)

    assert [d.name for d in domains] == ["example.com", "www.example.com"]
    assert domains[1].locked is True
    assert domains[1].service_version == 2
