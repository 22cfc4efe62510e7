"""Tests for the cdnkeeper.client module."""

from __future__ import annotations

import datetime

import pytest
import requests
import responses

from cdnkeeper.client import (
    API_KEY_HEADER,
    DEFAULT_ENDPOINT,
    Client,
    _redact,
    check_response,
    default_user_agent,
)
from cdnkeeper.config import get_config
from cdnkeeper.exceptions import HTTPError
from conftest import API_KEY, ENDPOINT


def test_defaults_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FASTLY_API_KEY", "env-key")
    monkeypatch.setenv("FASTLY_API_URL", "https://api.example.com/")
    monkeypatch.setenv("FASTLY_DEBUG_MODE", "true")
    monkeypatch.setenv("FASTLY_USER_AGENT", "my-app/1.0")

    client = Client()

    assert client.api_key == "env-key"
    assert client.address == "https://api.example.com"
    assert client.debug_mode is True
    assert client.user_agent == f"my-app/1.0, {default_user_agent()}"


def test_defaults_without_environment() -> None:
    client = Client()

    assert client.api_key == ""
    assert client.address == DEFAULT_ENDPOINT
    assert client.debug_mode is False
    assert client.user_agent == default_user_agent()
    assert client.rate_limit_remaining == 1000


def test_from_config() -> None:
    client = Client.from_config(get_config("testing"))

    assert client.api_key == "test-api-key"
    assert client.address == "https://api.fastly.test"
    assert client.url("/service") == "https://api.fastly.test/service"


@responses.activate
def test_default_headers(client: Client) -> None:
    url = f"{ENDPOINT}/current_customer"
    responses.add(responses.GET, url, json={"id": "x"}, status=200)

    client.get("/current_customer")

    assert len(responses.calls) == 1
    request = responses.calls[0].request
    assert request.url == url
    assert request.headers["Fastly-Key"] == API_KEY
    assert request.headers["Accept"] == "application/json"
    assert request.headers["User-Agent"].startswith("cdnkeeper/")


@responses.activate
def test_no_key_header_without_api_key() -> None:
    url = f"{ENDPOINT}/public-ip-list"
    responses.add(responses.GET, url, json={"addresses": []}, status=200)

    Client(api_key="", endpoint=ENDPOINT).get("/public-ip-list")

    assert API_KEY_HEADER not in responses.calls[0].request.headers


@responses.activate
def test_form_request(client: Client) -> None:
    url = f"{ENDPOINT}/service"
    responses.add(responses.POST, url, json={}, status=200)

    client.post_form("/service", {"name": "my service", "comment": None})

    request = responses.calls[0].request
    assert request.headers["Content-Type"] == (
        "application/x-www-form-urlencoded"
    )
    assert request.body == "name=my+service"


@responses.activate
def test_json_request(client: Client) -> None:
    url = f"{ENDPOINT}/resources"
    responses.add(responses.PATCH, url, json={"status": "ok"}, status=200)

    client.patch_json("/resources", {"items": [1, 2]})

    request = responses.calls[0].request
    assert request.headers["Content-Type"] == "application/json"
    assert request.body == b'{"items": [1, 2]}'


@pytest.mark.parametrize("status", [200, 201, 202, 204, 205, 206])
@responses.activate
def test_success_statuses(client: Client, status: int) -> None:
    url = f"{ENDPOINT}/service"
    responses.add(responses.GET, url, status=status)

    response = client.get("/service")

    assert response.status_code == status


@responses.activate
def test_jsonapi_error(client: Client) -> None:
    url = f"{ENDPOINT}/service/abc/version/1/backend"
    responses.add(
        responses.GET,
        url,
        status=400,
        content_type="application/vnd.api+json",
        json={
            "errors": [
                {
                    "id": "01",
                    "title": "Bad value",
                    "detail": "Port is out of range",
                    "code": "port",
                    "status": 400,
                },
                {"title": "Second problem"},
            ]
        },
    )

    with pytest.raises(HTTPError) as exc_info:
        client.get("/service/abc/version/1/backend")

    error = exc_info.value
    assert error.status_code == 400
    assert len(error.errors) == 2
    assert error.errors[0].id == "01"
    assert error.errors[0].title == "Bad value"
    assert error.errors[0].detail == "Port is out of range"
    assert error.errors[0].code == "port"
    assert error.errors[0].status == "400"
    assert error.errors[1].title == "Second problem"
    assert "Detail: Port is out of range" in str(error)


@responses.activate
def test_problem_details_error(client: Client) -> None:
    url = f"{ENDPOINT}/service/abc"
    responses.add(
        responses.GET,
        url,
        status=403,
        content_type="application/problem+json",
        json={"title": "Forbidden", "detail": "No access", "status": 403},
    )

    with pytest.raises(HTTPError) as exc_info:
        client.get("/service/abc")

    error = exc_info.value
    assert error.status_code == 403
    assert len(error.errors) == 1
    assert error.errors[0].title == "Forbidden"
    assert error.errors[0].detail == "No access"
    assert error.errors[0].status == "403"


@responses.activate
def test_legacy_error(client: Client) -> None:
    url = f"{ENDPOINT}/service/abc"
    responses.add(
        responses.GET,
        url,
        status=404,
        json={"msg": "Record not found", "detail": "Cannot find service"},
    )

    with pytest.raises(HTTPError) as exc_info:
        client.get("/service/abc")

    error = exc_info.value
    assert error.is_not_found
    assert error.errors[0].title == "Record not found"
    assert error.errors[0].detail == "Cannot find service"
    assert str(error).startswith("404 - Not Found:")


@responses.activate
def test_undecodable_error(client: Client) -> None:
    url = f"{ENDPOINT}/service/abc"
    responses.add(
        responses.GET,
        url,
        status=500,
        body="<html>upstream error</html>",
        content_type="text/html",
    )

    with pytest.raises(HTTPError) as exc_info:
        client.get("/service/abc")

    error = exc_info.value
    assert error.status_code == 500
    assert error.errors[0].title == "Undefined error"
    assert error.errors[0].detail == "<html>upstream error</html>"


@responses.activate
def test_empty_error_body(client: Client) -> None:
    url = f"{ENDPOINT}/service/abc"
    responses.add(responses.DELETE, url, status=401)

    with pytest.raises(HTTPError) as exc_info:
        client.delete("/service/abc")

    assert exc_info.value.status_code == 401
    assert exc_info.value.errors == []


def test_check_response_redirect_is_an_error() -> None:
    response = requests.Response()
    response.status_code = 302

    with pytest.raises(HTTPError):
        check_response(response)


@responses.activate
def test_rate_limit_tracking(client: Client) -> None:
    url = f"{ENDPOINT}/service"
    responses.add(
        responses.POST,
        url,
        json={},
        status=200,
        headers={
            "Fastly-RateLimit-Remaining": "998",
            "Fastly-RateLimit-Reset": "1700000000",
        },
    )
    responses.add(
        responses.GET,
        url,
        json=[],
        status=200,
        headers={"Fastly-RateLimit-Remaining": "10"},
    )

    client.post("/service")
    assert client.rate_limit_remaining == 998
    assert client.rate_limit_reset == datetime.datetime(
        2023, 11, 14, 22, 13, 20, tzinfo=datetime.timezone.utc
    )

    # Reads don't count against the rate limit
    client.get("/service")
    assert client.rate_limit_remaining == 998


@responses.activate
def test_rate_limit_untouched_by_errors(client: Client) -> None:
    url = f"{ENDPOINT}/service"
    responses.add(
        responses.POST,
        url,
        status=500,
        headers={"Fastly-RateLimit-Remaining": "5"},
    )

    with pytest.raises(HTTPError):
        client.post("/service")
    assert client.rate_limit_remaining == 1000


@responses.activate
def test_debug_mode_request(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FASTLY_DEBUG_MODE", "true")
    url = f"{ENDPOINT}/service"
    responses.add(responses.GET, url, json=[], status=200)

    client = Client(api_key=API_KEY, endpoint=ENDPOINT)
    assert client.debug_mode is True
    response = client.get("/service")

    assert response.json() == []


def test_redact_removes_api_key() -> None:
    headers = {API_KEY_HEADER: API_KEY, "Accept": "application/json"}

    assert _redact(headers) == {"Accept": "application/json"}


def test_session_is_shared() -> None:
    session = requests.Session()
    with Client(api_key=API_KEY, session=session) as client:
        assert client._session is session
    # A caller-owned session stays usable after the client closes
    assert session.adapters
