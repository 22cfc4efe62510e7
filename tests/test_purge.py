import uuid

import pytest
import responses

from cdnkeeper.client import Client
from cdnkeeper.exceptions import FieldError, HTTPError
from cdnkeeper.purge import purge_all, purge_key, purge_url
from conftest import API_KEY, ENDPOINT, SERVICE_ID


@responses.activate
def test_purge_key(client: Client) -> None:
    surrogate_key = uuid.uuid4().hex

    url = "{0}/service/{1}/purge/{2}".format(
        ENDPOINT, SERVICE_ID, surrogate_key
    )

    # Mock the API call and response
    responses.add(
        responses.POST, url, json={"status": "ok", "id": "108-1"}, status=200
    )

    result = purge_key(client, SERVICE_ID, surrogate_key)
    assert result.status == "ok"
    assert result.id == "108-1"
    assert len(responses.calls) == 1
    assert responses.calls[0].request.url == url
    assert responses.calls[0].request.headers["Fastly-Key"] == API_KEY
    assert responses.calls[0].request.headers["Accept"] == "application/json"
    assert "Fastly-Soft-Purge" not in responses.calls[0].request.headers


@responses.activate
def test_purge_key_fail(client: Client) -> None:
    surrogate_key = uuid.uuid4().hex

    url = "{0}/service/{1}/purge/{2}".format(
        ENDPOINT, SERVICE_ID, surrogate_key
    )

    # Mock the API call and response
    responses.add(responses.POST, url, status=404)

    with pytest.raises(HTTPError):
        purge_key(client, SERVICE_ID, surrogate_key)
    assert len(responses.calls) == 1
    assert responses.calls[0].request.url == url
    assert responses.calls[0].request.headers["Fastly-Key"] == API_KEY


@responses.activate
def test_soft_purge_key(client: Client) -> None:
    url = "{0}/service/{1}/purge/my-key".format(ENDPOINT, SERVICE_ID)
    responses.add(responses.POST, url, json={"status": "ok"}, status=200)

    purge_key(client, SERVICE_ID, "my-key", soft=True)

    assert responses.calls[0].request.headers["Fastly-Soft-Purge"] == "1"


@responses.activate
def test_purge_all(client: Client) -> None:
    url = "{0}/service/{1}/purge_all".format(ENDPOINT, SERVICE_ID)
    responses.add(responses.POST, url, json={"status": "ok"}, status=200)

    result = purge_all(client, SERVICE_ID)

    assert result.status == "ok"
    assert responses.calls[0].request.url == url


@responses.activate
def test_purge_url(client: Client) -> None:
    url = "{0}/purge/www.example.com/index.html".format(ENDPOINT)
    responses.add(
        responses.POST, url, json={"status": "ok", "id": "x"}, status=200
    )

    result = purge_url(client, "www.example.com/index.html")

    assert result.id == "x"
    assert responses.calls[0].request.url == url


def test_purge_key_requires_key(client: Client) -> None:
    with pytest.raises(FieldError) as exc_info:
        purge_key(client, SERVICE_ID, "")
    assert exc_info.value.field == "key"

    with pytest.raises(FieldError) as exc_info:
        purge_key(client, "", "")
    assert exc_info.value.field == "service_id"
