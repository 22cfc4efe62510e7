"""Tests for the cdnkeeper.resources.user module."""

from __future__ import annotations

from urllib.parse import parse_qs

import pytest
import responses

from cdnkeeper.client import Client
from cdnkeeper.exceptions import FieldError, NotOKError
from cdnkeeper.resources.user import (
    create_user,
    delete_user,
    get_current_user,
    get_user,
    list_customer_users,
    reset_user_password,
    update_user,
)
from conftest import ENDPOINT


@responses.activate
def test_get_current_user(client: Client) -> None:
    responses.add(
        responses.GET,
        f"{ENDPOINT}/current_user",
        json={
            "id": "u1",
            "login": "me@example.com",
            "role": "superuser",
            "locked": False,
            "two_factor_auth_enabled": "1",
        },
        status=200,
    )

    user = get_current_user(client)

    assert user.login == "me@example.com"
    assert user.locked is False
    assert user.two_factor_auth_enabled is True


@responses.activate
def test_get_user(client: Client) -> None:
    responses.add(
        responses.GET,
        f"{ENDPOINT}/user/u2",
        json={"id": "u2", "login": "ops@example.com", "role": "engineer"},
        status=200,
    )

    user = get_user(client, "u2")

    assert user.id == "u2"
    assert user.role == "engineer"
    assert responses.calls[0].request.method == "GET"


@responses.activate
def test_list_customer_users(client: Client) -> None:
    responses.add(
        responses.GET,
        f"{ENDPOINT}/customer/c1/users",
        json=[{"id": "u2", "name": "B"}, {"id": "u1", "name": "A"}],
        status=200,
    )

    users = list_customer_users(client, "c1")

    assert [u.id for u in users] == ["u2", "u1"]


@responses.activate
def test_create_and_update_user(client: Client) -> None:
    responses.add(
        responses.POST,
        f"{ENDPOINT}/user",
        json={"id": "u3", "login": "new@example.com", "role": "user"},
        status=200,
    )
    responses.add(
        responses.PUT,
        f"{ENDPOINT}/user/u3",
        json={"id": "u3", "login": "new@example.com", "role": "engineer"},
        status=200,
    )

    user = create_user(
        client, login="new@example.com", name="New", role="user"
    )
    assert user.id == "u3"
    assert parse_qs(responses.calls[0].request.body) == {
        "login": ["new@example.com"],
        "name": ["New"],
        "role": ["user"],
    }

    user = update_user(client, "u3", role="engineer")
    assert user.role == "engineer"
    assert responses.calls[1].request.body == "role=engineer"


@responses.activate
def test_delete_user(client: Client) -> None:
    responses.add(
        responses.DELETE,
        f"{ENDPOINT}/user/u3",
        json={"status": "ok"},
        status=200,
    )

    delete_user(client, "u3")


@responses.activate
def test_reset_user_password(client: Client) -> None:
    url = f"{ENDPOINT}/user/me%40example.com/password/request_reset"
    responses.add(responses.POST, url, json={"status": "fail"}, status=200)

    with pytest.raises(NotOKError):
        reset_user_password(client, "me@example.com")
    assert responses.calls[0].request.url == url


def test_update_user_requires_id(client: Client) -> None:
    with pytest.raises(FieldError):
        update_user(client, "", role="user")
