"""Tests for the cdnkeeper.resources.acl_entry module."""

from __future__ import annotations

import json
from urllib.parse import parse_qs

import pytest
import responses
from responses import matchers

from cdnkeeper.client import Client
from cdnkeeper.exceptions import FieldError
from cdnkeeper.resources.acl_entry import (
    BatchACLEntry,
    batch_modify_acl_entries,
    create_acl_entry,
    list_acl_entries,
    update_acl_entry,
)
from conftest import ENDPOINT, SERVICE_ID

ACL_ID = "6tUXdegLTf5BCig0zGFrU3"
ACL_URL = f"{ENDPOINT}/service/{SERVICE_ID}/acl/{ACL_ID}"


@responses.activate
def test_list_acl_entries_paginates(client: Client) -> None:
    entries_url = f"{ACL_URL}/entries"
    responses.add(
        responses.GET,
        entries_url,
        json=[{"id": "1", "ip": "192.0.2.9", "subnet": "32"}],
        status=200,
        headers={"Link": f'<{entries_url}?page=2&per_page=1>; rel="next"'},
        match=[matchers.query_param_matcher({"page": "1", "per_page": "1"})],
    )
    responses.add(
        responses.GET,
        entries_url,
        json=[{"id": "2", "ip": "192.0.2.1", "negated": "1"}],
        status=200,
        match=[matchers.query_param_matcher({"page": "2", "per_page": "1"})],
    )

    entries = list_acl_entries(client, SERVICE_ID, ACL_ID, per_page=1)

    assert [e.ip for e in entries] == ["192.0.2.1", "192.0.2.9"]
    assert entries[0].negated is True
    assert entries[1].subnet == 32
    assert len(responses.calls) == 2


@responses.activate
def test_create_acl_entry(client: Client) -> None:
    responses.add(
        responses.POST,
        f"{ACL_URL}/entry",
        json={"id": "e1", "ip": "198.51.100.0", "subnet": 24},
        status=200,
    )

    entry = create_acl_entry(
        client, SERVICE_ID, ACL_ID, ip="198.51.100.0", subnet=24, negated=False
    )

    assert entry.id == "e1"
    assert parse_qs(responses.calls[0].request.body) == {
        "ip": ["198.51.100.0"],
        "subnet": ["24"],
        "negated": ["0"],
    }


@responses.activate
def test_update_acl_entry_uses_patch(client: Client) -> None:
    responses.add(
        responses.PATCH,
        f"{ACL_URL}/entry/e1",
        json={"id": "e1", "ip": "198.51.100.0", "comment": "office"},
        status=200,
    )

    entry = update_acl_entry(
        client, SERVICE_ID, ACL_ID, "e1", comment="office"
    )

    assert entry.comment == "office"
    assert responses.calls[0].request.body == "comment=office"


@responses.activate
def test_batch_modify_acl_entries(client: Client) -> None:
    responses.add(
        responses.PATCH,
        f"{ACL_URL}/entries",
        json={"status": "ok"},
        status=200,
    )

    batch_modify_acl_entries(
        client,
        SERVICE_ID,
        ACL_ID,
        [
            BatchACLEntry(op="create", ip="192.0.2.0", subnet=24),
            BatchACLEntry(op="delete", entry_id="e1"),
        ],
    )

    assert json.loads(responses.calls[0].request.body) == {
        "entries": [
            {"op": "create", "ip": "192.0.2.0", "subnet": 24},
            {"op": "delete", "id": "e1"},
        ]
    }


def test_acl_entry_requires_acl_id(client: Client) -> None:
    with pytest.raises(FieldError) as exc_info:
        list_acl_entries(client, SERVICE_ID, "")
    assert exc_info.value.field == "acl_id"
