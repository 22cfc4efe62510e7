"""Tests for the shared request helpers and URL builders."""

from __future__ import annotations

from typing import Optional

import pytest

from cdnkeeper._crud import _next_page, require, sort_by, sort_by_name
from cdnkeeper._urls import service_path, to_safe_url, versioned_path
from cdnkeeper.exceptions import FieldError
from cdnkeeper.resources.condition import Condition


def test_require_reports_first_missing_field() -> None:
    require(("service_id", "abc"), ("service_version", 3))

    with pytest.raises(FieldError) as exc_info:
        require(("service_id", "abc"), ("service_version", 0), ("name", ""))
    assert exc_info.value.field == "service_version"


def test_sort_by_name_none_first() -> None:
    conditions = [
        Condition(name="b"),
        Condition(name=None),
        Condition(name="a"),
    ]

    assert [c.name for c in sort_by_name(conditions)] == [None, "a", "b"]


def test_sort_by_is_stable() -> None:
    conditions = [
        Condition(name="x", priority=2),
        Condition(name="y", priority=1),
        Condition(name="z", priority=2),
    ]

    ordered = sort_by(conditions, lambda c: c.priority)

    assert [c.name for c in ordered] == ["y", "x", "z"]


@pytest.mark.parametrize(
    "links, expected",
    [
        ({}, None),
        ({"next": {"url": "https://api.fastly.com/service?page=3"}}, 3),
        ({"next": {"url": "https://api.fastly.com/service"}}, None),
        ({"last": {"url": "https://api.fastly.com/service?page=9"}}, None),
    ],
)
def test_next_page(links: dict, expected: Optional[int]) -> None:
    assert _next_page(links) == expected


def test_paths_escape_segments() -> None:
    assert to_safe_url("service", "a b", "purge", "k/1") == (
        "/service/a%20b/purge/k%2F1"
    )
    assert service_path("abc", "acl", "x") == "/service/abc/acl/x"
    assert versioned_path("abc", 4, "logging", "s3") == (
        "/service/abc/version/4/logging/s3"
    )
