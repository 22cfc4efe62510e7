"""py.test fixtures available to all test modules without explicit import."""

from __future__ import annotations

from typing import Iterator

import pytest

from cdnkeeper.client import Client

API_KEY = "d3cafb4dde4dbeef"
"""API key of the `client` fixture."""

SERVICE_ID = "SU1Z0isxPaozGVKXdv0eY"
"""A service ID, used throughout the tests."""

ENDPOINT = "https://api.fastly.com"


@pytest.fixture(autouse=True)
def clear_fastly_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's Fastly environment out of the tests."""
    for name in (
        "FASTLY_API_KEY",
        "FASTLY_API_URL",
        "FASTLY_DEBUG_MODE",
        "FASTLY_USER_AGENT",
        "CDNKEEPER_PROFILE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def client() -> Iterator[Client]:
    """A client for the production API endpoint (requests are mocked with
    ``responses``).
    """
    with Client(api_key=API_KEY, endpoint=ENDPOINT) as c:
        yield c


def versioned_url(*segments: object, version: int = 1) -> str:
    """URL of a resource in version ``version`` of the test service."""
    path = "/".join(str(s) for s in segments)
    url = f"{ENDPOINT}/service/{SERVICE_ID}/version/{version}"
    return f"{url}/{path}" if path else url
