"""URL path builders for Fastly API resources."""

from __future__ import annotations

from typing import Union
from urllib.parse import quote

__all__ = ["to_safe_url", "service_path", "versioned_path"]


def to_safe_url(*segments: Union[str, int]) -> str:
    """Join path segments into an absolute API path, escaping each segment.

    Examples
    --------
    >>> to_safe_url("service", "SU1Z0isxPaozGVKXdv0eY", "backend", "a/b")
    '/service/SU1Z0isxPaozGVKXdv0eY/backend/a%2Fb'
    """
    return "/" + "/".join(quote(str(s), safe="") for s in segments)


def service_path(service_id: str, *segments: Union[str, int]) -> str:
    """Path to a resource belonging to a service, but not to a version."""
    return to_safe_url("service", service_id, *segments)


def versioned_path(
    service_id: str, service_version: int, *segments: Union[str, int]
) -> str:
    """Path to a resource in a service's configuration version."""
    return to_safe_url(
        "service", service_id, "version", service_version, *segments
    )
