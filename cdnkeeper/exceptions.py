"""Custom exceptions."""

from __future__ import annotations

from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any, Dict, List, Optional

__all__ = [
    "CdnKeeperError",
    "FieldError",
    "ErrorObject",
    "HTTPError",
    "NotOKError",
]


class CdnKeeperError(Exception):
    """Base class for errors raised by cdnkeeper."""


class FieldError(CdnKeeperError, ValueError):
    """A required input field was missing, or its value was unusable.

    Raised before any request is sent to the Fastly API.

    Parameters
    ----------
    field : str
        Name of the keyword argument that is missing (e.g. ``service_id``).
    message : str, optional
        Describes a problem other than the field being absent.
    """

    def __init__(self, field: str, message: Optional[str] = None) -> None:
        self.field = field
        self.message = message
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.message:
            return f"problem with field '{self.field}': {self.message}"
        return f"missing required field '{self.field}'"


@dataclass
class ErrorObject:
    """A single error reported in a Fastly API error response."""

    title: str = ""
    detail: str = ""
    id: str = ""
    code: str = ""
    status: str = ""
    meta: Optional[Dict[str, Any]] = None


@dataclass(eq=False)
class HTTPError(CdnKeeperError):
    """The Fastly API responded with an unsuccessful status code."""

    status_code: int
    errors: List[ErrorObject] = field(default_factory=list)

    def __post_init__(self) -> None:
        super().__init__(self.status_code)

    @property
    def is_not_found(self) -> bool:
        """`True` if the resource does not exist (a 404 response)."""
        return self.status_code == 404

    def __str__(self) -> str:
        try:
            reason = HTTPStatus(self.status_code).phrase
        except ValueError:
            reason = ""
        lines = [f"{self.status_code} - {reason}:"]
        for error in self.errors:
            lines.append("")
            if error.id:
                lines.append(f"    ID:     {error.id}")
            if error.title:
                lines.append(f"    Title:  {error.title}")
            if error.detail:
                lines.append(f"    Detail: {error.detail}")
            if error.code:
                lines.append(f"    Code:   {error.code}")
            if error.meta is not None:
                lines.append(f"    Meta:   {error.meta}")
        return "\n".join(lines)


class NotOKError(CdnKeeperError):
    """The Fastly API accepted a request but did not report an ``ok``
    status.
    """
