"""Conversions between Python values and the Fastly API wire formats.

Requests to the Fastly API are mostly form-encoded, and responses are JSON.
The helpers here cover both directions:

- `Compatibool` and `Timestamp` are annotated types used by the resource
  models to coerce the API's loosely-typed JSON values.
- `encode_form` serializes a mapping of field values into a form body.
- `decode_body` and `decode_list` validate a response body into models.
"""

from __future__ import annotations

import datetime
import enum
import json
from typing import (
    TYPE_CHECKING,
    Annotated,
    Any,
    Callable,
    List,
    Mapping,
    Optional,
    Tuple,
    Type,
    TypeVar,
)
from urllib.parse import quote_plus, urlencode

from dateutil import parser as datetime_parser
from dateutil.tz import tzutc
from pydantic import BaseModel, BeforeValidator, PlainSerializer

if TYPE_CHECKING:
    import requests

__all__ = [
    "Compatibool",
    "Timestamp",
    "StatusResponse",
    "known_member",
    "parse_compatibool",
    "parse_utc_datetime",
    "format_utc_datetime",
    "format_form_value",
    "encode_form",
    "decode_body",
    "decode_list",
]

M = TypeVar("M", bound=BaseModel)

_TRUE_STRINGS = frozenset({"1", "true", "t", "yes", "y", "on"})


def parse_compatibool(value: Any) -> Any:
    """Coerce the API's boolean spellings (``"1"``, ``"0"``, ``true``,
    ``1``) to `bool`.
    """
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return value


def _serialize_compatibool(value: bool) -> str:
    return "1" if value else "0"


Compatibool = Annotated[
    bool,
    BeforeValidator(parse_compatibool),
    PlainSerializer(_serialize_compatibool, return_type=str),
]
"""A boolean that form-encodes as ``"1"``/``"0"`` for compatibility with the
Fastly API.
"""


def parse_utc_datetime(datetime_str: Any) -> Optional[datetime.datetime]:
    """Parse a date string, returning a timezone-aware UTC datetime.

    Both RFC 3339 and the ``YYYY-MM-DD HH:MM:SS`` format used by some Fastly
    endpoints are accepted. Naive values are assumed to be UTC. Empty strings
    are treated as an unset value.
    """
    if datetime_str is None or datetime_str == "":
        return None
    if isinstance(datetime_str, datetime.datetime):
        date = datetime_str
    else:
        date = datetime_parser.parse(str(datetime_str))
    if date.tzinfo is None:
        return date.replace(tzinfo=tzutc())
    return date.astimezone(tzutc())


def format_utc_datetime(dt: Optional[datetime.datetime]) -> Optional[str]:
    """Standardized UTC `str` representation for a `datetime.datetime`."""
    if dt is None:
        return None
    if dt.tzinfo is not None:
        dt = dt.astimezone(tzutc()).replace(tzinfo=None)
    return dt.replace(microsecond=0).isoformat() + "Z"


Timestamp = Annotated[
    Optional[datetime.datetime],
    BeforeValidator(parse_utc_datetime),
    PlainSerializer(format_utc_datetime, return_type=Optional[str]),
]
"""A creation, update, deletion or expiry time (UTC).

Serializes to an RFC 3339 string such as ``2030-01-01T00:00:00Z``.
"""


def known_member(enum_type: Type[enum.Enum]) -> Callable[[Any], Any]:
    """Build a validator that converts a decoded value to a member of
    ``enum_type``, passing values the enum doesn't list through unchanged.

    Response models pair it with ``Union[enum_type, str]`` (or ``int``) so
    that codes the API adds later still decode.
    """

    def validate(value: Any) -> Any:
        try:
            return enum_type(value)
        except ValueError:
            return value

    return validate


class StatusResponse(BaseModel):
    """The ``{"status": "ok"}`` body returned by delete and action
    endpoints.
    """

    status: Optional[str] = None

    msg: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"


def format_form_value(value: Any) -> str:
    """Format a single value for a form-encoded request body."""
    if isinstance(value, bool):
        return _serialize_compatibool(value)
    if isinstance(value, enum.Enum):
        return format_form_value(value.value)
    if isinstance(value, datetime.datetime):
        return format_utc_datetime(value) or ""
    return str(value)


def encode_form(
    values: Mapping[str, Any], health_check_headers: bool = False
) -> str:
    """Encode field values as an ``application/x-www-form-urlencoded`` body.

    Parameters
    ----------
    values : mapping
        Field names and values. `None` values are omitted. Sequences are
        encoded as repeated ``name[]`` pairs.
    health_check_headers : bool
        If `True`, the ``headers`` field is written in the format the health
        check endpoint expects: a single ``headers`` pair whose value is a
        JSON-style list of quoted ``"Name:value"`` strings. The space after
        each header name's colon is dropped.

    Returns
    -------
    body : str
        The encoded request body.
    """
    pairs: List[Tuple[str, str]] = []
    custom_headers: List[str] = []
    for key, value in values.items():
        if value is None:
            continue
        if health_check_headers and key == "headers":
            custom_headers.extend(
                str(h).replace(": ", ":") for h in value
            )
            continue
        if isinstance(value, (list, tuple, set, frozenset)):
            pairs.extend((f"{key}[]", format_form_value(v)) for v in value)
        else:
            pairs.append((key, format_form_value(value)))

    body = urlencode(pairs)
    if custom_headers:
        quoted = ",".join(json.dumps(h) for h in custom_headers)
        encoded = "headers=" + quote_plus(f"[{quoted}]")
        body = f"{body}&{encoded}" if body else encoded
    return body


def decode_body(response: requests.Response, model: Type[M]) -> M:
    """Validate a JSON response body into an instance of ``model``."""
    return model.model_validate(response.json())


def decode_list(response: requests.Response, model: Type[M]) -> List[M]:
    """Validate a JSON array response body into a list of ``model``."""
    data = response.json()
    if data is None:
        return []
    return [model.model_validate(item) for item in data]
