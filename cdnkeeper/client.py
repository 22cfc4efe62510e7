"""HTTP client for the Fastly API.

See https://developer.fastly.com/reference/api/ for more information about
the Fastly API.
"""

from __future__ import annotations

import datetime
import os
import platform
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

import requests
from structlog import get_logger

from cdnkeeper.encoding import encode_form
from cdnkeeper.exceptions import ErrorObject, HTTPError
from cdnkeeper.version import get_version

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Type

    from cdnkeeper.config import Config

__all__ = [
    "API_KEY_ENV_VAR",
    "API_KEY_HEADER",
    "DEBUG_ENV_VAR",
    "DEFAULT_ENDPOINT",
    "ENDPOINT_ENV_VAR",
    "JSON_MIME_TYPE",
    "JSONAPI_MIME_TYPE",
    "USER_AGENT_ENV_VAR",
    "Client",
    "check_response",
    "default_user_agent",
]

API_KEY_ENV_VAR = "FASTLY_API_KEY"
"""Environment variable holding the Fastly API key."""

API_KEY_HEADER = "Fastly-Key"
"""Request header that carries the Fastly API key."""

ENDPOINT_ENV_VAR = "FASTLY_API_URL"
"""Environment variable that overrides the API endpoint URL."""

DEBUG_ENV_VAR = "FASTLY_DEBUG_MODE"
"""Environment variable that switches on request/response dumps
(``"true"``).
"""

USER_AGENT_ENV_VAR = "FASTLY_USER_AGENT"
"""Environment variable whose value is prefixed to the User-Agent."""

DEFAULT_ENDPOINT = "https://api.fastly.com"

JSON_MIME_TYPE = "application/json"

JSONAPI_MIME_TYPE = "application/vnd.api+json"

PROBLEM_MIME_TYPE = "application/problem+json"

FORM_MIME_TYPE = "application/x-www-form-urlencoded"

PROJECT_URL = "https://github.com/lsst-sqre/cdnkeeper"

SUCCESS_STATUS_CODES = frozenset({200, 201, 202, 204, 205, 206})

DEFAULT_RATE_LIMIT = 1000
"""Assumed number of remaining write requests before the first response
reports the real value.
"""


def default_user_agent() -> str:
    """User-Agent string identifying this library."""
    return "cdnkeeper/{0} (+{1}; Python {2})".format(
        get_version(), PROJECT_URL, platform.python_version()
    )


class Client:
    """API client for the Fastly API.

    Parameters
    ----------
    api_key : str, optional
        The Fastly API key. Defaults to the ``FASTLY_API_KEY`` environment
        variable. Some endpoints work without a key; others respond with a
        403 status.
    endpoint : str, optional
        Root URL of the API. Defaults to ``FASTLY_API_URL`` or
        ``https://api.fastly.com``.
    session : requests.Session, optional
        Session to send requests with. If omitted, the client creates and
        owns one.
    debug : bool, optional
        Log dumps of every request and response at the debug level. Defaults
        to `True` if ``FASTLY_DEBUG_MODE`` is ``"true"``.
    user_agent : str, optional
        Prefix for the User-Agent header. Defaults to ``FASTLY_USER_AGENT``.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        endpoint: Optional[str] = None,
        *,
        session: Optional[requests.Session] = None,
        debug: Optional[bool] = None,
        user_agent: Optional[str] = None,
    ) -> None:
        if api_key is None:
            api_key = os.getenv(API_KEY_ENV_VAR, "")
        self.api_key = api_key

        if endpoint is None:
            endpoint = os.getenv(ENDPOINT_ENV_VAR, DEFAULT_ENDPOINT)
        self.address = endpoint.rstrip("/")

        if debug is None:
            debug = os.getenv(DEBUG_ENV_VAR) == "true"
        self.debug_mode = debug

        if user_agent is None:
            user_agent = os.getenv(USER_AGENT_ENV_VAR)
        self.user_agent = default_user_agent()
        if user_agent:
            self.user_agent = f"{user_agent}, {self.user_agent}"

        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()
        self._remaining = DEFAULT_RATE_LIMIT
        self._reset = 0
        self._logger = get_logger(__name__)

    @classmethod
    def from_config(
        cls, config: Type[Config], session: Optional[requests.Session] = None
    ) -> Client:
        """Create a client from a configuration profile."""
        return cls(
            api_key=config.FASTLY_API_KEY or "",
            endpoint=config.FASTLY_API_URL,
            session=session,
            debug=config.FASTLY_DEBUG_MODE,
            user_agent=config.FASTLY_USER_AGENT,
        )

    def __enter__(self) -> Client:
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying session if this client created it."""
        if self._owns_session:
            self._session.close()

    @property
    def rate_limit_remaining(self) -> int:
        """Number of write requests left before the API responds with 429
        Too Many Requests.
        """
        return self._remaining

    @property
    def rate_limit_reset(self) -> datetime.datetime:
        """Time (UTC) when the API's rate limit counter resets."""
        return datetime.datetime.fromtimestamp(
            self._reset, tz=datetime.timezone.utc
        )

    def url(self, path: str) -> str:
        """Absolute URL of an API path."""
        return self.address + "/" + path.lstrip("/")

    def get(
        self,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> requests.Response:
        """Send a GET request."""
        return self.request("GET", path, params=params, headers=headers)

    def head(
        self,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> requests.Response:
        """Send a HEAD request."""
        return self.request("HEAD", path, params=params, headers=headers)

    def post(
        self,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> requests.Response:
        """Send a POST request without a body."""
        return self.request("POST", path, params=params, headers=headers)

    def put(
        self,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> requests.Response:
        """Send a PUT request without a body."""
        return self.request("PUT", path, params=params, headers=headers)

    def delete(
        self,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> requests.Response:
        """Send a DELETE request."""
        return self.request("DELETE", path, params=params, headers=headers)

    def post_form(
        self,
        path: str,
        form: Mapping[str, Any],
        *,
        health_check_headers: bool = False,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> requests.Response:
        """Send a POST request with a form-encoded body."""
        return self.request_form(
            "POST",
            path,
            form,
            health_check_headers=health_check_headers,
            params=params,
            headers=headers,
        )

    def put_form(
        self,
        path: str,
        form: Mapping[str, Any],
        *,
        health_check_headers: bool = False,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> requests.Response:
        """Send a PUT request with a form-encoded body."""
        return self.request_form(
            "PUT",
            path,
            form,
            health_check_headers=health_check_headers,
            params=params,
            headers=headers,
        )

    def patch_form(
        self,
        path: str,
        form: Mapping[str, Any],
        *,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> requests.Response:
        """Send a PATCH request with a form-encoded body."""
        return self.request_form(
            "PATCH", path, form, params=params, headers=headers
        )

    def post_json(
        self,
        path: str,
        body: Any,
        *,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> requests.Response:
        """Send a POST request with a JSON body."""
        return self.request_json(
            "POST", path, body, params=params, headers=headers
        )

    def put_json(
        self,
        path: str,
        body: Any,
        *,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> requests.Response:
        """Send a PUT request with a JSON body."""
        return self.request_json(
            "PUT", path, body, params=params, headers=headers
        )

    def patch_json(
        self,
        path: str,
        body: Any,
        *,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> requests.Response:
        """Send a PATCH request with a JSON body."""
        return self.request_json(
            "PATCH", path, body, params=params, headers=headers
        )

    def request_form(
        self,
        method: str,
        path: str,
        form: Mapping[str, Any],
        *,
        health_check_headers: bool = False,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> requests.Response:
        """Send a request whose body is ``form``, form-encoded.

        See `cdnkeeper.encoding.encode_form` for the encoding rules.
        """
        form_headers = {"Content-Type": FORM_MIME_TYPE}
        if headers:
            form_headers.update(headers)
        body = encode_form(form, health_check_headers=health_check_headers)
        return self.request(
            method, path, params=params, headers=form_headers, data=body
        )

    def request_json(
        self,
        method: str,
        path: str,
        body: Any,
        *,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> requests.Response:
        """Send a request with a JSON-encoded body."""
        json_headers = {"Content-Type": JSON_MIME_TYPE}
        if headers:
            json_headers.update(headers)
        return self.request(
            method, path, params=params, headers=json_headers, json=body
        )

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
        data: Optional[str] = None,
        json: Any = None,
    ) -> requests.Response:
        """Send a request to the Fastly API.

        Parameters
        ----------
        method : str
            HTTP method.
        path : str
            API path, such as ``/service/{id}/version``.
        params : mapping, optional
            Query parameters.
        headers : mapping, optional
            Headers added to (or replacing) the default headers.
        data : str, optional
            Pre-encoded request body.
        json : optional
            Object to send as a JSON body.

        Returns
        -------
        response : requests.Response
            The successful response.

        Raises
        ------
        cdnkeeper.exceptions.HTTPError
            The response's status code is not a success code.
        """
        request_headers = self._default_headers()
        if headers:
            request_headers.update(headers)

        if self.debug_mode:
            self._logger.debug(
                "Fastly API request dump",
                method=method,
                url=self.url(path),
                params=dict(params) if params else None,
                headers=_redact(request_headers),
                body=data if data is not None else json,
            )

        response = self._session.request(
            method,
            self.url(path),
            params=params,
            headers=request_headers,
            data=data,
            json=json,
        )
        self._logger.debug(
            "Fastly API request",
            method=method,
            path=path,
            status=response.status_code,
        )

        if self.debug_mode:
            self._logger.debug(
                "Fastly API response dump",
                status=response.status_code,
                headers=dict(response.headers),
                body=response.text,
            )

        check_response(response)

        if method not in ("GET", "HEAD"):
            self._record_rate_limit(response)

        return response

    def _default_headers(self) -> Dict[str, str]:
        headers = {
            "User-Agent": self.user_agent,
            "Accept": JSON_MIME_TYPE,
        }
        if self.api_key:
            headers[API_KEY_HEADER] = self.api_key
        return headers

    def _record_rate_limit(self, response: requests.Response) -> None:
        remaining = response.headers.get("Fastly-RateLimit-Remaining")
        if remaining:
            try:
                self._remaining = int(remaining)
            except ValueError:
                pass
        reset = response.headers.get("Fastly-RateLimit-Reset")
        if reset:
            try:
                self._reset = int(reset)
            except ValueError:
                pass


def _redact(headers: Mapping[str, str]) -> Dict[str, str]:
    return {k: v for k, v in headers.items() if k != API_KEY_HEADER}


def check_response(response: requests.Response) -> None:
    """Raise `HTTPError` if ``response`` is not a success response."""
    if response.status_code in SUCCESS_STATUS_CODES:
        return
    raise build_http_error(response)


def build_http_error(response: requests.Response) -> HTTPError:
    """Create an `HTTPError` from an unsuccessful response.

    Three error body formats are understood: JSON:API ``errors`` arrays,
    RFC 7807 problem details, and the legacy ``{"msg", "detail"}`` object.
    A body that can't be decoded is reported verbatim as the error detail.
    """
    error = HTTPError(status_code=response.status_code)
    if not response.content:
        return error

    content_type = response.headers.get("Content-Type", "")
    media_type = content_type.split(";")[0].strip()
    try:
        payload = response.json()
        if media_type == JSONAPI_MIME_TYPE:
            for item in payload.get("errors") or []:
                error.errors.append(
                    ErrorObject(
                        title=item.get("title") or "",
                        detail=item.get("detail") or "",
                        id=item.get("id") or "",
                        code=item.get("code") or "",
                        status=str(item.get("status") or ""),
                        meta=item.get("meta"),
                    )
                )
        elif media_type == PROBLEM_MIME_TYPE:
            error.errors.append(
                ErrorObject(
                    title=payload.get("title") or "",
                    detail=payload.get("detail") or "",
                    status=str(payload.get("status") or ""),
                )
            )
        elif payload is not None:
            error.errors.append(
                ErrorObject(
                    title=payload.get("msg") or "",
                    detail=payload.get("detail") or "",
                )
            )
    except (ValueError, AttributeError):
        # The body isn't the JSON object we expected; keep it as the detail.
        error.errors = [
            ErrorObject(title="Undefined error", detail=response.text)
        ]
    return error
