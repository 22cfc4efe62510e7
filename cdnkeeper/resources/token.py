"""API tokens.

Tokens are account-level resources. Creating one requires the password of
the user it's issued to, and the request is made in two steps: a ``/sudo``
request that elevates the session, then the ``/tokens`` request itself.
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Any, List, Optional

from structlog import get_logger

from cdnkeeper._crud import require
from cdnkeeper._models import FormInput, Resource
from cdnkeeper._urls import to_safe_url
from cdnkeeper.encoding import Timestamp, decode_body, decode_list
from cdnkeeper.exceptions import NotOKError

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "TokenScope",
    "Token",
    "TokenInput",
    "list_tokens",
    "list_customer_tokens",
    "get_token_self",
    "create_token",
    "delete_token",
    "delete_token_self",
]

logger = get_logger(__name__)


class TokenScope(str, enum.Enum):
    """Authorization scopes of a token."""

    global_ = "global"

    purge_select = "purge_select"

    purge_all = "purge_all"

    global_read = "global:read"


class Token(Resource):
    """An API token.

    ``access_token`` is only reported when the token is created.
    """

    id: Optional[str] = None

    name: Optional[str] = None

    user_id: Optional[str] = None

    access_token: Optional[str] = None

    scope: Optional[str] = None
    """Space-delimited list of `TokenScope` values."""

    services: Optional[List[str]] = None
    """IDs of the services the token can access. Empty means every
    service.
    """

    ip: Optional[str] = None

    expires_at: Timestamp = None

    last_used_at: Timestamp = None


class TokenInput(FormInput):
    name: Optional[str] = None

    username: Optional[str] = None
    """Login of the user the token is issued to."""

    password: Optional[str] = None

    scope: Optional[str] = None

    services: Optional[List[str]] = None

    expires_at: Timestamp = None
    """Expiry time, as a `datetime.datetime` or a date string."""


def list_tokens(client: Client) -> List[Token]:
    """List the tokens of the authenticated user."""
    response = client.get("/tokens")
    return decode_list(response, Token)


def list_customer_tokens(client: Client, customer_id: str) -> List[Token]:
    """List every token of a customer account."""
    require(("customer_id", customer_id))
    response = client.get(to_safe_url("customer", customer_id, "tokens"))
    return decode_list(response, Token)


def get_token_self(client: Client) -> Token:
    """Get the token the client is authenticated with."""
    response = client.get("/tokens/self")
    return decode_body(response, Token)


def create_token(client: Client, **fields: Any) -> Token:
    """Create a token.

    Parameters
    ----------
    client : cdnkeeper.client.Client
        The API client.
    **fields
        Fields of `TokenInput`. ``expires_at`` may be a `datetime.datetime`
        or an RFC 3339 string. ``services`` is a list of service IDs.
    """
    form = TokenInput(**fields).to_form()
    client.post_form("/sudo", form)
    response = client.post_form("/tokens", form)
    token = decode_body(response, Token)
    logger.info("Created Fastly API token", token_id=token.id, name=token.name)
    return token


def delete_token(client: Client, token_id: str) -> None:
    """Revoke a token.

    Raises
    ------
    cdnkeeper.exceptions.NotOKError
        Raised if the API doesn't respond with 204 No Content.
    """
    require(("token_id", token_id))
    response = client.delete(to_safe_url("tokens", token_id))
    if response.status_code != 204:
        raise NotOKError(
            f"expected 204 No Content, got {response.status_code}"
        )
    logger.info("Deleted Fastly API token", token_id=token_id)


def delete_token_self(client: Client) -> None:
    """Revoke the token the client is authenticated with."""
    response = client.delete("/tokens/self")
    if response.status_code != 204:
        raise NotOKError(
            f"expected 204 No Content, got {response.status_code}"
        )
