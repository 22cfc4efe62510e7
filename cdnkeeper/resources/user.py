"""Users of a customer account."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from structlog import get_logger

from cdnkeeper._crud import check_status, require
from cdnkeeper._models import FormInput, Resource
from cdnkeeper._urls import to_safe_url
from cdnkeeper.encoding import Compatibool, decode_body, decode_list

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "User",
    "UserInput",
    "list_customer_users",
    "get_current_user",
    "get_user",
    "create_user",
    "update_user",
    "delete_user",
    "reset_user_password",
]

logger = get_logger(__name__)


class User(Resource):
    """A user of a customer account."""

    id: Optional[str] = None

    login: Optional[str] = None
    """The user's email address."""

    name: Optional[str] = None

    customer_id: Optional[str] = None

    role: Optional[str] = None
    """One of ``user``, ``billing``, ``engineer`` or ``superuser``."""

    email_hash: Optional[str] = None

    limit_services: Optional[Compatibool] = None

    limit_workspaces: Optional[Compatibool] = None

    locked: Optional[Compatibool] = None

    require_new_password: Optional[Compatibool] = None

    two_factor_auth_enabled: Optional[Compatibool] = None

    two_factor_setup_required: Optional[Compatibool] = None


class UserInput(FormInput):
    login: Optional[str] = None

    name: Optional[str] = None

    role: Optional[str] = None


def list_customer_users(client: Client, customer_id: str) -> List[User]:
    require(("customer_id", customer_id))
    response = client.get(to_safe_url("customer", customer_id, "users"))
    return decode_list(response, User)


def get_current_user(client: Client) -> User:
    """Get the user the client's API key belongs to."""
    response = client.get("/current_user")
    return decode_body(response, User)


def get_user(client: Client, user_id: str) -> User:
    require(("user_id", user_id))
    response = client.get(to_safe_url("user", user_id))
    return decode_body(response, User)


def create_user(client: Client, **fields: Any) -> User:
    """Invite a user (``login``, ``name``, ``role``) to the account."""
    form = UserInput(**fields).to_form()
    response = client.post_form("/user", form)
    user = decode_body(response, User)
    logger.info("Created Fastly user", user_id=user.id, login=user.login)
    return user


def update_user(client: Client, user_id: str, **fields: Any) -> User:
    """Change a user's ``name`` or ``role``."""
    require(("user_id", user_id))
    form = UserInput(**fields).to_form()
    response = client.put_form(to_safe_url("user", user_id), form)
    return decode_body(response, User)


def delete_user(client: Client, user_id: str) -> None:
    require(("user_id", user_id))
    response = client.delete(to_safe_url("user", user_id))
    check_status(response)
    logger.info("Deleted Fastly user", user_id=user_id)


def reset_user_password(client: Client, login: str) -> None:
    """Send a password reset email to a user."""
    require(("login", login))
    response = client.post(
        to_safe_url("user", login, "password", "request_reset")
    )
    check_status(response)
