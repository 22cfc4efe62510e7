"""Request settings: per-request behavior overrides."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Annotated, Any, List, Optional, Union

from pydantic import BeforeValidator

from cdnkeeper import _crud
from cdnkeeper._models import FormInput, VersionedResource
from cdnkeeper.encoding import Compatibool, known_member

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "RequestSettingAction",
    "RequestSettingXFF",
    "RequestSetting",
    "RequestSettingInput",
    "list_request_settings",
    "create_request_setting",
    "get_request_setting",
    "update_request_setting",
    "delete_request_setting",
]

KIND = "request_settings"


class RequestSettingAction(str, enum.Enum):
    """Whether a request is looked up in cache or passed to the origin."""

    lookup = "lookup"

    pass_ = "pass"


class RequestSettingXFF(str, enum.Enum):
    """How the ``X-Forwarded-For`` header is handled."""

    clear = "clear"

    leave = "leave"

    append = "append"

    append_all = "append_all"

    overwrite = "overwrite"


_RequestSettingActionName = Annotated[
    Union[RequestSettingAction, str],
    BeforeValidator(known_member(RequestSettingAction)),
]

_RequestSettingXFFName = Annotated[
    Union[RequestSettingXFF, str],
    BeforeValidator(known_member(RequestSettingXFF)),
]


class RequestSetting(VersionedResource):
    """A request setting in a service version."""

    name: Optional[str] = None

    action: Optional[_RequestSettingActionName] = None

    xff: Optional[_RequestSettingXFFName] = None
    """``X-Forwarded-For`` handling (the ``xff`` field in the API)."""

    default_host: Optional[str] = None

    hash_keys: Optional[str] = None

    max_stale_age: Optional[int] = None

    request_condition: Optional[str] = None

    bypass_busy_wait: Optional[Compatibool] = None

    force_miss: Optional[Compatibool] = None

    force_ssl: Optional[Compatibool] = None

    geo_headers: Optional[Compatibool] = None

    timer_support: Optional[Compatibool] = None


class RequestSettingInput(FormInput):
    name: Optional[str] = None

    action: Optional[RequestSettingAction] = None

    xff: Optional[RequestSettingXFF] = None

    default_host: Optional[str] = None

    hash_keys: Optional[str] = None

    max_stale_age: Optional[int] = None

    request_condition: Optional[str] = None

    bypass_busy_wait: Optional[Compatibool] = None

    force_miss: Optional[Compatibool] = None

    force_ssl: Optional[Compatibool] = None

    geo_headers: Optional[Compatibool] = None

    timer_support: Optional[Compatibool] = None


def list_request_settings(
    client: Client, service_id: str, service_version: int
) -> List[RequestSetting]:
    return _crud.list_versioned(
        client, RequestSetting, KIND, service_id, service_version
    )


def create_request_setting(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> RequestSetting:
    return _crud.create_versioned(
        client,
        RequestSetting,
        RequestSettingInput,
        KIND,
        service_id,
        service_version,
        fields,
    )


def get_request_setting(
    client: Client, service_id: str, service_version: int, name: str
) -> RequestSetting:
    return _crud.get_versioned(
        client, RequestSetting, KIND, service_id, service_version, name
    )


def update_request_setting(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> RequestSetting:
    return _crud.update_versioned(
        client,
        RequestSetting,
        RequestSettingInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_request_setting(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _crud.delete_versioned(client, KIND, service_id, service_version, name)
