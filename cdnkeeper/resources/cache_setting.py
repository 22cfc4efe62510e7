"""Cache settings: TTL and caching action overrides."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Annotated, Any, List, Optional, Union

from pydantic import BeforeValidator

from cdnkeeper import _crud
from cdnkeeper._models import FormInput, VersionedResource
from cdnkeeper.encoding import known_member

if TYPE_CHECKING:
    from cdnkeeper.client import Client

__all__ = [
    "CacheSettingAction",
    "CacheSetting",
    "CacheSettingInput",
    "list_cache_settings",
    "create_cache_setting",
    "get_cache_setting",
    "update_cache_setting",
    "delete_cache_setting",
]

KIND = "cache_settings"


class CacheSettingAction(str, enum.Enum):
    """How a matching response is handled."""

    cache = "cache"

    pass_ = "pass"

    restart = "restart"


_CacheSettingActionName = Annotated[
    Union[CacheSettingAction, str],
    BeforeValidator(known_member(CacheSettingAction)),
]


class CacheSetting(VersionedResource):
    """A cache setting in a service version."""

    name: Optional[str] = None

    action: Optional[_CacheSettingActionName] = None

    ttl: Optional[int] = None

    stale_ttl: Optional[int] = None
    """Seconds stale content may be served while revalidating."""

    cache_condition: Optional[str] = None


class CacheSettingInput(FormInput):
    name: Optional[str] = None

    action: Optional[CacheSettingAction] = None

    ttl: Optional[int] = None

    stale_ttl: Optional[int] = None

    cache_condition: Optional[str] = None


def list_cache_settings(
    client: Client, service_id: str, service_version: int
) -> List[CacheSetting]:
    return _crud.list_versioned(
        client, CacheSetting, KIND, service_id, service_version
    )


def create_cache_setting(
    client: Client, service_id: str, service_version: int, **fields: Any
) -> CacheSetting:
    return _crud.create_versioned(
        client,
        CacheSetting,
        CacheSettingInput,
        KIND,
        service_id,
        service_version,
        fields,
    )


def get_cache_setting(
    client: Client, service_id: str, service_version: int, name: str
) -> CacheSetting:
    return _crud.get_versioned(
        client, CacheSetting, KIND, service_id, service_version, name
    )


def update_cache_setting(
    client: Client,
    service_id: str,
    service_version: int,
    name: str,
    new_name: Optional[str] = None,
    **fields: Any,
) -> CacheSetting:
    return _crud.update_versioned(
        client,
        CacheSetting,
        CacheSettingInput,
        KIND,
        service_id,
        service_version,
        name,
        new_name,
        fields,
    )


def delete_cache_setting(
    client: Client, service_id: str, service_version: int, name: str
) -> None:
    _crud.delete_versioned(client, KIND, service_id, service_version, name)
