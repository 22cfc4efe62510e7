"""Pydantic base models for Fastly API resources and their form inputs."""

from __future__ import annotations

import enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from cdnkeeper.encoding import Timestamp

__all__ = [
    "Resource",
    "VersionedResource",
    "FormInput",
    "BatchOperation",
    "MAX_BATCH_OPERATIONS",
]


class Resource(BaseModel):
    """A resource decoded from a Fastly API JSON response.

    Decoding is lenient, matching the API's loosely-typed responses: numeric
    strings are accepted for integer fields, numbers are accepted for string
    fields, empty strings decode as `None`, and unknown keys are ignored.
    """

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    created_at: Timestamp = None
    """Date the resource was created (UTC)."""

    updated_at: Timestamp = None
    """Date the resource was last updated (UTC)."""

    deleted_at: Timestamp = None
    """Date the resource was deleted (UTC), if it has been."""

    @model_validator(mode="before")
    @classmethod
    def _blank_to_none(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: (None if v == "" else v) for k, v in data.items()}
        return data


class VersionedResource(Resource):
    """A resource that belongs to a service configuration version."""

    service_id: Optional[str] = None
    """ID of the service the resource belongs to."""

    service_version: Optional[int] = Field(None, alias="version")
    """Number of the configuration version the resource belongs to."""


class FormInput(BaseModel):
    """Fields accepted by a create or update call.

    Unknown field names are rejected with a `pydantic.ValidationError`
    rather than silently dropped.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    def to_form(self) -> Dict[str, Any]:
        """Field values to form-encode, omitting unset fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class BatchOperation(str, enum.Enum):
    """Operation applied to one entry of a batch update."""

    create = "create"

    update = "update"

    upsert = "upsert"

    delete = "delete"


MAX_BATCH_OPERATIONS = 1000
"""Largest number of operations accepted by a single batch update."""
