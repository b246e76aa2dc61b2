"""
Filter and record models.

A Filter is what the host framework hands to `all()`; records are plain
dicts whose structured values are flattened to JSON strings before they
reach the store.
"""

import json
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from neo4j_connector.graph.queries import is_structured, to_count


class Filter(BaseModel):
    """Listing filter: condition set, ordering and pagination."""

    model_config = ConfigDict(extra="ignore")

    where: Optional[dict[str, Any]] = None
    order: Optional[Union[str, list[str]]] = None
    limit: int = 0
    skip: int = 0
    offset_: int = Field(default=0, alias="offset")

    @field_validator("limit", "skip", "offset_", mode="before")
    @classmethod
    def normalize_count(cls, value: Any) -> int:
        """Non-numeric or missing values become 0."""
        return to_count(value)

    @field_validator("where", mode="before")
    @classmethod
    def normalize_where(cls, value: Any) -> Optional[dict[str, Any]]:
        if not isinstance(value, Mapping):
            return None
        return dict(value)

    @property
    def offset(self) -> int:
        """Rows to skip; `skip` wins over `offset` when both are given."""
        return self.skip or self.offset_

    @classmethod
    def from_value(cls, value: Union["Filter", Mapping[str, Any], None]) -> "Filter":
        if isinstance(value, Filter):
            return value
        return cls.model_validate(dict(value or {}))


def serialize_value(value: Any) -> Any:
    """Flatten a structured value to a JSON string; scalars pass through."""
    if not is_structured(value):
        return value
    if hasattr(value, "model_dump"):
        value = value.model_dump(mode="json")
    elif isinstance(value, (set, tuple)):
        value = list(value)
    return json.dumps(value, default=str)


def serialize_record(data: Mapping[str, Any]) -> dict[str, Any]:
    """Copy of `data` with every structured value serialized."""
    return {key: serialize_value(value) for key, value in data.items()}
