"""Resource Schemas — Pydantic models for JSON:API resource objects on the wire.

Invariants:
    - ResourceObject.type is a non-empty string; id is optional (absent on create)
    - attributes, relationships and meta default to empty dicts
    - Top-level resource links are server-generated; client-sent links are ignored
    - RelationshipObject.data distinguishes "not sent" (field unset) from null (empty to-one)

Design Decisions:
    - Schemas check shape only; naming rules (reserved names, conflicts) stay in core/
      so there is one source of truth for them
    - id coerced to str: some clients send numeric ids
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class ResourceIdentifierObject(BaseModel):
    """Resource linkage: type + id."""
    type: str = Field(..., min_length=1)
    id: str
    meta: dict[str, Any] = {}

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class RelationshipObject(BaseModel):
    """Relationship member of a resource object."""
    data: ResourceIdentifierObject | list[ResourceIdentifierObject] | None = None
    links: dict[str, str] = {}
    meta: dict[str, Any] = {}

    @property
    def has_data(self) -> bool:
        return "data" in self.model_fields_set


class ResourceObject(BaseModel):
    """A single resource object as sent by a client."""
    type: str = Field(..., min_length=1)
    id: str | None = None
    attributes: dict[str, Any] = {}
    relationships: dict[str, RelationshipObject] = {}
    meta: dict[str, Any] = {}

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v
