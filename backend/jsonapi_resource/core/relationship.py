"""Relationship — linkage from an owning resource to other resources.

Invariants:
    - data is NOTHING (unspecified), None (empty to-one), one ResourceIdentifier (to-one)
      or a tuple of ResourceIdentifiers (to-many)
    - owner is a back-reference (type, id, path); a Relationship never holds the Resource itself
    - to_json() omits "data" when it is unspecified and "links"/"meta" when empty

Design Decisions:
    - Link templates rendered from owner data only, so relationship links never depend
      on attribute values
    - Explicit links given to of() win over templates with the same name
"""

from dataclasses import dataclass, field
from typing import Any, Mapping

from jsonapi_resource.core.domain_types import (
    RelationshipJSON, ResourceIdentifierJSON, UrlTemplates,
)
from jsonapi_resource.core.errors import InvalidRelationshipError
from jsonapi_resource.core.maybe import NOTHING
from jsonapi_resource.core.nested_fields import is_plain_object


@dataclass(frozen=True)
class ResourceIdentifier:
    """A (type, id) pair pointing at another resource."""
    type: str
    id: str
    meta: dict[str, Any] = field(default_factory=dict, compare=False)

    def to_json(self) -> ResourceIdentifierJSON:
        json: ResourceIdentifierJSON = {"type": self.type, "id": self.id}
        if self.meta:
            json["meta"] = dict(self.meta)
        return json


@dataclass(frozen=True)
class RelationshipOwner:
    """Identity of the resource a relationship hangs off, plus the field path."""
    type: str
    id: str | None
    path: str

    def template_data(self) -> dict[str, Any]:
        return {"owner_type": self.type, "owner_id": self.id, "path": self.path}


class Relationship:
    """Relationship object as it sits in a Resource's relationships map."""

    def __init__(
        self,
        data: Any,
        owner: RelationshipOwner,
        links: Mapping[str, str] | None = None,
        meta: Mapping[str, Any] | None = None,
    ):
        self.data = data
        self.owner = owner
        self.links = dict(links or {})
        self.meta = dict(meta or {})

    @classmethod
    def of(
        cls,
        data: Any = NOTHING,
        owner: RelationshipOwner | Mapping[str, Any] | None = None,
        links: Mapping[str, str] | None = None,
        meta: Mapping[str, Any] | None = None,
    ) -> "Relationship":
        """Build a relationship, coercing identifier dicts and owner mappings."""
        if owner is None:
            raise InvalidRelationshipError("A relationship requires an owner.")
        if not isinstance(owner, RelationshipOwner):
            owner = RelationshipOwner(
                type=str(owner["type"]),
                id=None if owner.get("id") is None else str(owner["id"]),
                path=str(owner["path"]),
            )
        return cls(_normalize_linkage(data, owner.path), owner, links, meta)

    @property
    def is_to_many(self) -> bool:
        return isinstance(self.data, tuple)

    @property
    def identifiers(self) -> tuple[ResourceIdentifier, ...]:
        """All linked identifiers, empty for unspecified or empty data."""
        if self.data is NOTHING or self.data is None:
            return ()
        if self.is_to_many:
            return self.data
        return (self.data,)

    def to_json(self, templates: UrlTemplates | None = None) -> RelationshipJSON:
        json: RelationshipJSON = {}
        if self.data is not NOTHING:
            json["data"] = _linkage_to_json(self.data)

        links = self._render_links(templates or {})
        if links:
            json["links"] = links
        if self.meta:
            json["meta"] = dict(self.meta)
        return json

    def _render_links(self, templates: UrlTemplates) -> dict[str, str]:
        data = self.owner.template_data()
        links = {}
        for name, template in templates.items():
            if not template:
                continue
            rendered = template(data) if callable(template) else str(template)
            if rendered is not None:
                links[name] = rendered
        links.update(self.links)
        return links

    def __repr__(self) -> str:
        return f"Relationship(path={self.owner.path!r}, data={self.data!r})"


def _normalize_linkage(data: Any, path: str) -> Any:
    if data is NOTHING or data is None:
        return data
    if isinstance(data, (list, tuple)):
        return tuple(_to_identifier(item, path) for item in data)
    return _to_identifier(data, path)


def _to_identifier(item: Any, path: str) -> ResourceIdentifier:
    if isinstance(item, ResourceIdentifier):
        return item
    if is_plain_object(item) and item.get("type") and item.get("id") is not None:
        return ResourceIdentifier(
            str(item["type"]), str(item["id"]), dict(item.get("meta") or {}),
        )
    raise InvalidRelationshipError(
        f"Relationship `{path}` linkage must be resource identifier objects with `type` and `id`.",
        path=path,
    )


def _linkage_to_json(data: Any) -> Any:
    if data is None:
        return None
    if isinstance(data, tuple):
        return [identifier.to_json() for identifier in data]
    return data.to_json()
