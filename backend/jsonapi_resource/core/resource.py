"""Resource — in-memory model of one JSON:API resource object.

Invariants:
    - type is a non-empty string once set (kind 1)
    - meta is always a dict (kind 2)
    - attrs and relationships are dicts (kind 3) with no `id`/`type` keys (kind 4)
    - attrs and relationships never share a field name (kind 5)
    - No nested attribute object holds `relationships` or `links` (kind 6)
    - Every invariant is checked at assignment time; a failed assignment leaves the field unchanged

Design Decisions:
    - Constructor goes through the same property setters as later mutation: one enforcement path
    - Bulk setters, set_relationship and with_* all validate against the complete
      candidate state, so call order cannot produce an attr/relationship name clash
    - type_path (server-validated) is kept apart from types_list (raw meta.types from the client)
    - adapter_extra is an opaque slot for the persistence adapter; never validated or serialized
"""

from typing import Any, Callable

from jsonapi_resource.core.domain_types import (
    ROUTED_TEMPLATE_NAMES, ResourceJSON, TemplateName, UrlTemplates,
)
from jsonapi_resource.core.enforce_fields import validate_field_group
from jsonapi_resource.core.errors import (
    ErrorContext, ResourceErrorKind, ResourceInvariantError, ResourceValidationError,
)
from jsonapi_resource.core.maybe import NOTHING
from jsonapi_resource.core.nested_fields import delete_nested, object_is_empty
from jsonapi_resource.core.relationship import Relationship, RelationshipOwner


class Resource:
    """A single resource: type, id, attributes, relationships and meta."""

    def __init__(
        self,
        type: Any,
        id: Any = None,
        attrs: dict[str, Any] | None = None,
        relationships: dict[str, Relationship] | None = None,
        meta: dict[str, Any] | None = None,
    ):
        self._type: str | None = None
        self._id: str | None = None
        self._attrs: dict[str, Any] | None = None
        self._relationships: dict[str, Relationship] | None = None
        self._meta: dict[str, Any] = {}

        # Ordered type names, most specific first. Set once the server has
        # confirmed the types (from the adapter, or by validating meta.types).
        self.type_path: list[str] | None = None
        self.adapter_extra: Any = None

        self.type = type
        self.id = id
        self.attrs = {} if attrs is None else attrs
        self.relationships = {} if relationships is None else relationships
        self.meta = {} if meta is None else meta

    # ─── Identity ────────────────────────────────────────────────

    @property
    def id(self) -> str | None:
        return self._id

    @id.setter
    def id(self, id: Any) -> None:
        # "" is allowed: a new resource in a create request has no id yet.
        self._id = None if id is None or id is NOTHING else str(id)

    @property
    def type(self) -> str:
        return self._type

    @type.setter
    def type(self, type: Any) -> None:
        if not type:
            raise self._tag(ResourceValidationError(
                "type is required", ResourceErrorKind.TYPE_REQUIRED,
            ))
        self._type = str(type)

    @property
    def types_list(self) -> list[str] | None:
        """Type names supplied by the end user in meta.types; unvalidated.

        Only resources built from client data should carry one. Resources
        the server instantiates get a type_path instead.
        """
        return self._meta.get("types")

    def require_id(self) -> str:
        """The id, for code paths that only run after the server assigned one."""
        if self._id is None:
            raise ResourceInvariantError(
                f"Resource of type `{self._type}` has no id",
                context=ErrorContext(resource_type=self._type),
            )
        return self._id

    def equals(self, other: "Resource") -> bool:
        return self.id == other.id and self.type == other.type

    # ─── Field Groups ────────────────────────────────────────────

    @property
    def attrs(self) -> dict[str, Any]:
        return self._attrs

    @attrs.setter
    def attrs(self, attrs: dict[str, Any]) -> None:
        self._checked(validate_field_group, attrs, self._relationships, True)
        self._attrs = attrs

    @property
    def attributes(self) -> dict[str, Any]:
        return self.attrs

    @attributes.setter
    def attributes(self, attrs: dict[str, Any]) -> None:
        self.attrs = attrs

    @property
    def relationships(self) -> dict[str, Relationship]:
        return self._relationships

    @relationships.setter
    def relationships(self, relationships: dict[str, Relationship]) -> None:
        self._checked(validate_field_group, relationships, self._attrs)
        self._relationships = relationships

    @property
    def meta(self) -> dict[str, Any]:
        return self._meta

    @meta.setter
    def meta(self, meta: dict[str, Any]) -> None:
        if not isinstance(meta, dict):
            raise self._tag(ResourceValidationError(
                "meta must be an object.", ResourceErrorKind.META_NOT_OBJECT,
            ))
        self._meta = meta

    def remove_attr(self, attr_path: str) -> bool:
        if self._attrs is None:
            return False
        return delete_nested(attr_path, self._attrs)

    def remove_relationship(self, relationship_path: str) -> bool:
        if self._relationships is None:
            return False
        return delete_nested(relationship_path, self._relationships)

    def set_relationship(self, relationship_path: str, data: Any) -> Relationship:
        """Link `relationship_path` to `data` (identifier, list of them, or None)."""
        self._checked(validate_field_group, {relationship_path: True}, self._attrs)
        relationship = Relationship.of(
            data=data,
            owner=RelationshipOwner(type=self._type, id=self._id, path=relationship_path),
        )
        if self._relationships is None:
            self._relationships = {}
        self._relationships[relationship_path] = relationship
        return relationship

    # ─── Validated Copies ────────────────────────────────────────

    def with_attrs(self, attrs: dict[str, Any]) -> "Resource":
        return self._replace(attrs=attrs)

    def with_relationships(self, relationships: dict[str, Relationship]) -> "Resource":
        return self._replace(relationships=relationships)

    def with_meta(self, meta: dict[str, Any]) -> "Resource":
        return self._replace(meta=meta)

    def _replace(self, **changes: Any) -> "Resource":
        # Starts empty, so each setter below checks against the final state
        # of the groups already assigned.
        copy = Resource(self._type, self._id)
        copy.attrs = changes.get("attrs", dict(self._attrs or {}))
        copy.relationships = changes.get("relationships", dict(self._relationships or {}))
        copy.meta = changes.get("meta", dict(self._meta))
        copy.type_path = None if self.type_path is None else list(self.type_path)
        copy.adapter_extra = self.adapter_extra
        return copy

    # ─── Serialization ───────────────────────────────────────────

    def to_json(self, url_templates: UrlTemplates) -> ResourceJSON:
        has_meta = not object_is_empty(self._meta)
        show_type_path = self.type_path is not None and len(self.type_path) > 1
        meta = {**self._meta, "types": list(self.type_path)} if show_type_path else self._meta

        json: ResourceJSON = {}
        if self._id is not None:
            json["id"] = self._id
        json["type"] = self._type
        json["attributes"] = self._attrs
        if show_type_path or has_meta:
            json["meta"] = meta

        # Link templates see type, id, attributes and meta, never relationships.
        template_data = dict(json)
        links = {}
        for name, template in url_templates.items():
            if name in ROUTED_TEMPLATE_NAMES or not template:
                continue
            rendered = template(template_data) if callable(template) else str(template)
            if rendered is not None:
                links[name] = rendered
        if links:
            json["links"] = links

        if not object_is_empty(self._relationships):
            relationship_templates = {
                "related": url_templates.get(TemplateName.RELATED.value),
                "self": url_templates.get(TemplateName.RELATIONSHIP.value),
            }
            json["relationships"] = {
                path: relationship.to_json(relationship_templates)
                for path, relationship in self._relationships.items()
            }

        return json

    # ─── Helpers ─────────────────────────────────────────────────

    def _checked(self, check: Callable[..., None], *args: Any) -> None:
        try:
            check(*args)
        except ResourceValidationError as e:
            raise self._tag(e)

    def _tag(self, error: ResourceValidationError) -> ResourceValidationError:
        error.context.resource_type = error.context.resource_type or self._type
        error.context.resource_id = error.context.resource_id or self._id
        return error

    def __repr__(self) -> str:
        return f"Resource(type={self._type!r}, id={self._id!r})"
