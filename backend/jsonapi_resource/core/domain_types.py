"""Domain Types — names and shapes shared by the resource model and its renderers.

Invariants:
    - RESERVED_FIELD_NAMES are never attribute or relationship names
    - RESERVED_COMPLEX_ATTRIBUTE_KEYS never appear inside a nested attribute object
    - Templates under ROUTED_TEMPLATE_NAMES never become top-level resource links

Design Decisions:
    - TypedDict for wire shapes: resources serialize to plain dicts, no custom encoder needed
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import Any, Callable, Mapping, TypedDict, Union


# ─── Field Names ─────────────────────────────────────────────────

RESERVED_FIELD_NAMES = frozenset({"id", "type"})
RESERVED_COMPLEX_ATTRIBUTE_KEYS = frozenset({"relationships", "links"})
FIELD_PATH_SEPARATOR = "."


# ─── URL Templates ───────────────────────────────────────────────

class TemplateName(str, Enum):
    """Template names with special routing during serialization."""
    SELF = "self"
    RELATIONSHIP = "relationship"
    RELATED = "related"
    TOP = "$top"


ROUTED_TEMPLATE_NAMES = frozenset({
    TemplateName.RELATIONSHIP.value,
    TemplateName.RELATED.value,
    TemplateName.TOP.value,
})

UrlTemplate = Union[str, Callable[[dict[str, Any]], str | None], None]
UrlTemplates = Mapping[str, UrlTemplate]


# ─── Wire Shapes ─────────────────────────────────────────────────

class ResourceIdentifierJSON(TypedDict, total=False):
    type: str
    id: str
    meta: dict[str, Any]


class RelationshipJSON(TypedDict, total=False):
    data: Any
    links: dict[str, str]
    meta: dict[str, Any]


class ResourceJSON(TypedDict, total=False):
    id: str
    type: str
    attributes: dict[str, Any]
    relationships: dict[str, RelationshipJSON]
    meta: dict[str, Any]
    links: dict[str, str]
