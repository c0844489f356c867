"""Field Group Enforcement — validates attributes/relationships before they land on a Resource.

Invariants:
    - All functions are PURE: no IO, no side effects, raise on violation, return None on success
    - Checks run in a fixed order: not-a-dict (3), reserved name (4), complex attribute (6), conflict (5)
    - Complex attribute scan recurses through dicts key-wise and lists/tuples element-wise

Design Decisions:
    - Raise ResourceValidationError instead of returning error dicts: every caller is a setter
      that must abort the assignment (ADR: fail fast at the mutation point)
    - other_fields is always the complete current state of the other group, so bulk setters,
      set_relationship and with_* updates cannot disagree on ordering
"""

from typing import Any, Mapping

from jsonapi_resource.core.domain_types import (
    RESERVED_COMPLEX_ATTRIBUTE_KEYS, RESERVED_FIELD_NAMES,
)
from jsonapi_resource.core.errors import ResourceErrorKind, ResourceValidationError
from jsonapi_resource.core.maybe import NOTHING
from jsonapi_resource.core.nested_fields import is_plain_object


def validate_field_group(
    group: Any, other_fields: Mapping[str, Any] | None, is_attributes: bool = False,
) -> None:
    """Check a group of fields (attributes or relationships) against the other group.

    Args:
        group: the fields the caller is trying to put on the resource.
        other_fields: the other group that will still exist on the resource;
            None when it hasn't been set yet.
        is_attributes: whether `group` holds attributes, which triggers
            the complex attribute scan.
    """
    if not is_plain_object(group):
        raise ResourceValidationError(
            "Attributes and relationships must be provided as an object.",
            ResourceErrorKind.FIELD_GROUP_NOT_OBJECT,
        )

    if any(name in group for name in RESERVED_FIELD_NAMES):
        raise ResourceValidationError(
            "`type` and `id` cannot be used as field names.",
            ResourceErrorKind.RESERVED_FIELD_NAME,
        )

    for name, value in group.items():
        if is_attributes:
            validate_complex_attribute(value)

        if other_fields is not None and other_fields.get(name, NOTHING) is not NOTHING:
            raise ResourceValidationError(
                "A resource can't have an attribute and a relationship with the same name.",
                ResourceErrorKind.FIELD_NAME_CONFLICT,
                {"field": name},
            )


def validate_complex_attribute(value: Any) -> None:
    """Reject nested objects that hold `relationships` or `links` members."""
    if is_plain_object(value):
        if any(value.get(key, NOTHING) is not NOTHING for key in RESERVED_COMPLEX_ATTRIBUTE_KEYS):
            raise ResourceValidationError(
                'Complex attributes may not have "relationships" or "links" keys.',
                ResourceErrorKind.RESERVED_COMPLEX_ATTRIBUTE_KEY,
            )
        for nested in value.values():
            validate_complex_attribute(nested)
    elif isinstance(value, (list, tuple)):
        for item in value:
            validate_complex_attribute(item)
