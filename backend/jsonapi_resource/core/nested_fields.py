"""Nested Fields — helpers for plain JSON-like trees addressed by dot paths.

Invariants:
    - All functions are PURE apart from delete_nested, which mutates only the given mapping
    - A "plain object" is a dict; lists, tuples and other mappings are not
"""

from typing import Any

from jsonapi_resource.core.domain_types import FIELD_PATH_SEPARATOR


def is_plain_object(value: Any) -> bool:
    return isinstance(value, dict)


def object_is_empty(value: dict | None) -> bool:
    """True for None or a dict with no keys."""
    return not value


def delete_nested(path: str, obj: dict) -> bool:
    """Delete the field at a dot-separated path.

    Returns True if a field was removed, False if any part of the path
    was missing or not a dict.
    """
    *containing_parts, last_part = path.split(FIELD_PATH_SEPARATOR)
    container: Any = obj
    for part in containing_parts:
        if not is_plain_object(container) or part not in container:
            return False
        container = container[part]

    if not is_plain_object(container) or last_part not in container:
        return False
    del container[last_part]
    return True
