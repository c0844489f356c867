"""Field group enforcement — pure tests for attribute/relationship naming rules.

Tests cover:
    Kind 3: group must be a dict
    Kind 4: `id` and `type` are reserved names
    Kind 5: attrs and relationships must not share names
    Kind 6: nested attribute objects must not hold `relationships`/`links`
"""

import pytest

from jsonapi_resource.core.enforce_fields import (
    validate_complex_attribute,
    validate_field_group,
)
from jsonapi_resource.core.errors import ResourceErrorKind, ResourceValidationError
from jsonapi_resource.core.maybe import NOTHING


def _kind(fn, *args, **kwargs):
    with pytest.raises(ResourceValidationError) as exc:
        fn(*args, **kwargs)
    return exc.value.kind


# --- kind 3: not a dict -------------------------------------------------------

@pytest.mark.parametrize("group", [None, [], "attrs", 3, ("a", 1)])
def test_group_must_be_a_dict(group):
    assert _kind(validate_field_group, group, {}) == ResourceErrorKind.FIELD_GROUP_NOT_OBJECT


# --- kind 4: reserved names ---------------------------------------------------

@pytest.mark.parametrize("name", ["id", "type"])
def test_reserved_names_rejected(name):
    assert _kind(validate_field_group, {name: 1}, {}) == ResourceErrorKind.RESERVED_FIELD_NAME


def test_reserved_name_checked_before_complex_attribute():
    group = {"id": 1, "body": {"links": {}}}
    assert _kind(validate_field_group, group, {}, True) == ResourceErrorKind.RESERVED_FIELD_NAME


# --- kind 5: conflicts --------------------------------------------------------

def test_conflict_carries_field_name():
    with pytest.raises(ResourceValidationError) as exc:
        validate_field_group({"author": 1}, {"author": "rel"})
    assert exc.value.kind == ResourceErrorKind.FIELD_NAME_CONFLICT
    assert exc.value.kind == 5
    assert exc.value.field == "author"
    assert exc.value.extra == {"field": "author"}


def test_null_value_in_other_group_still_conflicts():
    assert _kind(validate_field_group, {"author": 1}, {"author": None}) == 5


def test_nothing_value_in_other_group_does_not_conflict():
    validate_field_group({"author": 1}, {"author": NOTHING})


def test_unset_other_group_skips_conflict_check():
    validate_field_group({"author": 1}, None)


# --- kind 6: complex attributes -----------------------------------------------

@pytest.mark.parametrize("value", [
    {"relationships": {}},
    {"links": None},
    {"nested": {"deeper": {"links": "x"}}},
    [{"ok": 1}, {"relationships": []}],
    {"list": [[{"links": {}}]]},
    ({"links": 1},),
])
def test_nested_reserved_keys_rejected(value):
    assert _kind(validate_complex_attribute, value) == ResourceErrorKind.RESERVED_COMPLEX_ATTRIBUTE_KEY


@pytest.mark.parametrize("value", [
    "relationships", ["links"], {"text": "ok"}, 3, None, {"a": [1, {"b": 2}]},
])
def test_plain_values_pass(value):
    validate_complex_attribute(value)


def test_top_level_attribute_named_links_is_allowed():
    validate_field_group({"links": ["a", "b"]}, {}, is_attributes=True)


def test_relationship_groups_skip_complex_scan():
    validate_field_group({"author": {"links": {}}}, {})
