"""Maybe — tests for the Present/Absent container.

Tests cover:
    - maybe(): only NOTHING produces ABSENT; None and other falsy values are Present
    - get_or_default with and without a default
    - map/bind: normalization of NOTHING results, no double wrapping
    - Short-circuit: transforms never run on ABSENT
    - copy, deepcopy and pickle keep values equal and singletons identical
"""

import copy
import pickle

import pytest

from jsonapi_resource.core.maybe import ABSENT, NOTHING, Absent, Present, maybe


# --- construction --------------------------------------------------------------

@pytest.mark.parametrize("value", [None, "", 0, False, [], {}, "x", 42])
def test_any_value_but_nothing_is_present(value):
    result = maybe(value)
    assert isinstance(result, Present)
    assert result.is_present
    assert result.get_or_default("default") == value


def test_nothing_is_absent():
    assert maybe(NOTHING) is ABSENT
    assert not ABSENT.is_present


def test_absent_is_a_singleton():
    assert Absent() is ABSENT


def test_nothing_survives_copy():
    assert copy.copy(NOTHING) is NOTHING
    assert copy.deepcopy({"a": NOTHING})["a"] is NOTHING


def test_present_survives_copy():
    value = maybe(["a"])
    assert copy.copy(value) is value
    clone = copy.deepcopy(value)
    assert clone == value
    assert clone.value is not value.value


def test_present_round_trips_through_pickle():
    assert pickle.loads(pickle.dumps(maybe(1))) == Present(1)
    assert pickle.loads(pickle.dumps(maybe(None))) == Present(None)


def test_absent_and_nothing_stay_singletons_through_pickle():
    assert pickle.loads(pickle.dumps(ABSENT)) is ABSENT
    assert pickle.loads(pickle.dumps(NOTHING)) is NOTHING
    assert copy.deepcopy(ABSENT) is ABSENT


def test_present_is_immutable():
    present = maybe(1)
    with pytest.raises(AttributeError):
        present._value = 2


def test_present_compares_by_value():
    assert maybe(3) == Present(3)
    assert maybe(3) != Present(4)
    assert maybe(None) != ABSENT


# --- get_or_default -----------------------------------------------------------

def test_absent_returns_default():
    assert maybe(NOTHING).get_or_default("d") == "d"


def test_absent_without_default_returns_nothing():
    assert maybe(NOTHING).get_or_default() is NOTHING


def test_present_null_is_not_replaced_by_default():
    assert maybe(None).get_or_default("d") is None


# --- map ----------------------------------------------------------------------

def test_map_applies_transform():
    assert maybe(2).map(lambda v: v * 10) == Present(20)


def test_map_returning_nothing_gives_absent():
    assert maybe(2).map(lambda v: NOTHING) is ABSENT


def test_map_returning_none_stays_present():
    assert maybe(2).map(lambda v: None) == Present(None)


def test_map_does_not_flatten():
    assert maybe(2).map(lambda v: maybe(v)) == Present(Present(2))


def test_map_on_absent_never_calls_transform():
    calls = []
    result = ABSENT.map(lambda v: calls.append(v))
    assert result is ABSENT
    assert calls == []


# --- bind ---------------------------------------------------------------------

def test_bind_returns_maybe_result_as_is():
    inner = Present("inner")
    assert maybe(1).bind(lambda v: inner) is inner
    assert maybe(1).bind(lambda v: ABSENT) is ABSENT


def test_bind_wraps_raw_result():
    assert maybe(1).bind(lambda v: v + 1) == Present(2)


def test_bind_returning_nothing_gives_absent():
    assert maybe(1).bind(lambda v: NOTHING) is ABSENT


def test_bind_on_absent_never_calls_transform():
    def explode(v):
        raise AssertionError("transform must not run")

    assert ABSENT.bind(explode) is ABSENT


def test_chain_short_circuits_after_absent():
    seen = []
    result = (
        maybe({"title": "T"})
        .map(lambda attrs: attrs.get("missing", NOTHING))
        .map(lambda v: seen.append(v) or v)
        .bind(lambda v: maybe(v.upper()))
    )
    assert result is ABSENT
    assert seen == []
    assert result.get_or_default("untitled") == "untitled"
