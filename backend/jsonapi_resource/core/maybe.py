"""Maybe — two-variant container for values that may be legitimately absent.

Invariants:
    - Absent never wraps a value; Present always wraps one (None included)
    - Only the NOTHING sentinel produces Absent; None, "", 0 and False are Present
    - map/bind on Absent short-circuit without calling the transform
    - Values are immutable and freely shareable

Design Decisions:
    - NOTHING sentinel over None: JSON null is a real attribute value, "not specified"
      is not (ADR: keep null distinct from missing)
    - bind merges map and flat-map: a transform may return a Maybe or a raw value,
      mirroring promise-style chaining (no double wrapping)
"""

import copy
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


class _NothingType:
    """Singleton marker for "no value was given"."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOTHING"

    def __bool__(self) -> bool:
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (_NothingType, ())


NOTHING: Any = _NothingType()


class Present(Generic[T]):
    """Maybe variant holding a value."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name, value):
        raise AttributeError("Present is immutable")

    def __reduce__(self):
        return (Present, (self._value,))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return Present(copy.deepcopy(self._value, memo))

    @property
    def value(self) -> T:
        return self._value

    @property
    def is_present(self) -> bool:
        return True

    def get_or_default(self, default: Any = NOTHING) -> T:
        return self._value

    def map(self, transform: Callable[[T], Any]) -> "Maybe":
        return maybe(transform(self._value))

    def bind(self, transform: Callable[[T], Any]) -> "Maybe":
        transformed = transform(self._value)
        if isinstance(transformed, (Present, Absent)):
            return transformed
        return maybe(transformed)

    def __eq__(self, other) -> bool:
        return isinstance(other, Present) and self._value == other._value

    def __hash__(self) -> int:
        return hash(("Present", self._value))

    def __repr__(self) -> str:
        return f"Present({self._value!r})"


class Absent(Generic[T]):
    """Maybe variant holding nothing. Use the ABSENT singleton."""

    __slots__ = ()

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __reduce__(self):
        return (Absent, ())

    @property
    def is_present(self) -> bool:
        return False

    def get_or_default(self, default: Any = NOTHING) -> Any:
        return default

    def map(self, transform: Callable[[Any], Any]) -> "Absent":
        return self

    def bind(self, transform: Callable[[Any], Any]) -> "Absent":
        return self

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT: Absent = Absent()

Maybe = Union[Present[T], Absent[T]]


def maybe(value: Any) -> Maybe:
    """Wrap a value: NOTHING becomes ABSENT, everything else is Present."""
    if value is NOTHING:
        return ABSENT
    return Present(value)
