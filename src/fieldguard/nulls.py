"""
FieldGuard Tri-State Values

Request payloads distinguish a field that was never sent from one sent as
an explicit null. Validators only care whether a usable value is present,
so both empty states collapse to ``None`` when taken.
"""

from enum import Enum
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class NullState(str, Enum):
    """The three states a nullable field can be in."""
    UNDEFINED = "undefined"
    NULL = "null"
    VALUE = "value"


class Null(Generic[T]):
    """
    A value that may be undefined, explicitly null, or present.

    Instances are immutable; use the module-level ``undefined``, ``null``
    and ``new`` helpers to build them.
    """

    __slots__ = ("_state", "_value")

    def __init__(self, state: NullState = NullState.UNDEFINED, value: Optional[T] = None):
        if state is not NullState.VALUE and value is not None:
            raise ValueError(f"A {state.value} Null cannot carry a value")
        self._state = state
        self._value = value

    @property
    def state(self) -> NullState:
        return self._state

    def is_undefined(self) -> bool:
        return self._state is NullState.UNDEFINED

    def is_null(self) -> bool:
        return self._state is NullState.NULL

    def is_some(self) -> bool:
        return self._state is NullState.VALUE

    def take(self) -> Optional[T]:
        """Return the wrapped value, or None when undefined or null."""
        if self._state is NullState.VALUE:
            return self._value
        return None

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Null):
            return NotImplemented
        return self._state is other._state and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._state, self._value))

    def __repr__(self) -> str:
        if self._state is NullState.VALUE:
            return f"Null.Value({self._value!r})"
        return f"Null.{self._state.name.title()}"


def undefined() -> Null:
    """A field that was never supplied."""
    return Null(NullState.UNDEFINED)


def null() -> Null:
    """A field explicitly supplied as null."""
    return Null(NullState.NULL)


def new(value: T) -> Null[T]:
    """A field carrying a value."""
    return Null(NullState.VALUE, value)


def take(source: Any) -> Any:
    """
    Extract the underlying value from a tri-state source.

    Plain values pass through unchanged, so callers holding an ordinary
    Python value (``None`` meaning nothing) do not have to wrap it.
    """
    if isinstance(source, Null):
        return source.take()
    return source
