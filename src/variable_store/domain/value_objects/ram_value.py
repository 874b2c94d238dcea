"""Typed values stored in memory cells.

A RamValue is a tagged union over six variants:

    INT      signed 64-bit integer
    REAL     double precision float
    STR      text
    PTR      signed 64-bit integer address
    BOOLEAN  integer with 0/1 semantics (0 is False, anything else True)
    NONE     no payload

Values never share state. The store keeps its own copy of every value written
into it and hands out fresh copies on every read, so reassigning the payload of
one value can never be observed through another.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from types import TracebackType
from typing import Union

from variable_store.domain.value_objects.identifiers import INT64_MAX, INT64_MIN


Payload = Union[int, float, str, None]


class ValueType(IntEnum):
    """Tag identifying which variant a RamValue holds."""

    INT = 0
    REAL = 1
    STR = 2
    PTR = 3
    BOOLEAN = 4
    NONE = 5

    @property
    def label(self) -> str:
        """Type name used in memory dumps."""
        return self.name.lower()


class ValueReleasedError(Exception):
    """Raised when a released value copy is used or released again."""

    pass


@dataclass
class RamValue:
    """A typed value held by a memory cell or returned by a read.

    Attributes:
        value_type: Which of the six variants this value holds.
        payload: The variant's data; None for NONE.

    Example:
        >>> v = RamValue.of_str("apple")
        >>> v.render()
        "str, 'apple'"
        >>> v.copy() == v
        True
    """

    value_type: ValueType
    payload: Payload = None
    _released: bool = field(default=False, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate the payload against the tag."""
        self.value_type = ValueType(self.value_type)
        self.payload = _check_payload(self.value_type, self.payload)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def of_int(cls, value: int) -> RamValue:
        return cls(ValueType.INT, value)

    @classmethod
    def of_real(cls, value: float) -> RamValue:
        return cls(ValueType.REAL, value)

    @classmethod
    def of_str(cls, value: str) -> RamValue:
        return cls(ValueType.STR, value)

    @classmethod
    def of_ptr(cls, value: int) -> RamValue:
        return cls(ValueType.PTR, value)

    @classmethod
    def of_boolean(cls, value: bool | int) -> RamValue:
        """Create a BOOLEAN value from a bool or a 0/1 style integer."""
        return cls(ValueType.BOOLEAN, value)

    @classmethod
    def none(cls) -> RamValue:
        return cls(ValueType.NONE)

    @classmethod
    def from_python(cls, obj: object) -> RamValue:
        """Convert a plain Python object to the matching variant.

        bool maps to BOOLEAN, int to INT, float to REAL, str to STR and
        None to NONE. A RamValue is copied.

        Raises:
            TypeError: If the object has no matching variant.
        """
        if isinstance(obj, RamValue):
            return obj.copy()
        if obj is None:
            return cls.none()
        if isinstance(obj, bool):
            return cls.of_boolean(obj)
        if isinstance(obj, int):
            return cls.of_int(obj)
        if isinstance(obj, float):
            return cls.of_real(obj)
        if isinstance(obj, str):
            return cls.of_str(obj)
        raise TypeError(f"No value type for {type(obj).__name__}")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def released(self) -> bool:
        """True once release() has been called on this value."""
        return self._released

    def is_none(self) -> bool:
        self._ensure_live()
        return self.value_type == ValueType.NONE

    def as_bool(self) -> bool:
        """Interpret a BOOLEAN payload (0 is False, anything else True).

        Raises:
            TypeError: If the value is not a BOOLEAN.
        """
        self._ensure_live()
        if self.value_type != ValueType.BOOLEAN:
            raise TypeError(f"{self.value_type.label} value is not a boolean")
        return self.payload != 0

    def to_python(self) -> Payload | bool:
        """Return the payload as a plain Python object."""
        self._ensure_live()
        if self.value_type == ValueType.BOOLEAN:
            return self.payload != 0
        return self.payload

    def render(self) -> str:
        """Render as `type, value` the way memory dumps print it."""
        self._ensure_live()
        vt = self.value_type
        if vt == ValueType.INT:
            return f"int, {self.payload}"
        if vt == ValueType.REAL:
            return f"real, {self.payload:f}"
        if vt == ValueType.STR:
            return f"str, '{self.payload}'"
        if vt == ValueType.PTR:
            return f"ptr, {self.payload}"
        if vt == ValueType.BOOLEAN:
            return "boolean, True" if self.payload != 0 else "boolean, False"
        if vt == ValueType.NONE:
            return "none, None"
        raise AssertionError(f"Unhandled value type {vt!r}")

    # ------------------------------------------------------------------
    # Ownership
    # ------------------------------------------------------------------

    def copy(self) -> RamValue:
        """Return an independent copy of this value.

        The payload is re-validated, so a copy of a value whose payload was
        reassigned to something invalid fails here.
        """
        self._ensure_live()
        return RamValue(self.value_type, self.payload)

    def release(self) -> None:
        """Drop the payload and end this value's life.

        Raises:
            ValueReleasedError: If the value was already released.
        """
        self._ensure_live()
        self.payload = None
        self._released = True

    def __enter__(self) -> RamValue:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if not self._released:
            self.release()

    def _ensure_live(self) -> None:
        if self._released:
            raise ValueReleasedError(f"{self.value_type.label} value was already released")


def _check_payload(value_type: ValueType, payload: object) -> Payload:
    """Validate and normalize a payload for the given tag."""
    if value_type == ValueType.NONE:
        if payload is not None:
            raise ValueError(f"none value cannot carry a payload, got {payload!r}")
        return None

    if value_type == ValueType.STR:
        if not isinstance(payload, str):
            raise TypeError(f"str value requires str payload, got {type(payload).__name__}")
        return payload

    if value_type == ValueType.REAL:
        if isinstance(payload, bool) or not isinstance(payload, (int, float)):
            raise TypeError(f"real value requires float payload, got {type(payload).__name__}")
        return float(payload)

    # INT, PTR and BOOLEAN share the 64-bit integer payload
    if isinstance(payload, bool):
        if value_type != ValueType.BOOLEAN:
            raise TypeError(f"{value_type.label} value requires int payload, got bool")
        return int(payload)
    if not isinstance(payload, int):
        raise TypeError(
            f"{value_type.label} value requires int payload, got {type(payload).__name__}"
        )
    if not INT64_MIN <= payload <= INT64_MAX:
        raise ValueError(f"{value_type.label} payload {payload} does not fit in 64 bits")
    return payload
