"""
Runtime shape classification shared by every primkit helper.

Helpers that accept "any value" dispatch on a small closed set of shapes
instead of inspecting arbitrary types:

- ABSENT: ``None`` or ``UNSET``
- TEXT: ``str``
- MAPPING: dicts and other ``Mapping`` implementations
- SEQUENCE: lists, tuples and other non-text ``Sequence`` implementations
- SET: sets and frozensets
- SCALAR: everything else (numbers, booleans, dates, bytes, objects)
"""
from collections.abc import Mapping, Sequence, Set
from enum import Enum
from typing import Any


class UnsupportedTypeError(TypeError):
    """Raised when a helper receives a value of a shape it cannot handle."""

    def __init__(self, func_name: str, value: Any, expected: str):
        self.func_name = func_name
        self.value_type = type(value).__name__
        super().__init__(
            f"{func_name}() expected {expected}, got {self.value_type}"
        )


class _Unset:
    """Type of the ``UNSET`` sentinel (the "undefined" absent value)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (_Unset, ())


UNSET = _Unset()


class Shape(Enum):
    """Closed set of runtime value shapes."""
    ABSENT = "absent"
    TEXT = "text"
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SET = "set"
    SCALAR = "scalar"


def is_absent(value: Any) -> bool:
    """True for the two absent sentinels, ``None`` and ``UNSET``."""
    return value is None or value is UNSET


def shape_of(value: Any) -> Shape:
    """
    Classify a value into one of the closed ``Shape`` variants.

    ``bytes`` and ``bytearray`` are sequences to Python but are treated as
    scalars here, since none of the helpers operate on raw bytes.
    """
    if is_absent(value):
        return Shape.ABSENT
    if isinstance(value, str):
        return Shape.TEXT
    if isinstance(value, Mapping):
        return Shape.MAPPING
    if isinstance(value, (bytes, bytearray)):
        return Shape.SCALAR
    if isinstance(value, Sequence):
        return Shape.SEQUENCE
    if isinstance(value, Set):
        return Shape.SET
    return Shape.SCALAR


def is_composite(value: Any) -> bool:
    """True for mappings, sequences and sets (values encoded as JSON)."""
    return shape_of(value) in (Shape.MAPPING, Shape.SEQUENCE, Shape.SET)
