"""
Null-ish classification, safe string coercion and loose equality.

Every other primkit module builds on these primitives. Three coercion entry
points exist and are not interchangeable:

- stringify(x): display/JSON form. None is JSON "null", UNSET is "undefined".
- null_string(x): form used for null checks and equality. The absent
  sentinels become the literal words "null"/"undefined" so they match the
  same text checks as real strings.
- safe_string(x): form used by formatting helpers. The absent sentinels
  become "".

None of them raise, for any input.
"""
import copy
import json
import math
from collections.abc import Iterable
from datetime import date, time
from typing import Any, List, Set

from primkit.core.type_system import (
    UNSET,
    Shape,
    UnsupportedTypeError,
    is_absent,
    is_composite,
    shape_of,
)

_NULL_WORDS = frozenset({"null", "undefined"})
_FALSE_WORDS = frozenset({"false", "0"})

# Beyond this magnitude floats are rendered in exponent form
_MAX_PLAIN_FLOAT = 1e21

# Ints up to this size stay under any int-to-str digit limit (minimum 640)
_SAFE_INT_BITS = 2000
_INT_CHUNK_DIGITS = 500

# Composites nested deeper than this are encoded as a marker
_MAX_DEPTH = 100
_DEPTH_MARKER = "[Truncated]"


def _int_text(value: int) -> str:
    """Decimal text for an int of any size."""
    try:
        return str(value)
    except ValueError:
        # Past the interpreter's int-to-str digit limit; convert in chunks
        pass

    remaining = abs(int(value))
    base = 10 ** _INT_CHUNK_DIGITS
    chunks = []
    while remaining >= base:
        remaining, chunk = divmod(remaining, base)
        chunks.append(str(chunk).zfill(_INT_CHUNK_DIGITS))
    chunks.append(str(remaining))

    sign = "-" if value < 0 else ""
    return sign + "".join(reversed(chunks))


def _scalar_text(value: Any) -> str:
    """Canonical text for a non-composite, non-absent value."""
    if isinstance(value, bool):
        return "true" if value else "false"

    if isinstance(value, int):
        return _int_text(value)

    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < _MAX_PLAIN_FLOAT:
            return str(int(value))
        return repr(value)

    try:
        return str(value)
    except Exception:
        # A broken __str__ must not break coercion
        return f"<{type(value).__name__}>"


def _dump(value: Any) -> str:
    return json.dumps(
        value,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )


def _key_text(key: Any, path: Set[int], depth: int) -> str:
    """Text for a mapping key; JSON object keys must be strings."""
    if isinstance(key, str):
        return key
    if key is None:
        return "null"
    if key is UNSET:
        return "undefined"
    if is_composite(key):
        return _dump(_jsonable(key, path, depth + 1))
    return _scalar_text(key)


def _jsonable(value: Any, path: Set[int], depth: int = 0) -> Any:
    """
    Convert a value into plain JSON types.

    Numbers follow the same canonical rules as top-level scalars: integral
    floats become ints, NaN and infinities become null, and ints too long
    for the encoder become strings. Cycles and excessive nesting are
    replaced by markers.
    """
    if value is UNSET:
        return None
    if value is None or isinstance(value, (str, bool)):
        return value
    if isinstance(value, int):
        if value.bit_length() > _SAFE_INT_BITS:
            try:
                int.__repr__(value)
            except ValueError:
                return _int_text(value)
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        if value.is_integer() and abs(value) < _MAX_PLAIN_FLOAT:
            return int(value)
        return value
    if isinstance(value, (date, time)):
        return value.isoformat()

    shape = shape_of(value)
    if shape not in (Shape.MAPPING, Shape.SEQUENCE, Shape.SET):
        return _scalar_text(value)

    if id(value) in path:
        return "[Circular]"
    if depth >= _MAX_DEPTH:
        return _DEPTH_MARKER

    path.add(id(value))
    try:
        if shape is Shape.MAPPING:
            return {
                _key_text(key, path, depth): _jsonable(item, path, depth + 1)
                for key, item in value.items()
            }
        items = [_jsonable(item, path, depth + 1) for item in value]
        if shape is Shape.SET:
            # Set iteration order is not stable across processes
            items.sort(key=_dump)
        return items
    finally:
        path.discard(id(value))


def stringify(value: Any) -> str:
    """
    Convert any value to a deterministic string.

    Composites (mappings, sequences, sets) are encoded as compact JSON,
    keeping insertion order. Primitives use their canonical text:
    booleans are "true"/"false" and integral floats drop the ".0".

    Examples:
        stringify(123) → "123"
        stringify(True) → "true"
        stringify(None) → "null"
        stringify({"foo": "bar", "baz": 1}) → '{"foo":"bar","baz":1}'
        stringify([1.0, float("nan")]) → "[1,null]"
    """
    if value is None:
        return "null"
    if value is UNSET:
        return "undefined"
    if is_composite(value):
        return _dump(_jsonable(value, set()))
    return _scalar_text(value)


def null_string(value: Any) -> str:
    """Stringify for null checks: None → "null", UNSET → "undefined"."""
    if value is None:
        return "null"
    if value is UNSET:
        return "undefined"
    return stringify(value)


def safe_string(value: Any) -> str:
    """Stringify for formatting: absent values become the empty string."""
    if is_absent(value):
        return ""
    return stringify(value)


# ==================== Null-ish classifier ====================


def is_null(value: Any) -> bool:
    """
    Determine if the value is null-ish.

    True for None, UNSET, and any value whose trimmed, lowercased text is
    exactly "null" or "undefined". Substrings do not count: "nullable" is
    not null.
    """
    if is_absent(value):
        return True
    return null_string(value).strip().lower() in _NULL_WORDS


def is_not_null(value: Any) -> bool:
    return not is_null(value)


def is_null_or_whitespace(value: Any) -> bool:
    """
    Determine if the value is null-ish, empty, or only whitespace.

    Examples:
        is_null_or_whitespace(None) → True
        is_null_or_whitespace("null") → True
        is_null_or_whitespace("   ") → True
        is_null_or_whitespace("  .  ") → False
        is_null_or_whitespace(" 0 ") → False
    """
    return is_null(value) or len(null_string(value).strip()) == 0


def is_not_null_or_whitespace(value: Any) -> bool:
    return not is_null_or_whitespace(value)


is_blank = is_null_or_whitespace
is_not_blank = is_not_null_or_whitespace


# ==================== Loose equality ====================


def is_equal(a: Any, b: Any) -> bool:
    """
    Compare two values by their trimmed string forms.

    Case is significant: is_equal(False, "  false ") is True but
    is_equal(False, "FALSE") is False.
    """
    return null_string(a).strip() == null_string(b).strip()


def is_equal_ignore_case(a: Any, b: Any) -> bool:
    """Like is_equal, but both operands are lowercased first."""
    return null_string(a).strip().lower() == null_string(b).strip().lower()


def is_not_equal(a: Any, b: Any) -> bool:
    return not is_equal(a, b)


def is_not_equal_ignore_case(a: Any, b: Any) -> bool:
    return not is_equal_ignore_case(a, b)


# ==================== Truthiness ====================


def to_bool(value: Any) -> bool:
    """
    Coerce a value to bool using string conventions.

    Rules:
    - "false", "0" (any case, surrounding whitespace ignored) → False
    - null-ish or blank → False
    - empty mappings, sequences and sets → False, even though their JSON
      text ("[]", "{}") is not blank
    - otherwise Python's truthiness of the original value

    Args:
        value: Any value

    Returns:
        The coerced boolean
    """
    text = safe_string(value).strip().lower()

    if text in _FALSE_WORDS or is_null_or_whitespace(text):
        return False

    if is_composite(value):
        return len(value) > 0

    return bool(value)


# ==================== Structural helpers ====================


def clone(value: Any) -> Any:
    """Return a deep copy sharing no mutable substructure with ``value``."""
    return copy.deepcopy(value)


def reverse(value: Any) -> Any:
    """
    Reverse a string or a sequence without mutating the input.

    Strings reverse to strings, tuples to tuples and every other sequence
    to a new list.

    Raises:
        UnsupportedTypeError: If the value is not a string or sequence
    """
    shape = shape_of(value)

    if shape is Shape.TEXT:
        return value[::-1]

    if shape is Shape.SEQUENCE:
        if isinstance(value, tuple):
            return tuple(reversed(value))
        return list(reversed(value))

    raise UnsupportedTypeError("reverse", value, "a string or a sequence")


def is_empty(value: Any) -> bool:
    """
    Determine if a string or collection has no content.

    - Absent values count as empty
    - Strings are empty only when equal to "" (whitespace is content)
    - Mappings, sequences and sets are empty when their length is 0

    Raises:
        UnsupportedTypeError: For scalars (numbers, booleans, objects)
    """
    shape = shape_of(value)

    if shape is Shape.ABSENT:
        return True
    if shape is Shape.TEXT:
        return value == ""
    if shape in (Shape.MAPPING, Shape.SEQUENCE, Shape.SET):
        return len(value) == 0

    raise UnsupportedTypeError("is_empty", value, "a string or a collection")


def is_not_empty(value: Any) -> bool:
    return not is_empty(value)


def _identity_key(item: Any) -> Any:
    """Key under which two items count as duplicates in unique()."""
    try:
        hash(item)
    except TypeError:
        return ("ref", id(item))

    if isinstance(item, bool):
        return (bool, item)
    if isinstance(item, (int, float)):
        if isinstance(item, float) and math.isnan(item):
            return (float, "nan")
        # 1 and 1.0 are the same number
        return (float, item)
    return (type(item), item)


def unique(values: Any) -> Any:
    """
    Remove duplicates, keeping the first occurrence of each value.

    Values of different kinds never collapse: 3 and "3" both survive, as do
    1 and True. Unhashable items (dicts, lists) are compared by identity.

    Args:
        values: A list, tuple, set or other non-text iterable

    Returns:
        A tuple when given a tuple, otherwise a list

    Raises:
        UnsupportedTypeError: For strings, mappings and scalars
    """
    shape = shape_of(values)

    if shape is Shape.ABSENT:
        return []
    if shape in (Shape.TEXT, Shape.MAPPING) or not isinstance(values, Iterable):
        raise UnsupportedTypeError("unique", values, "a sequence or iterable")

    seen = set()
    result: List[Any] = []
    for item in values:
        key = _identity_key(item)
        if key in seen:
            continue
        seen.add(key)
        result.append(item)

    if isinstance(values, tuple):
        return tuple(result)
    return result
