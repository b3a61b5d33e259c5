"""Generic value helpers: inspection, merging, and JSON round-trips.

Every function here except :func:`extend` is a pure transformation with
no side effects.  :func:`extend` mutates only the target it is given.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping, Sequence, Set
from numbers import Integral
from typing import Any

from scriptkit.core.values import ValueKind, classify, extend_single, has_own_prop, own_items
from scriptkit.exceptions import MissingTargetError

__all__: list[str] = [
    "clone_json",
    "extend",
    "has_own_prop",
    "is_array_like",
    "is_empty_data",
    "try_parse_json",
]


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------

def is_array_like(obj: Any) -> bool:
    """Return ``True`` if *obj* is an indexable structure with a length.

    Qualifies when *obj* is not ``None``, not callable, and either

    * is a ``Sequence`` (``list``, ``tuple``, ``str``, ``range``, …),
    * supports ``len()`` and positional ``[]`` without being a mapping or
      set (e.g. array types that do not register as ``Sequence``), or
    * exposes a ``length`` attribute holding a non-negative integer.

    ``is_array_like([])`` is ``True``; ``is_array_like({})`` is ``False``.
    """
    if obj is None or callable(obj):
        return False
    if isinstance(obj, Sequence):
        return True
    if isinstance(obj, (Mapping, Set)):
        return False
    if hasattr(obj, "__len__") and hasattr(obj, "__getitem__"):
        try:
            return len(obj) >= 0
        except TypeError:
            # e.g. zero-dimensional arrays define __len__ but refuse it.
            return False
    length = getattr(obj, "length", None)
    return isinstance(length, Integral) and not isinstance(length, bool) and length >= 0


def is_empty_data(value: Any) -> bool:
    """Return ``True`` if *value* carries no data.

    Empty means one of:

    * ``None``;
    * a string that is empty or whitespace only;
    * a sequence or set of length 0;
    * a mapping or attribute object without own properties.

    Numbers, booleans and callables are never empty.
    """
    kind = classify(value)
    if kind is ValueKind.NULL:
        return True
    if kind is ValueKind.STRING:
        return not value.strip()
    if kind is ValueKind.ARRAY:
        return len(value) == 0
    if kind is ValueKind.OBJECT:
        return next(own_items(value), None) is None
    return False


# ---------------------------------------------------------------------------
# Merging
# ---------------------------------------------------------------------------

def extend(target: Any, *sources: Any) -> Any:
    """Copy own properties of each source onto *target* and return it.

    Sources are applied left to right, so later sources win over earlier
    ones and over keys already present on *target*.  ``None`` sources are
    skipped.  No new object is ever created.

    Raises
    ------
    MissingTargetError
        If *target* is ``None``.
    """
    if target is None:
        raise MissingTargetError("The target argument cannot be None")

    for source in sources:
        extend_single(target, source)
    return target


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------

def _encode_fallback(value: Any) -> Any:
    """``json.dumps`` hook for values outside the JSON data model."""
    kind = classify(value)
    if kind is ValueKind.OBJECT:
        return dict(own_items(value))
    if kind is ValueKind.ARRAY:
        return list(value)
    if kind is ValueKind.NUMBER:
        try:
            return float(value)
        except TypeError:
            return None
    return None


def _non_finite_to_none(_constant: str) -> None:
    """``json.loads`` hook for ``NaN``, ``Infinity`` and ``-Infinity``."""
    return None


def clone_json(obj: Any) -> Any:
    """Deep-copy *obj* by encoding it to JSON text and decoding it back.

    ``None`` is returned as is.  The copy is only faithful for
    JSON-compatible input; anything else degrades the way JSON encoding
    degrades it:

    * tuples and sets become lists;
    * objects with attributes become dicts of their own properties;
    * keys that are not ``str``/``int``/``float``/``bool``/``None`` are
      dropped, the remaining ones become strings;
    * callables and other unencodable values become ``None``;
    * ``NaN`` and infinities become ``None``.

    Circular references are not supported.
    """
    if obj is None:
        return obj
    text = json.dumps(obj, skipkeys=True, default=_encode_fallback)
    return json.loads(text, parse_constant=_non_finite_to_none)


def try_parse_json(
    text: Any,
    on_error: Callable[[Exception], object] | None = None,
    *,
    default: Any = None,
) -> Any:
    """Parse *text* as JSON, returning *default* instead of raising.

    Parameters
    ----------
    text:
        JSON document as ``str``, ``bytes`` or ``bytearray``.
    on_error:
        Optional callable invoked with the parse exception on failure,
        including ``RecursionError`` for input nested too deeply to decode.
    default:
        Value returned on failure.  Pass a sentinel to tell a failed
        parse apart from the JSON literal ``null``.
    """
    try:
        return json.loads(text)
    except (ValueError, TypeError, RecursionError) as exc:
        if on_error is not None:
            on_error(exc)
        return default
