"""Value classification and own-property primitives.

Python has no single "object" type the way dynamic scripting languages
do, so helpers that need to ask "is this object-like?" or "what are its
own properties?" go through this module instead of ad-hoc ``isinstance``
checks.  :func:`classify` maps any value onto the :class:`ValueKind`
tagged union; the ``own_*`` helpers enumerate properties defined directly
on a value, never those inherited from its class.

Own properties by kind
----------------------
* ``Mapping`` — its keys.
* Non-string ``Sequence`` — its indices ``0 .. len - 1``.
* Attribute objects — instance attributes (``vars()`` plus populated
  ``__slots__``).
* Everything else — none.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator, Mapping, MutableMapping, MutableSequence, Sequence, Set
from enum import Enum
from numbers import Number
from typing import Any


# ---------------------------------------------------------------------------
# Tagged union
# ---------------------------------------------------------------------------

class ValueKind(Enum):
    """Coarse runtime category of a value."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    CALLABLE = "callable"
    ARRAY = "array"
    OBJECT = "object"
    OTHER = "other"


def classify(value: Any) -> ValueKind:
    """Return the :class:`ValueKind` of *value*.

    Order matters: ``bool`` is checked before ``Number`` and callables
    before containers, so a callable mapping is still ``CALLABLE``.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, Number):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if callable(value):
        return ValueKind.CALLABLE
    if isinstance(value, Mapping):
        return ValueKind.OBJECT
    if isinstance(value, (Sequence, Set)):
        return ValueKind.ARRAY
    if hasattr(value, "__dict__") or _slot_names(type(value)):
        return ValueKind.OBJECT
    return ValueKind.OTHER


def is_object(value: Any) -> bool:
    """Return ``True`` when *value* can carry own properties by name."""
    return classify(value) is ValueKind.OBJECT


# ---------------------------------------------------------------------------
# Own properties
# ---------------------------------------------------------------------------

def _slot_names(cls: type) -> tuple[str, ...]:
    """Collect ``__slots__`` declared anywhere in *cls*'s MRO."""
    names: list[str] = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(name for name in slots if name not in ("__dict__", "__weakref__"))
    return tuple(names)


def own_items(value: Any) -> Iterator[tuple[Any, Any]]:
    """Yield ``(key, item)`` pairs for every own property of *value*."""
    kind = classify(value)
    if kind is ValueKind.OBJECT and isinstance(value, Mapping):
        yield from value.items()
    elif kind is ValueKind.ARRAY and isinstance(value, Sequence):
        yield from enumerate(value)
    elif kind is ValueKind.OBJECT:
        yield from getattr(value, "__dict__", {}).items()
        for name in _slot_names(type(value)):
            # Unset slots raise AttributeError; they are not own properties.
            if hasattr(value, name):
                yield name, getattr(value, name)


def own_keys(value: Any) -> list[Any]:
    """Return the own property names (or indices) of *value*."""
    return [key for key, _ in own_items(value)]


def has_own_prop(obj: Any, prop: Any) -> bool:
    """Return ``True`` iff *prop* is an own property of *obj*.

    Inherited class attributes and methods never count, so
    ``has_own_prop({}, "keys")`` is ``False``.
    """
    if isinstance(obj, Mapping):
        return isinstance(prop, Hashable) and prop in obj
    if isinstance(prop, bool):
        return False
    return prop in own_keys(obj)


def extend_single(target: Any, source: Any) -> None:
    """Copy the own properties of *source* onto *target* in place.

    Mutable mappings and sequences receive items; every other target
    receives attributes.  ``None`` and property-less sources are no-ops.
    A sequence target grows to fit indices past its end; skipped
    positions are filled with ``None``.
    """
    for key, item in own_items(source):
        if isinstance(target, MutableSequence) and isinstance(key, int) and key >= len(target):
            target.extend([None] * (key - len(target)))
            target.append(item)
        elif isinstance(target, (MutableMapping, MutableSequence)):
            target[key] = item
        else:
            setattr(target, key, item)
