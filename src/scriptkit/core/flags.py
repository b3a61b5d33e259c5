"""Conversion between booleans and ``"Y"``/``"N"`` flags.

Flags are compared case-insensitively on input and always produced in
upper case.  The batch checks accept any iterable and short-circuit the
same way :func:`all` and :func:`any` do, so an invalid flag after the
deciding element is never inspected.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Literal

from scriptkit.exceptions import FlagTypeError, InvalidFlagError

YES: Literal["Y"] = "Y"
NO: Literal["N"] = "N"


def bool_to_yn(value: bool) -> Literal["Y", "N"]:
    """Return ``"Y"`` for ``True`` and ``"N"`` for ``False``.

    Truthy or falsy non-``bool`` values are rejected rather than coerced.
    """
    if not isinstance(value, bool):
        raise FlagTypeError(
            "The value argument must be a boolean",
            hint=f"Got {type(value).__name__}: {value!r}",
        )
    return YES if value else NO


def yn_to_bool(value: Any) -> bool:
    """Return ``True`` for ``"Y"`` and ``False`` for ``"N"``, any case."""
    flag = str(value).upper()
    if flag not in (YES, NO):
        raise InvalidFlagError(
            'The value argument must be "Y" or "N"',
            hint=f"Got {value!r}",
        )
    return flag == YES


def all_y(values: Iterable[Any]) -> bool:
    """Return ``True`` if every flag is ``"Y"``.  Empty input is ``True``."""
    return all(yn_to_bool(value) for value in values)


def some_y(values: Iterable[Any]) -> bool:
    """Return ``True`` if at least one flag is ``"Y"``."""
    return any(yn_to_bool(value) for value in values)


def all_n(values: Iterable[Any]) -> bool:
    """Return ``True`` if every flag is ``"N"``.  Empty input is ``True``."""
    return all(not yn_to_bool(value) for value in values)


def some_n(values: Iterable[Any]) -> bool:
    """Return ``True`` if at least one flag is ``"N"``."""
    return any(not yn_to_bool(value) for value in values)
