"""Core layer — pure helpers over plain Python values.

Rules
-----
* No ``print()`` calls and no logging.
* No filesystem or network I/O.
* No imports from ``cli``.
"""

from scriptkit.core.flags import all_n, all_y, bool_to_yn, some_n, some_y, yn_to_bool
from scriptkit.core.lang import (
    clone_json,
    extend,
    has_own_prop,
    is_array_like,
    is_empty_data,
    try_parse_json,
)
from scriptkit.core.values import ValueKind, classify

__all__: list[str] = [
    "ValueKind",
    "all_n",
    "all_y",
    "bool_to_yn",
    "classify",
    "clone_json",
    "extend",
    "has_own_prop",
    "is_array_like",
    "is_empty_data",
    "some_n",
    "some_y",
    "try_parse_json",
    "yn_to_bool",
]
