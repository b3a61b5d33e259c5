"""scriptkit — small helpers for everyday scripting.

Value inspection (array-like and "empty" checks), shallow merging,
JSON cloning and safe parsing, and ``Y``/``N`` flag conversion.
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
from scriptkit.exceptions import (
    FlagTypeError,
    InvalidFlagError,
    MissingTargetError,
    ScriptkitError,
)
from scriptkit.version import __version__

__all__: list[str] = [
    "FlagTypeError",
    "InvalidFlagError",
    "MissingTargetError",
    "ScriptkitError",
    "ValueKind",
    "__version__",
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
