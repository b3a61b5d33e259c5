"""Custom exception hierarchy for scriptkit.

Every precondition failure raised by a scriptkit helper inherits from
:class:`ScriptkitError`.  Where a built-in exception type describes the
failure just as well, the scriptkit class also inherits from it, so
callers may catch either ``InvalidFlagError`` or plain ``ValueError``.

Hierarchy
---------
ScriptkitError
├── MissingTargetError   (TypeError)
├── FlagTypeError        (TypeError)
├── InvalidFlagError     (ValueError)
├── JsonInputError       (ValueError)
├── EmptyDataError       (ValueError)
└── EnvironmentError
"""

from __future__ import annotations


class ScriptkitError(Exception):
    """Base exception for all scriptkit errors.

    The CLI error boundary renders ``str(exc)`` and, when present,
    :attr:`hint` below it.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Object helpers --------------------------------------------------------

class MissingTargetError(ScriptkitError, TypeError):
    """Raised when :func:`~scriptkit.core.lang.extend` receives ``None``."""


# --- Flags -----------------------------------------------------------------

class FlagTypeError(ScriptkitError, TypeError):
    """Raised when a value that must be a ``bool`` is not one."""


class InvalidFlagError(ScriptkitError, ValueError):
    """Raised when a value is neither ``"Y"`` nor ``"N"``."""


# --- JSON input (CLI) ------------------------------------------------------

class JsonInputError(ScriptkitError, ValueError):
    """Raised when command-line JSON input cannot be parsed."""


class EmptyDataError(ScriptkitError, ValueError):
    """Raised when parsed input is empty but data was required."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(ScriptkitError):  # noqa: A001
    """Raised when an optional runtime dependency is not available."""
