"""Logging setup for the scriptkit command line.

The core helpers never log; only the CLI layer emits records, at DEBUG,
to trace command dispatch.  Passing ``--verbose`` attaches a Rich
handler on stderr to the root logger.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from scriptkit.cli.console import get_rich_console
from scriptkit.exceptions import EnvironmentError

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "scriptkit"


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix.

    Records from loggers outside the project get ``record.prefix`` set to
    a bracketed token such as ``"[urllib3]"``; project records get an
    empty prefix.  Nothing is filtered out.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            # e.g. "urllib3.connectionpool" -> "[urllib3]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def _load_rich_handler_class() -> type[Any]:
    """Return ``rich.logging.RichHandler`` or raise ``EnvironmentError``."""
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
            hint="--verbose needs rich for log output.",
        ) from exc
    return RichHandler


def config_console_handler(level: int = logging.WARNING, color: bool = True) -> logging.Handler:
    """Build a Rich handler writing to stderr.

    Records are rendered as ``"%(prefix)s %(message)s"``; the prefix comes
    from :class:`ThirdPartyPrefixFilter`, so third-party records are
    tagged with their top-level package name.

    Raises
    ------
    EnvironmentError
        If Rich is not installed.
    """
    handler_class = _load_rich_handler_class()

    handler = handler_class(
        level=level,
        console=get_rich_console(stderr=True, color=color),
        rich_tracebacks=True,
        show_time=False,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter(fmt="%(prefix)s %(message)s"))
    handler.addFilter(ThirdPartyPrefixFilter())
    return handler


@contextmanager
def logging_session(*, verbose: bool, color: bool = True) -> Iterator[logging.Handler | None]:
    """Attach the console handler to the root logger for one CLI run.

    Without *verbose* logging is left untouched and ``None`` is yielded.
    The handler is detached and the root level restored on exit, so
    repeated in-process runs (tests) do not stack handlers.
    """
    if not verbose:
        yield None
        return

    handler = config_console_handler(level=logging.DEBUG, color=color)
    root = logging.getLogger()
    previous_level = root.level
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)
    try:
        yield handler
    finally:
        root.removeHandler(handler)
        root.setLevel(previous_level)
