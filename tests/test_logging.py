"""Tests for CLI logging setup (cli/logging.py)."""

from __future__ import annotations

import logging

import pytest
from rich.logging import RichHandler

from scriptkit.cli.logging import (
    ThirdPartyPrefixFilter,
    config_console_handler,
    logging_session,
)


def _record(name: str) -> logging.LogRecord:
    return logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)


# ---------------------------------------------------------------------------
# ThirdPartyPrefixFilter
# ---------------------------------------------------------------------------

class TestThirdPartyPrefixFilter:
    def test_project_records_have_no_prefix(self) -> None:
        record = _record("scriptkit.cli.app")
        assert ThirdPartyPrefixFilter().filter(record) is True
        assert record.prefix == ""  # type: ignore[attr-defined]

    def test_third_party_records_are_tagged(self) -> None:
        record = _record("urllib3.connectionpool")
        assert ThirdPartyPrefixFilter().filter(record) is True
        assert record.prefix == "[urllib3]"  # type: ignore[attr-defined]


# ---------------------------------------------------------------------------
# config_console_handler
# ---------------------------------------------------------------------------

class TestConfigConsoleHandler:
    def test_returns_rich_handler(self) -> None:
        handler = config_console_handler()
        assert isinstance(handler, RichHandler)
        assert handler.level == logging.WARNING

    def test_level_is_applied(self) -> None:
        handler = config_console_handler(level=logging.DEBUG)
        assert handler.level == logging.DEBUG

    def test_uses_prefix_format(self) -> None:
        handler = config_console_handler()
        record = _record("urllib3.connectionpool")
        assert handler.filter(record)
        assert handler.format(record) == "[urllib3] msg"

    def test_has_prefix_filter(self) -> None:
        handler = config_console_handler()
        assert any(isinstance(f, ThirdPartyPrefixFilter) for f in handler.filters)

    def test_no_color(self) -> None:
        handler = config_console_handler(color=False)
        assert handler.console.no_color is True  # type: ignore[attr-defined]


# ---------------------------------------------------------------------------
# logging_session
# ---------------------------------------------------------------------------

class TestLoggingSession:
    def test_quiet_session_leaves_root_alone(self) -> None:
        root = logging.getLogger()
        before = list(root.handlers)
        with logging_session(verbose=False) as handler:
            assert handler is None
            assert root.handlers == before

    def test_verbose_session_attaches_and_detaches(self) -> None:
        root = logging.getLogger()
        level = root.level
        with logging_session(verbose=True) as handler:
            assert handler in root.handlers
            assert root.level == logging.DEBUG
        assert handler not in root.handlers
        assert root.level == level

    def test_detaches_on_error(self) -> None:
        root = logging.getLogger()
        with pytest.raises(RuntimeError):
            with logging_session(verbose=True) as handler:
                raise RuntimeError("boom")
        assert handler not in root.handlers

    def test_verbose_session_tags_third_party_records(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with logging_session(verbose=True, color=False):
            logging.getLogger("urllib3.connectionpool").debug("pool ready")
            logging.getLogger("scriptkit.cli.app").debug("own record")
        err = capsys.readouterr().err
        assert "[urllib3] pool ready" in err
        assert "own record" in err
        assert "[scriptkit]" not in err
