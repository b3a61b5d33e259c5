"""Regression tests for the optional Rich dependency.

These tests verify that bootstrap commands and plain command output keep
working when Rich is missing, and that only ``--verbose`` (which needs a
Rich log handler) fails, cleanly, with ``EnvironmentError``.
"""

from __future__ import annotations

import json
import sys

import pytest

from scriptkit.cli import exit_codes
from scriptkit.cli.app import main
from scriptkit.cli.console import console, escape_markup, get_rich_console
from scriptkit.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_get_rich_console_raises_when_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(EnvironmentError, match="rich is not installed"):
        get_rich_console()


def test_flag_output_falls_back_to_print(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    assert main(["flag", "Y", "N"]) == exit_codes.SUCCESS
    assert capsys.readouterr().out.split() == ["true", "false"]


def test_json_output_falls_back_to_print(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    assert main(["json", '{"a": 1}']) == exit_codes.SUCCESS
    assert json.loads(capsys.readouterr().out) == {"a": 1}


def test_console_falls_back_to_stderr(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    console.print("plain message")
    captured = capsys.readouterr()
    assert "plain message" in captured.err
    assert captured.out == ""


def test_verbose_errors_cleanly_when_rich_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(EnvironmentError, match="rich is not installed"):
        main(["--verbose", "flag", "Y"])


def test_escape_markup_passes_text_through_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    assert escape_markup("[/bold]") == "[/bold]"


def test_escape_markup_escapes_tags() -> None:
    assert escape_markup("[red]x") == "\\[red]x"
