"""Shared pytest fixtures and configuration for the scriptkit test suite.

Guidelines
----------
* No filesystem or network access in any test.
* Core tests must be pure — no side effects beyond the objects they build.
* CLI tests call ``main(argv)`` directly and read output via ``capsys``.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from scriptkit.cli.console import console, output


@pytest.fixture(autouse=True)
def _reset_console_color() -> Iterator[None]:
    """``--no-color`` flips module-level proxies; restore them per test."""
    yield
    console.color = True
    output.color = True
