# topmark:header:start
#
#   project      : TermFmt
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the TermFmt test suite.

Notes:
    Tests that create stream state should use the `registry` fixture (a fresh
    `StreamStateRegistry`) and pass it explicitly, so they never depend on
    records left in the process-wide registry by other tests. Hypothesis tests
    cannot use function-scoped fixtures and build their own registry instead.
"""

from __future__ import annotations

import io

import pytest

from termfmt.constants import ENV_COLOR, ENV_LOG_LEVEL
from termfmt.core.formatting import set_html_formattable, set_term_formattable
from termfmt.core.registry import StreamStateRegistry


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure color and log-level environment variables do not leak into tests.

    Developers commonly export ``FORCE_COLOR`` or ``NO_COLOR``; either would
    change what the terminal-detection fallbacks report.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    for name in (ENV_LOG_LEVEL, ENV_COLOR, "FORCE_COLOR", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def registry() -> StreamStateRegistry:
    """Return a fresh, empty registry."""
    return StreamStateRegistry()


@pytest.fixture
def term_buffer(registry: StreamStateRegistry) -> io.StringIO:
    """Return an in-memory stream forced to receive ANSI codes."""
    buf = io.StringIO()
    set_term_formattable(buf, registry=registry)
    return buf


@pytest.fixture
def html_buffer(registry: StreamStateRegistry) -> io.StringIO:
    """Return an in-memory stream receiving HTML tags only."""
    buf = io.StringIO()
    set_term_formattable(buf, False, registry=registry)
    set_html_formattable(buf, registry=registry)
    return buf
