# topmark:header:start
#
#   project      : TermFmt
#   file         : test_console.py
#   file_relpath : tests/cli/test_console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the `ClickConsole` program-output console."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

import pytest

from termfmt.cli.console import ClickConsole
from termfmt.core.formatting import current_modifiers, get_width, release_state
from termfmt.modifiers import RED

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def streams() -> Iterator[tuple[io.StringIO, io.StringIO]]:
    """Provide stdout/stderr buffers and drop their formatting state afterwards."""
    out, err = io.StringIO(), io.StringIO()
    yield out, err
    release_state(out)
    release_state(err)


def test_print_formatted_closes_region_before_newline(
    streams: tuple[io.StringIO, io.StringIO],
) -> None:
    """The newline follows the reset, and the stack is empty again."""
    out, err = streams
    console = ClickConsole(enable_color=True, width=40, out=out, err=err)

    console.print_formatted(RED, "hi")

    assert out.getvalue() == "\x1b[31mhi\x1b[0m\n"
    assert current_modifiers(out) == ()
    assert get_width(out) == 40


def test_html_console_emits_tags(streams: tuple[io.StringIO, io.StringIO]) -> None:
    """With HTML on and color off, only ``<font>`` tags are written."""
    out, err = streams
    console = ClickConsole(enable_color=False, html=True, out=out, err=err)

    console.print_formatted(RED, "hi", nl=False)

    assert out.getvalue() == '<font color="Crimson">hi</font>'


def test_error_goes_to_err_stream(streams: tuple[io.StringIO, io.StringIO]) -> None:
    """Errors are written to ``err`` and stay plain when color is disabled."""
    out, err = streams
    console = ClickConsole(enable_color=False, out=out, err=err)

    console.error("boom")
    console.print("ok")

    assert err.getvalue() == "boom\n"
    assert out.getvalue() == "ok\n"
    assert console.styled("plain", fg="red") == "plain"
