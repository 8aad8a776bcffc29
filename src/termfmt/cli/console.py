# topmark:header:start
#
#   project      : TermFmt
#   file         : console.py
#   file_relpath : src/termfmt/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console abstraction for user-facing program output.

This module provides a `ClickConsole` class that separates CLI output from
internal logging. Use this for messages intended for end users, while
reserving `logging` for diagnostics.

The console configures its output stream once (ANSI and HTML flags, width)
so that commands can write formatted regions to ``console.out`` with the
regular TermFmt API.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any, Protocol, TextIO

import click

from termfmt.core.formatting import set_html_formattable, set_term_formattable, set_width
from termfmt.core.guard import FormatGuard

if TYPE_CHECKING:
    from termfmt.core.modifier import Modifier


class ConsoleLike(Protocol):
    """Minimal interface for a console used by CLI commands."""

    out: TextIO

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        ...

    def print_formatted(self, mod: Modifier, text: str, *, nl: bool = True) -> None:
        """Write ``text`` to stdout with ``mod`` applied."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string (no-op if styling is disabled)."""
        ...


class ClickConsole:
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, ANSI codes are emitted into ``out``.
        html (bool): If True, HTML ``<font>`` tags are emitted into ``out``.
        width (int | None): Width override recorded on ``out``.
        out (TextIO | None): The text stream to use for standard output.
            Defaults to `sys.stdout`.
        err (TextIO | None): The text stream to use for error output.
            Defaults to `sys.stderr`.

    Attributes:
        enable_color (bool): Whether to emit ANSI color codes.
        out (TextIO): Stream for standard output.
        err (TextIO): Stream for error output.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        html: bool = False,
        width: int | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        set_term_formattable(self.out, enable_color)
        set_html_formattable(self.out, html)
        set_width(self.out, width)

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout.

        Args:
            text (str): Message text.
            nl (bool): If True, append a newline.
        """
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def print_formatted(self, mod: Modifier, text: str, *, nl: bool = True) -> None:
        """Write ``text`` to stdout inside a formatting region for ``mod``.

        The newline, if any, is written after the region is closed.
        """
        with FormatGuard(mod, self.out):
            self.out.write(text)
        if nl:
            self.out.write("\n")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr.

        Args:
            text (str): Error text.
            nl (bool): If True, append a newline.
        """
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string using click.style.

        Args:
            text (str): Text to style.
            **style_kwargs (Any): Keyword arguments supported by click.style.

        Returns:
            str: The styled text (or plain text if color is disabled).
        """
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
