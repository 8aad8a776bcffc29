# topmark:header:start
#
#   project      : TermFmt
#   file         : demo.py
#   file_relpath : src/termfmt/cli/commands/demo.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TermFmt `demo` command.

Walks through the library's features on stdout. Each section prints lines
that describe how they should look, so the output doubles as a visual check
of a terminal's support for the modifiers.
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

import click

from termfmt.core.formatting import (
    copy_format_flags,
    pop_modifier,
    push_modifier,
    transfer_state,
    write_modifier,
)
from termfmt.core.guard import FormatGuard
from termfmt.modifiers import BG_BLUE, BOLD, CYAN, GREEN, ITALIC, RED, RESET, UNDERLINE
from termfmt.wrappers import FormattedWriter, format_call, styled

if TYPE_CHECKING:
    from termfmt.cli.console import ConsoleLike

SECTION_WIDTH = 60
SECTION_LEFT = 10

SECTIONS = ("raw", "guards", "transfer", "callbacks", "writer")


def _header(console: ConsoleLike, title: str) -> None:
    console.print()
    console.print("=" * SECTION_WIDTH)
    console.print(("=" * SECTION_LEFT + f" {title} ").ljust(SECTION_WIDTH, "="))
    console.print("=" * SECTION_WIDTH)


def demo_raw(console: ConsoleLike) -> None:
    """Raw insertion: modifiers written without the stack."""
    _header(console, "Raw")
    out = console.out
    write_modifier(RED, out)
    out.write("This should be red.\n")
    write_modifier(BG_BLUE, out)
    out.write("This should be red on blue background.\n")
    # One reset per raw insertion keeps HTML tags balanced.
    write_modifier(RESET, out)
    write_modifier(RESET, out)


def demo_guards(console: ConsoleLike) -> None:
    """Nested scope guards."""
    _header(console, "FormatGuard")
    out = console.out
    with FormatGuard(UNDERLINE, out):
        out.write("This entire section should be underlined.\n")
        with FormatGuard(ITALIC, out):
            out.write("This line should also be italic.\n")
            with FormatGuard(CYAN | BOLD, out):
                out.write("This line should also be bold and cyan.\n")
        out.write("This should be default underlined again.\n")


def demo_transfer(console: ConsoleLike) -> None:
    """Moving a stream's formatting state to another stream."""
    _header(console, "Stack transfer")
    first = io.StringIO()
    copy_format_flags(console.out, first)
    push_modifier(RED, first)
    first.write("This should be red.\n")

    second = io.StringIO()
    transfer_state(first, second)
    second.write("This should still be red.\n")
    pop_modifier(second)
    second.write("This should be reset.\n")

    console.out.write(first.getvalue())
    console.out.write(second.getvalue())


def demo_callbacks(console: ConsoleLike) -> None:
    """Nested callbacks with `format_call`."""
    _header(console, "Format with callback")
    out = console.out

    def innermost() -> None:
        out.write(" and now also italic.\n")

    def inner() -> None:
        out.write("underlined")
        format_call(ITALIC, innermost, out)

    def outer() -> None:
        out.write("This should be red and also ")
        format_call(UNDERLINE, inner, out)

    format_call(RED, outer, out)


def demo_writer(console: ConsoleLike) -> None:
    """Styled values and a formatting writer."""
    _header(console, "Styled values")
    out = console.out
    styled(GREEN, "This", "should", "be", "green.", sep=" ").write_to(out)
    out.write("\n")
    writer = FormattedWriter(BOLD, out)
    writer.write("This should be bold.")
    out.write("\n")


_RUNNERS = {
    "raw": demo_raw,
    "guards": demo_guards,
    "transfer": demo_transfer,
    "callbacks": demo_callbacks,
    "writer": demo_writer,
}


@click.command(
    name="demo",
    help="Print a walkthrough of the formatting features.",
)
@click.option(
    "-s",
    "--section",
    "sections",
    type=click.Choice(SECTIONS),
    multiple=True,
    help="Only run the given section(s). Repeatable.",
)
def demo_command(*, sections: tuple[str, ...]) -> None:
    """Print a walkthrough of the formatting features.

    Args:
        sections (tuple[str, ...]): Sections to run; all when empty.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    for name in sections or SECTIONS:
        _RUNNERS[name](console)
    console.out.flush()
