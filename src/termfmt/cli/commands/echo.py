# topmark:header:start
#
#   project      : TermFmt
#   file         : echo.py
#   file_relpath : src/termfmt/cli/commands/echo.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TermFmt `echo` command.

Prints its arguments inside a formatting region built from one or more
catalogue modifiers, e.g. ``termfmt echo -m red -m bold Alert!``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from termfmt.cli.errors import TermfmtUsageError
from termfmt.core.errors import UnknownModifierError
from termfmt.modifiers import NONE, parse_modifiers

if TYPE_CHECKING:
    from termfmt.cli.console import ConsoleLike


@click.command(
    name="echo",
    help="Print TEXT with the given modifiers applied.",
)
@click.option(
    "-m",
    "--modifier",
    "modifiers",
    multiple=True,
    metavar="NAME[+NAME...]",
    help="Modifier to apply (see 'termfmt modifiers'). Repeatable.",
)
@click.option(
    "-n",
    "--no-newline",
    "no_newline",
    is_flag=True,
    help="Do not print a trailing newline.",
)
@click.argument("text", nargs=-1)
def echo_command(
    *,
    modifiers: tuple[str, ...],
    no_newline: bool,
    text: tuple[str, ...],
) -> None:
    """Print TEXT with the given modifiers applied.

    Args:
        modifiers (tuple[str, ...]): Modifier names or ``+``-joined expressions.
        no_newline (bool): Suppress the trailing newline.
        text (tuple[str, ...]): Words to print, joined by single spaces.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    try:
        mod = parse_modifiers("+".join(modifiers)) if modifiers else NONE
    except UnknownModifierError as exc:
        raise TermfmtUsageError(str(exc)) from exc
    if mod.is_reset:
        raise TermfmtUsageError("'reset' clears formatting and cannot be applied to text")

    console.print_formatted(mod, " ".join(text), nl=not no_newline)
