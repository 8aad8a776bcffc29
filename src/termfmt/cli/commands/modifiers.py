# topmark:header:start
#
#   project      : TermFmt
#   file         : modifiers.py
#   file_relpath : src/termfmt/cli/commands/modifiers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TermFmt `modifiers` command.

Lists the modifier catalogue, rendering each name in its own style.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from termfmt.modifiers import CATALOGUE

if TYPE_CHECKING:
    from termfmt.cli.console import ConsoleLike


@click.command(
    name="modifiers",
    help="List the available modifiers.",
)
@click.option(
    "--names-only",
    "names_only",
    is_flag=True,
    help="Print one plain name per line.",
)
def modifiers_command(*, names_only: bool) -> None:
    """List the available modifiers with their ANSI and HTML encodings.

    Args:
        names_only (bool): Print plain names only.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    for name, mod in CATALOGUE.items():
        if names_only:
            console.print(name)
            continue
        label = f"{name:<18}"
        if mod.is_reset or not mod.ansi:
            console.print(label, nl=False)
        else:
            console.print_formatted(mod, label, nl=False)
        console.print(f" {mod.ansi!r:<12} {mod.first_html_name}".rstrip())
