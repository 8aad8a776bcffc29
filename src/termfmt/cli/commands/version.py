# topmark:header:start
#
#   project      : TermFmt
#   file         : version.py
#   file_relpath : src/termfmt/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TermFmt `version` command.

Prints the current TermFmt version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from termfmt.constants import TERMFMT_VERSION

if TYPE_CHECKING:
    from termfmt.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of TermFmt.",
)
def version_command() -> None:
    """Show the current version of TermFmt."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    console.print(TERMFMT_VERSION)
