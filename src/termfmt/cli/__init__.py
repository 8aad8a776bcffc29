# topmark:header:start
#
#   project      : TermFmt
#   file         : __init__.py
#   file_relpath : src/termfmt/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TermFmt CLI package.

This package groups the Click command definitions and supporting utilities
for the ``termfmt`` command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        termfmt = "termfmt.cli.main:cli"

All subcommands live in `termfmt.cli.commands`.
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
