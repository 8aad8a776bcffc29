# topmark:header:start
#
#   project      : TermFmt
#   file         : __init__.py
#   file_relpath : src/termfmt/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the ``termfmt`` CLI."""

from __future__ import annotations
