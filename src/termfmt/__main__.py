# topmark:header:start
#
#   project      : TermFmt
#   file         : __main__.py
#   file_relpath : src/termfmt/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running TermFmt via ``python -m termfmt``.

Equivalent to running the ``termfmt`` console script.

Examples:
    Run the feature walkthrough::

        python -m termfmt demo
"""

from __future__ import annotations

from termfmt.cli.main import cli

if __name__ == "__main__":
    cli()
