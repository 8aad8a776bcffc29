# topmark:header:start
#
#   project      : TermFmt
#   file         : __init__.py
#   file_relpath : src/termfmt/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for TermFmt.

Public modules:
    - termfmt.config.logging
    - termfmt.config.model
    - termfmt.config.loaders

This package has no eager re-exports: `termfmt.config.logging`
is imported by nearly every module and must stay import-cycle free.
"""

from __future__ import annotations
