# topmark:header:start
#
#   project      : TermFmt
#   file         : __init__.py
#   file_relpath : src/termfmt/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core formatting-state manager.

Public modules:
    - termfmt.core.modifier
    - termfmt.core.state
    - termfmt.core.registry
    - termfmt.core.render
    - termfmt.core.formatting
    - termfmt.core.guard
    - termfmt.core.errors
"""

from __future__ import annotations
