# topmark:header:start
#
#   project      : TermFmt
#   file         : __init__.py
#   file_relpath : src/termfmt/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TermFmt package.

TermFmt decorates text written to output streams (color, weight, underline,
...) with ANSI escape sequences or HTML tags. Formatting state lives in a
side channel attached to each stream, so nested regions compose and unwind
correctly, and nothing is emitted into streams that are not terminals unless
formatting is explicitly enabled.

Typical usage:
    ```python
    import io

    from termfmt import FormatGuard, set_term_formattable
    from termfmt.modifiers import BOLD, RED

    buf = io.StringIO()
    set_term_formattable(buf)
    with FormatGuard(RED, buf):
        buf.write("red ")
        with FormatGuard(BOLD, buf):
            buf.write("red and bold")
    ```
"""

from __future__ import annotations

from termfmt.core.errors import (
    ConfigError,
    ContractViolationError,
    GuardStateError,
    TermfmtError,
    UnknownModifierError,
    UnsupportedStreamError,
    WidthRangeError,
)
from termfmt.core.formatting import (
    configure_stream,
    copy_format_flags,
    current_modifiers,
    get_width,
    is_html_formattable,
    is_term_formattable,
    pop_modifier,
    push_modifier,
    release_state,
    rendered_state,
    set_html_formattable,
    set_term_formattable,
    set_width,
    transfer_state,
    write_modifier,
)
from termfmt.core.guard import FormatGuard
from termfmt.core.modifier import Modifier, combine
from termfmt.core.registry import AddressTable, StreamStateRegistry, get_registry
from termfmt.terminal import ColorMode, is_terminal
from termfmt.wrappers import FormattedWriter, StyledObjects, format_call, styled

__all__ = [
    "AddressTable",
    "ColorMode",
    "ConfigError",
    "ContractViolationError",
    "FormatGuard",
    "FormattedWriter",
    "GuardStateError",
    "Modifier",
    "StreamStateRegistry",
    "StyledObjects",
    "TermfmtError",
    "UnknownModifierError",
    "UnsupportedStreamError",
    "WidthRangeError",
    "combine",
    "configure_stream",
    "copy_format_flags",
    "current_modifiers",
    "format_call",
    "get_registry",
    "get_width",
    "is_html_formattable",
    "is_term_formattable",
    "is_terminal",
    "pop_modifier",
    "push_modifier",
    "release_state",
    "rendered_state",
    "set_html_formattable",
    "set_term_formattable",
    "set_width",
    "styled",
    "transfer_state",
    "write_modifier",
]
