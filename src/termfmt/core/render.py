# topmark:header:start
#
#   project      : TermFmt
#   file         : render.py
#   file_relpath : src/termfmt/core/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering of modifier state into ANSI or HTML.

The two backends compose differently:

- **ANSI** codes concatenate. After every stack change the renderer emits one
  reset (only if something was active) and replays every modifier on the
  stack, bottom to top.
- **HTML** tags nest. Every active modifier owns one open ``<font>`` tag, so a
  stack change closes one tag per previously active modifier and reopens one
  per modifier on the new stack.

Known limitation:
    The HTML backend only uses the *first* HTML name of a modifier. For a
    combined modifier such as ``RED | BLUE`` the tag carries ``Crimson`` and
    the remaining names are ignored.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from html import escape
from typing import TYPE_CHECKING, Protocol

from termfmt.constants import HTML_CLOSE, HTML_OPEN_TEMPLATE
from termfmt.modifiers import RESET

if TYPE_CHECKING:
    from collections.abc import Sequence

    from termfmt.core.modifier import Modifier


class SupportsWrite(Protocol):
    """Anything that can receive text: files, `io.StringIO`, wrappers, ..."""

    def write(self, s: str, /) -> object:
        """Write ``s`` to the destination."""
        ...


@dataclass(frozen=True)
class RenderFlags:
    """Effective backend selection for one stream.

    Attributes:
        term (bool): Emit ANSI escape sequences.
        html (bool): Emit HTML tags.
    """

    term: bool = False
    html: bool = False

    @property
    def enabled(self) -> bool:
        """True if at least one backend is active."""
        return self.term or self.html


def html_open_tag(mod: Modifier) -> str:
    """Return the opening tag for ``mod`` (first HTML name only)."""
    return HTML_OPEN_TEMPLATE.format(color=escape(mod.first_html_name, quote=True))


def apply(mod: Modifier, flags: RenderFlags, writer: SupportsWrite) -> None:
    """Write the encodings of a single modifier to ``writer``.

    Args:
        mod (Modifier): The modifier to emit.
        flags (RenderFlags): Active backends; with none active this is a no-op.
        writer (SupportsWrite): Destination.
    """
    if flags.term and mod.ansi:
        writer.write(mod.ansi)
    if flags.html:
        writer.write(HTML_CLOSE if mod.is_reset else html_open_tag(mod))


def render_transition(
    previous: Sequence[Modifier],
    current: Sequence[Modifier],
    flags: RenderFlags,
    writer: SupportsWrite,
) -> None:
    """Re-render the visible state after a stack change.

    Args:
        previous (Sequence[Modifier]): Stack contents before the change, bottom first.
        current (Sequence[Modifier]): Stack contents after the change, bottom first.
        flags (RenderFlags): Active backends.
        writer (SupportsWrite): Destination.
    """
    if not flags.enabled:
        return
    if previous:
        apply(RESET, RenderFlags(term=flags.term), writer)
        for _ in previous:
            apply(RESET, RenderFlags(html=flags.html), writer)
    for mod in current:
        apply(mod, flags, writer)


def render_state(stack: Sequence[Modifier], flags: RenderFlags) -> str:
    """Return the text that re-establishes ``stack`` from a blank state."""
    buffer = io.StringIO()
    render_transition((), stack, flags, buffer)
    return buffer.getvalue()
