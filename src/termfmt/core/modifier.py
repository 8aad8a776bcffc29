# topmark:header:start
#
#   project      : TermFmt
#   file         : modifier.py
#   file_relpath : src/termfmt/core/modifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable style modifiers.

A `Modifier` carries the two encodings of one or more combinable style
attributes:

- ``ansi``: the verbatim ANSI escape sequence(s), e.g. ``"\\033[31m"``;
- ``html``: an ordered tuple of HTML color names, e.g. ``("Crimson",)``.

Modifiers never write anything themselves. The renderer
(`termfmt.core.render`) interprets their encodings for whichever backend is
active on a stream.

Example:
    ```python
    from termfmt.modifiers import BOLD, RED

    warning = RED | BOLD
    warning.ansi   # '\\x1b[31m\\x1b[1m'
    warning.html   # ('Crimson', '')

    style = BOLD
    style |= RED   # rebinds ``style`` to BOLD | RED
    ```

Modifiers are frozen, so ``|=`` never mutates the left operand; it builds a
new modifier through ``__or__`` and rebinds the name.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Modifier:
    """One or more style attributes with their ANSI and HTML encodings.

    Attributes:
        ansi (str): ANSI escape payload, emitted verbatim.
        html (tuple[str, ...]): HTML color names in precedence order. Only the
            first one is rendered by the HTML backend.
        is_reset (bool): True only for the sentinel that clears all formatting.
        name (str): Display label; not part of equality.
    """

    ansi: str = ""
    html: tuple[str, ...] = ()
    is_reset: bool = False
    name: str = field(default="", compare=False)

    def __or__(self, other: Modifier) -> Modifier:
        if not isinstance(other, Modifier):
            return NotImplemented
        return combine(self, other)

    @property
    def first_html_name(self) -> str:
        """The HTML color name used when this modifier opens a tag ("" if none)."""
        return self.html[0] if self.html else ""

    def __repr__(self) -> str:
        label = self.name or repr(self.ansi)
        return f"Modifier({label})"


def combine(lhs: Modifier, rhs: Modifier) -> Modifier:
    """Combine two modifiers into a new one.

    ANSI payloads and HTML name lists are concatenated in order, so every
    attribute of both operands stays applied. The result is never a reset
    modifier, even when an operand is.

    Args:
        lhs (Modifier): Modifier applied first.
        rhs (Modifier): Modifier applied second (wins on conflicting ANSI attributes).

    Returns:
        Modifier: The combined modifier.
    """
    if lhs.name and rhs.name:
        name = f"{lhs.name}|{rhs.name}"
    else:
        name = lhs.name or rhs.name
    return Modifier(
        ansi=lhs.ansi + rhs.ansi,
        html=lhs.html + rhs.html,
        name=name,
    )
