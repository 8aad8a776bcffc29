# topmark:header:start
#
#   project      : TermFmt
#   file         : modifiers.py
#   file_relpath : src/termfmt/modifiers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Catalogue of named modifiers.

Every constant is a prebuilt `Modifier`. Foreground colors carry an HTML color
name so they render in both backends; attributes and background colors carry
an empty HTML name and open a tag with an empty color. The empty name still
counts in combinations: ``BOLD | RED`` opens ``<font color="">``.

Names are looked up case-insensitively with `by_name()`, and ``+``-joined
expressions such as ``"bright_red+bold"`` are parsed with `parse_modifiers()`.
"""

from __future__ import annotations

from functools import reduce
from types import MappingProxyType
from typing import TYPE_CHECKING

from termfmt.constants import ANSI_RESET, ESC
from termfmt.core.errors import UnknownModifierError
from termfmt.core.modifier import Modifier, combine

if TYPE_CHECKING:
    from collections.abc import Mapping


def _sgr(code: int, html: str, name: str) -> Modifier:
    return Modifier(ansi=f"{ESC}[{code}m", html=(html,), name=name)


RESET = Modifier(ansi=ANSI_RESET, is_reset=True, name="reset")
NONE = Modifier(html=("",), name="none")

BOLD = _sgr(1, "", "bold")
ITALIC = _sgr(3, "", "italic")
UNDERLINE = _sgr(4, "", "underline")
BLINK = _sgr(5, "", "blink")
CONCEALED = _sgr(8, "", "concealed")
CROSSED = _sgr(9, "", "crossed")

GREY = _sgr(30, "DimGray", "grey")
RED = _sgr(31, "Crimson", "red")
GREEN = _sgr(32, "ForestGreen", "green")
YELLOW = _sgr(33, "DarkKhaki", "yellow")
BLUE = _sgr(34, "RoyalBlue", "blue")
MAGENTA = _sgr(35, "MediumVioletRed", "magenta")
CYAN = _sgr(36, "DarkTurquoise", "cyan")
WHITE = _sgr(37, "", "white")

BRIGHT_GREY = _sgr(90, "LightSlateGray", "bright_grey")
BRIGHT_RED = _sgr(91, "Salmon", "bright_red")
BRIGHT_GREEN = _sgr(92, "MediumSeaGreen", "bright_green")
BRIGHT_YELLOW = _sgr(93, "Khaki", "bright_yellow")
BRIGHT_BLUE = _sgr(94, "CornflowerBlue", "bright_blue")
BRIGHT_MAGENTA = _sgr(95, "DeepPink", "bright_magenta")
BRIGHT_CYAN = _sgr(96, "MediumTurquoise", "bright_cyan")
BRIGHT_WHITE = _sgr(97, "", "bright_white")

BG_GREY = _sgr(40, "", "bg_grey")
BG_RED = _sgr(41, "", "bg_red")
BG_GREEN = _sgr(42, "", "bg_green")
BG_YELLOW = _sgr(43, "", "bg_yellow")
BG_BLUE = _sgr(44, "", "bg_blue")
BG_MAGENTA = _sgr(45, "", "bg_magenta")
BG_CYAN = _sgr(46, "", "bg_cyan")
BG_WHITE = _sgr(47, "", "bg_white")

BG_BRIGHT_GREY = _sgr(100, "", "bg_bright_grey")
BG_BRIGHT_RED = _sgr(101, "", "bg_bright_red")
BG_BRIGHT_GREEN = _sgr(102, "", "bg_bright_green")
BG_BRIGHT_YELLOW = _sgr(103, "", "bg_bright_yellow")
BG_BRIGHT_BLUE = _sgr(104, "", "bg_bright_blue")
BG_BRIGHT_MAGENTA = _sgr(105, "", "bg_bright_magenta")
BG_BRIGHT_CYAN = _sgr(106, "", "bg_bright_cyan")
BG_BRIGHT_WHITE = _sgr(107, "", "bg_bright_white")

CATALOGUE: Mapping[str, Modifier] = MappingProxyType(
    {
        mod.name: mod
        for mod in (
            RESET,
            NONE,
            BOLD,
            ITALIC,
            UNDERLINE,
            BLINK,
            CONCEALED,
            CROSSED,
            GREY,
            RED,
            GREEN,
            YELLOW,
            BLUE,
            MAGENTA,
            CYAN,
            WHITE,
            BRIGHT_GREY,
            BRIGHT_RED,
            BRIGHT_GREEN,
            BRIGHT_YELLOW,
            BRIGHT_BLUE,
            BRIGHT_MAGENTA,
            BRIGHT_CYAN,
            BRIGHT_WHITE,
            BG_GREY,
            BG_RED,
            BG_GREEN,
            BG_YELLOW,
            BG_BLUE,
            BG_MAGENTA,
            BG_CYAN,
            BG_WHITE,
            BG_BRIGHT_GREY,
            BG_BRIGHT_RED,
            BG_BRIGHT_GREEN,
            BG_BRIGHT_YELLOW,
            BG_BRIGHT_BLUE,
            BG_BRIGHT_MAGENTA,
            BG_BRIGHT_CYAN,
            BG_BRIGHT_WHITE,
        )
    }
)


def _normalize(name: str) -> str:
    return name.strip().lower().replace("-", "_").replace(" ", "_")


def by_name(name: str) -> Modifier:
    """Return the catalogue modifier called ``name``.

    Lookup ignores case and treats ``-`` and spaces like ``_``, so
    ``"Bright-Red"`` finds `BRIGHT_RED`.

    Raises:
        UnknownModifierError: If no such modifier exists.
    """
    key = _normalize(name)
    try:
        return CATALOGUE[key]
    except KeyError:
        raise UnknownModifierError(f"Unknown modifier: {name!r}") from None


def parse_modifiers(expression: str) -> Modifier:
    """Combine the ``+``-separated modifier names in ``expression``.

    ``"red+bold"`` is equivalent to ``RED | BOLD``.

    Raises:
        UnknownModifierError: If the expression is empty or names an unknown modifier.
    """
    names = [part for part in expression.split("+") if part.strip()]
    if not names:
        raise UnknownModifierError(f"Empty modifier expression: {expression!r}")
    return reduce(combine, (by_name(part) for part in names))
