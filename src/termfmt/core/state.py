# topmark:header:start
#
#   project      : TermFmt
#   file         : state.py
#   file_relpath : src/termfmt/core/state.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-stream formatting state.

A `StreamState` is the private record TermFmt keeps for one output stream:
its format flags, an optional width override, and the `ModifierStack` of
currently active modifiers. Records are owned by the registry
(`termfmt.core.registry`) and never by callers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from termfmt.constants import MAX_WIDTH
from termfmt.core.errors import ContractViolationError, WidthRangeError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from termfmt.core.modifier import Modifier


class ModifierStack:
    """Ordered stack of active modifiers; insertion order is nesting order.

    The rendered state of a stream is always derivable from the stack alone:
    reset, then every modifier from bottom to top.
    """

    __slots__ = ("_mods",)

    def __init__(self) -> None:
        self._mods: list[Modifier] = []

    def push(self, mod: Modifier) -> None:
        """Append ``mod`` on top of the stack."""
        self._mods.append(mod)

    def pop(self) -> Modifier:
        """Remove and return the top modifier.

        Raises:
            ContractViolationError: If the stack is empty.
        """
        if not self._mods:
            raise ContractViolationError(
                "pop_modifier() called without a matching prior push_modifier()"
            )
        return self._mods.pop()

    def snapshot(self) -> tuple[Modifier, ...]:
        """Return the stack contents, bottom first."""
        return tuple(self._mods)

    def __len__(self) -> int:
        return len(self._mods)

    def __iter__(self) -> Iterator[Modifier]:
        return iter(tuple(self._mods))

    def __repr__(self) -> str:
        return f"ModifierStack({list(self._mods)!r})"


def check_width(width: int | None) -> int | None:
    """Validate a width override.

    Raises:
        WidthRangeError: If ``width`` is not None and outside ``1..MAX_WIDTH``.
    """
    if width is None:
        return None
    if isinstance(width, bool) or not isinstance(width, int):
        raise WidthRangeError(f"Width must be an int, got {type(width).__name__}")
    if not 1 <= width <= MAX_WIDTH:
        raise WidthRangeError(f"Width must be between 1 and {MAX_WIDTH}, got {width}")
    return width


@dataclass
class StreamState:
    """Formatting state attached to one stream.

    Attributes:
        term_formattable (bool | None): Explicit ANSI flag; None means "ask the
            terminal detector".
        html_formattable (bool): Whether HTML tags are emitted.
        width (int | None): Width override in ``1..MAX_WIDTH``.
        stack (ModifierStack): Active modifiers.
    """

    term_formattable: bool | None = None
    html_formattable: bool = False
    width: int | None = None
    stack: ModifierStack = field(default_factory=ModifierStack)

