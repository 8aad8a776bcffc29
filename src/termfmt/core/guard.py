# topmark:header:start
#
#   project      : TermFmt
#   file         : guard.py
#   file_relpath : src/termfmt/core/guard.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scope guard bounding a formatting region.

A `FormatGuard` pushes a modifier when it is created and pops it exactly once
when released. Used as a context manager, the pop happens on every exit path:

```python
with FormatGuard(UNDERLINE, out):
    out.write("underlined ")
    with FormatGuard(ITALIC, out):
        out.write("and italic")
    out.write(" underlined again")
```

Ownership of the push can be handed to another guard once with `transfer`;
the original guard then becomes inert.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from termfmt.config.logging import get_logger
from termfmt.core.errors import ContractViolationError, GuardStateError
from termfmt.core.formatting import current_modifiers, pop_modifier, push_modifier, resolve_stream

if TYPE_CHECKING:
    from types import TracebackType

    from termfmt.config.logging import TermfmtLogger
    from termfmt.core.modifier import Modifier
    from termfmt.core.registry import StateStore
    from termfmt.core.render import SupportsWrite

logger: TermfmtLogger = get_logger(__name__)


class FormatGuard:
    """Push ``mod`` onto ``stream`` now; pop it on `release` or scope exit.

    Args:
        mod (Modifier): Modifier applied for the guard's lifetime.
        stream (SupportsWrite | None): Target stream; defaults to the current
            ``sys.stdout``.
        registry (StateStore | None): Registry holding the stream's record.

    Attributes:
        modifier (Modifier): The pushed modifier.
        stream (SupportsWrite): The stream the modifier was pushed to.
    """

    def __init__(
        self,
        mod: Modifier,
        stream: SupportsWrite | None = None,
        *,
        registry: StateStore | None = None,
    ) -> None:
        self.modifier = mod
        self.stream = resolve_stream(stream)
        self._registry = registry
        push_modifier(mod, self.stream, registry=registry)
        self._depth = len(current_modifiers(self.stream, registry=registry))
        self._active = True

    @classmethod
    def _adopt(cls, other: FormatGuard) -> FormatGuard:
        guard = cls.__new__(cls)
        guard.modifier = other.modifier
        guard.stream = other.stream
        guard._registry = other._registry
        guard._depth = other._depth
        guard._active = True
        return guard

    @property
    def active(self) -> bool:
        """True while this guard still owns its push."""
        return self._active

    def release(self) -> None:
        """Pop the guarded modifier. Releasing an inert guard does nothing.

        Raises:
            ContractViolationError: If a guard pushed later on the same stream is
                still active (guards must be released in LIFO order).
        """
        if not self._active:
            logger.debug("Ignoring release of inert guard for %r", self.modifier)
            return
        depth = len(current_modifiers(self.stream, registry=self._registry))
        if depth != self._depth:
            raise ContractViolationError(
                f"FormatGuard for {self.modifier!r} released out of order "
                f"(stack depth {depth}, expected {self._depth})"
            )
        self._active = False
        pop_modifier(self.stream, registry=self._registry)

    def transfer(self) -> FormatGuard:
        """Move ownership of the push to a new guard.

        Returns:
            FormatGuard: The new owner. This guard becomes inert.

        Raises:
            GuardStateError: If this guard no longer owns a push.
        """
        if not self._active:
            raise GuardStateError(f"FormatGuard for {self.modifier!r} no longer owns its push")
        self._active = False
        return FormatGuard._adopt(self)

    def __enter__(self) -> FormatGuard:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()

    def __repr__(self) -> str:
        state = "active" if self._active else "inert"
        return f"FormatGuard({self.modifier!r}, {state})"
