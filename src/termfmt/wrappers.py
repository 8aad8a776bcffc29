# topmark:header:start
#
#   project      : TermFmt
#   file         : wrappers.py
#   file_relpath : src/termfmt/wrappers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Convenience wrappers applying a modifier around callbacks and values.

These are thin layers over `FormatGuard`:

- `format_call(mod, fn)` runs ``fn`` with ``mod`` applied;
- `styled(mod, *objects)` bundles values to be written with ``mod`` applied;
- `FormattedWriter(mod, stream)` applies ``mod`` around every write.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from termfmt.core.formatting import resolve_stream
from termfmt.core.guard import FormatGuard

if TYPE_CHECKING:
    from collections.abc import Callable

    from termfmt.core.modifier import Modifier
    from termfmt.core.registry import StateStore
    from termfmt.core.render import SupportsWrite

R = TypeVar("R")


def format_call(
    mod: Modifier,
    fn: Callable[[], R],
    stream: SupportsWrite | None = None,
    *,
    registry: StateStore | None = None,
) -> R:
    """Call ``fn`` with ``mod`` pushed onto ``stream`` and return its result.

    The modifier is popped even if ``fn`` raises.
    """
    with FormatGuard(mod, stream, registry=registry):
        return fn()


class StyledObjects:
    """Values to be written to a stream with a modifier applied.

    Args:
        mod (Modifier): Modifier applied while the values are written.
        objects (tuple[object, ...]): Values, converted with `str()`.
        sep (str): Separator written between values.
    """

    def __init__(self, mod: Modifier, objects: tuple[object, ...], sep: str = "") -> None:
        self.modifier = mod
        self.objects = objects
        self.sep = sep

    def write_to(
        self,
        stream: SupportsWrite | None = None,
        *,
        registry: StateStore | None = None,
    ) -> None:
        """Write the values to ``stream`` bracketed by the modifier."""
        target = resolve_stream(stream)
        with FormatGuard(self.modifier, target, registry=registry):
            target.write(self.sep.join(str(obj) for obj in self.objects))

    def __str__(self) -> str:
        return self.sep.join(str(obj) for obj in self.objects)

    def __repr__(self) -> str:
        return f"StyledObjects({self.modifier!r}, {self.objects!r})"


def styled(mod: Modifier, *objects: object, sep: str = "") -> StyledObjects:
    """Bundle ``objects`` with ``mod``; write them with `StyledObjects.write_to`.

    ``str()`` of the result is the plain, unformatted text.
    """
    return StyledObjects(mod, objects, sep)


class FormattedWriter:
    """Writer applying a modifier around every write to the wrapped stream.

    The wrapper is itself a `SupportsWrite`, so it can be passed anywhere a
    stream is expected (including ``print(..., file=writer)``).

    Args:
        mod (Modifier): Modifier applied to each write.
        stream (SupportsWrite | None): Wrapped stream; defaults to the current ``sys.stdout``.
        registry (StateStore | None): Registry holding the stream's record.
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

    def write(self, s: str, /) -> int:
        """Write ``s`` with the modifier applied.

        Returns:
            int: Number of characters of ``s`` written.
        """
        if not s:
            return 0
        with FormatGuard(self.modifier, self.stream, registry=self._registry):
            self.stream.write(s)
        return len(s)

    def flush(self) -> None:
        """Flush the wrapped stream if it supports flushing."""
        flush = getattr(self.stream, "flush", None)
        if flush is not None:
            flush()
