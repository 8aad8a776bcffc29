# topmark:header:start
#
#   project      : TermFmt
#   file         : registry.py
#   file_relpath : src/termfmt/core/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Association of output streams with their private `StreamState` records.

TermFmt never modifies the stream types it decorates. Instead, a registry maps
a stream's identity to a `StreamState` and ties the record's lifetime to the
stream's:

- `StreamStateRegistry` (production): records are keyed by ``id(stream)`` and
  paired with a `weakref.finalize` hook, so a record disappears when its
  stream is garbage collected and can never be handed to an unrelated object
  that later reuses the same address. A stream whose ``closed`` attribute is
  true is treated as destroyed and its record is dropped on the next lookup.
  Streams that do not support weak references cannot carry the hook; they must
  be bracketed with `StreamStateRegistry.attach`, which creates the record on
  entry and destroys it on exit.
- `AddressTable` (reference only): a plain ``id(stream) -> StreamState``
  table with no ownership hook. It leaks one record per short-lived stream and
  returns a stale record when an address is reused. It exists to document the
  trade-off and for tests; do not use it in production.

Relocation:
    Python objects never move, so handing a stream's logical identity to a new
    object is explicit: `transfer(source, dest)` moves the record (stack and
    flags) to ``dest`` and leaves ``source`` with default state.

Typical usage:
    ```python
    registry = get_registry()
    state = registry.get_or_create(buffer)   # created lazily
    registry.get(other_buffer)               # None: defaults apply

    with registry.attach(slotted_stream):    # no weakref support
        push_modifier(RED, slotted_stream)
        ...
    ```

Warning:
    Registries are not thread-safe. Callers must serialize access to any one
    stream.
"""

from __future__ import annotations

import weakref
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from termfmt.config.logging import get_logger
from termfmt.core.errors import UnsupportedStreamError
from termfmt.core.state import StreamState

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from termfmt.config.logging import TermfmtLogger

logger: TermfmtLogger = get_logger(__name__)


class StateStore(Protocol):
    """Interface shared by the registry strategies."""

    def get(self, stream: object) -> StreamState | None:
        """Return the live record for ``stream``, or None if it has none."""
        ...

    def get_or_create(self, stream: object) -> StreamState:
        """Return the record for ``stream``, creating it on first use."""
        ...

    def release(self, stream: object) -> bool:
        """Drop the record for ``stream``; return True if one existed."""
        ...

    def transfer(self, source: object, dest: object) -> None:
        """Move the record of ``source`` to ``dest``."""
        ...


def is_closed(stream: object) -> bool:
    """Return True if ``stream`` reports itself as closed."""
    closed = getattr(stream, "closed", False)
    return closed is True


class _StrongRef:
    """Callable mimicking `weakref.ref` while keeping ``obj`` alive."""

    __slots__ = ("_obj",)

    def __init__(self, obj: object) -> None:
        self._obj = obj

    def __call__(self) -> object:
        return self._obj


@dataclass
class _Entry:
    ref: Callable[[], object | None]
    state: StreamState
    finalizer: weakref.finalize | None = None

    def detach(self) -> None:
        if self.finalizer is not None:
            self.finalizer.detach()
            self.finalizer = None


class StreamStateRegistry:
    """Production registry binding each record to its stream's lifetime."""

    def __init__(self) -> None:
        self._entries: dict[int, _Entry] = {}

    # --- lookup ---

    def _lookup(self, stream: object) -> _Entry | None:
        key = id(stream)
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.ref() is not stream:
            # The finalizer normally runs first; this guards against a record
            # outliving its stream if collection callbacks were deferred.
            self._discard(key, reason="stale")
            return None
        if is_closed(stream):
            self._discard(key, reason="stream closed")
            return None
        return entry

    def get(self, stream: object) -> StreamState | None:
        """Return the record for ``stream`` without creating one.

        Args:
            stream (object): The output stream.

        Returns:
            StreamState | None: The live record, or None if ``stream`` has no
                record (callers then apply default state).
        """
        entry = self._lookup(stream)
        return entry.state if entry is not None else None

    def get_or_create(self, stream: object) -> StreamState:
        """Return the record for ``stream``, creating and binding it on first use.

        Args:
            stream (object): The output stream.

        Returns:
            StreamState: The same record for every call until ``stream`` is
                destroyed, closed, or released.

        Raises:
            UnsupportedStreamError: If ``stream`` cannot be weakly referenced and is
                not currently attached via `attach`.
        """
        entry = self._lookup(stream)
        if entry is not None:
            return entry.state
        return self._bind(stream, StreamState()).state

    # --- lifetime binding ---

    def _bind(self, stream: object, state: StreamState, *, strong: bool = False) -> _Entry:
        key = id(stream)
        if strong:
            entry = _Entry(ref=_StrongRef(stream), state=state)
        else:
            try:
                ref = weakref.ref(stream)
            except TypeError:
                raise UnsupportedStreamError(
                    f"{type(stream).__name__} objects do not support weak references; "
                    "bracket their use with StreamStateRegistry.attach()"
                ) from None
            finalizer = weakref.finalize(stream, self._on_collected, key)
            finalizer.atexit = False
            entry = _Entry(ref=ref, state=state, finalizer=finalizer)
        self._entries[key] = entry
        logger.trace("Bound state record to %s at 0x%x", type(stream).__name__, key)
        return entry

    def _on_collected(self, key: int) -> None:
        entry = self._entries.get(key)
        if entry is not None and entry.ref() is None:
            del self._entries[key]
            logger.trace("Released state record of collected stream 0x%x", key)

    def _discard(self, key: int, *, reason: str) -> None:
        entry = self._entries.pop(key, None)
        if entry is not None:
            entry.detach()
            logger.debug("Released state record 0x%x (%s)", key, reason)

    def release(self, stream: object) -> bool:
        """Drop the record for ``stream`` (e.g. when it is logically closed).

        Returns:
            bool: True if a live record was released.
        """
        if self._lookup(stream) is None:
            return False
        self._discard(id(stream), reason="explicit release")
        return True

    @contextmanager
    def attach(self, stream: object) -> Iterator[StreamState]:
        """Pair a record with ``stream`` for the duration of a ``with`` block.

        This is the explicit handle for streams that cannot carry a teardown
        hook (no weak-reference support), and works for any stream. A record
        created here is destroyed on exit, whether the block completes or
        raises; a record that already existed is left alone.

        Yields:
            StreamState: The stream's record.
        """
        entry = self._lookup(stream)
        if entry is not None:
            yield entry.state
            return
        try:
            entry = self._bind(stream, StreamState())
        except UnsupportedStreamError:
            entry = self._bind(stream, StreamState(), strong=True)
        try:
            yield entry.state
        finally:
            if self._entries.get(id(stream)) is entry:
                self._discard(id(stream), reason="detached")

    def transfer(self, source: object, dest: object) -> None:
        """Move the record of ``source`` to ``dest``.

        Afterwards ``dest`` carries ``source``'s flags and modifier stack, and
        ``source`` reports default state. Any record ``dest`` had before is
        released. If ``source`` has no record, ``dest`` ends up with none.

        Raises:
            UnsupportedStreamError: If ``dest`` cannot carry a teardown hook,
                ``source`` has a record to move, and ``source`` was not itself
                attached. ``source`` keeps its record.
        """
        if source is dest:
            return
        entry = self._lookup(source)
        self.release(dest)
        if entry is None:
            return
        try:
            self._bind(dest, entry.state)
        except UnsupportedStreamError:
            if not isinstance(entry.ref, _StrongRef):
                raise
            # An attached source hands its explicit handle over to ``dest``.
            self._bind(dest, entry.state, strong=True)
        if self._entries.get(id(source)) is entry:
            del self._entries[id(source)]
        entry.detach()
        logger.debug(
            "Transferred state record from %s to %s",
            type(source).__name__,
            type(dest).__name__,
        )

    def __contains__(self, stream: object) -> bool:
        return self._lookup(stream) is not None

    def __len__(self) -> int:
        return sum(1 for entry in self._entries.values() if entry.ref() is not None)


class AddressTable:
    """Reference-only registry keyed by raw ``id(stream)`` with no ownership hook.

    Records are never released unless `release` is called, so short-lived
    streams leak their records, and a new stream that reuses a dead stream's
    address silently inherits its state. Use `StreamStateRegistry` instead.
    """

    def __init__(self) -> None:
        self._states: dict[int, StreamState] = {}

    def get(self, stream: object) -> StreamState | None:
        """Return the record stored under ``id(stream)``, if any."""
        return self._states.get(id(stream))

    def get_or_create(self, stream: object) -> StreamState:
        """Return the record stored under ``id(stream)``, creating it if needed."""
        return self._states.setdefault(id(stream), StreamState())

    def release(self, stream: object) -> bool:
        """Drop the record stored under ``id(stream)``."""
        return self._states.pop(id(stream), None) is not None

    def transfer(self, source: object, dest: object) -> None:
        """Move the record stored under ``id(source)`` to ``id(dest)``."""
        if source is dest:
            return
        state = self._states.pop(id(source), None)
        self._states.pop(id(dest), None)
        if state is not None:
            self._states[id(dest)] = state

    def __len__(self) -> int:
        return len(self._states)


_default_registry = StreamStateRegistry()


def get_registry() -> StreamStateRegistry:
    """Return the process-wide registry used when no registry is passed explicitly."""
    return _default_registry
