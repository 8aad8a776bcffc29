# topmark:header:start
#
#   project      : TermFmt
#   file         : formatting.py
#   file_relpath : src/termfmt/core/formatting.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stream-scoped formatting operations.

This module is the public surface of the formatting-state manager:

- `push_modifier` / `pop_modifier`: nest formatting regions on a stream;
- `write_modifier`: insert one modifier's encoding without touching the stack;
- flag accessors (`set_term_formattable`, `is_html_formattable`, ...),
  width accessors, `copy_format_flags`;
- lifetime helpers (`transfer_state`, `release_state`).

Every operation takes the target stream explicitly. When ``stream`` is
omitted, ``sys.stdout`` is looked up at call time, so redirections made with
`contextlib.redirect_stdout` are honored. Every operation also accepts an
optional ``registry`` (default: `get_registry()`).

Queries on a stream that has no record never create one; they report default
state (no explicit flags, empty stack, no width override).
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from termfmt.core.errors import ContractViolationError
from termfmt.core.registry import get_registry
from termfmt.core.render import RenderFlags, apply, render_state, render_transition
from termfmt.core.state import StreamState, check_width
from termfmt.terminal import is_terminal, resolve_color_mode, terminal_width

if TYPE_CHECKING:
    from termfmt.config.model import Config
    from termfmt.core.modifier import Modifier
    from termfmt.core.registry import StateStore
    from termfmt.core.render import SupportsWrite


def resolve_stream(stream: SupportsWrite | None) -> SupportsWrite:
    """Return ``stream``, or the current ``sys.stdout`` if it is None."""
    return sys.stdout if stream is None else stream


def _store(registry: StateStore | None) -> StateStore:
    return get_registry() if registry is None else registry


def _view(stream: object, registry: StateStore | None) -> StreamState:
    state = _store(registry).get(stream)
    return state if state is not None else StreamState()


def _flags(stream: object, state: StreamState) -> RenderFlags:
    term = state.term_formattable
    if term is None:
        term = is_terminal(stream)
    return RenderFlags(term=term, html=state.html_formattable)


# --- modifier stack ---


def push_modifier(
    mod: Modifier,
    stream: SupportsWrite | None = None,
    *,
    registry: StateStore | None = None,
) -> None:
    """Push ``mod`` onto the stream's modifier stack and re-render.

    The stack only changes once rendering succeeded: if the stream's
    ``write`` raises, the error propagates and the stack is left as it was.

    Args:
        mod (Modifier): Modifier to activate.
        stream (SupportsWrite | None): Target stream; defaults to ``sys.stdout``.
        registry (StateStore | None): Registry holding the stream's record.
    """
    target = resolve_stream(stream)
    state = _store(registry).get_or_create(target)
    previous = state.stack.snapshot()
    render_transition(previous, (*previous, mod), _flags(target, state), target)
    state.stack.push(mod)


def pop_modifier(
    stream: SupportsWrite | None = None,
    *,
    registry: StateStore | None = None,
) -> Modifier:
    """Pop the most recently pushed modifier and re-render the remaining stack.

    Args:
        stream (SupportsWrite | None): Target stream; defaults to ``sys.stdout``.
        registry (StateStore | None): Registry holding the stream's record.

    Returns:
        Modifier: The modifier that was removed.

    Raises:
        ContractViolationError: If the stream has no pushed modifier.
    """
    target = resolve_stream(stream)
    state = _store(registry).get(target)
    if state is None:
        raise ContractViolationError(
            "pop_modifier() called without a matching prior push_modifier()"
        )
    previous = state.stack.snapshot()
    popped = state.stack.pop()
    render_transition(previous, state.stack.snapshot(), _flags(target, state), target)
    return popped


def current_modifiers(
    stream: SupportsWrite | None = None,
    *,
    registry: StateStore | None = None,
) -> tuple[Modifier, ...]:
    """Return the active modifiers of ``stream``, bottom first."""
    return _view(resolve_stream(stream), registry).stack.snapshot()


def rendered_state(
    stream: SupportsWrite | None = None,
    *,
    registry: StateStore | None = None,
) -> str:
    """Return the text that re-establishes the stream's current formatting.

    This is the replay of the stack under the stream's effective flags and is
    what the stream shows after its most recent push or pop.
    """
    target = resolve_stream(stream)
    state = _view(target, registry)
    return render_state(state.stack.snapshot(), _flags(target, state))


def write_modifier(
    mod: Modifier,
    stream: SupportsWrite | None = None,
    *,
    registry: StateStore | None = None,
) -> None:
    """Write ``mod``'s encoding to the stream without recording it on the stack.

    This is raw insertion: nothing will undo it on a later pop. Prefer
    `push_modifier` / `FormatGuard` for regions.
    """
    target = resolve_stream(stream)
    apply(mod, _flags(target, _view(target, registry)), target)


# --- flags ---


def set_term_formattable(
    stream: object,
    value: bool | None = True,
    *,
    registry: StateStore | None = None,
) -> None:
    """Force ANSI output on (``True``) or off (``False``) for ``stream``.

    ``None`` removes the override so the terminal detector decides again.
    """
    _store(registry).get_or_create(stream).term_formattable = value


def is_term_formattable(stream: object, *, registry: StateStore | None = None) -> bool:
    """Return True if ANSI codes are emitted into ``stream``.

    The explicit flag wins; without one, `termfmt.terminal.is_terminal` decides.
    """
    return _flags(stream, _view(stream, registry)).term


def set_html_formattable(
    stream: object,
    value: bool = True,
    *,
    registry: StateStore | None = None,
) -> None:
    """Enable or disable HTML tag output for ``stream``."""
    _store(registry).get_or_create(stream).html_formattable = value


def is_html_formattable(stream: object, *, registry: StateStore | None = None) -> bool:
    """Return True if HTML tags are emitted into ``stream``."""
    return _view(stream, registry).html_formattable


def set_width(
    stream: object,
    width: int | None,
    *,
    registry: StateStore | None = None,
) -> None:
    """Set (or clear, with None) the width override of ``stream``.

    Raises:
        WidthRangeError: If ``width`` is outside ``1..MAX_WIDTH``.
    """
    _store(registry).get_or_create(stream).width = check_width(width)


def get_width(stream: object, *, registry: StateStore | None = None) -> int | None:
    """Return the width override, else the terminal width, else None."""
    width = _view(stream, registry).width
    if width is not None:
        return width
    return terminal_width(stream)


def copy_format_flags(
    source: object,
    dest: object,
    *,
    registry: StateStore | None = None,
) -> None:
    """Enable on ``dest`` every format flag that is effective on ``source``.

    Flags already enabled on ``dest`` are never cleared, and the modifier
    stack is not copied.
    """
    if is_term_formattable(source, registry=registry):
        set_term_formattable(dest, registry=registry)
    if is_html_formattable(source, registry=registry):
        set_html_formattable(dest, registry=registry)


def configure_stream(
    stream: object,
    config: Config,
    *,
    registry: StateStore | None = None,
) -> None:
    """Apply a `Config` to the flags and width of ``stream``.

    The color mode is resolved against the environment and ``stream`` via
    `termfmt.terminal.resolve_color_mode`.
    """
    state = _store(registry).get_or_create(stream)
    state.term_formattable = resolve_color_mode(
        color_mode_override=config.color_mode,
        stream=stream,
    )
    state.html_formattable = config.html
    state.width = check_width(config.width)


# --- lifetime ---


def transfer_state(
    source: object,
    dest: object,
    *,
    registry: StateStore | None = None,
) -> None:
    """Move the formatting state of ``source`` (flags and stack) to ``dest``.

    Use this when ``dest`` takes over the logical role of ``source``. After
    the call ``source`` reports default state.
    """
    _store(registry).transfer(source, dest)


def release_state(stream: object, *, registry: StateStore | None = None) -> bool:
    """Release the formatting state of ``stream``; return True if it had any."""
    return _store(registry).release(stream)
