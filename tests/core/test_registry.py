# tests/core/test_registry.py

# topmark:header:start
#
#   project      : TermFmt
#   file         : test_registry.py
#   file_relpath : tests/core/test_registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for stream/record association and record lifetime.

Covers:
- lazy creation and idempotent lookup;
- automatic teardown when a stream is collected or closed;
- `attach()` for streams without weak-reference support;
- explicit `transfer()` of a record to a new stream;
- the leaking `AddressTable` reference strategy.
"""

from __future__ import annotations

import gc
import io

import pytest

from termfmt.core.errors import UnsupportedStreamError
from termfmt.core.formatting import (
    current_modifiers,
    is_html_formattable,
    push_modifier,
    release_state,
    set_html_formattable,
    set_term_formattable,
    transfer_state,
)
from termfmt.core.registry import AddressTable, StreamStateRegistry, get_registry
from termfmt.modifiers import BOLD, RED


class SlottedStream:
    """Minimal writable object that cannot be weakly referenced."""

    __slots__ = ("parts",)

    def __init__(self) -> None:
        self.parts: list[str] = []

    def write(self, s: str) -> int:
        self.parts.append(s)
        return len(s)

    def getvalue(self) -> str:
        return "".join(self.parts)


def test_get_or_create_is_idempotent(registry: StreamStateRegistry) -> None:
    """The same record is returned for every call on the same stream."""
    buf = io.StringIO()
    assert registry.get(buf) is None
    state = registry.get_or_create(buf)
    assert registry.get_or_create(buf) is state
    assert registry.get(buf) is state
    assert buf in registry
    assert len(registry) == 1


def test_queries_do_not_create_records(registry: StreamStateRegistry) -> None:
    """Reading flags or the stack of an unknown stream reports defaults only."""
    buf = io.StringIO()
    assert current_modifiers(buf, registry=registry) == ()
    assert not is_html_formattable(buf, registry=registry)
    assert buf not in registry
    assert len(registry) == 0


def test_record_released_when_stream_collected(registry: StreamStateRegistry) -> None:
    """A collected stream takes its record with it."""
    buf = io.StringIO()
    push_modifier(RED, buf, registry=registry)
    assert len(registry) == 1

    del buf
    gc.collect()
    assert len(registry) == 0
    assert registry._entries == {}  # pyright: ignore[reportPrivateUsage]


def test_closed_stream_is_treated_as_destroyed(registry: StreamStateRegistry) -> None:
    """A closed stream reports default state and loses its record."""
    buf = io.StringIO()
    set_html_formattable(buf, registry=registry)
    push_modifier(RED, buf, registry=registry)
    buf.close()

    assert registry.get(buf) is None
    assert current_modifiers(buf, registry=registry) == ()
    assert len(registry) == 0


def test_release(registry: StreamStateRegistry) -> None:
    """An explicit release drops the record once."""
    buf = io.StringIO()
    push_modifier(BOLD, buf, registry=registry)
    assert release_state(buf, registry=registry) is True
    assert release_state(buf, registry=registry) is False
    assert current_modifiers(buf, registry=registry) == ()


def test_transfer_moves_flags_and_stack(registry: StreamStateRegistry) -> None:
    """The destination takes over; the source falls back to defaults."""
    source, dest = io.StringIO(), io.StringIO()
    set_term_formattable(source, registry=registry)
    set_html_formattable(source, registry=registry)
    push_modifier(RED, source, registry=registry)
    state = registry.get(source)

    transfer_state(source, dest, registry=registry)

    assert registry.get(dest) is state
    assert registry.get(source) is None
    assert current_modifiers(dest, registry=registry) == (RED,)
    assert is_html_formattable(dest, registry=registry)
    assert not is_html_formattable(source, registry=registry)


def test_transfer_replaces_destination_record(registry: StreamStateRegistry) -> None:
    """Any record the destination had is discarded."""
    source, dest = io.StringIO(), io.StringIO()
    push_modifier(BOLD, dest, registry=registry)

    transfer_state(source, dest, registry=registry)
    assert registry.get(dest) is None

    push_modifier(RED, source, registry=registry)
    transfer_state(source, dest, registry=registry)
    assert current_modifiers(dest, registry=registry) == (RED,)


def test_transfer_to_self_is_a_no_op(registry: StreamStateRegistry) -> None:
    """Transferring a stream onto itself keeps its record."""
    buf = io.StringIO()
    push_modifier(RED, buf, registry=registry)
    transfer_state(buf, buf, registry=registry)
    assert current_modifiers(buf, registry=registry) == (RED,)


def test_transferred_record_follows_destination_lifetime(
    registry: StreamStateRegistry,
) -> None:
    """Collecting the old source after a transfer leaves the moved record alone."""
    source, dest = io.StringIO(), io.StringIO()
    push_modifier(RED, source, registry=registry)
    transfer_state(source, dest, registry=registry)

    del source
    gc.collect()
    assert current_modifiers(dest, registry=registry) == (RED,)

    del dest
    gc.collect()
    assert len(registry) == 0


# --- streams without weakref support ---------------------------------------------


def test_unsupported_stream_outside_attach(registry: StreamStateRegistry) -> None:
    """Objects that cannot be weakly referenced must be attached explicitly."""
    stream = SlottedStream()
    with pytest.raises(UnsupportedStreamError, match="attach"):
        push_modifier(RED, stream, registry=registry)
    with pytest.raises(TypeError):
        registry.get_or_create(stream)


def test_attach_scopes_the_record(registry: StreamStateRegistry) -> None:
    """Inside ``attach`` the stream works normally; on exit its record is gone."""
    stream = SlottedStream()
    with registry.attach(stream) as state:
        state.term_formattable = True
        push_modifier(RED, stream, registry=registry)
        assert current_modifiers(stream, registry=registry) == (RED,)
    assert stream.getvalue() == "\x1b[31m"
    assert stream not in registry
    assert len(registry) == 0


def test_attach_releases_on_error(registry: StreamStateRegistry) -> None:
    """The record is destroyed even when the block raises."""
    stream = SlottedStream()
    with pytest.raises(RuntimeError), registry.attach(stream):
        push_modifier(RED, stream, registry=registry)
        raise RuntimeError("boom")
    assert stream not in registry


def test_attach_keeps_existing_record(registry: StreamStateRegistry) -> None:
    """Attaching a stream that already has a record leaves it in place."""
    buf = io.StringIO()
    state = registry.get_or_create(buf)
    with registry.attach(buf) as attached:
        assert attached is state
    assert registry.get(buf) is state


def test_transfer_to_unsupported_destination(registry: StreamStateRegistry) -> None:
    """A weakly-held record cannot move to a stream without teardown support."""
    source, dest = io.StringIO(), SlottedStream()
    push_modifier(RED, source, registry=registry)
    with pytest.raises(UnsupportedStreamError):
        transfer_state(source, dest, registry=registry)
    assert current_modifiers(source, registry=registry) == (RED,)


def test_attached_source_hands_record_to_unsupported_destination(
    registry: StreamStateRegistry,
) -> None:
    """An attached record may move to another stream without weakref support."""
    source, dest = SlottedStream(), SlottedStream()
    with registry.attach(source):
        push_modifier(RED, source, registry=registry)
        transfer_state(source, dest, registry=registry)
    assert current_modifiers(dest, registry=registry) == (RED,)
    assert release_state(dest, registry=registry)
    assert len(registry) == 0


# --- reference strategy ----------------------------------------------------------


def test_address_table_leaks_records() -> None:
    """Without a teardown hook, records outlive their streams."""
    table = AddressTable()
    weak = StreamStateRegistry()
    streams = [io.StringIO() for _ in range(3)]
    for stream in streams:
        table.get_or_create(stream)
        weak.get_or_create(stream)

    del streams, stream
    gc.collect()
    assert len(table) == 3
    assert len(weak) == 0


def test_address_table_operations() -> None:
    """The reference strategy still supports the full store interface."""
    table = AddressTable()
    source, dest = io.StringIO(), io.StringIO()
    push_modifier(RED, source, registry=table)
    transfer_state(source, dest, registry=table)
    assert table.get(source) is None
    assert current_modifiers(dest, registry=table) == (RED,)
    assert table.release(dest)
    assert len(table) == 0


def test_default_registry_is_shared() -> None:
    """`get_registry` always returns the same process-wide registry."""
    assert get_registry() is get_registry()
