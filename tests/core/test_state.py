# topmark:header:start
#
#   project      : SgrMark
#   file         : test_state.py
#   file_relpath : tests/core/test_state.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for render states, sink writes and the buffer pool."""

from __future__ import annotations

import io

import pytest

from sgrmark.core.errors import SgrmarkError, SinkWriteError
from sgrmark.core.sgr import ColorMode
from sgrmark.core.state import (
    MAX_POOLED_BUFFER,
    BufferPool,
    BufferState,
    SinkState,
    _StyledState,
    write_all,
)
from sgrmark.core.style import DEFAULT_STYLE, Attr, Style


class FailingSink:
    """Accepts ``budget`` writes, then raises `OSError`."""

    def __init__(self, budget: int) -> None:
        self.budget: int = budget
        self.data: bytearray = bytearray()

    def write(self, data: bytes) -> int:
        if self.budget <= 0:
            raise OSError("disk full")
        self.budget -= 1
        self.data += data
        return len(data)


class ShortSink:
    """Accepts at most ``limit`` bytes per write."""

    def __init__(self, limit: int) -> None:
        self.limit: int = limit

    def write(self, data: bytes) -> int:
        return min(len(data), self.limit)


class NoneSink:
    """File-like object whose ``write`` returns None."""

    def __init__(self) -> None:
        self.data: bytearray = bytearray()

    def write(self, data: bytes) -> None:
        self.data += data


# --- write_all ---


def test_write_all_returns_length() -> None:
    sink = io.BytesIO()
    assert write_all(sink, b"hello") == 5
    assert sink.getvalue() == b"hello"


def test_write_all_empty_payload_skips_the_sink() -> None:
    assert write_all(FailingSink(0), b"") == 0


def test_write_all_accepts_none_return() -> None:
    sink = NoneSink()
    assert write_all(sink, b"abc") == 3
    assert sink.data == b"abc"


def test_write_all_short_write_raises() -> None:
    with pytest.raises(SinkWriteError, match="short write") as excinfo:
        write_all(ShortSink(2), b"abcdef", offset=10)
    assert excinfo.value.written == 12


def test_write_all_wraps_os_error() -> None:
    with pytest.raises(SinkWriteError) as excinfo:
        write_all(FailingSink(0), b"abc", offset=4)
    err: SinkWriteError = excinfo.value
    assert err.written == 4
    assert isinstance(err.__cause__, OSError)
    assert isinstance(err, SgrmarkError)
    assert isinstance(err, OSError)
    assert "4 bytes written" in str(err)


# --- BufferState ---


def test_buffer_state_collects_text_and_sequences() -> None:
    state = BufferState(ColorMode.BIT8)
    state.write_string("a")
    state.set_style(DEFAULT_STYLE.with_attr(Attr.BOLD))
    state.write(b"b")
    assert state.getvalue() == b"a\x1b[1mb"
    assert state.text() == "a\x1b[1mb"
    assert len(state) == 6
    assert state.style.has(Attr.BOLD)


def test_set_style_with_empty_encoding_writes_nothing() -> None:
    state = BufferState()
    state.set_style(DEFAULT_STYLE.with_fg(0xFF0000))
    state.color_mode = ColorMode.OFF
    state.set_style(DEFAULT_STYLE.with_fg(0x00FF00))
    assert state.getvalue() == b"\x1b[38;5;196m"
    assert state.style.foreground == 0x00FF00


def test_write_string_encodes_utf8() -> None:
    state = BufferState()
    assert state.write_string("é") == 2
    assert state.write_string("") == 0


def test_buffer_state_reset() -> None:
    state = BufferState(ColorMode.BIT4)
    state.set_style(Style(int(Attr.BOLD)))
    state.reset(ColorMode.BIT24)
    assert state.getvalue() == b""
    assert state.style == DEFAULT_STYLE
    assert state.color_mode is ColorMode.BIT24


def test_buffer_state_reset_keeps_the_allocation() -> None:
    state = BufferState()
    state.write(b"abcdefgh")
    state.reset()
    assert len(state) == 0
    assert state.capacity == 8
    state.write(b"xy")
    assert state.getvalue() == b"xy"
    assert state.text() == "xy"
    assert state.capacity == 8
    state.write(b"0123456789")
    assert state.getvalue() == b"xy0123456789"
    assert state.capacity == 12


def test_styled_state_requires_write() -> None:
    class NoWrite(_StyledState):
        pass

    with pytest.raises(TypeError):
        NoWrite(ColorMode.BIT8)  # type: ignore[abstract]


# --- SinkState ---


def test_sink_state_streams_and_counts() -> None:
    sink = io.BytesIO()
    state = SinkState(sink, ColorMode.BIT4)
    state.write_string("x")
    state.set_style(DEFAULT_STYLE.with_fg(0x800000))
    assert sink.getvalue() == b"x\x1b[31m"
    assert state.written == 6


def test_sink_state_reports_cumulative_partial_count() -> None:
    sink = FailingSink(budget=2)
    state = SinkState(sink)
    state.write_string("abc")
    state.write_string("de")
    with pytest.raises(SinkWriteError) as excinfo:
        state.write_string("f")
    assert excinfo.value.written == 5
    assert state.written == 5
    assert sink.data == b"abcde"


# --- BufferPool ---


def test_pool_reuses_released_buffers() -> None:
    pool = BufferPool()
    first: BufferState = pool.acquire()
    first.write_string("data")
    pool.release(first)
    assert len(pool) == 1
    second: BufferState = pool.acquire(ColorMode.OFF)
    assert second is first
    assert second.getvalue() == b""
    assert second.color_mode is ColorMode.OFF
    assert len(pool) == 0


def test_pool_resets_style_on_release() -> None:
    pool = BufferPool()
    state: BufferState = pool.acquire()
    state.set_style(DEFAULT_STYLE.with_attr(Attr.UNDERLINE))
    pool.release(state)
    assert pool.acquire().style == DEFAULT_STYLE


def test_pool_discards_oversized_buffers() -> None:
    pool = BufferPool(ceiling=8)
    state: BufferState = pool.acquire()
    state.write(b"x" * 9)
    pool.release(state)
    assert len(pool) == 0
    assert pool.acquire() is not state


def test_pool_ceiling_applies_to_capacity_not_contents() -> None:
    pool = BufferPool(ceiling=8)
    state: BufferState = pool.acquire()
    state.write(b"x" * 9)
    state.reset()
    assert len(state) == 0
    pool.release(state)
    assert len(pool) == 0


def test_pool_reuses_the_allocation() -> None:
    pool = BufferPool()
    with pool.borrow() as state:
        state.write_string("x" * 100)
    with pool.borrow() as again:
        assert again is state
        assert again.getvalue() == b""
        assert again.capacity == 100


def test_default_ceiling_is_64k() -> None:
    assert MAX_POOLED_BUFFER == 64 * 1024
    assert BufferPool().ceiling == MAX_POOLED_BUFFER


def test_borrow_releases_on_error() -> None:
    pool = BufferPool()
    with pytest.raises(RuntimeError), pool.borrow() as state:
        state.write_string("partial")
        raise RuntimeError("boom")
    assert len(pool) == 1
    assert pool.acquire().getvalue() == b""
