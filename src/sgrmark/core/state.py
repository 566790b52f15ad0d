# topmark:header:start
#
#   project      : SgrMark
#   file         : state.py
#   file_relpath : src/sgrmark/core/state.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render states, output sinks and the pooled render buffers.

A *render state* is what the parser and the renderers talk to: it accepts
literal text and holds the current `Style`. Setting a style immediately writes
its escape sequence, so the byte stream always reflects the order in which the
parser and the renderer issued their writes.

Two states are provided:

- `BufferState` collects everything in memory. One-shot formatting calls take
  one from a `BufferPool` and return it afterwards.
- `SinkState` streams straight into a caller-supplied `Sink` and stops at the
  first failing write.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from threading import Lock
from typing import TYPE_CHECKING, Final, Protocol

from sgrmark.config.logging import get_logger
from sgrmark.core.errors import SinkWriteError
from sgrmark.core.sgr import ColorMode, encode
from sgrmark.core.style import DEFAULT_STYLE, Style

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sgrmark.config.logging import SgrmarkLogger

logger: SgrmarkLogger = get_logger(__name__)

#: Buffers whose capacity grew beyond this many bytes are not returned to the pool.
MAX_POOLED_BUFFER: Final[int] = 64 << 10

ENCODING: Final[str] = "utf-8"


class Sink(Protocol):
    """Byte-accepting destination (binary file, `io.BytesIO`, socket file, ...).

    ``write`` returns the number of bytes accepted, or None when the
    destination always accepts everything (as some file-like objects do).
    """

    def write(self, data: bytes, /) -> int | None:
        """Write ``data`` and return the number of bytes accepted."""
        ...


def write_all(sink: Sink, data: bytes, *, offset: int = 0) -> int:
    """Write ``data`` to ``sink`` and return the number of bytes written.

    Args:
        sink (Sink): Destination.
        data (bytes): Payload.
        offset (int): Bytes already written by the caller in the same operation;
            added to ``SinkWriteError.written`` so errors report the running total.

    Returns:
        int: ``len(data)``.

    Raises:
        SinkWriteError: If the sink raises `OSError` or accepts fewer bytes than
            offered.
    """
    if not data:
        return 0
    try:
        n: int | None = sink.write(data)
    except OSError as exc:
        partial: int = getattr(exc, "characters_written", 0) or 0
        raise SinkWriteError(f"sink write failed: {exc}", written=offset + partial) from exc
    if n is None:
        return len(data)
    if n < len(data):
        raise SinkWriteError("short write", written=offset + n)
    return len(data)


class RenderState(Protocol):
    """State passed to renderers while parsing.

    Implementations write literal text and escape sequences in the exact order
    they are issued.
    """

    @property
    def style(self) -> Style:
        """The style currently in effect."""
        ...

    def set_style(self, style: Style) -> None:
        """Emit the escape sequence for ``style`` and make it current."""
        ...

    def write(self, data: bytes) -> int:
        """Write raw bytes; return the count written."""
        ...

    def write_string(self, text: str) -> int:
        """Write text (UTF-8 encoded); return the count of bytes written."""
        ...


class _StyledState(ABC):
    """Style bookkeeping shared by the concrete states; subclasses provide `write`."""

    def __init__(self, color_mode: ColorMode) -> None:
        self.color_mode: ColorMode = color_mode
        self._style: Style = DEFAULT_STYLE

    @property
    def style(self) -> Style:
        return self._style

    def set_style(self, style: Style) -> None:
        self.write_string(encode(style, self.color_mode))
        self._style = style

    @abstractmethod
    def write(self, data: bytes) -> int:
        """Write raw bytes; return the count written."""

    def write_string(self, text: str) -> int:
        if not text:
            return 0
        return self.write(text.encode(ENCODING))


class BufferState(_StyledState):
    """In-memory render state.

    The underlying allocation survives `reset`: only the fill level drops back
    to zero, so a pooled buffer reuses its memory on the next render. The
    allocation only grows; `capacity` reports its high-water mark.

    Args:
        color_mode (ColorMode): Color depth used when encoding styles.
    """

    def __init__(self, color_mode: ColorMode = ColorMode.BIT8) -> None:
        super().__init__(color_mode)
        self._buf: bytearray = bytearray()
        self._len: int = 0

    def __len__(self) -> int:
        return self._len

    @property
    def capacity(self) -> int:
        """Bytes allocated, which is the largest fill level since creation."""
        return len(self._buf)

    def write(self, data: bytes) -> int:
        end: int = self._len + len(data)
        self._buf[self._len : end] = data
        self._len = end
        return len(data)

    def getvalue(self) -> bytes:
        """Return everything written since the last reset."""
        return bytes(self._buf[: self._len])

    def text(self) -> str:
        """Return everything written since the last reset, decoded."""
        return self._buf[: self._len].decode(ENCODING)

    def reset(self, color_mode: ColorMode | None = None) -> None:
        """Drop the contents (keeping the allocation) and return to the default style."""
        self._len = 0
        self._style = DEFAULT_STYLE
        if color_mode is not None:
            self.color_mode = color_mode


class SinkState(_StyledState):
    """Render state writing straight to a sink.

    Every literal run and escape sequence is forwarded as soon as it is issued.
    A failing write raises `SinkWriteError` whose ``written`` counts all bytes
    accepted by this state so far, which aborts the surrounding parse.

    Args:
        sink (Sink): Destination.
        color_mode (ColorMode): Color depth used when encoding styles.

    Attributes:
        written (int): Bytes accepted by the sink so far.
    """

    def __init__(self, sink: Sink, color_mode: ColorMode = ColorMode.BIT8) -> None:
        super().__init__(color_mode)
        self.sink: Sink = sink
        self.written: int = 0

    def write(self, data: bytes) -> int:
        n: int = write_all(self.sink, data, offset=self.written)
        self.written += n
        return n


class BufferPool:
    """Thread-safe free list of `BufferState` objects.

    Pooled buffers keep their allocation between calls. To keep the steady-state
    memory bounded, a buffer whose capacity grew past ``ceiling`` bytes is
    dropped instead of being returned.

    Args:
        ceiling (int): Largest buffer capacity (in bytes) kept in the pool.
    """

    def __init__(self, ceiling: int = MAX_POOLED_BUFFER) -> None:
        self.ceiling: int = ceiling
        self._free: list[BufferState] = []
        self._lock: Lock = Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._free)

    def acquire(self, color_mode: ColorMode = ColorMode.BIT8) -> BufferState:
        """Return an empty buffer state using ``color_mode``."""
        with self._lock:
            state: BufferState | None = self._free.pop() if self._free else None
        if state is None:
            return BufferState(color_mode)
        state.color_mode = color_mode
        return state

    def release(self, state: BufferState) -> None:
        """Reset ``state`` and put it back, unless its capacity outgrew the ceiling."""
        capacity: int = state.capacity
        if capacity > self.ceiling:
            logger.trace("Discarding render buffer of %d bytes (ceiling %d)", capacity, self.ceiling)
            return
        state.reset()
        with self._lock:
            self._free.append(state)

    @contextmanager
    def borrow(self, color_mode: ColorMode = ColorMode.BIT8) -> Iterator[BufferState]:
        """Context manager around `acquire` / `release`."""
        state: BufferState = self.acquire(color_mode)
        try:
            yield state
        finally:
            self.release(state)
