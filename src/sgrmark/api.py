# topmark:header:start
#
#   project      : SgrMark
#   file         : api.py
#   file_relpath : src/sgrmark/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public entry points for rendering SgrMark markup.

Functions ending in ``r`` take an explicit renderer; the others use the
immutable built-in tag set (see `sgrmark.registry.builtins`).

- `fprintr` / `fprint`: render into a pooled buffer, then write it to a sink.
- `sprintr` / `sprint`: render to a string.
- `print_markup`: render to the process's binary standard output.
- `stream`: render straight to a sink, without buffering.
- `strip_markup`: return the literal text only.
- `Formatter`: bundles a renderer and a color mode.

Example:
    ```python
    import sys
    from sgrmark import api
    from sgrmark.core.sgr import ColorMode

    api.fprint(sys.stdout.buffer, "{b}bold{/b} and {red}red{/fg}\\n", color_mode=ColorMode.BIT4)
    text = api.sprint("{u}underlined{/u}")
    ```
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, BinaryIO, Final

from sgrmark.core.parser import parse
from sgrmark.core.sgr import ColorMode
from sgrmark.core.state import ENCODING, BufferPool, SinkState, write_all
from sgrmark.registry.builtins import builtin_renderer
from sgrmark.registry.renderer import StaticRenderer

if TYPE_CHECKING:
    from sgrmark.core.state import Sink
    from sgrmark.registry.renderer import Renderer

#: Buffers shared by the one-shot formatting functions.
BUFFER_POOL: Final[BufferPool] = BufferPool()

# Knows no tag, so every tag is dropped from the output.
_NULL_RENDERER: Final[StaticRenderer] = StaticRenderer({})


def fprintr(
    sink: Sink,
    renderer: Renderer,
    text: str,
    *,
    color_mode: ColorMode = ColorMode.BIT8,
) -> int:
    """Render ``text`` with ``renderer`` and write the result to ``sink``.

    The whole output is built in a pooled buffer first and handed to the sink
    in a single write.

    Args:
        sink (Sink): Destination accepting bytes.
        renderer (Renderer): Tag vocabulary.
        text (str): Markup to render.
        color_mode (ColorMode): Color depth of the emitted sequences.

    Returns:
        int: Number of bytes written.

    Raises:
        SinkWriteError: If the sink fails; ``written`` holds the partial count.
    """
    with BUFFER_POOL.borrow(color_mode) as state:
        parse(state, renderer, text)
        return write_all(sink, state.getvalue())


def fprint(sink: Sink, text: str, *, color_mode: ColorMode = ColorMode.BIT8) -> int:
    """Like `fprintr`, with the built-in tags."""
    return fprintr(sink, builtin_renderer(), text, color_mode=color_mode)


def sprintr(renderer: Renderer, text: str, *, color_mode: ColorMode = ColorMode.BIT8) -> str:
    """Render ``text`` with ``renderer`` and return the result as a string."""
    with BUFFER_POOL.borrow(color_mode) as state:
        parse(state, renderer, text)
        return state.text()


def sprint(text: str, *, color_mode: ColorMode = ColorMode.BIT8) -> str:
    """Like `sprintr`, with the built-in tags."""
    return sprintr(builtin_renderer(), text, color_mode=color_mode)


def print_markup(
    text: str,
    *,
    renderer: Renderer | None = None,
    color_mode: ColorMode = ColorMode.BIT8,
) -> int:
    """Render ``text`` to standard output and return the number of bytes written.

    Uses the built-in tags unless ``renderer`` is given. When standard output
    has no binary buffer (e.g. under `contextlib.redirect_stdout` with an
    `io.StringIO`), the rendered text is written to it directly.
    """
    out = sys.stdout
    if renderer is None:
        renderer = builtin_renderer()
    binary: BinaryIO | None = getattr(out, "buffer", None)
    if binary is None:
        rendered: str = sprintr(renderer, text, color_mode=color_mode)
        out.write(rendered)
        out.flush()
        return len(rendered.encode(ENCODING))

    out.flush()
    n: int = fprintr(binary, renderer, text, color_mode=color_mode)
    binary.flush()
    return n


def stream(
    sink: Sink,
    renderer: Renderer,
    text: str,
    *,
    color_mode: ColorMode = ColorMode.BIT8,
) -> int:
    """Render ``text`` straight into ``sink`` without an intermediate buffer.

    Every literal run and escape sequence is written as soon as the parser
    reaches it. The first failing write aborts rendering.

    Returns:
        int: Number of bytes written.

    Raises:
        SinkWriteError: If the sink fails; ``written`` counts every byte accepted
            before the failure.
    """
    state: SinkState = SinkState(sink, color_mode)
    parse(state, renderer, text)
    return state.written


def strip_markup(text: str) -> str:
    """Return the literal text of ``text``, with every tag removed and escapes resolved."""
    return sprintr(_NULL_RENDERER, text, color_mode=ColorMode.OFF)


class Formatter:
    """A renderer and a color mode bundled for repeated use.

    Args:
        renderer (Renderer | None): Tag vocabulary; defaults to the built-in tags.
        color_mode (ColorMode): Color depth of the emitted sequences.
    """

    def __init__(
        self,
        renderer: Renderer | None = None,
        color_mode: ColorMode = ColorMode.BIT8,
    ) -> None:
        self.renderer: Renderer = builtin_renderer() if renderer is None else renderer
        self.color_mode: ColorMode = color_mode

    def __repr__(self) -> str:
        return f"Formatter(renderer={self.renderer!r}, color_mode={self.color_mode.value!r})"

    def fprint(self, sink: Sink, text: str) -> int:
        return fprintr(sink, self.renderer, text, color_mode=self.color_mode)

    def sprint(self, text: str) -> str:
        return sprintr(self.renderer, text, color_mode=self.color_mode)

    def print(self, text: str) -> int:
        return print_markup(text, renderer=self.renderer, color_mode=self.color_mode)
