# topmark:header:start
#
#   project      : SgrMark
#   file         : parser.py
#   file_relpath : src/sgrmark/core/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Single-pass parser for SgrMark markup.

Markup syntax:
    - ``{name}`` renders the tag ``name`` through the renderer.
    - ``{}`` is a legal tag with an empty name.
    - ``\\X`` is the literal character ``X``; use it for ``\\{``, ``\\}``
      and ``\\\\``.
    - An escape always flushes the pending window as literal text, even inside
      a tag: ``{a\\}b}`` writes ``a`` and renders the tag ``}b``.
    - An unterminated ``{...`` at the end of the input is dropped.

The parser keeps a window ``[last, i)`` over the pending literal run and
flushes it to the state only when a delimiter or the end of input is reached,
so runs of plain text reach the sink as single writes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from sgrmark.core.state import RenderState
    from sgrmark.registry.renderer import Renderer

TAG_OPEN: Final[str] = "{"
TAG_CLOSE: Final[str] = "}"
ESCAPE: Final[str] = "\\"


def parse(state: RenderState, renderer: Renderer, text: str) -> None:
    """Parse ``text`` and feed literal runs and tags to ``state``.

    Literal text is written with ``state.write_string``; every complete tag is
    passed to ``renderer.render(state, name)``. The parser itself never fails:
    unknown tags are the renderer's business and incomplete tags are dropped.

    Args:
        state (RenderState): Destination of literal text and style changes.
        renderer (Renderer): Maps tag names to style changes.
        text (str): The markup to parse.

    Raises:
        SinkWriteError: Propagated from ``state`` if its sink fails; parsing stops
            at the failing write.
    """
    last: int = 0
    intag: bool = False
    escape: bool = False

    for i, c in enumerate(text):
        if escape:
            # `last` already points at this character: it opens the next run.
            escape = False
            continue

        if c == TAG_OPEN and not intag:
            if i > last:
                state.write_string(text[last:i])
            intag = True
            last = i + 1
        elif c == TAG_CLOSE and intag:
            renderer.render(state, text[last:i])
            intag = False
            last = i + 1
        elif c == ESCAPE:
            # The window is flushed as literal text even inside a tag; the
            # tag name then restarts at the escaped character.
            if i > last:
                state.write_string(text[last:i])
            escape = True
            last = i + 1

    # Flush the trailing run; an unterminated tag is discarded.
    if not intag and last < len(text):
        state.write_string(text[last:])
