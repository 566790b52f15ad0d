# topmark:header:start
#
#   project      : SgrMark
#   file         : console.py
#   file_relpath : src/sgrmark/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console abstraction for user-facing program output.

Keeps CLI output separate from internal logging: use the console for messages
intended for end users and reserve `logging` for diagnostics.

Rendered markup is raw bytes that already carry their escape sequences; it is
written to `ClickConsole.binary_out`, bypassing Click's ANSI stripping.
"""

from __future__ import annotations

import sys
from typing import Any, BinaryIO, Protocol, TextIO, cast

import click


class ConsoleLike(Protocol):
    """Minimal interface for a console used by CLI commands."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string (no-op if styling is disabled)."""
        ...

    @property
    def binary_out(self) -> BinaryIO:
        """Binary stream behind stdout, for output that must not be re-encoded."""
        ...


class ClickConsole:
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, console messages may carry ANSI styling.
        out (TextIO | None): Text stream for standard output (default `sys.stdout`).
        err (TextIO | None): Text stream for error output (default `sys.stderr`).
    """

    enable_color: bool
    out: TextIO
    err: TextIO

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    @property
    def binary_out(self) -> BinaryIO:
        """Binary stream underlying ``out`` (Click's binary stdout as a fallback)."""
        buffer: Any = getattr(self.out, "buffer", None)
        if buffer is None:
            return click.get_binary_stream("stdout")
        return cast("BinaryIO", buffer)

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with `click.style` (plain if color is disabled)."""
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)

