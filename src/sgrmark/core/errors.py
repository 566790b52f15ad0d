# topmark:header:start
#
#   project      : SgrMark
#   file         : errors.py
#   file_relpath : src/sgrmark/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the SgrMark engine and configuration layer.

The markup parser and the renderers never fail on malformed input: unknown tags
are no-ops and unterminated tags are dropped. The only runtime failure that can
escape a render call is a write failure reported by the caller-supplied sink.
"""

from __future__ import annotations


class SgrmarkError(Exception):
    """Base class for all SgrMark errors."""


class SinkWriteError(SgrmarkError, OSError):
    """A sink rejected (part of) a write.

    Mirrors the partial-write contract of byte streams: ``written`` holds the
    number of bytes the sink accepted before the failure, counted from the start
    of the render call that raised.

    Attributes:
        written (int): Bytes successfully written before the failure.
    """

    def __init__(self, message: str, *, written: int) -> None:
        super().__init__(message)
        self.written: int = written

    def __str__(self) -> str:
        return f"{self.args[0]} ({self.written} bytes written)"


class ConfigError(SgrmarkError, ValueError):
    """Invalid or unreadable SgrMark configuration."""
