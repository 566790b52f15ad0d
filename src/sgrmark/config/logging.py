# topmark:header:start
#
#   project      : SgrMark
#   file         : logging.py
#   file_relpath : src/sgrmark/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom SgrMark logging with TRACE logging.

SgrMark is mostly used as a library, so logging is scoped to the ``sgrmark``
logger hierarchy and silent until `setup_logging` is called (the CLI does so at
startup). Records go to standard error: standard output carries rendered
markup and must stay byte-exact.

Levels map to SgrMark's own diagnostics:

- TRACE: per-render details (buffer discards, parsed config payloads).
- DEBUG: registry changes, config discovery, color mode resolution.
- WARNING: ignored config keys.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Callable, Final, TextIO, cast

from yachalk import chalk

from sgrmark.constants import NO_COLOR_ENV

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

#: Root of the logger hierarchy configured by `setup_logging`.
SGRMARK_LOGGER_NAME: Final[str] = "sgrmark"

#: Environment variable consulted by `resolve_env_log_level`.
LOG_LEVEL_ENV: Final[str] = "SGRMARK_LOG_LEVEL"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(name)s: %(message)s"


class SgrmarkLogger(logging.Logger):
    """Logger with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg=msg, args=args, extra=extra, stacklevel=2)


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(SgrmarkLogger)

# Silent by default when imported as a library.
logging.getLogger(SGRMARK_LOGGER_NAME).addHandler(logging.NullHandler())

# Lowest level first; the last threshold not above the record level wins.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (TRACE_LEVEL, chalk.blue),
    (logging.DEBUG, chalk.gray),
    (logging.INFO, chalk.green),
    (logging.WARNING, chalk.yellow),
    (logging.ERROR, chalk.red),
    (logging.CRITICAL, chalk.red_bright),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors log records with chalk depending on severity.

    Args:
        fmt (str): Record format string.
        colorize (bool): If False, records are returned uncolored.
    """

    def __init__(self, fmt: str = LOG_FORMAT, *, colorize: bool = True) -> None:
        super().__init__(fmt)
        self.colorize: bool = colorize

    def format(self, record: logging.LogRecord) -> str:
        message: str = super().format(record)
        if not self.colorize:
            return message
        style: Callable[[str], str] = chalk.dim.red
        for threshold, level_style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                style = level_style
        return style(message)


_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


def resolve_env_log_level() -> int | None:
    """Return a logging level from the environment or None if unset.

    Honors ``SGRMARK_LOG_LEVEL`` (e.g. ``"TRACE"``, ``"DEBUG"``, numeric ``"10"``).
    """
    val: str | None = os.environ.get(LOG_LEVEL_ENV)
    if not val:
        return None
    v: str = val.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


class _SgrmarkStreamHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Stream handler installed by `setup_logging`, so it can be replaced later."""


def setup_logging(level: int | None = None, *, stream: TextIO | None = None) -> None:
    """Configure the ``sgrmark`` logger with a level and colored output.

    Repeated calls replace the handler installed by a previous call; handlers
    added by the host application are left alone.

    Args:
        level (int | None): Log level; if None, ``SGRMARK_LOG_LEVEL`` is consulted
            and the default is CRITICAL, which keeps SgrMark silent.
        stream (TextIO | None): Destination (default: the current `sys.stderr`).
            Records are colored only if it is a terminal and ``NO_COLOR`` is unset.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    out: TextIO = stream if stream is not None else sys.stderr
    colorize: bool = not os.environ.get(NO_COLOR_ENV) and out.isatty()

    sgrmark_logger: logging.Logger = logging.getLogger(SGRMARK_LOGGER_NAME)
    sgrmark_logger.setLevel(level)
    for handler in sgrmark_logger.handlers[:]:
        if isinstance(handler, _SgrmarkStreamHandler):
            sgrmark_logger.removeHandler(handler)

    handler = _SgrmarkStreamHandler(out)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT, colorize=colorize))
    sgrmark_logger.addHandler(handler)


def get_logger(name: str) -> SgrmarkLogger:
    """Retrieve a SgrmarkLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        SgrmarkLogger: A SgrmarkLogger instance.
    """
    logger = logging.getLogger(name)
    return cast("SgrmarkLogger", logger)
