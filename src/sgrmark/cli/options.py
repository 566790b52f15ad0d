# topmark:header:start
#
#   project      : SgrMark
#   file         : options.py
#   file_relpath : src/sgrmark/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the Click-based SgrMark CLI.

Centralizes reusable options (verbosity, config, output format, color mode)
and their resolution logic so the group and the commands stay thin.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from sgrmark.cli.cli_types import ColorModeParam, EnumChoiceParam, OutputFormat
from sgrmark.cli.errors import SgrmarkUsageError
from sgrmark.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from the ``-v`` / ``-q`` counts.

    Returns:
        int: Positive when verbose, negative when quiet, 0 by default.

    Raises:
        SgrmarkUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise SgrmarkUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    return verbose_count - quiet_count


def verbosity_to_log_level(verbosity: int) -> int | None:
    """Map program verbosity to a logging level.

    ``-v`` enables INFO, ``-vv`` DEBUG and ``-vvv`` TRACE. Without ``-v``, returns
    None so the environment (or the silent default) decides.
    """
    if verbosity >= 3:
        return TRACE_LEVEL
    if verbosity == 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return None


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the counting ``-v/--verbose`` and ``-q/--quiet`` options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Repeat for more detail (-vvv enables trace logging).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress informational output.",
    )(f)
    return f


def config_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config PATH`` (disables config file discovery)."""
    return click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Read configuration from PATH instead of discovering sgrmark.toml/pyproject.toml.",
    )(f)


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--format text|json``."""
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=OutputFormat.TEXT.value,
        show_default=True,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)


def color_mode_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color-mode`` and ``--no-color``."""
    f = click.option(
        "--color-mode",
        "color_mode",
        type=ColorModeParam(),
        default=None,
        help="Color depth: off, 4bit, 8bit or 24bit (aliases: none, 16, 256, truecolor).",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Emit text attributes only, no colors (same as --color-mode off).",
    )(f)
    return f
