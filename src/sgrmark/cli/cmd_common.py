# topmark:header:start
#
#   project      : SgrMark
#   file         : cmd_common.py
#   file_relpath : src/sgrmark/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by SgrMark subcommands.

The group stores its resolved state in ``ctx.obj``:

- ``console``: the `ClickConsole` for program output.
- ``verbosity_level``: resolved ``-v`` / ``-q`` level.
- ``config_path``: explicit ``--config`` path, or None.
- ``config``: the loaded `Config`, cached by `get_config`.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from sgrmark.cli.errors import SgrmarkConfigError
from sgrmark.config.logging import get_logger
from sgrmark.config.model import Config
from sgrmark.constants import NO_COLOR_ENV
from sgrmark.core.errors import ConfigError
from sgrmark.core.sgr import ColorMode

if TYPE_CHECKING:
    from pathlib import Path

    import click

    from sgrmark.cli.console import ConsoleLike
    from sgrmark.config.logging import SgrmarkLogger

logger: SgrmarkLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the context by the group."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (0 when unset)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", 0))


def get_config(ctx: click.Context) -> Config:
    """Load (once) and return the configuration for this invocation.

    Raises:
        SgrmarkConfigError: If the configuration cannot be loaded.
    """
    ctx.ensure_object(dict)
    cached: Config | None = ctx.obj.get("config")
    if cached is not None:
        return cached
    path: Path | None = ctx.obj.get("config_path")
    try:
        config: Config = Config.load(path)
    except ConfigError as exc:
        raise SgrmarkConfigError(str(exc)) from exc
    ctx.obj["config"] = config
    return config


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    no_color: bool,
    config: Config,
) -> ColorMode:
    """Resolve the effective color mode.

    Precedence: ``--no-color`` > ``--color-mode`` > ``NO_COLOR`` environment
    variable (any non-empty value) > config ``color_mode`` > 8-bit.
    """
    if no_color:
        return ColorMode.OFF
    if cli_mode is not None:
        return cli_mode
    if os.environ.get(NO_COLOR_ENV):
        logger.debug("%s is set; disabling colors", NO_COLOR_ENV)
        return ColorMode.OFF
    return config.color_mode
