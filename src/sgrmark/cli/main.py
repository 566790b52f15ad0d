# topmark:header:start
#
#   project      : SgrMark
#   file         : main.py
#   file_relpath : src/sgrmark/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SgrMark command-line entry point.

Group-level options are resolved once and placed into ``ctx.obj``; the
subcommands read them back through `sgrmark.cli.cmd_common`.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

import click

from sgrmark.cli.commands.quantize import quantize_command
from sgrmark.cli.commands.render import render_command
from sgrmark.cli.commands.tags import tags_command
from sgrmark.cli.commands.version import version_command
from sgrmark.cli.console import ClickConsole
from sgrmark.cli.options import (
    common_verbose_options,
    config_option,
    resolve_verbosity,
    verbosity_to_log_level,
)
from sgrmark.config.logging import get_logger, resolve_env_log_level, setup_logging
from sgrmark.constants import NO_COLOR_ENV

if TYPE_CHECKING:
    from pathlib import Path

    from sgrmark.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    config_path: Path | None,
) -> None:
    """Initialize shared state (console, verbosity, logging) on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` is populated.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        config_path (Path | None): Explicit ``--config`` path.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = level_cli

    # SGRMARK_LOG_LEVEL wins over -v so logging can be tuned independently.
    log_level: int | None = resolve_env_log_level() or verbosity_to_log_level(level_cli)
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    ctx.obj["config_path"] = config_path
    # Style console messages only on a terminal, and never under NO_COLOR.
    enable_color: bool = not os.environ.get(NO_COLOR_ENV) and sys.stdout.isatty()
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="SgrMark: render {b}tag{/b} markup as ANSI/SGR terminal escapes.",
)
@common_verbose_options
@config_option
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    config_path: Path | None,
) -> None:
    """Entry point for the SgrMark CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, config_path=config_path)
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'sgrmark render TEXT' to render markup.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(render_command)

cli.add_command(tags_command)

cli.add_command(quantize_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
