# topmark:header:start
#
#   project      : SgrMark
#   file         : version.py
#   file_relpath : src/sgrmark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SgrMark `version` command.

Prints the current SgrMark version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from sgrmark.cli.cli_types import OutputFormat
from sgrmark.cli.cmd_common import get_console, get_effective_verbosity
from sgrmark.cli.options import output_format_option
from sgrmark.constants import SGRMARK_VERSION

if TYPE_CHECKING:
    from sgrmark.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of SgrMark.",
)
@output_format_option
def version_command(*, output_format: OutputFormat) -> None:
    """Show the current version of SgrMark.

    Args:
        output_format (OutputFormat): Plain text or JSON.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    if output_format == OutputFormat.JSON:
        console.print(json.dumps({"version": SGRMARK_VERSION}))
    elif vlevel > 0:
        console.print(console.styled("SgrMark version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(SGRMARK_VERSION, bold=True)}")
    else:
        console.print(console.styled(SGRMARK_VERSION, bold=True))
