# topmark:header:start
#
#   project      : SgrMark
#   file         : tags.py
#   file_relpath : src/sgrmark/cli/commands/tags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SgrMark `tags` command.

Lists the tag names available to `sgrmark render`: the built-in vocabulary
plus the tags defined in the active configuration.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from sgrmark.cli.cli_types import OutputFormat
from sgrmark.cli.cmd_common import get_config, get_console, get_effective_verbosity
from sgrmark.cli.options import output_format_option
from sgrmark.registry.builtins import BUILTIN_TAGS

if TYPE_CHECKING:
    from sgrmark.cli.console import ConsoleLike
    from sgrmark.config.model import Config


@click.command(
    name="tags",
    help="List the built-in and configured markup tags.",
)
@output_format_option
def tags_command(*, output_format: OutputFormat) -> None:
    """List available tags.

    With ``-v``, configured tags are marked and the config source is shown.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)
    config: Config = get_config(ctx)

    names: tuple[str, ...] = config.build_registry().names()
    configured: list[str] = sorted(spec.name for spec in config.tags)

    if output_format == OutputFormat.JSON:
        payload: dict[str, object] = {
            "tags": list(names),
            "builtin": sorted(BUILTIN_TAGS),
            "configured": configured,
            "config_files": [str(p) for p in config.config_files],
        }
        console.print(json.dumps(payload, indent=2))
        return

    if vlevel > 0:
        source: str = ", ".join(str(p) for p in config.config_files) or "<defaults>"
        console.print(console.styled(f"Tags ({len(names)}), config: {source}", bold=True))
    for name in names:
        if vlevel > 0 and name in configured:
            console.print(f"{name}  {console.styled('(config)', dim=True)}")
        else:
            console.print(name)
