# topmark:header:start
#
#   project      : SgrMark
#   file         : quantize.py
#   file_relpath : src/sgrmark/cli/commands/quantize.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SgrMark `quantize` command.

Shows how a color is reduced for each color depth, and the foreground escape
sequence emitted in each mode.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from sgrmark.cli.cli_types import OutputFormat
from sgrmark.cli.cmd_common import get_console
from sgrmark.cli.errors import SgrmarkDataError
from sgrmark.cli.options import output_format_option
from sgrmark.core.palette import color_name, format_color, parse_color
from sgrmark.core.quantize import (
    rgb_to_4bit,
    rgb_to_8bit,
    rgb_to_24bit,
    sgr_code_4bit,
    split_rgb,
)
from sgrmark.core.sgr import ESC, FG_BASE, ColorMode, encode
from sgrmark.core.style import DEFAULT_STYLE, set_foreground

if TYPE_CHECKING:
    from sgrmark.cli.console import ConsoleLike
    from sgrmark.core.style import Style

# Modes that actually emit a color.
_COLOR_MODES: tuple[ColorMode, ...] = (ColorMode.BIT4, ColorMode.BIT8, ColorMode.BIT24)


def _printable(sequence: str) -> str:
    return sequence.replace(ESC, "ESC")


@click.command(
    name="quantize",
    help="Show the 4/8/24-bit mapping of COLOR (palette name, #rrggbb or #rgb).",
)
@click.argument("color")
@output_format_option
def quantize_command(*, color: str, output_format: OutputFormat) -> None:
    """Show the quantized forms of a color.

    Raises:
        SgrmarkDataError: If COLOR cannot be parsed.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    try:
        rgb: int = parse_color(color)
    except ValueError as exc:
        raise SgrmarkDataError(str(exc)) from exc

    r, g, b = split_rgb(rgb)
    index4: int = rgb_to_4bit(r, g, b)
    index8: int = rgb_to_8bit(r, g, b)
    style: Style = set_foreground(DEFAULT_STYLE, rgb)
    sequences: dict[str, str] = {mode.value: encode(style, mode) for mode in _COLOR_MODES}

    if output_format == OutputFormat.JSON:
        payload: dict[str, object] = {
            "color": format_color(rgb),
            "name": color_name(rgb),
            "4bit": index4,
            "4bit_sgr": sgr_code_4bit(FG_BASE, index4),
            "8bit": index8,
            "24bit": list(rgb_to_24bit(r, g, b)),
            "sequences": sequences,
        }
        console.print(json.dumps(payload, indent=2))
        return

    name: str | None = color_name(rgb)
    console.print(f"color : {format_color(rgb)}" + (f" ({name})" if name else ""))
    console.print(f"4bit  : {index4} (SGR {sgr_code_4bit(FG_BASE, index4)})")
    console.print(f"8bit  : {index8}")
    console.print("24bit : {};{};{}".format(*rgb_to_24bit(r, g, b)))
    for mode_name, sequence in sequences.items():
        console.print(f"{mode_name:<6}: {_printable(sequence)}")
