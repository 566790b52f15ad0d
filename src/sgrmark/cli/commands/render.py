# topmark:header:start
#
#   project      : SgrMark
#   file         : render.py
#   file_relpath : src/sgrmark/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SgrMark `render` command.

Renders markup given as arguments (joined with single spaces) or read from
STDIN, and writes the result to standard output.

Input modes:
    * ``sgrmark render "{b}hello{/b}" world`` renders the arguments and ends
      the output with a newline (unless ``-n``).
    * ``echo "{u}hi{/u}" | sgrmark render`` renders STDIN verbatim; the input's
      own line endings are kept and no newline is added.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO

import click

from sgrmark import api
from sgrmark.cli.cmd_common import get_config, get_console, resolve_color_mode
from sgrmark.cli.errors import SgrmarkDataError, SgrmarkIOError
from sgrmark.cli.options import color_mode_options
from sgrmark.config.logging import get_logger
from sgrmark.core.state import write_all

if TYPE_CHECKING:
    from sgrmark.cli.console import ConsoleLike
    from sgrmark.config.logging import SgrmarkLogger
    from sgrmark.config.model import Config
    from sgrmark.core.sgr import ColorMode
    from sgrmark.registry.renderer import RegistryRenderer

logger: SgrmarkLogger = get_logger(__name__)


def _read_stdin() -> str:
    data: bytes = click.get_binary_stream("stdin").read()
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise SgrmarkDataError(f"STDIN is not valid UTF-8: {exc}") from exc


@click.command(
    name="render",
    help="Render markup from TEXT arguments (or STDIN) to standard output.",
)
@click.argument("text", nargs=-1)
@color_mode_options
@click.option(
    "-n",
    "--no-newline",
    "no_newline",
    is_flag=True,
    default=False,
    help="Do not append a newline after rendering TEXT arguments.",
)
@click.option(
    "--strip",
    is_flag=True,
    default=False,
    help="Remove all tags and print the literal text only.",
)
def render_command(
    *,
    text: tuple[str, ...],
    color_mode: ColorMode | None,
    no_color: bool,
    no_newline: bool,
    strip: bool,
) -> None:
    """Render markup to standard output.

    Args:
        text (tuple[str, ...]): Markup arguments; STDIN is read when empty.
        color_mode (ColorMode | None): Explicit ``--color-mode``.
        no_color (bool): ``--no-color`` was given.
        no_newline (bool): Suppress the trailing newline.
        strip (bool): Print literal text only.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    config: Config = get_config(ctx)

    from_stdin: bool = not text
    markup: str = _read_stdin() if from_stdin else " ".join(text)
    newline: bool = not (from_stdin or no_newline)

    mode: ColorMode = resolve_color_mode(cli_mode=color_mode, no_color=no_color, config=config)
    logger.debug("Rendering %d characters (mode=%s, strip=%s)", len(markup), mode.value, strip)

    sink: BinaryIO = console.binary_out
    written: int = 0
    try:
        if strip:
            written = write_all(sink, api.strip_markup(markup).encode("utf-8"))
        else:
            renderer: RegistryRenderer = config.build_registry()
            written = api.fprintr(sink, renderer, markup, color_mode=mode)
        if newline:
            written += write_all(sink, b"\n", offset=written)
        sink.flush()
    except OSError as exc:
        raise SgrmarkIOError(f"Cannot write output: {exc}") from exc
    logger.trace("Wrote %d bytes", written)
