# topmark:header:start
#
#   project      : SgrMark
#   file         : palette.py
#   file_relpath : src/sgrmark/core/palette.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Named colors and color-string parsing.

The palette holds the 16 classic ANSI colors as RGB values chosen so that the
4-bit quantizer maps each of them back onto its own palette slot.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Final, Mapping

STANDARD_COLORS: Final[Mapping[str, int]] = MappingProxyType(
    {
        "black": 0x000000,
        "red": 0x800000,
        "green": 0x008000,
        "yellow": 0x808000,
        "blue": 0x000080,
        "magenta": 0x800080,
        "cyan": 0x008080,
        "white": 0xC0C0C0,
    }
)

BRIGHT_COLORS: Final[Mapping[str, int]] = MappingProxyType(
    {
        "gray": 0x808080,
        "bright_red": 0xFF0000,
        "bright_green": 0x00FF00,
        "bright_yellow": 0xFFFF00,
        "bright_blue": 0x0000FF,
        "bright_magenta": 0xFF00FF,
        "bright_cyan": 0x00FFFF,
        "bright_white": 0xFFFFFF,
    }
)

PALETTE: Final[Mapping[str, int]] = MappingProxyType({**STANDARD_COLORS, **BRIGHT_COLORS})

_HEX_RE: Final[re.Pattern[str]] = re.compile(r"#?([0-9a-fA-F]{6}|[0-9a-fA-F]{3})")


def parse_color(text: str) -> int:
    """Parse a color string into a ``0xRRGGBB`` value.

    Accepts a palette name (``"red"``, ``"bright-blue"``), ``#rrggbb`` or
    ``#rgb``; the leading ``#`` is optional and matching is case-insensitive.

    Args:
        text (str): The color to parse.

    Returns:
        int: The RGB value.

    Raises:
        ValueError: If ``text`` is neither a palette name nor a hex color.
    """
    key: str = text.strip().lower().replace("-", "_")
    if key in PALETTE:
        return PALETTE[key]
    m: re.Match[str] | None = _HEX_RE.fullmatch(key)
    if m is None:
        raise ValueError(f"Invalid color {text!r}: expected a palette name, #rrggbb or #rgb")
    digits: str = m.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return int(digits, 16)


def format_color(rgb: int) -> str:
    """Render ``rgb`` as ``#rrggbb``."""
    return f"#{rgb:06x}"


def color_name(rgb: int) -> str | None:
    """Return the palette name of ``rgb``, or None if it is not a palette color."""
    for name, value in PALETTE.items():
        if value == rgb:
            return name
    return None
