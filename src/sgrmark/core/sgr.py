# topmark:header:start
#
#   project      : SgrMark
#   file         : sgr.py
#   file_relpath : src/sgrmark/core/sgr.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Encode a `Style` as an ANSI SGR escape sequence.

An SGR sequence has the form ``ESC [ p1 ; p2 ; ... m``. The encoder walks the
attribute bits in a fixed order, then appends the color parameters for the
requested `ColorMode`:

- ``4bit``: ``30+n`` / ``90+n`` (foreground), ``40+n`` / ``100+n`` (background)
- ``8bit``: ``38;5;n`` / ``48;5;n``
- ``24bit``: ``38;2;r;g;b`` / ``48;2;r;g;b``

A style carrying `Attr.RESET` always encodes to ``ESC[0m``. A style with no
parameter at all encodes to the empty string rather than a malformed ``ESC[m``.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Final

from sgrmark.core.quantize import rgb_to_4bit, rgb_to_8bit, rgb_to_24bit, sgr_code_4bit, split_rgb
from sgrmark.core.style import Attr

if TYPE_CHECKING:
    from sgrmark.core.style import Style

ESC: Final[str] = "\x1b"
CSI: Final[str] = ESC + "["
RESET_SEQUENCE: Final[str] = CSI + "0m"

FG_BASE: Final[int] = 30
BG_BASE: Final[int] = 40
FG_EXTENDED: Final[int] = 38
BG_EXTENDED: Final[int] = 48

# Attribute bits and their SGR parameters, in emission order.
ATTRIBUTE_PARAMS: Final[tuple[tuple[Attr, str], ...]] = (
    (Attr.RESET, "0"),
    (Attr.BOLD, "1"),
    (Attr.DIM, "2"),
    (Attr.UNDERLINE, "4"),
    (Attr.BLINK, "5"),
    (Attr.REVERSE, "7"),
    (Attr.DEFAULT_FG, "39"),
    (Attr.DEFAULT_BG, "49"),
)


class ColorMode(str, Enum):
    """How colors of a `Style` are expanded into SGR parameters.

    Attributes:
        OFF: Colors are not emitted; only text attributes are.
        BIT4: The 16 standard ANSI colors.
        BIT8: The 256-color palette.
        BIT24: 24-bit "truecolor".
    """

    OFF = "off"
    BIT4 = "4bit"
    BIT8 = "8bit"
    BIT24 = "24bit"

    @classmethod
    def from_name(cls, name: str) -> ColorMode:
        """Parse a color mode from a user-supplied string.

        Accepts the canonical values plus the aliases ``none``, ``16``,
        ``256`` and ``truecolor`` (case-insensitive).

        Raises:
            ValueError: If ``name`` is not a known color mode.
        """
        key: str = name.strip().lower()
        mode: ColorMode | None = _COLOR_MODE_ALIASES.get(key)
        if mode is None:
            for member in cls:
                if member.value == key:
                    return member
            valid: str = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown color mode {name!r} (expected one of: {valid})")
        return mode


_COLOR_MODE_ALIASES: Final[dict[str, ColorMode]] = {
    "none": ColorMode.OFF,
    "16": ColorMode.BIT4,
    "256": ColorMode.BIT8,
    "truecolor": ColorMode.BIT24,
}


def color_params(mode: ColorMode, rgb: int, *, background: bool = False) -> list[str]:
    """Return the SGR parameters expressing ``rgb`` in ``mode``.

    Args:
        mode (ColorMode): Target color depth. `ColorMode.OFF` yields no parameter.
        rgb (int): ``0xRRGGBB`` color.
        background (bool): Encode as background instead of foreground.

    Returns:
        list[str]: The parameters, in order.
    """
    r, g, b = split_rgb(rgb)
    if mode == ColorMode.BIT4:
        base: int = BG_BASE if background else FG_BASE
        return [str(sgr_code_4bit(base, rgb_to_4bit(r, g, b)))]
    extended: str = str(BG_EXTENDED if background else FG_EXTENDED)
    if mode == ColorMode.BIT8:
        return [extended, "5", str(rgb_to_8bit(r, g, b))]
    if mode == ColorMode.BIT24:
        return [extended, "2", *(str(c) for c in rgb_to_24bit(r, g, b))]
    return []


def encode(style: Style, mode: ColorMode) -> str:
    """Return the SGR escape sequence equivalent to ``style``.

    Args:
        style (Style): The style to encode.
        mode (ColorMode): Color depth used for the foreground and background.

    Returns:
        str: ``ESC[0m`` when the reset attribute is set, ``""`` when the style has
            nothing to express, otherwise ``ESC[<params>m``.
    """
    if style.has(Attr.RESET):
        return RESET_SEQUENCE

    params: list[str] = [param for attr, param in ATTRIBUTE_PARAMS if style.has(attr)]

    if mode != ColorMode.OFF:
        fg: int | None = style.foreground
        if fg is not None and not style.has(Attr.DEFAULT_FG):
            params.extend(color_params(mode, fg))
        bg: int | None = style.background
        if bg is not None and not style.has(Attr.DEFAULT_BG):
            params.extend(color_params(mode, bg, background=True))

    if not params:
        return ""
    return f"{CSI}{';'.join(params)}m"
