# topmark:header:start
#
#   project      : SgrMark
#   file         : quantize.py
#   file_relpath : src/sgrmark/core/quantize.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RGB quantizers for the three terminal color depths.

Terminals understand colors in three flavors:

- 4-bit: the 16 ANSI colors (8 standard + 8 bright).
- 8-bit: the xterm 256-color palette (16 ANSI colors, a 6x6x6 color cube at
  16..231 and a 24-step grayscale ramp at 232..255).
- 24-bit ("truecolor"): any RGB triplet.

The functions below are pure and total over ``0..255`` per channel. They know
nothing about escape sequences; `sgrmark.core.sgr` turns their results into
SGR parameters.
"""

from __future__ import annotations

from typing import Final

# Offset between a standard SGR color code (30-37 / 40-47) and its bright
# counterpart (90-97 / 100-107), applied to palette indices 8..15.
BRIGHT_OFFSET: Final[int] = 52

# Grid step of the 6x6x6 color cube: 256 channel values / 6 levels ~= 42.
CUBE_STEP: Final[int] = 42

GRAYSCALE_BASE: Final[int] = 232
CUBE_BASE: Final[int] = 16


def clamp(x: int, lo: int, hi: int) -> int:
    """Return ``lo`` if ``x < lo``, ``hi`` if ``x > hi``, else ``x``."""
    if x < lo:
        return lo
    if x > hi:
        return hi
    return x


def split_rgb(rgb: int) -> tuple[int, int, int]:
    """Split a ``0xRRGGBB`` value into its ``(r, g, b)`` channels."""
    return (rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF


def rgb_to_4bit(r: int, g: int, b: int) -> int:
    """Map an RGB color to an ANSI 16-color palette index (0..15).

    The 8 base colors form a 3-bit number (blue, green, red). A channel counts as
    "present" when it is at least the average of the three channels; an average
    of 128 or more selects the bright variant.

    Grays need special handling because silver (192,192,192) is a *standard*
    color while gray (128,128,128) is "bright black".
    """
    if r == g == b:
        if r < 64:
            return 0  # black
        if r <= 128:
            return 8  # gray
        if r <= 192:
            return 7  # silver
        return 15  # white

    n: int = 0
    avg: int = (r + g + b) // 3
    if r >= avg:
        n |= 1
    if g >= avg:
        n |= 2
    if b >= avg:
        n |= 4
    if avg >= 128:
        n += 8
    return n


def rgb_to_8bit(r: int, g: int, b: int) -> int:
    """Map an RGB color to an xterm 256-color palette index.

    Equal channels map onto the grayscale ramp (about ten channel values per
    step, the brightest values collapse into the last step). Everything else is
    quantized per channel onto the 6x6x6 cube.
    """
    if r == g == b:
        return clamp(GRAYSCALE_BASE + r // 10, 0, 255)

    r_level: int = clamp(r // CUBE_STEP, 0, 5)
    g_level: int = clamp(g // CUBE_STEP, 0, 5)
    b_level: int = clamp(b // CUBE_STEP, 0, 5)
    return CUBE_BASE + 36 * r_level + 6 * g_level + b_level


def rgb_to_24bit(r: int, g: int, b: int) -> tuple[int, int, int]:
    """Return the RGB triplet unchanged (truecolor terminals take it as is)."""
    return r, g, b


def sgr_code_4bit(base: int, index: int) -> int:
    """Return the SGR color code for a 16-color palette ``index``.

    Args:
        base (int): ``30`` for foreground, ``40`` for background.
        index (int): Palette index from `rgb_to_4bit` (0..15).

    Returns:
        int: ``base + index`` for standard colors, ``base + index + 52`` for the
            bright ones (i.e. 90..97 / 100..107).
    """
    code: int = base + index
    if index > 7:
        code += BRIGHT_OFFSET
    return code
