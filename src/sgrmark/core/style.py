# topmark:header:start
#
#   project      : SgrMark
#   file         : style.py
#   file_relpath : src/sgrmark/core/style.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Packed display-state value for SgrMark.

A `Style` is a 64-bit unsigned integer laid out as follows (MSB first)::

    [ flags ][ reserved ][ attributes ][ bg color ][ fg color ]
     2 bits    6 bits       8 bits       24 bits     24 bits

The two flags tell whether a foreground (bit 63) or background (bit 62) color
is present. The attribute byte holds one bit per `Attr`. Colors are plain
``0xRRGGBB`` values.

Styles are immutable. Every mutation helper in this module is a pure function
returning a new `Style`; the methods on `Style` delegate to them.

Example:
    ```python
    from sgrmark.core.style import DEFAULT_STYLE, Attr

    style = DEFAULT_STYLE.with_attr(Attr.BOLD).with_fg(0xFF0000)
    assert style.has(Attr.BOLD)
    assert style.foreground == 0xFF0000
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from sgrmark.core.sgr import ColorMode

MASK_FG: Final[int] = 0x0000_0000_00FF_FFFF
MASK_BG: Final[int] = 0x0000_FFFF_FF00_0000
MASK_ATTR: Final[int] = 0x00FF_0000_0000_0000
MASK_RESERVED: Final[int] = 0x3F00_0000_0000_0000
MASK_FLAGS: Final[int] = 0xC000_0000_0000_0000

FLAG_FG: Final[int] = 1 << 63
FLAG_BG: Final[int] = 1 << 62

BG_SHIFT: Final[int] = 24
MAX_RGB: Final[int] = 0xFFFFFF
MAX_BITS: Final[int] = (1 << 64) - 1


class Attr(IntFlag):
    """Text attributes packed into bits 48..55 of a `Style`.

    Attributes are not colors but change how text is displayed. `RESET`
    dominates: a style carrying it encodes to the global reset sequence only.
    """

    RESET = 1 << 48
    BOLD = 1 << 49
    DIM = 1 << 50
    UNDERLINE = 1 << 51
    BLINK = 1 << 52
    REVERSE = 1 << 53
    DEFAULT_FG = 1 << 54
    DEFAULT_BG = 1 << 55

    @classmethod
    def from_name(cls, name: str) -> Attr:
        """Resolve an attribute from its lower-case name (e.g. ``"bold"``).

        Args:
            name (str): Attribute name; ``-`` and ``_`` are interchangeable.

        Returns:
            Attr: The matching attribute.

        Raises:
            ValueError: If the name does not match any attribute.
        """
        key: str = name.strip().upper().replace("-", "_")
        member: Attr | None = cls.__members__.get(key)
        if member is None:
            valid: str = ", ".join(m.lower() for m in cls.__members__)
            raise ValueError(f"Unknown attribute {name!r} (expected one of: {valid})")
        return member


def _check_rgb(rgb: int) -> int:
    if not 0 <= rgb <= MAX_RGB:
        raise ValueError(f"RGB value out of range: {rgb:#x}")
    return rgb


@dataclass(frozen=True, slots=True)
class Style:
    """Immutable, bit-packed text style.

    Attributes:
        bits (int): The raw 64-bit value.

    Raises:
        ValueError: If ``bits`` is negative, wider than 64 bits, or uses the
            reserved bits 56..61.
    """

    bits: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.bits <= MAX_BITS:
            raise ValueError(f"Style value does not fit in 64 bits: {self.bits:#x}")
        if self.bits & MASK_RESERVED:
            raise ValueError(f"Style uses reserved bits: {self.bits:#018x}")

    def __repr__(self) -> str:
        return f"Style({self.bits:#018x})"

    def __str__(self) -> str:
        from sgrmark.core.sgr import ColorMode, encode

        return encode(self, ColorMode.BIT8)

    def has(self, attr: Attr) -> bool:
        """Return True if every bit of ``attr`` is set."""
        flag: int = int(attr)
        return self.bits & flag == flag

    @property
    def attributes(self) -> Attr:
        """The attribute flags currently set."""
        return Attr(self.bits & MASK_ATTR)

    @property
    def foreground(self) -> int | None:
        """Foreground RGB, or None when no foreground color is present."""
        if not self.bits & FLAG_FG:
            return None
        return self.bits & MASK_FG

    @property
    def background(self) -> int | None:
        """Background RGB, or None when no background color is present."""
        if not self.bits & FLAG_BG:
            return None
        return (self.bits & MASK_BG) >> BG_SHIFT

    def ansi(self, mode: ColorMode) -> str:
        """Encode this style as an SGR escape sequence (see `sgrmark.core.sgr.encode`)."""
        from sgrmark.core.sgr import encode

        return encode(self, mode)

    def with_attr(self, attr: Attr) -> Style:
        return set_attribute(self, attr)

    def without_attr(self, attr: Attr) -> Style:
        return clear_attribute(self, attr)

    def with_fg(self, rgb: int) -> Style:
        return set_foreground(self, rgb)

    def with_bg(self, rgb: int) -> Style:
        return set_background(self, rgb)

    def without_fg(self) -> Style:
        return clear_foreground(self)

    def without_bg(self) -> Style:
        return clear_background(self)


DEFAULT_STYLE: Final[Style] = Style(0)


# --- Pure mutation operations ---


def set_attribute(style: Style, attr: Attr) -> Style:
    """Return ``style`` with ``attr`` switched on."""
    return Style(style.bits | int(attr))


def clear_attribute(style: Style, attr: Attr) -> Style:
    """Return ``style`` with ``attr`` switched off."""
    return Style(style.bits & ~int(attr) & MAX_BITS)


def set_foreground(style: Style, rgb: int) -> Style:
    """Return ``style`` with foreground color ``rgb``.

    Clears the previous foreground color and `Attr.DEFAULT_FG`, then sets the
    presence flag and the new color in one step.

    Raises:
        ValueError: If ``rgb`` is outside ``0..0xFFFFFF``.
    """
    bits: int = style.bits & ~(MASK_FG | int(Attr.DEFAULT_FG)) & MAX_BITS
    return Style(bits | FLAG_FG | _check_rgb(rgb))


def set_background(style: Style, rgb: int) -> Style:
    """Return ``style`` with background color ``rgb``.

    Raises:
        ValueError: If ``rgb`` is outside ``0..0xFFFFFF``.
    """
    bits: int = style.bits & ~(MASK_BG | int(Attr.DEFAULT_BG)) & MAX_BITS
    return Style(bits | FLAG_BG | (_check_rgb(rgb) << BG_SHIFT))


def clear_foreground(style: Style) -> Style:
    """Return ``style`` reverted to the terminal's default foreground color."""
    bits: int = style.bits & ~(MASK_FG | FLAG_FG) & MAX_BITS
    return Style(bits | int(Attr.DEFAULT_FG))


def clear_background(style: Style) -> Style:
    """Return ``style`` reverted to the terminal's default background color."""
    bits: int = style.bits & ~(MASK_BG | FLAG_BG) & MAX_BITS
    return Style(bits | int(Attr.DEFAULT_BG))
