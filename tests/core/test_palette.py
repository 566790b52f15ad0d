# topmark:header:start
#
#   project      : SgrMark
#   file         : test_palette.py
#   file_relpath : tests/core/test_palette.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for named colors and color string parsing."""

from __future__ import annotations

import pytest

from sgrmark.core.palette import (
    BRIGHT_COLORS,
    PALETTE,
    STANDARD_COLORS,
    color_name,
    format_color,
    parse_color,
)


def test_palette_has_sixteen_colors() -> None:
    assert len(STANDARD_COLORS) == 8
    assert len(BRIGHT_COLORS) == 8
    assert len(PALETTE) == 16


def test_palette_is_read_only() -> None:
    with pytest.raises(TypeError):
        PALETTE["red"] = 0  # type: ignore[index]


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("red", 0x800000),
        ("RED", 0x800000),
        ("bright-blue", 0x0000FF),
        ("bright_white", 0xFFFFFF),
        ("#ff8800", 0xFF8800),
        ("FF8800", 0xFF8800),
        ("#f80", 0xFF8800),
        ("  #000000 ", 0x000000),
    ],
)
def test_parse_color(text: str, expected: int) -> None:
    assert parse_color(text) == expected


@pytest.mark.parametrize("text", ["", "#", "#12", "#1234", "#gggggg", "purple", "#ff88001"])
def test_parse_color_rejects_garbage(text: str) -> None:
    with pytest.raises(ValueError, match="Invalid color"):
        parse_color(text)


def test_format_color() -> None:
    assert format_color(0xFF8800) == "#ff8800"
    assert format_color(0) == "#000000"


def test_color_name() -> None:
    assert color_name(0xC0C0C0) == "white"
    assert color_name(0x808080) == "gray"
    assert color_name(0x123456) is None
