# topmark:header:start
#
#   project      : SgrMark
#   file         : test_quantize.py
#   file_relpath : tests/core/test_quantize.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the color quantizers."""

from __future__ import annotations

import pytest
from hypothesis import given

from sgrmark.core.quantize import (
    clamp,
    rgb_to_4bit,
    rgb_to_8bit,
    rgb_to_24bit,
    sgr_code_4bit,
    split_rgb,
)
from tests.strategies_sgrmark import s_channel


@pytest.mark.parametrize(
    ("gray", "expected"),
    [(0, 0), (63, 0), (64, 8), (128, 8), (129, 7), (192, 7), (193, 15), (255, 15)],
)
def test_4bit_grays(gray: int, expected: int) -> None:
    assert rgb_to_4bit(gray, gray, gray) == expected


@pytest.mark.parametrize(
    ("rgb", "expected"),
    [
        ((128, 0, 0), 1),  # dark red
        ((255, 0, 0), 1),  # average 85 stays in the standard range
        ((0, 0, 255), 4),
        ((255, 136, 0), 11),  # orange: red + green, bright
        ((255, 255, 0), 11),
        ((0, 255, 255), 14),
        ((10, 20, 30), 6),  # green and blue reach the average
    ],
)
def test_4bit_colors(rgb: tuple[int, int, int], expected: int) -> None:
    assert rgb_to_4bit(*rgb) == expected


@pytest.mark.parametrize(
    ("gray", "expected"),
    [(0, 232), (9, 232), (10, 233), (128, 244), (192, 251), (230, 255), (255, 255)],
)
def test_8bit_grays(gray: int, expected: int) -> None:
    assert rgb_to_8bit(gray, gray, gray) == expected


@pytest.mark.parametrize(
    ("rgb", "expected"),
    [
        ((255, 0, 0), 196),
        ((128, 0, 0), 124),
        ((0, 0, 255), 21),
        ((255, 136, 0), 214),
        ((41, 42, 84), 16 + 0 + 6 + 2),
    ],
)
def test_8bit_cube(rgb: tuple[int, int, int], expected: int) -> None:
    assert rgb_to_8bit(*rgb) == expected


def test_24bit_is_identity() -> None:
    assert rgb_to_24bit(1, 2, 3) == (1, 2, 3)


def test_split_rgb() -> None:
    assert split_rgb(0xFF8800) == (255, 136, 0)


@pytest.mark.parametrize(
    ("base", "index", "expected"),
    [(30, 0, 30), (30, 7, 37), (30, 8, 90), (30, 15, 97), (40, 1, 41), (40, 11, 103)],
)
def test_sgr_code_4bit(base: int, index: int, expected: int) -> None:
    assert sgr_code_4bit(base, index) == expected


def test_clamp() -> None:
    assert clamp(-1, 0, 5) == 0
    assert clamp(3, 0, 5) == 3
    assert clamp(6, 0, 5) == 5


@given(r=s_channel, g=s_channel, b=s_channel)
def test_quantizers_are_total_and_deterministic(r: int, g: int, b: int) -> None:
    n4: int = rgb_to_4bit(r, g, b)
    n8: int = rgb_to_8bit(r, g, b)
    assert 0 <= n4 <= 15
    assert 16 <= n8 <= 255
    assert rgb_to_4bit(r, g, b) == n4
    assert rgb_to_8bit(r, g, b) == n8
    assert rgb_to_24bit(r, g, b) == (r, g, b)
