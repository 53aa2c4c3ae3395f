"""Tests for colorchain.ui.colors – block palette and color blending."""

from __future__ import annotations

import pytest

from colorchain.core.colors import Color
from colorchain.ui.colors import BLOCK_COLORS, BLOCK_COLORS_LIGHT, Palette, blend_hex, block_hex


# ===========================================================================
# Palette tables
# ===========================================================================

class TestBlockColors:
    @pytest.mark.parametrize("color", list(Color))
    def test_every_color_has_hex(self, color):
        assert BLOCK_COLORS[color].startswith("#")
        assert len(BLOCK_COLORS[color]) == 7
        assert len(BLOCK_COLORS_LIGHT[color]) == 7

    def test_palette_is_hex(self):
        assert Palette.PRIMARY.startswith("#")
        assert Palette.BOARD_BG.startswith("#")

    def test_color_str(self):
        assert str(Color.PURPLE) == "purple"


class TestBlockHex:
    def test_unselected_is_base(self):
        assert block_hex(Color.RED) == BLOCK_COLORS[Color.RED]

    def test_selected_is_lighter(self):
        base = int(BLOCK_COLORS[Color.BLUE][1:3], 16)
        light = int(block_hex(Color.BLUE, selected=True)[1:3], 16)
        assert light > base


# ===========================================================================
# blend_hex
# ===========================================================================

class TestBlendHex:
    def test_t_zero_returns_a(self):
        assert blend_hex("#FF0000", "#0000FF", 0.0) == "#FF0000"

    def test_t_one_returns_b(self):
        assert blend_hex("#FF0000", "#0000FF", 1.0) == "#0000FF"

    def test_midpoint(self):
        result = blend_hex("#000000", "#FFFFFF", 0.5)
        assert result == "#7F7F7F"

    def test_uppercase_output(self):
        assert blend_hex("#ff0000", "#ff0000", 0.5) == "#FF0000"

    @pytest.mark.parametrize("t, expected", [(-1.0, "#FF0000"), (2.0, "#0000FF")])
    def test_clamped(self, t, expected):
        assert blend_hex("#FF0000", "#0000FF", t) == expected

    @pytest.mark.parametrize(
        "a, b",
        [("FF0000", "#0000FF"), ("#FFF", "#000000"), ("#GGHHII", "#000000"), ("#FF0000", "bad"), ("", "")],
    )
    def test_invalid_returns_a(self, a, b):
        assert blend_hex(a, b, 0.5) == a

    def test_whitespace_tolerated(self):
        assert blend_hex("  #FF0000 ", "#0000FF", 0.0) == "#FF0000"
