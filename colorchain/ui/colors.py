"""Theme colors and color utilities for the UI."""

from typing import Optional, Tuple

from colorchain.core.colors import Color

BLOCK_COLORS = {
    Color.RED: "#e74c3c",
    Color.BLUE: "#3498db",
    Color.GREEN: "#2ecc71",
    Color.YELLOW: "#f1c40f",
    Color.PURPLE: "#9b59b6",
    Color.ORANGE: "#e67e22",
}

BLOCK_COLORS_LIGHT = {
    Color.RED: "#fadbd8",
    Color.BLUE: "#d6eaf8",
    Color.GREEN: "#d5f4e6",
    Color.YELLOW: "#fef9e7",
    Color.PURPLE: "#e8daef",
    Color.ORANGE: "#fae5d3",
}


class Palette:
    """Window chrome colors."""

    BG_TOP = "#1f2a44"
    BG_BOTTOM = "#111827"

    PRIMARY = "#38bdf8"
    PRIMARY_DARK = "#0284c7"

    BOARD_BG = "#0f172a"
    CELL_BORDER = "#334155"
    SELECTION_LINE = "#f8fafc"
    HINT = "#facc15"

    TEXT_PRIMARY = "#f1f5f9"
    TEXT_MUTED = "#94a3b8"


def _parse_hex(value: str) -> Optional[Tuple[int, int, int]]:
    value = value.strip()
    if len(value) != 7 or not value.startswith("#"):
        return None
    try:
        return int(value[1:3], 16), int(value[3:5], 16), int(value[5:7], 16)
    except ValueError:
        return None


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b. Invalid input returns a unchanged."""
    start = _parse_hex(a)
    end = _parse_hex(b)
    if start is None or end is None:
        return a
    t = max(0.0, min(1.0, float(t)))
    mixed = (int(s + (e - s) * t) for s, e in zip(start, end))
    return "#" + "".join(f"{channel:02X}" for channel in mixed)


def block_hex(color: Color, selected: bool = False) -> str:
    """Fill for a block; selected blocks are drawn lighter."""
    base = BLOCK_COLORS[color]
    return blend_hex(base, "#FFFFFF", 0.45) if selected else base
