"""The closed palette of block colors."""

from __future__ import annotations

from enum import Enum


class Color(str, Enum):
    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    PURPLE = "purple"
    ORANGE = "orange"

    def __str__(self) -> str:
        return self.value
