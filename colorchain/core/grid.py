"""Orthogonal adjacency queries over a rectangular grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

# up, right, down, left
DIRECTIONS = ((0, -1), (1, 0), (0, 1), (-1, 0))


@dataclass(frozen=True)
class Position:
    x: int
    y: int


def in_bounds(pos: Position, width: int, height: int) -> bool:
    return 0 <= pos.x < width and 0 <= pos.y < height


def neighbors(pos: Position, width: int, height: int) -> List[Position]:
    """Return the orthogonal neighbours of ``pos`` that lie inside the grid."""
    result: List[Position] = []
    for dx, dy in DIRECTIONS:
        candidate = Position(pos.x + dx, pos.y + dy)
        if in_bounds(candidate, width, height):
            result.append(candidate)
    return result


def adjacent(a: Position, b: Position) -> bool:
    """True when ``a`` and ``b`` are exactly one orthogonal step apart."""
    return abs(a.x - b.x) + abs(a.y - b.y) == 1


def all_positions(width: int, height: int) -> List[Position]:
    """Every cell of the grid in row-major order."""
    return [Position(x, y) for y in range(height) for x in range(width)]
