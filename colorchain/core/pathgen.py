"""Randomized Hamiltonian path construction over grid graphs."""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Set

from colorchain.core.grid import Position, all_positions, neighbors

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 10
STEP_LIMIT = 20_000


class HamiltonianPathGenerator:
    """Builds a path that visits every cell of a ``width`` x ``height`` grid once.

    Each attempt starts from a random cell and runs a depth-first search that
    tries the neighbour with the fewest onward moves first, breaking ties at
    random, so repeated calls give different paths. On grids with an odd cell
    count only cells of the majority checkerboard color (even ``x + y``) can
    begin a path, so starts are drawn from those. The search uses an explicit
    stack and gives up after ``step_limit`` expansions; once ``max_attempts``
    attempts have failed a serpentine sweep is returned instead. ``generate``
    therefore always returns a complete path.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        max_attempts: int = MAX_ATTEMPTS,
        step_limit: int = STEP_LIMIT,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._max_attempts = max(0, int(max_attempts))
        self._step_limit = max(1, int(step_limit))

    def generate(self, width: int, height: int) -> List[Position]:
        if width < 1 or height < 1:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

        cells = all_positions(width, height)
        starts = self._start_cells(cells)
        for attempt in range(self._max_attempts):
            start = self._rng.choice(starts)
            path = self.search_from(start, width, height)
            if len(path) == len(cells):
                return path
            logger.debug("Path attempt %d from (%d, %d) failed", attempt + 1, start.x, start.y)

        logger.info("Falling back to serpentine path for %dx%d grid", width, height)
        return self.serpentine(width, height)

    def search_from(self, start: Position, width: int, height: int) -> List[Position]:
        """Depth-first search from ``start``; returns ``[]`` when no full path was found."""
        total = width * height
        path: List[Position] = [start]
        visited: Set[Position] = {start}
        # One pending-candidates list per cell on the path.
        stack: List[List[Position]] = [self._candidates(start, width, height, visited)]
        steps = 0

        while stack:
            if len(path) == total:
                return path
            steps += 1
            if steps > self._step_limit:
                return []

            pending = stack[-1]
            if pending:
                nxt = pending.pop()
                if nxt in visited:
                    continue
                visited.add(nxt)
                path.append(nxt)
                stack.append(self._candidates(nxt, width, height, visited))
            else:
                # dead end, backtrack
                stack.pop()
                visited.discard(path.pop())

        return []

    def serpentine(self, width: int, height: int) -> List[Position]:
        """Boustrophedon sweep anchored at a random corner, row- or column-major."""
        path: List[Position] = []
        if self._rng.random() < 0.5:
            for y in range(height):
                xs = range(width) if y % 2 == 0 else range(width - 1, -1, -1)
                path.extend(Position(x, y) for x in xs)
        else:
            for x in range(width):
                ys = range(height) if x % 2 == 0 else range(height - 1, -1, -1)
                path.extend(Position(x, y) for y in ys)

        flip_x = self._rng.random() < 0.5
        flip_y = self._rng.random() < 0.5
        return [
            Position(
                width - 1 - p.x if flip_x else p.x,
                height - 1 - p.y if flip_y else p.y,
            )
            for p in path
        ]

    @staticmethod
    def _reachable(origin: Position, width: int, height: int, visited: Set[Position]) -> int:
        """Number of unvisited cells connected to ``origin`` through unvisited cells."""
        seen = {origin}
        todo = [origin]
        while todo:
            current = todo.pop()
            for nxt in neighbors(current, width, height):
                if nxt not in visited and nxt not in seen:
                    seen.add(nxt)
                    todo.append(nxt)
        return len(seen)

    @staticmethod
    def _start_cells(cells: List[Position]) -> List[Position]:
        if len(cells) % 2 == 0:
            return cells
        return [p for p in cells if (p.x + p.y) % 2 == 0]

    def _candidates(
        self, pos: Position, width: int, height: int, visited: Set[Position]
    ) -> List[Position]:
        """Unvisited neighbours of ``pos``, ordered so that ``pop()`` yields the
        one with the fewest unvisited neighbours of its own (Warnsdorff's rule).

        Returns ``[]`` when the path cannot be completed from ``pos``: a
        neighbour is reachable only from ``pos`` but is not the last unvisited
        cell, or the unvisited cells have split into separate regions.
        """
        options = [p for p in neighbors(pos, width, height) if p not in visited]
        self._rng.shuffle(options)

        def onward(p: Position) -> int:
            return sum(1 for q in neighbors(p, width, height) if q not in visited)

        degrees = {p: onward(p) for p in options}
        remaining = width * height - len(visited)
        if remaining > 1 and any(d == 0 for d in degrees.values()):
            return []
        if options and self._reachable(options[0], width, height, visited) < remaining:
            return []
        # stable sort keeps the shuffled order among ties
        options.sort(key=degrees.__getitem__, reverse=True)
        return options
