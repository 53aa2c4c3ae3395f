from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from colorchain.core.colors import Color
from colorchain.core.config import GameConfig, load_config
from colorchain.core.grid import Position
from colorchain.core.pathgen import HamiltonianPathGenerator
from colorchain.core.pattern import derive_pattern


@dataclass
class Block:
    id: int
    color: Color
    position: Position
    selected: bool = False


@dataclass
class Level:
    """A generated board. Blocks are stored row-major, so ``blocks[i].id == i``."""

    id: int
    width: int
    height: int
    colors: List[Color]
    pattern: List[Color]
    blocks: List[Block]
    solution: List[Position] = field(default_factory=list)
    is_completed: bool = False
    is_unlocked: bool = False

    def block(self, block_id: int) -> Optional[Block]:
        if 0 <= block_id < len(self.blocks):
            return self.blocks[block_id]
        return None

    def block_at(self, pos: Position) -> Block:
        return self.blocks[pos.y * self.width + pos.x]

    def colors_along(self, path: List[Position]) -> List[Color]:
        return [self.block_at(pos).color for pos in path]


class LevelFactory:
    """Creates solvable levels for a level id.

    The board is colored at random first; a Hamiltonian path is then laid over
    it and the target pattern is read off that path, so following the path is
    always a valid solution.
    """

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None) -> None:
        self._config = config if config is not None else load_config()
        self._rng = rng if rng is not None else random.Random()
        self._paths = HamiltonianPathGenerator(
            rng=self._rng,
            max_attempts=self._config.max_attempts,
            step_limit=self._config.step_limit,
        )

    @property
    def config(self) -> GameConfig:
        return self._config

    def grid_size_for(self, level_id: int) -> Tuple[int, int]:
        sizes = self._config.grid_sizes
        index = min((level_id - 1) // 5, len(sizes) - 1)
        return sizes[index]

    def active_colors(self, level_id: int) -> List[Color]:
        count = min(2 + level_id // 8, len(self._config.colors))
        return list(self._config.colors[:count])

    def create_level(self, level_id: int) -> Level:
        if level_id < 1:
            raise ValueError(f"Level ids start at 1, got {level_id}")

        width, height = self.grid_size_for(level_id)
        colors = self.active_colors(level_id)
        blocks = self._generate_blocks(width, height, colors)

        level = Level(
            id=level_id,
            width=width,
            height=height,
            colors=colors,
            pattern=[],
            blocks=blocks,
            is_unlocked=level_id == 1,
        )
        level.solution = self._paths.generate(width, height)
        level.pattern = derive_pattern(level.colors_along(level.solution))
        return level

    def _generate_blocks(self, width: int, height: int, colors: List[Color]) -> List[Block]:
        blocks = [
            Block(id=y * width + x, color=self._rng.choice(colors), position=Position(x, y))
            for y in range(height)
            for x in range(width)
        ]
        self._ensure_two_colors(blocks, colors)
        return blocks

    def _ensure_two_colors(self, blocks: List[Block], colors: List[Color]) -> None:
        used = {block.color for block in blocks}
        if len(used) != 1 or len(colors) < 2:
            return
        current = blocks[0].color
        others = [c for c in colors if c != current]
        count = max(1, len(blocks) // 4)
        for index in self._rng.sample(range(len(blocks)), count):
            blocks[index].color = self._rng.choice(others)
