"""Shared fixtures: hand-drawn boards and sessions bound to them."""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

import pytest

from colorchain.core.colors import Color
from colorchain.core.config import GameConfig
from colorchain.core.grid import Position
from colorchain.core.levels import Block, Level, LevelFactory
from colorchain.core.pattern import derive_pattern
from colorchain.core.session import GameSession, GameState

LETTERS: Dict[str, Color] = {
    "r": Color.RED,
    "b": Color.BLUE,
    "g": Color.GREEN,
    "y": Color.YELLOW,
    "p": Color.PURPLE,
    "o": Color.ORANGE,
}

TEST_CONFIG = GameConfig(
    max_levels=3,
    colors=(Color.RED, Color.BLUE, Color.GREEN),
    grid_sizes=((2, 2), (3, 3)),
)


def level_from_rows(rows: List[str], pattern: Optional[List[Color]] = None, level_id: int = 1) -> Level:
    """Build a level from rows of color letters, e.g. ``["rr", "bb"]``."""
    height = len(rows)
    width = len(rows[0])
    blocks = [
        Block(id=y * width + x, color=LETTERS[ch], position=Position(x, y))
        for y, row in enumerate(rows)
        for x, ch in enumerate(row)
    ]
    if pattern is None:
        pattern = derive_pattern([b.color for b in blocks])
    return Level(
        id=level_id,
        width=width,
        height=height,
        colors=sorted({b.color for b in blocks}, key=list(Color).index),
        pattern=list(pattern),
        blocks=blocks,
        is_unlocked=level_id == 1,
    )


class FixedLevelFactory(LevelFactory):
    """Factory that hands out pre-built levels instead of generating them."""

    def __init__(self, levels: Dict[int, Level], config: GameConfig = TEST_CONFIG) -> None:
        super().__init__(config=config)
        self._levels = levels
        self.created: List[int] = []

    def create_level(self, level_id: int) -> Level:
        self.created.append(level_id)
        return self._levels[level_id]


@pytest.fixture()
def make_level() -> Callable[..., Level]:
    return level_from_rows


@pytest.fixture()
def session_for() -> Callable[..., GameSession]:
    """Return a builder for a session with ``level`` already loaded as level 1."""

    def _build(level: Level, **kwargs) -> GameSession:
        state = kwargs.pop("state", None) or GameState(highest_unlocked_level=max(1, level.id))
        session = GameSession(FixedLevelFactory({level.id: level}), state=state, **kwargs)
        assert session.load_level(level.id)
        return session

    return _build
