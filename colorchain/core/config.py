from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

import yaml

from colorchain.core.colors import Color
from colorchain.core.pathgen import MAX_ATTEMPTS, STEP_LIMIT

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "data" / "config.yaml"


@dataclass(frozen=True)
class GameConfig:
    max_levels: int
    colors: Tuple[Color, ...]
    grid_sizes: Tuple[Tuple[int, int], ...]
    max_attempts: int = MAX_ATTEMPTS
    step_limit: int = STEP_LIMIT


def load_config(path: Optional[Path] = None) -> GameConfig:
    """Read and validate the game configuration YAML."""
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    if not raw or not isinstance(raw, dict):
        raise ValueError(f"{config_path.name}: expected a YAML mapping")

    max_levels = raw.get("max_levels")
    if not isinstance(max_levels, int) or max_levels < 1:
        raise ValueError(f"{config_path.name}: 'max_levels' must be a positive integer")

    raw_colors = raw.get("colors")
    if not raw_colors or not isinstance(raw_colors, list):
        raise ValueError(f"{config_path.name}: missing or invalid 'colors'")
    colors = []
    for name in raw_colors:
        try:
            colors.append(Color(str(name).strip().lower()))
        except ValueError:
            raise ValueError(f"{config_path.name}: unknown color {name!r}") from None
    if len(set(colors)) != len(colors):
        raise ValueError(f"{config_path.name}: duplicate entries in 'colors'")

    raw_sizes = raw.get("grid_sizes")
    if not raw_sizes or not isinstance(raw_sizes, list):
        raise ValueError(f"{config_path.name}: missing or invalid 'grid_sizes'")
    sizes = []
    for entry in raw_sizes:
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise ValueError(f"{config_path.name}: grid size {entry!r} is not a [width, height] pair")
        width, height = entry
        if not isinstance(width, int) or not isinstance(height, int) or width < 1 or height < 1:
            raise ValueError(f"{config_path.name}: grid size {entry!r} must be positive integers")
        sizes.append((width, height))

    generation = raw.get("generation") or {}
    if not isinstance(generation, dict):
        raise ValueError(f"{config_path.name}: 'generation' must be a mapping")

    return GameConfig(
        max_levels=max_levels,
        colors=tuple(colors),
        grid_sizes=tuple(sizes),
        max_attempts=int(generation.get("max_attempts", MAX_ATTEMPTS)),
        step_limit=int(generation.get("step_limit", STEP_LIMIT)),
    )
