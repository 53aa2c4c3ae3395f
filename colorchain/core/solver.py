"""Search helpers over generated levels: solution finding and color regions."""

from __future__ import annotations

from collections import deque
from typing import List, Optional, Sequence, Set

from colorchain.core.grid import adjacent, neighbors
from colorchain.core.levels import Level
from colorchain.core.pattern import collapse_runs, extend_pattern

SOLVER_STEP_LIMIT = 200_000


def connected_blocks(level: Level, block_id: int) -> List[int]:
    """Ids of the same-colored region containing ``block_id`` (breadth-first order)."""
    start = level.block(block_id)
    if start is None:
        return []
    seen = {start.id}
    order = [start.id]
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for pos in neighbors(current.position, level.width, level.height):
            other = level.block_at(pos)
            if other.id not in seen and other.color == current.color:
                seen.add(other.id)
                order.append(other.id)
                queue.append(other)
    return order


def _is_prefix(selected: Sequence, target: Sequence) -> bool:
    return len(selected) <= len(target) and list(target[: len(selected)]) == list(selected)


def find_solution(
    level: Level,
    prefix: Sequence[int] = (),
    step_limit: int = SOLVER_STEP_LIMIT,
) -> Optional[List[int]]:
    """Extend ``prefix`` to a full walk whose transition pattern equals the target.

    Returns the complete list of block ids, or None when ``prefix`` cannot be
    extended or the search runs out of steps.
    """
    total = len(level.blocks)
    path = list(prefix)
    visited: Set[int] = set(path)
    if len(visited) != len(path) or any(level.block(i) is None for i in path):
        return None
    for a, b in zip(path, path[1:]):
        if not adjacent(level.blocks[a].position, level.blocks[b].position):
            return None

    pattern = collapse_runs([level.blocks[i].color for i in path])
    if not _is_prefix(pattern, level.pattern):
        return None
    if len(path) == total:
        return path if pattern == list(level.pattern) else None

    def options(tail: Optional[int]) -> List[int]:
        if tail is None:
            return [b.id for b in level.blocks]
        pos = level.blocks[tail].position
        return [level.block_at(p).id for p in neighbors(pos, level.width, level.height)]

    # Each frame: (candidate ids still to try, pattern of the path up to this frame).
    stack = [(options(path[-1] if path else None), pattern)]
    steps = 0
    while stack:
        steps += 1
        if steps > step_limit:
            return None
        pending, base = stack[-1]
        if not pending:
            stack.pop()
            if len(path) > len(prefix):
                visited.discard(path.pop())
            continue

        candidate = pending.pop()
        if candidate in visited:
            continue
        extended = extend_pattern(base, level.blocks[candidate].color)
        if not _is_prefix(extended, level.pattern):
            continue

        path.append(candidate)
        visited.add(candidate)
        if len(path) == total:
            if extended == list(level.pattern):
                return path
            visited.discard(path.pop())
            continue
        stack.append((options(candidate), extended))

    return None


def has_valid_solution(level: Level, step_limit: int = SOLVER_STEP_LIMIT) -> bool:
    return find_solution(level, step_limit=step_limit) is not None
