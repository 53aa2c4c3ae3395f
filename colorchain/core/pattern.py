"""Transition patterns: collapsing color runs and checking moves against a target.

A *transition pattern* is a color sequence with consecutive repeats removed,
so ``[red, red, blue, blue, red]`` becomes ``[red, blue, red]``. Levels carry
the transition pattern of the path they were generated from, and the player's
selection is projected the same way.
"""

from __future__ import annotations

from typing import List, Sequence

from colorchain.core.colors import Color


def collapse_runs(colors: Sequence[Color]) -> List[Color]:
    """Drop every color equal to its immediate predecessor."""
    result: List[Color] = []
    for color in colors:
        result = extend_pattern(result, color)
    return result


def extend_pattern(pattern: Sequence[Color], color: Color) -> List[Color]:
    """Return ``pattern`` with ``color`` appended unless it repeats the last entry."""
    extended = list(pattern)
    if not extended or extended[-1] != color:
        extended.append(color)
    return extended


def derive_pattern(sequence: Sequence[Color]) -> List[Color]:
    """Target pattern for a color sequence read along a path.

    Always at least two entries long for a non-empty input: a single-run
    sequence gets a second distinct color from the sequence when one exists,
    otherwise its only color is doubled.
    """
    transitions = collapse_runs(sequence)
    if len(transitions) != 1:
        return transitions

    first = transitions[0]
    for color in sequence:
        if color != first:
            return [first, color]
    return [first, first]


def is_valid_next_color(selected: Sequence[Color], target: Sequence[Color], color: Color) -> bool:
    """Whether selecting a block of ``color`` keeps the selection on the target pattern.

    Repeating the last selected color is always fine. A new color must be the
    one following the current position in ``target``, read cyclically so a
    short pattern can wrap around a longer selection.
    """
    if not target:
        return False
    if not selected:
        return color == target[0]
    if color == selected[-1]:
        return True
    index = (len(selected) - 1) % len(target)
    return color == target[(index + 1) % len(target)]


def is_pattern_complete(selected: Sequence[Color], target: Sequence[Color]) -> bool:
    """Exact match: same length and element-wise equal. Empty patterns never match."""
    if not target or not selected:
        return False
    if len(selected) != len(target):
        return False
    return all(a == b for a, b in zip(selected, target))
