"""Six-sided dice helpers."""
from __future__ import annotations

from battlecore.core.rng import RNG

DIE_SIDES = 6


def roll_die(rng: RNG) -> int:
    """Roll a single d6."""
    return rng.randint(1, DIE_SIDES)


def sum_rolls(rng: RNG, count: int) -> int:
    """Sum `count` independent d6 rolls; non-positive counts yield 0."""
    return sum(roll_die(rng) for _ in range(max(0, count)))
