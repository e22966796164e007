"""Elemental damage and resistance model."""
from __future__ import annotations

import math

from battlecore.domain.entities import Combatant

NEUTRAL_RESISTANCE = 1.0


def resistance_for(target: Combatant, damage_type: str) -> float:
    return target.resistances.get(damage_type, NEUTRAL_RESISTANCE)


def apply_damage(raw_amount: int, damage_type: str, target: Combatant) -> int:
    """Scale `raw_amount` by the target's resistance and floor the result.

    The target is not modified; callers subtract the returned value.
    """
    return math.floor(raw_amount * resistance_for(target, damage_type))
