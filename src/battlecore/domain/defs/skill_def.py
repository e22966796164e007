"""Skill definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field

from battlecore.core.types import DamageType

from .effect_def import EffectDef


@dataclass(slots=True)
class SkillDef:
    """Describes a combat skill.

    `damage` is signed: positive values hurt the opponent, negative values
    heal the caster and zero marks a pure buff.
    """

    name: str
    mana_cost: int = 0
    stamina_cost: int = 0
    damage: int = 0
    damage_type: DamageType = "physical"
    effect: EffectDef = field(default_factory=EffectDef)
    description: str = ""

    @property
    def is_offensive(self) -> bool:
        return self.damage > 0

    def is_named(self, name: str) -> bool:
        return self.name.casefold() == name.casefold()
