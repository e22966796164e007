"""Item runtime models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from battlecore.domain.defs import SkillDef

from .stats import StatModifier

ItemType = Literal["equipment", "consumable", "skill_scroll"]


@dataclass(slots=True)
class ConsumableEffect:
    effect_type: str
    value: int
    duration: int = 0


@dataclass(slots=True)
class SkillScroll:
    skill: SkillDef
    can_be_crafted: bool = True
    crafting_value: int = 0


@dataclass(slots=True)
class Item:
    """Equipment, consumable or skill scroll carried by a combatant."""

    name: str
    item_type: ItemType = "equipment"
    slot: int = -1
    rarity: int = 1
    stat_mod: StatModifier = field(default_factory=StatModifier)
    cp: int = 0
    consumable: ConsumableEffect | None = None
    skill_scroll: SkillScroll | None = None

    @property
    def is_equipment(self) -> bool:
        return self.item_type == "equipment"

    @property
    def is_heal_consumable(self) -> bool:
        return (
            self.item_type == "consumable"
            and self.consumable is not None
            and self.consumable.effect_type == "heal"
        )
