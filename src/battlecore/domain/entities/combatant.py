"""Combatant runtime model shared by players, monsters and guards."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List

from battlecore.core.types import CombatantKind
from battlecore.domain.defs import SkillDef

from .item import Item
from .stats import ResourcePool, StatModifier

if TYPE_CHECKING:
    from battlecore.domain.status_effects import StatusEffect


@dataclass(slots=True)
class Combatant:
    """Represents any participant in a fight."""

    name: str
    level: int
    kind: CombatantKind
    health: ResourcePool
    mana: ResourcePool
    stamina: ResourcePool
    attack_rolls: int = 1
    defense_rolls: int = 1
    stat_mod: StatModifier = field(default_factory=StatModifier)
    effects: List["StatusEffect"] = field(default_factory=list)
    resistances: Dict[str, float] = field(default_factory=dict)
    skills: List[SkillDef] = field(default_factory=list)
    inventory: List[Item] = field(default_factory=list)
    equipment: Dict[int, Item] = field(default_factory=dict)
    experience: int = 0
    is_boss: bool = False
    is_skill_guardian: bool = False
    guarded_skill: SkillDef | None = None
    monster_kills: int = 0

    @property
    def is_alive(self) -> bool:
        return self.health.current > 0

    @property
    def is_monster(self) -> bool:
        return self.kind == "monster"

    @property
    def is_special_opponent(self) -> bool:
        """Skill guardians and bosses let village guards join the fight."""
        return self.is_boss or self.is_skill_guardian

    def can_afford(self, skill: SkillDef) -> bool:
        return self.mana.current >= skill.mana_cost and self.stamina.current >= skill.stamina_cost

    def find_skill(self, name: str) -> SkillDef | None:
        for skill in self.skills:
            if skill.is_named(name):
                return skill
        return None

    def first_heal_item_index(self) -> int | None:
        for index, item in enumerate(self.inventory):
            if item.is_heal_consumable:
                return index
        return None
