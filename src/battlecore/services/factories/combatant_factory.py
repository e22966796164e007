"""Helpers for assembling combatant records handed to the engine."""
from __future__ import annotations

from typing import Iterable, Mapping

from battlecore.core.types import DAMAGE_TYPES, CombatantKind
from battlecore.data.repositories import MonsterSkillsRepository
from battlecore.domain.defs import SkillDef
from battlecore.domain.entities import Combatant, GuardUnit, Item, ResourcePool
from battlecore.domain.equipment import calculate_item_mods, equip_best_item
from battlecore.services.errors import FactoryError


def neutral_resistances(overrides: Mapping[str, float] | None = None) -> dict[str, float]:
    resistances = {damage_type: 1.0 for damage_type in DAMAGE_TYPES}
    for damage_type, value in (overrides or {}).items():
        if damage_type not in resistances:
            raise FactoryError(f"Unknown damage type '{damage_type}'.")
        resistances[damage_type] = value
    return resistances


def make_combatant(
    name: str,
    *,
    level: int = 1,
    kind: CombatantKind = "monster",
    health: int,
    mana: int = 0,
    stamina: int = 0,
    attack_rolls: int = 1,
    defense_rolls: int = 1,
    skills: Iterable[SkillDef] = (),
    resistances: Mapping[str, float] | None = None,
    equipment: Iterable[Item] = (),
    inventory: Iterable[Item] = (),
) -> Combatant:
    """
    Assemble a full-health combatant.

    Equipment is slotted with the keep-if-stronger rule and its modifiers
    folded into the stat modifier and maximum health.
    """

    if health <= 0:
        raise FactoryError(f"Combatant '{name}' needs positive health, got {health}.")
    combatant = Combatant(
        name=name,
        level=level,
        kind=kind,
        health=ResourcePool.full(health),
        mana=ResourcePool.full(mana),
        stamina=ResourcePool.full(stamina),
        attack_rolls=attack_rolls,
        defense_rolls=defense_rolls,
        resistances=neutral_resistances(resistances),
        skills=list(skills),
        inventory=list(inventory),
    )
    for item in equipment:
        equip_best_item(item, combatant.equipment, combatant.inventory)
    combatant.stat_mod = calculate_item_mods(combatant.equipment)
    if combatant.stat_mod.max_health:
        combatant.health = ResourcePool.full(health + combatant.stat_mod.max_health)
    return combatant


def make_guard(
    name: str,
    *,
    level: int = 1,
    health: int,
    attack_rolls: int = 1,
    defense_rolls: int = 1,
    attack_bonus: int = 0,
) -> GuardUnit:
    combatant = make_combatant(
        name,
        level=level,
        kind="guard",
        health=health,
        attack_rolls=attack_rolls,
        defense_rolls=defense_rolls,
    )
    return GuardUnit(combatant=combatant, attack_bonus=attack_bonus)


def assign_monster_skills(category: str, level: int, repo: MonsterSkillsRepository) -> list[SkillDef]:
    """Return the skills a monster of `category` knows at `level`."""
    return repo.skills_for(category, level)
