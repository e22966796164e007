"""Factories for loot items."""
from __future__ import annotations

from typing import Literal

from battlecore.data.repositories import ItemsRepository
from battlecore.domain.defs import SkillDef
from battlecore.domain.entities import ConsumableEffect, Item, SkillScroll
from battlecore.services.errors import FactoryError

PotionSize = Literal["small", "medium", "large", "standard"]

_POTION_IDS: dict[str, str] = {
    "small": "health_potion_small",
    "medium": "health_potion_medium",
    "large": "health_potion_large",
    "standard": "health_potion",
}


def create_health_potion(size: PotionSize, items_repo: ItemsRepository) -> Item:
    """Build a heal consumable from its definition."""
    item_id = _POTION_IDS.get(size, _POTION_IDS["standard"])
    try:
        item_def = items_repo.get(item_id)
    except KeyError as exc:
        raise FactoryError(f"Unknown potion definition '{item_id}'.") from exc
    return Item(
        name=item_def.name,
        item_type="consumable",
        slot=-1,
        rarity=1,
        consumable=ConsumableEffect(effect_type=item_def.effect_type, value=item_def.value),
    )


def skill_scroll_value(skill: SkillDef) -> int:
    value = 10 + skill.damage + skill.mana_cost + skill.stamina_cost
    if skill.effect.kind != "none":
        value += skill.effect.potency * skill.effect.duration
    return value


def create_skill_scroll(skill: SkillDef) -> Item:
    return Item(
        name=f"{skill.name} Scroll",
        item_type="skill_scroll",
        slot=-1,
        rarity=3,
        skill_scroll=SkillScroll(skill=skill, can_be_crafted=True, crafting_value=skill_scroll_value(skill)),
    )
