"""Runtime entity exports."""

from .combatant import Combatant
from .guard import GuardUnit
from .item import ConsumableEffect, Item, SkillScroll
from .stats import ResourcePool, StatModifier
from .village import Villager, Village

__all__ = [
    "Combatant",
    "ConsumableEffect",
    "GuardUnit",
    "Item",
    "ResourcePool",
    "SkillScroll",
    "StatModifier",
    "Villager",
    "Village",
]
