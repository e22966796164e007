"""Factory helpers for runtime entities."""

from .combatant_factory import assign_monster_skills, make_combatant, make_guard, neutral_resistances
from .item_factory import create_health_potion, create_skill_scroll, skill_scroll_value

__all__ = [
    "assign_monster_skills",
    "create_health_potion",
    "create_skill_scroll",
    "make_combatant",
    "make_guard",
    "neutral_resistances",
    "skill_scroll_value",
]
