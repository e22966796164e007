"""Domain definition exports."""

from .effect_def import EffectDef
from .item_def import ItemDef
from .skill_def import SkillDef

__all__ = [
    "EffectDef",
    "ItemDef",
    "SkillDef",
]
