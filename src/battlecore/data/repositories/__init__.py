"""Repository exports."""

from .items_repo import ItemsRepository
from .monster_skills_repo import LevelledSkill, MonsterSkillsRepository
from .skills_repo import SkillsRepository

__all__ = [
    "ItemsRepository",
    "LevelledSkill",
    "MonsterSkillsRepository",
    "SkillsRepository",
]
