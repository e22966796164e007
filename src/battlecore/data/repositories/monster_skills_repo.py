"""Monster skill pool repository."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from battlecore.data.errors import DataReferenceError, DataValidationError
from battlecore.data.repositories.base import RepositoryBase
from battlecore.data.repositories.skills_repo import SKILL_FIELDS, parse_skill
from battlecore.domain.defs import SkillDef

DEFAULT_CATEGORY = "humanoid"


@dataclass(slots=True)
class LevelledSkill:
    min_level: int
    skill: SkillDef


class MonsterSkillsRepository(RepositoryBase[Tuple[LevelledSkill, ...]]):
    """Loads per-category monster skill pools."""

    def __init__(self, base_path=None) -> None:
        super().__init__("monster_skills.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, Tuple[LevelledSkill, ...]]:
        pools: Dict[str, Tuple[LevelledSkill, ...]] = {}
        for category, entries in raw.items():
            if not isinstance(entries, list):
                raise DataValidationError(f"monster skill pool '{category}' must be a list.")
            pool: List[LevelledSkill] = []
            for index, entry in enumerate(entries):
                context = f"monster skill pool '{category}'[{index}]"
                payload = self._require_mapping(entry, context)
                self._assert_exact_fields(payload, SKILL_FIELDS | {"min_level"}, context)
                pool.append(
                    LevelledSkill(
                        min_level=self._require_int(payload["min_level"], f"{context} min_level"),
                        skill=parse_skill(self, payload, context),
                    )
                )
            pools[category] = tuple(pool)
        return pools

    def skills_for(self, category: str, level: int) -> List[SkillDef]:
        """Return the category's skills unlocked at `level`, falling back to humanoid."""
        definitions = self._ensure_loaded()
        pool = definitions.get(category)
        if pool is None:
            pool = definitions.get(DEFAULT_CATEGORY)
        if pool is None:
            raise DataReferenceError(
                f"No monster skill pool for '{category}' and no '{DEFAULT_CATEGORY}' fallback."
            )
        return [entry.skill for entry in pool if level >= entry.min_level]
