"""Skills repository."""
from __future__ import annotations

from typing import Dict

from battlecore.core.types import DAMAGE_TYPES, EFFECT_KINDS
from battlecore.data.errors import DataValidationError
from battlecore.data.repositories.base import RepositoryBase
from battlecore.domain.defs import EffectDef, SkillDef

SKILL_FIELDS = {"name", "mana_cost", "stamina_cost", "damage", "damage_type", "effect", "description"}
EFFECT_FIELDS = {"kind", "duration", "potency"}


def parse_skill(repo: RepositoryBase, payload: dict[str, object], context: str) -> SkillDef:
    """Build a SkillDef from an already field-checked payload."""
    effect_data = repo._require_mapping(payload["effect"], f"{context} effect")
    repo._assert_exact_fields(effect_data, EFFECT_FIELDS, f"{context} effect")
    effect = EffectDef(
        kind=repo._require_literal(effect_data["kind"], set(EFFECT_KINDS), f"{context} effect kind"),
        duration=repo._require_int(effect_data["duration"], f"{context} effect duration"),
        potency=repo._require_int(effect_data["potency"], f"{context} effect potency"),
    )
    mana_cost = repo._require_int(payload["mana_cost"], f"{context} mana_cost")
    stamina_cost = repo._require_int(payload["stamina_cost"], f"{context} stamina_cost")
    if mana_cost < 0 or stamina_cost < 0:
        raise DataValidationError(f"{context} costs must not be negative.")
    return SkillDef(
        name=repo._require_str(payload["name"], f"{context} name"),
        mana_cost=mana_cost,
        stamina_cost=stamina_cost,
        damage=repo._require_int(payload["damage"], f"{context} damage"),
        damage_type=repo._require_literal(payload["damage_type"], set(DAMAGE_TYPES), f"{context} damage_type"),
        effect=effect,
        description=repo._require_str(payload["description"], f"{context} description"),
    )


class SkillsRepository(RepositoryBase[SkillDef]):
    """Loads the player skill catalogue."""

    def __init__(self, base_path=None) -> None:
        super().__init__("skills.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, SkillDef]:
        skills: Dict[str, SkillDef] = {}
        for raw_id, payload in raw.items():
            context = f"skill '{raw_id}'"
            skill_data = self._require_mapping(payload, context)
            self._assert_exact_fields(skill_data, SKILL_FIELDS, context)
            skills[raw_id] = parse_skill(self, skill_data, context)
        return skills

    def get_by_name(self, name: str) -> SkillDef:
        for skill in self.all():
            if skill.is_named(name):
                return skill
        raise KeyError(name)
