"""Automated action selection for players on autoplay and for scripted sides."""
from __future__ import annotations

from battlecore.core.rng import RNG
from battlecore.domain.battle_models import ActionChoice
from battlecore.domain.constants import (
    HEAL_SKILL_NAME,
    LOW_HEALTH_RATIO,
    OFFENSIVE_SKILL_CHANCE,
    OPENING_BUFF_SKILL_NAMES,
    OPENING_TURNS,
    REGENERATION_SKILL_NAME,
)
from battlecore.domain.entities import Combatant


def _mana_affordable_skill(actor: Combatant, name: str) -> str | None:
    for skill in actor.skills:
        if skill.is_named(name) and actor.mana.current >= skill.mana_cost:
            return skill.name
    return None


def decide_action(actor: Combatant, opponent: Combatant, turn_number: int, rng: RNG) -> ActionChoice:
    """
    Pick an action by priority: recover when low, buff early, maybe cast, else attack.

    Only reads combatant state; the single random draw decides whether an
    offensive skill is considered this turn.
    """

    if actor.health.ratio < LOW_HEALTH_RATIO:
        for name in (HEAL_SKILL_NAME, REGENERATION_SKILL_NAME):
            skill_name = _mana_affordable_skill(actor, name)
            if skill_name is not None:
                return ActionChoice.use_skill(skill_name)
        if actor.first_heal_item_index() is not None:
            return ActionChoice.use_item()

    if turn_number <= OPENING_TURNS:
        for skill in actor.skills:
            if any(skill.is_named(name) for name in OPENING_BUFF_SKILL_NAMES) and (
                actor.stamina.current >= skill.stamina_cost
            ):
                return ActionChoice.use_skill(skill.name)

    if rng.percent(OFFENSIVE_SKILL_CHANCE):
        for skill in actor.skills:
            if skill.is_offensive and actor.can_afford(skill):
                return ActionChoice.use_skill(skill.name)

    return ActionChoice.attack()


class AutoplayPolicy:
    """Action source that delegates every decision to `decide_action`."""

    def __init__(self, rng: RNG) -> None:
        self._rng = rng

    def __call__(self, actor: Combatant, opponent: Combatant, turn_number: int) -> ActionChoice:
        return decide_action(actor, opponent, turn_number, self._rng)
