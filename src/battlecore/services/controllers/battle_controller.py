"""UI-agnostic battle controller that separates action selection from rendering."""
from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, List, Sequence

from battlecore.domain.battle_models import ActionChoice, ActionSource, FightOutcome
from battlecore.domain.entities import Combatant, GuardUnit, Item
from battlecore.domain.defs import SkillDef
from battlecore.domain.status_effects import is_stunned
from battlecore.services.battle_service import BattleService


class ScriptedActionSource:
    """
    Replays a fixed sequence of choices for the player side.

    Once the script runs out the fallback source decides; without one the
    player keeps attacking.
    """

    def __init__(self, choices: Iterable[ActionChoice], fallback: ActionSource | None = None) -> None:
        self._choices: Deque[ActionChoice] = deque(choices)
        self._fallback = fallback

    @property
    def remaining(self) -> int:
        return len(self._choices)

    def __call__(self, actor: Combatant, opponent: Combatant, turn_number: int) -> ActionChoice:
        if self._choices:
            return self._choices.popleft()
        if self._fallback is not None:
            return self._fallback(actor, opponent, turn_number)
        return ActionChoice.attack()


class BattleController:
    """
    UI-agnostic controller for player fights.

    Wraps BattleService and exposes only structured state and actions.
    Rendering events and prompting for input belong to the caller.
    """

    def __init__(self, battle_service: BattleService) -> None:
        self._service = battle_service

    def get_available_skills(self, actor: Combatant) -> List[SkillDef]:
        return [skill for skill in actor.skills if actor.can_afford(skill)]

    def get_usable_items(self, actor: Combatant) -> List[Item]:
        return [item for item in actor.inventory if item.is_heal_consumable]

    def get_available_actions(self, actor: Combatant, opponent: Combatant) -> dict:
        """
        Return structured data about the actions open to `actor` this turn.

        Returns a dict with:
        - can_attack / can_defend / can_flee: bool
        - can_use_skill: bool
        - can_use_item: bool
        - available_skills: List[SkillDef]
        - items: List[Item]
        """
        if is_stunned(actor) or not actor.is_alive or not opponent.is_alive:
            return {
                "can_attack": False,
                "can_defend": False,
                "can_flee": False,
                "can_use_skill": False,
                "can_use_item": False,
                "available_skills": [],
                "items": [],
            }

        available_skills = self.get_available_skills(actor)
        items = self.get_usable_items(actor)
        return {
            "can_attack": True,
            "can_defend": True,
            "can_flee": True,
            "can_use_skill": bool(available_skills),
            "can_use_item": bool(items),
            "available_skills": available_skills,
            "items": items,
        }

    def scripted_source(
        self, choices: Iterable[ActionChoice], fallback: ActionSource | None = None
    ) -> ScriptedActionSource:
        return ScriptedActionSource(choices, fallback)

    def run_fight(
        self,
        player: Combatant,
        monster: Combatant,
        guards: Sequence[GuardUnit] | None = None,
        choices: Iterable[ActionChoice] | None = None,
    ) -> FightOutcome:
        """Resolve a fight, replaying `choices` first when given, else on autoplay."""
        source = self.scripted_source(choices) if choices is not None else None
        return self._service.resolve_fight(player, monster, guards=guards, action_source=source)
