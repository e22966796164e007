"""Post-fight bookkeeping: experience, loot, drops and village updates."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Literal, Sequence

from battlecore.core.rng import RNG
from battlecore.core.types import FightOutcomeTag
from battlecore.data.repositories import ItemsRepository
from battlecore.domain.battle_models import DuelResult, FightOutcome
from battlecore.domain.constants import (
    DEFEAT_XP_PER_LEVEL,
    DUEL_XP_PER_LEVEL,
    POTION_DROP_CHANCE,
    RESCUE_CHANCE,
    RESCUE_GUARD_ROLE_CHANCE,
    RESCUE_VILLAGE_XP,
    VICTORY_XP_PER_LEVEL,
)
from battlecore.domain.defs import SkillDef
from battlecore.domain.entities import Combatant, GuardUnit, Item, ResourcePool, Village, Villager
from battlecore.domain.equipment import calculate_item_mods, transfer_equipment
from battlecore.domain.status_effects import BUFF_KINDS, clear_effects
from battlecore.services.factories import create_health_potion, create_skill_scroll
from battlecore.services.guard_service import process_guard_recovery, write_back_guards

logger = logging.getLogger(__name__)

GuardianChoice = Literal["absorb", "scroll"]

VILLAGER_FIRST_NAMES: tuple[str, ...] = (
    "Alda", "Bram", "Cora", "Dunstan", "Elsa", "Finn", "Greta", "Hale",
    "Ilse", "Jory", "Kestra", "Lom", "Mira", "Ned", "Orla", "Pell",
)
VILLAGER_LAST_NAMES: tuple[str, ...] = (
    "Ashford", "Brook", "Cobb", "Dale", "Fairweather", "Greenhill",
    "Holt", "Marsh", "Millward", "Stone", "Thatcher", "Wick",
)


@dataclass(slots=True)
class RewardSummary:
    """What changed on the combatants and village after a fight."""

    outcome: FightOutcomeTag
    experience_gained: int = 0
    equipped: List[Item] = field(default_factory=list)
    potion: Item | None = None
    learned_skill: SkillDef | None = None
    scroll: Item | None = None
    rescued: Villager | None = None
    village: Village | None = None
    fallen_guards: List[str] = field(default_factory=list)
    recovered_guards: List[str] = field(default_factory=list)


def refresh_stat_mods(combatant: Combatant) -> None:
    """
    Recompute the stat modifier from equipment.

    Buffs still running keep their contribution so that their later expiry
    removes exactly what they added.
    """

    mods = calculate_item_mods(combatant.equipment)
    for effect in combatant.effects:
        if effect.kind not in BUFF_KINDS:
            continue
        if effect.kind == "buff_attack":
            mods.attack += effect.potency
        else:
            mods.defense += effect.potency
    combatant.stat_mod = mods


def village_name_for(player_name: str) -> str:
    return f"{player_name}'s Village"


class RewardsService:
    """Applies fight results to the participants."""

    def __init__(self, rng: RNG, items_repo: ItemsRepository) -> None:
        self._rng = rng
        self._items_repo = items_repo

    def apply_fight_rewards(
        self,
        outcome: FightOutcome,
        player: Combatant,
        monster: Combatant,
        *,
        village: Village | None = None,
        fight_guards: Sequence[GuardUnit] | None = None,
        guardian_choice: GuardianChoice = "scroll",
    ) -> RewardSummary:
        """
        Settle a finished player fight.

        On victory the player gains experience, the monster's gear and maybe a
        potion, a rescued villager and the guardian's skill. On defeat the
        monster takes the player's gear. Unless the player fled, guards that
        fought are written back to the village and injured guards advance
        their recovery.
        """

        summary = RewardSummary(outcome=outcome.outcome, village=village)
        if outcome.outcome == "victory":
            self._apply_victory(summary, player, monster, guardian_choice)
        elif outcome.outcome == "defeat":
            self._apply_defeat(summary, player, monster)

        if summary.village is not None and fight_guards and not outcome.fled:
            summary.fallen_guards = write_back_guards(summary.village, fight_guards, is_boss=monster.is_boss)
        if summary.village is not None and outcome.guards_participated and not outcome.fled:
            summary.recovered_guards = process_guard_recovery(summary.village)
        return summary

    def _apply_victory(
        self,
        summary: RewardSummary,
        player: Combatant,
        monster: Combatant,
        guardian_choice: GuardianChoice,
    ) -> None:
        summary.experience_gained = monster.level * VICTORY_XP_PER_LEVEL
        player.experience += summary.experience_gained
        summary.equipped = transfer_equipment(monster.equipment.values(), player.equipment, player.inventory)
        refresh_stat_mods(player)

        summary.potion = self.roll_potion_drop()
        if summary.potion is not None:
            player.inventory.append(summary.potion)

        if self._rng.percent(RESCUE_CHANCE):
            if summary.village is None:
                summary.village = Village(name=village_name_for(player.name))
            summary.rescued = self.rescue_villager(summary.village)

        if monster.is_skill_guardian and monster.guarded_skill is not None:
            self._grant_guardian_skill(summary, player, monster.guarded_skill, guardian_choice)
        logger.info("%s defeated %s: +%d XP", player.name, monster.name, summary.experience_gained)

    def _apply_defeat(self, summary: RewardSummary, player: Combatant, monster: Combatant) -> None:
        transfer_equipment(player.equipment.values(), monster.equipment, monster.inventory)
        refresh_stat_mods(monster)
        monster.experience += player.level * DEFEAT_XP_PER_LEVEL
        logger.info("%s was defeated by %s", player.name, monster.name)

    @staticmethod
    def _grant_guardian_skill(
        summary: RewardSummary, player: Combatant, skill: SkillDef, choice: GuardianChoice
    ) -> None:
        if choice == "absorb":
            if player.find_skill(skill.name) is None:
                player.skills.append(skill)
                summary.learned_skill = skill
            return
        if choice != "scroll":
            raise ValueError(f"Unknown guardian reward choice: {choice}")
        summary.scroll = create_skill_scroll(skill)
        player.inventory.append(summary.scroll)

    def roll_potion_drop(self) -> Item | None:
        if not self._rng.percent(POTION_DROP_CHANCE):
            return None
        size_roll = self._rng.randint(0, 99)
        if size_roll < 50:
            return create_health_potion("small", self._items_repo)
        if size_roll < 85:
            return create_health_potion("medium", self._items_repo)
        return create_health_potion("large", self._items_repo)

    def rescue_villager(self, village: Village) -> Villager:
        role = "guard" if self._rng.percent(RESCUE_GUARD_ROLE_CHANCE) else "harvester"
        name = f"{self._rng.choice(VILLAGER_FIRST_NAMES)} {self._rng.choice(VILLAGER_LAST_NAMES)}"
        villager = Villager(name=name, role=role, level=1, efficiency=self._rng.randint(1, 3))
        village.villagers.append(villager)
        village.experience += RESCUE_VILLAGE_XP
        logger.info("%s joined %s as a %s", villager.name, village.name, villager.role)
        return villager

    def apply_duel_rewards(self, result: DuelResult) -> List[Item]:
        """
        Reward the winner of a monster duel and return the gear it equipped.

        The winner's health maximum follows its new equipment, then all three
        pools are refilled and its effects cleared.
        """

        winner, loser = result.winner, result.loser
        winner.monster_kills += 1
        clear_effects(winner)
        old_bonus = winner.stat_mod.max_health
        equipped = transfer_equipment(loser.equipment.values(), winner.equipment, winner.inventory)
        refresh_stat_mods(winner)
        winner.experience += loser.level * DUEL_XP_PER_LEVEL

        new_maximum = max(1, winner.health.maximum - old_bonus + winner.stat_mod.max_health)
        winner.health = ResourcePool.full(new_maximum)
        winner.mana.refill()
        winner.stamina.refill()
        logger.debug("%s won a duel against %s (%d kills)", winner.name, loser.name, winner.monster_kills)
        return equipped
