"""Battle service resolving player fights and monster duels."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Sequence

from battlecore.core.dice import sum_rolls
from battlecore.core.rng import RNG
from battlecore.core.types import FightOutcomeTag
from battlecore.domain.battle_events import (
    AttackResolvedEvent,
    BattleEvent,
    DefendEvent,
    FightResolvedEvent,
    FightStartedEvent,
    FleeAttemptEvent,
    ItemUsedEvent,
    RoundStartedEvent,
    SkillFailedEvent,
    SkillUsedEvent,
    StunnedEvent,
    TurnForfeitedEvent,
)
from battlecore.domain.battle_models import (
    ActionChoice,
    ActionSource,
    CombatantSnapshot,
    DuelResult,
    FightOutcome,
)
from battlecore.domain.constants import (
    CRIT_MULTIPLIER,
    DEFEND_ATTACK_DIVISOR,
    DEFEND_DEFENSE_MULTIPLIER,
    DUEL_CRIT_MULTIPLIER,
    DUEL_MAX_ROUNDS,
    DUEL_MIN_DAMAGE,
    FLEE_BASE_CHANCE,
    FLEE_CHANCE_PER_LEVEL,
    FLEE_MAX_CHANCE,
    FLEE_MIN_CHANCE,
    MAX_FIGHT_ROUNDS,
    MONSTER_CRIT_CHANCE,
    MONSTER_SKILL_CHANCE,
    PLAYER_CRIT_CHANCE,
)
from battlecore.domain.damage import apply_damage
from battlecore.domain.defs import SkillDef
from battlecore.domain.entities import Combatant, GuardUnit
from battlecore.domain.item_effects import use_first_heal_item
from battlecore.domain.status_effects import attach_skill_effect, clear_effects, is_stunned, process_effects
from battlecore.services.decision_policy import AutoplayPolicy
from battlecore.services.errors import CombatStalemateError, InvalidCombatantError
from battlecore.services.guard_service import guard_attack, guard_defense

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ActorTurn:
    """What the first-acting side's turn left behind for the rest of the round."""

    defense_total: int
    acted: bool = True
    fled: bool = False


def flee_chance(runner_level: int, chaser_level: int) -> int:
    chance = FLEE_BASE_CHANCE + FLEE_CHANCE_PER_LEVEL * (runner_level - chaser_level)
    return max(FLEE_MIN_CHANCE, min(FLEE_MAX_CHANCE, chance))


def crit_chance(combatant: Combatant) -> int:
    return MONSTER_CRIT_CHANCE if combatant.is_monster else PLAYER_CRIT_CHANCE


class BattleService:
    """Deterministic fight orchestrator driven by a single seedable RNG."""

    def __init__(self, rng: RNG) -> None:
        self._rng = rng

    @property
    def rng(self) -> RNG:
        return self._rng

    # -----------------------
    # Player fights
    # -----------------------
    def resolve_fight(
        self,
        player: Combatant,
        monster: Combatant,
        guards: Sequence[GuardUnit] | None = None,
        action_source: ActionSource | None = None,
    ) -> FightOutcome:
        """
        Run a fight to completion with `player` acting first each round.

        Mana and stamina of both sides are refilled first; health carries over
        from earlier encounters. Guards, when given, fight alongside the player
        and soak up part of the damage aimed at them. Without an action source
        the player side is driven by the autoplay policy.
        """

        self._validate_entrant(player)
        self._validate_entrant(monster)
        fight_guards = list(guards or [])
        source: ActionSource = action_source or AutoplayPolicy(self._rng)

        for combatant in (player, monster):
            combatant.mana.refill()
            combatant.stamina.refill()

        events: List[BattleEvent] = [
            FightStartedEvent(
                player_name=player.name,
                monster_name=monster.name,
                guard_names=[guard.name for guard in fight_guards],
            )
        ]
        logger.info(
            "Fight started: %s (Lv%d) vs %s (Lv%d) with %d guard(s)",
            player.name,
            player.level,
            monster.name,
            monster.level,
            len(fight_guards),
        )

        outcome: FightOutcomeTag | None = None
        rounds = 0
        while outcome is None:
            rounds += 1
            if rounds > MAX_FIGHT_ROUNDS:
                logger.warning("Fight between %s and %s made no progress", player.name, monster.name)
                raise CombatStalemateError(
                    f"Fight between '{player.name}' and '{monster.name}' exceeded {MAX_FIGHT_ROUNDS} rounds."
                )
            outcome = self._resolve_round(player, monster, fight_guards, source, rounds, events)

        events.append(FightResolvedEvent(outcome=outcome, rounds=rounds))
        logger.info("Fight resolved: %s after %d round(s)", outcome, rounds)
        return FightOutcome(
            outcome=outcome,
            player=CombatantSnapshot.capture(player),
            monster=CombatantSnapshot.capture(monster),
            rounds=rounds,
            guards_participated=bool(fight_guards),
            events=events,
        )

    def _resolve_round(
        self,
        player: Combatant,
        monster: Combatant,
        guards: List[GuardUnit],
        source: ActionSource,
        turn_number: int,
        events: List[BattleEvent],
    ) -> FightOutcomeTag | None:
        events.append(RoundStartedEvent(round_number=turn_number))
        events.extend(process_effects(player))
        events.extend(process_effects(monster))
        if not player.is_alive and not monster.is_alive:
            return "defeat"

        turn = self._resolve_actor_turn(player, monster, source, turn_number, events)
        if turn.fled:
            return "fled"

        if guards and turn.acted and monster.is_alive:
            guard_attack(guards, monster, self._rng, events)

        if monster.is_alive:
            self._resolve_opponent_turn(monster, player, guards, turn.defense_total, events)

        logger.debug(
            "Round %d: %s %d HP, %s %d HP",
            turn_number,
            player.name,
            player.health.current,
            monster.name,
            monster.health.current,
        )
        if not player.is_alive:
            return "defeat"
        if not monster.is_alive:
            return "victory"
        return None

    def _resolve_actor_turn(
        self,
        actor: Combatant,
        target: Combatant,
        source: ActionSource,
        turn_number: int,
        events: List[BattleEvent],
    ) -> ActorTurn:
        if is_stunned(actor):
            events.append(StunnedEvent(combatant_name=actor.name))
            return ActorTurn(defense_total=self._roll_defense(actor), acted=False)

        choice = source(actor, target, turn_number)
        if choice.action_type == "attack":
            attack_total = self._roll_attack(actor)
            defense_total = self._roll_defense(actor)
            critical = self._rng.percent(crit_chance(actor))
            if critical:
                attack_total *= CRIT_MULTIPLIER
            self._strike(actor, target, attack_total, self._roll_defense(target), events, critical=critical)
            return ActorTurn(defense_total=defense_total)

        if choice.action_type == "defend":
            attack_total = self._roll_attack(actor) // DEFEND_ATTACK_DIVISOR
            defense_total = int(self._roll_defense(actor) * DEFEND_DEFENSE_MULTIPLIER)
            events.append(DefendEvent(combatant_name=actor.name, defense_total=defense_total))
            self._strike(actor, target, attack_total, self._roll_defense(target), events, counter=True)
            return ActorTurn(defense_total=defense_total)

        if choice.action_type == "item":
            result = use_first_heal_item(actor)
            if result is None:
                events.append(TurnForfeitedEvent(combatant_name=actor.name, reason="no_consumables"))
                return ActorTurn(defense_total=self._roll_defense(actor), acted=False)
            events.append(ItemUsedEvent(combatant_name=actor.name, item_name=result.item_name, healed=result.hp_delta))
            return ActorTurn(defense_total=self._roll_defense(actor))

        if choice.action_type == "skill":
            acted = self._use_named_skill(actor, target, choice, events)
            return ActorTurn(defense_total=self._roll_defense(actor), acted=acted)

        if choice.action_type == "flee":
            chance = flee_chance(actor.level, target.level)
            success = self._rng.percent(chance)
            events.append(FleeAttemptEvent(combatant_name=actor.name, chance=chance, success=success))
            if success:
                return ActorTurn(defense_total=0, acted=False, fled=True)
            return ActorTurn(defense_total=self._roll_defense(actor), acted=False)

        raise ValueError(f"Unknown action type: {choice.action_type}")

    def _resolve_opponent_turn(
        self,
        actor: Combatant,
        target: Combatant,
        guards: List[GuardUnit],
        target_defense: int,
        events: List[BattleEvent],
    ) -> None:
        if is_stunned(actor):
            events.append(StunnedEvent(combatant_name=actor.name))
            return

        if actor.skills and self._rng.percent(MONSTER_SKILL_CHANCE):
            skill = self._rng.choice(actor.skills)
            if actor.can_afford(skill):
                self._use_skill(actor, target, skill, events, guards=guards)
                return

        attack_total = self._roll_attack(actor)
        critical = self._rng.percent(crit_chance(actor))
        if critical:
            attack_total *= CRIT_MULTIPLIER
        self._strike(actor, target, attack_total, target_defense, events, critical=critical, guards=guards)

    # -----------------------
    # Monster duels
    # -----------------------
    def resolve_monster_duel(self, first: Combatant, second: Combatant) -> DuelResult:
        """
        Fight two monsters from full resources with no guards or items.

        After the round cap the side with the larger share of health left
        wins, ties going to `first`.
        """

        for combatant in (first, second):
            if combatant.health.maximum <= 0:
                raise InvalidCombatantError(f"Combatant '{combatant.name}' has no health pool.")
            combatant.health.refill()
            combatant.mana.refill()
            combatant.stamina.refill()
            clear_effects(combatant)

        events: List[BattleEvent] = []
        for round_number in range(1, DUEL_MAX_ROUNDS + 1):
            events.extend(process_effects(first))
            events.extend(process_effects(second))
            if not first.is_alive:
                return self._duel_result(second, first, round_number, events)
            if not second.is_alive:
                return self._duel_result(first, second, round_number, events)

            if not is_stunned(first):
                self._duel_strike(first, second, events)
            if not second.is_alive:
                return self._duel_result(first, second, round_number, events)

            if not is_stunned(second):
                self._duel_strike(second, first, events)
            if not first.is_alive:
                return self._duel_result(second, first, round_number, events)

        if first.health.ratio >= second.health.ratio:
            return self._duel_result(first, second, DUEL_MAX_ROUNDS, events, by_tiebreak=True)
        return self._duel_result(second, first, DUEL_MAX_ROUNDS, events, by_tiebreak=True)

    def _duel_strike(self, attacker: Combatant, target: Combatant, events: List[BattleEvent]) -> None:
        if attacker.skills and self._rng.percent(MONSTER_SKILL_CHANCE):
            skill = self._rng.choice(attacker.skills)
            if attacker.can_afford(skill):
                self._use_skill(attacker, target, skill, events)
                return

        attack_total = self._roll_attack(attacker)
        defense_total = self._roll_defense(target)
        raw = max(DUEL_MIN_DAMAGE, attack_total - defense_total)
        critical = self._rng.percent(MONSTER_CRIT_CHANCE)
        if critical:
            raw = math.floor(raw * DUEL_CRIT_MULTIPLIER)
        damage = apply_damage(raw, "physical", target)
        target.health.current -= damage
        events.append(
            AttackResolvedEvent(
                attacker_name=attacker.name,
                target_name=target.name,
                attack_total=attack_total,
                defense_total=defense_total,
                damage=damage,
                target_hp=target.health.current,
                critical=critical,
            )
        )

    @staticmethod
    def _duel_result(
        winner: Combatant,
        loser: Combatant,
        rounds: int,
        events: List[BattleEvent],
        *,
        by_tiebreak: bool = False,
    ) -> DuelResult:
        logger.debug("Duel: %s beat %s in %d round(s)", winner.name, loser.name, rounds)
        return DuelResult(winner=winner, loser=loser, rounds=rounds, by_tiebreak=by_tiebreak, events=events)

    # -----------------------
    # Helpers
    # -----------------------
    @staticmethod
    def _validate_entrant(combatant: Combatant) -> None:
        if combatant.health.maximum <= 0:
            raise InvalidCombatantError(f"Combatant '{combatant.name}' has no health pool.")
        if not combatant.is_alive:
            raise InvalidCombatantError(
                f"Combatant '{combatant.name}' cannot enter a fight at {combatant.health.current} HP."
            )

    def _roll_attack(self, combatant: Combatant) -> int:
        return sum_rolls(self._rng, combatant.attack_rolls) + combatant.stat_mod.attack

    def _roll_defense(self, combatant: Combatant) -> int:
        return sum_rolls(self._rng, combatant.defense_rolls) + combatant.stat_mod.defense

    def _strike(
        self,
        attacker: Combatant,
        target: Combatant,
        attack_total: int,
        defense_total: int,
        events: List[BattleEvent],
        *,
        critical: bool = False,
        counter: bool = False,
        guards: Sequence[GuardUnit] = (),
    ) -> int:
        damage = 0
        if attack_total > defense_total:
            damage = apply_damage(attack_total - defense_total, "physical", target)
            if guards:
                damage, _ = guard_defense(guards, damage, events)
            target.health.current -= damage
        events.append(
            AttackResolvedEvent(
                attacker_name=attacker.name,
                target_name=target.name,
                attack_total=attack_total,
                defense_total=defense_total,
                damage=damage,
                target_hp=target.health.current,
                critical=critical,
                counter=counter,
            )
        )
        return damage

    def _use_named_skill(
        self, actor: Combatant, target: Combatant, choice: ActionChoice, events: List[BattleEvent]
    ) -> bool:
        skill = actor.find_skill(choice.skill_name or "")
        if skill is None:
            logger.warning("%s tried unknown skill %r", actor.name, choice.skill_name)
            events.append(
                SkillFailedEvent(combatant_name=actor.name, skill_name=choice.skill_name or "", reason="unknown_skill")
            )
            return False
        return self._use_skill(actor, target, skill, events)

    def _use_skill(
        self,
        caster: Combatant,
        target: Combatant,
        skill: SkillDef,
        events: List[BattleEvent],
        *,
        guards: Sequence[GuardUnit] = (),
    ) -> bool:
        if caster.mana.current < skill.mana_cost:
            events.append(SkillFailedEvent(combatant_name=caster.name, skill_name=skill.name, reason="insufficient_mana"))
            return False
        if caster.stamina.current < skill.stamina_cost:
            events.append(
                SkillFailedEvent(combatant_name=caster.name, skill_name=skill.name, reason="insufficient_stamina")
            )
            return False

        caster.mana.current -= skill.mana_cost
        caster.stamina.current -= skill.stamina_cost

        healed = 0
        damage = 0
        if skill.damage < 0:
            healed = caster.health.restore(-skill.damage)
        elif skill.damage > 0:
            damage = apply_damage(skill.damage, skill.damage_type, target)
            if guards:
                damage, _ = guard_defense(guards, damage, events)
            target.health.current -= damage

        events.append(
            SkillUsedEvent(
                attacker_name=caster.name,
                skill_name=skill.name,
                target_name=target.name,
                damage=damage,
                healed=healed,
                target_hp=target.health.current,
            )
        )
        applied = attach_skill_effect(skill.effect, caster, target)
        if applied is not None:
            events.append(applied)
        return True
