"""Village guard support: counter-attacks, damage absorption and recovery."""
from __future__ import annotations

import copy
import logging
from typing import List, Sequence, Tuple

from battlecore.core.dice import sum_rolls
from battlecore.core.rng import RNG
from battlecore.domain.battle_events import (
    BattleEvent,
    GuardAbsorbEvent,
    GuardAttackEvent,
    GuardInjuredEvent,
)
from battlecore.domain.constants import (
    CRIT_MULTIPLIER,
    GUARD_ABSORB_CAP,
    GUARD_ABSORB_PER_GUARD,
    GUARD_CRIT_CHANCE,
    GUARD_INJURY_THRESHOLD_PCT,
)
from battlecore.domain.damage import apply_damage
from battlecore.domain.entities import Combatant, GuardUnit, Village

logger = logging.getLogger(__name__)


def select_fight_guards(village: Village | None, opponent: Combatant) -> List[GuardUnit]:
    """
    Copy the village's healthy guards into a fight against a special opponent.

    Guards only join fights against skill guardians and bosses. The copies
    start at full health; the village's own records are left untouched.
    """

    if village is None or not opponent.is_special_opponent:
        return []
    selected: List[GuardUnit] = []
    for guard in village.active_guards:
        if not guard.is_healthy:
            continue
        fight_copy = copy.deepcopy(guard)
        fight_copy.combatant.health.refill()
        selected.append(fight_copy)
    return selected


def guard_attack(
    guards: Sequence[GuardUnit],
    monster: Combatant,
    rng: RNG,
    events: List[BattleEvent] | None = None,
) -> int:
    """Let every healthy guard swing at `monster` and return the total damage dealt."""
    total_damage = 0
    for guard in guards:
        if not guard.is_healthy:
            continue
        unit = guard.combatant
        attack_total = sum_rolls(rng, unit.attack_rolls) + unit.stat_mod.attack + guard.attack_bonus
        critical = rng.percent(GUARD_CRIT_CHANCE)
        if critical:
            attack_total *= CRIT_MULTIPLIER
        defense_total = sum_rolls(rng, monster.defense_rolls) + monster.stat_mod.defense

        damage = 0
        if attack_total > defense_total:
            damage = apply_damage(attack_total - defense_total, "physical", monster)
            monster.health.current -= damage
            total_damage += damage
        if events is not None:
            events.append(
                GuardAttackEvent(guard_name=guard.name, target_name=monster.name, damage=damage, critical=critical)
            )
    return total_damage


def absorb_percent(healthy_count: int) -> int:
    return min(GUARD_ABSORB_CAP, healthy_count * GUARD_ABSORB_PER_GUARD)


def guard_defense(
    guards: Sequence[GuardUnit],
    incoming_damage: int,
    events: List[BattleEvent] | None = None,
) -> Tuple[int, List[int]]:
    """
    Split part of `incoming_damage` across the healthy guards.

    Returns the damage that still reaches the protected combatant and the
    indices of the guards that took a share. The shares always add up to the
    absorbed amount; the remainder goes one point each to the first guards.
    """

    healthy = [index for index, guard in enumerate(guards) if guard.is_healthy]
    if not healthy:
        return incoming_damage, []

    absorbed = incoming_damage * absorb_percent(len(healthy)) // 100
    remaining = incoming_damage - absorbed
    share, extra = divmod(absorbed, len(healthy))

    affected: List[int] = []
    for position, index in enumerate(healthy):
        amount = share + (1 if position < extra else 0)
        if amount <= 0:
            continue
        guard = guards[index]
        unit = guard.combatant
        unit.health.current -= amount
        affected.append(index)
        if events is not None:
            events.append(GuardAbsorbEvent(guard_name=guard.name, amount=amount))
        if unit.health.current <= unit.health.maximum * GUARD_INJURY_THRESHOLD_PCT // 100:
            guard.injure()
            logger.debug("Guard %s injured at %d HP", guard.name, unit.health.current)
            if events is not None:
                events.append(GuardInjuredEvent(guard_name=guard.name))
    return remaining, affected


def process_guard_recovery(village: Village) -> List[str]:
    """Advance every injured guard's recovery by one fight; return the names that recovered."""
    recovered: List[str] = []
    for guard in village.active_guards:
        if not guard.injured:
            continue
        guard.recovery_time -= 1
        if guard.recovery_time <= 0:
            guard.injured = False
            guard.recovery_time = 0
            guard.combatant.health.refill()
            recovered.append(guard.name)
    if recovered:
        logger.info("Guards recovered in %s: %s", village.name, ", ".join(recovered))
    return recovered


def write_back_guards(village: Village, fight_guards: Sequence[GuardUnit], *, is_boss: bool) -> List[str]:
    """
    Copy post-fight guard state back onto the village's guards, matched by name.

    After a boss fight a guard left at zero health or below is removed for
    good; the names of those fallen guards are returned.
    """

    by_name = {guard.name: guard for guard in fight_guards}
    fallen: List[str] = []
    survivors: List[GuardUnit] = []
    for guard in village.active_guards:
        fought = by_name.get(guard.name)
        if fought is None:
            survivors.append(guard)
            continue
        if is_boss and fought.combatant.health.current <= 0:
            fallen.append(guard.name)
            continue
        guard.combatant.health.current = fought.combatant.health.current
        guard.injured = fought.injured
        guard.recovery_time = fought.recovery_time
        survivors.append(guard)
    village.active_guards = survivors
    if fallen:
        logger.warning("Guards fell in a boss fight: %s", ", ".join(fallen))
    return fallen
