"""Timed status effects: damage and healing over time, stuns and stat buffs."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from battlecore.core.types import EffectKind
from battlecore.domain.battle_events import (
    BattleEvent,
    EffectAppliedEvent,
    EffectExpiredEvent,
    EffectTickEvent,
)
from battlecore.domain.defs import EffectDef
from battlecore.domain.entities import Combatant

DAMAGE_OVER_TIME: frozenset[str] = frozenset({"poison", "burn"})
BUFF_KINDS: frozenset[str] = frozenset({"buff_attack", "buff_defense"})
SELF_TARGETED_KINDS: frozenset[str] = BUFF_KINDS | {"regen"}


@dataclass(slots=True)
class StatusEffect:
    """Tracks a timed effect active on a combatant."""

    kind: EffectKind
    duration: int
    potency: int

    @classmethod
    def from_def(cls, effect: EffectDef) -> "StatusEffect":
        return cls(kind=effect.kind, duration=effect.duration, potency=effect.potency)


def _shift_buff(combatant: Combatant, kind: str, amount: int) -> None:
    if kind == "buff_attack":
        combatant.stat_mod.attack += amount
    elif kind == "buff_defense":
        combatant.stat_mod.defense += amount


def process_effects(combatant: Combatant) -> List[BattleEvent]:
    """
    Apply one turn of every active effect and drop the ones that expire.

    Buff contributions are removed from the combatant's stat modifier exactly
    once, on the turn the buff expires.
    """

    events: List[BattleEvent] = []
    remaining: List[StatusEffect] = []
    for effect in combatant.effects:
        if effect.kind in DAMAGE_OVER_TIME:
            combatant.health.current -= effect.potency
            events.append(
                EffectTickEvent(
                    combatant_name=combatant.name,
                    kind=effect.kind,
                    amount=-effect.potency,
                    hp=combatant.health.current,
                )
            )
        elif effect.kind == "regen":
            healed = combatant.health.restore(effect.potency)
            events.append(
                EffectTickEvent(
                    combatant_name=combatant.name,
                    kind=effect.kind,
                    amount=healed,
                    hp=combatant.health.current,
                )
            )

        effect.duration -= 1
        if effect.duration <= 0:
            _shift_buff(combatant, effect.kind, -effect.potency)
            events.append(EffectExpiredEvent(combatant_name=combatant.name, kind=effect.kind))
        else:
            remaining.append(effect)
    combatant.effects = remaining
    return events


def is_stunned(combatant: Combatant) -> bool:
    return any(effect.kind == "stun" for effect in combatant.effects)


def attach_skill_effect(template: EffectDef, caster: Combatant, opponent: Combatant) -> EffectAppliedEvent | None:
    """
    Copy a skill's effect template onto the caster or the opponent.

    Buffs and regeneration land on the caster; buffs also raise the caster's
    stat modifier immediately. Everything else lands on the opponent.
    Returns None when the template carries no effect.
    """

    if not template.is_active:
        return None
    effect = StatusEffect.from_def(template)
    target = caster if effect.kind in SELF_TARGETED_KINDS else opponent
    target.effects.append(effect)
    _shift_buff(target, effect.kind, effect.potency)
    return EffectAppliedEvent(
        target_name=target.name,
        kind=effect.kind,
        duration=effect.duration,
        potency=effect.potency,
    )


def clear_effects(combatant: Combatant) -> None:
    """Drop every effect, reverting outstanding buff contributions."""
    for effect in combatant.effects:
        _shift_buff(combatant, effect.kind, -effect.potency)
    combatant.effects = []
