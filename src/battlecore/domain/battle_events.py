"""Structured battle events emitted while a fight is resolved."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class BattleEvent:
    """Base battle event."""


@dataclass(slots=True)
class FightStartedEvent(BattleEvent):
    player_name: str
    monster_name: str
    guard_names: List[str] = field(default_factory=list)


@dataclass(slots=True)
class RoundStartedEvent(BattleEvent):
    round_number: int


@dataclass(slots=True)
class EffectTickEvent(BattleEvent):
    combatant_name: str
    kind: str
    amount: int
    hp: int


@dataclass(slots=True)
class EffectExpiredEvent(BattleEvent):
    combatant_name: str
    kind: str


@dataclass(slots=True)
class EffectAppliedEvent(BattleEvent):
    target_name: str
    kind: str
    duration: int
    potency: int


@dataclass(slots=True)
class StunnedEvent(BattleEvent):
    combatant_name: str


@dataclass(slots=True)
class AttackResolvedEvent(BattleEvent):
    attacker_name: str
    target_name: str
    attack_total: int
    defense_total: int
    damage: int
    target_hp: int
    critical: bool = False
    counter: bool = False


@dataclass(slots=True)
class DefendEvent(BattleEvent):
    combatant_name: str
    defense_total: int


@dataclass(slots=True)
class ItemUsedEvent(BattleEvent):
    combatant_name: str
    item_name: str
    healed: int


@dataclass(slots=True)
class SkillUsedEvent(BattleEvent):
    attacker_name: str
    skill_name: str
    target_name: str
    damage: int = 0
    healed: int = 0
    target_hp: int = 0


@dataclass(slots=True)
class SkillFailedEvent(BattleEvent):
    combatant_name: str
    skill_name: str
    reason: str


@dataclass(slots=True)
class TurnForfeitedEvent(BattleEvent):
    combatant_name: str
    reason: str


@dataclass(slots=True)
class FleeAttemptEvent(BattleEvent):
    combatant_name: str
    chance: int
    success: bool


@dataclass(slots=True)
class GuardAttackEvent(BattleEvent):
    guard_name: str
    target_name: str
    damage: int
    critical: bool = False


@dataclass(slots=True)
class GuardAbsorbEvent(BattleEvent):
    guard_name: str
    amount: int


@dataclass(slots=True)
class GuardInjuredEvent(BattleEvent):
    guard_name: str


@dataclass(slots=True)
class FightResolvedEvent(BattleEvent):
    outcome: str
    rounds: int
