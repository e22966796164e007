"""Battle domain models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Protocol

from battlecore.core.types import FightOutcomeTag
from battlecore.domain.battle_events import BattleEvent
from battlecore.domain.entities import Combatant
from battlecore.domain.status_effects import StatusEffect

ActionType = Literal["attack", "defend", "item", "skill", "flee"]


@dataclass(slots=True, frozen=True)
class ActionChoice:
    """A single action decision for one combatant's turn."""

    action_type: ActionType
    skill_name: str | None = None

    @classmethod
    def attack(cls) -> "ActionChoice":
        return cls("attack")

    @classmethod
    def defend(cls) -> "ActionChoice":
        return cls("defend")

    @classmethod
    def use_item(cls) -> "ActionChoice":
        return cls("item")

    @classmethod
    def use_skill(cls, name: str) -> "ActionChoice":
        return cls("skill", skill_name=name)

    @classmethod
    def flee(cls) -> "ActionChoice":
        return cls("flee")


class ActionSource(Protocol):
    """Supplies the player side's action each round."""

    def __call__(self, actor: Combatant, opponent: Combatant, turn_number: int) -> ActionChoice:
        ...


@dataclass(slots=True)
class CombatantSnapshot:
    """Resource totals and effects of one side when a fight ended."""

    name: str
    health: int
    max_health: int
    mana: int
    max_mana: int
    stamina: int
    max_stamina: int
    effects: List[StatusEffect] = field(default_factory=list)

    @classmethod
    def capture(cls, combatant: Combatant) -> "CombatantSnapshot":
        return cls(
            name=combatant.name,
            health=combatant.health.current,
            max_health=combatant.health.maximum,
            mana=combatant.mana.current,
            max_mana=combatant.mana.maximum,
            stamina=combatant.stamina.current,
            max_stamina=combatant.stamina.maximum,
            effects=[StatusEffect(effect.kind, effect.duration, effect.potency) for effect in combatant.effects],
        )


@dataclass(slots=True)
class FightOutcome:
    """Result of a player-facing fight."""

    outcome: FightOutcomeTag
    player: CombatantSnapshot
    monster: CombatantSnapshot
    rounds: int
    guards_participated: bool = False
    events: List[BattleEvent] = field(default_factory=list)

    @property
    def player_won(self) -> bool:
        return self.outcome == "victory"

    @property
    def fled(self) -> bool:
        return self.outcome == "fled"


@dataclass(slots=True)
class DuelResult:
    """Result of a monster-vs-monster duel; `winner` is one of the two entrants."""

    winner: Combatant
    loser: Combatant
    rounds: int
    by_tiebreak: bool = False
    events: List[BattleEvent] = field(default_factory=list)
