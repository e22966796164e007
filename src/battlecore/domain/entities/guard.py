"""Guard runtime models."""
from __future__ import annotations

from dataclasses import dataclass

from .combatant import Combatant

RECOVERY_FIGHTS = 3


@dataclass(slots=True)
class GuardUnit:
    """A village guard: a combatant plus injury bookkeeping."""

    combatant: Combatant
    attack_bonus: int = 0
    injured: bool = False
    recovery_time: int = 0

    @property
    def name(self) -> str:
        return self.combatant.name

    @property
    def is_healthy(self) -> bool:
        return not self.injured and self.combatant.health.current > 0

    def injure(self) -> None:
        self.injured = True
        self.recovery_time = RECOVERY_FIGHTS
