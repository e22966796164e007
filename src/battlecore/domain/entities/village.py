"""Village runtime models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal

from .guard import GuardUnit

VillagerRole = Literal["harvester", "guard"]


@dataclass(slots=True)
class Villager:
    name: str
    role: VillagerRole
    level: int = 1
    efficiency: int = 1


@dataclass(slots=True)
class Village:
    """The slice of a village the combat engine reads and the caller writes back."""

    name: str
    level: int = 1
    experience: int = 0
    villagers: List[Villager] = field(default_factory=list)
    active_guards: List[GuardUnit] = field(default_factory=list)
