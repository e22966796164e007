"""Stat models for runtime entities."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ResourcePool:
    """A current/maximum pair for health, mana or stamina."""

    current: int
    maximum: int

    @classmethod
    def full(cls, maximum: int) -> "ResourcePool":
        return cls(current=maximum, maximum=maximum)

    def restore(self, amount: int) -> int:
        """Add `amount` clamped to the maximum and return the actual gain."""
        before = self.current
        self.current = min(self.maximum, self.current + max(0, amount))
        return self.current - before

    def refill(self) -> None:
        self.current = self.maximum

    @property
    def ratio(self) -> float:
        if self.maximum <= 0:
            return 0.0
        return self.current / self.maximum


@dataclass(slots=True)
class StatModifier:
    """Additive bonuses from gear plus any active attack/defense buffs."""

    attack: int = 0
    defense: int = 0
    max_health: int = 0
