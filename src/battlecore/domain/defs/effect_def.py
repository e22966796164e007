"""Effect definition primitives."""
from __future__ import annotations

from dataclasses import dataclass

from battlecore.core.types import EffectKind


@dataclass(slots=True, frozen=True)
class EffectDef:
    """Status effect template carried by a skill and copied onto a combatant on use."""

    kind: EffectKind = "none"
    duration: int = 0
    potency: int = 0

    @property
    def is_active(self) -> bool:
        return self.kind != "none" and self.duration > 0
