"""Item definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ItemDef:
    """Consumable item definition."""

    id: str
    name: str
    type: str
    effect_type: str
    value: int
