"""Shared type aliases for the core and domain layers."""
from typing import Literal

CombatantKind = Literal["player", "monster", "guard"]
DamageType = Literal["physical", "fire", "ice", "lightning", "poison"]
EffectKind = Literal["poison", "burn", "regen", "buff_attack", "buff_defense", "stun", "none"]
FightOutcomeTag = Literal["victory", "defeat", "fled"]

DAMAGE_TYPES: tuple[DamageType, ...] = ("physical", "fire", "ice", "lightning", "poison")
EFFECT_KINDS: tuple[EffectKind, ...] = ("poison", "burn", "regen", "buff_attack", "buff_defense", "stun", "none")

__all__ = [
    "CombatantKind",
    "DamageType",
    "EffectKind",
    "FightOutcomeTag",
    "DAMAGE_TYPES",
    "EFFECT_KINDS",
]
