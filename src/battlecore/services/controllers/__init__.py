"""UI-agnostic controllers for fight orchestration."""
from __future__ import annotations

from .battle_controller import BattleController, ScriptedActionSource

__all__ = [
    "BattleController",
    "ScriptedActionSource",
]
