"""Service layer exports."""

from .errors import CombatError, CombatStalemateError, FactoryError, InvalidCombatantError
from .battle_service import BattleService, flee_chance
from .decision_policy import AutoplayPolicy, decide_action
from .rewards_service import RewardsService, RewardSummary

__all__ = [
    "AutoplayPolicy",
    "BattleService",
    "CombatError",
    "CombatStalemateError",
    "FactoryError",
    "InvalidCombatantError",
    "RewardSummary",
    "RewardsService",
    "decide_action",
    "flee_chance",
]
