"""Fixed combat tuning values.

Percentages are expressed as integers out of 100 and compared against
`RNG.percent`.
"""
from __future__ import annotations

PLAYER_CRIT_CHANCE = 15
MONSTER_CRIT_CHANCE = 10
GUARD_CRIT_CHANCE = 10
CRIT_MULTIPLIER = 2
DUEL_CRIT_MULTIPLIER = 1.5

DEFEND_ATTACK_DIVISOR = 2
DEFEND_DEFENSE_MULTIPLIER = 1.5

FLEE_BASE_CHANCE = 50
FLEE_CHANCE_PER_LEVEL = 5
FLEE_MIN_CHANCE = 20
FLEE_MAX_CHANCE = 90

MONSTER_SKILL_CHANCE = 40

GUARD_ABSORB_PER_GUARD = 20
GUARD_ABSORB_CAP = 60
GUARD_INJURY_THRESHOLD_PCT = 30

LOW_HEALTH_RATIO = 0.4
OPENING_TURNS = 2
OFFENSIVE_SKILL_CHANCE = 50
HEAL_SKILL_NAME = "Heal"
REGENERATION_SKILL_NAME = "Regeneration"
OPENING_BUFF_SKILL_NAMES = ("Battle Cry", "Shield Wall")

DUEL_MAX_ROUNDS = 200
DUEL_MIN_DAMAGE = 1
MAX_FIGHT_ROUNDS = 1000

VICTORY_XP_PER_LEVEL = 10
DEFEAT_XP_PER_LEVEL = 100
DUEL_XP_PER_LEVEL = 100

POTION_DROP_CHANCE = 30
RESCUE_CHANCE = 15
RESCUE_GUARD_ROLE_CHANCE = 30
RESCUE_VILLAGE_XP = 25
