"""Wiring helpers that assemble the engine's services."""
from __future__ import annotations

from dataclasses import dataclass

from battlecore.config import EngineConfig, load_config
from battlecore.core.rng import RNG
from battlecore.data.repositories import ItemsRepository, MonsterSkillsRepository, SkillsRepository
from battlecore.services.battle_service import BattleService
from battlecore.services.controllers import BattleController
from battlecore.services.rewards_service import RewardsService


@dataclass(slots=True)
class Engine:
    """Services sharing one RNG and one set of repositories."""

    rng: RNG
    battle_service: BattleService
    rewards_service: RewardsService
    controller: BattleController
    skills_repo: SkillsRepository
    monster_skills_repo: MonsterSkillsRepository
    items_repo: ItemsRepository


def create_engine(config: EngineConfig | None = None) -> Engine:
    engine_config = config or load_config()
    rng = RNG(engine_config.seed)
    base_path = engine_config.definitions_path
    items_repo = ItemsRepository(base_path=base_path)
    battle_service = BattleService(rng)
    return Engine(
        rng=rng,
        battle_service=battle_service,
        rewards_service=RewardsService(rng, items_repo),
        controller=BattleController(battle_service),
        skills_repo=SkillsRepository(base_path=base_path),
        monster_skills_repo=MonsterSkillsRepository(base_path=base_path),
        items_repo=items_repo,
    )


def create_battle_service(config: EngineConfig | None = None) -> BattleService:
    return create_engine(config).battle_service
