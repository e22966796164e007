from __future__ import annotations

from battlecore.data.repositories import ItemsRepository
from battlecore.domain.battle_models import CombatantSnapshot, DuelResult, FightOutcome
from battlecore.domain.defs import EffectDef, SkillDef
from battlecore.domain.entities import Item, StatModifier, Village
from battlecore.domain.status_effects import StatusEffect
from battlecore.services.factories import make_guard
from battlecore.services.rewards_service import RewardsService, refresh_stat_mods
from tests.helpers.combatants import make_monster, make_player
from tests.helpers.fixed_rng import FixedRNG


def _make_service(*percent_rolls: int) -> RewardsService:
    return RewardsService(FixedRNG(percent_rolls=percent_rolls), ItemsRepository())


def _outcome(tag: str, player, monster, guards_participated: bool = False) -> FightOutcome:
    return FightOutcome(
        outcome=tag,
        player=CombatantSnapshot.capture(player),
        monster=CombatantSnapshot.capture(monster),
        rounds=3,
        guards_participated=guards_participated,
    )


def _sword(name: str, cp: int, attack: int) -> Item:
    return Item(name=name, slot=0, cp=cp, stat_mod=StatModifier(attack=attack))


def test_victory_grants_experience_and_better_gear() -> None:
    player = make_player(equipment=[_sword("Rusty Sword", cp=5, attack=1)])
    monster = make_monster(level=4, equipment=[_sword("Iron Sword", cp=10, attack=3)])

    summary = _make_service().apply_fight_rewards(_outcome("victory", player, monster), player, monster)

    assert summary.experience_gained == 40
    assert player.experience == 40
    assert player.equipment[0].name == "Iron Sword"
    assert [item.name for item in player.inventory] == ["Rusty Sword"]
    assert player.stat_mod.attack == 3
    assert summary.potion is None
    assert summary.rescued is None


def test_weaker_loot_is_discarded() -> None:
    player = make_player(equipment=[_sword("Iron Sword", cp=10, attack=3)])
    monster = make_monster(equipment=[_sword("Rusty Sword", cp=5, attack=1)])

    summary = _make_service().apply_fight_rewards(_outcome("victory", player, monster), player, monster)

    assert summary.equipped == []
    assert player.equipment[0].name == "Iron Sword"
    assert player.inventory == []


def test_potion_drop_sizes() -> None:
    for size_roll, expected in ((10, 15), (60, 30), (90, 50)):
        player = make_player()
        monster = make_monster()

        summary = _make_service(0, size_roll).apply_fight_rewards(
            _outcome("victory", player, monster), player, monster
        )

        assert summary.potion is not None
        assert summary.potion.consumable.value == expected
        assert player.inventory == [summary.potion]


def test_rescue_creates_village_when_missing() -> None:
    player = make_player()
    monster = make_monster()

    summary = _make_service(99, 0, 0).apply_fight_rewards(_outcome("victory", player, monster), player, monster)

    assert summary.village is not None
    assert summary.village.name == "Hero's Village"
    assert summary.village.experience == 25
    assert summary.rescued is not None
    assert summary.rescued.role == "guard"
    assert 1 <= summary.rescued.efficiency <= 3
    assert summary.village.villagers == [summary.rescued]


def test_rescue_joins_existing_village_as_harvester() -> None:
    player = make_player()
    monster = make_monster()
    village = Village(name="Hero's Village", experience=10)

    summary = _make_service(99, 0, 99).apply_fight_rewards(
        _outcome("victory", player, monster), player, monster, village=village
    )

    assert summary.village is village
    assert village.experience == 35
    assert village.villagers[0].role == "harvester"


def test_skill_guardian_reward_absorb_or_scroll() -> None:
    frost_nova = SkillDef(name="Frost Nova", mana_cost=12, damage=15, effect=EffectDef(kind="stun", duration=1, potency=1))

    player = make_player()
    guardian = make_monster()
    guardian.is_skill_guardian = True
    guardian.guarded_skill = frost_nova
    summary = _make_service().apply_fight_rewards(
        _outcome("victory", player, guardian), player, guardian, guardian_choice="absorb"
    )
    assert summary.learned_skill is frost_nova
    assert player.find_skill("Frost Nova") is frost_nova

    player = make_player()
    summary = _make_service().apply_fight_rewards(_outcome("victory", player, guardian), player, guardian)
    assert summary.scroll is not None
    assert summary.scroll.name == "Frost Nova Scroll"
    assert summary.scroll.skill_scroll.crafting_value == 38
    assert player.skills == []


def test_defeat_hands_gear_and_experience_to_monster() -> None:
    player = make_player(level=3, equipment=[_sword("Iron Sword", cp=10, attack=3)])
    monster = make_monster()

    summary = _make_service().apply_fight_rewards(_outcome("defeat", player, monster), player, monster)

    assert summary.experience_gained == 0
    assert monster.equipment[0].name == "Iron Sword"
    assert monster.stat_mod.attack == 3
    assert monster.experience == 300


def test_fled_changes_nothing() -> None:
    player = make_player()
    monster = make_monster(equipment=[_sword("Iron Sword", cp=10, attack=3)])

    summary = _make_service(0, 0).apply_fight_rewards(_outcome("fled", player, monster), player, monster)

    assert summary.experience_gained == 0
    assert player.equipment == {}
    assert player.inventory == []


def test_guards_written_back_and_recovered_after_boss_fight() -> None:
    village = Village(name="Hero's Village", active_guards=[make_guard("Guard 1", health=50), make_guard("Guard 2", health=50)])
    village.active_guards[1].injure()
    village.active_guards[1].recovery_time = 1
    fight_guards = [make_guard("Guard 1", health=50)]
    fight_guards[0].combatant.health.current = 0
    fight_guards[0].injure()
    player = make_player()
    boss = make_monster()
    boss.is_boss = True

    summary = _make_service().apply_fight_rewards(
        _outcome("victory", player, boss, guards_participated=True),
        player,
        boss,
        village=village,
        fight_guards=fight_guards,
    )

    assert summary.fallen_guards == ["Guard 1"]
    assert summary.recovered_guards == ["Guard 2"]
    assert [guard.name for guard in village.active_guards] == ["Guard 2"]


def test_refresh_keeps_running_buffs() -> None:
    player = make_player(equipment=[_sword("Iron Sword", cp=10, attack=3)])
    player.effects.append(StatusEffect(kind="buff_attack", duration=2, potency=8))

    refresh_stat_mods(player)

    assert player.stat_mod.attack == 11


def test_duel_rewards_adjust_health_and_restore_winner() -> None:
    winner = make_monster(name="Wolf", health=40)
    winner.health.current = 12
    loser = make_monster(name="Boar", level=3)
    loser.equipment[1] = Item(name="Bone Armor", slot=1, cp=4, stat_mod=StatModifier(max_health=10))

    equipped = _make_service().apply_duel_rewards(DuelResult(winner=winner, loser=loser, rounds=5))

    assert [item.name for item in equipped] == ["Bone Armor"]
    assert winner.monster_kills == 1
    assert winner.experience == 300
    assert winner.health.maximum == 50
    assert winner.health.current == 50


def test_fleeing_a_boss_leaves_village_guards_untouched() -> None:
    village = Village(name="Hero's Village", active_guards=[make_guard("Guard 1", health=50)])
    village.active_guards[0].injure()
    fight_guards = [make_guard("Guard 1", health=50)]
    fight_guards[0].combatant.health.current = 0
    fight_guards[0].injure()
    player = make_player()
    boss = make_monster()
    boss.is_boss = True

    summary = _make_service().apply_fight_rewards(
        _outcome("fled", player, boss, guards_participated=True),
        player,
        boss,
        village=village,
        fight_guards=fight_guards,
    )

    assert summary.fallen_guards == []
    assert summary.recovered_guards == []
    assert [guard.name for guard in village.active_guards] == ["Guard 1"]
    assert village.active_guards[0].combatant.health.current == 50
    assert village.active_guards[0].recovery_time == 3
