"""Battle controller stays UI-agnostic and only exposes structured state."""
from __future__ import annotations

from battlecore.data.repositories import ItemsRepository, SkillsRepository
from battlecore.domain.battle_models import ActionChoice
from battlecore.domain.status_effects import StatusEffect
from battlecore.services import BattleService
from battlecore.services.controllers import BattleController, ScriptedActionSource
from battlecore.services.factories import create_health_potion
from tests.helpers.combatants import make_monster, make_player
from tests.helpers.fixed_rng import FixedRNG


def _build_controller() -> BattleController:
    return BattleController(BattleService(FixedRNG(die=6)))


def test_available_actions_list_affordable_skills_and_potions() -> None:
    skills_repo = SkillsRepository()
    potion = create_health_potion("small", ItemsRepository())
    player = make_player(
        mana=16,
        skills=[skills_repo.get_by_name("Fireball"), skills_repo.get_by_name("Heal")],
        inventory=[potion],
    )

    actions = _build_controller().get_available_actions(player, make_monster())

    assert actions["can_attack"] and actions["can_defend"] and actions["can_flee"]
    assert [skill.name for skill in actions["available_skills"]] == ["Fireball"]
    assert actions["items"] == [potion]
    assert actions["can_use_item"]


def test_no_actions_while_stunned() -> None:
    player = make_player()
    player.effects.append(StatusEffect(kind="stun", duration=1, potency=1))

    actions = _build_controller().get_available_actions(player, make_monster())

    assert not actions["can_attack"]
    assert actions["available_skills"] == []


def test_scripted_source_replays_then_falls_back() -> None:
    player = make_player()
    monster = make_monster()
    fallback_calls = []

    def _fallback(actor, opponent, turn_number):
        fallback_calls.append(turn_number)
        return ActionChoice.defend()

    source = ScriptedActionSource([ActionChoice.flee()], fallback=_fallback)

    assert source(player, monster, 1) == ActionChoice.flee()
    assert source.remaining == 0
    assert source(player, monster, 2) == ActionChoice.defend()
    assert fallback_calls == [2]
    assert ScriptedActionSource([])(player, monster, 1) == ActionChoice.attack()


def test_run_fight_replays_choices() -> None:
    controller = _build_controller()
    player = make_player(attack_rolls=2)
    monster = make_monster(health=12)

    outcome = controller.run_fight(player, monster, choices=[ActionChoice.defend(), ActionChoice.attack()])

    assert outcome.outcome == "victory"
    assert outcome.rounds == 3
