from __future__ import annotations

from autobattle.domain.battle_models import BattleState
from autobattle.domain.status_effects import apply_status_effect, decay_cooldowns
from autobattle.services.damage_resolver import DamageResolver
from autobattle.services.turn_scheduler import MAX_COMBO_COUNT, TurnScheduler

from tests.helpers.battle_builders import ScriptedRNG, effect, make_enemy, make_player, strike


def _scheduler() -> TurnScheduler:
    return TurnScheduler(DamageResolver(ScriptedRNG()))


def _state(player, enemy) -> BattleState:
    return BattleState(battle_id="battle_100000", player=player, enemy=enemy, phase="fighting")


def test_player_acts_first_on_speed_tie() -> None:
    state = _state(make_player(speed=10), make_enemy(speed=10))
    first, second = _scheduler().turn_order(state)

    assert first.instance_id == "player"
    assert second.instance_id == "enemy"


def test_faster_enemy_acts_first() -> None:
    state = _state(make_player(speed=10), make_enemy(speed=11))
    first, _ = _scheduler().turn_order(state)

    assert first.instance_id == "enemy"


def test_speed_modifiers_change_turn_order() -> None:
    state = _state(make_player(speed=10), make_enemy(speed=12))
    apply_status_effect(state.enemy.status_effects, effect("slow", speed=-5))

    first, _ = _scheduler().turn_order(state)

    assert first.instance_id == "player"


def test_cooldown_counts_down_once_per_round() -> None:
    slam = strike("slam", power=200, cooldown=3)
    state = _state(make_player([slam, strike("jab", power=50)], max_hp=1000), make_enemy(max_hp=10000))
    scheduler = _scheduler()
    slam_instance = state.player.get_skill_instance("slam")

    action = scheduler.take_turn(state, state.player, state.enemy)
    assert action is not None and action.skill_id == "slam"
    assert slam_instance.current_cooldown == 3

    readings = []
    for expected_skill in ("jab", "jab", "slam"):
        scheduler.take_turn(state, state.enemy, state.player)
        for combatant in state.combatants:
            decay_cooldowns(combatant)
        readings.append(slam_instance.current_cooldown)
        action = scheduler.take_turn(state, state.player, state.enemy)
        assert action is not None and action.skill_id == expected_skill

    assert readings == [2, 1, 0]


def test_run_round_uses_skill_again_on_fourth_round() -> None:
    slam = strike("slam", power=200, cooldown=3)
    state = _state(make_player([slam, strike("jab", power=50)], max_hp=1000), make_enemy(max_hp=10000))
    scheduler = _scheduler()

    used = []
    cooldowns = []
    for _ in range(4):
        report = scheduler.run_round(state)
        used.append(report.actions[0].skill_id)
        cooldowns.append(state.player.get_skill_instance("slam").current_cooldown)

    assert used == ["slam", "jab", "jab", "slam"]
    assert cooldowns == [2, 1, 0, 2]


def test_defeated_second_actor_does_not_act() -> None:
    state = _state(make_player(attack=100), make_enemy(max_hp=10))

    report = _scheduler().run_round(state)

    assert [action.attacker_id for action in report.actions] == ["player"]
    assert state.is_over
    assert state.round_number == 1


def test_take_turn_deducts_mp_and_records_action() -> None:
    state = _state(make_player([strike(mp_cost=10)], max_mp=50), make_enemy())

    action = _scheduler().take_turn(state, state.player, state.enemy)

    assert action is not None
    assert state.player.stats.mp == 40
    assert action.action_id == "battle_100000_action_0001"
    assert action.timestamp == 1
    assert action.target_id == "enemy"
    assert state.actions == [action]


def test_turn_without_usable_skill_is_a_no_op() -> None:
    state = _state(make_player([strike(mp_cost=10)], max_mp=5), make_enemy())

    action = _scheduler().take_turn(state, state.player, state.enemy)

    assert action is None
    assert state.player.stats.mp == 5
    assert state.actions == []


def test_damage_over_time_ticks_before_actions() -> None:
    state = _state(make_player(), make_enemy(max_hp=100))
    apply_status_effect(state.enemy.status_effects, effect("burn", duration=2, damage_per_turn=5))

    report = _scheduler().run_round(state)

    assert report.dot_damage == {"enemy": 5}
    assert state.enemy.stats.hp == 100 - 5 - 20
    assert state.enemy.status_effects[0].remaining_duration == 1


def test_damage_over_time_kill_skips_actions_but_decays() -> None:
    state = _state(make_player(), make_enemy(max_hp=100))
    state.enemy.stats.hp = 3
    apply_status_effect(state.enemy.status_effects, effect("burn", duration=1, damage_per_turn=5))

    report = _scheduler().run_round(state)

    assert report.actions == []
    assert state.enemy.stats.hp == 0
    assert report.expired_effects == {"enemy": ["burn"]}


def test_chained_skill_increments_combo_and_resets() -> None:
    opener = strike("opener", power=100)
    finisher = strike("finisher", power=50, combo_with=("opener",))
    state = _state(make_player([opener, finisher], attack=40), make_enemy(max_hp=10000))
    scheduler = _scheduler()

    first = scheduler.take_turn(state, state.player, state.enemy)
    second = scheduler.take_turn(state, state.player, state.enemy)
    third = scheduler.take_turn(state, state.player, state.enemy)

    assert first is not None and second is not None and third is not None
    assert (first.skill_id, first.combo_count) == ("opener", 0)
    assert (second.skill_id, second.combo_count) == ("finisher", 1)
    assert second.damage == 20
    assert (third.skill_id, third.combo_count) == ("opener", 0)
    assert state.max_combo_counts["player"] == 1


def test_combo_counter_is_capped() -> None:
    chain = strike("chain", combo_with=("chain",))
    state = _state(make_player([chain]), make_enemy(max_hp=100000))
    scheduler = _scheduler()

    counts = []
    damages = []
    for _ in range(MAX_COMBO_COUNT + 3):
        action = scheduler.take_turn(state, state.player, state.enemy)
        assert action is not None
        counts.append(action.combo_count)
        damages.append(action.damage)

    assert counts[0] == 0
    assert max(counts) == MAX_COMBO_COUNT
    assert counts[-1] == MAX_COMBO_COUNT
    assert damages[:3] == [20, 20, 22]
    assert damages[-1] == 40
