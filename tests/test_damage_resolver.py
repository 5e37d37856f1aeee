from __future__ import annotations

import pytest

from autobattle.services.damage_resolver import DamageResolver, combo_multiplier, elemental_multiplier

from tests.helpers.battle_builders import (
    ScriptedRNG,
    buff,
    debuff,
    effect,
    heal,
    make_enemy,
    make_player,
    spell,
    strike,
)


def test_basic_attack_can_finish_a_weak_enemy() -> None:
    player = make_player(attack=20)
    enemy = make_enemy(max_hp=10, defense=0)
    resolver = DamageResolver(ScriptedRNG(variance=1.0))

    outcome = resolver.resolve(player, enemy, strike(power=100))
    resolver.apply_outcome(outcome, player, enemy)

    assert outcome.damage == 20
    assert enemy.stats.hp == 0
    assert not enemy.is_alive


def test_weakness_multiplies_damage_by_one_and_a_half() -> None:
    player = make_player(magic_attack=20)
    neutral_target = make_enemy()
    weak_target = make_enemy(weaknesses=["fire"])
    resolver = DamageResolver(ScriptedRNG())

    base = resolver.resolve(player, neutral_target, spell("fireball")).damage
    boosted = resolver.resolve(player, weak_target, spell("fireball"))

    assert base == 20
    assert boosted.damage == 30
    assert boosted.elemental_multiplier == 1.5


def test_resistance_halves_damage() -> None:
    player = make_player(magic_attack=20)
    enemy = make_enemy(resistances=["fire"])

    outcome = DamageResolver(ScriptedRNG()).resolve(player, enemy, spell("fireball"))

    assert outcome.damage == 10
    assert outcome.elemental_multiplier == 0.5


def test_weakness_takes_precedence_over_resistance() -> None:
    enemy = make_enemy(resistances=["fire"], weaknesses=["fire"])
    assert elemental_multiplier(spell("fireball"), enemy) == 1.5


def test_neutral_element_ignores_matchups() -> None:
    enemy = make_enemy(resistances=["neutral"], weaknesses=["neutral"])
    assert elemental_multiplier(strike(), enemy) == 1.0


def test_minimum_damage_is_one() -> None:
    player = make_player(attack=1)
    enemy = make_enemy(defense=50)

    outcome = DamageResolver(ScriptedRNG(variance=0.9)).resolve(player, enemy, strike())

    assert outcome.damage == 1


def test_critical_hit_uses_multiplier() -> None:
    player = make_player(attack=20, critical_chance=0.5, critical_damage_multiplier=2.0)
    enemy = make_enemy()
    # evasion draw misses, critical draw hits
    resolver = DamageResolver(ScriptedRNG([0.99, 0.0]))

    outcome = resolver.resolve(player, enemy, strike())

    assert outcome.is_critical is True
    assert outcome.damage == 40


def test_variance_scales_damage() -> None:
    player = make_player(attack=20)
    enemy = make_enemy()

    outcome = DamageResolver(ScriptedRNG(variance=0.9)).resolve(player, enemy, strike())

    assert outcome.damage == 18


def test_evasion_short_circuits_damage_and_status() -> None:
    burn = effect("burn", damage_per_turn=5)
    player = make_player(magic_attack=100)
    enemy = make_enemy(evasion_chance=1.0)
    resolver = DamageResolver(ScriptedRNG())

    outcome = resolver.resolve(player, enemy, spell("fireball", status_effect=burn))
    applied = resolver.apply_outcome(outcome, player, enemy)

    assert outcome.is_evaded is True
    assert outcome.damage == 0
    assert applied is None
    assert enemy.stats.hp == enemy.stats.max_hp
    assert enemy.status_effects == []


def test_combo_count_adds_ten_percent_per_link() -> None:
    player = make_player(attack=20)
    enemy = make_enemy()

    outcome = DamageResolver(ScriptedRNG()).resolve(player, enemy, strike(), combo_count=2)

    assert combo_multiplier(0) == 1.0
    assert outcome.damage == 24


def test_defense_is_halved_and_modified_by_status() -> None:
    player = make_player(attack=40)
    enemy = make_enemy(defense=20)
    resolver = DamageResolver(ScriptedRNG())

    assert resolver.resolve(player, enemy, strike()).damage == 30

    resolver.apply_outcome(
        resolver.resolve(player, enemy, debuff(effect("defense_down", defense=-10))), player, enemy
    )
    assert resolver.resolve(player, enemy, strike()).damage == 35


def test_heal_is_clamped_to_missing_hp() -> None:
    player = make_player(max_hp=100)
    player.stats.hp = 90
    enemy = make_enemy()
    resolver = DamageResolver(ScriptedRNG())

    outcome = resolver.resolve(player, enemy, heal(amount=50))
    resolver.apply_outcome(outcome, player, enemy)

    assert outcome.healing == 10
    assert outcome.damage is None
    assert player.stats.hp == 100


def test_buff_targets_caster_and_debuff_targets_opponent() -> None:
    player = make_player()
    enemy = make_enemy()
    resolver = DamageResolver(ScriptedRNG())
    rally = buff(effect("attack_up", effect_type="buff", attack=10))
    hex_skill = debuff(effect("slow", speed=-3))

    buff_name = resolver.apply_outcome(resolver.resolve(player, enemy, rally), player, enemy)
    debuff_name = resolver.apply_outcome(resolver.resolve(player, enemy, hex_skill), player, enemy)

    assert buff_name == "Attack Up"
    assert debuff_name == "Slow"
    assert [active.effect.id for active in player.status_effects] == ["attack_up"]
    assert [active.effect.id for active in enemy.status_effects] == ["slow"]


def test_damage_skill_applies_status_to_defender_on_hit() -> None:
    player = make_player()
    enemy = make_enemy()
    resolver = DamageResolver(ScriptedRNG())

    outcome = resolver.resolve(player, enemy, spell("fireball", status_effect=effect("burn", damage_per_turn=5)))
    applied = resolver.apply_outcome(outcome, player, enemy)

    assert applied == "Burn"
    assert enemy.status_effects[0].effect.id == "burn"


@pytest.mark.parametrize("damage", [5, 250])
def test_hp_stays_within_bounds(damage: int) -> None:
    player = make_player(attack=damage)
    enemy = make_enemy(max_hp=100)
    resolver = DamageResolver(ScriptedRNG())

    resolver.apply_outcome(resolver.resolve(player, enemy, strike()), player, enemy)

    assert 0 <= enemy.stats.hp <= enemy.stats.max_hp
