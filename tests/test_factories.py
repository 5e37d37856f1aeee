from __future__ import annotations

from dataclasses import replace

import pytest

from autobattle.core.rng import RNG
from autobattle.domain.defs import MonsterDef
from autobattle.services.errors import CombatantConstructionError, FactoryError
from autobattle.services.factories import (
    create_combatant_from_monster_template,
    create_combatant_from_player_profile,
    make_action_id,
    make_battle_id,
)

from tests.helpers.battle_builders import make_stats, strike


def test_player_combatant_starts_fresh() -> None:
    combatant = create_combatant_from_player_profile(
        make_stats(max_hp=80, max_mp=30), [strike("a", cooldown=2), strike("b")], name="Aria"
    )

    assert combatant.side == "player"
    assert combatant.display_name == "Aria"
    assert combatant.stats.hp == 80
    assert combatant.stats.mp == 30
    assert combatant.status_effects == []
    assert [instance.current_cooldown for instance in combatant.skills] == [0, 0]


def test_monster_combatant_copies_matchups() -> None:
    template = MonsterDef(
        id="slime",
        name="Slime",
        stats=make_stats(),
        skills=(strike(),),
        resistances=("ice",),
        weaknesses=("fire",),
    )

    combatant = create_combatant_from_monster_template(template)

    assert combatant.instance_id == "slime"
    assert combatant.side == "enemy"
    assert combatant.source_id == "slime"
    assert combatant.resistances == ("ice",)
    assert combatant.weaknesses == ("fire",)


def test_combatants_sharing_a_skill_keep_separate_cooldowns() -> None:
    shared = strike(cooldown=3)
    template = MonsterDef(id="twin", name="Twin", stats=make_stats(), skills=(shared,))
    first = create_combatant_from_monster_template(template, instance_id="twin_a")
    second = create_combatant_from_monster_template(template, instance_id="twin_b")

    first.skills[0].current_cooldown = 3

    assert second.skills[0].current_cooldown == 0
    assert shared.cooldown == 3


@pytest.mark.parametrize(
    "overrides",
    [
        {"max_hp": 0},
        {"max_hp": -5},
        {"attack": -1},
        {"speed": -2},
        {"evasion_chance": 1.5},
        {"critical_chance": -0.1},
        {"critical_damage_multiplier": 0.5},
        {"level": 0},
    ],
)
def test_invalid_stats_are_rejected(overrides: dict) -> None:
    stats = replace(make_stats(), **overrides)

    with pytest.raises(CombatantConstructionError):
        create_combatant_from_player_profile(stats, [strike()])


def test_empty_loadout_is_rejected() -> None:
    with pytest.raises(FactoryError):
        create_combatant_from_player_profile(make_stats(), [])


def test_missing_stats_are_rejected() -> None:
    with pytest.raises(CombatantConstructionError):
        create_combatant_from_player_profile(None, [strike()])  # type: ignore[arg-type]


def test_battle_ids_are_seeded() -> None:
    assert make_battle_id(RNG(5)) == make_battle_id(RNG(5))
    assert make_battle_id(RNG(5)).startswith("battle_")
    assert make_action_id("battle_1", 7) == "battle_1_action_0007"
