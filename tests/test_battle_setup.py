from __future__ import annotations

import json
from pathlib import Path

import pytest

from autobattle.core.rng import RNG
from autobattle.core.settings import BattleSettings
from autobattle.data.repositories import MonstersRepository, PlayerProfilesRepository, SkillsRepository
from autobattle.domain.defs import MonsterDef
from autobattle.services import BattleSetupService, CollectingRewardSink, CombatantConstructionError

from tests.helpers.battle_builders import make_stats, strike


class _StaticPlayers:
    def __init__(self, stats, loadout, matchups=((), ())) -> None:
        self._stats = stats
        self._loadout = loadout
        self._matchups = matchups

    def load_player_base_stats(self, player_id: str):
        if player_id != "tester":
            raise KeyError(player_id)
        return self._stats

    def load_player_skill_loadout(self, player_id: str):
        return self._loadout

    def load_player_matchups(self, player_id: str):
        return self._matchups


class _StaticMonsters:
    def __init__(self, template: MonsterDef) -> None:
        self._template = template

    def load_monster_template(self, monster_id: str) -> MonsterDef:
        if monster_id != self._template.id:
            raise KeyError(monster_id)
        return self._template


def _service(player_stats=None, loadout=None, matchups=((), ())) -> BattleSetupService:
    monster = MonsterDef(id="dummy", name="Dummy", stats=make_stats(max_hp=10), skills=(strike(),))
    players = _StaticPlayers(
        player_stats or make_stats(attack=30), [strike()] if loadout is None else loadout, matchups
    )
    return BattleSetupService(players, _StaticMonsters(monster))


def test_create_session_builds_both_sides() -> None:
    session = _service().create_session("tester", "dummy", rng=RNG(1), player_name="Tester")
    state = session.get_state()

    assert session.phase == "preparing"
    assert state.player.instance_id == "tester"
    assert state.player.name == "Tester"
    assert state.enemy.instance_id == "dummy"
    assert state.enemy.hp == 10


def test_player_matchups_reach_the_combatant() -> None:
    session = _service(matchups=(("ice",), ("fire",))).create_session("tester", "dummy")
    player = session.get_state().player

    assert player.resistances == ("ice",)
    assert player.weaknesses == ("fire",)


def test_profile_matchups_from_definitions(tmp_path: Path) -> None:
    definitions_dir = tmp_path / "definitions"
    definitions_dir.mkdir()
    _write_json(definitions_dir / "status_effects.json", {})
    _write_json(
        definitions_dir / "skills.json",
        {"jab": {"name": "Jab", "type": "damage", "damage_type": "physical", "power": 100, "mp_cost": 0, "cooldown": 0}},
    )
    stats = {
        "max_hp": 50,
        "max_mp": 10,
        "attack": 10,
        "magic_attack": 10,
        "defense": 5,
        "magic_defense": 5,
        "speed": 10,
    }
    _write_json(
        definitions_dir / "players.json",
        {"tester": {"name": "Tester", "stats": stats, "skills": ["jab"], "weaknesses": ["fire"], "resistances": ["ice"]}},
    )
    _write_json(definitions_dir / "monsters.json", {"imp": {"name": "Imp", "level": 1, "skills": ["jab"]}})
    skills_repo = SkillsRepository(base_path=definitions_dir)
    service = BattleSetupService(
        PlayerProfilesRepository(skills_repo=skills_repo, base_path=definitions_dir),
        MonstersRepository(skills_repo=skills_repo, base_path=definitions_dir),
    )

    player = service.create_session("tester", "imp").get_state().player

    assert player.weaknesses == ("fire",)
    assert player.resistances == ("ice",)


def test_unknown_ids_fail_before_a_session_exists() -> None:
    with pytest.raises(CombatantConstructionError):
        _service().create_session("ghost", "dummy")
    with pytest.raises(CombatantConstructionError):
        _service().create_session("tester", "ghost")


def test_empty_loadout_fails_construction() -> None:
    with pytest.raises(CombatantConstructionError):
        _service(loadout=[]).create_session("tester", "dummy")


def test_run_battle_delivers_result_to_sink() -> None:
    sink = CollectingRewardSink()

    result = _service().run_battle("tester", "dummy", rng=RNG(3), reward_sink=sink)

    assert sink.results == [result]
    assert result.winner == "player"


def test_default_definitions_battle_is_reproducible() -> None:
    skills_repo = SkillsRepository()
    service = BattleSetupService(
        PlayerProfilesRepository(skills_repo=skills_repo), MonstersRepository(skills_repo=skills_repo)
    )
    settings = BattleSettings(seed=2024)

    first = service.run_battle("hero", "goblin_shaman", rng=RNG(settings.seed), settings=settings)
    second = service.run_battle("hero", "goblin_shaman", rng=RNG(settings.seed), settings=settings)

    assert first.actions == second.actions
    assert first.winner == second.winner
    assert 1 <= first.rounds <= settings.max_rounds


def _write_json(path: Path, payload: dict) -> None:
    path.write_text(json.dumps(payload), encoding="utf-8")
