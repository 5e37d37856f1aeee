"""Console front-end that watches one auto-battle."""
from __future__ import annotations

import logging
import secrets
from dataclasses import replace
from typing import Dict, List

from autobattle.core.rng import RNG
from autobattle.core.settings import BattleSettings, load_settings
from autobattle.data.repositories import MonstersRepository, PlayerProfilesRepository, SkillsRepository
from autobattle.domain.battle_models import BattleAction, BattleResult, BattleStateSnapshot
from autobattle.domain.defs import MonsterDef
from autobattle.presentation.cli.render import (
    debug_enabled,
    format_action,
    render_heading,
    render_result,
    render_round,
)
from autobattle.services import BattleSetupService

DEFAULT_PLAYER_ID = "hero"
_MAX_RANDOM_SEED = 2**31 - 1


def main() -> None:
    """Run a single battle chosen at the prompt."""
    logging.basicConfig(
        level=logging.DEBUG if debug_enabled() else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    settings = load_settings()
    players_repo, monsters_repo = _build_repositories()
    setup_service = BattleSetupService(players_repo, monsters_repo)
    print("=== Auto Battle ===")
    monster = _prompt_monster_choice(monsters_repo.all())
    seed = settings.seed if settings.seed is not None else _prompt_seed()
    print(f"Battle seed: {seed}")
    run_battle(
        setup_service,
        DEFAULT_PLAYER_ID,
        monster.id,
        settings=replace(settings, seed=seed),
        player_name=players_repo.get(DEFAULT_PLAYER_ID).name,
    )


def run_battle(
    setup_service: BattleSetupService,
    player_id: str,
    monster_id: str,
    *,
    settings: BattleSettings,
    player_name: str = "Player",
) -> BattleResult:
    """Simulate and print one battle."""
    session = setup_service.create_session(
        player_id, monster_id, rng=RNG(settings.seed), settings=settings, player_name=player_name
    )
    initial = session.get_state()
    names: Dict[str, str] = {
        initial.player.instance_id: initial.player.name,
        initial.enemy.instance_id: initial.enemy.name,
    }

    def on_action(action: BattleAction) -> None:
        print(f"- {format_action(action, names)}")

    def on_state_change(snapshot: BattleStateSnapshot) -> None:
        if snapshot.phase in ("finished", "interrupted"):
            return
        render_round(snapshot)

    result = session.start(on_action=on_action, on_state_change=on_state_change)
    render_result(result, initial.player.name, initial.enemy.name)
    return result


def _build_repositories() -> tuple[PlayerProfilesRepository, MonstersRepository]:
    """Construct repositories sharing one skill catalog."""
    skills_repo = SkillsRepository()
    players_repo = PlayerProfilesRepository(skills_repo=skills_repo)
    monsters_repo = MonstersRepository(skills_repo=skills_repo)
    return players_repo, monsters_repo


def _prompt_monster_choice(monsters: List[MonsterDef]) -> MonsterDef:
    render_heading("Choose an opponent")
    for idx, monster in enumerate(monsters, start=1):
        print(f"{idx}. {monster.name} (Lv{monster.stats.level})")
    while True:
        raw_value = input("Select opponent: ").strip()
        try:
            index = int(raw_value) - 1
        except ValueError:
            print("Invalid choice.")
            continue
        if 0 <= index < len(monsters):
            return monsters[index]
        print("Invalid choice.")


def _prompt_seed() -> int:
    while True:
        raw_value = input("Enter seed (blank for random): ").strip()
        if not raw_value:
            return secrets.randbelow(_MAX_RANDOM_SEED)
        try:
            return int(raw_value)
        except ValueError:
            print("Invalid seed. Please enter a valid integer.")
