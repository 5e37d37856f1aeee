"""Wiring between stat/monster providers, battle sessions and reward sinks."""
from __future__ import annotations

import logging
from typing import List, Protocol, Sequence, Tuple

from autobattle.core.rng import RNG
from autobattle.core.settings import BattleSettings
from autobattle.domain.battle_models import BattleResult
from autobattle.domain.defs import MonsterDef, SkillDef
from autobattle.domain.entities import BaseStats
from autobattle.services.battle_session import ActionCallback, BattleSession, StateCallback
from autobattle.services.errors import CombatantConstructionError
from autobattle.services.factories import (
    create_combatant_from_monster_template,
    create_combatant_from_player_profile,
)

logger = logging.getLogger(__name__)


class PlayerStatProvider(Protocol):
    def load_player_base_stats(self, player_id: str) -> BaseStats:
        ...

    def load_player_skill_loadout(self, player_id: str) -> Sequence[SkillDef]:
        ...

    def load_player_matchups(self, player_id: str) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
        ...


class MonsterProvider(Protocol):
    def load_monster_template(self, monster_id: str) -> MonsterDef:
        ...


class RewardSink(Protocol):
    def receive_result(self, result: BattleResult) -> None:
        ...


class CollectingRewardSink:
    """Keeps every delivered result in memory."""

    def __init__(self) -> None:
        self.results: List[BattleResult] = []

    def receive_result(self, result: BattleResult) -> None:
        self.results.append(result)


class BattleSetupService:
    """Builds sessions from provider data and hands finished results to a sink."""

    def __init__(self, player_provider: PlayerStatProvider, monster_provider: MonsterProvider) -> None:
        self._player_provider = player_provider
        self._monster_provider = monster_provider

    def create_session(
        self,
        player_id: str,
        monster_id: str,
        *,
        rng: RNG | None = None,
        settings: BattleSettings | None = None,
        player_name: str = "Player",
    ) -> BattleSession:
        """Construct both combatants; any bad data fails here, before a session exists."""
        try:
            base_stats = self._player_provider.load_player_base_stats(player_id)
            loadout = list(self._player_provider.load_player_skill_loadout(player_id))
            resistances, weaknesses = self._player_provider.load_player_matchups(player_id)
        except KeyError as exc:
            raise CombatantConstructionError(f"Player '{player_id}' not found.") from exc
        try:
            template = self._monster_provider.load_monster_template(monster_id)
        except KeyError as exc:
            raise CombatantConstructionError(f"Monster '{monster_id}' not found.") from exc

        player = create_combatant_from_player_profile(
            base_stats,
            loadout,
            instance_id=player_id,
            name=player_name,
            resistances=tuple(resistances),
            weaknesses=tuple(weaknesses),
        )
        enemy_id = monster_id if monster_id != player_id else f"{monster_id}_enemy"
        enemy = create_combatant_from_monster_template(template, instance_id=enemy_id)
        return BattleSession(player, enemy, rng=rng, settings=settings)

    def run_battle(
        self,
        player_id: str,
        monster_id: str,
        *,
        rng: RNG | None = None,
        settings: BattleSettings | None = None,
        reward_sink: RewardSink | None = None,
        on_action: ActionCallback | None = None,
        on_state_change: StateCallback | None = None,
    ) -> BattleResult:
        session = self.create_session(player_id, monster_id, rng=rng, settings=settings)
        result = session.start(on_action=on_action, on_state_change=on_state_change)
        if reward_sink is not None:
            reward_sink.receive_result(result)
            logger.debug("Delivered result of %s to reward sink", result.battle_id)
        return result
