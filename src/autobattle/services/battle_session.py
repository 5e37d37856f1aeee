"""Battle session owning one auto-battle from setup to result."""
from __future__ import annotations

import logging
import time
from typing import Callable, Iterator

from autobattle.core.rng import RNG
from autobattle.core.settings import BattleSettings
from autobattle.core.types import Winner
from autobattle.domain.battle_models import (
    BattleAction,
    BattleResult,
    BattleRewards,
    BattleState,
    BattleStateSnapshot,
    Combatant,
    snapshot_battle_state,
)
from autobattle.domain.rewards import calculate_experience, roll_gold, roll_item_drops
from autobattle.services.damage_resolver import DamageResolver
from autobattle.services.errors import BattleSessionError, CombatantConstructionError
from autobattle.services.factories import make_battle_id
from autobattle.services.turn_scheduler import RoundReport, TurnScheduler

logger = logging.getLogger(__name__)

ActionCallback = Callable[[BattleAction], None]
StateCallback = Callable[[BattleStateSnapshot], None]


class BattleSession:
    """
    Drives a single player-versus-enemy battle.

    The session is the only owner of its combatants while it runs; callers
    see the battle through immutable snapshots and action records. Phases
    only move forward: preparing -> fighting -> finished | interrupted.

    A session runs once. Use ``start`` for callback-style consumption or
    ``iter_actions`` for a lazy stream; both produce the same actions for
    the same RNG seed.
    """

    def __init__(
        self,
        player: Combatant,
        enemy: Combatant,
        *,
        rng: RNG | None = None,
        settings: BattleSettings | None = None,
        scheduler: TurnScheduler | None = None,
        battle_id: str | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        _check_combatants(player, enemy)
        self._settings = settings or BattleSettings()
        self._rng = rng or RNG(self._settings.seed)
        self._scheduler = scheduler or TurnScheduler(DamageResolver(self._rng))
        self._sleep = sleep
        self._state = BattleState(battle_id=battle_id or make_battle_id(self._rng), player=player, enemy=enemy)
        self._stop_requested = False
        self._result: BattleResult | None = None

    # -----------------------
    # Public API
    # -----------------------
    @property
    def battle_id(self) -> str:
        return self._state.battle_id

    @property
    def phase(self) -> str:
        return self._state.phase

    @property
    def result(self) -> BattleResult | None:
        return self._result

    def get_state(self) -> BattleStateSnapshot:
        """Return an immutable copy of the current battle state."""
        return snapshot_battle_state(self._state)

    def stop(self) -> None:
        """Request cancellation; it takes effect before the next round begins."""
        if self._state.phase in ("finished", "interrupted"):
            return
        self._stop_requested = True
        logger.info("Stop requested for %s at round %d", self.battle_id, self._state.round_number)

    def iter_actions(self) -> Iterator[BattleAction]:
        """Start the battle and return its lazy, finite, single-use action stream.

        Closing the stream before it is exhausted ends the battle as
        ``interrupted`` at the last completed round.
        """
        self._begin()
        return self._iter_round_actions()

    def start(
        self,
        on_action: ActionCallback | None = None,
        on_state_change: StateCallback | None = None,
    ) -> BattleResult:
        """Run the battle to completion, reporting each action and each finished round."""
        self._begin()
        rounds = self._run_rounds()
        try:
            self._emit_state(on_state_change)
            for report in rounds:
                for action in report.actions:
                    if on_action is not None:
                        on_action(action)
                    if self._settings.action_delay > 0:
                        self._sleep(self._settings.action_delay)
                self._emit_state(on_state_change)
        except Exception:
            rounds.close()
            if self._result is None:
                self._finish("interrupted")
            logger.exception("Battle %s halted by a callback error", self.battle_id)
            raise
        self._emit_state(on_state_change)
        assert self._result is not None
        return self._result

    # -----------------------
    # Loop
    # -----------------------
    def _begin(self) -> None:
        if self._state.phase != "preparing":
            raise BattleSessionError(f"Battle {self.battle_id} has already been started.")
        self._state.phase = "fighting"
        logger.info(
            "Battle %s started: %s vs %s",
            self.battle_id,
            self._state.player.instance_id,
            self._state.enemy.instance_id,
        )

    def _iter_round_actions(self) -> Iterator[BattleAction]:
        rounds = self._run_rounds()
        try:
            for report in rounds:
                yield from report.actions
        finally:
            rounds.close()
            if self._result is None:
                self._finish("interrupted")

    def _run_rounds(self) -> Iterator[RoundReport]:
        state = self._state
        while True:
            if state.is_over or state.round_number >= self._settings.max_rounds:
                self._finish("finished")
                return
            if self._stop_requested:
                self._finish("interrupted")
                return
            yield self._scheduler.run_round(state)

    def _finish(self, phase: str) -> None:
        state = self._state
        state.phase = phase  # type: ignore[assignment]
        winner: Winner = self._winner() if phase == "finished" else "none"
        self._result = self._build_result(winner)
        logger.info(
            "Battle %s %s after %d rounds, winner=%s",
            self.battle_id,
            phase,
            state.round_number,
            winner,
        )

    def _winner(self) -> Winner:
        player_alive = self._state.player.is_alive
        enemy_alive = self._state.enemy.is_alive
        if player_alive and not enemy_alive:
            return "player"
        if enemy_alive and not player_alive:
            return "enemy"
        return "none"

    def _build_result(self, winner: Winner) -> BattleResult:
        state = self._state
        player_id = state.player.instance_id
        player_actions = [action for action in state.actions if action.attacker_id == player_id]
        enemy_actions = [action for action in state.actions if action.attacker_id != player_id]

        experience = 0
        rewards = None
        if winner == "player":
            enemy_level = state.enemy.stats.level
            experience = calculate_experience(
                enemy_level, state.round_number, state.max_combo_counts.get(player_id, 0)
            )
            rewards = BattleRewards(gold=roll_gold(enemy_level, self._rng), items=roll_item_drops(self._rng))

        return BattleResult(
            battle_id=state.battle_id,
            winner=winner,
            rounds=state.round_number,
            actions=tuple(state.actions),
            experience=experience,
            rewards=rewards,
            player_damage_dealt=sum(action.damage or 0 for action in player_actions),
            player_damage_taken=sum(action.damage or 0 for action in enemy_actions),
            skills_used=len(player_actions),
        )

    def _emit_state(self, on_state_change: StateCallback | None) -> None:
        if on_state_change is not None:
            on_state_change(self.get_state())


def _check_combatants(player: Combatant, enemy: Combatant) -> None:
    if player.side != "player" or enemy.side != "enemy":
        raise CombatantConstructionError("A battle needs one player-side and one enemy-side combatant.")
    if player.instance_id == enemy.instance_id:
        raise CombatantConstructionError(f"Combatants share the instance id '{player.instance_id}'.")
    for combatant in (player, enemy):
        if not combatant.is_alive:
            raise CombatantConstructionError(f"Combatant '{combatant.instance_id}' starts the battle defeated.")
        if not combatant.skills:
            raise CombatantConstructionError(f"Combatant '{combatant.instance_id}' has no skills.")
