"""Round execution: status ticks, turn order, actions and decay."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from autobattle.domain.battle_models import BattleAction, BattleState, Combatant
from autobattle.domain.status_effects import (
    compute_effective_speed,
    decay_cooldowns,
    decay_status_effects,
    tick_damage_over_time,
)
from autobattle.services.damage_resolver import DamageResolver
from autobattle.services.factories import make_action_id
from autobattle.services.skill_selector import SkillSelector

logger = logging.getLogger(__name__)

MAX_COMBO_COUNT = 10


@dataclass(slots=True)
class RoundReport:
    """What happened during one round, in the order it happened."""

    round_number: int
    dot_damage: Dict[str, int] = field(default_factory=dict)
    actions: List[BattleAction] = field(default_factory=list)
    expired_effects: Dict[str, List[str]] = field(default_factory=dict)


class TurnScheduler:
    """Runs rounds against a live BattleState owned by a single session."""

    def __init__(self, resolver: DamageResolver, selector: SkillSelector | None = None) -> None:
        self._resolver = resolver
        self._selector = selector or SkillSelector()

    def turn_order(self, state: BattleState) -> Tuple[Combatant, Combatant]:
        """Faster side first; the player wins speed ties."""
        player_speed = compute_effective_speed(state.player)
        enemy_speed = compute_effective_speed(state.enemy)
        if player_speed >= enemy_speed:
            return state.player, state.enemy
        return state.enemy, state.player

    def run_round(self, state: BattleState) -> RoundReport:
        state.round_number += 1
        report = RoundReport(round_number=state.round_number)

        for combatant in state.combatants:
            lost = tick_damage_over_time(combatant)
            if lost:
                report.dot_damage[combatant.instance_id] = lost
                logger.debug("Round %d: %s takes %d status damage", state.round_number, combatant.instance_id, lost)

        if not state.is_over:
            first, second = self.turn_order(state)
            action = self.take_turn(state, first, second)
            if action is not None:
                report.actions.append(action)
            if not state.is_over:
                action = self.take_turn(state, second, first)
                if action is not None:
                    report.actions.append(action)

        for combatant in state.combatants:
            decay_cooldowns(combatant)
            expired = decay_status_effects(combatant)
            if expired:
                report.expired_effects[combatant.instance_id] = [effect.id for effect in expired]
        return report

    def take_turn(self, state: BattleState, attacker: Combatant, defender: Combatant) -> BattleAction | None:
        """Let ``attacker`` act once. Returns None for a defeated attacker or a no-op turn."""
        if not attacker.is_alive:
            return None
        instance = self._selector.select(
            attacker, defender, attacker.available_skills(), last_action=state.last_action
        )
        if instance is None:
            logger.debug("Round %d: %s has no usable skill", state.round_number, attacker.instance_id)
            return None

        skill = instance.skill
        chained = skill.chains_from(state.last_skill_ids.get(attacker.instance_id))
        # the bonus uses the chain length before this link; the action records it after
        bonus_count = state.combo_counts.get(attacker.instance_id, 0) if chained else 0
        combo_count = self._next_combo_count(state, attacker, chained)
        outcome = self._resolver.resolve(attacker, defender, skill, combo_count=bonus_count)
        applied = self._resolver.apply_outcome(outcome, attacker, defender)

        attacker.stats.mp -= skill.mp_cost
        instance.current_cooldown = skill.cooldown
        state.last_skill_ids[attacker.instance_id] = skill.id

        sequence = len(state.actions) + 1
        action = BattleAction(
            action_id=make_action_id(state.battle_id, sequence),
            timestamp=sequence,
            round_number=state.round_number,
            attacker_id=attacker.instance_id,
            target_id=defender.instance_id,
            skill=skill,
            damage=outcome.damage,
            healing=outcome.healing,
            is_critical=outcome.is_critical,
            is_evaded=outcome.is_evaded,
            elemental_multiplier=outcome.elemental_multiplier if outcome.elemental_multiplier != 1.0 else None,
            status_effect_applied=applied,
            combo_count=combo_count,
        )
        state.actions.append(action)
        logger.debug(
            "Round %d: %s uses %s on %s (damage=%s, healing=%s, evaded=%s, critical=%s)",
            state.round_number,
            attacker.instance_id,
            skill.id,
            defender.instance_id,
            action.damage,
            action.healing,
            action.is_evaded,
            action.is_critical,
        )
        return action

    @staticmethod
    def _next_combo_count(state: BattleState, attacker: Combatant, chained: bool) -> int:
        key = attacker.instance_id
        count = min(MAX_COMBO_COUNT, state.combo_counts.get(key, 0) + 1) if chained else 0
        state.combo_counts[key] = count
        state.max_combo_counts[key] = max(state.max_combo_counts.get(key, 0), count)
        return count
