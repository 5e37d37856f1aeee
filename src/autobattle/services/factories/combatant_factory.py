"""Factories that turn externally supplied stat and skill data into combatants."""
from __future__ import annotations

import logging
from typing import Sequence, Tuple

from autobattle.core.types import Side
from autobattle.domain.battle_models import Combatant, SkillInstance
from autobattle.domain.defs import MonsterDef, SkillDef
from autobattle.domain.entities import BaseStats
from autobattle.services.errors import CombatantConstructionError

logger = logging.getLogger(__name__)

_NON_NEGATIVE_INT_STATS = ("max_mp", "attack", "magic_attack", "defense", "magic_defense", "speed")
_CHANCE_STATS = ("critical_chance", "evasion_chance")


def validate_base_stats(stats: BaseStats, context: str) -> None:
    """Reject stat blocks a battle cannot run with. Values are never clamped."""
    if stats.max_hp < 1:
        raise CombatantConstructionError(f"{context}: max_hp must be at least 1 (got {stats.max_hp}).")
    for name in _NON_NEGATIVE_INT_STATS:
        value = getattr(stats, name)
        if value < 0:
            raise CombatantConstructionError(f"{context}: {name} must not be negative (got {value}).")
    for name in _CHANCE_STATS:
        value = getattr(stats, name)
        if not 0.0 <= value <= 1.0:
            raise CombatantConstructionError(f"{context}: {name} must be between 0 and 1 (got {value}).")
    if stats.critical_damage_multiplier < 1.0:
        raise CombatantConstructionError(
            f"{context}: critical_damage_multiplier must be at least 1 (got {stats.critical_damage_multiplier})."
        )
    if stats.level < 1:
        raise CombatantConstructionError(f"{context}: level must be at least 1 (got {stats.level}).")


def create_combatant_from_player_profile(
    base_stats: BaseStats,
    skill_loadout: Sequence[SkillDef],
    *,
    instance_id: str = "player",
    name: str = "Player",
    resistances: Tuple[str, ...] = (),
    weaknesses: Tuple[str, ...] = (),
) -> Combatant:
    """Build the player's combatant with full pools and fresh cooldowns."""
    return _build_combatant(
        instance_id=instance_id,
        name=name,
        side="player",
        base_stats=base_stats,
        skills=skill_loadout,
        resistances=resistances,
        weaknesses=weaknesses,
        source_id=instance_id,
    )


def create_combatant_from_monster_template(template: MonsterDef, *, instance_id: str | None = None) -> Combatant:
    """Build an enemy combatant from a monster template."""
    return _build_combatant(
        instance_id=instance_id or template.id,
        name=template.name,
        side="enemy",
        base_stats=template.stats,
        skills=template.skills,
        resistances=template.resistances,
        weaknesses=template.weaknesses,
        source_id=template.id,
    )


def _build_combatant(
    *,
    instance_id: str,
    name: str,
    side: Side,
    base_stats: BaseStats,
    skills: Sequence[SkillDef],
    resistances: Tuple[str, ...],
    weaknesses: Tuple[str, ...],
    source_id: str,
) -> Combatant:
    context = f"{side} '{instance_id}'"
    if base_stats is None:
        raise CombatantConstructionError(f"{context}: stat data is missing.")
    validate_base_stats(base_stats, context)
    if not skills:
        raise CombatantConstructionError(f"{context}: skill loadout is empty.")

    combatant = Combatant(
        instance_id=instance_id,
        display_name=name,
        side=side,
        stats=base_stats.to_stats(),
        skills=[SkillInstance(skill=skill) for skill in skills],
        resistances=tuple(resistances),
        weaknesses=tuple(weaknesses),
        source_id=source_id,
    )
    logger.debug("Created %s combatant %s with %d skills", side, instance_id, len(combatant.skills))
    return combatant
