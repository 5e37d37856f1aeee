"""Damage, healing and status resolution for a single skill use."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Literal

from autobattle.core.rng import RNG
from autobattle.core.types import NEUTRAL_ELEMENT
from autobattle.domain.battle_models import Combatant
from autobattle.domain.defs import BuffKind, DamageKind, HealKind, SkillDef, StatusEffectDef
from autobattle.domain.status_effects import apply_status_effect, compute_effective_stat

logger = logging.getLogger(__name__)

WEAKNESS_MULTIPLIER = 1.5
RESISTANCE_MULTIPLIER = 0.5
VARIANCE_LOW = 0.9
VARIANCE_HIGH = 1.1
COMBO_BONUS_PER_LINK = 0.1
MIN_DAMAGE = 1

StatusTarget = Literal["attacker", "defender"]


@dataclass(frozen=True, slots=True)
class SkillOutcome:
    """Everything a skill use does, computed before any state changes."""

    damage: int | None = None
    healing: int | None = None
    is_critical: bool = False
    is_evaded: bool = False
    elemental_multiplier: float = 1.0
    status_effect: StatusEffectDef | None = None
    status_target: StatusTarget | None = None


def elemental_multiplier(skill: SkillDef, defender: Combatant) -> float:
    """Weakness wins over resistance when a defender lists the element in both."""
    element = skill.element
    if element == NEUTRAL_ELEMENT:
        return 1.0
    if element in defender.weaknesses:
        return WEAKNESS_MULTIPLIER
    if element in defender.resistances:
        return RESISTANCE_MULTIPLIER
    return 1.0


def combo_multiplier(combo_count: int) -> float:
    return 1.0 + COMBO_BONUS_PER_LINK * max(0, combo_count)


class DamageResolver:
    """Computes skill outcomes; the injected RNG is its only source of chance.

    Draw order for a damage skill is fixed: evasion, then critical, then
    variance. An evaded hit consumes only the evasion draw. Heal, buff and
    debuff skills draw nothing.
    """

    def __init__(self, rng: RNG) -> None:
        self._rng = rng

    def resolve(self, attacker: Combatant, defender: Combatant, skill: SkillDef, *, combo_count: int = 0) -> SkillOutcome:
        kind = skill.kind
        if isinstance(kind, DamageKind):
            return self._resolve_damage(attacker, defender, skill, kind, combo_count)
        if isinstance(kind, HealKind):
            healing = min(kind.amount, attacker.stats.max_hp - attacker.stats.hp)
            return SkillOutcome(
                healing=healing,
                status_effect=skill.status_effect,
                status_target="attacker" if skill.status_effect else None,
            )
        if skill.status_effect is None:
            return SkillOutcome()
        target: StatusTarget = "attacker" if isinstance(kind, BuffKind) else "defender"
        return SkillOutcome(status_effect=skill.status_effect, status_target=target)

    def _resolve_damage(
        self,
        attacker: Combatant,
        defender: Combatant,
        skill: SkillDef,
        kind: DamageKind,
        combo_count: int,
    ) -> SkillOutcome:
        if self._rng.random() < defender.stats.evasion_chance:
            return SkillOutcome(damage=0, is_evaded=True)

        if kind.damage_type == "physical":
            attack_stat = compute_effective_stat(attacker, "attack")
            defense_stat = compute_effective_stat(defender, "defense")
        else:
            attack_stat = compute_effective_stat(attacker, "magic_attack")
            defense_stat = compute_effective_stat(defender, "magic_defense")
        base = attack_stat * (kind.power / 100) - defense_stat / 2

        element_mult = elemental_multiplier(skill, defender)

        is_critical = self._rng.random() < attacker.stats.critical_chance
        crit_mult = attacker.stats.critical_damage_multiplier if is_critical else 1.0

        variance = self._rng.uniform(VARIANCE_LOW, VARIANCE_HIGH)

        raw = base * element_mult * crit_mult * variance * combo_multiplier(combo_count)
        damage = math.floor(max(MIN_DAMAGE, raw))
        return SkillOutcome(
            damage=damage,
            is_critical=is_critical,
            elemental_multiplier=element_mult,
            status_effect=skill.status_effect,
            status_target="defender" if skill.status_effect else None,
        )

    @staticmethod
    def apply_outcome(outcome: SkillOutcome, attacker: Combatant, defender: Combatant) -> str | None:
        """Mutate both combatants according to ``outcome``.

        Returns the name of the status effect that was applied, if any.
        """
        if outcome.damage:
            defender.stats.hp = max(0, defender.stats.hp - outcome.damage)
        if outcome.healing:
            attacker.stats.hp = min(attacker.stats.max_hp, attacker.stats.hp + outcome.healing)
        if outcome.status_effect is None or outcome.status_target is None:
            return None
        target = attacker if outcome.status_target == "attacker" else defender
        apply_status_effect(target.status_effects, outcome.status_effect)
        logger.debug("%s gains %s", target.instance_id, outcome.status_effect.id)
        return outcome.status_effect.name
