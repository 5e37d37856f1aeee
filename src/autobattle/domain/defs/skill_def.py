"""Skill definition structures.

A skill's behaviour is described by exactly one kind record. The resolver
dispatches on the kind type instead of probing optional fields.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from autobattle.core.types import NEUTRAL_ELEMENT, DamageType, SkillType, TargetType

from .status_effect_def import StatusEffectDef


@dataclass(frozen=True, slots=True)
class DamageKind:
    damage_type: DamageType
    power: int
    element: str = NEUTRAL_ELEMENT


@dataclass(frozen=True, slots=True)
class HealKind:
    amount: int


@dataclass(frozen=True, slots=True)
class BuffKind:
    """Applies the skill's status effect to the caster."""


@dataclass(frozen=True, slots=True)
class DebuffKind:
    """Applies the skill's status effect to the opponent."""


SkillKind = Union[DamageKind, HealKind, BuffKind, DebuffKind]


@dataclass(frozen=True, slots=True)
class SkillDef:
    """Immutable catalog entry for a combat skill."""

    id: str
    name: str
    kind: SkillKind
    mp_cost: int = 0
    cooldown: int = 0
    accuracy: int = 100
    target_type: TargetType = "single"
    description: str = ""
    status_effect: StatusEffectDef | None = None
    combo_with: Tuple[str, ...] = ()

    @property
    def type(self) -> SkillType:
        if isinstance(self.kind, DamageKind):
            return "damage"
        if isinstance(self.kind, HealKind):
            return "heal"
        if isinstance(self.kind, BuffKind):
            return "buff"
        return "debuff"

    @property
    def element(self) -> str:
        if isinstance(self.kind, DamageKind):
            return self.kind.element
        return NEUTRAL_ELEMENT

    @property
    def power(self) -> int:
        if isinstance(self.kind, DamageKind):
            return self.kind.power
        return 0

    def chains_from(self, previous_skill_id: str | None) -> bool:
        """Return True when this skill lists the previous skill as a combo starter."""
        return previous_skill_id is not None and previous_skill_id in self.combo_with
