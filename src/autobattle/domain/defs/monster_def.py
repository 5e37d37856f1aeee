"""Monster template structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from autobattle.domain.entities import BaseStats

from .skill_def import SkillDef


@dataclass(frozen=True, slots=True)
class MonsterDef:
    """Everything needed to build an enemy combatant."""

    id: str
    name: str
    stats: BaseStats
    skills: Tuple[SkillDef, ...]
    resistances: Tuple[str, ...] = ()
    weaknesses: Tuple[str, ...] = ()
