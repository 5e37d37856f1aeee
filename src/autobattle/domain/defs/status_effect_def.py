"""Status effect definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from autobattle.core.types import EffectType

MODIFIABLE_STATS = ("attack", "magic_attack", "defense", "magic_defense", "speed")


@dataclass(frozen=True, slots=True)
class StatusEffectDef:
    """Timed buff, debuff or damage-over-time template."""

    id: str
    name: str
    type: EffectType
    duration: int
    damage_per_turn: int = 0
    stat_modifiers: Mapping[str, int] = field(default_factory=dict)
    stackable: bool = False
