"""Player profile structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from autobattle.domain.entities import BaseStats


@dataclass(frozen=True, slots=True)
class PlayerProfileDef:
    """Stored player stats and the ids of the skills they have equipped."""

    id: str
    name: str
    stats: BaseStats
    skill_ids: Tuple[str, ...]
    resistances: Tuple[str, ...] = ()
    weaknesses: Tuple[str, ...] = ()
