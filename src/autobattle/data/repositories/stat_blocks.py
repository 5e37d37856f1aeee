"""Shared parsing of stat blocks for player and monster definitions."""
from __future__ import annotations

from typing import Dict

from autobattle.data.errors import DataValidationError
from autobattle.data.repositories.base import RepositoryBase

INT_STAT_FIELDS = (
    "max_hp",
    "max_mp",
    "attack",
    "magic_attack",
    "defense",
    "magic_defense",
    "speed",
    "level",
)
FLOAT_STAT_FIELDS = ("critical_chance", "critical_damage_multiplier", "evasion_chance")


def parse_stat_fields(raw: dict[str, object], context: str) -> Dict[str, object]:
    """Type-check the stat keys present in ``raw``; range checks happen at construction."""
    values: Dict[str, object] = {}
    for key, value in raw.items():
        if key in INT_STAT_FIELDS:
            values[key] = RepositoryBase._require_int(value, f"{context}.{key}")
        elif key in FLOAT_STAT_FIELDS:
            values[key] = RepositoryBase._require_float(value, f"{context}.{key}")
        else:
            raise DataValidationError(f"{context} has unknown stat '{key}'.")
    return values
