"""Deterministic monster stat generation from level and tier."""
from __future__ import annotations

from typing import Mapping

from autobattle.core.types import MonsterTier
from autobattle.domain.entities import BaseStats

# Pools and offensive stats grow linearly with level and are then multiplied
# by the tier; speed ignores the tier so initiative stays comparable.
TIER_MULTIPLIERS: Mapping[str, float] = {
    "common": 1.0,
    "elite": 1.5,
    "boss": 2.5,
    "legendary": 4.0,
}
TIER_EVASION_BONUS: Mapping[str, float] = {"elite": 0.05, "boss": 0.1}
TIER_CRITICAL_BONUS: Mapping[str, float] = {"elite": 0.05, "boss": 0.15}

HP_BASE, HP_PER_LEVEL = 100, 20
MP_BASE, MP_PER_LEVEL = 50, 10
ATTACK_BASE, ATTACK_PER_LEVEL = 10, 5
DEFENSE_BASE, DEFENSE_PER_LEVEL = 5, 3
SPEED_BASE, SPEED_PER_LEVEL = 10, 2
BASE_EVASION = 0.05
BASE_CRITICAL = 0.05
CRITICAL_DAMAGE = 1.5


def scale_monster_stats(level: int, tier: MonsterTier = "common", overrides: Mapping[str, object] | None = None) -> BaseStats:
    if tier not in TIER_MULTIPLIERS:
        raise ValueError(f"Unknown monster tier '{tier}'.")
    mult = TIER_MULTIPLIERS[tier]
    values: dict[str, object] = {
        "level": level,
        "max_hp": int((HP_BASE + level * HP_PER_LEVEL) * mult),
        "max_mp": int((MP_BASE + level * MP_PER_LEVEL) * mult),
        "attack": int((ATTACK_BASE + level * ATTACK_PER_LEVEL) * mult),
        "magic_attack": int((ATTACK_BASE + level * ATTACK_PER_LEVEL) * mult),
        "defense": int((DEFENSE_BASE + level * DEFENSE_PER_LEVEL) * mult),
        "magic_defense": int((DEFENSE_BASE + level * DEFENSE_PER_LEVEL) * mult),
        "speed": SPEED_BASE + level * SPEED_PER_LEVEL,
        "evasion_chance": BASE_EVASION + TIER_EVASION_BONUS.get(tier, 0.0),
        "critical_chance": BASE_CRITICAL + TIER_CRITICAL_BONUS.get(tier, 0.0),
        "critical_damage_multiplier": CRITICAL_DAMAGE,
    }
    if overrides:
        unknown = set(overrides) - set(values)
        if unknown:
            raise ValueError(f"Unknown stat overrides: {sorted(unknown)}")
        values.update(overrides)
    return BaseStats(**values)  # type: ignore[arg-type]
