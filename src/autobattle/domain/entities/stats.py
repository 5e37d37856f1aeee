"""Stat models for runtime entities."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Stats:
    """Stores the full combat stat block of a combatant."""

    max_hp: int
    hp: int
    max_mp: int
    mp: int
    attack: int
    magic_attack: int
    defense: int
    magic_defense: int
    speed: int
    critical_chance: float
    critical_damage_multiplier: float
    evasion_chance: float
    level: int = 1
