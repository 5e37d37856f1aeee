"""Base stat model (before a battle fills the current pools)."""
from __future__ import annotations

from dataclasses import dataclass

from .stats import Stats


@dataclass(frozen=True, slots=True)
class BaseStats:
    """Represents externally supplied stats; current HP/MP are derived at battle start."""

    max_hp: int
    max_mp: int
    attack: int
    magic_attack: int
    defense: int
    magic_defense: int
    speed: int
    critical_chance: float = 0.05
    critical_damage_multiplier: float = 1.5
    evasion_chance: float = 0.05
    level: int = 1

    def to_stats(self) -> Stats:
        """Return a runtime stat block with full HP and MP."""
        return Stats(
            max_hp=self.max_hp,
            hp=self.max_hp,
            max_mp=self.max_mp,
            mp=self.max_mp,
            attack=self.attack,
            magic_attack=self.magic_attack,
            defense=self.defense,
            magic_defense=self.magic_defense,
            speed=self.speed,
            critical_chance=self.critical_chance,
            critical_damage_multiplier=self.critical_damage_multiplier,
            evasion_chance=self.evasion_chance,
            level=self.level,
        )
