"""Identifiers for battles and the actions they emit."""
from __future__ import annotations

from autobattle.core.rng import RNG

_BATTLE_ID_MIN = 100000
_BATTLE_ID_MAX = 999999


def make_battle_id(rng: RNG) -> str:
    """Draw a battle id from the session RNG so replays reuse the same id."""
    return f"battle_{rng.randint(_BATTLE_ID_MIN, _BATTLE_ID_MAX)}"


def make_action_id(battle_id: str, sequence: int) -> str:
    return f"{battle_id}_action_{sequence:04d}"
