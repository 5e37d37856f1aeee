"""Factory helpers for runtime entities."""

from .combatant_factory import (
    create_combatant_from_monster_template,
    create_combatant_from_player_profile,
    validate_base_stats,
)
from .id_factory import make_action_id, make_battle_id

__all__ = [
    "create_combatant_from_monster_template",
    "create_combatant_from_player_profile",
    "make_action_id",
    "make_battle_id",
    "validate_base_stats",
]
