"""Repository exports."""

from .monsters_repo import MonstersRepository
from .player_profiles_repo import PlayerProfilesRepository
from .skills_repo import SkillsRepository
from .status_effects_repo import StatusEffectsRepository

__all__ = [
    "MonstersRepository",
    "PlayerProfilesRepository",
    "SkillsRepository",
    "StatusEffectsRepository",
]
