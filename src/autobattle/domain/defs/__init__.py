"""Domain definition exports."""

from .monster_def import MonsterDef
from .player_profile_def import PlayerProfileDef
from .skill_def import BuffKind, DamageKind, DebuffKind, HealKind, SkillDef, SkillKind
from .status_effect_def import MODIFIABLE_STATS, StatusEffectDef

__all__ = [
    "BuffKind",
    "DamageKind",
    "DebuffKind",
    "HealKind",
    "MODIFIABLE_STATS",
    "MonsterDef",
    "PlayerProfileDef",
    "SkillDef",
    "SkillKind",
    "StatusEffectDef",
]
