"""Shared type aliases for the core and domain layers."""
from typing import Literal

Side = Literal["player", "enemy"]
Winner = Literal["player", "enemy", "none"]
BattlePhase = Literal["preparing", "fighting", "finished", "interrupted"]
SkillType = Literal["damage", "heal", "buff", "debuff"]
DamageType = Literal["physical", "magical"]
EffectType = Literal["buff", "debuff"]
TargetType = Literal["single", "self"]
MonsterTier = Literal["common", "elite", "boss", "legendary"]

NEUTRAL_ELEMENT = "neutral"

__all__ = [
    "BattlePhase",
    "DamageType",
    "EffectType",
    "MonsterTier",
    "NEUTRAL_ELEMENT",
    "Side",
    "SkillType",
    "TargetType",
    "Winner",
]
