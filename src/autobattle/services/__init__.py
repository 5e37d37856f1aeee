"""Service layer exports."""

from .battle_session import BattleSession
from .battle_setup import (
    BattleSetupService,
    CollectingRewardSink,
    MonsterProvider,
    PlayerStatProvider,
    RewardSink,
)
from .damage_resolver import DamageResolver, SkillOutcome
from .errors import BattleSessionError, CombatantConstructionError, FactoryError
from .skill_selector import SkillSelector
from .turn_scheduler import RoundReport, TurnScheduler

__all__ = [
    "BattleSession",
    "BattleSessionError",
    "BattleSetupService",
    "CollectingRewardSink",
    "CombatantConstructionError",
    "DamageResolver",
    "FactoryError",
    "MonsterProvider",
    "PlayerStatProvider",
    "RewardSink",
    "RoundReport",
    "SkillOutcome",
    "SkillSelector",
    "TurnScheduler",
]
