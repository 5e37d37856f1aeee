"""Battle domain models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from autobattle.core.types import BattlePhase, Side, SkillType, Winner
from autobattle.domain.defs import SkillDef, StatusEffectDef
from autobattle.domain.entities import Stats


@dataclass(slots=True)
class SkillInstance:
    """A combatant's own copy of a catalog skill with its cooldown counter."""

    skill: SkillDef
    current_cooldown: int = 0

    @property
    def id(self) -> str:
        return self.skill.id

    def is_available(self, mp: int) -> bool:
        return self.current_cooldown == 0 and mp >= self.skill.mp_cost


@dataclass(slots=True)
class ActiveStatusEffect:
    """Tracks a status effect attached to a combatant."""

    effect: StatusEffectDef
    remaining_duration: int

    @property
    def id(self) -> str:
        return self.effect.id


@dataclass(slots=True)
class Combatant:
    """Represents an individual participant in battle."""

    instance_id: str
    display_name: str
    side: Side
    stats: Stats
    skills: List[SkillInstance] = field(default_factory=list)
    status_effects: List[ActiveStatusEffect] = field(default_factory=list)
    resistances: Tuple[str, ...] = ()
    weaknesses: Tuple[str, ...] = ()
    source_id: str | None = None  # id of the defining skill or effect

    @property
    def is_alive(self) -> bool:
        return self.stats.hp > 0

    def available_skills(self) -> List[SkillInstance]:
        return [instance for instance in self.skills if instance.is_available(self.stats.mp)]

    def get_skill_instance(self, skill_id: str) -> SkillInstance:
        for instance in self.skills:
            if instance.id == skill_id:
                return instance
        raise KeyError(skill_id)


@dataclass(frozen=True, slots=True)
class BattleAction:
    """Immutable record of one resolved skill use."""

    action_id: str
    timestamp: int
    round_number: int
    attacker_id: str
    target_id: str
    skill: SkillDef
    damage: int | None = None
    healing: int | None = None
    is_critical: bool = False
    is_evaded: bool = False
    elemental_multiplier: float | None = None
    status_effect_applied: str | None = None
    combo_count: int = 0

    @property
    def skill_id(self) -> str:
        return self.skill.id


@dataclass(slots=True)
class BattleState:
    """Tracks the live, mutable state of an ongoing battle."""

    battle_id: str
    player: Combatant
    enemy: Combatant
    round_number: int = 0
    phase: BattlePhase = "preparing"
    actions: List[BattleAction] = field(default_factory=list)
    combo_counts: Dict[str, int] = field(default_factory=dict)
    max_combo_counts: Dict[str, int] = field(default_factory=dict)
    last_skill_ids: Dict[str, str] = field(default_factory=dict)

    @property
    def combatants(self) -> Tuple[Combatant, Combatant]:
        return (self.player, self.enemy)

    @property
    def is_over(self) -> bool:
        return not self.player.is_alive or not self.enemy.is_alive

    @property
    def last_action(self) -> BattleAction | None:
        return self.actions[-1] if self.actions else None


@dataclass(frozen=True, slots=True)
class SkillSnapshot:
    skill_id: str
    name: str
    skill_type: SkillType
    current_cooldown: int


@dataclass(frozen=True, slots=True)
class StatusEffectSnapshot:
    effect_id: str
    name: str
    effect_type: str
    remaining_duration: int


@dataclass(frozen=True, slots=True)
class CombatantSnapshot:
    """Read-only copy of a combatant for renderers."""

    instance_id: str
    name: str
    side: Side
    hp: int
    max_hp: int
    mp: int
    max_mp: int
    speed: int
    level: int
    is_alive: bool
    skills: Tuple[SkillSnapshot, ...]
    status_effects: Tuple[StatusEffectSnapshot, ...]
    resistances: Tuple[str, ...]
    weaknesses: Tuple[str, ...]


@dataclass(frozen=True, slots=True)
class BattleStateSnapshot:
    """Read-only copy of the whole battle, safe to hand to external code."""

    battle_id: str
    phase: BattlePhase
    round_number: int
    player: CombatantSnapshot
    enemy: CombatantSnapshot
    actions: Tuple[BattleAction, ...]


@dataclass(frozen=True, slots=True)
class BattleRewards:
    gold: int
    items: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class BattleResult:
    """Terminal artifact of a battle session."""

    battle_id: str
    winner: Winner
    rounds: int
    actions: Tuple[BattleAction, ...]
    experience: int
    rewards: BattleRewards | None = None
    player_damage_dealt: int = 0
    player_damage_taken: int = 0
    skills_used: int = 0

    @property
    def grants_rewards(self) -> bool:
        return self.winner == "player"


def snapshot_combatant(combatant: Combatant) -> CombatantSnapshot:
    return CombatantSnapshot(
        instance_id=combatant.instance_id,
        name=combatant.display_name,
        side=combatant.side,
        hp=combatant.stats.hp,
        max_hp=combatant.stats.max_hp,
        mp=combatant.stats.mp,
        max_mp=combatant.stats.max_mp,
        speed=combatant.stats.speed,
        level=combatant.stats.level,
        is_alive=combatant.is_alive,
        skills=tuple(
            SkillSnapshot(
                skill_id=instance.id,
                name=instance.skill.name,
                skill_type=instance.skill.type,
                current_cooldown=instance.current_cooldown,
            )
            for instance in combatant.skills
        ),
        status_effects=tuple(
            StatusEffectSnapshot(
                effect_id=active.effect.id,
                name=active.effect.name,
                effect_type=active.effect.type,
                remaining_duration=active.remaining_duration,
            )
            for active in combatant.status_effects
        ),
        resistances=combatant.resistances,
        weaknesses=combatant.weaknesses,
    )


def snapshot_battle_state(state: BattleState) -> BattleStateSnapshot:
    """Copy every mutable value out of the live state."""
    return BattleStateSnapshot(
        battle_id=state.battle_id,
        phase=state.phase,
        round_number=state.round_number,
        player=snapshot_combatant(state.player),
        enemy=snapshot_combatant(state.enemy),
        actions=tuple(state.actions),
    )
