"""Status effect lifecycle helpers."""
from __future__ import annotations

from typing import List, Sequence

from autobattle.domain.battle_models import ActiveStatusEffect, Combatant
from autobattle.domain.defs import StatusEffectDef


def apply_status_effect(effects: List[ActiveStatusEffect], effect: StatusEffectDef) -> bool:
    """
    Attach an effect, refreshing the duration of a non-stackable one already present.

    Returns True when a new instance was added, False when an existing
    instance had its duration refreshed instead.
    """

    if not effect.stackable:
        for existing in effects:
            if existing.effect.id == effect.id:
                existing.remaining_duration = effect.duration
                return False
    effects.append(ActiveStatusEffect(effect=effect, remaining_duration=effect.duration))
    return True


def has_active_buff(combatant: Combatant) -> bool:
    return any(active.effect.type == "buff" for active in combatant.status_effects)


def stat_modifier_total(effects: Sequence[ActiveStatusEffect], stat_name: str) -> int:
    return sum(active.effect.stat_modifiers.get(stat_name, 0) for active in effects)


def compute_effective_speed(combatant: Combatant) -> int:
    return max(1, combatant.stats.speed + stat_modifier_total(combatant.status_effects, "speed"))


def compute_effective_stat(combatant: Combatant, stat_name: str) -> int:
    base = getattr(combatant.stats, stat_name)
    return max(0, base + stat_modifier_total(combatant.status_effects, stat_name))


def tick_damage_over_time(combatant: Combatant) -> int:
    """Apply every active DOT to its holder. Returns the HP actually lost."""
    total = sum(active.effect.damage_per_turn for active in combatant.status_effects)
    if total <= 0:
        return 0
    before = combatant.stats.hp
    combatant.stats.hp = max(0, before - total)
    return before - combatant.stats.hp


def decay_status_effects(combatant: Combatant) -> List[StatusEffectDef]:
    """Count every effect down by one round and drop the expired ones."""
    expired: List[StatusEffectDef] = []
    remaining: List[ActiveStatusEffect] = []
    for active in combatant.status_effects:
        active.remaining_duration -= 1
        if active.remaining_duration > 0:
            remaining.append(active)
        else:
            expired.append(active.effect)
    combatant.status_effects = remaining
    return expired


def decay_cooldowns(combatant: Combatant) -> None:
    for instance in combatant.skills:
        if instance.current_cooldown > 0:
            instance.current_cooldown -= 1
