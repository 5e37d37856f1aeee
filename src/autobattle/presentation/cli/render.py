"""Shared CLI rendering helpers."""
from __future__ import annotations

import os

from autobattle.domain.battle_models import BattleAction, BattleResult, BattleStateSnapshot, CombatantSnapshot


def debug_enabled() -> bool:
    """Return True only when AUTOBATTLE_DEBUG is explicitly set to '1'."""
    return os.getenv("AUTOBATTLE_DEBUG") == "1"


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def format_action(action: BattleAction, names: dict[str, str]) -> str:
    """Describe one action on a single line."""
    attacker = names.get(action.attacker_id, action.attacker_id)
    target = names.get(action.target_id, action.target_id)
    skill_name = action.skill.name
    if action.is_evaded:
        line = f"{attacker} uses {skill_name}, but {target} evades."
    elif action.damage is not None:
        line = f"{attacker} uses {skill_name} on {target} for {action.damage} damage."
        if action.is_critical:
            line += " Critical hit!"
        if action.elemental_multiplier is not None:
            line += " It's super effective!" if action.elemental_multiplier > 1 else " It's not very effective."
    elif action.healing is not None:
        line = f"{attacker} uses {skill_name} and recovers {action.healing} HP."
    else:
        line = f"{attacker} uses {skill_name}."
    if action.status_effect_applied:
        line += f" ({action.status_effect_applied})"
    if action.combo_count > 0:
        line += f" [combo x{action.combo_count}]"
    if debug_enabled():
        line = f"[{action.action_id}] {line}"
    return line


def format_combatant(combatant: CombatantSnapshot) -> str:
    effects = ", ".join(f"{effect.name} {effect.remaining_duration}" for effect in combatant.status_effects)
    line = f"{combatant.name} Lv{combatant.level}  HP {combatant.hp}/{combatant.max_hp}  MP {combatant.mp}/{combatant.max_mp}"
    if effects:
        line += f"  [{effects}]"
    if not combatant.is_alive:
        line += "  DOWN"
    return line


def render_round(snapshot: BattleStateSnapshot) -> None:
    """Print both combatants after a round."""
    if snapshot.round_number == 0:
        render_heading(f"{snapshot.player.name} vs {snapshot.enemy.name}")
    else:
        render_heading(f"Round {snapshot.round_number}")
    print(format_combatant(snapshot.player))
    print(format_combatant(snapshot.enemy))


def render_result(result: BattleResult, player_name: str, enemy_name: str) -> None:
    """Print the outcome and any rewards."""
    render_heading("Result")
    if result.winner == "none":
        print(f"No winner after {result.rounds} rounds.")
    else:
        winner_name = player_name if result.winner == "player" else enemy_name
        print(f"{winner_name} wins in {result.rounds} rounds.")
    print(f"Damage dealt: {result.player_damage_dealt}  Damage taken: {result.player_damage_taken}")
    if result.rewards is not None:
        print(f"Experience: {result.experience}  Gold: {result.rewards.gold}")
        for item_id in result.rewards.items:
            print(f"- Found {item_id}")
