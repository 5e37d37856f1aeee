"""Deterministic skill choice for auto-battling combatants."""
from __future__ import annotations

from typing import Sequence

from autobattle.domain.battle_models import BattleAction, Combatant, SkillInstance
from autobattle.domain.status_effects import has_active_buff

LOW_HP_RATIO = 0.3


class SkillSelector:
    """Picks a skill from what is currently available.

    Rules are checked in order and the first that matches wins:

    1. below 30% HP: the first heal skill
    2. no active buff: the first buff skill
    3. the previous action was this attacker's own: the first skill that
       combos from it
    4. the defender has weaknesses: the first skill of a matching element
    5. the highest-power damage skill (loadout order breaks ties), else the
       first available skill
    """

    def select(
        self,
        attacker: Combatant,
        defender: Combatant,
        available_skills: Sequence[SkillInstance],
        *,
        last_action: BattleAction | None = None,
    ) -> SkillInstance | None:
        if not available_skills:
            return None

        if attacker.stats.hp < attacker.stats.max_hp * LOW_HP_RATIO:
            heal = _first_of_type(available_skills, "heal")
            if heal is not None:
                return heal

        if not has_active_buff(attacker):
            buff = _first_of_type(available_skills, "buff")
            if buff is not None:
                return buff

        if last_action is not None and last_action.attacker_id == attacker.instance_id:
            for instance in available_skills:
                if instance.skill.chains_from(last_action.skill_id):
                    return instance

        if defender.weaknesses:
            for instance in available_skills:
                if instance.skill.element in defender.weaknesses:
                    return instance

        best: SkillInstance | None = None
        for instance in available_skills:
            if instance.skill.type != "damage":
                continue
            if best is None or instance.skill.power > best.skill.power:
                best = instance
        return best or available_skills[0]


def _first_of_type(skills: Sequence[SkillInstance], skill_type: str) -> SkillInstance | None:
    return next((instance for instance in skills if instance.skill.type == skill_type), None)
