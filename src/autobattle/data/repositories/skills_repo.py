"""Skill catalog backed by skills.json."""
from __future__ import annotations

from typing import Dict, List

from autobattle.core.types import NEUTRAL_ELEMENT
from autobattle.data.errors import DataReferenceError
from autobattle.data.repositories.base import RepositoryBase
from autobattle.data.repositories.status_effects_repo import StatusEffectsRepository
from autobattle.domain.defs import BuffKind, DamageKind, DebuffKind, HealKind, SkillDef, SkillKind

VALID_SKILL_TYPES = {"damage", "heal", "buff", "debuff"}
VALID_DAMAGE_TYPES = {"physical", "magical"}
VALID_TARGET_TYPES = {"single", "self"}


class SkillsRepository(RepositoryBase[SkillDef]):
    """Loads skills and resolves their status effect references."""

    def __init__(self, status_effects_repo: StatusEffectsRepository | None = None, base_path=None) -> None:
        super().__init__("skills.json", base_path)
        self._status_effects_repo = status_effects_repo or StatusEffectsRepository(base_path)

    def get_many(self, skill_ids: List[str] | tuple[str, ...], context: str) -> List[SkillDef]:
        """Return skills in the given order, raising DataReferenceError for unknown ids."""
        skills: List[SkillDef] = []
        for skill_id in skill_ids:
            try:
                skills.append(self.get(skill_id))
            except KeyError as exc:
                raise DataReferenceError(f"{context} references unknown skill '{skill_id}'.") from exc
        return skills

    def _build(self, raw: dict[str, object]) -> Dict[str, SkillDef]:
        skills: Dict[str, SkillDef] = {}
        for raw_id, payload in raw.items():
            context = f"skill '{raw_id}'"
            skill_data = self._require_mapping(payload, context)
            self._assert_required(skill_data, {"name", "type", "mp_cost", "cooldown"}, context)

            skill_type = self._require_literal(skill_data["type"], VALID_SKILL_TYPES, f"{context} type")
            status_effect = None
            effect_id = skill_data.get("status_effect")
            if effect_id is not None:
                effect_id = self._require_str(effect_id, f"{context} status_effect")
                try:
                    status_effect = self._status_effects_repo.get(effect_id)
                except KeyError as exc:
                    raise DataReferenceError(f"{context} references unknown status effect '{effect_id}'.") from exc
            elif skill_type in {"buff", "debuff"}:
                raise DataReferenceError(f"{context} is a {skill_type} skill without a status_effect.")

            skills[raw_id] = SkillDef(
                id=raw_id,
                name=self._require_str(skill_data["name"], f"{context} name"),
                kind=self._build_kind(skill_type, skill_data, context),
                mp_cost=self._require_int(skill_data["mp_cost"], f"{context} mp_cost", minimum=0),
                cooldown=self._require_int(skill_data["cooldown"], f"{context} cooldown", minimum=0),
                accuracy=self._require_int(skill_data.get("accuracy", 100), f"{context} accuracy", minimum=0),
                target_type=self._require_literal(  # type: ignore[arg-type]
                    skill_data.get("target_type", "single"), VALID_TARGET_TYPES, f"{context} target_type"
                ),
                description=self._require_str(skill_data.get("description", ""), f"{context} description"),
                status_effect=status_effect,
                combo_with=tuple(self._require_str_list(skill_data.get("combo_with"), f"{context} combo_with")),
            )

        for skill in skills.values():
            for combo_id in skill.combo_with:
                if combo_id not in skills:
                    raise DataReferenceError(f"skill '{skill.id}' combo_with references unknown skill '{combo_id}'.")
        return skills

    def _build_kind(self, skill_type: str, skill_data: dict[str, object], context: str) -> SkillKind:
        if skill_type == "damage":
            self._assert_required(skill_data, {"damage_type", "power"}, context)
            return DamageKind(
                damage_type=self._require_literal(  # type: ignore[arg-type]
                    skill_data["damage_type"], VALID_DAMAGE_TYPES, f"{context} damage_type"
                ),
                power=self._require_int(skill_data["power"], f"{context} power", minimum=0),
                element=self._require_str(skill_data.get("element", NEUTRAL_ELEMENT), f"{context} element"),
            )
        if skill_type == "heal":
            self._assert_required(skill_data, {"heal_amount"}, context)
            return HealKind(amount=self._require_int(skill_data["heal_amount"], f"{context} heal_amount", minimum=0))
        if skill_type == "buff":
            return BuffKind()
        return DebuffKind()
