"""Monster templates backed by monsters.json."""
from __future__ import annotations

from typing import Dict

from autobattle.data.errors import DataValidationError
from autobattle.data.repositories.base import RepositoryBase
from autobattle.data.repositories.skills_repo import SkillsRepository
from autobattle.data.repositories.stat_blocks import parse_stat_fields
from autobattle.domain.defs import MonsterDef
from autobattle.domain.entities import BaseStats
from autobattle.domain.monster_scaling import TIER_MULTIPLIERS, scale_monster_stats


class MonstersRepository(RepositoryBase[MonsterDef]):
    """Loads monster templates.

    A monster either lists a complete ``stats`` block or a ``level`` (and
    optional ``tier``) from which stats are generated; a partial ``stats``
    block next to ``level`` overrides individual generated values.
    """

    def __init__(self, skills_repo: SkillsRepository | None = None, base_path=None) -> None:
        super().__init__("monsters.json", base_path)
        self._skills_repo = skills_repo or SkillsRepository(base_path=base_path)

    def load_monster_template(self, monster_id: str) -> MonsterDef:
        return self.get(monster_id)

    def _build(self, raw: dict[str, object]) -> Dict[str, MonsterDef]:
        monsters: Dict[str, MonsterDef] = {}
        for raw_id, payload in raw.items():
            context = f"monster '{raw_id}'"
            monster_data = self._require_mapping(payload, context)
            self._assert_required(monster_data, {"name", "skills"}, context)

            stat_values = parse_stat_fields(
                self._require_mapping(monster_data.get("stats", {}), f"{context} stats"), f"{context} stats"
            )
            if "level" in monster_data:
                tier = self._require_literal(
                    monster_data.get("tier", "common"), set(TIER_MULTIPLIERS), f"{context} tier"
                )
                level = self._require_int(monster_data["level"], f"{context} level", minimum=1)
                stats = scale_monster_stats(level, tier, stat_values)  # type: ignore[arg-type]
            else:
                try:
                    stats = BaseStats(**stat_values)  # type: ignore[arg-type]
                except TypeError as exc:
                    raise DataValidationError(f"{context} needs either 'level' or a complete stats block.") from exc

            skill_ids = self._require_str_list(monster_data["skills"], f"{context} skills")
            monsters[raw_id] = MonsterDef(
                id=raw_id,
                name=self._require_str(monster_data["name"], f"{context} name"),
                stats=stats,
                skills=tuple(self._skills_repo.get_many(skill_ids, context)),
                resistances=tuple(self._require_str_list(monster_data.get("resistances"), f"{context} resistances")),
                weaknesses=tuple(self._require_str_list(monster_data.get("weaknesses"), f"{context} weaknesses")),
            )
        return monsters
