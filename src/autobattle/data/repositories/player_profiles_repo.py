"""Player profiles backed by players.json."""
from __future__ import annotations

from typing import Dict, List, Tuple

from autobattle.data.errors import DataValidationError
from autobattle.data.repositories.base import RepositoryBase
from autobattle.data.repositories.skills_repo import SkillsRepository
from autobattle.data.repositories.stat_blocks import parse_stat_fields
from autobattle.domain.defs import PlayerProfileDef, SkillDef
from autobattle.domain.entities import BaseStats


class PlayerProfilesRepository(RepositoryBase[PlayerProfileDef]):
    """Loads stored player stats and skill loadouts."""

    def __init__(self, skills_repo: SkillsRepository | None = None, base_path=None) -> None:
        super().__init__("players.json", base_path)
        self._skills_repo = skills_repo or SkillsRepository(base_path=base_path)

    def load_player_base_stats(self, player_id: str) -> BaseStats:
        return self.get(player_id).stats

    def load_player_skill_loadout(self, player_id: str) -> List[SkillDef]:
        profile = self.get(player_id)
        return self._skills_repo.get_many(profile.skill_ids, f"player '{player_id}'")

    def load_player_matchups(self, player_id: str) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
        """Return the profile's (resistances, weaknesses)."""
        profile = self.get(player_id)
        return profile.resistances, profile.weaknesses

    def _build(self, raw: dict[str, object]) -> Dict[str, PlayerProfileDef]:
        profiles: Dict[str, PlayerProfileDef] = {}
        for raw_id, payload in raw.items():
            context = f"player '{raw_id}'"
            profile_data = self._require_mapping(payload, context)
            self._assert_required(profile_data, {"name", "stats", "skills"}, context)

            stat_values = parse_stat_fields(
                self._require_mapping(profile_data["stats"], f"{context} stats"), f"{context} stats"
            )
            try:
                stats = BaseStats(**stat_values)  # type: ignore[arg-type]
            except TypeError as exc:
                raise DataValidationError(f"{context} stats block is incomplete.") from exc

            profiles[raw_id] = PlayerProfileDef(
                id=raw_id,
                name=self._require_str(profile_data["name"], f"{context} name"),
                stats=stats,
                skill_ids=tuple(self._require_str_list(profile_data["skills"], f"{context} skills")),
                resistances=tuple(self._require_str_list(profile_data.get("resistances"), f"{context} resistances")),
                weaknesses=tuple(self._require_str_list(profile_data.get("weaknesses"), f"{context} weaknesses")),
            )
        return profiles
