"""Status effect registry backed by status_effects.json."""
from __future__ import annotations

from typing import Dict

from autobattle.data.errors import DataValidationError
from autobattle.data.repositories.base import RepositoryBase
from autobattle.domain.defs import MODIFIABLE_STATS, StatusEffectDef

VALID_EFFECT_TYPES = {"buff", "debuff"}


class StatusEffectsRepository(RepositoryBase[StatusEffectDef]):
    """Loads buff, debuff and damage-over-time definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__("status_effects.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, StatusEffectDef]:
        effects: Dict[str, StatusEffectDef] = {}
        for raw_id, payload in raw.items():
            context = f"status effect '{raw_id}'"
            effect_data = self._require_mapping(payload, context)
            self._assert_required(effect_data, {"name", "type", "duration"}, context)

            modifiers_raw = self._require_mapping(effect_data.get("stat_modifiers", {}), f"{context} stat_modifiers")
            modifiers: Dict[str, int] = {}
            for stat_name, amount in modifiers_raw.items():
                if stat_name not in MODIFIABLE_STATS:
                    raise DataValidationError(
                        f"{context} stat_modifiers key '{stat_name}' must be one of {list(MODIFIABLE_STATS)}."
                    )
                modifiers[stat_name] = self._require_int(amount, f"{context} stat_modifiers.{stat_name}")

            effects[raw_id] = StatusEffectDef(
                id=raw_id,
                name=self._require_str(effect_data["name"], f"{context} name"),
                type=self._require_literal(effect_data["type"], VALID_EFFECT_TYPES, f"{context} type"),  # type: ignore[arg-type]
                duration=self._require_int(effect_data["duration"], f"{context} duration", minimum=1),
                damage_per_turn=self._require_int(
                    effect_data.get("damage_per_turn", 0), f"{context} damage_per_turn", minimum=0
                ),
                stat_modifiers=modifiers,
                stackable=self._require_bool(effect_data.get("stackable", False), f"{context} stackable"),
            )
        return effects
