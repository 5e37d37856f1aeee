"""Battle settings and their JSON persistence."""
from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_MAX_ROUNDS = 100


@dataclass(frozen=True, slots=True)
class BattleSettings:
    """Engine knobs. ``action_delay`` only paces callbacks and never changes outcomes."""

    max_rounds: int = DEFAULT_MAX_ROUNDS
    action_delay: float = 0.0
    seed: int | None = None


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "AutoBattle"
        return Path.home() / "AutoBattle"
    return Path.home() / ".config" / "autobattle"


def get_default_settings_path() -> Path:
    return get_user_data_dir() / "settings.json"


def _normalize(raw: dict) -> BattleSettings:
    defaults = BattleSettings()
    max_rounds = raw.get("max_rounds", defaults.max_rounds)
    if isinstance(max_rounds, bool) or not isinstance(max_rounds, int) or max_rounds < 1:
        max_rounds = defaults.max_rounds
    delay = raw.get("action_delay", defaults.action_delay)
    if isinstance(delay, bool) or not isinstance(delay, (int, float)) or delay < 0:
        delay = defaults.action_delay
    seed = raw.get("seed")
    if isinstance(seed, bool) or not isinstance(seed, int):
        seed = None
    return BattleSettings(max_rounds=max_rounds, action_delay=float(delay), seed=seed)


def load_settings(path: Path | None = None) -> BattleSettings:
    """Load settings from disk, falling back to defaults for anything missing or invalid."""
    settings_path = path or get_default_settings_path()
    try:
        raw = json.loads(settings_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return BattleSettings()
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", settings_path, exc)
        return BattleSettings()
    if not isinstance(raw, dict):
        logger.warning("Ignoring settings file %s: expected an object", settings_path)
        return BattleSettings()
    return _normalize(raw)


def save_settings(settings: BattleSettings, path: Path | None = None) -> None:
    """Persist settings to disk."""
    settings_path = path or get_default_settings_path()
    settings_path.parent.mkdir(parents=True, exist_ok=True)
    payload = asdict(_normalize(asdict(settings)))
    settings_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
