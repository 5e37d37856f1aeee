"""Where the JSON battle definitions live."""
from __future__ import annotations

import os
from pathlib import Path

DEFINITIONS_ENV_VAR = "AUTOBATTLE_DEFINITIONS"

# src/autobattle/data/paths.py -> checkout root
_CHECKOUT_ROOT = Path(__file__).resolve().parents[3]


def get_repo_root() -> Path:
    return _CHECKOUT_ROOT


def get_definitions_path(base_path: Path | str | None = None) -> Path:
    """Pick the definitions directory.

    An explicit ``base_path`` wins, then the ``AUTOBATTLE_DEFINITIONS``
    environment variable, then ``data/definitions`` in the checkout.
    """
    if base_path is not None:
        return Path(base_path)
    override = os.getenv(DEFINITIONS_ENV_VAR)
    return Path(override) if override else _CHECKOUT_ROOT / "data" / "definitions"
