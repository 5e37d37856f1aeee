"""Victory reward formulas."""
from __future__ import annotations

from typing import Tuple

from autobattle.core.rng import RNG

# Experience is a flat level term plus two performance bonuses:
# - finishing in fewer than FAST_FINISH_ROUNDS rounds pays per round saved
# - the longest combo chain pays per link
BASE_EXP = 50
EXP_PER_ENEMY_LEVEL = 10
FAST_FINISH_ROUNDS = 20
EXP_PER_ROUND_SAVED = 2
EXP_PER_COMBO = 5

BASE_GOLD = 20
GOLD_PER_ENEMY_LEVEL = 5
GOLD_RANDOM_BONUS_MAX = 9

DROP_CHANCE = 0.3
DROP_ITEM_ID = "potion_small"


def calculate_experience(enemy_level: int, rounds: int, max_combo: int) -> int:
    base = BASE_EXP + enemy_level * EXP_PER_ENEMY_LEVEL
    speed_bonus = max(0, FAST_FINISH_ROUNDS - rounds) * EXP_PER_ROUND_SAVED
    combo_bonus = max(0, max_combo) * EXP_PER_COMBO
    return base + speed_bonus + combo_bonus


def roll_gold(enemy_level: int, rng: RNG) -> int:
    return BASE_GOLD + enemy_level * GOLD_PER_ENEMY_LEVEL + rng.randint(0, GOLD_RANDOM_BONUS_MAX)


def roll_item_drops(rng: RNG) -> Tuple[str, ...]:
    if rng.random() < DROP_CHANCE:
        return (DROP_ITEM_ID,)
    return ()
