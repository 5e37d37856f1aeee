"""Runtime entity exports."""

from .base_stats import BaseStats
from .stats import Stats

__all__ = [
    "BaseStats",
    "Stats",
]
