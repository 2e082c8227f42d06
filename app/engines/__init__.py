"""Core algorithms — leaderboard ranking and RPG progression."""

from app.engines.progression import (
    compute_user_stats,
    discipline_achievements,
    lookup_standard_level,
    overall_level,
    rank_title,
)
from app.engines.rating import rank_discipline, rank_overall

__all__ = [
    "compute_user_stats",
    "discipline_achievements",
    "lookup_standard_level",
    "overall_level",
    "rank_title",
    "rank_discipline",
    "rank_overall",
]
