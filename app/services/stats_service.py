"""
Stats service.

Per-user RPG progression: stat levels, overall level, rank title and
per-discipline achievements.
"""

from sqlmodel import Session

from app.catalog.disciplines import list_disciplines
from app.engines.progression import compute_user_stats, discipline_achievements, overall_level, rank_title
from app.schemas.progression import UserStatsResponse
from app.services.result_service import ResultService
from app.services.user_service import UserService


class StatsService:

    def __init__(self, session: Session):
        self.user_service = UserService(session)
        self.result_service = ResultService(session)

    def get_user_stats(self, user_id: int) -> UserStatsResponse:
        user = self.user_service.get_user_or_404(user_id)
        history = self.result_service.get_user_history(user_id)
        disciplines = list_disciplines()

        stats = compute_user_stats(disciplines, history)
        level = overall_level(stats)
        achievements = discipline_achievements(disciplines, history)

        return UserStatsResponse(user_id=user.id, user_name=user.display_name, overall_level=level,
                                 rank=rank_title(level), stats=stats,
                                 disciplines_with_results=sum(1 for a in achievements if a.value is not None),
                                 achievements=achievements, )
