"""
Rating service.

Loads participants and their full history, then lets the rating engine
rank every discipline (grouped by category) and the overall board.
"""

from fastapi import HTTPException, status
from sqlmodel import Session

from app.catalog.disciplines import disciplines_by_category, get_discipline, list_disciplines
from app.db.repositories.user import UserRepository
from app.engines.history import History
from app.engines.rating import rank_discipline, rank_overall
from app.schemas.rating import Athlete, DisciplineStanding, RatingsResponse
from app.services.result_service import ResultService


def _standing(discipline, users: list[Athlete], history: History) -> DisciplineStanding:
    return DisciplineStanding(slug=discipline.slug, name=discipline.name, category=discipline.category,
                              unit=discipline.unit, direction=discipline.direction.value,
                              rows=rank_discipline(discipline, users, history), )


class RatingService:
    """Leaderboards, recomputed from the stored history on every read."""

    def __init__(self, session: Session):
        self.user_repository = UserRepository(session)
        self.result_service = ResultService(session)

    def _participants(self) -> list[Athlete]:
        return [Athlete(id=u.id, name=u.display_name) for u in self.user_repository.get_active()]

    def get_ratings(self) -> RatingsResponse:
        users = self._participants()
        history = self.result_service.build_history()

        categories = {
            category: [_standing(d, users, history) for d in disciplines]
            for category, disciplines in disciplines_by_category().items()
        }
        return RatingsResponse(participants=len(users), overall=rank_overall(list_disciplines(), users, history),
                               categories=categories, )

    def get_discipline_rating(self, slug: str) -> DisciplineStanding:
        discipline = get_discipline(slug)
        if discipline is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown discipline: {slug}")
        return _standing(discipline, self._participants(), self.result_service.build_history())
