"""
Stats endpoints.

RPG progression of an athlete: stat levels, rank and achievements.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.progression import UserStatsResponse
from app.services.stats_service import StatsService

router = APIRouter()


@router.get("/me",
            summary="Progression of the current user.",
            response_model=UserStatsResponse)
def my_stats(current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return StatsService(db).get_user_stats(current_user.id)


@router.get("/{user_id}",
            summary="Progression of an athlete.",
            response_model=UserStatsResponse)
def user_stats(user_id: int, current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return StatsService(db).get_user_stats(user_id)
