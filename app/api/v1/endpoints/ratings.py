"""
Rating endpoints.

Leaderboards are recomputed from the stored history on every request.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.rating import DisciplineStanding, RatingsResponse
from app.services.rating_service import RatingService

router = APIRouter()


@router.get("/",
            summary="Overall leaderboard and every discipline grouped by category.",
            response_model=RatingsResponse)
def get_ratings(current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return RatingService(db).get_ratings()


@router.get("/{slug}",
            summary="Leaderboard of one discipline.",
            response_model=DisciplineStanding)
def get_discipline_rating(slug: str, current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return RatingService(db).get_discipline_rating(slug)
