"""
Result endpoints.

Recording personal records, per-discipline history and history import.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.result import ImportSummary, ResultCreate, ResultImport, ResultResponse
from app.services.result_service import ResultService

router = APIRouter()


@router.post("/",
             summary="Record a result (self, or any athlete as admin).",
             response_model=ResultResponse,
             status_code=status.HTTP_201_CREATED)
def add_result(data: ResultCreate, current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """
    Record a result.

    Time disciplines accept ``raw_value`` as ``M:SS``; other disciplines
    accept a number, decimal comma allowed.
    """
    return ResultService(db).add_result(current_user, data)


@router.get("/{user_id}/{slug}",
            summary="A user's results in one discipline, newest first.",
            response_model=list[ResultResponse])
def get_history(
    user_id: int,
    slug: str,
    limit: Optional[int] = Query(None, ge=1, le=1000),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return ResultService(db).get_history(user_id, slug, limit)


@router.delete("/{result_id}",
               summary="Delete a result.",
               status_code=status.HTTP_204_NO_CONTENT)
def delete_result(result_id: int, current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    ResultService(db).delete_result(current_user, result_id)


@router.post("/import",
             summary="Merge a locally kept history into the stored one.",
             response_model=ImportSummary)
def import_history(data: ResultImport, current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return ResultService(db).import_history(current_user, data)
