"""
Result service.

Recording results, per-discipline history, importing a locally kept
history and assembling the full in-memory history the engines read.
"""

from datetime import datetime, timezone
from typing import Optional

from fastapi import HTTPException, status
from loguru import logger
from sqlmodel import Session

from app.catalog.disciplines import Discipline, get_discipline
from app.db.repositories.result import ResultRepository
from app.db.repositories.user import UserRepository
from app.engines.history import History, HistoryItem, merge_history, missing_items
from app.engines.time_input import format_result_value, parse_result_value
from app.models.result import Result
from app.models.user import User
from app.schemas.result import ImportSummary, ResultCreate, ResultImport, ResultResponse
from app.services.user_service import ensure_can_edit


def to_naive_utc(value: datetime) -> datetime:
    """Database timestamps are naive UTC."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def get_discipline_or_400(slug: str) -> Discipline:
    discipline = get_discipline(slug)
    if discipline is None:
        logger.warning("Unknown discipline {!r}", slug)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Unknown discipline: {slug}")
    return discipline


def to_response(result: Result, discipline: Optional[Discipline] = None) -> ResultResponse:
    discipline = discipline or get_discipline(result.discipline_slug)
    response = ResultResponse.model_validate(result)
    if discipline is not None:
        response.display_value = format_result_value(result.value, discipline)
    return response


def results_to_history(results: list[Result]) -> dict[int, dict[str, list[HistoryItem]]]:
    """Group result rows into ``{user_id: {slug: [HistoryItem]}}``."""
    history: dict[int, dict[str, list[HistoryItem]]] = {}
    for r in results:
        history.setdefault(r.user_id, {}).setdefault(r.discipline_slug, []).append(
            HistoryItem(timestamp=r.recorded_at, value=r.value))
    return history


class ResultService:
    """Service for result-related business logic."""

    def __init__(self, session: Session):
        self.repository = ResultRepository(session)
        self.user_repository = UserRepository(session)

    def add_result(self, current: User, data: ResultCreate) -> ResultResponse:
        """
        Record a result for the current user, or for any athlete as admin.

        Raises:
            HTTPException 400: unknown discipline or unparsable value
            HTTPException 403: not allowed to record for the target user
            HTTPException 404: target user does not exist
        """
        target_id = data.user_id if data.user_id is not None else current.id
        ensure_can_edit(current, target_id)
        if self.user_repository.get_by_id(target_id) is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

        discipline = get_discipline_or_400(data.discipline_slug)

        if data.raw_value is not None:
            try:
                value = parse_result_value(data.raw_value, discipline)
            except ValueError as e:
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
        else:
            value = data.value
        if value < 0:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Value must not be negative")

        recorded_at = to_naive_utc(data.recorded_at) if data.recorded_at else datetime.utcnow()
        result = self.repository.create(Result(user_id=target_id, discipline_slug=discipline.slug, value=value,
                                               recorded_at=recorded_at, ))
        logger.info("Recorded {} = {} for user {} (by {})", discipline.slug, value, target_id, current.id)
        return to_response(result, discipline)

    def get_history(self, user_id: int, slug: str, limit: Optional[int] = None) -> list[ResultResponse]:
        """A user's results in one discipline, newest first."""
        discipline = get_discipline_or_400(slug)
        return [to_response(r, discipline) for r in self.repository.get_by_user_and_slug(user_id, slug, limit)]

    def get_user_history(self, user_id: int) -> dict[str, list[HistoryItem]]:
        return results_to_history(self.repository.get_by_user(user_id)).get(user_id, {})

    def build_history(self) -> History:
        """Full history of every user, as consumed by the engines."""
        return results_to_history(self.repository.get_all())

    def delete_result(self, current: User, result_id: int) -> None:
        result = self.repository.get_by_id(result_id)
        if result is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Result not found")
        ensure_can_edit(current, result.user_id)
        self.repository.delete(result_id)
        logger.info("User {} deleted result {}", current.id, result_id)

    def import_history(self, current: User, data: ResultImport) -> ImportSummary:
        """
        Merge a locally kept history into the stored one.

        Only timestamps not yet stored for ``(user, slug)`` are inserted;
        stored rows are never changed.  Unknown disciplines are skipped.
        """
        target_id = data.user_id if data.user_id is not None else current.id
        ensure_can_edit(current, target_id)
        if self.user_repository.get_by_id(target_id) is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

        known = {slug: items for slug, items in data.history.items() if get_discipline(slug) is not None}
        unknown = sorted(slug for slug in data.history if slug not in known)

        existing = self.get_user_history(target_id)
        fresh = missing_items(existing, known)

        rows = [Result(user_id=target_id, discipline_slug=slug, value=item.value,
                       recorded_at=to_naive_utc(item.timestamp))
                for slug, items in fresh.items() for item in items]
        self.repository.create_many(rows)

        merged = merge_history({target_id: existing}, {target_id: known}).get(target_id, {})
        total = sum(len(items) for items in merged.values())
        incoming_total = sum(len(items) for items in known.values())
        logger.info("Imported {} results for user {} ({} stored in total)", len(rows), target_id, total)
        return ImportSummary(imported=len(rows), skipped=incoming_total - len(rows), total=total,
                             unknown_disciplines=unknown)
