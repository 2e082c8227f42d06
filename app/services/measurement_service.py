"""
Measurement service.

Body measurements: batch submission, recent history, latest per type.
"""

from datetime import datetime

from loguru import logger
from sqlmodel import Session

from app.db.repositories.measurement import MeasurementRepository
from app.models.measurement import Measurement, MeasurementType
from app.models.user import User
from app.schemas.measurement import MeasurementCreate
from app.services.result_service import to_naive_utc
from app.services.user_service import UserService, ensure_can_edit


class MeasurementService:
    """Service for body measurements."""

    def __init__(self, session: Session):
        self.repository = MeasurementRepository(session)
        self.user_service = UserService(session)

    def add_measurements(self, current: User, user_id: int, data: MeasurementCreate) -> list[Measurement]:
        """Store one row per provided measurement, all with the same timestamp."""
        ensure_can_edit(current, user_id)
        self.user_service.get_user_or_404(user_id)

        recorded_at = to_naive_utc(data.recorded_at) if data.recorded_at else datetime.utcnow()
        entries = [Measurement(user_id=user_id, type=mtype, value=value, recorded_at=recorded_at)
                   for mtype, value in data.by_type().items()]
        entries = self.repository.create_many(entries)
        logger.info("Stored {} measurements for user {}", len(entries), user_id)
        return entries

    def get_history(self, user_id: int, limit: int = 50) -> list[Measurement]:
        """Latest *limit* measurements, newest first."""
        return self.repository.get_latest_by_user(user_id, limit=limit)

    def get_latest(self, user_id: int) -> dict[MeasurementType, Measurement]:
        """Most recent measurement of every type that has one."""
        latest = {}
        for mtype in MeasurementType:
            entry = self.repository.get_latest_of_type(user_id, mtype)
            if entry is not None:
                latest[mtype] = entry
        return latest
