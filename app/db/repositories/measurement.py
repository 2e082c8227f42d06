"""
Measurement repository.

Handles database operations for Measurement model.
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.measurement import Measurement, MeasurementType


class MeasurementRepository:
    """Repository for Measurement database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create_many(self, entries: list[Measurement]) -> list[Measurement]:
        self.session.add_all(entries)
        self.session.commit()
        for e in entries:
            self.session.refresh(e)
        return entries

    def get_by_id(self, entry_id: int) -> Optional[Measurement]:
        return self.session.get(Measurement, entry_id)

    def get_latest_by_user(
        self, user_id: int, limit: int = 50,
    ) -> list[Measurement]:
        """Most recent measurements of a user, newest first."""
        statement = (
            select(Measurement)
            .where(Measurement.user_id == user_id)
            .order_by(Measurement.recorded_at.desc(), Measurement.id.desc())
            .limit(limit)
        )
        return list(self.session.exec(statement).all())

    def get_latest_of_type(
        self, user_id: int, mtype: MeasurementType,
    ) -> Optional[Measurement]:
        statement = (
            select(Measurement)
            .where(Measurement.user_id == user_id, Measurement.type == mtype)
            .order_by(Measurement.recorded_at.desc(), Measurement.id.desc())
        )
        return self.session.exec(statement).first()

    def delete(self, entry_id: int) -> bool:
        entry = self.get_by_id(entry_id)
        if entry:
            self.session.delete(entry)
            self.session.commit()
            return True
        return False

    def delete_by_user(self, user_id: int, commit: bool = True) -> None:
        for entry in self.session.exec(select(Measurement).where(Measurement.user_id == user_id)).all():
            self.session.delete(entry)
        if commit:
            self.session.commit()
