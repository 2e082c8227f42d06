"""
Result repository.

Handles database operations for Result model.
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.result import Result


class ResultRepository:
    """Repository for Result database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, result: Result) -> Result:
        self.session.add(result)
        self.session.commit()
        self.session.refresh(result)
        return result

    def create_many(self, results: list[Result]) -> list[Result]:
        """Insert several results in one transaction."""
        if not results:
            return []
        self.session.add_all(results)
        self.session.commit()
        for r in results:
            self.session.refresh(r)
        return results

    def get_by_id(self, result_id: int) -> Optional[Result]:
        return self.session.get(Result, result_id)

    def get_by_user_and_slug(
        self, user_id: int, slug: str, limit: Optional[int] = None,
    ) -> list[Result]:
        """A user's results in one discipline, newest first."""
        statement = (
            select(Result)
            .where(Result.user_id == user_id, Result.discipline_slug == slug)
            .order_by(Result.recorded_at.desc(), Result.id.desc())
        )
        if limit is not None:
            statement = statement.limit(limit)
        return list(self.session.exec(statement).all())

    def get_by_user(self, user_id: int) -> list[Result]:
        statement = (
            select(Result)
            .where(Result.user_id == user_id)
            .order_by(Result.discipline_slug, Result.recorded_at)
        )
        return list(self.session.exec(statement).all())

    def get_all(self) -> list[Result]:
        """Every stored result, oldest first."""
        statement = select(Result).order_by(Result.recorded_at, Result.id)
        return list(self.session.exec(statement).all())

    def delete(self, result_id: int) -> bool:
        result = self.get_by_id(result_id)
        if result:
            self.session.delete(result)
            self.session.commit()
            return True
        return False

    def delete_by_user(self, user_id: int, commit: bool = True) -> None:
        for entry in self.session.exec(select(Result).where(Result.user_id == user_id)).all():
            self.session.delete(entry)
        if commit:
            self.session.commit()
