"""
Result API schemas.

Results are entered either as a number or, for time disciplines, as
``M:SS`` text; ``raw_value`` carries the text form.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.engines.history import HistoryItem


class ResultCreate(BaseModel):
    """Schema for recording a result. Exactly one of value / raw_value."""

    discipline_slug: str = Field(..., min_length=1, max_length=64)
    value: Optional[float] = Field(None, ge=0)
    raw_value: Optional[str] = Field(None, max_length=32, description="Free text, e.g. '3:45' or '12,5'")
    user_id: Optional[int] = Field(None, description="Target athlete (admins only; defaults to self)")
    recorded_at: Optional[datetime] = None

    @model_validator(mode="after")
    def _one_value(self) -> "ResultCreate":
        if (self.value is None) == (self.raw_value is None):
            raise ValueError("Provide exactly one of 'value' or 'raw_value'")
        return self


class ResultResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    discipline_slug: str
    value: float
    display_value: str = ""
    recorded_at: datetime


class ResultImport(BaseModel):
    """Local history to merge into the stored one: ``{slug: [{ts, value}]}``."""

    user_id: Optional[int] = None
    history: dict[str, list[HistoryItem]]


class ImportSummary(BaseModel):
    imported: int
    skipped: int
    total: int = Field(0, description="Distinct results held for the user after the import")
    unknown_disciplines: list[str] = Field(default_factory=list)
