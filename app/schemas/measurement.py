"""Body measurement API schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.models.measurement import MeasurementType


class MeasurementCreate(BaseModel):
    """One submission; every provided field becomes one measurement row."""

    weight: Optional[float] = Field(None, gt=0, le=500, description="kg")
    height: Optional[float] = Field(None, gt=0, le=300, description="cm")
    chest: Optional[float] = Field(None, gt=0, le=300)
    waist: Optional[float] = Field(None, gt=0, le=300)
    hips: Optional[float] = Field(None, gt=0, le=300)
    biceps: Optional[float] = Field(None, gt=0, le=100)
    shoulders: Optional[float] = Field(None, gt=0, le=300)
    glutes: Optional[float] = Field(None, gt=0, le=300)
    recorded_at: Optional[datetime] = None

    @model_validator(mode="after")
    def _at_least_one(self) -> "MeasurementCreate":
        if not self.by_type():
            raise ValueError("At least one measurement is required")
        return self

    def by_type(self) -> dict[MeasurementType, float]:
        """Provided measurements keyed by type, in declaration order."""
        out = {}
        for mtype in MeasurementType:
            v = getattr(self, mtype.value)
            if v is not None:
                out[mtype] = v
        return out


class MeasurementResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    type: MeasurementType
    value: float
    recorded_at: datetime
