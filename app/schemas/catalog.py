"""Discipline catalog and calculator schemas."""

from typing import Optional

from pydantic import BaseModel, Field

from app.catalog.disciplines import Discipline
from app.catalog.standards import DisciplineStandard, StandardLevel, StatInfo
from app.engines.one_rep_max import Formula, PercentageWeight


class DisciplineCategory(BaseModel):
    category: str
    disciplines: list[Discipline]


class StandardsResponse(BaseModel):
    levels: list[StandardLevel]
    stats: list[StatInfo]
    standards: dict[str, DisciplineStandard]


class OneRepMaxRequest(BaseModel):
    weight: float = Field(..., gt=0, le=1000, description="Lifted weight, kg")
    reps: int = Field(..., ge=1, le=30)
    formula: Formula = Formula.EPLEY
    step: float = Field(2.5, gt=0, description="Plate rounding step, kg")


class OneRepMaxResponse(BaseModel):
    formula: Formula
    one_rep_max: float
    estimates: dict[Formula, float]
    percentages: list[PercentageWeight]


class PercentagesResponse(BaseModel):
    one_rep_max: float
    step: float
    percentages: list[PercentageWeight]
    source_discipline: Optional[str] = None
