"""
Discipline endpoints.

Static catalog, coach standards and the one-rep-max calculator.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from app.catalog.disciplines import Discipline, disciplines_by_category, get_discipline
from app.catalog.standards import DEFAULT_STANDARDS, STATS
from app.engines.one_rep_max import Formula, estimate_one_rm, percentage_table
from app.schemas.catalog import (
    DisciplineCategory,
    OneRepMaxRequest,
    OneRepMaxResponse,
    PercentagesResponse,
    StandardsResponse,
)

router = APIRouter()


@router.get("/",
            summary="Discipline catalog grouped by category.",
            response_model=list[DisciplineCategory])
def list_catalog():
    return [DisciplineCategory(category=category, disciplines=items)
            for category, items in disciplines_by_category().items()]


@router.get("/standards",
            summary="Level ladder, stats and per-discipline thresholds.",
            response_model=StandardsResponse)
def get_standards():
    return StandardsResponse(levels=DEFAULT_STANDARDS.levels, stats=list(STATS.values()),
                             standards=DEFAULT_STANDARDS.standards)


@router.post("/one-rep-max",
             summary="Estimate a one-rep max and working weights.",
             response_model=OneRepMaxResponse)
def one_rep_max(data: OneRepMaxRequest):
    estimates = {f: round(estimate_one_rm(data.weight, data.reps, f), 1) for f in Formula}
    one_rm = estimates[data.formula]
    return OneRepMaxResponse(formula=data.formula, one_rep_max=one_rm, estimates=estimates,
                             percentages=percentage_table(one_rm, data.step))


@router.get("/percentages",
            summary="Working weights for a known one-rep max.",
            response_model=PercentagesResponse)
def percentages(
    one_rep_max: float = Query(..., gt=0, le=1000),
    step: float = Query(2.5, gt=0),
    slug: Optional[str] = Query(None, description="Barbell discipline the max belongs to"),
):
    if slug is not None:
        discipline = get_discipline(slug)
        if discipline is None or not discipline.has_1rm:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST,
                                detail=f"Discipline {slug} has no one-rep max")
    return PercentagesResponse(one_rep_max=one_rep_max, step=step, percentages=percentage_table(one_rep_max, step),
                               source_discipline=slug)


@router.get("/{slug}",
            summary="A single discipline.",
            response_model=Discipline)
def get_one(slug: str):
    discipline = get_discipline(slug)
    if discipline is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown discipline: {slug}")
    return discipline
