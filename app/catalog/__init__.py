"""Static data: discipline catalog and coach standards."""

from app.catalog.disciplines import (
    DISCIPLINE_CATALOG,
    Direction,
    Discipline,
    StatType,
    get_discipline,
    list_disciplines,
)
from app.catalog.standards import (
    DEFAULT_STANDARDS,
    STANDARD_LEVELS,
    STATS,
    DisciplineStandard,
    StandardLevel,
    StandardsTable,
)

__all__ = [
    "DISCIPLINE_CATALOG",
    "Direction",
    "Discipline",
    "StatType",
    "get_discipline",
    "list_disciplines",
    "DEFAULT_STANDARDS",
    "STANDARD_LEVELS",
    "STATS",
    "DisciplineStandard",
    "StandardLevel",
    "StandardsTable",
]
