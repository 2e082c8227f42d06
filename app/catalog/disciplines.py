"""
Built-in discipline catalog.

Each entry is a :class:`Discipline`, a trackable test (a lift, a hold, a
run) with a measurement unit and an improvement direction.  The direction
drives both the leaderboard sort order and the threshold comparison in
:mod:`app.engines.progression`.

The catalog is loaded once at import time and is immutable for the process
lifetime.  Order matters: it is the order used by every listing, and the
order in which the overall leaderboard walks the disciplines.

To add a new discipline, append it to ``_DISCIPLINES`` (and give it a
threshold ladder in :mod:`app.catalog.standards`).
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ======================================================================
# Enums
# ======================================================================

class Direction(str, Enum):
    """Which way a result improves."""
    HIGHER_BETTER = "higher_better"
    LOWER_BETTER = "lower_better"


class StatType(str, Enum):
    """Composite RPG stat fed by a discipline."""
    STRENGTH = "strength"
    ENDURANCE = "endurance"
    AGILITY = "agility"
    FLEXIBILITY = "flexibility"


# ======================================================================
# Discipline data model
# ======================================================================

class Discipline(BaseModel):
    """Catalog entry describing a single discipline."""

    model_config = ConfigDict(frozen=True)

    slug: str = Field(..., description="Unique stable key, e.g. 'bench_press'")
    category: str = Field(..., description="Grouping label, e.g. 'Сила'")
    name: str = Field(..., description="Human-readable name")
    icon: str = ""
    unit: str = Field(..., description="Measurement unit: kg, sec, reps, cm")
    direction: Direction = Direction.HIGHER_BETTER
    stat: Optional[StatType] = Field(None, description="Composite stat this discipline feeds")
    has_1rm: bool = Field(False, description="Value is a one-rep-max load (percentage table applies)")


# ======================================================================
# Catalog storage
# ======================================================================

CATEGORY_ORDER: list[str] = ["Сила", "Статика", "Навыки", "Выносливость", "Бег", "Подвижность"]

DISCIPLINE_CATALOG: dict[str, Discipline] = {}


def register_discipline(discipline: Discipline) -> None:
    """Register a discipline in the global catalog."""
    DISCIPLINE_CATALOG[discipline.slug] = discipline


def get_discipline(slug: str) -> Discipline | None:
    """Look up a discipline by its slug.  Returns ``None`` if not found."""
    return DISCIPLINE_CATALOG.get(slug)


def list_disciplines() -> list[Discipline]:
    """All disciplines in catalog order."""
    return list(DISCIPLINE_CATALOG.values())


def disciplines_by_category() -> dict[str, list[Discipline]]:
    """Group the catalog by category following ``CATEGORY_ORDER``.

    Categories not listed in ``CATEGORY_ORDER`` are appended after the known
    ones, in first-seen order.
    """
    grouped: dict[str, list[Discipline]] = {}
    for d in DISCIPLINE_CATALOG.values():
        grouped.setdefault(d.category, []).append(d)

    ordered = {cat: grouped[cat] for cat in CATEGORY_ORDER if cat in grouped}
    for cat, items in grouped.items():
        if cat not in ordered:
            ordered[cat] = items
    return ordered


# ======================================================================
# Helpers
# ======================================================================

# Aliases for brevity in the table below
HB = Direction.HIGHER_BETTER
LB = Direction.LOWER_BETTER
STR = StatType.STRENGTH
END = StatType.ENDURANCE
AGI = StatType.AGILITY
FLX = StatType.FLEXIBILITY

# ======================================================================
# Built-in disciplines
# ======================================================================

_DISCIPLINES: list[Discipline] = [
    # ── Сила ──────────────────────────────────────────────────────
    Discipline(slug="bench_press", category="Сила", name="Жим лёжа", icon="🏋️",
               unit="kg", direction=HB, stat=STR, has_1rm=True),
    Discipline(slug="back_squat", category="Сила", name="Присед со штангой", icon="🏋️",
               unit="kg", direction=HB, stat=STR, has_1rm=True),
    Discipline(slug="deadlift", category="Сила", name="Становая тяга", icon="🏋️",
               unit="kg", direction=HB, stat=STR, has_1rm=True),
    Discipline(slug="overhead_press", category="Сила", name="Жим стоя", icon="🏋️",
               unit="kg", direction=HB, stat=STR, has_1rm=True),
    Discipline(slug="weighted_pullup", category="Сила", name="Подтягивания с весом", icon="⛓️",
               unit="kg", direction=HB, stat=STR, has_1rm=True),

    # ── Статика ───────────────────────────────────────────────────
    Discipline(slug="plank", category="Статика", name="Планка", icon="🧱",
               unit="sec", direction=HB, stat=END),
    Discipline(slug="dead_hang", category="Статика", name="Вис на турнике", icon="🙌",
               unit="sec", direction=HB, stat=END),
    Discipline(slug="l_sit", category="Статика", name="Уголок", icon="📐",
               unit="sec", direction=HB, stat=STR),
    Discipline(slug="handstand", category="Статика", name="Стойка на руках", icon="🤸",
               unit="sec", direction=HB, stat=AGI),

    # ── Навыки ────────────────────────────────────────────────────
    Discipline(slug="pullups", category="Навыки", name="Подтягивания", icon="💪",
               unit="reps", direction=HB, stat=STR),
    Discipline(slug="pushups", category="Навыки", name="Отжимания", icon="💪",
               unit="reps", direction=HB, stat=END),
    Discipline(slug="dips", category="Навыки", name="Отжимания на брусьях", icon="💪",
               unit="reps", direction=HB, stat=STR),
    Discipline(slug="muscle_ups", category="Навыки", name="Выходы силой", icon="🦅",
               unit="reps", direction=HB, stat=AGI),
    Discipline(slug="pistol_squats", category="Навыки", name="Пистолетик", icon="🦵",
               unit="reps", direction=HB, stat=AGI),

    # ── Выносливость ──────────────────────────────────────────────
    Discipline(slug="burpees_3min", category="Выносливость", name="Бёрпи за 3 минуты", icon="🔥",
               unit="reps", direction=HB, stat=END),
    Discipline(slug="jump_rope_1min", category="Выносливость", name="Скакалка за 1 минуту", icon="🪢",
               unit="reps", direction=HB, stat=AGI),

    # ── Бег ───────────────────────────────────────────────────────
    Discipline(slug="run_1km", category="Бег", name="Бег 1 км", icon="🏃",
               unit="sec", direction=LB, stat=END),
    Discipline(slug="run_3km", category="Бег", name="Бег 3 км", icon="🏃",
               unit="sec", direction=LB, stat=END),
    Discipline(slug="shuttle_run", category="Бег", name="Челночный бег 10×10", icon="⚡",
               unit="sec", direction=LB, stat=AGI),

    # ── Подвижность ───────────────────────────────────────────────
    Discipline(slug="sit_and_reach", category="Подвижность", name="Наклон вперёд", icon="🧘",
               unit="cm", direction=HB, stat=FLX),
    Discipline(slug="shoulder_dislocate", category="Подвижность", name="Выкрут с палкой", icon="🦴",
               unit="cm", direction=LB, stat=FLX),
    Discipline(slug="split_gap", category="Подвижность", name="Шпагат (до пола)", icon="🤸",
               unit="cm", direction=LB, stat=FLX),
]

# Auto-register all built-in disciplines
for _d in _DISCIPLINES:
    register_discipline(_d)
