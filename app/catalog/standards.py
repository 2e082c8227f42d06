"""
Coach standards: the global level ladder and per-discipline thresholds.

The ladder (``STANDARD_LEVELS``) is shared by every discipline and is
ordered ascending by points; the **index** of a level is significant, it is
what the per-discipline ``values`` list is aligned to, and what "next level"
means.

Each :class:`DisciplineStandard` holds one threshold per level index.
``None`` means "not defined at this level": the level is neither reachable
nor blocking for that discipline.  Ladders are assumed monotonic in the
discipline's better direction; nothing here enforces it.

Everything is bundled in a :class:`StandardsTable` so the progression engine
can take an injected table in tests and fall back to ``DEFAULT_STANDARDS``
otherwise.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.catalog.disciplines import Direction, StatType


# ======================================================================
# Data models
# ======================================================================

class StandardLevel(BaseModel):
    """One rung of the global level ladder."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    points: int = Field(..., description="Base score awarded for reaching this level")
    color: str = "#6b7280"


class DisciplineStandard(BaseModel):
    """Threshold ladder for one discipline, aligned to ``STANDARD_LEVELS``."""

    model_config = ConfigDict(frozen=True)

    direction: Direction
    unit: str = ""
    values: list[Optional[float]] = Field(default_factory=list)
    note: Optional[str] = None


class StatInfo(BaseModel):
    """Display metadata for a composite stat."""

    model_config = ConfigDict(frozen=True)

    type: StatType
    name: str
    name_ru: str
    icon: str
    color: str


class StandardsTable(BaseModel):
    """Level ladder plus slug-keyed threshold ladders."""

    levels: list[StandardLevel]
    standards: dict[str, DisciplineStandard] = Field(default_factory=dict)

    def get(self, slug: str) -> Optional[DisciplineStandard]:
        return self.standards.get(slug)


# ======================================================================
# Level ladder
# ======================================================================

STANDARD_LEVELS: list[StandardLevel] = [
    StandardLevel(id="beginner", name="Новичок", points=10, color="#9ca3af"),
    StandardLevel(id="amateur", name="Любитель", points=20, color="#22c55e"),
    StandardLevel(id="advanced", name="Продвинутый", points=30, color="#3b82f6"),
    StandardLevel(id="expert", name="Эксперт", points=40, color="#a855f7"),
    StandardLevel(id="master", name="Мастер", points=50, color="#f59e0b"),
    StandardLevel(id="elite", name="Элита", points=60, color="#ef4444"),
]

# ======================================================================
# Composite stats
# ======================================================================

STATS: dict[StatType, StatInfo] = {
    StatType.STRENGTH: StatInfo(type=StatType.STRENGTH, name="Strength", name_ru="Сила",
                                icon="💪", color="#ef4444"),
    StatType.ENDURANCE: StatInfo(type=StatType.ENDURANCE, name="Endurance", name_ru="Выносливость",
                                 icon="🏃", color="#22c55e"),
    StatType.AGILITY: StatInfo(type=StatType.AGILITY, name="Agility", name_ru="Ловкость",
                               icon="🤸", color="#3b82f6"),
    StatType.FLEXIBILITY: StatInfo(type=StatType.FLEXIBILITY, name="Flexibility", name_ru="Гибкость",
                                   icon="🧘", color="#a855f7"),
}

# ======================================================================
# Threshold ladders
# ======================================================================

HB = Direction.HIGHER_BETTER
LB = Direction.LOWER_BETTER

# slug -> (direction, unit, values per level index)
_LADDERS: dict[str, tuple[Direction, str, list[Optional[float]]]] = {
    # Сила
    "bench_press": (HB, "kg", [40, 60, 80, 100, 120, 140]),
    "back_squat": (HB, "kg", [50, 80, 100, 130, 160, 190]),
    "deadlift": (HB, "kg", [60, 100, 130, 160, 200, 240]),
    "overhead_press": (HB, "kg", [25, 35, 50, 60, 75, 90]),
    "weighted_pullup": (HB, "kg", [None, 10, 20, 32, 45, 60]),
    # Статика
    "plank": (HB, "sec", [30, 60, 120, 180, 300, 420]),
    "dead_hang": (HB, "sec", [20, 40, 60, 90, 120, 180]),
    "l_sit": (HB, "sec", [5, 10, 20, 30, 45, 60]),
    "handstand": (HB, "sec", [None, 5, 15, 30, 60, 90]),
    # Навыки
    "pullups": (HB, "reps", [1, 5, 10, 15, 20, 30]),
    "pushups": (HB, "reps", [10, 20, 35, 50, 70, 100]),
    "dips": (HB, "reps", [3, 8, 15, 25, 35, 50]),
    "muscle_ups": (HB, "reps", [None, 1, 3, 6, 10, 15]),
    "pistol_squats": (HB, "reps", [None, 1, 5, 10, 15, None]),
    # Выносливость
    "burpees_3min": (HB, "reps", [20, 35, 50, 60, 70, 80]),
    "jump_rope_1min": (HB, "reps", [60, 90, 120, 150, 180, 210]),
    # Бег
    "run_1km": (LB, "sec", [360, 300, 270, 240, 210, 190]),
    "run_3km": (LB, "sec", [1200, 1020, 900, 810, 720, 660]),
    "shuttle_run": (LB, "sec", [35, 32, 30, 28, 26, 25]),
    # Подвижность
    "sit_and_reach": (HB, "cm", [0, 5, 10, 15, 20, 25]),
    "shoulder_dislocate": (LB, "cm", [120, 100, 85, 70, 60, 50]),
    "split_gap": (LB, "cm", [50, 35, 25, 15, 5, 0]),
}

STANDARDS: dict[str, DisciplineStandard] = {
    slug: DisciplineStandard(direction=direction, unit=unit, values=values)
    for slug, (direction, unit, values) in _LADDERS.items()
}

# Singleton default table
DEFAULT_STANDARDS = StandardsTable(levels=STANDARD_LEVELS, standards=STANDARDS)
