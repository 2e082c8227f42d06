"""
Progression engine — standard levels, composite stats and rank titles.

Per-discipline lookup
---------------------
The threshold ladder of a discipline is scanned from the highest index
down; the achieved level is the highest index whose threshold the value
satisfies (``>=`` for higher-better, ``<=`` for lower-better).  Undefined
thresholds (``None``) are skipped.

* **Below the first threshold**: progress is the ratio of the value to the
  first defined threshold (inverted for lower-better), clamped to
  ``[0, 99]`` and left un-rounded.  Points are ``round(progress * 0.1)``,
  i.e. at most 10 before the first real level.
* **Mid-ladder**: progress is the linear position of the value between the
  current and the next threshold, clamped to ``[0, 99]`` and rounded.
* **Top of the ladder** (no next level, or next threshold undefined):
  progress is 100.

Points for an achieved level are ``level.points + round(progress / 100 * 10)``.

Progress reaches 100 only once the next level is reached or there is
nothing left to reach.

Rounding follows the half-up convention (``2.5 -> 3``), not Python's
banker's rounding.

Composites
----------
A stat level is the average of the points of the disciplines feeding that
stat, counting only disciplines with a recorded value.  The overall level
is the mean of the active stat levels, never below 1.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

from app.catalog.disciplines import Direction, Discipline, StatType
from app.catalog.standards import DEFAULT_STANDARDS, STATS, StandardsTable
from app.engines.history import HistoryBySlug, latest_value
from app.schemas.progression import Achievement, RankTitle, StandardLookup, StatLevel

# Mid-ladder and pre-level progress never displays as a full bar.
_PROGRESS_CAP = 99.0
_PROGRESS_FULL = 100
_PRE_LEVEL_POINTS_SCALE = 0.1
_LEVEL_BONUS_POINTS = 10

STAT_ORDER: list[StatType] = [StatType.STRENGTH, StatType.ENDURANCE, StatType.AGILITY, StatType.FLEXIBILITY]

NO_RANK = RankTitle(id="none", name="Без уровня", color="#6b7280")


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves away from minus infinity."""
    return math.floor(x + 0.5)


def _clamp(x: float, low: float, high: float) -> float:
    return min(high, max(low, x))


def _ratio_percent(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return math.inf if numerator > 0 else 0.0
    return numerator / denominator * 100


# ======================================================================
# Per-discipline lookup
# ======================================================================


def lookup_standard_level(slug: str, value: float, table: Optional[StandardsTable] = None, ) -> StandardLookup:
    """Place *value* on the threshold ladder of discipline *slug*.

    Unknown slugs yield an empty lookup (no level, no progress, 0 points).
    Thresholds beyond the last level of the table are ignored.
    """
    tbl = table or DEFAULT_STANDARDS
    standard = tbl.get(slug)
    if standard is None:
        return StandardLookup()

    levels = tbl.levels
    values = list(standard.values[:len(levels)])
    higher_better = standard.direction == Direction.HIGHER_BETTER

    achieved_index = -1
    for i in range(len(values) - 1, -1, -1):
        threshold = values[i]
        if threshold is None:
            continue
        passed = value >= threshold if higher_better else value <= threshold
        if passed:
            achieved_index = i
            break

    if achieved_index == -1:
        first_valid = next((i for i, v in enumerate(values) if v is not None), None)
        if first_valid is None:
            return StandardLookup()

        threshold = values[first_valid]
        if higher_better:
            progress = _clamp(_ratio_percent(value, threshold), 0.0, _PROGRESS_CAP)
        else:
            progress = _clamp(_ratio_percent(threshold, value), 0.0, _PROGRESS_CAP)
        return StandardLookup(level=None, next_level=levels[first_valid], progress=progress,
                              points=round_half_up(progress * _PRE_LEVEL_POINTS_SCALE), )

    current_level = levels[achieved_index]
    next_index = achieved_index + 1
    next_level = levels[next_index] if next_index < len(levels) else None
    next_threshold = values[next_index] if next_index < len(values) else None

    progress = _PROGRESS_FULL
    if next_level is not None and next_threshold is not None:
        current_threshold = values[achieved_index]
        if higher_better:
            span = next_threshold - current_threshold
            raw = min(_PROGRESS_CAP, (value - current_threshold) / span * 100) if span > 0 else 0.0
        else:
            span = current_threshold - next_threshold
            raw = min(_PROGRESS_CAP, (current_threshold - value) / span * 100) if span > 0 else 0.0
        progress = max(0, round_half_up(raw))

    return StandardLookup(level=current_level, next_level=next_level, progress=progress,
                          points=current_level.points + round_half_up(progress / 100 * _LEVEL_BONUS_POINTS), )


# ======================================================================
# Composite stats
# ======================================================================


def compute_stat_level(stat: StatType, disciplines: Sequence[Discipline], history: HistoryBySlug,
                       table: Optional[StandardsTable] = None, ) -> StatLevel:
    """Average the points of the disciplines feeding *stat*.

    Disciplines without a recorded value are left out of the average.
    """
    info = STATS[stat]
    total_points = 0
    count = 0

    for d in disciplines:
        if d.stat != stat:
            continue
        value = latest_value(history.get(d.slug))
        if value is None:
            continue
        total_points += lookup_standard_level(d.slug, value, table).points
        count += 1

    avg_points = total_points / count if count else 0.0
    return StatLevel(stat=stat, name=info.name_ru, icon=info.icon, color=info.color,
                     level=round_half_up(avg_points),
                     progress=round_half_up((avg_points - math.floor(avg_points)) * 100), discipline_count=count, )


def compute_user_stats(disciplines: Sequence[Discipline], history: HistoryBySlug,
                       table: Optional[StandardsTable] = None, ) -> list[StatLevel]:
    """All four stats, in ``STAT_ORDER``."""
    return [compute_stat_level(stat, disciplines, history, table) for stat in STAT_ORDER]


def overall_level(stats: Sequence[StatLevel]) -> int:
    """Mean level of the stats that have data; 1 when none do."""
    active = [s for s in stats if s.discipline_count > 0]
    if not active:
        return 1
    avg = sum(s.level for s in active) / len(active)
    return max(1, round_half_up(avg))


def rank_title(level: int, table: Optional[StandardsTable] = None) -> RankTitle:
    """Highest ladder level whose points do not exceed *level*."""
    tbl = table or DEFAULT_STANDARDS
    for lvl in reversed(tbl.levels):
        if level >= lvl.points:
            return RankTitle(id=lvl.id, name=lvl.name, color=lvl.color)
    return NO_RANK


# ======================================================================
# Achievements
# ======================================================================


def discipline_achievements(disciplines: Sequence[Discipline], history: HistoryBySlug,
                            table: Optional[StandardsTable] = None, ) -> list[Achievement]:
    """One row per discipline, including those never recorded."""
    tbl = table or DEFAULT_STANDARDS
    first_level = tbl.levels[0] if tbl.levels else None

    out: list[Achievement] = []
    for d in disciplines:
        value = latest_value(history.get(d.slug))
        if value is None:
            out.append(Achievement(discipline=d, value=None, level=None, next_level=first_level, progress=0))
            continue
        lookup = lookup_standard_level(d.slug, value, tbl)
        out.append(Achievement(discipline=d, value=value, level=lookup.level, next_level=lookup.next_level,
                               progress=lookup.progress, ))
    return out
