"""Tests for the progression engine: level lookup, stats, rank titles."""

import datetime

import pytest

from app.catalog.disciplines import Direction, StatType, list_disciplines
from app.catalog.standards import DisciplineStandard, StandardLevel, StandardsTable
from app.engines.history import HistoryItem
from app.engines.progression import (
    NO_RANK,
    STAT_ORDER,
    compute_stat_level,
    compute_user_stats,
    discipline_achievements,
    lookup_standard_level,
    overall_level,
    rank_title,
    round_half_up,
)
from app.schemas.progression import StatLevel


# ======================================================================
# Helpers
# ======================================================================

T0 = datetime.datetime(2025, 3, 1, tzinfo=datetime.timezone.utc)


def _make_history(**values: float) -> dict:
    return {slug: [HistoryItem(timestamp=T0, value=v)] for slug, v in values.items()}


def _make_table() -> StandardsTable:
    """Four-level ladder (0, 5, 10, 20 points) with a 3-threshold pullups standard."""
    levels = [StandardLevel(id=f"l{i}", name=f"L{i}", points=p) for i, p in enumerate([0, 5, 10, 20])]
    return StandardsTable(levels=levels, standards={
        "pullups": DisciplineStandard(direction=Direction.HIGHER_BETTER, unit="reps", values=[1, 5, 10]),
    })


def _make_stat(level: int, count: int, stat: StatType = StatType.STRENGTH) -> StatLevel:
    return StatLevel(stat=stat, name="", icon="", color="", level=level, progress=0, discipline_count=count)


# ======================================================================
# round_half_up
# ======================================================================


class TestRoundHalfUp:
    @pytest.mark.parametrize("x, expected", [(0.5, 1), (1.5, 2), (2.5, 3), (2.49, 2), (7.5, 8), (-0.5, 0)])
    def test_halves_round_up(self, x, expected):
        assert round_half_up(x) == expected


# ======================================================================
# lookup_standard_level
# ======================================================================


class TestLookupStandardLevel:
    def test_mid_ladder_example(self):
        """Thresholds [1, 5, 10], value 7 → level index 1, progress 40, points 9."""
        result = lookup_standard_level("pullups", 7, _make_table())
        assert result.level.id == "l1"
        assert result.next_level.id == "l2"
        assert result.progress == 40
        assert result.points == 9

    def test_top_of_custom_ladder_has_full_progress(self):
        # index 2 is the last threshold; the 4th level has none
        result = lookup_standard_level("pullups", 12, _make_table())
        assert result.level.id == "l2"
        assert result.progress == 100
        assert result.points == 10 + 10

    def test_thresholds_past_the_last_level_are_ignored(self):
        table = _make_table()
        table.standards["pullups"] = DisciplineStandard(direction=Direction.HIGHER_BETTER, unit="reps",
                                                        values=[1, 5, 10, 20, 50])
        result = lookup_standard_level("pullups", 60, table)
        assert result.level.id == "l3"
        assert result.next_level is None
        assert result.progress == 100
        assert result.points == 20 + 10

    def test_below_first_threshold(self):
        result = lookup_standard_level("bench_press", 30)
        assert result.level is None
        assert result.next_level.id == "beginner"
        assert result.progress == 75.0
        assert result.points == 8

    def test_first_level_boundary_is_inclusive(self):
        result = lookup_standard_level("bench_press", 40)
        assert result.level.id == "beginner"
        assert result.progress == 0
        assert result.points == 10

    def test_mid_ladder_default_table(self):
        result = lookup_standard_level("bench_press", 50)
        assert result.level.id == "beginner"
        assert result.next_level.id == "amateur"
        assert result.progress == 50
        assert result.points == 15

    def test_mid_ladder_progress_never_shows_full(self):
        result = lookup_standard_level("bench_press", 59.99)
        assert result.progress == 99
        assert result.points == 20

    def test_elite(self):
        result = lookup_standard_level("bench_press", 200)
        assert result.level.id == "elite"
        assert result.next_level is None
        assert result.progress == 100
        assert result.points == 70

    def test_lower_better_mid_ladder(self):
        # thresholds 360/300/270/240/210/190: 200 s sits between master and elite
        result = lookup_standard_level("run_1km", 200)
        assert result.level.id == "master"
        assert result.progress == 50
        assert result.points == 55

    def test_lower_better_below_first_threshold(self):
        result = lookup_standard_level("run_1km", 400)
        assert result.level is None
        assert result.progress == pytest.approx(90.0)
        assert result.points == 9

    def test_leading_undefined_threshold_is_skipped(self):
        result = lookup_standard_level("weighted_pullup", 5)
        assert result.level is None
        assert result.next_level.id == "amateur"
        assert result.progress == 50.0
        assert result.points == 5

        reached = lookup_standard_level("weighted_pullup", 10)
        assert reached.level.id == "amateur"

    def test_undefined_next_threshold_means_top(self):
        result = lookup_standard_level("pistol_squats", 20)
        assert result.level.id == "master"
        assert result.progress == 100
        assert result.points == 60

    def test_zero_threshold(self):
        assert lookup_standard_level("sit_and_reach", 0).level.id == "beginner"
        below = lookup_standard_level("sit_and_reach", -3)
        assert below.level is None
        assert below.progress == 0

    def test_unknown_slug(self):
        result = lookup_standard_level("no_such_discipline", 100)
        assert result.level is None
        assert result.next_level is None
        assert result.points == 0

    @pytest.mark.parametrize("value", [0, 0.5, 3, 39.9, 40, 41, 99, 139, 140, 1000])
    def test_progress_is_clamped(self, value):
        result = lookup_standard_level("bench_press", value)
        assert 0 <= result.progress <= 100
        if result.next_level is not None:
            assert result.progress <= 99


# ======================================================================
# Stats / overall level
# ======================================================================


class TestComputeStatLevel:
    def test_average_of_recorded_disciplines(self):
        # bench 50 → 15 points, deadlift 100 → 20 points
        history = _make_history(bench_press=50, deadlift=100)
        stat = compute_stat_level(StatType.STRENGTH, list_disciplines(), history)
        assert stat.discipline_count == 2
        assert stat.level == 18  # 17.5 rounded half up
        assert stat.progress == 50

    def test_no_data(self):
        stat = compute_stat_level(StatType.FLEXIBILITY, list_disciplines(), {})
        assert stat.discipline_count == 0
        assert stat.level == 0
        assert stat.progress == 0

    def test_other_stats_ignored(self):
        history = _make_history(run_1km=200)
        stat = compute_stat_level(StatType.STRENGTH, list_disciplines(), history)
        assert stat.discipline_count == 0

    def test_user_stats_in_order(self):
        stats = compute_user_stats(list_disciplines(), {})
        assert [s.stat for s in stats] == STAT_ORDER


class TestOverallLevel:
    def test_example(self):
        stats = [_make_stat(4, 2), _make_stat(6, 1), _make_stat(0, 0), _make_stat(0, 0)]
        assert overall_level(stats) == 5

    def test_floor_of_one_without_data(self):
        assert overall_level([_make_stat(0, 0)] * 4) == 1
        assert overall_level([]) == 1

    def test_floor_of_one_with_low_levels(self):
        assert overall_level([_make_stat(0, 3)]) == 1

    def test_half_rounds_up(self):
        assert overall_level([_make_stat(10, 1), _make_stat(11, 1)]) == 11


class TestRankTitle:
    @pytest.mark.parametrize(
        "level, expected",
        [(1, "none"), (9, "none"), (10, "beginner"), (29, "amateur"), (30, "advanced"), (60, "elite"), (99, "elite")],
    )
    def test_thresholds(self, level, expected):
        assert rank_title(level).id == expected

    def test_no_rank_title(self):
        assert rank_title(0) == NO_RANK


# ======================================================================
# Achievements
# ======================================================================


class TestAchievements:
    def test_one_row_per_discipline(self):
        disciplines = list_disciplines()
        rows = discipline_achievements(disciplines, _make_history(plank=60))
        assert len(rows) == len(disciplines)

        plank = next(r for r in rows if r.discipline.slug == "plank")
        assert plank.value == 60
        assert plank.level.id == "amateur"

        empty = next(r for r in rows if r.discipline.slug == "deadlift")
        assert empty.value is None
        assert empty.level is None
        assert empty.next_level.id == "beginner"
        assert empty.progress == 0
