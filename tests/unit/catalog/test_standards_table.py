"""Tests for the coach standards table."""

import pytest

from app.catalog.disciplines import Direction, StatType
from app.catalog.standards import DEFAULT_STANDARDS, STANDARD_LEVELS, STATS


class TestLevels:
    def test_six_levels_with_increasing_points(self):
        points = [lvl.points for lvl in STANDARD_LEVELS]
        assert len(points) == 6
        assert points == sorted(points)
        assert len(set(points)) == len(points)

    def test_level_ids_unique(self):
        ids = [lvl.id for lvl in STANDARD_LEVELS]
        assert len(ids) == len(set(ids))

    def test_every_stat_has_display_info(self):
        assert set(STATS) == set(StatType)


class TestLadders:
    @pytest.mark.parametrize("slug", sorted(DEFAULT_STANDARDS.standards))
    def test_ladder_is_monotonic(self, slug):
        """Defined thresholds get harder with every level."""
        standard = DEFAULT_STANDARDS.get(slug)
        assert len(standard.values) == len(STANDARD_LEVELS)

        defined = [v for v in standard.values if v is not None]
        assert defined, f"{slug} has no thresholds"
        if standard.direction == Direction.HIGHER_BETTER:
            assert defined == sorted(defined)
        else:
            assert defined == sorted(defined, reverse=True)
        assert len(set(defined)) == len(defined)

    def test_unknown_slug(self):
        assert DEFAULT_STANDARDS.get("nope") is None
