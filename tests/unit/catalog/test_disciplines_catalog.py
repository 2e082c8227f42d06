"""Tests for the discipline catalog."""

from app.catalog.disciplines import (
    CATEGORY_ORDER,
    DISCIPLINE_CATALOG,
    Direction,
    Discipline,
    disciplines_by_category,
    get_discipline,
    list_disciplines,
)
from app.catalog.standards import DEFAULT_STANDARDS


class TestCatalogContents:
    """Verify the built-in catalog is well-formed."""

    def test_catalog_not_empty(self):
        assert len(DISCIPLINE_CATALOG) >= 20

    def test_slug_matches_key(self):
        for slug, d in DISCIPLINE_CATALOG.items():
            assert isinstance(d, Discipline)
            assert d.slug == slug

    def test_no_duplicate_names(self):
        names = [d.name for d in list_disciplines()]
        assert len(names) == len(set(names))

    def test_every_discipline_has_a_standard(self):
        for d in list_disciplines():
            standard = DEFAULT_STANDARDS.get(d.slug)
            assert standard is not None, f"{d.slug} has no standard"
            assert standard.direction == d.direction, f"{d.slug}: direction mismatch"
            assert standard.unit == d.unit, f"{d.slug}: unit mismatch"

    def test_every_discipline_feeds_a_stat(self):
        assert all(d.stat is not None for d in list_disciplines())

    def test_one_rep_max_only_for_loads(self):
        for d in list_disciplines():
            if d.has_1rm:
                assert d.unit == "kg"

    def test_runs_are_lower_better(self):
        for d in disciplines_by_category()["Бег"]:
            assert d.direction == Direction.LOWER_BETTER


class TestLookup:
    def test_known_slug(self):
        assert get_discipline("bench_press").name == "Жим лёжа"

    def test_unknown_slug(self):
        assert get_discipline("nonexistent") is None


class TestGrouping:
    def test_categories_follow_display_order(self):
        grouped = disciplines_by_category()
        assert list(grouped) == [c for c in CATEGORY_ORDER if c in grouped]

    def test_grouping_keeps_every_discipline(self):
        grouped = disciplines_by_category()
        assert sum(len(items) for items in grouped.values()) == len(DISCIPLINE_CATALOG)
