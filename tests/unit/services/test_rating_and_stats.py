"""Tests for the leaderboard, stats and measurement services."""

import datetime

import pytest
from fastapi import HTTPException

from app.models.measurement import MeasurementType
from app.schemas.measurement import MeasurementCreate
from app.schemas.result import ResultCreate
from app.services.measurement_service import MeasurementService
from app.services.rating_service import RatingService
from app.services.result_service import ResultService
from app.services.stats_service import StatsService

T0 = datetime.datetime(2025, 2, 1, 9, 0)


def _record(session, user, slug: str, value: float, day: int = 0):
    ResultService(session).add_result(user, ResultCreate(discipline_slug=slug, value=value,
                                                         recorded_at=T0 + datetime.timedelta(days=day)))


class TestRatingService:
    def test_overall_and_categories(self, session, make_user):
        ann, bob, cid = make_user("Ann"), make_user("Bob"), make_user("Cid")
        _record(session, ann, "pullups", 100)
        _record(session, bob, "pullups", 100)
        _record(session, cid, "pullups", 90)

        ratings = RatingService(session).get_ratings()
        assert ratings.participants == 3
        assert list(ratings.categories)[0] == "Сила"

        pullups = next(s for s in ratings.categories["Навыки"] if s.slug == "pullups")
        points = {r.user_name: r.points for r in pullups.rows}
        assert points == {"Ann": 2.5, "Bob": 2.5, "Cid": 1}

        overall = {r.user_name: (r.place, r.points) for r in ratings.overall}
        assert overall == {"Ann": (1, 2.5), "Bob": (1, 2.5), "Cid": (3, 1)}

    def test_inactive_users_are_not_participants(self, session, make_user):
        ann, bob = make_user("Ann"), make_user("Bob")
        bob.is_active = False
        session.add(bob)
        session.commit()
        assert RatingService(session).get_ratings().participants == 1

    def test_unnamed_user_gets_placeholder(self, session, make_user):
        anon = make_user("")
        _record(session, anon, "plank", 60)
        standing = RatingService(session).get_discipline_rating("plank")
        assert standing.rows[0].user_name == f"Пользователь {anon.id}"

    def test_unknown_discipline(self, session):
        with pytest.raises(HTTPException) as exc:
            RatingService(session).get_discipline_rating("quidditch")
        assert exc.value.status_code == 404


class TestStatsService:
    def test_user_stats(self, session, make_user):
        ann = make_user("Ann")
        _record(session, ann, "bench_press", 50)
        _record(session, ann, "deadlift", 100)

        stats = StatsService(session).get_user_stats(ann.id)
        strength = next(s for s in stats.stats if s.stat == "strength")
        assert strength.level == 18
        assert stats.overall_level == 18
        assert stats.rank.id == "beginner"
        assert stats.disciplines_with_results == 2

    def test_latest_result_counts(self, session, make_user):
        ann = make_user("Ann")
        _record(session, ann, "bench_press", 140, day=0)
        _record(session, ann, "bench_press", 50, day=1)
        stats = StatsService(session).get_user_stats(ann.id)
        bench = next(a for a in stats.achievements if a.discipline.slug == "bench_press")
        assert bench.value == 50

    def test_new_user(self, session, make_user):
        stats = StatsService(session).get_user_stats(make_user("Ann").id)
        assert stats.overall_level == 1
        assert stats.rank.id == "none"

    def test_missing_user(self, session):
        with pytest.raises(HTTPException) as exc:
            StatsService(session).get_user_stats(404)
        assert exc.value.status_code == 404


class TestMeasurementService:
    def test_batch_and_latest(self, session, make_user):
        ann = make_user("Ann")
        service = MeasurementService(session)
        service.add_measurements(ann, ann.id, MeasurementCreate(weight=80, waist=82, recorded_at=T0))
        service.add_measurements(ann, ann.id, MeasurementCreate(weight=78.5,
                                                                recorded_at=T0 + datetime.timedelta(days=7)))

        history = service.get_history(ann.id)
        assert len(history) == 3
        assert history[0].value == 78.5

        latest = service.get_latest(ann.id)
        assert latest[MeasurementType.WEIGHT].value == 78.5
        assert latest[MeasurementType.WAIST].value == 82
        assert MeasurementType.HIPS not in latest

    def test_history_limit(self, session, make_user):
        ann = make_user("Ann")
        service = MeasurementService(session)
        service.add_measurements(ann, ann.id, MeasurementCreate(weight=80, height=180, chest=100))
        assert len(service.get_history(ann.id, limit=2)) == 2

    def test_empty_submission_rejected(self):
        with pytest.raises(ValueError):
            MeasurementCreate()

    def test_user_cannot_measure_others(self, session, make_user):
        ann, bob = make_user("Ann"), make_user("Bob")
        with pytest.raises(HTTPException) as exc:
            MeasurementService(session).add_measurements(ann, bob.id, MeasurementCreate(weight=70))
        assert exc.value.status_code == 403
