"""Tests for recording, listing and importing results."""

import datetime

import pytest
from fastapi import HTTPException

from app.engines.history import HistoryItem
from app.schemas.result import ResultCreate, ResultImport
from app.services.result_service import ResultService

T0 = datetime.datetime(2025, 2, 1, 9, 0)


def _at(days: int) -> datetime.datetime:
    return T0 + datetime.timedelta(days=days)


class TestAddResult:
    def test_time_input_is_parsed(self, session, make_user):
        ann = make_user("Ann")
        result = ResultService(session).add_result(ann, ResultCreate(discipline_slug="run_1km", raw_value="4:05"))
        assert result.value == 245
        assert result.display_value == "04:05"
        assert result.user_id == ann.id

    def test_numeric_value(self, session, make_user):
        ann = make_user("Ann")
        result = ResultService(session).add_result(ann, ResultCreate(discipline_slug="bench_press", value=82.5))
        assert result.display_value == "82.5"

    def test_unknown_discipline(self, session, make_user):
        ann = make_user("Ann")
        with pytest.raises(HTTPException) as exc:
            ResultService(session).add_result(ann, ResultCreate(discipline_slug="curling", value=1))
        assert exc.value.status_code == 400

    def test_unparsable_value(self, session, make_user):
        ann = make_user("Ann")
        with pytest.raises(HTTPException) as exc:
            ResultService(session).add_result(ann, ResultCreate(discipline_slug="run_1km", raw_value="4:75"))
        assert exc.value.status_code == 400

    def test_exactly_one_value_required(self):
        with pytest.raises(ValueError):
            ResultCreate(discipline_slug="plank")
        with pytest.raises(ValueError):
            ResultCreate(discipline_slug="plank", value=1, raw_value="1")

    def test_user_cannot_record_for_others(self, session, make_user):
        ann, bob = make_user("Ann"), make_user("Bob")
        with pytest.raises(HTTPException) as exc:
            ResultService(session).add_result(ann, ResultCreate(discipline_slug="plank", value=60, user_id=bob.id))
        assert exc.value.status_code == 403

    def test_admin_records_for_others(self, session, make_user):
        coach, bob = make_user("Coach", admin=True), make_user("Bob")
        result = ResultService(session).add_result(coach, ResultCreate(discipline_slug="plank", value=60,
                                                                       user_id=bob.id))
        assert result.user_id == bob.id

    def test_admin_records_for_missing_user(self, session, make_user):
        coach = make_user("Coach", admin=True)
        with pytest.raises(HTTPException) as exc:
            ResultService(session).add_result(coach, ResultCreate(discipline_slug="plank", value=60, user_id=999))
        assert exc.value.status_code == 404


class TestHistory:
    def test_newest_first(self, session, make_user):
        ann = make_user("Ann")
        service = ResultService(session)
        for day, value in [(0, 60), (2, 90), (1, 75)]:
            service.add_result(ann, ResultCreate(discipline_slug="plank", value=value, recorded_at=_at(day)))

        assert [r.value for r in service.get_history(ann.id, "plank")] == [90, 75, 60]
        assert [r.value for r in service.get_history(ann.id, "plank", limit=1)] == [90]

    def test_build_history(self, session, make_user):
        ann, bob = make_user("Ann"), make_user("Bob")
        service = ResultService(session)
        service.add_result(ann, ResultCreate(discipline_slug="plank", value=60, recorded_at=_at(0)))
        service.add_result(bob, ResultCreate(discipline_slug="dips", value=12, recorded_at=_at(0)))

        history = service.build_history()
        assert set(history) == {ann.id, bob.id}
        assert history[bob.id]["dips"][0].value == 12

    def test_aware_timestamps_are_stored_as_utc(self, session, make_user):
        ann = make_user("Ann")
        moscow = datetime.timezone(datetime.timedelta(hours=3))
        result = ResultService(session).add_result(ann, ResultCreate(
            discipline_slug="plank", value=60, recorded_at=datetime.datetime(2025, 2, 1, 12, 0, tzinfo=moscow)))
        assert result.recorded_at == datetime.datetime(2025, 2, 1, 9, 0)


class TestImport:
    def test_only_missing_timestamps_are_inserted(self, session, make_user):
        ann = make_user("Ann")
        service = ResultService(session)
        service.add_result(ann, ResultCreate(discipline_slug="plank", value=60, recorded_at=_at(0)))

        payload = ResultImport(history={
            "plank": [HistoryItem(timestamp=_at(0), value=999), HistoryItem(timestamp=_at(1), value=70)],
            "dips": [HistoryItem(timestamp=_at(0), value=10)],
            "underwater_hockey": [HistoryItem(timestamp=_at(0), value=1)],
        })
        summary = service.import_history(ann, payload)

        assert summary.imported == 2
        assert summary.skipped == 1
        assert summary.unknown_disciplines == ["underwater_hockey"]
        assert [r.value for r in service.get_history(ann.id, "plank")] == [70, 60]

    def test_import_twice_is_a_no_op(self, session, make_user):
        ann = make_user("Ann")
        service = ResultService(session)
        payload = ResultImport(history={"plank": [HistoryItem(timestamp=_at(0), value=60)]})
        service.import_history(ann, payload)
        assert service.import_history(ann, payload).imported == 0

    def test_local_export_format_with_ts_key(self, session, make_user):
        ann = make_user("Ann")
        payload = ResultImport.model_validate({"history": {
            "plank": [{"ts": "2025-02-01T09:00:00.000Z", "value": 60},
                      {"ts": "2025-02-02T09:00:00.000Z", "value": 75}],
        }})
        summary = ResultService(session).import_history(ann, payload)

        assert summary.imported == 2
        assert summary.total == 2
        stored = ResultService(session).get_history(ann.id, "plank")
        assert [(r.recorded_at, r.value) for r in stored] == [(_at(1), 75), (_at(0), 60)]

    def test_total_counts_stored_and_imported(self, session, make_user):
        ann = make_user("Ann")
        service = ResultService(session)
        service.add_result(ann, ResultCreate(discipline_slug="plank", value=60, recorded_at=_at(0)))
        summary = service.import_history(ann, ResultImport(history={"plank": [HistoryItem(timestamp=_at(1), value=70)]}))
        assert summary.imported == 1
        assert summary.total == 2

    def test_import_for_missing_user_is_404(self, session, make_user):
        admin = make_user("Admin", admin=True)
        service = ResultService(session)
        payload = ResultImport(user_id=9999, history={"plank": [HistoryItem(timestamp=_at(0), value=60)]})
        with pytest.raises(HTTPException) as exc:
            service.import_history(admin, payload)
        assert exc.value.status_code == 404
        assert service.repository.get_by_user(9999) == []

    def test_import_for_others_requires_admin(self, session, make_user):
        ann, bob = make_user("Ann"), make_user("Bob")
        with pytest.raises(HTTPException) as exc:
            ResultService(session).import_history(ann, ResultImport(user_id=bob.id, history={}))
        assert exc.value.status_code == 403
