"""Tests for the training program tree service."""

import datetime

import pytest
from fastapi import HTTPException
from sqlmodel import select

from app.engines.program_calendar import STANDARD_BLOCKS
from app.models.program import BlockRow, Phase, WorkoutBlock
from app.schemas.program import BlockCreate, CycleCreate, NodeCreate, NodeUpdate, ProgramCreate, RowCreate
from app.services.program_service import NodeLevel, ProgramService

MONDAY = datetime.date(2025, 1, 6)


@pytest.fixture
def service(session):
    return ProgramService(session)


def _make_program(service: ProgramService, title: str = "Base"):
    return service.create_program(ProgramCreate(title=title, start_date=MONDAY))


class TestActiveProgram:
    def test_first_program_is_active(self, service):
        first = _make_program(service, "A")
        second = _make_program(service, "B")
        assert first.is_active
        assert not second.is_active

    def test_exactly_one_active(self, service):
        a = _make_program(service, "A")
        b = _make_program(service, "B")
        service.set_active(b.id)

        active = [p for p in service.list_programs() if p.is_active]
        assert [p.id for p in active] == [b.id]
        assert service.get_active_program().id == b.id
        assert a.id != b.id

    def test_activate_missing(self, service):
        with pytest.raises(HTTPException) as exc:
            service.set_active(123)
        assert exc.value.status_code == 404


class TestSmartCycle:
    def test_prepopulated_structure(self, service):
        program = _make_program(service)
        service.create_cycle(program.id, CycleCreate(title="Cycle 1", color="#ff0000", smart=True))

        tree = service.get_tree(program.id)
        (cycle,) = tree.cycles
        assert [p.title for p in cycle.phases] == ["Фаза 1", "Фаза 2", "Фаза 3", "Фаза 4"]
        for phase in cycle.phases:
            assert [w.title for w in phase.workouts] == [f"Тренировка {i}" for i in range(1, 5)]
            for workout in phase.workouts:
                prefixes = [[r.prefix for r in b.rows] for b in workout.blocks]
                assert prefixes == STANDARD_BLOCKS
                assert all(r.content == "" for b in workout.blocks for r in b.rows)


class TestTree:
    def test_children_ordered_by_order_index(self, service):
        program = _make_program(service)
        cycle = service.create_cycle(program.id, CycleCreate(title="C"))
        service.create_phase(cycle.id, NodeCreate(title="Second", order_index=2))
        first = service.create_phase(cycle.id, NodeCreate(title="First", order_index=1))
        workout = service.create_workout(first.id, NodeCreate(title="W"))
        block = service.create_block(workout.id, BlockCreate(title="15 min"))
        service.create_row(block.id, RowCreate(prefix="A2", content="Squat", order_index=2))
        service.create_row(block.id, RowCreate(prefix="A1", content="Bench", order_index=1))

        tree = service.get_tree(program.id)
        phases = tree.cycles[0].phases
        assert [p.title for p in phases] == ["First", "Second"]
        rows = phases[0].workouts[0].blocks[0].rows
        assert [r.prefix for r in rows] == ["A1", "A2"]

    def test_create_under_missing_parent(self, service):
        with pytest.raises(HTTPException) as exc:
            service.create_phase(42, NodeCreate(title="Orphan"))
        assert exc.value.status_code == 404

    def test_update_node_ignores_fields_of_other_levels(self, service):
        program = _make_program(service)
        cycle = service.create_cycle(program.id, CycleCreate(title="C"))
        phase = service.create_phase(cycle.id, NodeCreate(title="P"))

        updated = service.update_node(NodeLevel.PHASE, phase.id, NodeUpdate(title="Peak", color="#00ff00",
                                                                            content="ignored"))
        assert updated.title == "Peak"
        assert updated.color == "#00ff00"

    def test_delete_removes_subtree(self, service, session):
        program = _make_program(service)
        cycle = service.create_cycle(program.id, CycleCreate(title="C", smart=True))
        phase_ids = [p.id for p in service.get_tree(program.id).cycles[0].phases]

        service.delete_node(NodeLevel.PHASE, phase_ids[0])
        tree = service.get_tree(program.id)
        assert [p.id for p in tree.cycles[0].phases] == phase_ids[1:]

        service.delete_node(NodeLevel.CYCLE, cycle.id)
        assert service.get_tree(program.id).cycles == []
        assert session.get(Phase, phase_ids[1]) is None
        assert session.exec(select(WorkoutBlock)).all() == []
        assert session.exec(select(BlockRow)).all() == []

    def test_delete_missing(self, service):
        with pytest.raises(HTTPException) as exc:
            service.delete_node(NodeLevel.ROW, 7)
        assert exc.value.status_code == 404


class TestProgramDay:
    def test_training_day(self, service):
        program = _make_program(service)
        service.create_cycle(program.id, CycleCreate(title="Cycle 1", color="#123456", smart=True))

        day = service.get_day(MONDAY + datetime.timedelta(days=2))
        assert day.is_training_day
        assert day.workout_index == 1
        assert day.week_label == "Неделя 1"
        assert day.phase_title == "Фаза 1"
        assert day.color == "#123456"
        assert day.workout.title == "Тренировка 2"
        assert len(day.workout.blocks) == len(STANDARD_BLOCKS)

    def test_rest_day(self, service):
        program = _make_program(service)
        service.create_cycle(program.id, CycleCreate(title="Cycle 1", smart=True))

        day = service.get_day(MONDAY + datetime.timedelta(days=1))
        assert not day.is_training_day
        assert day.workout_index is None
        assert day.phase_title == "Фаза 1"

    def test_before_start(self, service):
        _make_program(service)
        day = service.get_day(MONDAY - datetime.timedelta(days=1))
        assert day.week_label == "До начала"
        assert day.phase_title is None

    def test_no_active_program(self, service):
        with pytest.raises(HTTPException) as exc:
            service.get_day(MONDAY)
        assert exc.value.status_code == 404
