"""
Training program service.

Admin editing of the program tree, the single active program and the
calendar view of a given day.
"""

import datetime
from enum import Enum
from typing import Optional

from fastapi import HTTPException, status
from loguru import logger
from sqlmodel import Session, SQLModel

from app.db.repositories.program import ProgramRepository
from app.engines.program_calendar import (
    PHASES_PER_CYCLE,
    STANDARD_BLOCKS,
    WORKOUTS_PER_PHASE,
    phase_for_date,
    phase_title,
    program_week_label,
    workout_for_date,
    workout_index_for_date,
    workout_title,
)
from app.models.program import BlockRow, Cycle, Phase, Program, Workout, WorkoutBlock
from app.schemas.program import (
    BlockCreate,
    BlockRowRead,
    CycleCreate,
    CycleRead,
    NodeCreate,
    NodeUpdate,
    PhaseRead,
    ProgramCreate,
    ProgramDay,
    ProgramTree,
    ProgramUpdate,
    RowCreate,
    WorkoutBlockRead,
    WorkoutRead,
)


class NodeLevel(str, Enum):
    PROGRAM = "program"
    CYCLE = "cycle"
    PHASE = "phase"
    WORKOUT = "workout"
    BLOCK = "block"
    ROW = "row"


NODE_MODELS: dict[NodeLevel, type[SQLModel]] = {
    NodeLevel.PROGRAM: Program,
    NodeLevel.CYCLE: Cycle,
    NodeLevel.PHASE: Phase,
    NodeLevel.WORKOUT: Workout,
    NodeLevel.BLOCK: WorkoutBlock,
    NodeLevel.ROW: BlockRow,
}

# Fields of NodeUpdate each level accepts.
_UPDATABLE: dict[NodeLevel, tuple[str, ...]] = {
    NodeLevel.PROGRAM: ("title",),
    NodeLevel.CYCLE: ("title", "order_index", "color"),
    NodeLevel.PHASE: ("title", "order_index", "color"),
    NodeLevel.WORKOUT: ("title", "order_index"),
    NodeLevel.BLOCK: ("title", "order_index"),
    NodeLevel.ROW: ("content", "prefix", "order_index"),
}


class ProgramService:
    """Service for the training program tree."""

    def __init__(self, session: Session):
        self.session = session
        self.repository = ProgramRepository(session)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def _get_or_404(self, level: NodeLevel, node_id: int):
        node = self.repository.get(NODE_MODELS[level], node_id)
        if node is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{level.value.capitalize()} not found")
        return node

    def list_programs(self) -> list[Program]:
        return self.repository.get_all_programs()

    def get_active_program(self) -> Optional[Program]:
        return self.repository.get_active_program()

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    def create_program(self, data: ProgramCreate) -> Program:
        """New programs start inactive unless no program is active yet."""
        is_first = self.repository.get_active_program() is None
        program = self.repository.add(Program(title=data.title, start_date=data.start_date, is_active=is_first))
        logger.info("Created program {} {!r} (active={})", program.id, program.title, program.is_active)
        return program

    def set_active(self, program_id: int) -> Program:
        """Make *program_id* the only active program."""
        self._get_or_404(NodeLevel.PROGRAM, program_id)
        self.repository.set_active(program_id)
        program = self._get_or_404(NodeLevel.PROGRAM, program_id)
        self.session.refresh(program)
        logger.info("Program {} is now active", program_id)
        return program

    def update_program(self, program_id: int, data: ProgramUpdate) -> Program:
        program = self._get_or_404(NodeLevel.PROGRAM, program_id)
        if data.title is not None:
            program.title = data.title
        if data.start_date is not None:
            program.start_date = data.start_date
        return self.repository.update(program)

    def create_cycle(self, program_id: int, data: CycleCreate) -> Cycle:
        self._get_or_404(NodeLevel.PROGRAM, program_id)
        if data.smart:
            return self.create_smart_cycle(program_id, data)
        return self.repository.add(Cycle(program_id=program_id, title=data.title, order_index=data.order_index,
                                         color=data.color))

    def create_smart_cycle(self, program_id: int, data: CycleCreate) -> Cycle:
        """
        Create a cycle pre-populated with 4 phases of 4 workouts, each
        workout holding the standard A–F blocks with empty rows.

        Everything is written in a single transaction.
        """
        cycle = Cycle(program_id=program_id, title=data.title, order_index=data.order_index, color=data.color)
        self.session.add(cycle)
        self.session.flush()

        for p in range(1, PHASES_PER_CYCLE + 1):
            phase = Phase(cycle_id=cycle.id, title=phase_title(p), order_index=p)
            self.session.add(phase)
            self.session.flush()

            for w in range(1, WORKOUTS_PER_PHASE + 1):
                workout = Workout(phase_id=phase.id, title=workout_title(w), order_index=w)
                self.session.add(workout)
                self.session.flush()

                for b, prefixes in enumerate(STANDARD_BLOCKS, start=1):
                    block = WorkoutBlock(workout_id=workout.id, title=None, order_index=b)
                    self.session.add(block)
                    self.session.flush()
                    self.session.add_all([BlockRow(block_id=block.id, prefix=prefix, content="", order_index=r)
                                          for r, prefix in enumerate(prefixes, start=1)])

        self.session.commit()
        self.session.refresh(cycle)
        logger.info("Created smart cycle {} in program {}", cycle.id, program_id)
        return cycle

    def create_phase(self, cycle_id: int, data: NodeCreate) -> Phase:
        self._get_or_404(NodeLevel.CYCLE, cycle_id)
        return self.repository.add(Phase(cycle_id=cycle_id, title=data.title, order_index=data.order_index,
                                         color=data.color))

    def create_workout(self, phase_id: int, data: NodeCreate) -> Workout:
        self._get_or_404(NodeLevel.PHASE, phase_id)
        return self.repository.add(Workout(phase_id=phase_id, title=data.title, order_index=data.order_index))

    def create_block(self, workout_id: int, data: BlockCreate) -> WorkoutBlock:
        self._get_or_404(NodeLevel.WORKOUT, workout_id)
        return self.repository.add(WorkoutBlock(workout_id=workout_id, title=data.title,
                                                order_index=data.order_index))

    def create_row(self, block_id: int, data: RowCreate) -> BlockRow:
        self._get_or_404(NodeLevel.BLOCK, block_id)
        return self.repository.add(BlockRow(block_id=block_id, content=data.content, prefix=data.prefix,
                                            order_index=data.order_index))

    # ------------------------------------------------------------------
    # Update / delete
    # ------------------------------------------------------------------

    def update_node(self, level: NodeLevel, node_id: int, data: NodeUpdate):
        """Apply the fields of *data* that *level* supports; others are ignored."""
        node = self._get_or_404(level, node_id)
        changes = data.model_dump(exclude_unset=True)
        for field in _UPDATABLE[level]:
            if field in changes:
                value = changes[field]
                if field == "title" and level != NodeLevel.BLOCK and not value:
                    continue
                setattr(node, field, value)
        return self.repository.update(node)

    def delete_node(self, level: NodeLevel, node_id: int) -> None:
        """Delete a node with its whole subtree."""
        if not self.repository.delete_node(NODE_MODELS[level], node_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{level.value.capitalize()} not found")
        logger.info("Deleted {} {}", level.value, node_id)

    # ------------------------------------------------------------------
    # Tree / calendar
    # ------------------------------------------------------------------

    def get_tree(self, program_id: int) -> ProgramTree:
        """The full program with every level ordered by ``order_index``."""
        program = self._get_or_404(NodeLevel.PROGRAM, program_id)
        return self._build_tree(program)

    def _build_tree(self, program: Program) -> ProgramTree:
        cycles = self.repository.get_cycles(program.id)
        phases = self.repository.get_phases([c.id for c in cycles])
        workouts = self.repository.get_workouts([p.id for p in phases])
        blocks = self.repository.get_blocks([w.id for w in workouts])
        rows = self.repository.get_rows([b.id for b in blocks])

        rows_by_block: dict[int, list[BlockRowRead]] = {}
        for r in rows:
            rows_by_block.setdefault(r.block_id, []).append(BlockRowRead.model_validate(r))

        blocks_by_workout: dict[int, list[WorkoutBlockRead]] = {}
        for b in blocks:
            blocks_by_workout.setdefault(b.workout_id, []).append(
                WorkoutBlockRead(id=b.id, order_index=b.order_index, workout_id=b.workout_id, title=b.title,
                                 rows=rows_by_block.get(b.id, [])))

        workouts_by_phase: dict[int, list[WorkoutRead]] = {}
        for w in workouts:
            workouts_by_phase.setdefault(w.phase_id, []).append(
                WorkoutRead(id=w.id, order_index=w.order_index, phase_id=w.phase_id, title=w.title,
                            blocks=blocks_by_workout.get(w.id, [])))

        phases_by_cycle: dict[int, list[PhaseRead]] = {}
        for p in phases:
            phases_by_cycle.setdefault(p.cycle_id, []).append(
                PhaseRead(id=p.id, order_index=p.order_index, cycle_id=p.cycle_id, title=p.title, color=p.color,
                          workouts=workouts_by_phase.get(p.id, [])))

        cycle_reads = [CycleRead(id=c.id, order_index=c.order_index, program_id=c.program_id, title=c.title,
                                 color=c.color, phases=phases_by_cycle.get(c.id, []))
                       for c in cycles]

        return ProgramTree(id=program.id, title=program.title, start_date=program.start_date,
                           is_active=program.is_active, created_at=program.created_at, cycles=cycle_reads, )

    def get_active_tree(self) -> ProgramTree:
        program = self.repository.get_active_program()
        if program is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No active program")
        return self._build_tree(program)

    def get_day(self, target: datetime.date, program_id: Optional[int] = None) -> ProgramDay:
        """Calendar view of *target* in the given (or the active) program."""
        tree = self.get_tree(program_id) if program_id is not None else self.get_active_tree()

        lookup = phase_for_date(tree, target)
        scheduled = workout_for_date(tree, target)
        index = workout_index_for_date(tree.start_date, target)

        return ProgramDay(date=target, week_label=program_week_label(tree.start_date, target),
                          is_training_day=scheduled is not None,
                          workout_index=index if index >= 0 else None,
                          cycle_title=lookup.cycle.title if lookup.cycle else None,
                          phase_title=lookup.phase.title if lookup.phase else None,
                          color=lookup.color,
                          workout=scheduled[2] if scheduled else None, )
