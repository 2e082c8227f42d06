"""
Training program repository.

Handles database operations for the Program tree
(Program → Cycle → Phase → Workout → WorkoutBlock → BlockRow).
"""

from typing import Optional, Type, TypeVar

from sqlmodel import Session, SQLModel, select

from app.models.program import BlockRow, Cycle, Phase, Program, Workout, WorkoutBlock

NodeT = TypeVar("NodeT", bound=SQLModel)


class ProgramRepository:
    """Repository for the training program tree."""

    def __init__(self, session: Session):
        self.session = session

    # ------------------------------------------------------------------
    # Generic node access
    # ------------------------------------------------------------------

    def add(self, node: NodeT) -> NodeT:
        self.session.add(node)
        self.session.commit()
        self.session.refresh(node)
        return node

    def get(self, model: Type[NodeT], node_id: int) -> Optional[NodeT]:
        return self.session.get(model, node_id)

    def update(self, node: NodeT) -> NodeT:
        return self.add(node)

    # ------------------------------------------------------------------
    # Programs
    # ------------------------------------------------------------------

    def get_all_programs(self) -> list[Program]:
        statement = select(Program).order_by(Program.created_at.desc(), Program.id.desc())
        return list(self.session.exec(statement).all())

    def get_active_program(self) -> Optional[Program]:
        statement = select(Program).where(Program.is_active == True).order_by(Program.id.desc())  # noqa: E712
        return self.session.exec(statement).first()

    def set_active(self, program_id: int) -> None:
        """Deactivate every other program and activate one, in a single commit."""
        for program in self.session.exec(select(Program)).all():
            program.is_active = program.id == program_id
            self.session.add(program)
        self.session.commit()

    # ------------------------------------------------------------------
    # Children, ordered by order_index
    # ------------------------------------------------------------------

    def get_cycles(self, program_id: int) -> list[Cycle]:
        statement = select(Cycle).where(Cycle.program_id == program_id).order_by(Cycle.order_index, Cycle.id)
        return list(self.session.exec(statement).all())

    def get_phases(self, cycle_ids: list[int]) -> list[Phase]:
        if not cycle_ids:
            return []
        statement = select(Phase).where(Phase.cycle_id.in_(cycle_ids)).order_by(Phase.order_index, Phase.id)
        return list(self.session.exec(statement).all())

    def get_workouts(self, phase_ids: list[int]) -> list[Workout]:
        if not phase_ids:
            return []
        statement = select(Workout).where(Workout.phase_id.in_(phase_ids)).order_by(Workout.order_index, Workout.id)
        return list(self.session.exec(statement).all())

    def get_blocks(self, workout_ids: list[int]) -> list[WorkoutBlock]:
        if not workout_ids:
            return []
        statement = (
            select(WorkoutBlock)
            .where(WorkoutBlock.workout_id.in_(workout_ids))
            .order_by(WorkoutBlock.order_index, WorkoutBlock.id)
        )
        return list(self.session.exec(statement).all())

    def get_rows(self, block_ids: list[int]) -> list[BlockRow]:
        if not block_ids:
            return []
        statement = select(BlockRow).where(BlockRow.block_id.in_(block_ids)).order_by(BlockRow.order_index, BlockRow.id)
        return list(self.session.exec(statement).all())

    # ------------------------------------------------------------------
    # Deletion (whole subtree, one transaction)
    # ------------------------------------------------------------------

    def _subtree(self, model: Type[SQLModel], node_id: int) -> list[SQLModel]:
        """The node and all its descendants, leaves first."""
        node = self.get(model, node_id)
        if node is None:
            return []

        cycles = self.get_cycles(node_id) if model is Program else ([node] if model is Cycle else [])
        phases = self.get_phases([c.id for c in cycles]) if cycles else ([node] if model is Phase else [])
        workouts = self.get_workouts([p.id for p in phases]) if phases else ([node] if model is Workout else [])
        blocks = self.get_blocks([w.id for w in workouts]) if workouts else ([node] if model is WorkoutBlock else [])
        rows = self.get_rows([b.id for b in blocks]) if blocks else ([node] if model is BlockRow else [])

        nodes: list[SQLModel] = [*rows, *blocks, *workouts, *phases, *cycles]
        if model is Program:
            nodes.append(node)
        # The node itself is already in its own level's list for every other type.
        return nodes

    def delete_node(self, model: Type[SQLModel], node_id: int) -> bool:
        """Delete a node and its whole subtree. Returns False if not found."""
        nodes = self._subtree(model, node_id)
        if not nodes:
            return False
        for n in nodes:
            self.session.delete(n)
        self.session.commit()
        return True
