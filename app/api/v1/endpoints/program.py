"""
Training program endpoints.

Everyone can read the active program and its calendar; editing is
reserved for admins.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_admin, get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.program import (
    BlockCreate,
    CycleCreate,
    NodeCreate,
    NodeRef,
    NodeUpdate,
    ProgramCreate,
    ProgramDay,
    ProgramRead,
    ProgramTree,
    ProgramUpdate,
    RowCreate,
)
from app.services.program_service import NodeLevel, ProgramService

router = APIRouter()


# ======================================================================
# Read
# ======================================================================


@router.get("/",
            summary="All programs, newest first.",
            response_model=list[ProgramRead])
def list_programs(current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return ProgramService(db).list_programs()


@router.get("/active",
            summary="The active program with its full tree.",
            response_model=ProgramTree)
def get_active(current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return ProgramService(db).get_active_tree()


@router.get("/day",
            summary="Calendar view of one day (defaults to today).",
            response_model=ProgramDay)
def get_day(
    date: Optional[datetime.date] = Query(None),
    program_id: Optional[int] = Query(None),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return ProgramService(db).get_day(date or datetime.date.today(), program_id)


@router.get("/{program_id}",
            summary="A program with its full tree.",
            response_model=ProgramTree)
def get_tree(program_id: int, current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return ProgramService(db).get_tree(program_id)


# ======================================================================
# Admin editing
# ======================================================================


@router.post("/",
             summary="Create a program.",
             response_model=ProgramRead,
             status_code=status.HTTP_201_CREATED)
def create_program(data: ProgramCreate, current_user: User = Depends(get_current_admin),
                   db: Session = Depends(get_db)):
    return ProgramService(db).create_program(data)


@router.patch("/{program_id}",
              summary="Rename a program or move its start date.",
              response_model=ProgramRead)
def update_program(program_id: int, data: ProgramUpdate, current_user: User = Depends(get_current_admin),
                   db: Session = Depends(get_db)):
    return ProgramService(db).update_program(program_id, data)


@router.post("/{program_id}/activate",
             summary="Make this the only active program.",
             response_model=ProgramRead)
def activate(program_id: int, current_user: User = Depends(get_current_admin), db: Session = Depends(get_db)):
    return ProgramService(db).set_active(program_id)


@router.post("/{program_id}/cycles",
             summary="Add a cycle (set smart=true to pre-populate it).",
             response_model=NodeRef,
             status_code=status.HTTP_201_CREATED)
def create_cycle(program_id: int, data: CycleCreate, current_user: User = Depends(get_current_admin),
                 db: Session = Depends(get_db)):
    cycle = ProgramService(db).create_cycle(program_id, data)
    return NodeRef(id=cycle.id, level=NodeLevel.CYCLE.value)


@router.post("/cycles/{cycle_id}/phases",
             summary="Add a phase to a cycle.",
             response_model=NodeRef,
             status_code=status.HTTP_201_CREATED)
def create_phase(cycle_id: int, data: NodeCreate, current_user: User = Depends(get_current_admin),
                 db: Session = Depends(get_db)):
    phase = ProgramService(db).create_phase(cycle_id, data)
    return NodeRef(id=phase.id, level=NodeLevel.PHASE.value)


@router.post("/phases/{phase_id}/workouts",
             summary="Add a workout to a phase.",
             response_model=NodeRef,
             status_code=status.HTTP_201_CREATED)
def create_workout(phase_id: int, data: NodeCreate, current_user: User = Depends(get_current_admin),
                   db: Session = Depends(get_db)):
    workout = ProgramService(db).create_workout(phase_id, data)
    return NodeRef(id=workout.id, level=NodeLevel.WORKOUT.value)


@router.post("/workouts/{workout_id}/blocks",
             summary="Add a block to a workout.",
             response_model=NodeRef,
             status_code=status.HTTP_201_CREATED)
def create_block(workout_id: int, data: BlockCreate, current_user: User = Depends(get_current_admin),
                 db: Session = Depends(get_db)):
    block = ProgramService(db).create_block(workout_id, data)
    return NodeRef(id=block.id, level=NodeLevel.BLOCK.value)


@router.post("/blocks/{block_id}/rows",
             summary="Add a row to a block.",
             response_model=NodeRef,
             status_code=status.HTTP_201_CREATED)
def create_row(block_id: int, data: RowCreate, current_user: User = Depends(get_current_admin),
               db: Session = Depends(get_db)):
    row = ProgramService(db).create_row(block_id, data)
    return NodeRef(id=row.id, level=NodeLevel.ROW.value)


@router.patch("/nodes/{level}/{node_id}",
              summary="Update any program node.",
              response_model=NodeRef)
def update_node(level: NodeLevel, node_id: int, data: NodeUpdate, current_user: User = Depends(get_current_admin),
                db: Session = Depends(get_db)):
    node = ProgramService(db).update_node(level, node_id, data)
    return NodeRef(id=node.id, level=level.value)


@router.delete("/nodes/{level}/{node_id}",
               summary="Delete a program node with everything below it.",
               status_code=status.HTTP_204_NO_CONTENT)
def delete_node(level: NodeLevel, node_id: int, current_user: User = Depends(get_current_admin),
                db: Session = Depends(get_db)):
    ProgramService(db).delete_node(level, node_id)
