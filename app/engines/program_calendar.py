"""
Program calendar — mapping workouts onto dates.

Workouts run on a fixed Monday / Wednesday / Friday grid starting at the
program start date: global workout ``i`` falls in week ``i // 3`` on day
offset ``(0, 2, 4)[i % 3]``.  The start date is expected to be a Monday;
the grid is relative to it either way.

Phase colouring: a phase "owns" every calendar day up to and including the
date of its last workout; the next phase starts the following day.  Phases
without workouts take no days.
"""

from __future__ import annotations

import datetime
from typing import Iterator, Optional

from app.schemas.program import CycleRead, PhaseLookup, PhaseRead, ProgramTree, WorkoutRead

_DAY_OFFSETS: tuple[int, ...] = (0, 2, 4)
_WORKOUTS_PER_WEEK = len(_DAY_OFFSETS)

# Layout used to pre-populate a new cycle.
PHASES_PER_CYCLE = 4
WORKOUTS_PER_PHASE = 4
STANDARD_BLOCKS: list[list[str]] = [
    ["A1", "A2"],
    ["B1", "B2"],
    ["C1", "C2"],
    ["D1", "D2"],
    ["E1", "E2", "E3", "E4", "E5"],
    ["F1"],
]


def phase_title(n: int) -> str:
    return f"Фаза {n}"


def workout_title(n: int) -> str:
    return f"Тренировка {n}"


# ======================================================================
# Date arithmetic
# ======================================================================


def workout_date(start: datetime.date, global_index: int) -> datetime.date:
    """Calendar date of the workout with 0-based *global_index*."""
    week, remainder = divmod(global_index, _WORKOUTS_PER_WEEK)
    return start + datetime.timedelta(days=week * 7 + _DAY_OFFSETS[remainder])


def workout_index_for_date(start: datetime.date, target: datetime.date) -> int:
    """0-based global workout index on *target*, or ``-1`` if it is not a training day."""
    diff = (target - start).days
    if diff < 0:
        return -1
    week, day_in_week = divmod(diff, 7)
    if day_in_week not in _DAY_OFFSETS:
        return -1
    return week * _WORKOUTS_PER_WEEK + _DAY_OFFSETS.index(day_in_week)


def program_week_label(start: datetime.date, target: datetime.date) -> str:
    diff = (target - start).days
    if diff < 0:
        return "До начала"
    return f"Неделя {diff // 7 + 1}"


# ======================================================================
# Tree walking
# ======================================================================


def _ordered_phases(cycle: CycleRead) -> list[PhaseRead]:
    return sorted(cycle.phases, key=lambda p: p.order_index)


def iter_workouts(program: ProgramTree) -> Iterator[tuple[CycleRead, PhaseRead, WorkoutRead]]:
    """Yield ``(cycle, phase, workout)`` in schedule order."""
    for cycle in sorted(program.cycles, key=lambda c: c.order_index):
        for phase in _ordered_phases(cycle):
            for workout in sorted(phase.workouts, key=lambda w: w.order_index):
                yield cycle, phase, workout


def phase_for_date(program: ProgramTree, target: datetime.date) -> PhaseLookup:
    """Cycle and phase that own *target*, with the phase (or cycle) colour."""
    start = program.start_date
    diff = (target - start).days
    if diff < 0:
        return PhaseLookup()

    counter = 0
    for cycle in sorted(program.cycles, key=lambda c: c.order_index):
        for phase in _ordered_phases(cycle):
            count = len(phase.workouts)
            if count == 0:
                continue
            last_date = workout_date(start, counter + count - 1)
            if diff <= (last_date - start).days:
                return PhaseLookup(cycle=cycle, phase=phase, color=phase.color or cycle.color)
            counter += count

    return PhaseLookup()


def workout_for_date(program: ProgramTree,
                     target: datetime.date) -> Optional[tuple[CycleRead, PhaseRead, WorkoutRead]]:
    """The scheduled workout on *target*, or ``None`` (rest day / outside the program)."""
    index = workout_index_for_date(program.start_date, target)
    if index < 0:
        return None
    for i, entry in enumerate(iter_workouts(program)):
        if i == index:
            return entry
    return None
