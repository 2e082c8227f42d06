"""
Rating engine — per-discipline standings and the overall leaderboard.

Scoring (scheme A)
------------------
With ``N`` participants, place 1 earns ``N`` points, place 2 earns
``N - 1`` … the last place earns 1.  A user with no recorded result earns
0 and has no place.

``N`` is the **total** number of users passed in, including those without a
result in the discipline.  Ranking and tie detection only look at users that
have a value.

Ties
----
Competition ranking ("1, 2, 2, 4"): equal values share the place of the
first member of the group, the next distinct value skips ahead by the group
size.  A tied group splits the points of the places it occupies evenly, so
two users tied for first out of five each get ``mean(5, 4) = 4.5``.

Point values are kept un-rounded all the way to the overall total.
"""

from __future__ import annotations

from typing import Sequence

from app.catalog.disciplines import Direction, Discipline
from app.engines.history import History, latest_value, user_history
from app.schemas.rating import Athlete, DisciplineRow, OverallRow, UserId


# ======================================================================
# Point table
# ======================================================================


def points_for_place(place: int, total_users: int) -> int:
    """Points earned by *place* among *total_users* (0 when out of range)."""
    if place <= 0 or place > total_users:
        return 0
    return total_users - place + 1


def average_tie_points(place_start: int, tie_size: int, total_users: int) -> float:
    """Mean of the points of ``tie_size`` consecutive places from *place_start*."""
    total = sum(points_for_place(place_start + i, total_users) for i in range(tie_size))
    return total / tie_size


# ======================================================================
# Per-discipline ranking
# ======================================================================


def _name_key(name: str) -> str:
    return name.casefold()


def rank_discipline(discipline: Discipline, users: Sequence[Athlete], history: History, ) -> list[DisciplineRow]:
    """Rank *users* in one discipline by their latest recorded value.

    Returns ranked rows ordered by (place, name), followed by the users
    without a value ordered by name.
    """
    lower_better = discipline.direction == Direction.LOWER_BETTER
    total_users = len(users)

    rows = [DisciplineRow(user_id=u.id, user_name=u.name,
                          value=latest_value(user_history(history, u.id).get(discipline.slug)), )
            for u in users]

    with_value = [r for r in rows if r.value is not None]
    without_value = [r for r in rows if r.value is None]

    # Stable sort: equal values keep the caller's order until the name pass below.
    with_value.sort(key=lambda r: r.value, reverse=not lower_better)

    current_place = 1
    i = 0
    while i < len(with_value):
        j = i
        while j < len(with_value) and with_value[j].value == with_value[i].value:
            j += 1
        tie_size = j - i
        avg_points = average_tie_points(current_place, tie_size, total_users)
        for k in range(i, j):
            with_value[k].place = current_place
            with_value[k].points = avg_points
        current_place += tie_size
        i = j

    with_value.sort(key=lambda r: (r.place, _name_key(r.user_name)))
    without_value.sort(key=lambda r: _name_key(r.user_name))
    return with_value + without_value


# ======================================================================
# Overall leaderboard
# ======================================================================


def rank_overall(disciplines: Sequence[Discipline], users: Sequence[Athlete], history: History, ) -> list[OverallRow]:
    """Sum each user's discipline points and rank the totals (higher first)."""
    totals: dict[UserId, float] = {u.id: 0.0 for u in users}

    for d in disciplines:
        for row in rank_discipline(d, users, history):
            totals[row.user_id] = totals.get(row.user_id, 0.0) + row.points

    rows = [OverallRow(user_id=u.id, user_name=u.name, points=totals[u.id], place=0) for u in users]
    rows.sort(key=lambda r: r.points, reverse=True)

    current_place = 1
    i = 0
    while i < len(rows):
        j = i
        while j < len(rows) and rows[j].points == rows[i].points:
            j += 1
        for k in range(i, j):
            rows[k].place = current_place
        current_place += j - i
        i = j

    return rows
