"""
One-rep-max estimation and percentage tables.

Formulas:

* Epley:   ``1RM = w * (1 + r / 30)``
* Brzycki: ``1RM = w * 36 / (37 - r)``  (``r >= 37`` capped at ``2 * w``)
* NSCA:    ``1RM = w * (1 + 0.033 * r)``

A single rep (or a non-positive rep count) is already a max: the weight is
returned unchanged.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

TRAINING_PERCENTAGES: tuple[int, ...] = (50, 60, 70, 75, 80, 85, 90, 95)


class Formula(str, Enum):
    EPLEY = "epley"
    BRZYCKI = "brzycki"
    NSCA = "nsca"


class PercentageWeight(BaseModel):
    percent: int
    weight: float
    rounded_weight: float


def one_rm_epley(weight: float, reps: int) -> float:
    if reps <= 1:
        return weight
    return weight * (1 + reps / 30)


def one_rm_brzycki(weight: float, reps: int) -> float:
    if reps <= 1:
        return weight
    if reps >= 37:
        return weight * 2
    return weight * (36 / (37 - reps))


def one_rm_nsca(weight: float, reps: int) -> float:
    if reps <= 1:
        return weight
    return weight * (1 + 0.033 * reps)


_FORMULAS = {
    Formula.EPLEY: one_rm_epley,
    Formula.BRZYCKI: one_rm_brzycki,
    Formula.NSCA: one_rm_nsca,
}


def estimate_one_rm(weight: float, reps: int, formula: Formula = Formula.EPLEY) -> float:
    """Estimate the one-rep max from a set of *reps* at *weight*."""
    return _FORMULAS[Formula(formula)](weight, reps)


def _round_tenth(x: float) -> float:
    # Half-up to one decimal, as shown to the athlete.
    return int(x * 10 + 0.5) / 10 if x >= 0 else -int(-x * 10 + 0.5) / 10


def weight_for_percent(one_rm: float, percent: float) -> float:
    """Weight at *percent* of *one_rm*, to 0.1 kg."""
    return _round_tenth(one_rm * percent / 100)


def round_to_step(weight: float, step: float = 2.5) -> float:
    """Round *weight* to the nearest loadable step (plates)."""
    return int(weight / step + 0.5) * step


def percentage_table(one_rm: float, step: float = 2.5) -> list[PercentageWeight]:
    """Working weights for every training percentage."""
    rows = []
    for percent in TRAINING_PERCENTAGES:
        exact = one_rm * percent / 100
        rows.append(PercentageWeight(percent=percent, weight=_round_tenth(exact),
                                     rounded_weight=round_to_step(exact, step)))
    return rows
