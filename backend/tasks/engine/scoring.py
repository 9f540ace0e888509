# tasks/engine/scoring.py

import datetime
import logging
from typing import Callable, NamedTuple, Optional, Sequence, Tuple

from .contracts import RecommendationContext, ScoreBreakdown, TaskSnapshot
from .energy import EnergyLevel

logger = logging.getLogger(__name__)

# (predicate, score, label); evaluated top to bottom, first match wins
Ladder = Sequence[Tuple[Callable[[float], bool], int, str]]

SECONDS_PER_HOUR = 3600.0

NO_DEADLINE_SCORE = 15
NO_DEADLINE_LABEL = "no deadline"

DEADLINE_LADDER: Ladder = (
    (lambda hours: hours < 0, 40, "overdue"),
    (lambda hours: hours <= 24, 38, "due within 24 hours"),
    (lambda hours: hours <= 48, 32, "due within 2 days"),
    (lambda hours: hours <= 168, 24, "due this week"),
    (lambda hours: True, 10, "deadline is flexible"),
)

# Keyed on task ordinal minus user ordinal
ENERGY_LADDER: Ladder = (
    (lambda gap: gap == 0, 30, "matches your {user} energy"),
    (lambda gap: gap < 0, 20, "requires {task} energy (you have more)"),
    (lambda gap: True, 0, "requires more energy than available"),
)

TIME_EFFICIENCY_LADDER: Ladder = (
    (lambda ratio: ratio <= 0.3, 25, "quick task"),
    (lambda ratio: ratio <= 0.6, 30, "fits well in your time"),
    (lambda ratio: ratio <= 0.9, 22, "uses most of your time"),
    (lambda ratio: True, 15, "tight fit"),
)

MAX_DEADLINE_SCORE = 40
MAX_ENERGY_MATCH_SCORE = 30
MAX_TIME_EFFICIENCY_SCORE = 30


class SubScore(NamedTuple):
    score: int
    label: str


def _first_match(ladder: Ladder, value) -> Tuple[int, str]:
    for predicate, score, label in ladder:
        if predicate(value):
            return score, label
    raise LookupError(f"No ladder rung matched {value!r}")


def hours_until(deadline: datetime.datetime, now: datetime.datetime) -> float:
    return (deadline - now).total_seconds() / SECONDS_PER_HOUR


def score_deadline(
    deadline: Optional[datetime.datetime],
    now: datetime.datetime,
) -> SubScore:
    """Urgency points (0-40): the closer the deadline, the more points."""
    if deadline is None:
        return SubScore(NO_DEADLINE_SCORE, NO_DEADLINE_LABEL)
    return SubScore(*_first_match(DEADLINE_LADDER, hours_until(deadline, now)))


def score_energy_match(task_energy: EnergyLevel, user_energy: EnergyLevel) -> SubScore:
    """
    Energy fit points (0-30).

    An exact match beats a task that needs less than the user has. A task that
    needs more scores 0; the eligibility filter normally removes those first.
    """
    gap = task_energy.ordinal - user_energy.ordinal
    score, template = _first_match(ENERGY_LADDER, gap)
    return SubScore(score, template.format(user=user_energy.value, task=task_energy.value))


def score_time_efficiency(task_minutes: int, available_minutes: int) -> SubScore:
    """
    Time fit points (0-30) from the utilization ratio.

    Not monotonic: a task filling 30-60% of the window outscores a very
    short one.
    """
    utilization = task_minutes / available_minutes
    return SubScore(*_first_match(TIME_EFFICIENCY_LADDER, utilization))


def score_task_breakdown(
    task: TaskSnapshot,
    context: RecommendationContext,
    now: datetime.datetime,
) -> Tuple[ScoreBreakdown, Tuple[str, ...]]:
    deadline = score_deadline(task.deadline, now)
    energy = score_energy_match(task.energy_required, context.current_energy)
    time_fit = score_time_efficiency(task.estimated_time_minutes, context.available_time_minutes)

    breakdown = ScoreBreakdown(
        deadline_score=deadline.score,
        energy_match_score=energy.score,
        time_efficiency_score=time_fit.score,
    )
    logger.debug(
        f"Scored task {task.id}: {breakdown.total} "
        f"({deadline.label}; {energy.label}; {time_fit.label})"
    )
    return breakdown, (deadline.label, energy.label, time_fit.label)
