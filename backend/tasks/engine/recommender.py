# tasks/engine/recommender.py

import datetime
import logging
from typing import Iterable, List, Optional

from .contracts import (
    RecommendationContext,
    RecommendationResult,
    ScoredTask,
    TaskSnapshot,
)
from .explanation import generate_explanation
from .scoring import score_task_breakdown

logger = logging.getLogger(__name__)

EMPTY_STATE_MESSAGE = (
    "No tasks fit this context. Try adjusting your available time or energy "
    "level, or add some new tasks."
)
LEAD_IN_MESSAGE = "Based on what you can handle right now..."

MAX_ALTERNATIVES = 2


class RecommendationEngine:
    """
    Picks the one task to do now from a snapshot of the user's tasks.

    Pipeline per call: filter -> score -> explain -> rank -> select.
    The engine holds no state between calls and never mutates its input.
    """

    def __init__(self, max_alternatives: int = MAX_ALTERNATIVES):
        self.max_alternatives = max_alternatives

    def filter_eligible(
        self,
        tasks: Iterable[TaskSnapshot],
        context: RecommendationContext,
    ) -> List[TaskSnapshot]:
        """Tasks that are open, fit the time budget and don't exceed the user's energy."""
        user_level = context.current_energy.ordinal
        eligible = []
        for task in tasks:
            if task.completed_at is not None:
                continue
            if task.estimated_time_minutes > context.available_time_minutes:
                continue
            if task.energy_required.ordinal > user_level:
                continue
            eligible.append(task)
        return eligible

    def score_task(
        self,
        task: TaskSnapshot,
        context: RecommendationContext,
        now: datetime.datetime,
    ) -> ScoredTask:
        breakdown, factors = score_task_breakdown(task, context, now)
        return ScoredTask(
            task=task,
            score=breakdown.total,
            breakdown=breakdown,
            explanation=generate_explanation(task, breakdown, context, now),
            factors=factors,
        )

    def recommend(
        self,
        tasks: Iterable[TaskSnapshot],
        context: RecommendationContext,
        now: Optional[datetime.datetime] = None,
    ) -> RecommendationResult:
        if now is None:
            now = datetime.datetime.now(datetime.timezone.utc)

        tasks = list(tasks)
        eligible = self.filter_eligible(tasks, context)
        logger.debug(
            f"Recommendation: {len(eligible)} of {len(tasks)} tasks eligible "
            f"for {context.available_time_minutes} min at {context.current_energy.value} energy"
        )

        if not eligible:
            return RecommendationResult(
                recommended=None,
                alternatives=(),
                message=EMPTY_STATE_MESSAGE,
            )

        # sorted() is stable, so equal scores keep their input order
        ranked = sorted(
            (self.score_task(task, context, now) for task in eligible),
            key=lambda scored: scored.score,
            reverse=True,
        )
        recommended, rest = ranked[0], ranked[1:]
        logger.debug(f"Recommendation: picked task {recommended.task.id} ({recommended.score})")

        return RecommendationResult(
            recommended=recommended,
            alternatives=tuple(rest[:self.max_alternatives]),
            message=LEAD_IN_MESSAGE,
        )


def get_recommendations(
    tasks: Iterable[TaskSnapshot],
    context: RecommendationContext,
    now: Optional[datetime.datetime] = None,
) -> RecommendationResult:
    return RecommendationEngine().recommend(tasks, context, now=now)
