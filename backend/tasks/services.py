# tasks/services.py

import datetime
import logging
from typing import Optional

from django.db import transaction
from django.utils import timezone

from .engine import (
    RecommendationContext,
    RecommendationResult,
    TaskSnapshot,
    get_recommendations,
)
from .models import Recurrence, Task

logger = logging.getLogger(__name__)

RECURRENCE_INTERVALS = {
    Recurrence.DAILY: datetime.timedelta(days=1),
    Recurrence.WEEKLY: datetime.timedelta(weeks=1),
}


def next_occurrence_deadline(
    deadline: Optional[datetime.datetime],
    recurrence: str,
    completed_at: datetime.datetime,
) -> Optional[datetime.datetime]:
    """
    Deadline for the occurrence that follows a completed one.

    Steps forward one interval at a time until the deadline lies after the
    completion time, so finishing a long-overdue daily task does not spawn
    another overdue copy. Occurrences without a deadline stay without one.
    """
    if deadline is None:
        return None

    interval = RECURRENCE_INTERVALS.get(recurrence)
    if interval is None:
        raise ValueError(f"Unknown recurrence {recurrence!r}")

    next_deadline = deadline + interval
    while next_deadline <= completed_at:
        next_deadline += interval
    return next_deadline


def complete_task(task: Task) -> Task:
    """
    Mark the task done. For recurring tasks, the next occurrence is spawned
    by a Celery job enqueued once the transaction commits.
    """
    with transaction.atomic():
        task.completed_at = timezone.now()
        task.save(update_fields=['completed_at'])

        if task.is_recurring:
            task_id = task.id

            def trigger_next_occurrence():
                from .celery_tasks import spawn_next_occurrence
                spawn_next_occurrence.delay(task_id)

            transaction.on_commit(trigger_next_occurrence)

    logger.info(f"Task {task.id} completed")
    return task


def reopen_task(task: Task) -> Task:
    """Clear the completion mark. An already spawned next occurrence is kept."""
    task.completed_at = None
    task.save(update_fields=['completed_at'])
    logger.info(f"Task {task.id} reopened")
    return task


def recommend_for_user(
    user,
    context: RecommendationContext,
    now: Optional[datetime.datetime] = None,
) -> RecommendationResult:
    """Run the engine over the user's open tasks."""
    open_tasks = Task.objects.filter(user=user, completed_at__isnull=True)
    snapshots = [TaskSnapshot.from_model(task) for task in open_tasks]
    return get_recommendations(snapshots, context, now=now or timezone.now())
