# tasks/celery_tasks.py

import logging
from typing import Optional

from celery import shared_task
from django.db import transaction

from .models import Task
from .services import next_occurrence_deadline

# Configure logging for background worker monitoring
logger = logging.getLogger(__name__)


@shared_task(
    bind=True,
    autoretry_for=(Exception,),
    retry_backoff=True,
    retry_backoff_max=600,  # Max backoff of 10 minutes
    max_retries=3,
    time_limit=30,          # Hard limit for the task process
    soft_time_limit=25      # Soft limit to allow cleanup
)
def spawn_next_occurrence(self, task_id: int) -> Optional[int]:
    """
    Worker: create the next occurrence of a completed recurring task.
    Input = task_id only. Safe to run more than once: a task that already
    has a successor is left alone. Returns the new task id, or None.
    """
    logger.info(f"Recurrence expansion started for Task {task_id}")
    try:
        with transaction.atomic():
            task = Task.objects.select_for_update().filter(id=task_id).first()
            if not task:
                logger.warning(f"Task {task_id} not found. Exiting worker.")
                return None

            if not task.is_recurring or task.completed_at is None:
                logger.info(f"Task {task_id} is not a completed recurring task. Skipping.")
                return None

            if Task.objects.filter(recurrence_parent_id=task.id).exists():
                logger.info(f"Task {task_id} already has a next occurrence. Skipping.")
                return None

            successor = Task.objects.create(
                user_id=task.user_id,
                title=task.title,
                description=task.description,
                energy_required=task.energy_required,
                estimated_time_minutes=task.estimated_time_minutes,
                deadline=next_occurrence_deadline(task.deadline, task.recurrence, task.completed_at),
                recurrence=task.recurrence,
                recurrence_parent=task,
            )

        logger.info(f"Spawned Task {successor.id} as next occurrence of Task {task_id}")
        return successor.id

    except Exception as exc:
        logger.exception(f"Recurrence expansion failed for Task {task_id}: {exc}")
        # Re-raise for Celery retry policy
        raise
