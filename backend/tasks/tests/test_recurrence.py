# tasks/tests/test_recurrence.py
"""
Recurrence Tests
================

- next_occurrence_deadline: interval math, catching up past the completion time
- spawn_next_occurrence: the Celery worker, run synchronously
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from django.contrib.auth import get_user_model
from django.test import TestCase

from tasks.celery_tasks import spawn_next_occurrence
from tasks.models import Task
from tasks.services import next_occurrence_deadline

User = get_user_model()

FIXED_NOW = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


class TestNextOccurrenceDeadline(TestCase):

    def test_no_deadline_stays_none(self) -> None:
        self.assertIsNone(next_occurrence_deadline(None, "daily", FIXED_NOW))

    def test_daily_adds_one_day(self) -> None:
        deadline = FIXED_NOW + timedelta(hours=3)

        result = next_occurrence_deadline(deadline, "daily", FIXED_NOW)

        self.assertEqual(result, deadline + timedelta(days=1))

    def test_weekly_adds_one_week(self) -> None:
        deadline = FIXED_NOW + timedelta(hours=3)

        result = next_occurrence_deadline(deadline, "weekly", FIXED_NOW)

        self.assertEqual(result, deadline + timedelta(weeks=1))

    def test_overdue_deadline_rolls_past_completion(self) -> None:
        # Five days overdue: the next daily occurrence lands tomorrow morning
        deadline = FIXED_NOW - timedelta(days=5, hours=3)

        result = next_occurrence_deadline(deadline, "daily", FIXED_NOW)

        self.assertEqual(result, FIXED_NOW + timedelta(hours=21))
        self.assertGreater(result, FIXED_NOW)

    def test_unknown_recurrence_rejected(self) -> None:
        with self.assertRaises(ValueError):
            next_occurrence_deadline(FIXED_NOW, "hourly", FIXED_NOW)


class TestSpawnNextOccurrence(TestCase):
    """The worker is called directly; Celery's broker is not involved."""

    def setUp(self) -> None:
        self.user = User.objects.create_user(email="recur@example.com", password="testpass123")

    def _completed_task(self, **overrides) -> Task:
        fields = {
            "user": self.user,
            "title": "Water plants",
            "description": "Balcony and kitchen",
            "energy_required": "low",
            "estimated_time_minutes": 10,
            "deadline": FIXED_NOW + timedelta(hours=2),
            "recurrence": "daily",
            "completed_at": FIXED_NOW,
        }
        fields.update(overrides)
        return Task.objects.create(**fields)

    def test_spawns_copy_with_shifted_deadline(self) -> None:
        task = self._completed_task()

        new_id = spawn_next_occurrence.apply(args=[task.id]).get()

        successor = Task.objects.get(id=new_id)
        self.assertEqual(successor.title, "Water plants")
        self.assertEqual(successor.description, "Balcony and kitchen")
        self.assertEqual(successor.energy_required, "low")
        self.assertEqual(successor.estimated_time_minutes, 10)
        self.assertEqual(successor.recurrence, "daily")
        self.assertEqual(successor.deadline, task.deadline + timedelta(days=1))
        self.assertEqual(successor.recurrence_parent, task)
        self.assertIsNone(successor.completed_at)

    def test_running_twice_spawns_once(self) -> None:
        task = self._completed_task()

        first = spawn_next_occurrence.apply(args=[task.id]).get()
        second = spawn_next_occurrence.apply(args=[task.id]).get()

        self.assertIsNotNone(first)
        self.assertIsNone(second)
        self.assertEqual(Task.objects.filter(recurrence_parent=task).count(), 1)

    def test_missing_task_returns_none(self) -> None:
        self.assertIsNone(spawn_next_occurrence.apply(args=[999999]).get())

    def test_non_recurring_task_skipped(self) -> None:
        task = self._completed_task(recurrence="")

        self.assertIsNone(spawn_next_occurrence.apply(args=[task.id]).get())
        self.assertEqual(Task.objects.count(), 1)

    def test_reopened_task_skipped(self) -> None:
        task = self._completed_task(completed_at=None)

        self.assertIsNone(spawn_next_occurrence.apply(args=[task.id]).get())
        self.assertEqual(Task.objects.count(), 1)
