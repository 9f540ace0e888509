# tasks/tests/test_explanation.py
"""
Explanation text tests. The client renders these strings verbatim.
"""

from __future__ import annotations

import datetime

from django.test import TestCase

from tasks.engine import (
    EnergyLevel,
    RecommendationContext,
    ScoreBreakdown,
    TaskSnapshot,
    format_duration,
    format_relative_deadline,
    generate_explanation,
    get_recommendations,
)

FIXED_NOW = datetime.datetime(2024, 1, 15, 12, 0, 0, tzinfo=datetime.timezone.utc)


def in_hours(hours: float) -> datetime.datetime:
    return FIXED_NOW + datetime.timedelta(hours=hours)


class TestFormatDuration(TestCase):

    def test_under_an_hour(self) -> None:
        self.assertEqual(format_duration(1), "1 min")
        self.assertEqual(format_duration(45), "45 min")
        self.assertEqual(format_duration(59), "59 min")

    def test_whole_hours(self) -> None:
        self.assertEqual(format_duration(60), "1h")
        self.assertEqual(format_duration(480), "8h")

    def test_hours_and_minutes(self) -> None:
        self.assertEqual(format_duration(95), "1h 35m")
        self.assertEqual(format_duration(121), "2h 1m")


class TestFormatRelativeDeadline(TestCase):

    def test_past_is_overdue(self) -> None:
        self.assertEqual(format_relative_deadline(in_hours(-0.5), FIXED_NOW), "overdue")

    def test_today_and_tomorrow(self) -> None:
        self.assertEqual(format_relative_deadline(in_hours(0), FIXED_NOW), "due today")
        self.assertEqual(format_relative_deadline(in_hours(23.9), FIXED_NOW), "due today")
        self.assertEqual(format_relative_deadline(in_hours(24), FIXED_NOW), "due tomorrow")
        self.assertEqual(format_relative_deadline(in_hours(47.9), FIXED_NOW), "due tomorrow")

    def test_days_round_up(self) -> None:
        self.assertEqual(format_relative_deadline(in_hours(48), FIXED_NOW), "due in 2 days")
        self.assertEqual(format_relative_deadline(in_hours(50), FIXED_NOW), "due in 3 days")
        self.assertEqual(format_relative_deadline(in_hours(240), FIXED_NOW), "due in 10 days")


class TestGenerateExplanation(TestCase):

    def _task(self, minutes: int = 30, deadline=None, energy: str = "medium") -> TaskSnapshot:
        return TaskSnapshot(
            id=1,
            title="Write report",
            energy_required=EnergyLevel(energy),
            estimated_time_minutes=minutes,
            deadline=deadline,
        )

    def _explain(self, task: TaskSnapshot, available: int, energy: str) -> str:
        ctx = RecommendationContext(available_time_minutes=available, current_energy=energy)
        return get_recommendations([task], ctx, now=FIXED_NOW).recommended.explanation

    def test_exact_energy_match_and_urgent_deadline(self) -> None:
        text = self._explain(self._task(deadline=in_hours(10)), 60, "medium")

        self.assertEqual(
            text,
            "Recommended because, it matches your medium energy, takes 30 min, and is due today.",
        )

    def test_lower_energy_with_notable_deadline(self) -> None:
        text = self._explain(self._task(minutes=90, deadline=in_hours(36), energy="low"), 120, "high")

        self.assertEqual(
            text,
            "Recommended because, it's doable with your current energy, takes 1h 30m, "
            "with a deadline due tomorrow.",
        )

    def test_distant_deadline_clause_omitted(self) -> None:
        text = self._explain(self._task(deadline=in_hours(100)), 60, "medium")

        self.assertEqual(text, "Recommended because, it matches your medium energy, takes 30 min.")

    def test_no_deadline_clause_without_deadline(self) -> None:
        text = self._explain(self._task(minutes=120), 240, "medium")

        self.assertEqual(text, "Recommended because, it matches your medium energy, takes 2h.")

    def test_overdue_task(self) -> None:
        text = self._explain(self._task(deadline=in_hours(-3)), 60, "medium")

        self.assertTrue(text.endswith("and is overdue."))

    def test_zero_energy_score_omits_energy_clause(self) -> None:
        ctx = RecommendationContext(available_time_minutes=60, current_energy="low")
        breakdown = ScoreBreakdown(deadline_score=15, energy_match_score=0, time_efficiency_score=30)

        text = generate_explanation(self._task(energy="high"), breakdown, ctx, FIXED_NOW)

        self.assertEqual(text, "Recommended because, takes 30 min.")
