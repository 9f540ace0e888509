# tasks/engine/explanation.py
"""
Explanation text for recommended tasks.

The client shows these strings verbatim, so thresholds and wording are part
of the API contract.
"""

import datetime
import math

from .contracts import RecommendationContext, ScoreBreakdown, TaskSnapshot
from .scoring import hours_until

OPENER = "Recommended because"

# Sub-score thresholds that decide which clauses appear
ENERGY_MATCH_THRESHOLD = 25
ENERGY_DOABLE_THRESHOLD = 15
DEADLINE_URGENT_THRESHOLD = 35
DEADLINE_NOTABLE_THRESHOLD = 25


def format_duration(minutes: int) -> str:
    """45 -> '45 min', 60 -> '1h', 95 -> '1h 35m'."""
    if minutes < 60:
        return f"{minutes} min"
    hours, mins = divmod(minutes, 60)
    return f"{hours}h {mins}m" if mins > 0 else f"{hours}h"


def format_relative_deadline(deadline: datetime.datetime, now: datetime.datetime) -> str:
    hours = hours_until(deadline, now)
    if hours < 0:
        return "overdue"
    if hours < 24:
        return "due today"
    if hours < 48:
        return "due tomorrow"
    return f"due in {math.ceil(hours / 24)} days"


def generate_explanation(
    task: TaskSnapshot,
    breakdown: ScoreBreakdown,
    context: RecommendationContext,
    now: datetime.datetime,
) -> str:
    parts = [OPENER]

    if breakdown.energy_match_score >= ENERGY_MATCH_THRESHOLD:
        parts.append(f"it matches your {context.current_energy.value} energy")
    elif breakdown.energy_match_score >= ENERGY_DOABLE_THRESHOLD:
        parts.append("it's doable with your current energy")

    parts.append(f"takes {format_duration(task.estimated_time_minutes)}")

    if task.deadline is not None:
        relative = format_relative_deadline(task.deadline, now)
        if breakdown.deadline_score >= DEADLINE_URGENT_THRESHOLD:
            parts.append(f"and is {relative}")
        elif breakdown.deadline_score >= DEADLINE_NOTABLE_THRESHOLD:
            parts.append(f"with a deadline {relative}")

    return ", ".join(parts) + "."
