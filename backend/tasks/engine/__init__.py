# tasks/engine/__init__.py
"""
Recommendation Engine Package
=============================

This package contains the deterministic, explainable logic that picks
"the one task to do now" from a user's task list.

Modules:
--------
- energy: Energy levels and their ordinal table
- contracts: Value objects passed into and out of the engine
- scoring: Threshold ladders for the deadline, energy and time sub-scores
- explanation: Human-readable justification for a scored task
- recommender: Filter, rank and select pipeline

Architecture:
-------------
The engine is a pure function of (tasks, context). It never touches the
database; views build TaskSnapshot objects from ORM rows and serialize the
returned RecommendationResult:

    {
        "recommended": ScoredTask | None,
        "alternatives": (ScoredTask, ...),   # at most 2
        "message": str
    }

Scoring:
--------
- Deadline proximity: 0-40
- Energy match: 0-30
- Time efficiency: 0-30

Usage:
------
    from tasks.engine import RecommendationContext, TaskSnapshot, get_recommendations

    result = get_recommendations(
        [TaskSnapshot.from_model(task) for task in queryset],
        RecommendationContext(available_time_minutes=45, current_energy="medium"),
    )
"""

from .contracts import (
    InvalidContextError,
    RecommendationContext,
    RecommendationResult,
    ScoreBreakdown,
    ScoredTask,
    TaskSnapshot,
)
from .energy import ENERGY_ORDINALS, EnergyLevel
from .explanation import format_duration, format_relative_deadline, generate_explanation
from .recommender import (
    EMPTY_STATE_MESSAGE,
    LEAD_IN_MESSAGE,
    MAX_ALTERNATIVES,
    RecommendationEngine,
    get_recommendations,
)
from .scoring import (
    score_deadline,
    score_energy_match,
    score_task_breakdown,
    score_time_efficiency,
)

__all__ = [
    # Core classes
    "RecommendationEngine",
    "EnergyLevel",
    "TaskSnapshot",
    "RecommendationContext",
    "RecommendationResult",
    "ScoredTask",
    "ScoreBreakdown",
    "InvalidContextError",
    # Functions
    "get_recommendations",
    "score_deadline",
    "score_energy_match",
    "score_time_efficiency",
    "score_task_breakdown",
    "generate_explanation",
    "format_duration",
    "format_relative_deadline",
    # Constants
    "ENERGY_ORDINALS",
    "EMPTY_STATE_MESSAGE",
    "LEAD_IN_MESSAGE",
    "MAX_ALTERNATIVES",
]
