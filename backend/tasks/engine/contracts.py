# tasks/engine/contracts.py
"""
Engine Contracts
================

Plain value objects passed into and out of the recommendation engine.

Nothing here imports Django: the engine works on snapshots, so it can be
driven from views, shell sessions or tests without a database.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from .energy import EnergyLevel


class InvalidContextError(ValueError):
    """Raised when a recommendation context cannot be scored against."""


def _parse_energy(value: Any, field_name: str) -> EnergyLevel:
    if isinstance(value, EnergyLevel):
        return value
    try:
        return EnergyLevel(str(value).strip().lower())
    except ValueError:
        raise InvalidContextError(
            f"{field_name} must be one of low, medium, high (got {value!r})"
        ) from None


@dataclass(frozen=True)
class TaskSnapshot:
    """
    Read-only view of a task at the moment a recommendation is requested.

    `source` keeps a reference to whatever the snapshot was built from
    (usually the ORM row) so callers can serialize the original object.
    """

    id: Any
    title: str
    energy_required: EnergyLevel
    estimated_time_minutes: int
    deadline: Optional[datetime.datetime] = None
    completed_at: Optional[datetime.datetime] = None
    description: str = ""
    source: Any = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        if not isinstance(self.energy_required, EnergyLevel):
            object.__setattr__(
                self,
                "energy_required",
                _parse_energy(self.energy_required, "energy_required"),
            )

    @classmethod
    def from_model(cls, obj: Any) -> "TaskSnapshot":
        return cls(
            id=obj.pk if hasattr(obj, "pk") else obj.id,
            title=obj.title,
            energy_required=obj.energy_required,
            estimated_time_minutes=int(obj.estimated_time_minutes),
            deadline=obj.deadline,
            completed_at=obj.completed_at,
            description=getattr(obj, "description", "") or "",
            source=obj,
        )


@dataclass(frozen=True)
class RecommendationContext:
    """What the user can handle right now."""

    available_time_minutes: int
    current_energy: EnergyLevel

    def __post_init__(self):
        minutes = self.available_time_minutes
        if isinstance(minutes, bool) or not isinstance(minutes, int) or minutes <= 0:
            raise InvalidContextError(
                f"available_time_minutes must be a positive integer (got {minutes!r})"
            )
        object.__setattr__(
            self,
            "current_energy",
            _parse_energy(self.current_energy, "current_energy"),
        )


@dataclass(frozen=True)
class ScoreBreakdown:
    deadline_score: int
    energy_match_score: int
    time_efficiency_score: int

    @property
    def total(self) -> int:
        return self.deadline_score + self.energy_match_score + self.time_efficiency_score


@dataclass(frozen=True)
class ScoredTask:
    task: TaskSnapshot
    score: int
    breakdown: ScoreBreakdown
    explanation: str
    # Ladder labels in deadline, energy, time order
    factors: Tuple[str, ...] = ()


@dataclass(frozen=True)
class RecommendationResult:
    recommended: Optional[ScoredTask]
    alternatives: Tuple[ScoredTask, ...]
    message: str

    @property
    def has_recommendation(self) -> bool:
        return self.recommended is not None
