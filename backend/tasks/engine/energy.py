# tasks/engine/energy.py

from enum import Enum
from types import MappingProxyType


class EnergyLevel(str, Enum):
    """How much energy a task needs, or how much the user has right now."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def ordinal(self) -> int:
        return ENERGY_ORDINALS[self]

    @classmethod
    def choices(cls):
        return [(level.value, level.name.title()) for level in cls]


# Read-only ordinal table: low < medium < high
ENERGY_ORDINALS = MappingProxyType({
    EnergyLevel.LOW: 1,
    EnergyLevel.MEDIUM: 2,
    EnergyLevel.HIGH: 3,
})
