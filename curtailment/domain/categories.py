# curtailment/domain/categories.py
"""Kinds of turbine curtailment.

Curtailment occurs when a power plant is not allowed to output energy, which
can mean a total shutdown or a reduced power output. The set of causes is
closed; each one gets its own standard level and its own timeline.
"""

from __future__ import annotations

from enum import Enum

from .errors import UnknownCategoryError


class CurtailmentCategory(Enum):
    """Closed enumeration of curtailment causes."""

    DEFAULT = "Default"
    NOISE = "Noise"
    BATS = "Bats"
    SHADOW = "Shadow"
    BOAT_ACTION = "BoatAction"
    TECHNICAL = "Technical"
    GRID = "Grid"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: "CurtailmentCategory | str") -> "CurtailmentCategory":
        """Resolve a member from itself or from its name.

        ``"BoatAction"``, ``"boat_action"`` and ``"BOAT_ACTION"`` all map to
        :attr:`BOAT_ACTION`.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.value.lower(), member.name.lower()):
                    return member
        raise UnknownCategoryError(f"Unknown curtailment category {value!r}")
