# curtailment/domain/standard_levels.py
"""Baseline (standard) curtailment levels per category.

The table is built once, validated once and then only read:

* every :class:`CurtailmentCategory` must have an entry; a missing one is a
  configuration defect and fails construction instead of resolving to zero
  on first query;
* every level must be a fraction in ``[0.0, 1.0]``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Type

from .categories import CurtailmentCategory
from .errors import ConfigurationError, CurtailmentError, UnknownCategoryError


def coerce_level(value: object, error: Type[CurtailmentError]) -> float:
    """Return *value* as a float in ``[0.0, 1.0]`` or raise *error*."""
    if isinstance(value, bool):
        raise error(f"Curtailment level must be a number, got {value!r}")
    try:
        level = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise error(f"Curtailment level must be a number, got {value!r}") from exc
    # NaN fails both comparisons
    if math.isnan(level) or not 0.0 <= level <= 1.0:
        raise error(f"Curtailment level must be within [0.0, 1.0], got {value!r}")
    return level


@dataclass(frozen=True, slots=True)
class StandardLevelTable:
    """Immutable category → standard level mapping."""

    levels: Mapping[CurtailmentCategory, float]

    def __post_init__(self) -> None:
        checked = {}
        for category, value in self.levels.items():
            if not isinstance(category, CurtailmentCategory):
                raise ConfigurationError(
                    f"Standard table key {category!r} is not a CurtailmentCategory"
                )
            checked[category] = coerce_level(value, ConfigurationError)

        missing = [c.value for c in CurtailmentCategory if c not in checked]
        if missing:
            raise ConfigurationError(
                f"Standard level table is missing categories: {', '.join(missing)}"
            )
        object.__setattr__(self, "levels", MappingProxyType(checked))

    @classmethod
    def from_mapping(cls, mapping: Mapping[object, object]) -> "StandardLevelTable":
        """Build a table from a mapping keyed by members or category names."""
        levels = {CurtailmentCategory.parse(k): v for k, v in mapping.items()}  # type: ignore[arg-type]
        return cls(levels)

    def level_for(self, category: CurtailmentCategory) -> float:
        """Standard level of *category*; never defaults to zero."""
        try:
            return self.levels[category]
        except KeyError:
            raise UnknownCategoryError(
                f"No standard level configured for {category!r}"
            ) from None
