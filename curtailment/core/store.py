# curtailment/core/store.py
"""Temporal curtailment store of a single tenant.

The store owns:

* one read-only :class:`StandardLevelTable` (baseline level per category);
* one :class:`CustomLevelTimeline` per category (operator overrides).

The effective level of a category is a step function: it starts at the
standard level and switches to each custom level at that level's
effective-from timestamp. A custom level never expires on its own; going
back to the standard value takes a new entry with that value.

Stores are isolated: nothing is shared between two instances except the
immutable standard table.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple

import numpy as np
import pandas as pd

from ..domain.categories import CurtailmentCategory
from ..domain.errors import InvalidLevelError, InvalidTimestampError, UnknownCategoryError
from ..domain.standard_levels import StandardLevelTable, coerce_level
from .clock import Clock, normalize_timestamp, utc_now
from .timeline import CustomLevelTimeline, Entry

logger = logging.getLogger(__name__)

HISTORY_COLUMNS = ["category", "effective_from", "level"]


class CurtailmentStore:
    """Standard levels plus per-category custom level timelines."""

    # ------------------------------------------------------------------
    # Constructor
    # ------------------------------------------------------------------

    def __init__(self, table: StandardLevelTable, clock: Clock = utc_now) -> None:
        self.table = table
        self.clock = clock
        self._timelines: Dict[CurtailmentCategory, CustomLevelTimeline] = {
            category: CustomLevelTimeline() for category in CurtailmentCategory
        }

    # ------------------------------------------------------------------
    # Core operations
    # ------------------------------------------------------------------

    def get_standard_level(self, category: CurtailmentCategory | str) -> float:
        """Baseline level of *category*."""
        return self.table.level_for(CurtailmentCategory.parse(category))

    def set_custom_level(
        self,
        category: CurtailmentCategory | str,
        level: float,
        timestamp: Any = None,
    ) -> bool:
        """Make *level* effective for *category* from *timestamp* on.

        *timestamp* defaults to the store clock at the time of the call; pass
        an explicit one to backfill a correction. A write at a timestamp that
        is already recorded replaces that entry. Returns ``True`` in that
        case.
        """
        category = CurtailmentCategory.parse(category)
        value = coerce_level(level, InvalidLevelError)
        ts = _checked(normalize_timestamp(self.clock() if timestamp is None else timestamp))

        replaced = self._timeline(category).insert(ts, value)
        if replaced:
            logger.warning(
                "Overwrote custom %s level at %s with %.3f (duplicate timestamp)",
                category,
                ts,
                value,
            )
        else:
            logger.debug("Custom %s level %.3f effective from %s", category, value, ts)
        return replaced

    def get_level(self, category: CurtailmentCategory | str, timestamp: Any) -> float:
        """Level in force for *category* at *timestamp*.

        The latest custom entry at or before *timestamp* wins; without one
        the standard level applies.
        """
        category = CurtailmentCategory.parse(category)
        if timestamp is None:
            raise TypeError("timestamp is required; use get_current_level() for now")
        level = self._timeline(category).level_at(_checked(normalize_timestamp(timestamp)))
        return self.table.level_for(category) if level is None else level

    def get_current_level(self, category: CurtailmentCategory | str) -> float:
        """Level in force right now."""
        return self.get_level(category, self.clock())

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def timeline(self, category: CurtailmentCategory | str) -> List[Entry]:
        """Custom entries of *category*, oldest first."""
        return self._timeline(CurtailmentCategory.parse(category)).entries()

    def level_profile(
        self,
        category: CurtailmentCategory | str,
        timestamps: Iterable[Any],
    ) -> np.ndarray:
        """Effective level of *category* at each of *timestamps*."""
        category = CurtailmentCategory.parse(category)
        query = [_checked(normalize_timestamp(ts)) for ts in timestamps]
        return self._timeline(category).levels_at(query, self.table.level_for(category))

    def history(self, category: CurtailmentCategory | str | None = None) -> pd.DataFrame:
        """Custom entries as a table (one category or all of them)."""
        categories = (
            list(CurtailmentCategory)
            if category is None
            else [CurtailmentCategory.parse(category)]
        )
        records = [
            {"category": str(c), "effective_from": ts, "level": level}
            for c in categories
            for ts, level in self._timeline(c).entries()
        ]
        return pd.DataFrame.from_records(records, columns=HISTORY_COLUMNS)

    # ------------------------------------------------------------------
    # Hand-off to a persistence collaborator
    # ------------------------------------------------------------------

    def snapshot(self) -> Dict[str, List[Entry]]:
        """Timelines keyed by category name; empty timelines are omitted."""
        return {
            str(c): t.entries() for c, t in self._timelines.items() if len(t)
        }

    @classmethod
    def restore(
        cls,
        table: StandardLevelTable,
        snapshot: Mapping[Any, Sequence[Tuple[Any, float]]],
        clock: Clock = utc_now,
    ) -> "CurtailmentStore":
        """Rebuild a store from :meth:`snapshot` output.

        Every entry is validated like a regular write; the first bad one
        aborts the restore.
        """
        store = cls(table, clock=clock)
        count = 0
        for category, entries in snapshot.items():
            for ts, level in entries:
                store.set_custom_level(category, level, ts)
                count += 1
        logger.info("Restored %d custom curtailment entries", count)
        return store

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _timeline(self, category: CurtailmentCategory) -> CustomLevelTimeline:
        try:
            return self._timelines[category]
        except KeyError:
            raise UnknownCategoryError(f"No timeline for {category!r}") from None


def _checked(ts: Any) -> Any:
    # NaN cannot be ordered and would corrupt the bisect order
    if ts != ts:
        raise InvalidTimestampError(f"Timestamp {ts!r} cannot be ordered")
    return ts
