# curtailment/core/timeline.py
"""History of custom curtailment levels for a single category.

The timeline is an ascending sequence of *(effective-from, level)* entries
with **unique** timestamps. An entry is active from its own timestamp
(inclusive) up to the next entry's timestamp (exclusive); the last entry
stays active forever.

Concurrency model:

* writers are serialised by a per-timeline ``threading.Lock``;
* each write builds new immutable ``(timestamps, levels)`` tuples and
  publishes them with one attribute assignment, so readers take no lock and
  always see either the state before or after a write, never a half-done
  insert.
"""

from __future__ import annotations

import threading
from bisect import bisect_left, bisect_right
from typing import Any, Iterable, List, Optional, Sequence, Tuple

import numpy as np

Entry = Tuple[Any, float]


class CustomLevelTimeline:
    """Sorted, unique-by-timestamp custom level history."""

    def __init__(self, entries: Iterable[Entry] = ()) -> None:
        self._lock = threading.Lock()
        # (timestamps, levels), replaced as a whole on every write
        self._state: Tuple[tuple, tuple] = ((), ())
        for timestamp, level in entries:
            self.insert(timestamp, level)

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def insert(self, timestamp: Any, level: float) -> bool:
        """Record *level* as effective from *timestamp*.

        Returns ``True`` if an entry already existed at exactly *timestamp*
        and was overwritten, ``False`` if a new entry was added.
        """
        with self._lock:
            times, levels = self._state
            i = bisect_left(times, timestamp)
            if i < len(times) and times[i] == timestamp:
                self._state = (times, levels[:i] + (level,) + levels[i + 1:])
                return True
            self._state = (
                times[:i] + (timestamp,) + times[i:],
                levels[:i] + (level,) + levels[i:],
            )
            return False

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def level_at(self, timestamp: Any) -> Optional[float]:
        """Level of the latest entry at or before *timestamp*, else ``None``."""
        times, levels = self._state
        i = bisect_right(times, timestamp)
        return levels[i - 1] if i else None

    def levels_at(self, timestamps: Sequence[Any], fallback: float) -> np.ndarray:
        """Vectorised :meth:`level_at`; instants before the first entry get *fallback*."""
        times, levels = self._state
        query = np.array(list(timestamps), dtype=object)
        out = np.full(len(query), fallback, dtype=float)
        if not times or not len(query):
            return out

        idx = np.searchsorted(np.array(times, dtype=object), query, side="right")
        hit = idx > 0
        out[hit] = np.asarray(levels, dtype=float)[idx[hit] - 1]
        return out

    def entries(self) -> List[Entry]:
        """Consistent copy of all entries, oldest first."""
        times, levels = self._state
        return list(zip(times, levels))

    def __len__(self) -> int:
        return len(self._state[0])
