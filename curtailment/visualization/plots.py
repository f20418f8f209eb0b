# curtailment/visualization/plots.py
"""Thin matplotlib wrapper for the effective level of one category.

The effective level is drawn as a step function over ``[start, end]``:
one step per custom entry inside the window plus the level in force at
``start``. The standard level is added as a dashed reference line.
"""

from __future__ import annotations

from typing import Any, Optional

import matplotlib.pyplot as plt

from ..core.clock import normalize_timestamp
from ..core.store import CurtailmentStore
from ..domain.categories import CurtailmentCategory


def plot_level_history(
    store: CurtailmentStore,
    category: CurtailmentCategory | str,
    start: Any,
    end: Any,
    ax: Optional[plt.Axes] = None,
) -> plt.Axes:
    """Step plot of *category*'s effective level between *start* and *end*."""
    category = CurtailmentCategory.parse(category)
    start, end = normalize_timestamp(start), normalize_timestamp(end)
    if ax is None:
        _, ax = plt.subplots()

    inside = [ts for ts, _ in store.timeline(category) if start < ts < end]
    x = [start, *inside, end]
    y = list(store.level_profile(category, x))

    ax.step(x, y, where="post", marker="o", label="effective")
    ax.axhline(
        store.get_standard_level(category), ls="--", color="grey", label="standard"
    )
    ax.set_ylim(-0.05, 1.05)
    ax.set_title(f"Curtailment level: {category}")
    ax.set_xlabel("Time")
    ax.set_ylabel("Curtailed fraction")
    ax.grid(True)
    ax.legend()
    return ax
