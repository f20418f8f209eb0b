# curtailment/__init__.py
"""Package **curtailment**: temporal curtailment levels of power-generation units.

The module gathers the key entities for external users:

--- from curtailment import CurtailmentStore, CurtailmentCategory, providers ---

Exported objects are listed in ``__all__``, which is the *public API* of the
package.
"""

from __future__ import annotations

from . import providers
from .core.store import CurtailmentStore
from .core.timeline import CustomLevelTimeline
from .domain.categories import CurtailmentCategory
from .domain.errors import (
    ConfigurationError,
    CurtailmentError,
    InvalidLevelError,
    InvalidTimestampError,
    UnknownCategoryError,
)
from .domain.standard_levels import StandardLevelTable
from .facade.tenants import TenantStores
from .visualization.plots import plot_level_history

__all__ = [
    "CurtailmentStore",      # per-tenant store: standard + custom levels
    "CustomLevelTimeline",   # sorted history of one category
    "CurtailmentCategory",   # causes of curtailment
    "StandardLevelTable",    # baseline level per category
    "TenantStores",          # one store per tenant
    "providers",             # vendor tables, providers.get("vestas")
    "plot_level_history",    # matplotlib step plot
    "CurtailmentError",
    "InvalidLevelError",
    "InvalidTimestampError",
    "ConfigurationError",
    "UnknownCategoryError",
]
