# curtailment/facade/tenants.py
"""One curtailment store per tenant.

Class **TenantStores** is the entry point for an application serving several
customers: it hands out the tenant's :class:`CurtailmentStore`, creating it
on first access. All stores share the immutable standard table and the
clock, never a timeline, so a write for one tenant cannot change what
another tenant reads.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, Hashable, List

from ..core.clock import Clock, utc_now
from ..core.store import CurtailmentStore
from ..domain.standard_levels import StandardLevelTable

logger = logging.getLogger(__name__)


class TenantStores:
    """Registry of per-tenant stores."""

    def __init__(self, table: StandardLevelTable, clock: Clock = utc_now) -> None:
        self.table = table
        self.clock = clock
        self._stores: Dict[Hashable, CurtailmentStore] = {}
        self._lock = threading.Lock()

    def store_for(self, tenant_id: Hashable) -> CurtailmentStore:
        """Store of *tenant_id*, created on first access."""
        with self._lock:
            store = self._stores.get(tenant_id)
            if store is None:
                store = CurtailmentStore(self.table, clock=self.clock)
                self._stores[tenant_id] = store
                logger.info("Created curtailment store for tenant %r", tenant_id)
            return store

    def drop(self, tenant_id: Hashable) -> bool:
        """Discard the tenant's store with all of its timelines."""
        with self._lock:
            removed = self._stores.pop(tenant_id, None) is not None
        if removed:
            logger.info("Dropped curtailment store for tenant %r", tenant_id)
        return removed

    def tenants(self) -> List[Hashable]:
        with self._lock:
            return list(self._stores)

    def __contains__(self, tenant_id: object) -> bool:
        with self._lock:
            return tenant_id in self._stores
