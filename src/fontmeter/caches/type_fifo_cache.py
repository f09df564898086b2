"""A bounded cache that evicts the earliest-inserted font size.

:author: Shay Hill
:created: 2026-10-17
"""

from __future__ import annotations

from fontmeter.caches.eviction_policy import EvictionPolicy
from fontmeter.caches.type_on_demand_cache import OnDemandCache, validate_limit


class FifoCache(OnDemandCache):
    """First in, first out. Reads do not affect eviction order."""

    policy = EvictionPolicy.FIFO

    def __init__(self, limit: int) -> None:
        """Set the size limit.

        :param limit: maximum number of cached font sizes
        :raises ValueError: if limit is not positive
        """
        self._limit = validate_limit(limit)
        super().__init__()

    @property
    def limit(self) -> int:
        """Return the maximum number of cached font sizes."""
        return self._limit

    def _select_victim(self) -> int:
        # entries are never re-inserted, so dict order is insertion order
        return next(iter(self._entries))
