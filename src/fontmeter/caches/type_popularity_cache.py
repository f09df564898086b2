"""A bounded cache that evicts the least-read font size.

:author: Shay Hill
:created: 2026-10-17
"""

from __future__ import annotations

from fontmeter.caches.eviction_policy import EvictionPolicy
from fontmeter.caches.type_on_demand_cache import OnDemandCache, validate_limit


class PopularityCache(OnDemandCache):
    """Evict the entry with the fewest cache hits.

    Reads are counted on hits only. A new entry starts at zero, but eviction
    happens before the new entry is added, so a new entry is never evicted to make
    room for itself. When two entries have the same number of reads, the older
    entry goes first.
    """

    policy = EvictionPolicy.POPULARITY

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
        font_size, _ = min(
            self._entries.items(), key=lambda kv: (kv[1].reads, kv[1].sequence)
        )
        return font_size
