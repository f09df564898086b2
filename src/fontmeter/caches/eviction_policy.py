"""How a FontMetrics instance handles font sizes it was not built with.

:author: Shay Hill
:created: 2026-10-17
"""

from __future__ import annotations

import enum


class EvictionPolicy(enum.Enum):
    """On-demand calculation and caching policy.

    Value is (calculates on demand, caches results, bounded)
    """

    DISABLED = "disabled", False, False, False  # exact sizes only
    UNCACHED = "uncached", True, False, False  # recalculate every miss
    UNLIMITED = "unlimited", True, True, False  # cache forever
    FIFO = "fifo", True, True, True  # evict oldest
    POPULARITY = "popularity", True, True, True  # evict least read

    @property
    def calculates(self) -> bool:
        """Return True if sizes missing from the exact table are scaled."""
        return self.value[1]

    @property
    def caches(self) -> bool:
        """Return True if scaled sizes are kept for later lookups."""
        return self.value[2]

    @property
    def bounded(self) -> bool:
        """Return True if the policy requires a cache size limit."""
        return self.value[3]
