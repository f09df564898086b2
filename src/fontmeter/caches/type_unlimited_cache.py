"""A cache that keeps every font size it is given.

:author: Shay Hill
:created: 2026-10-17

Memory grows with the number of distinct font sizes looked up. Use this only when
that number is known to be small.
"""

from __future__ import annotations

from typing import NoReturn

from fontmeter.caches.eviction_policy import EvictionPolicy
from fontmeter.caches.type_on_demand_cache import OnDemandCache


class UnlimitedCache(OnDemandCache):
    """Never evict."""

    policy = EvictionPolicy.UNLIMITED

    def _select_victim(self) -> NoReturn:
        msg = "An unlimited cache never evicts."
        raise RuntimeError(msg)
