"""On-demand caches and the policies that select them.

:author: Shay Hill
:created: 2026-10-17
"""

from __future__ import annotations

from fontmeter.caches.eviction_policy import EvictionPolicy
from fontmeter.caches.type_fifo_cache import FifoCache
from fontmeter.caches.type_on_demand_cache import OnDemandCache, validate_limit
from fontmeter.caches.type_popularity_cache import PopularityCache
from fontmeter.caches.type_unlimited_cache import UnlimitedCache


def new_on_demand_cache(
    policy: EvictionPolicy, limit: int | None = None
) -> OnDemandCache | None:
    """Create an empty cache for a policy.

    :param policy: the on-demand policy
    :param limit: maximum number of cached font sizes. Required for bounded
        policies, ignored otherwise.
    :return: a new cache or None if the policy does not cache
    :raises ValueError: if a bounded policy is given no limit or a non-positive one
    """
    if not policy.caches:
        return None
    if not policy.bounded:
        return UnlimitedCache()
    if limit is None:
        msg = f"{policy.name} cache requires a limit"
        raise ValueError(msg)
    if policy is EvictionPolicy.FIFO:
        return FifoCache(limit)
    return PopularityCache(limit)


__all__ = [
    "EvictionPolicy",
    "FifoCache",
    "OnDemandCache",
    "PopularityCache",
    "UnlimitedCache",
    "new_on_demand_cache",
    "validate_limit",
]
