"""Shared machinery for caches of on-demand scaled widths.

:author: Shay Hill
:created: 2026-10-17

Each cache entry holds every baseline character scaled to one font size. The font
size is what is cached and evicted, never individual characters.

A cache is shared by every thread calling FontMetrics.get_width. One lock guards
the entries and all eviction bookkeeping. Scaling happens outside the lock, so two
threads missing on the same size may both calculate it. The second `put` finds the
first thread's entry and keeps it.
"""

from __future__ import annotations

import abc
import dataclasses
import itertools as it
import logging
import threading
from numbers import Integral
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from fontmeter.baseline import WidthsMap
    from fontmeter.caches.eviction_policy import EvictionPolicy

_log = logging.getLogger(__name__)


@dataclasses.dataclass
class CacheEntry:
    """Scaled widths for one font size plus eviction metadata."""

    widths: WidthsMap
    sequence: int
    reads: int = 0


def validate_limit(limit: int) -> int:
    """Raise a ValueError if a cache size limit is not positive.

    :param limit: maximum number of font sizes a bounded cache may hold
    :return: limit, unaltered
    :raises ValueError: if limit is not an integer or is zero or negative
    """
    if isinstance(limit, bool) or not isinstance(limit, Integral):
        msg = f"cache limit must be an integer, not {limit!r}"
        raise ValueError(msg)
    if limit <= 0:
        msg = "cache limit must be positive"
        raise ValueError(msg)
    return limit


class OnDemandCache(abc.ABC):
    """A thread-safe map of font size -> scaled widths."""

    policy: EvictionPolicy

    def __init__(self) -> None:
        """Start with no entries."""
        self._lock = threading.Lock()
        self._entries: dict[int, CacheEntry] = {}
        self._sequence = it.count()

    @property
    def limit(self) -> int | None:
        """Return the maximum number of cached font sizes, None if unbounded."""
        return None

    def get(self, font_size: int) -> WidthsMap | None:
        """Return the cached widths for font_size and count the read.

        :param font_size: a font size that is not in the exact-size table
        :return: character -> width at font_size or None if font_size is not cached
        """
        with self._lock:
            entry = self._entries.get(font_size)
            if entry is None:
                return None
            entry.reads += 1
            return entry.widths

    def put(self, font_size: int, widths: Mapping[str, float]) -> WidthsMap:
        """Cache widths for font_size, evicting another entry if the cache is full.

        :param font_size: the font size widths were scaled to
        :param widths: character -> width at font_size
        :return: the widths now cached for font_size. If another thread cached
            font_size first, its widths are returned and nothing is evicted.
        """
        with self._lock:
            existing = self._entries.get(font_size)
            if existing is not None:
                return existing.widths
            limit = self.limit
            if limit is not None and len(self._entries) >= limit:
                victim = self._select_victim()
                del self._entries[victim]
                _log.debug(
                    "%s cache evicted font size %s for %s",
                    self.policy.name,
                    victim,
                    font_size,
                )
            entry = CacheEntry(MappingProxyType(dict(widths)), next(self._sequence))
            self._entries[font_size] = entry
            return entry.widths

    @abc.abstractmethod
    def _select_victim(self) -> int:
        """Return the cached font size to evict. Called with the lock held."""

    @property
    def font_sizes(self) -> tuple[int, ...]:
        """Return a snapshot of cached font sizes in insertion order."""
        with self._lock:
            return tuple(self._entries)

    def reads(self, font_size: int) -> int:
        """Return the number of cache hits on font_size (0 if not cached)."""
        with self._lock:
            entry = self._entries.get(font_size)
            return 0 if entry is None else entry.reads

    def clear(self) -> None:
        """Remove every entry."""
        with self._lock:
            self._entries.clear()

    def __contains__(self, font_size: object) -> bool:
        with self._lock:
            return font_size in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        name = type(self).__name__
        return f"{name}(limit={self.limit}, font_sizes={self.font_sizes})"
