"""Build a FontMetrics instance one step at a time.

:author: Shay Hill
:created: 2026-10-17

Configuration has a fixed order:

```
FontMetrics.builder()
    .set_baseline(12, {"a": 6.0, "b": 6.5})
    .pre_calculate([10, 14])  # or .skip_pre_calculation()
    .enable_on_demand_calculations_with_fifo_cache(8)  # or another policy
    .build()
```

Each step is its own class with only the methods that are legal at that point, and
each method returns a new instance of the next step. There is no way to choose a
cache policy before setting a baseline, or to build twice with a half-changed
configuration. Steps are frozen, so a call that raises leaves the step as it was.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING

from fontmeter.baseline import BaselineEntry, FontSizeTable
from fontmeter.caches import EvictionPolicy, new_on_demand_cache, validate_limit
from fontmeter.font_metrics import FontMetrics
from fontmeter.scaling import pre_calculate

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

_log = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class BaselineStep:
    """Set the widths every other font size will be scaled from."""

    def set_baseline(
        self, font_size: int, widths: Mapping[str, float] | None
    ) -> PreCalculateStep:
        """Set the baseline font size and character widths.

        :param font_size: the font size at which widths were measured
        :param widths: character -> width at font_size. This is copied, so later
            changes to the caller's mapping have no effect.
        :return: the pre-calculation step
        :raises ValueError: if font_size is not positive
        :raises ValueError: if widths is None or empty
        :raises ValueError: if widths contains a None key or value, a key that is
            not a single character, or a negative width
        """
        return PreCalculateStep(BaselineEntry(font_size, widths))


@dataclasses.dataclass(frozen=True)
class PreCalculateStep:
    """Optionally scale the baseline to more font sizes ahead of time.

    Pre-calculated sizes are as authoritative as the baseline. They are never
    evicted and are looked up without a lock. Pre-calculate every size you expect
    to use often and leave the rest to on-demand calculation.
    """

    baseline: BaselineEntry

    def skip_pre_calculation(self) -> OnDemandStep:
        """Keep only the baseline font size in the exact-size table.

        :return: the on-demand step
        """
        return OnDemandStep(FontSizeTable(self.baseline, {}))

    def pre_calculate(self, font_sizes: Iterable[int]) -> OnDemandStep:
        """Scale the baseline to each of font_sizes now.

        :param font_sizes: additional font sizes. Duplicates and the baseline size
            are ignored.
        :return: the on-demand step
        :raises ValueError: if any font size is not positive
        """
        return OnDemandStep(pre_calculate(self.baseline, font_sizes))


@dataclasses.dataclass(frozen=True)
class OnDemandStep:
    """Choose what happens when a font size is not in the exact-size table."""

    table: FontSizeTable

    def disable_on_demand_calculations(self) -> BuildStep:
        """Return None for any font size that was not set or pre-calculated."""
        return BuildStep(self.table, EvictionPolicy.DISABLED)

    def enable_on_demand_calculations(self) -> BuildStep:
        """Scale missing font sizes on every lookup and never store the result.

        Use this when the common sizes are pre-calculated and the rest are too rare
        to be worth the memory.
        """
        return BuildStep(self.table, EvictionPolicy.UNCACHED)

    def enable_on_demand_calculations_with_fifo_cache(self, limit: int) -> BuildStep:
        """Scale and cache missing font sizes, evicting the oldest when full.

        :param limit: maximum number of cached font sizes, not counting the
            baseline or pre-calculated sizes
        :return: the build step
        :raises ValueError: if limit is not positive
        """
        return BuildStep(self.table, EvictionPolicy.FIFO, validate_limit(limit))

    def enable_on_demand_calculations_with_popularity_cache(
        self, limit: int
    ) -> BuildStep:
        """Scale and cache missing font sizes, evicting the least read when full.

        :param limit: maximum number of cached font sizes, not counting the
            baseline or pre-calculated sizes
        :return: the build step
        :raises ValueError: if limit is not positive
        """
        return BuildStep(self.table, EvictionPolicy.POPULARITY, validate_limit(limit))

    def enable_on_demand_calculations_with_unlimited_cache(self) -> BuildStep:
        """Scale and cache every missing font size forever.

        Only safe when the number of distinct font sizes is known to be small.
        """
        return BuildStep(self.table, EvictionPolicy.UNLIMITED)


@dataclasses.dataclass(frozen=True)
class BuildStep:
    """Freeze the configuration into a FontMetrics instance."""

    table: FontSizeTable
    policy: EvictionPolicy
    limit: int | None = None

    def build(self) -> FontMetrics:
        """Create a FontMetrics instance with an empty on-demand cache.

        Every call returns a new instance. Instances share the read-only
        exact-size table but not their caches.
        """
        _log.debug(
            "building FontMetrics: baseline %s, exact sizes %s, %s policy (limit %s)",
            self.table.baseline.font_size,
            sorted(self.table),
            self.policy.name,
            self.limit,
        )
        cache = new_on_demand_cache(self.policy, self.limit)
        return FontMetrics(self.table, self.policy, cache)
