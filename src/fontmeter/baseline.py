"""Baseline widths and the exact-size table built from them.

:author: Shay Hill
:created: 2026-10-17

A baseline is one font size and the width of every supported character at that
size. Everything else in fontmeter is scaled from the baseline. The FontSizeTable
holds the baseline and any pre-calculated sizes. Both are frozen once created, so
lookups can share them between threads without a lock.
"""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Iterator, Mapping
from numbers import Integral, Real
from types import MappingProxyType

WidthsMap = Mapping[str, float]


def validate_font_size(font_size: int) -> int:
    """Raise a ValueError if font_size is not a positive integer.

    :param font_size: a font size to check
    :return: the font size, unaltered
    :raises ValueError: if font_size is not an integer or is zero or negative
    """
    if isinstance(font_size, bool) or not isinstance(font_size, Integral):
        msg = f"font_size must be an integer, not {font_size!r}"
        raise ValueError(msg)
    if font_size <= 0:
        msg = "font_size must be positive"
        raise ValueError(msg)
    return font_size


def _validate_widths(widths: Mapping[str, float] | None) -> dict[str, float]:
    """Copy a baseline widths map, rejecting anything malformed.

    :param widths: a mapping of single characters to non-negative widths
    :return: a new dict with the same items and float values
    :raises ValueError: if widths is None, empty, or has a None, non-character,
        or negative key or value

    Every item is checked before anything is returned, so a bad map never leaves
    half-copied state behind.
    """
    if widths is None:
        msg = "baseline widths must not be None"
        raise ValueError(msg)
    if not widths:
        msg = "baseline widths must not be empty"
        raise ValueError(msg)
    copied: dict[str, float] = {}
    for char, width in widths.items():
        if char is None:
            msg = "baseline widths must not contain a None character"
            raise ValueError(msg)
        if width is None:
            msg = f"baseline width for {char!r} must not be None"
            raise ValueError(msg)
        if not isinstance(char, str) or len(char) != 1:
            msg = f"baseline keys must be single characters, not {char!r}"
            raise ValueError(msg)
        if (
            isinstance(width, bool)
            or not isinstance(width, Real)
            or not math.isfinite(width)
            or width < 0
        ):
            msg = f"baseline width for {char!r} must be a non-negative number"
            raise ValueError(msg)
        copied[char] = float(width)
    return copied


@dataclasses.dataclass(frozen=True)
class BaselineEntry:
    """The widths of each supported character at one font size."""

    font_size: int
    widths: WidthsMap

    def __init__(self, font_size: int, widths: Mapping[str, float] | None) -> None:
        """Validate and freeze a copy of the caller's widths.

        :param font_size: the font size at which widths were measured
        :param widths: character -> width at font_size
        :raises ValueError: if font_size is not positive or widths is malformed
        """
        font_size = validate_font_size(font_size)
        frozen = MappingProxyType(_validate_widths(widths))
        object.__setattr__(self, "font_size", font_size)
        object.__setattr__(self, "widths", frozen)

    @property
    def characters(self) -> frozenset[str]:
        """Return every supported character."""
        return frozenset(self.widths)


class FontSizeTable(Mapping[int, WidthsMap]):
    """Read-only map of font size -> widths at that size.

    Always contains the baseline size. Pre-calculated sizes are added when the
    table is created and never after.
    """

    def __init__(
        self, baseline: BaselineEntry, extra: Mapping[int, Mapping[str, float]]
    ) -> None:
        """Create a table from a baseline and already scaled extra sizes.

        :param baseline: the baseline of record
        :param extra: font size -> widths for any pre-calculated sizes. The
            baseline size, if present, is ignored in favor of the baseline itself.
        """
        self._baseline = baseline
        table: dict[int, WidthsMap] = {
            size: MappingProxyType(dict(widths)) for size, widths in extra.items()
        }
        table[baseline.font_size] = baseline.widths
        self._table = MappingProxyType(table)

    @property
    def baseline(self) -> BaselineEntry:
        """Return the baseline of record."""
        return self._baseline

    def __getitem__(self, font_size: int) -> WidthsMap:
        return self._table[font_size]

    def __iter__(self) -> Iterator[int]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        size = self._baseline.font_size
        return f"FontSizeTable(baseline={size}, sizes={sorted(self)})"
