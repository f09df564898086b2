"""Look up character widths at any font size.

:author: Shay Hill
:created: 2026-10-17

A FontMetrics instance answers one question: how wide is this character at this
font size? Widths are resolved in this order:

1. the exact-size table (baseline plus pre-calculated sizes)
2. the on-demand cache, if the policy has one
3. scaling the baseline, then caching the result if the policy caches

A character that is not in the baseline has no width at any size. That is a normal
result (None), not an error. Likewise, a font size that is not in the exact-size
table resolves to None when on-demand calculations are disabled.

Instances are safe to share between threads. The exact-size table never changes
after build, and the on-demand cache has its own lock.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fontmeter.baseline import validate_font_size
from fontmeter.scaling import scale, scale_widths

if TYPE_CHECKING:
    from fontmeter.baseline import BaselineEntry, FontSizeTable, WidthsMap
    from fontmeter.builder import BaselineStep
    from fontmeter.caches import EvictionPolicy, OnDemandCache


def _validate_char(char: str | None) -> str:
    """Raise an error if char is not a single character.

    :param char: the character to look up
    :return: char, unaltered
    :raises TypeError: if char is None or not a string
    :raises ValueError: if char is not exactly one character long
    """
    if char is None:
        msg = "char must not be None"
        raise TypeError(msg)
    if not isinstance(char, str):
        msg = f"char must be a str, not {type(char).__name__}"
        raise TypeError(msg)
    if len(char) != 1:
        msg = f"char must be a single character, not {char!r}"
        raise ValueError(msg)
    return char


class FontMetrics:
    """Character widths at any font size, scaled from one baseline.

    Create instances with `FontMetrics.builder()`.
    """

    def __init__(
        self,
        table: FontSizeTable,
        policy: EvictionPolicy,
        cache: OnDemandCache | None = None,
    ) -> None:
        """Hold the frozen configuration from a BuildStep.

        :param table: baseline and pre-calculated widths
        :param policy: what to do with font sizes not in table
        :param cache: on-demand cache, None if the policy does not cache
        """
        self._table = table
        self._policy = policy
        self._cache = cache

    @staticmethod
    def builder() -> BaselineStep:
        """Start configuring a new FontMetrics instance.

        :return: the first builder step
        """
        from fontmeter.builder import BaselineStep

        return BaselineStep()

    @property
    def _baseline(self) -> BaselineEntry:
        return self._table.baseline

    @property
    def policy(self) -> EvictionPolicy:
        """Return the on-demand policy chosen at build time."""
        return self._policy

    @property
    def baseline_font_size(self) -> int:
        """Return the font size of the baseline widths."""
        return self._baseline.font_size

    @property
    def font_sizes(self) -> tuple[int, ...]:
        """Return the baseline and pre-calculated font sizes in ascending order."""
        return tuple(sorted(self._table))

    @property
    def supported_characters(self) -> frozenset[str]:
        """Return every character with a width."""
        return self._baseline.characters

    @property
    def cached_font_sizes(self) -> tuple[int, ...]:
        """Return the font sizes currently in the on-demand cache."""
        if self._cache is None:
            return ()
        return self._cache.font_sizes

    def clear_cache(self) -> None:
        """Drop every on-demand cached font size."""
        if self._cache is not None:
            self._cache.clear()

    def _resolve_on_demand(self, char: str, font_size: int) -> float | None:
        """Find a width for a font size that is not in the exact-size table."""
        if not self._policy.calculates:
            return None
        if self._cache is None:
            return scale(self._baseline, char, font_size)
        cached: WidthsMap | None = self._cache.get(font_size)
        if cached is not None:
            return cached.get(char)
        if char not in self._baseline.widths:
            return None
        widths = self._cache.put(font_size, scale_widths(self._baseline, font_size))
        return widths[char]

    def get_width(self, char: str, font_size: int) -> float | None:
        """Return the width of a character at a font size.

        :param char: a single character
        :param font_size: a positive font size
        :return: the width in the units of the baseline widths or None if char is
            not supported or font_size cannot be resolved under the on-demand policy
        :raises TypeError: if char is None
        :raises ValueError: if char is not a single character
        :raises ValueError: if font_size is not positive
        """
        char = _validate_char(char)
        font_size = validate_font_size(font_size)
        exact = self._table.get(font_size)
        if exact is not None:
            return exact.get(char)
        return self._resolve_on_demand(char, font_size)

    def get_text_width(self, text: str, font_size: int) -> float | None:
        """Return the sum of character widths in a string.

        :param text: any string
        :param font_size: a positive font size
        :return: the total width, 0.0 for an empty string, or None if any
            character cannot be resolved

        This is a sum of per-character widths. No kerning is applied.
        """
        if text is None:
            msg = "text must not be None"
            raise TypeError(msg)
        font_size = validate_font_size(font_size)
        total = 0.0
        for char in text:
            width = self.get_width(char, font_size)
            if width is None:
                return None
            total += width
        return total

    def __repr__(self) -> str:
        return (
            f"FontMetrics(baseline_font_size={self.baseline_font_size}, "
            + f"font_sizes={self.font_sizes}, policy={self._policy.name})"
        )
