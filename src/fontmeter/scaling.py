"""Scale baseline widths to other font sizes.

:author: Shay Hill
:created: 2026-10-17

Font metrics scale linearly with point size, so the width of a character at any
size is its baseline width times the ratio of the two sizes. These functions hold
no state and may be called from any thread.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fontmeter.baseline import FontSizeTable, validate_font_size

if TYPE_CHECKING:
    from collections.abc import Iterable

    from fontmeter.baseline import BaselineEntry


def scale(baseline: BaselineEntry, char: str, font_size: int) -> float | None:
    """Return the width of a character at font_size.

    :param baseline: the baseline of record
    :param char: a single character
    :param font_size: the target font size
    :return: baseline width * font_size / baseline size, or None if char is not
        in the baseline
    """
    width = baseline.widths.get(char)
    if width is None:
        return None
    return width * font_size / baseline.font_size


def scale_widths(baseline: BaselineEntry, font_size: int) -> dict[str, float]:
    """Return the width of every baseline character at font_size.

    :param baseline: the baseline of record
    :param font_size: the target font size
    :return: a new dict of character -> width at font_size

    At the baseline size itself, the baseline widths are returned without any
    arithmetic.
    """
    if font_size == baseline.font_size:
        return dict(baseline.widths)
    return {
        char: width * font_size / baseline.font_size
        for char, width in baseline.widths.items()
    }


def pre_calculate(
    baseline: BaselineEntry, font_sizes: Iterable[int]
) -> FontSizeTable:
    """Build an exact-size table with the baseline plus font_sizes.

    :param baseline: the baseline of record
    :param font_sizes: additional sizes to scale eagerly. Duplicates and the
        baseline size are ignored.
    :return: a FontSizeTable covering the baseline and every requested size
    :raises ValueError: if any requested size is not positive. Nothing is
        calculated unless every size is valid.
    """
    sizes = [validate_font_size(s) for s in font_sizes]
    extra: dict[int, dict[str, float]] = {}
    for size in sizes:
        if size == baseline.font_size or size in extra:
            continue
        extra[size] = scale_widths(baseline, size)
    return FontSizeTable(baseline, extra)
