"""Use fontTools to read baseline widths from a font file.

FontMetrics does not care where its baseline widths come from. Most of the time,
they come from a font file, so this module reads advance widths from the hmtx table
and scales them from font units to a font size:

```
with FTFontInfo("path/to/font.ttf") as info:
    widths = info.get_baseline_widths(12)
metrics = (
    FontMetrics.builder()
    .set_baseline(12, widths)
    .skip_pre_calculation()
    .enable_on_demand_calculations_with_popularity_cache(16)
    .build()
)
```

Advance widths are the space a glyph takes up in a line of text. They do not
include kerning, which FontMetrics does not model.

:author: Shay Hill
:created: 2026-10-17
"""

# pyright: reportUnknownMemberType = false
# pyright: reportMissingTypeStubs = false

from __future__ import annotations

import functools as ft
import logging
from pathlib import Path
from typing import TYPE_CHECKING, cast

from fontTools.ttLib import TTFont
from paragraphs import par
from typing_extensions import Self

from fontmeter.baseline import validate_font_size
from fontmeter.font_metrics import FontMetrics

if TYPE_CHECKING:
    import os
    from collections.abc import Iterable

    from fontmeter.builder import PreCalculateStep

logging.getLogger("fontTools").setLevel(logging.ERROR)


class FTFontInfo:
    """Hide the type kludging necessary to read widths with fontTools."""

    def __init__(self, font: str | os.PathLike[str]) -> None:
        """Open a TTF or OTF font file.

        :param font: path to a font file
        :raises FileNotFoundError: if the file does not exist
        """
        self._path = Path(font)
        if not self.path.exists():
            msg = f"Font file '{self.path}' does not exist."
            raise FileNotFoundError(msg)
        self._font = TTFont(self.path)

    def close(self) -> None:
        """Close the font file."""
        self._font.close()

    def __enter__(self) -> Self:
        """Enter the context manager."""
        return self

    def __exit__(self, exc_type: object, exc_value: object, traceback: object) -> None:
        """Exit the context manager."""
        del exc_type, exc_value, traceback
        self.close()

    @property
    def path(self) -> Path:
        """Return the path to the font file."""
        return self._path

    @property
    def font(self) -> TTFont:
        """Return the fontTools TTFont object."""
        return self._font

    @ft.cached_property
    def units_per_em(self) -> int:
        """Get the units per em for the font.

        :return: The units per em for the font. For a ttf, this will usually be
            2048. For an otf, usually 1000.
        :raises ValueError: If the font does not have a 'head' table or
            'unitsPerEm' attribute.
        """
        try:
            maybe_units_per_em = cast("int | None", self.font["head"].unitsPerEm)
        except (KeyError, AttributeError) as e:
            msg = (
                f"Font '{self.path}' does not have"
                + f" 'head' table or 'unitsPerEm' attribute: {e}"
            )
            raise ValueError(msg) from e
        if not maybe_units_per_em:
            msg = f"Font '{self.path}' does not have 'unitsPerEm' defined."
            raise ValueError(msg)
        return maybe_units_per_em

    @ft.cached_property
    def _char_map(self) -> dict[int, str]:
        """Map code points to glyph names."""
        return cast("dict[int, str]", self.font.getBestCmap() or {})

    @ft.cached_property
    def _hmtx(self) -> dict[str, tuple[int, int]]:
        """Map glyph names to (advance width, left side bearing)."""
        try:
            return cast("dict[str, tuple[int, int]]", self.font["hmtx"].metrics)
        except KeyError as e:
            msg = f"Font '{self.path}' does not have an 'hmtx' table."
            raise ValueError(msg) from e

    def try_glyph_name(self, char: str) -> str | None:
        """Try to get the glyph name for a character in the font.

        :param char: The character to get the glyph name for.
        :return: The glyph name for the character, or None if not found.
        :raises ValueError: If char is not a single character.
        """
        if len(char) != 1:
            msg = f"Expected a single character, not {char!r}."
            raise ValueError(msg)
        return self._char_map.get(ord(char))

    def get_char_advance(self, char: str) -> int:
        """Get the advance width of a character in font units.

        :param char: The character to get the advance width for.
        :return: The hmtx advance width for the character.
        :raises ValueError: If the character is not found in the font.
        """
        glyph_name = self.try_glyph_name(char)
        if glyph_name is None:
            msg = f"Character '{char}' not found in font '{self.path}'."
            raise ValueError(msg)
        return self._hmtx[glyph_name][0]

    def get_baseline_widths(
        self, font_size: int, chars: Iterable[str] | None = None
    ) -> dict[str, float]:
        """Get character widths at a font size.

        :param font_size: The font size to scale advance widths to.
        :param chars: Characters to measure. If None, measure every character in
            the font's best cmap. Characters not in the font are skipped.
        :return: A dictionary of character -> advance width at font_size.
        :raises ValueError: If font_size is not positive or the font has no
            characters in chars.
        """
        font_size = validate_font_size(font_size)
        if chars is None:
            chars = (chr(c) for c in self._char_map)
        widths: dict[str, float] = {}
        for char in chars:
            glyph_name = self.try_glyph_name(char)
            if glyph_name is None:
                continue
            advance = self._hmtx[glyph_name][0]
            widths[char] = advance * font_size / self.units_per_em
        if not widths:
            msg = par(
                f"""Font '{self.path}' has none of the requested characters, so
                there is nothing to use as a baseline."""
            )
            raise ValueError(msg)
        return widths


def new_builder_from_font(
    font: str | os.PathLike[str],
    font_size: int,
    chars: Iterable[str] | None = None,
) -> PreCalculateStep:
    """Start a FontMetrics builder with baseline widths read from a font file.

    :param font: path to a TTF or OTF font file
    :param font_size: the baseline font size
    :param chars: characters to include in the baseline. If None, include every
        character in the font.
    :return: the pre-calculation step of a FontMetrics builder
    """
    with FTFontInfo(font) as info:
        widths = info.get_baseline_widths(font_size, chars)
    return FontMetrics.builder().set_baseline(font_size, widths)
