"""Read baseline widths from font files.

:author: Shay Hill
:created: 2026-10-17
"""

from fontmeter.font_tools.font_info import FTFontInfo, new_builder_from_font

__all__ = ["FTFontInfo", "new_builder_from_font"]
