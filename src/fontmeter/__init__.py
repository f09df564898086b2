"""Import functions into the package namespace.

:author: Shay Hill
:created: 2026-10-17
"""

from fontmeter.baseline import BaselineEntry, FontSizeTable
from fontmeter.builder import BaselineStep, BuildStep, OnDemandStep, PreCalculateStep
from fontmeter.caches import (
    EvictionPolicy,
    FifoCache,
    OnDemandCache,
    PopularityCache,
    UnlimitedCache,
)
from fontmeter.font_metrics import FontMetrics
from fontmeter.font_tools.font_info import FTFontInfo, new_builder_from_font
from fontmeter.scaling import pre_calculate, scale, scale_widths

__all__ = [
    "BaselineEntry",
    "BaselineStep",
    "BuildStep",
    "EvictionPolicy",
    "FTFontInfo",
    "FifoCache",
    "FontMetrics",
    "FontSizeTable",
    "OnDemandCache",
    "OnDemandStep",
    "PopularityCache",
    "PreCalculateStep",
    "UnlimitedCache",
    "new_builder_from_font",
    "pre_calculate",
    "scale",
    "scale_widths",
]
