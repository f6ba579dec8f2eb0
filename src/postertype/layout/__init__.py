"""Segmentation, measurement and layout of multi-font text."""

from postertype.layout.backend import PillowBackend, RenderBackend, TextMetrics
from postertype.layout.columns import Column, ColumnLayout, ColumnPacker, add_indexes
from postertype.layout.heading import HeadingFitter
from postertype.layout.measure import TextMeasurer
from postertype.layout.segmenter import COMMON_CHARACTERS, TextRun, TextSegmenter
from postertype.layout.text import TextWriter, line_step


__all__ = [
    "COMMON_CHARACTERS",
    "Column",
    "ColumnLayout",
    "ColumnPacker",
    "HeadingFitter",
    "PillowBackend",
    "RenderBackend",
    "TextMeasurer",
    "TextMetrics",
    "TextRun",
    "TextSegmenter",
    "TextWriter",
    "add_indexes",
    "line_step",
]
