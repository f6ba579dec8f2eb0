"""Pixel width of multi-font text."""

from __future__ import annotations

from collections.abc import Iterable
import math

from postertype.fonts.descriptors import FontChain
from postertype.layout.backend import RenderBackend
from postertype.layout.segmenter import TextRun, TextSegmenter


class TextMeasurer:
    """Measure text as the sum of its independently measured runs.

    Kerning across a font switch is not modelled: no single font renders
    every character, so each run is measured in its own font.
    """

    def __init__(self, segmenter: TextSegmenter, backend: RenderBackend) -> None:
        self.segmenter = segmenter
        self.backend = backend

    def run_width(self, run: TextRun, size: int) -> float:
        """Ink width of one run, or its advance when the box is degenerate."""
        metrics = self.backend.measure(run.text, run.font, size)
        width = metrics.ink_width
        if not math.isfinite(width) or width <= 0:
            return metrics.advance
        return width

    def advance(self, run: TextRun, size: int) -> float:
        """Advance width of one run, used to place the next run."""
        return self.backend.measure(run.text, run.font, size).advance

    def runs_width(self, runs: Iterable[TextRun], size: int) -> int:
        total = sum(self.run_width(run, size) for run in runs)
        # Halves round up, not to even.
        return math.floor(total + 0.5)

    def width(self, text: str, chain: FontChain, size: int) -> int:
        if not text:
            return 0
        return self.runs_width(self.segmenter.segment(text, chain), size)


__all__ = ["TextMeasurer"]
