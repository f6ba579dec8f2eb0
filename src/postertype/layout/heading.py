"""Auto-size a single-line heading into a bounded width."""

from __future__ import annotations

from PIL import ImageDraw

from postertype.fonts.descriptors import FontChain
from postertype.layout.backend import RGB, RenderBackend
from postertype.layout.measure import TextMeasurer
from postertype.layout.segmenter import TextRun


MIN_SIZE = 1


class HeadingFitter:
    """Shrink a heading one pixel size at a time until it fits.

    The search is linear: starting sizes are small and headings are rendered
    once per poster. Size 1 is accepted even when the text still overflows.
    """

    def __init__(self, measurer: TextMeasurer, backend: RenderBackend) -> None:
        self.measurer = measurer
        self.backend = backend

    def _choose(self, runs: list[TextRun], max_width: int, initial_size: int) -> int:
        size = initial_size
        while size > MIN_SIZE and self.measurer.runs_width(runs, size) > max_width:
            size -= 1
        return size

    def choose_size(self, text: str, chain: FontChain, max_width: int, initial_size: int) -> int:
        """Return the largest size ``<= initial_size`` at which ``text`` fits."""
        runs = self.measurer.segmenter.segment(text, chain)
        return self._choose(runs, max_width, initial_size)

    def fit(
        self,
        draw: ImageDraw.ImageDraw,
        position: tuple[float, float],
        text: str,
        chain: FontChain,
        *,
        max_width: int,
        initial_size: int,
        color: RGB,
    ) -> int:
        """Draw ``text`` at the chosen size from its top-left corner and return the size."""
        if not text:
            return initial_size
        runs = self.measurer.segmenter.segment(text, chain)
        size = self._choose(runs, max_width, initial_size)

        x, y = position
        offset = 0.0
        for run in runs:
            self.backend.draw(draw, (x + offset, y), run.text, run.font, size, color, anchor="la")
            offset += self.measurer.advance(run, size)
        return size


__all__ = ["MIN_SIZE", "HeadingFitter"]
