"""Draw single and multi-line text with a font fallback chain."""

from __future__ import annotations

import math
from typing import Literal

from PIL import ImageDraw

from postertype.exceptions import LayoutError
from postertype.fonts.descriptors import FontChain
from postertype.layout.backend import RGB, RenderBackend
from postertype.layout.measure import TextMeasurer


Align = Literal["left", "center", "right"]
Anchor = Literal["lt", "lb", "mm", "rt", "rb"]

_HORIZONTAL: dict[str, Align] = {"l": "left", "m": "center", "r": "right"}
# Runs in different fonts share the font-level ascender/descender lines.
_VERTICAL = {"t": "a", "m": "m", "b": "d"}


def line_step(size: int, spacing: int = 0) -> int:
    """Vertical distance between two consecutive lines of ``size`` pixels."""
    leading = math.floor(round(size * 6 / 42, 1))
    return size + leading + spacing


class TextWriter:
    """Place the runs of a line left to right, honouring alignment."""

    def __init__(self, measurer: TextMeasurer, backend: RenderBackend) -> None:
        self.measurer = measurer
        self.backend = backend

    def render_line(
        self,
        draw: ImageDraw.ImageDraw,
        position: tuple[float, float],
        text: str,
        color: RGB,
        chain: FontChain,
        size: int,
        *,
        align: Align | None = None,
        anchor: Anchor = "lt",
    ) -> None:
        if not text:
            return
        if anchor not in ("lt", "lb", "mm", "rt", "rb"):
            raise LayoutError(f"Unsupported text anchor: {anchor!r}")
        align = align or _HORIZONTAL[anchor[0]]
        runs = self.measurer.segmenter.segment(text, chain)
        advances = [self.measurer.advance(run, size) for run in runs]
        total = sum(advances)

        x, y = position
        if align == "center":
            x -= total / 2
        elif align == "right":
            x -= total

        vertical = "l" + _VERTICAL[anchor[1]]
        offset = 0.0
        for run, advance in zip(runs, advances):
            self.backend.draw(draw, (x + offset, y), run.text, run.font, size, color, anchor=vertical)
            offset += advance

    def text(
        self,
        draw: ImageDraw.ImageDraw,
        position: tuple[float, float],
        text: str,
        color: RGB,
        chain: FontChain,
        size: int,
        *,
        align: Align | None = None,
        spacing: int = 0,
        anchor: Anchor = "lt",
    ) -> None:
        """Draw ``text``, one line per ``\\n``-separated segment."""
        if not text:
            return
        x, y = position
        step = line_step(size, spacing)
        for number, line in enumerate(text.split("\n")):
            self.render_line(
                draw,
                (x, y + number * step),
                line,
                color,
                chain,
                size,
                align=align,
                anchor=anchor,
            )


__all__ = ["Align", "Anchor", "TextWriter", "line_step"]
