"""High-level façade wiring coverage, measurement and layout together."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from PIL import ImageDraw

from postertype.config import TypesetConfig
from postertype.fonts.cache import FontResourceCache
from postertype.fonts.coverage import GlyphCoverage
from postertype.fonts.descriptors import FontChain, FontDescriptor, FontWeight
from postertype.fonts.logging import TypesetLogger
from postertype.fonts.registry import FontRegistry
from postertype.layout.backend import RGB, PillowBackend, RenderBackend
from postertype.layout.columns import ColumnLayout, ColumnPacker
from postertype.layout.heading import HeadingFitter
from postertype.layout.measure import TextMeasurer
from postertype.layout.segmenter import TextRun, TextSegmenter
from postertype.layout.text import Align, Anchor, TextWriter


INDEX_SAMPLE = "00. "


@dataclass(slots=True)
class Typesetter:
    """Entry point used by poster composition.

    Every component shares the same :class:`FontResourceCache`; pass one in
    explicitly to share loaded fonts between sessions, or leave it out to
    give this session a private cache.
    """

    config: TypesetConfig = field(default_factory=TypesetConfig)
    cache: FontResourceCache = field(default_factory=FontResourceCache)
    logger: TypesetLogger | None = None
    backend: RenderBackend | None = None
    coverage: GlyphCoverage = field(init=False)
    registry: FontRegistry = field(init=False)
    segmenter: TextSegmenter = field(init=False)
    measurer: TextMeasurer = field(init=False)
    headings: HeadingFitter = field(init=False)
    writer: TextWriter = field(init=False)

    def __post_init__(self) -> None:
        if self.logger is None:
            self.logger = TypesetLogger(verbose=self.config.verbose)
        if self.backend is None:
            self.backend = PillowBackend(cache=self.cache, logger=self.logger)
        self.coverage = GlyphCoverage(cache=self.cache, logger=self.logger)
        self.registry = FontRegistry(
            self.config.resolved_font_dir(),
            families=self.config.families,
            aliases=self.config.aliases,
            logger=self.logger,
        )
        self.segmenter = TextSegmenter(self.coverage)
        self.measurer = TextMeasurer(self.segmenter, self.backend)
        self.headings = HeadingFitter(self.measurer, self.backend)
        self.writer = TextWriter(self.measurer, self.backend)

    def register_fonts(
        self, paths: Iterable[str | Path], aliases: Mapping[str, str]
    ) -> list[FontDescriptor]:
        return self.registry.register(paths, aliases)

    def chain(self, weight: FontWeight) -> FontChain:
        return self.registry.chain(weight)

    def segment(self, text: str, chain: FontChain) -> list[TextRun]:
        return self.segmenter.segment(text, chain)

    def width(self, text: str, chain: FontChain, size: int) -> int:
        return self.measurer.width(text, chain, size)

    def organize_tracks(
        self,
        tracks: Sequence[str],
        *,
        index: bool = False,
        chain: FontChain | None = None,
    ) -> ColumnLayout:
        """Pack an album's track names into the track-list area."""
        sizes = self.config.sizes
        chain = chain if chain is not None else self.chain("Light")
        index_width = self.width(INDEX_SAMPLE, chain, sizes.tracks) if index else 0
        packer = ColumnPacker(
            lambda item: self.measurer.width(item, chain, sizes.tracks),
            logger=self.logger,
        )
        return packer.pack(
            tracks,
            max_rows=sizes.max_rows,
            spacing=sizes.spacing,
            max_total_width=sizes.max_width,
            index_width=index_width,
            with_index=index,
        )

    def heading(
        self,
        draw: ImageDraw.ImageDraw,
        position: tuple[float, float],
        text: str,
        color: RGB,
        *,
        chain: FontChain | None = None,
        max_width: int | None = None,
        initial_size: int | None = None,
    ) -> int:
        """Draw a heading shrunk to the configured width; return its size."""
        sizes = self.config.sizes
        return self.headings.fit(
            draw,
            position,
            text,
            chain if chain is not None else self.chain("Bold"),
            max_width=max_width if max_width is not None else sizes.heading_width,
            initial_size=initial_size if initial_size is not None else sizes.heading,
            color=color,
        )

    def text(
        self,
        draw: ImageDraw.ImageDraw,
        position: tuple[float, float],
        text: str,
        color: RGB,
        size: int,
        *,
        chain: FontChain | None = None,
        align: Align | None = None,
        spacing: int = 0,
        anchor: Anchor = "lt",
    ) -> None:
        self.writer.text(
            draw,
            position,
            text,
            color,
            chain if chain is not None else self.chain("Regular"),
            size,
            align=align,
            spacing=spacing,
            anchor=anchor,
        )

    def track_list(
        self,
        draw: ImageDraw.ImageDraw,
        position: tuple[float, float],
        layout: ColumnLayout,
        color: RGB,
        *,
        chain: FontChain | None = None,
    ) -> None:
        """Draw packed columns side by side, each column left-aligned."""
        sizes = self.config.sizes
        chain = chain if chain is not None else self.chain("Light")
        x, y = position
        for column in layout.columns:
            self.writer.text(
                draw, (x, y), "\n".join(column.items), color, chain, sizes.tracks, spacing=2
            )
            x += column.width + layout.spacing


__all__ = ["INDEX_SAMPLE", "Typesetter"]
