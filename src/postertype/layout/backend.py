"""Rendering backend used to measure and draw text runs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from PIL import ImageDraw

from postertype.fonts.cache import FontResourceCache
from postertype.fonts.descriptors import FontDescriptor
from postertype.fonts.logging import TypesetLogger


RGB = tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class TextMetrics:
    """Horizontal metrics of a string rendered with one font."""

    advance: float
    left: float
    right: float

    @property
    def ink_width(self) -> float:
        return self.right - self.left


class RenderBackend(Protocol):
    """Measure and draw strings for a given font and pixel size."""

    def register(self, font: FontDescriptor) -> None: ...

    def measure(self, text: str, font: FontDescriptor, size: int) -> TextMetrics: ...

    def draw(
        self,
        draw: ImageDraw.ImageDraw,
        position: tuple[float, float],
        text: str,
        font: FontDescriptor,
        size: int,
        fill: RGB,
        anchor: str = "la",
    ) -> None: ...


class PillowBackend:
    """Pillow implementation of :class:`RenderBackend`.

    Faces are loaded through the shared :class:`FontResourceCache`, keyed by
    descriptor and pixel size. Registering a font only loads it once and
    records its alias; Pillow has no global font table.
    """

    def __init__(
        self,
        *,
        cache: FontResourceCache | None = None,
        logger: TypesetLogger | None = None,
    ) -> None:
        self.cache = cache if cache is not None else FontResourceCache()
        self.logger = logger or TypesetLogger()
        self.registered: dict[str, FontDescriptor] = {}

    def register(self, font: FontDescriptor) -> None:
        if font.alias in self.registered:
            return
        self.registered[font.alias] = font
        self.logger.debug("Font '%s' registered from %s", font.alias, font.path)

    def measure(self, text: str, font: FontDescriptor, size: int) -> TextMetrics:
        self.register(font)
        face = self.cache.face(font, size)
        left, _top, right, _bottom = face.getbbox(text, anchor="ls")
        return TextMetrics(advance=float(face.getlength(text)), left=float(left), right=float(right))

    def draw(
        self,
        draw: ImageDraw.ImageDraw,
        position: tuple[float, float],
        text: str,
        font: FontDescriptor,
        size: int,
        fill: RGB,
        anchor: str = "la",
    ) -> None:
        self.register(font)
        draw.text(position, text, fill=fill, font=self.cache.face(font, size), anchor=anchor)


__all__ = ["RGB", "PillowBackend", "RenderBackend", "TextMetrics"]
