"""In-memory cache of loaded font resources."""

from __future__ import annotations

from dataclasses import dataclass, field

from fontTools.ttLib import TTFont
from PIL import ImageFont

from postertype.exceptions import FontLoadError
from postertype.fonts.descriptors import FontDescriptor


@dataclass(slots=True)
class FontResource:
    """A parsed font file together with its best Unicode cmap."""

    ttfont: TTFont
    cmap: dict[int, str]

    def glyph_index(self, char: str) -> int:
        """Return the glyph index for ``char``; 0 is the missing glyph."""
        name = self.cmap.get(ord(char))
        if name is None:
            return 0
        return self.ttfont.getGlyphID(name)


@dataclass(slots=True)
class FontResourceCache:
    """Memoise font files so repeated layout passes never re-parse them.

    The cache is an explicit object: hand the same instance to every
    component that should share loaded fonts, or create one per worker when
    isolation is required. It is not thread-safe.
    """

    _resources: dict[FontDescriptor, FontResource] = field(default_factory=dict, repr=False)
    _failures: dict[FontDescriptor, Exception] = field(default_factory=dict, repr=False)
    _faces: dict[tuple[FontDescriptor, int], ImageFont.FreeTypeFont] = field(
        default_factory=dict, repr=False
    )

    def resource(self, font: FontDescriptor) -> FontResource:
        """Return the parsed font for ``font``, loading it on first access.

        Loading errors propagate to the caller. The error is remembered and
        raised again on later calls, so a broken file is only opened once.
        """
        cached = self._resources.get(font)
        if cached is not None:
            return cached
        failure = self._failures.get(font)
        if failure is not None:
            raise failure
        try:
            ttfont = TTFont(str(font.path), lazy=True)
        except Exception as exc:
            self._failures[font] = exc
            raise
        try:
            cmap = ttfont.getBestCmap() or {}
        except Exception as exc:
            ttfont.close()
            self._failures[font] = exc
            raise
        resource = FontResource(ttfont=ttfont, cmap=cmap)
        self._resources[font] = resource
        return resource

    def face(self, font: FontDescriptor, size: int) -> ImageFont.FreeTypeFont:
        """Return a Pillow face for ``font`` at ``size`` pixels."""
        key = (font, size)
        cached = self._faces.get(key)
        if cached is not None:
            return cached
        try:
            face = ImageFont.truetype(str(font.path), size)
        except OSError as exc:
            raise FontLoadError(f"Unable to open font '{font.alias}' at {font.path}") from exc
        self._faces[key] = face
        return face

    def __contains__(self, font: object) -> bool:
        return font in self._resources

    def __len__(self) -> int:
        return len(self._resources)

    def clear(self) -> None:
        """Drop loaded resources and remembered failures; the next query re-loads from disk."""
        for resource in self._resources.values():
            resource.ttfont.close()
        self._resources.clear()
        self._failures.clear()
        self._faces.clear()


__all__ = ["FontResource", "FontResourceCache"]
