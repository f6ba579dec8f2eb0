"""Glyph coverage queries against loaded font files."""

from __future__ import annotations

from postertype.exceptions import exception_messages
from postertype.fonts.cache import FontResourceCache
from postertype.fonts.descriptors import FontDescriptor
from postertype.fonts.logging import TypesetLogger


MISSING_GLYPH = 0


class GlyphCoverage:
    """Answer whether a font holds a visible glyph for a character.

    Queries are a best-effort predicate: a font that cannot be parsed, or a
    lookup that fails, simply reports no coverage so the segmenter can fall
    back to another font.
    """

    def __init__(
        self,
        *,
        cache: FontResourceCache | None = None,
        logger: TypesetLogger | None = None,
    ) -> None:
        self.cache = cache if cache is not None else FontResourceCache()
        self.logger = logger or TypesetLogger()

    def has_glyph(self, font: FontDescriptor, char: str) -> bool:
        try:
            resource = self.cache.resource(font)
        except Exception as exc:
            messages = exception_messages(exc)
            self.logger.debug(
                "Font '%s' could not be loaded for coverage (%s).",
                font.alias,
                messages[-1] if messages else type(exc).__name__,
            )
            return False
        try:
            return resource.glyph_index(char) != MISSING_GLYPH
        except Exception as exc:
            self.logger.debug("Glyph lookup for %r in '%s' failed: %s", char, font.alias, exc)
            return False


__all__ = ["MISSING_GLYPH", "GlyphCoverage"]
