"""Font handling for the typesetting engine.

Architecture
: `FontResourceCache` keeps parsed font files (fontTools) and sized Pillow
  faces for the lifetime of its owner so repeated layout passes never re-read
  a file.
: `GlyphCoverage` answers whether a font holds a visible glyph for a
  character, degrading to "no" whenever a font cannot be read.
: `FontRegistry` resolves the per-weight fallback chains from the font
  directory and the custom fonts registered under display aliases.

Goal
: Give the layout modules deterministic, cache-aware font selection for text
  mixing Latin, CJK, Bengali and symbols.
"""

from postertype.fonts.cache import FontResource, FontResourceCache
from postertype.fonts.coverage import GlyphCoverage
from postertype.fonts.descriptors import FontChain, FontDescriptor, FontWeight, font_alias
from postertype.fonts.logging import TypesetLogger
from postertype.fonts.registry import FontRegistry


__all__ = [
    "FontChain",
    "FontDescriptor",
    "FontRegistry",
    "FontResource",
    "FontResourceCache",
    "FontWeight",
    "GlyphCoverage",
    "TypesetLogger",
    "font_alias",
]
