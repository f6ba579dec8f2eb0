"""Split text into runs that each render with a single fallback font."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from postertype.fonts.descriptors import FontChain, FontDescriptor


# Glyphs every font is expected to carry. They inherit the font of the
# preceding character so punctuation between two scripts does not flicker.
COMMON_CHARACTERS = frozenset(" ,!@#$%^&*(){}[]+_=-\"'?")


class CoverageQuery(Protocol):
    def has_glyph(self, font: FontDescriptor, char: str) -> bool: ...


@dataclass(frozen=True, slots=True)
class TextRun:
    """A non-empty substring drawn with one font."""

    text: str
    font: FontDescriptor

    def __iter__(self):
        return iter((self.text, self.font))


def _merge(pairs: list[tuple[str, FontDescriptor]]) -> list[TextRun]:
    merged: list[list] = []
    for char, font in pairs:
        if merged and merged[-1][1] == font:
            merged[-1][0].append(char)
        else:
            merged.append([[char], font])
    return [TextRun("".join(chars), font) for chars, font in merged]


class TextSegmenter:
    """Assign every character to the first font of a chain that covers it.

    Characters no font covers keep the font of the previous character (the
    first font of the chain at the start of the text) so they still render
    with a best-effort face instead of disappearing.
    """

    def __init__(self, coverage: CoverageQuery) -> None:
        self.coverage = coverage

    def font_for(self, char: str, chain: FontChain) -> FontDescriptor | None:
        """Return the first font of ``chain`` holding a glyph for ``char``."""
        for font in chain:
            if self.coverage.has_glyph(font, char):
                return font
        return None

    def segment(self, text: str, chain: FontChain) -> list[TextRun]:
        if not chain or not text:
            return []

        last_font = chain[0]
        pairs: list[tuple[str, FontDescriptor]] = []
        for char in text:
            if char in COMMON_CHARACTERS:
                pairs.append((char, last_font))
                continue
            font = self.font_for(char, chain)
            if font is not None:
                last_font = font
            pairs.append((char, last_font))
        return _merge(pairs)


__all__ = ["COMMON_CHARACTERS", "CoverageQuery", "TextRun", "TextSegmenter"]
