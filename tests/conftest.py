from __future__ import annotations

from pathlib import Path

from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
import pytest

from postertype.fonts.descriptors import FontChain, FontDescriptor
from postertype.layout.backend import TextMetrics


LATIN = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789 ,.!?'-"
HAN = "世界音楽"


def build_font(path: Path, chars: str, *, family: str = "Test", advance: int = 600) -> Path:
    """Write a TrueType font with a box glyph for each character of ``chars``."""
    pen = TTGlyphPen(None)
    pen.moveTo((50, 0))
    pen.lineTo((50, 700))
    pen.lineTo((advance - 50, 700))
    pen.lineTo((advance - 50, 0))
    pen.closePath()
    glyph = pen.glyph()

    names = {char: f"uni{ord(char):04X}" for char in dict.fromkeys(chars)}
    glyph_order = [".notdef", *names.values()]

    builder = FontBuilder(1000, isTTF=True)
    builder.setupGlyphOrder(glyph_order)
    builder.setupCharacterMap({ord(char): name for char, name in names.items()})
    builder.setupGlyf({name: glyph for name in glyph_order})
    glyph_table = builder.font["glyf"]
    builder.setupHorizontalMetrics({name: (advance, glyph_table[name].xMin) for name in glyph_order})
    builder.setupHorizontalHeader(ascent=800, descent=-200)
    builder.setupNameTable(
        {
            "familyName": family,
            "styleName": "Regular",
            "uniqueFontIdentifier": f"postertype-tests:{family}",
            "fullName": f"{family}-Regular",
            "psName": f"{family}-Regular",
            "version": "Version 1.0",
        }
    )
    builder.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    builder.setupPost()
    path.parent.mkdir(parents=True, exist_ok=True)
    builder.save(str(path))
    return path


class FakeCoverage:
    """Coverage table keyed by descriptor, recording every query."""

    def __init__(self, table: dict[FontDescriptor, str]) -> None:
        self.table = table
        self.queries: list[tuple[FontDescriptor, str]] = []

    def has_glyph(self, font: FontDescriptor, char: str) -> bool:
        self.queries.append((font, char))
        return char in self.table.get(font, "")


class FakeBackend:
    """Monospaced metrics: every character advances ``ratio * size`` pixels."""

    def __init__(self, ratio: float = 0.5) -> None:
        self.ratio = ratio
        self.measured: list[tuple[str, FontDescriptor, int]] = []
        self.drawn: list[dict] = []

    def register(self, font: FontDescriptor) -> None:
        pass

    def measure(self, text: str, font: FontDescriptor, size: int) -> TextMetrics:
        self.measured.append((text, font, size))
        advance = len(text) * size * self.ratio
        return TextMetrics(advance=advance, left=0.0, right=advance)

    def draw(self, draw, position, text, font, size, fill, anchor="la") -> None:
        self.drawn.append(
            {"position": position, "text": text, "font": font, "size": size, "anchor": anchor}
        )


@pytest.fixture
def latin() -> FontDescriptor:
    return FontDescriptor(path=Path("Latin/Latin-Regular.ttf"), alias="Latin-Regular")


@pytest.fixture
def han() -> FontDescriptor:
    return FontDescriptor(path=Path("Han/Han-Regular.ttf"), alias="Han-Regular")


@pytest.fixture
def chain(latin: FontDescriptor, han: FontDescriptor) -> FontChain:
    return FontChain.of([latin, han])


@pytest.fixture
def coverage(latin: FontDescriptor, han: FontDescriptor) -> FakeCoverage:
    return FakeCoverage({latin: LATIN, han: HAN})


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def font_dir(tmp_path: Path) -> Path:
    """Font directory laid out as ``<Family>/<Family>-<Weight>.ttf``."""
    root = tmp_path / "fonts"
    for weight in ("Regular", "Bold", "Light"):
        build_font(root / "Latin" / f"Latin-{weight}.ttf", LATIN, family="Latin")
        build_font(root / "Han" / f"Han-{weight}.ttf", HAN, family="Han", advance=1000)
    return root


@pytest.fixture
def real_chain(font_dir: Path) -> FontChain:
    return FontChain.of(
        [
            FontDescriptor(path=font_dir / "Latin" / "Latin-Regular.ttf", alias="Latin-Regular"),
            FontDescriptor(path=font_dir / "Han" / "Han-Regular.ttf", alias="Han-Regular"),
        ]
    )


@pytest.fixture
def make_coverage():
    return FakeCoverage


@pytest.fixture
def make_backend():
    return FakeBackend


@pytest.fixture
def make_font():
    return build_font
