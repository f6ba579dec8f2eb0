"""Font descriptors, fallback chains and display-alias derivation."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Literal


FontWeight = Literal["Regular", "Bold", "Light"]


def family_of(path: Path) -> str:
    """Return the family name of a font file, i.e. its parent directory name."""
    return path.parent.name


def weight_of(path: Path) -> str | None:
    """Return the weight encoded in a ``Family-Weight.ttf`` file name."""
    parts = path.stem.split("-")
    if len(parts) < 2 or not parts[1]:
        return None
    return parts[1]


def font_alias(path: str | Path, aliases: Mapping[str, str]) -> str | None:
    """Return the backend alias of a font file, e.g. ``Noto Sans JP-Bold``.

    ``None`` is returned when the family directory has no display name in
    ``aliases``.
    """
    path = Path(path)
    display = aliases.get(family_of(path))
    if not display:
        return None
    weight = weight_of(path)
    return f"{display}-{weight}" if weight else display


@dataclass(frozen=True, slots=True)
class FontDescriptor:
    """Identify one font file and the alias it is registered under."""

    path: Path
    alias: str

    @classmethod
    def from_path(cls, path: str | Path, aliases: Mapping[str, str]) -> FontDescriptor:
        """Build a descriptor, falling back to the file stem when no alias exists."""
        path = Path(path)
        return cls(path=path, alias=font_alias(path, aliases) or path.stem)

    @property
    def weight(self) -> str | None:
        return weight_of(self.path)

    def __str__(self) -> str:
        return self.alias


@dataclass(frozen=True, slots=True)
class FontChain:
    """Ordered fallback fonts, most preferred first."""

    fonts: tuple[FontDescriptor, ...] = ()

    @classmethod
    def of(cls, fonts: Iterable[FontDescriptor]) -> FontChain:
        return cls(tuple(fonts))

    @property
    def first(self) -> FontDescriptor | None:
        return self.fonts[0] if self.fonts else None

    def __iter__(self) -> Iterator[FontDescriptor]:
        return iter(self.fonts)

    def __len__(self) -> int:
        return len(self.fonts)

    def __getitem__(self, index: int) -> FontDescriptor:
        return self.fonts[index]

    def __bool__(self) -> bool:
        return bool(self.fonts)


__all__ = [
    "FontChain",
    "FontDescriptor",
    "FontWeight",
    "family_of",
    "font_alias",
    "weight_of",
]
