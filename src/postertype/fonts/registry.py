"""Font registry building per-weight fallback chains."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path

from postertype.fonts.descriptors import (
    FontChain,
    FontDescriptor,
    FontWeight,
    family_of,
    font_alias,
)
from postertype.fonts.logging import TypesetLogger


class FontRegistry:
    """Resolve the fallback chain used for each weight class.

    Default families live under ``font_dir`` as ``<Family>/<Family>-<Weight>.ttf``.
    Custom fonts registered afterwards are appended to the chains of the
    weight encoded in their file name, in registration order.
    """

    def __init__(
        self,
        font_dir: Path,
        *,
        families: Iterable[str],
        aliases: Mapping[str, str],
        logger: TypesetLogger | None = None,
    ) -> None:
        self.font_dir = font_dir
        self.families = tuple(families)
        self.aliases = dict(aliases)
        self.logger = logger or TypesetLogger()
        self._custom: list[FontDescriptor] = []

    @property
    def custom_fonts(self) -> tuple[FontDescriptor, ...]:
        return tuple(self._custom)

    def default_path(self, family: str, weight: FontWeight) -> Path:
        return self.font_dir / family / f"{family}-{weight}.ttf"

    def register(self, paths: Iterable[str | Path], aliases: Mapping[str, str]) -> list[FontDescriptor]:
        """Register custom font files and return the newly added descriptors.

        Each file must follow the ``Family-Weight.ttf`` naming pattern inside a
        directory named after the family, and ``aliases`` (merged with the
        known aliases) must provide a display name for that family.
        """
        self.aliases.update(aliases)
        added: list[FontDescriptor] = []
        known = {font.path for font in self._custom}
        for raw in paths:
            path = Path(raw)
            alias = font_alias(path, self.aliases)
            if alias is None:
                self.logger.warning("No alias provided for font family: %s", family_of(path))
                continue
            if path in known:
                continue
            descriptor = FontDescriptor(path=path, alias=alias)
            self._custom.append(descriptor)
            known.add(path)
            added.append(descriptor)
            self.logger.debug("Registered custom font '%s' from %s", alias, path)
        return added

    def chain(self, weight: FontWeight) -> FontChain:
        """Return the fallback chain for ``weight``."""
        fonts = [
            FontDescriptor.from_path(self.default_path(family, weight), self.aliases)
            for family in self.families
        ]
        suffix = f"-{weight}.ttf"
        fonts.extend(font for font in self._custom if font.path.name.endswith(suffix))
        return FontChain.of(fonts)


__all__ = ["FontRegistry"]
