"""Configuration models used by the typesetting engine.

LayoutSizes

`heading` (`int`)
: Starting pixel size of the poster heading before it is shrunk to fit.

`heading_width` (`int`)
: Maximum pixel width the heading may occupy.

`artist`, `duration`, `lyrics`, `label` (`int`)
: Pixel sizes of the secondary text blocks.

`tracks` (`int`)
: Pixel size of the track list.

`max_rows` (`int`)
: Number of tracks stacked in a column before a new column starts.

`max_width` (`int`)
: Maximum pixel width of the whole track list, spacing included.

`spacing` (`int`)
: Horizontal gap between track-list columns.

TypesetConfig

`font_dir` (`Path | None`)
: Directory holding one sub-directory per family, each containing
  `Family-Weight.ttf` files. The `POSTERTYPE_FONT_DIR` environment variable
  takes precedence when set.

`families` (`list[str]`)
: Default fallback families, most preferred first.

`aliases` (`dict[str, str]`)
: Display names keyed by family directory name, used to register fonts with
  the rendering backend.

`sizes` (`LayoutSizes`)
: Layout constants.

`verbose` (`bool`)
: Emit debug messages (coverage failures, dropped tracks, ...).
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
import yaml

from postertype.exceptions import ConfigurationError


FONT_DIR_ENV = "POSTERTYPE_FONT_DIR"

DEFAULT_FAMILIES = ("Oswald", "NotoSansJP", "NotoSansKR", "NotoSans")

DEFAULT_ALIASES: dict[str, str] = {
    "Oswald": "Oswald",
    "NotoSansJP": "Noto Sans JP",
    "NotoSansKR": "Noto Sans KR",
    "NotoSansTC": "Noto Sans TC",
    "NotoSansSC": "Noto Sans SC",
    "NotoSansBengali": "Noto Sans Bengali",
    "NotoSans": "Noto Sans",
}


class LayoutSizes(BaseModel):
    """Pixel sizes and limits of the poster layout."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    heading: int = Field(default=160, gt=0)
    heading_width: int = Field(default=1760, gt=0)
    artist: int = Field(default=110, gt=0)
    duration: int = Field(default=90, gt=0)
    lyrics: int = Field(default=95, gt=0)
    label: int = Field(default=60, gt=0)
    tracks: int = Field(default=83, gt=0)
    max_rows: int = Field(default=5, gt=0)
    max_width: int = Field(default=2040, gt=0)
    spacing: int = Field(default=70, ge=0)


class TypesetConfig(BaseModel):
    """Top-level configuration of a typesetting session."""

    model_config = ConfigDict(extra="forbid")

    font_dir: Path | None = None
    families: list[str] = Field(default_factory=lambda: list(DEFAULT_FAMILIES))
    aliases: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_ALIASES))
    sizes: LayoutSizes = Field(default_factory=LayoutSizes)
    verbose: bool = False

    def resolved_font_dir(self) -> Path:
        """Return the font directory, honouring the environment override."""
        override = os.environ.get(FONT_DIR_ENV)
        if override:
            return Path(override).expanduser()
        if self.font_dir is not None:
            return self.font_dir.expanduser()
        return Path(__file__).resolve().parent / "assets" / "fonts"


def parse_config(payload: dict[str, Any] | None) -> TypesetConfig:
    """Validate a raw mapping into a :class:`TypesetConfig`."""
    try:
        config = TypesetConfig.model_validate(payload or {})
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid typesetting configuration: {exc}") from exc
    # User aliases extend the defaults rather than replacing them.
    merged = dict(DEFAULT_ALIASES)
    merged.update(config.aliases)
    config.aliases = merged
    return config


def load_config(path: Path) -> TypesetConfig:
    """Read a YAML configuration file."""
    try:
        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Unable to read configuration file {path}: {exc}") from exc
    if payload is not None and not isinstance(payload, dict):
        raise ConfigurationError(f"Configuration file {path} must contain a mapping.")
    return parse_config(payload)


__all__ = [
    "DEFAULT_ALIASES",
    "DEFAULT_FAMILIES",
    "FONT_DIR_ENV",
    "LayoutSizes",
    "TypesetConfig",
    "load_config",
    "parse_config",
]
