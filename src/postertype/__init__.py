"""Typesetting and layout engine for music posters."""

from postertype.config import LayoutSizes, TypesetConfig, load_config
from postertype.engine import Typesetter
from postertype.exceptions import ConfigurationError, FontLoadError, LayoutError, TypesetError
from postertype.fonts import FontChain, FontDescriptor, FontResourceCache
from postertype.layout import ColumnLayout, TextRun
from postertype.utils import poster_filename
from postertype.version import get_version


__version__ = get_version()

__all__ = [
    "ColumnLayout",
    "ConfigurationError",
    "FontChain",
    "FontDescriptor",
    "FontLoadError",
    "FontResourceCache",
    "LayoutError",
    "LayoutSizes",
    "TextRun",
    "TypesetConfig",
    "TypesetError",
    "Typesetter",
    "__version__",
    "load_config",
    "poster_filename",
]
