"""Miscellaneous helpers for poster output."""

from __future__ import annotations

import random
import re


_ILLEGAL = re.compile(r'[<>:"/\\|?*\x00-\x1F\x7F]')
_EDGE_DOTS = re.compile(r"^\.+|\.+$")
_REPEATED_UNDERSCORES = re.compile(r"_{2,}")

MAX_FILENAME = 255


def poster_filename(song: str, artist: str, *, suffix: str | None = None) -> str:
    """Return a filesystem-safe PNG name such as ``blue_by_the_band_3fa.png``.

    ``suffix`` defaults to three random hexadecimal digits so repeated renders
    of the same track do not overwrite each other.
    """
    safe = _ILLEGAL.sub("_", f"{song} by {artist}").strip()
    safe = _EDGE_DOTS.sub("", safe).lower().replace(" ", "_")
    safe = _REPEATED_UNDERSCORES.sub("_", safe, count=1)
    safe = safe[:MAX_FILENAME]
    if suffix is None:
        suffix = "".join(random.choice("0123456789abcdef") for _ in range(3))
    return f"{safe}_{suffix}.png"


__all__ = ["poster_filename"]
