"""Column-major packing of track lists under a maximum width.

The packer is not a general bin-packer: the row cap is fixed and columns are
filled top to bottom. When the columns do not fit, the longest string of the
widest column is dropped and the remaining items are re-partitioned from
scratch. Callers must treat the returned layout, not their input, as the list
of items that will be rendered.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from postertype.exceptions import LayoutError
from postertype.fonts.logging import TypesetLogger


@dataclass(slots=True)
class Column:
    items: list[str]
    width: int


@dataclass(slots=True)
class ColumnLayout:
    """Accepted partition of the items, left to right."""

    columns: list[Column]
    spacing: int
    dropped: list[str] = field(default_factory=list)

    @property
    def widths(self) -> list[int]:
        return [column.width for column in self.columns]

    @property
    def grid(self) -> list[list[str]]:
        return [list(column.items) for column in self.columns]

    @property
    def items(self) -> list[str]:
        return [item for column in self.columns for item in column.items]

    @property
    def total_width(self) -> int:
        if not self.columns:
            return 0
        return sum(self.widths) + self.spacing * (len(self.columns) - 1)

    def __iter__(self):
        # Unpacks as ``grid, widths``.
        return iter((self.grid, self.widths))


def add_indexes(grid: list[list[str]]) -> list[list[str]]:
    """Prefix every item with its 1-based position, column after column."""
    index = 1
    numbered: list[list[str]] = []
    for column in grid:
        entries = []
        for item in column:
            entries.append(f"{index}. {item}")
            index += 1
        numbered.append(entries)
    return numbered


def _longest(positions: Sequence[int], items: Sequence[str]) -> int:
    best = 0
    for offset, position in enumerate(positions):
        if len(items[position]) > len(items[positions[best]]):
            best = offset
    return best


class ColumnPacker:
    """Shrink a list of strings until its columns fit a maximum width."""

    def __init__(
        self,
        measure: Callable[[str], int],
        *,
        logger: TypesetLogger | None = None,
    ) -> None:
        self.measure = measure
        self.logger = logger or TypesetLogger()

    def pack(
        self,
        items: Sequence[str],
        *,
        max_rows: int,
        spacing: int,
        max_total_width: int,
        index_width: int = 0,
        with_index: bool = False,
    ) -> ColumnLayout:
        if max_rows < 1:
            raise LayoutError(f"max_rows must be at least 1, got {max_rows}")
        if spacing < 0 or index_width < 0:
            raise LayoutError("spacing and index_width cannot be negative")

        items = list(items)
        widths = [self.measure(item) for item in items]
        extra = index_width if with_index else 0
        # Positions into ``items``; removals never reorder the survivors.
        working = list(range(len(items)))

        while True:
            chunks = [working[i : i + max_rows] for i in range(0, len(working), max_rows)]
            column_widths = [max(widths[p] for p in chunk) + extra for chunk in chunks]
            total = sum(column_widths) + spacing * (len(chunks) - 1)
            # Every chunk is non-empty, so an empty working list is the only stop
            # besides fitting.
            if not chunks or total <= max_total_width:
                break

            widest = column_widths.index(max(column_widths))
            offset = _longest(chunks[widest], items)
            del working[widest * max_rows + offset]

        kept = set(working)
        dropped = [item for position, item in enumerate(items) if position not in kept]
        if dropped:
            self.logger.debug(
                "Track list shrunk to fit %spx: dropped %s item(s): %s",
                max_total_width,
                len(dropped),
                ", ".join(dropped),
            )

        grid = [[items[p] for p in chunk] for chunk in chunks]
        if with_index:
            grid = add_indexes(grid)
        columns = [Column(items=entries, width=width) for entries, width in zip(grid, column_widths)]
        return ColumnLayout(columns=columns, spacing=spacing, dropped=dropped)


__all__ = ["Column", "ColumnLayout", "ColumnPacker", "add_indexes"]
