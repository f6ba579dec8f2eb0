from __future__ import annotations

import pytest

from postertype.exceptions import LayoutError
from postertype.layout.columns import ColumnPacker, add_indexes


def _tenfold(item: str) -> int:
    return len(item) * 10


def test_all_items_kept_when_they_fit() -> None:
    tracks = ["Intro", "Blue", "Nightfall", "Outro", "Reprise", "Coda", "Hidden"]
    layout = ColumnPacker(_tenfold).pack(
        tracks, max_rows=5, spacing=70, max_total_width=2040
    )
    assert layout.grid == [tracks[:5], tracks[5:]]
    assert layout.widths == [90, 60]
    assert layout.total_width == 90 + 60 + 70
    assert layout.total_width <= 2040
    assert layout.dropped == []


def test_index_prefix_numbers_column_major() -> None:
    layout = ColumnPacker(_tenfold).pack(
        ["Alpha", "Beta", "Gamma"],
        max_rows=5,
        spacing=0,
        max_total_width=500,
        index_width=40,
        with_index=True,
    )
    assert layout.grid == [["1. Alpha", "2. Beta", "3. Gamma"]]
    # Widths are computed on the bare names plus the index allowance.
    assert layout.widths == [90]


def test_index_width_ignored_without_indexing() -> None:
    layout = ColumnPacker(_tenfold).pack(
        ["Alpha"], max_rows=5, spacing=0, max_total_width=500, index_width=40
    )
    assert layout.grid == [["Alpha"]]
    assert layout.widths == [50]


def test_longest_item_of_widest_column_is_dropped() -> None:
    layout = ColumnPacker(_tenfold).pack(
        ["aaaa", "b", "cc", "dddddd"], max_rows=2, spacing=0, max_total_width=70
    )
    assert layout.grid == [["aaaa", "b"], ["cc"]]
    assert layout.widths == [40, 20]
    assert layout.dropped == ["dddddd"]


def test_ties_remove_first_column_and_first_string() -> None:
    layout = ColumnPacker(_tenfold).pack(
        ["xx", "yy", "zz", "ww"], max_rows=2, spacing=0, max_total_width=30
    )
    assert layout.grid == [["zz", "ww"]]
    assert layout.dropped == ["xx", "yy"]


def test_items_reflow_after_each_removal() -> None:
    layout = ColumnPacker(_tenfold).pack(
        ["a", "bbbbbbbb", "c", "d", "e"], max_rows=2, spacing=10, max_total_width=40
    )
    # Once "bbbbbbbb" is gone the survivors are re-partitioned from scratch.
    assert layout.grid == [["a", "c"], ["d", "e"]]
    assert layout.total_width == 30


def test_duplicate_titles_survive_independently() -> None:
    layout = ColumnPacker(_tenfold).pack(
        ["Song", "Song", "Song"], max_rows=1, spacing=0, max_total_width=80
    )
    assert layout.grid == [["Song"], ["Song"]]
    assert layout.dropped == ["Song"]


def test_oversized_items_shrink_to_empty_layout() -> None:
    layout = ColumnPacker(_tenfold).pack(
        ["x" * 100, "y" * 200], max_rows=5, spacing=70, max_total_width=100
    )
    assert layout.columns == []
    assert layout.widths == []
    assert layout.total_width == 0
    assert layout.dropped == ["x" * 100, "y" * 200]


def test_index_allowance_alone_can_exceed_width() -> None:
    layout = ColumnPacker(_tenfold).pack(
        ["a", "b"], max_rows=1, spacing=0, max_total_width=50, index_width=100, with_index=True
    )
    assert layout.grid == []


def test_each_item_is_measured_once() -> None:
    calls: list[str] = []

    def measure(item: str) -> int:
        calls.append(item)
        return len(item) * 10

    ColumnPacker(measure).pack(
        ["aaaa", "b", "cc", "dddddd"], max_rows=2, spacing=0, max_total_width=10
    )
    assert calls == ["aaaa", "b", "cc", "dddddd"]


def test_layout_unpacks_as_grid_and_widths() -> None:
    grid, widths = ColumnPacker(_tenfold).pack(
        ["ab", "c"], max_rows=1, spacing=5, max_total_width=100
    )
    assert grid == [["ab"], ["c"]]
    assert widths == [20, 10]


def test_empty_input() -> None:
    layout = ColumnPacker(_tenfold).pack([], max_rows=5, spacing=70, max_total_width=100)
    assert layout.grid == []
    assert layout.dropped == []


@pytest.mark.parametrize(
    ("max_rows", "spacing", "index_width"),
    [(0, 0, 0), (-1, 0, 0), (5, -1, 0), (5, 0, -3)],
)
def test_invalid_arguments_raise(max_rows, spacing, index_width) -> None:
    with pytest.raises(LayoutError):
        ColumnPacker(_tenfold).pack(
            ["a"],
            max_rows=max_rows,
            spacing=spacing,
            max_total_width=100,
            index_width=index_width,
        )


def test_add_indexes_continues_across_columns() -> None:
    assert add_indexes([["a", "b"], ["c"]]) == [["1. a", "2. b"], ["3. c"]]
