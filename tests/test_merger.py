"""Tests for the merge policy."""

from __future__ import annotations

import pytest

from aggregator.grouping.merger import AggregateMerger
from aggregator.grouping.partition import PartitionStore
from tests.conftest import BLACK, DARK_RED, GREEN, RED, check_partition, make_clusters


def _store(labels, colors) -> PartitionStore:
    return PartitionStore.from_clusters(make_clusters(labels, colors))


class TestShouldMerge:
    # deviation 1.0, min_size 64 -> tiers at areas 4, 16, 64, 256
    @pytest.fixture
    def merger(self):
        return AggregateMerger(deviation=1.0, min_size=64)

    @pytest.mark.parametrize(
        "area,diff,expected",
        [
            (3, 100.0, True),     # tiny fragment, any color
            (4, 100.0, False),
            (10, 0.9, True),      # diff < D, area < M
            (10, 1.5, True),      # diff < 2D, area < M/4
            (20, 1.5, False),
            (100, 0.4, True),     # diff < D/2, area < 4M
            (300, 0.4, False),
            (10000, 0.2, True),   # diff < D/4, any size
            (10000, 0.25, False),
        ],
    )
    def test_tiers(self, merger, area, diff, expected):
        assert merger.should_merge(area, diff) is expected


class TestRank:
    def test_closest_color_first(self):
        # ids: black 1, red 2, dark red 3
        store = _store([[0, 1, 2]], {0: BLACK, 1: RED, 2: DARK_RED})
        votes = AggregateMerger().rank(store, 2)
        assert [v[0] for v in votes] == [3, 1]
        assert votes[1] == (1, 20000)

    def test_ties_keep_lower_id(self):
        store = _store([[0, 1, 2]], {0: GREEN, 1: RED, 2: GREEN})
        votes = AggregateMerger().rank(store, 2)
        assert [v[0] for v in votes] == [1, 3]
        assert votes[0][1] == votes[1][1]


class TestDecide:
    def test_isolated_aggregate_never_merges(self):
        store = _store([[0, 0], [0, 0]], {0: RED})
        merger = AggregateMerger(deviation=100.0, min_size=1 << 20)
        assert merger.decide(store, 1) is None

    def test_empty_aggregate_skipped(self):
        store = _store([[0, 1]], {0: RED, 1: DARK_RED})
        store.merge_into(1, 2)
        assert AggregateMerger().decide(store, 1) is None

    def test_large_dissimilar_kept(self):
        labels = [[0] * 4 + [1] * 4 for _ in range(4)]
        store = _store(labels, {0: RED, 1: GREEN})
        merger = AggregateMerger(deviation=1.0, min_size=4)
        assert merger.decide(store, 1) is None

    def test_apply_merges_into_best(self):
        store = _store([[0, 1, 2]], {0: BLACK, 1: RED, 2: DARK_RED})
        merger = AggregateMerger(deviation=1.0, min_size=64)
        assert merger.apply(store, 2) == 3
        assert store.area(2) == 0
        assert store.area(3) == 2
        assert store.get(3).color == DARK_RED
        check_partition(store)

    def test_apply_without_merge_leaves_store(self):
        store = _store([[0, 0], [0, 0]], {0: RED})
        assert AggregateMerger().apply(store, 1) is None
        assert store.area(1) == 4
