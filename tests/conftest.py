"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from aggregator.clusters import Clusters


RED = (255, 0, 0)
DARK_RED = (200, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


def make_clusters(labels, colors) -> Clusters:
    """Build clusters from a nested list of labels and a label -> color map."""
    return Clusters.from_label_map(np.array(labels), colors)


def check_partition(store) -> None:
    """Every pixel is owned by exactly one live aggregate that lists it."""
    n = store.width * store.height
    owned = []
    for agg_id, agg in enumerate(store.aggregates):
        if agg.area == 0:
            continue
        assert agg_id != 0
        assert np.all(store.indices[agg.indices] == agg_id)
        owned.extend(agg.indices)
    assert sorted(owned) == list(range(n))


@pytest.fixture
def three_pixels() -> Clusters:
    # 3x1 image, one single-pixel cluster per pixel
    return make_clusters([[0, 1, 2]], {0: RED, 1: DARK_RED, 2: BLUE})


@pytest.fixture
def noisy_clusters() -> Clusters:
    rng = np.random.RandomState(0)
    labels = rng.randint(0, 12, size=(12, 12))
    palette = {
        i: (int(r), int(g), int(b))
        for i, (r, g, b) in enumerate(rng.randint(0, 256, size=(12, 3)))
    }
    return make_clusters(labels, palette)
