"""4-connected neighbour discovery over the partition grid."""
from typing import List

import numpy as np

from .partition import PartitionStore, SENTINEL


def neighbours_of(store: PartitionStore, index: int) -> List[int]:
    """
    Find aggregates touching ``index`` along an edge.

    Every owned pixel looks up, down, left and right. Neighbours outside the
    grid count as the sentinel and are dropped, as is the aggregate itself.

    Returns:
        Distinct neighbour ids in ascending order.
    """
    pixels = store.get(index).indices
    if not pixels:
        return []

    width, height = store.width, store.height
    partition = store.indices
    last = partition.size - 1

    px = np.asarray(pixels, dtype=np.int64)
    x = px % width
    y = px // width

    # Clamp before the lookup; out-of-grid results are masked to the sentinel
    up = np.where(y > 0, partition[np.maximum(px - width, 0)], SENTINEL)
    down = np.where(y < height - 1, partition[np.minimum(px + width, last)], SENTINEL)
    left = np.where(x > 0, partition[np.maximum(px - 1, 0)], SENTINEL)
    right = np.where(x < width - 1, partition[np.minimum(px + 1, last)], SENTINEL)

    found = np.unique(np.concatenate([up, down, left, right]))
    found = found[(found != SENTINEL) & (found != index)]
    return [int(i) for i in found]
