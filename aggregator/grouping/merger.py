"""Absorb small or color-similar aggregates into their closest neighbour."""
from typing import List, Optional, Tuple

from .neighbours import neighbours_of
from .partition import PartitionStore
from ..utils.color import DISTANCE_SCALE, hsv_diff, rgb_to_hex
from ..utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_DEVIATION = 1.0
DEFAULT_MIN_SIZE = 64 * 64


class AggregateMerger:
    """
    Decide, one aggregate at a time, whether it merges into a neighbour.

    The best candidate is the neighbour with the lowest color distance.
    Looser color tolerance applies to smaller aggregates, and near-identical
    colors merge whatever their size.
    """

    def __init__(self, deviation: float = DEFAULT_DEVIATION, min_size: int = DEFAULT_MIN_SIZE):
        self.deviation = float(deviation)
        self.min_size = int(min_size)

    def rank(self, store: PartitionStore, index: int) -> List[Tuple[int, int]]:
        """
        Score every neighbour of ``index``.

        Returns:
            (neighbour id, scaled distance) pairs, closest first. Ties keep
            the lower id first.
        """
        myself = store.get(index)
        votes = [
            (other, int(DISTANCE_SCALE * hsv_diff(myself.hsv, store.get(other).hsv)))
            for other in neighbours_of(store, index)
        ]
        votes.sort(key=lambda v: v[1])
        return votes

    def should_merge(self, area: int, diff: float) -> bool:
        """Size/similarity tiers; any one of them is enough."""
        d, m = self.deviation, self.min_size
        return (
            area < m // 16
            or (diff < d and area < m)
            or (diff < d * 2.0 and area < m // 4)
            or (diff < d / 2.0 and area < m * 4)
            or diff < d / 4.0
        )

    def decide(self, store: PartitionStore, index: int) -> Optional[int]:
        """Return the id ``index`` should merge into, or None to keep it."""
        area = store.area(index)
        if area == 0:
            return None

        votes = self.rank(store, index)
        if not votes:
            return None

        best, score = votes[0]
        if best == index:
            return None

        diff = score / DISTANCE_SCALE
        if self.should_merge(area, diff):
            return best
        return None

    def apply(self, store: PartitionStore, index: int) -> Optional[int]:
        """Run the policy for ``index`` and perform the merge if it fires."""
        target = self.decide(store, index)
        if target is not None:
            logger.debug(
                f"Merging aggregate {index} ({rgb_to_hex(store.get(index).color)}, "
                f"area {store.area(index)}) into {target} "
                f"({rgb_to_hex(store.get(target).color)})"
            )
            store.merge_into(index, target)
        return target
