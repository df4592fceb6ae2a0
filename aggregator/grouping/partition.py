"""Mutable pixel -> aggregate partition built from a clustering result."""
from dataclasses import dataclass, field
from typing import List

import numpy as np

from ..clusters import Clusters
from ..errors import AggregationContractError
from ..utils.color import Color, HSV, rgb_to_hsv
from ..utils.logger import get_logger

logger = get_logger(__name__)

# Reserved id: "no aggregate", also stands in for pixels outside the grid.
SENTINEL = 0


@dataclass
class Aggregate:
    """A region of pixels sharing one representative color."""

    indices: List[int] = field(default_factory=list)
    color: Color = (0, 0, 0)
    hsv: HSV = field(init=False)

    def __post_init__(self):
        self.hsv = rgb_to_hsv(*self.color)

    @property
    def area(self) -> int:
        return len(self.indices)


class PartitionStore:
    """
    Owns the partition array and the dense list of aggregates.

    Aggregates are addressed by integer id. Id 0 is an empty sentinel and
    real aggregates start at 1, one per input cluster in input order.
    Aggregates are never removed; a merged-away aggregate is left with an
    empty pixel list.
    """

    def __init__(self, width: int, height: int, clusters):
        self.width = int(width)
        self.height = int(height)
        self.indices = np.zeros(self.width * self.height, dtype=np.int64)
        self.aggregates: List[Aggregate] = [Aggregate()]

        for cluster in clusters:
            self.aggregates.append(
                Aggregate(indices=list(cluster.indices), color=tuple(cluster.residue_color()))
            )
            self.indices[cluster.indices] = len(self.aggregates) - 1

        logger.debug(
            f"Partition {self.width}x{self.height} with "
            f"{len(self.aggregates) - 1} aggregates"
        )

    @classmethod
    def from_clusters(cls, clusters: Clusters) -> "PartitionStore":
        return cls(clusters.width, clusters.height, clusters)

    def __len__(self) -> int:
        return len(self.aggregates)

    def get(self, index: int) -> Aggregate:
        return self.aggregates[index]

    def area(self, index: int) -> int:
        return self.aggregates[index].area

    def live_ids(self) -> List[int]:
        """Ids of aggregates that still own pixels, ascending."""
        return [i for i, agg in enumerate(self.aggregates) if agg.area > 0]

    def live_count(self) -> int:
        return sum(1 for agg in self.aggregates if agg.area > 0)

    def total_area(self) -> int:
        return sum(agg.area for agg in self.aggregates)

    def merge_into(self, source: int, destination: int):
        """
        Move every pixel of ``source`` into ``destination``.

        The destination keeps its color; the source is left empty.
        """
        if source == destination:
            raise AggregationContractError(f"Cannot merge aggregate {source} into itself")
        if destination == SENTINEL or source == SENTINEL:
            raise AggregationContractError("Cannot merge through the sentinel aggregate")

        src = self.aggregates[source]
        dst = self.aggregates[destination]

        self.indices[src.indices] = destination
        dst.indices.extend(src.indices)
        src.indices = []

    def render(self) -> np.ndarray:
        """
        Paint every live aggregate with its representative color.

        Returns:
            (height, width, 3) uint8 raster.
        """
        image = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        flat = image.reshape(-1, 3)
        for agg in self.aggregates:
            if agg.area == 0:
                continue
            flat[agg.indices] = agg.color
        return image
