"""Clustering result consumed by the aggregation stage."""
from dataclasses import dataclass, field
from typing import Dict, Iterator, List

import numpy as np

from .utils.color import Color


@dataclass
class Cluster:
    """One flat-color region produced by upstream segmentation."""

    indices: List[int]
    color: Color

    @property
    def area(self) -> int:
        return len(self.indices)

    def residue_color(self) -> Color:
        """Representative color of the cluster."""
        return self.color


@dataclass
class Clusters:
    """
    Partition of a width x height grid into clusters.

    ``cluster_indices`` maps every flat pixel index (``y * width + x``) to the
    position of its cluster in ``clusters``. Pixel lists are assumed disjoint
    and to cover the whole grid; the producer is responsible for that.
    """

    width: int
    height: int
    cluster_indices: np.ndarray
    clusters: List[Cluster] = field(default_factory=list)

    def __iter__(self) -> Iterator[Cluster]:
        return iter(self.clusters)

    def __len__(self) -> int:
        return len(self.clusters)

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @classmethod
    def from_label_map(cls, labels: np.ndarray, colors: Dict[int, Color]) -> "Clusters":
        """
        Build clusters from a 2-D label array.

        Args:
            labels: (height, width) integer array, one label per pixel.
            colors: Representative color for every label present.

        Returns:
            Clusters ordered by ascending label.
        """
        labels = np.asarray(labels)
        if labels.ndim != 2:
            raise ValueError(f"Expected a 2-D label map, got shape {labels.shape}")

        height, width = labels.shape
        unique, inverse = np.unique(labels.ravel(), return_inverse=True)
        inverse = inverse.ravel()

        # Group pixel indices by cluster position, keeping scan order inside
        order = np.argsort(inverse, kind="stable")
        bounds = np.cumsum(np.bincount(inverse, minlength=len(unique)))[:-1]

        clusters = []
        for label, pixels in zip(unique, np.split(order, bounds)):
            color = tuple(int(c) for c in colors[int(label)])
            clusters.append(Cluster(indices=pixels.tolist(), color=color))

        return cls(
            width=width,
            height=height,
            cluster_indices=inverse.astype(np.int64),
            clusters=clusters,
        )
