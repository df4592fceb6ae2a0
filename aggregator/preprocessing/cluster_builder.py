"""Build a clustering result from an already flat-colored raster."""
import numpy as np
from skimage.measure import label

from ..clusters import Clusters
from ..utils.logger import get_logger

logger = get_logger(__name__)


def to_rgb(image: np.ndarray) -> np.ndarray:
    """Coerce grayscale or RGBA input to an (h, w, 3) uint8 array."""
    image = np.asarray(image)
    if image.ndim == 2:
        image = np.stack([image] * 3, axis=-1)
    if image.shape[-1] == 4:
        image = image[..., :3]
    return image.astype(np.uint8)


def build_clusters(image: np.ndarray, connectivity: int = 1) -> Clusters:
    """
    Label connected runs of identical color as clusters.

    Args:
        image: (h, w, 3) RGB raster, typically a quantized image.
        connectivity: 1 for 4-connected regions, 2 for 8-connected.

    Returns:
        Clusters with one cluster per connected component.
    """
    rgb = to_rgb(image)
    packed = (
        (rgb[..., 0].astype(np.int64) << 16)
        | (rgb[..., 1].astype(np.int64) << 8)
        | rgb[..., 2].astype(np.int64)
    )

    # background=-1 so black pixels are labelled like any other color
    labels = label(packed, background=-1, connectivity=connectivity)

    flat_labels = labels.ravel()
    _, first = np.unique(flat_labels, return_index=True)
    flat_rgb = rgb.reshape(-1, 3)
    colors = {
        int(flat_labels[i]): tuple(int(c) for c in flat_rgb[i]) for i in first
    }

    clusters = Clusters.from_label_map(labels, colors)
    logger.info(
        f"Found {len(clusters)} clusters in {rgb.shape[1]}x{rgb.shape[0]} image"
    )
    return clusters
