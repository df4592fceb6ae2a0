"""Color conversion and comparison utilities using HSV color space."""
import colorsys
from typing import Tuple

Color = Tuple[int, int, int]
HSV = Tuple[float, float, float]

# Distances are scaled by this factor and truncated to ints before sorting.
DISTANCE_SCALE = 10000

HUE_WEIGHT = 1.5
VALUE_WEIGHT = 1.25
SATURATION_WEIGHT = 0.75


def rgb_to_hex(color: Color) -> str:
    r, g, b = color
    return f"#{r:02x}{g:02x}{b:02x}"


def rgb_to_hsv(r: int, g: int, b: int) -> HSV:
    """
    Convert 8-bit RGB to HSV.
    Every component is normalized to [0, 1]; hue wraps at 1.0.
    """
    h, s, v = colorsys.rgb_to_hsv(r / 255.0, g / 255.0, b / 255.0)
    return (h, s, v)


def hue_distance(h1: float, h2: float) -> float:
    """Circular distance between two hues in [0, 1); never exceeds 0.5."""
    d = abs(h1 - h2)
    if d < 0.5:
        return d
    return 1.0 - d


def hsv_diff(a: HSV, b: HSV) -> float:
    """Weighted HSV difference of two already-converted colors."""
    return (
        HUE_WEIGHT * hue_distance(a[0], b[0])
        + VALUE_WEIGHT * abs(a[2] - b[2])
        + SATURATION_WEIGHT * abs(a[1] - b[1])
    )


def color_diff_hsv(a: Color, b: Color) -> float:
    """
    Perceptual dissimilarity of two RGB colors.
    Values roughly mean:
    0 : identical
    < 0.25 : same color family, slight shade change
    0.5-1.0 : clearly different but related
    > 1.5 : unrelated colors (e.g. black against a saturated hue)
    """
    return hsv_diff(rgb_to_hsv(*a), rgb_to_hsv(*b))


def color_distance(a: Color, b: Color) -> int:
    """Integer sort key for :func:`color_diff_hsv`, scaled and truncated."""
    return int(DISTANCE_SCALE * color_diff_hsv(a, b))
