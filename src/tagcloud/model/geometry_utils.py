from __future__ import annotations

from typing import Iterable, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy import typing as npt

from tagcloud.model.geometry_primitives import Point, Rectangle


def bounds_array(rectangles: Iterable[Rectangle]) -> np.ndarray:
    """
    Stack rectangle bounds into an (N, 4) array of [left, top, right, bottom].

    Returns an empty (0, 4) array when there is nothing to stack.
    """
    rows = [rectangle.to_array() for rectangle in rectangles]
    if not rows:
        return np.empty((0, 4), dtype=np.int64)
    return np.vstack(rows)


def intersects_any(
    rectangle: Rectangle,
    bounds: npt.NDArray[np.int64]
) -> bool:
    """
    Test one rectangle against many at once.

    Args:
        rectangle: The candidate rectangle.
        bounds: Array of shape (N, 4) with rows [left, top, right, bottom].

    Returns:
        True if the candidate has a positive-area overlap with at least one row.
        Shared edges do not count, same as `Rectangle.intersects_with`.
    """
    if bounds.shape[0] == 0:
        return False

    overlap_x = np.minimum(bounds[:, 2], rectangle.right) - np.maximum(bounds[:, 0], rectangle.left)
    overlap_y = np.minimum(bounds[:, 3], rectangle.bottom) - np.maximum(bounds[:, 1], rectangle.top)
    return bool(np.any((overlap_x > 0) & (overlap_y > 0)))


def max_corner_distance(rectangles: Iterable[Rectangle], center: Point) -> float:
    """Largest distance from any rectangle corner to `center` (0.0 when empty)."""
    corners = [corner.to_array() for rectangle in rectangles for corner in rectangle.corners]
    if not corners:
        return 0.0
    offsets = np.vstack(corners) - center.to_array()
    return float(np.max(np.hypot(offsets[:, 0], offsets[:, 1])))
