"""
Circular Cloud Layouter
=======================
Places rectangles one by one around a fixed center without overlaps.

How does it work?
-----------------
1. A new rectangle is first centered on the layout center.
2. While it overlaps something already placed, it is re-centered on the next
   point of the spiral.
3. The first free position wins and is committed.

The spiral is shared by all calls and never rewound: the center area fills up
first, so later rectangles continue from where the previous one stopped
instead of re-testing the crowded middle every time.

Classes:
    CircularCloudLayouter: The layout session.
"""
from __future__ import annotations

import logging
from typing import Optional, Tuple

from tagcloud.model.geometry_primitives import Point, Size, Rectangle
from tagcloud.model.geometry_utils import bounds_array, intersects_any
from tagcloud.model.spiral import SpiralPointSequence

logger = logging.getLogger(__name__)


class CircularCloudLayouter:
    """
    One layout session around `center`.

    Not thread-safe; use one instance per session.
    """

    def __init__(
        self,
        center: Point,
        angle_step: Optional[float] = None,
        spiral_scale: Optional[float] = None
    ) -> None:
        self._center = center
        self._rectangles: list[Rectangle] = []
        self._spiral = SpiralPointSequence(center, angle_step=angle_step, scale=spiral_scale)

    @property
    def center(self) -> Point:
        return self._center

    @property
    def rectangles(self) -> Tuple[Rectangle, ...]:
        """All placed rectangles in the order they were placed."""
        return tuple(self._rectangles)

    @property
    def spiral_steps(self) -> int:
        """Spiral points consumed by this session so far, across all calls."""
        return self._spiral.steps

    def __len__(self) -> int:
        return len(self._rectangles)

    def put_next_rectangle(self, size: Size) -> Rectangle:
        """
        Place a rectangle of `size` and return it.

        Raises:
            ValueError: If the width or the height is not an integer or is
                negative. The layout is left untouched in that case.
        """
        if not size.is_integral:
            msg = f"size width and height must be integers, got {size.width!r}x{size.height!r}"
            logger.warning(msg)
            raise ValueError(msg)
        if not size.is_valid:
            msg = f"size width and height must be non-negative, got {size.width}x{size.height}"
            logger.warning(msg)
            raise ValueError(msg)

        steps_before = self._spiral.steps
        bounds = bounds_array(self._rectangles)
        rectangle = Rectangle.centered_at(self._center, size)
        while intersects_any(rectangle, bounds):
            rectangle = Rectangle.centered_at(self._spiral.advance(), size)

        self._rectangles.append(rectangle)

        logger.debug(
            f"Placed #{len(self._rectangles)} {size.width}x{size.height} at ({rectangle.x}, {rectangle.y}) "
            f"after {self._spiral.steps - steps_before} spiral steps."
        )
        return rectangle
