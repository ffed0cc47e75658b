"""
Archimedean Spiral of Candidate Points.

The radius grows linearly with the angle (r = k * phi), so successive points
wind outwards from the center. The cursor only moves forward; a fresh spiral
needs a fresh instance.
"""
from __future__ import annotations

import math
from typing import Optional, Iterator

from tagcloud.config import DEFAULT_ANGLE_STEP, DEFAULT_SPIRAL_SCALE
from tagcloud.model.geometry_primitives import Point


class SpiralPointSequence:
    """
    Endless, deterministic sequence of points spiraling out of `center`.

    Args:
        center: Point the spiral starts from.
        angle_step: Angle added on every advance (radians). Smaller values give
            denser turns.
        scale: Radius gained per radian. Smaller values give tighter turns.
    """

    def __init__(
        self,
        center: Point,
        angle_step: Optional[float] = None,
        scale: Optional[float] = None
    ) -> None:
        angle_step = DEFAULT_ANGLE_STEP if angle_step is None else angle_step
        scale = DEFAULT_SPIRAL_SCALE if scale is None else scale
        if angle_step <= 0.0:
            raise ValueError(f"Spiral angle step must be positive, got {angle_step}.")
        if scale <= 0.0:
            raise ValueError(f"Spiral scale must be positive, got {scale}.")

        self._center = center
        self._angle_step = angle_step
        self._scale = scale
        self._phi = 0.0
        self._steps = 0

    @property
    def steps(self) -> int:
        """Number of points produced so far."""
        return self._steps

    def advance(self) -> Point:
        """Move the cursor one step along the spiral and return the new point."""
        self._steps += 1
        # Recomputed from the step count so rounding does not accumulate.
        self._phi = self._steps * self._angle_step
        radius = self._scale * self._phi
        x = self._center.x + math.floor(radius * math.cos(self._phi))
        y = self._center.y + math.floor(radius * math.sin(self._phi))
        return Point(x, y)

    def __iter__(self) -> Iterator[Point]:
        return self

    def __next__(self) -> Point:
        return self.advance()
