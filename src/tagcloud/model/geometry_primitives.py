"""
Geometric Primitives for the Cloud Layout.

All coordinates are integers in screen orientation: x grows to the right,
y grows downwards, so the origin of a Rectangle is its top-left corner.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, TYPE_CHECKING
import numbers
import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Point:
    """A point on the integer grid."""
    x: int
    y: int

    def to_array(self) -> npt.NDArray[np.int64]:
        return np.array([self.x, self.y], dtype=np.int64)


@dataclass(frozen=True)
class Size:
    """
    Width and height of a rectangle.

    Negative values are representable on purpose; the layouter is the one
    that rejects them.
    """
    width: int
    height: int

    @property
    def is_valid(self) -> bool:
        return self.width >= 0 and self.height >= 0

    @property
    def is_integral(self) -> bool:
        """Both dimensions are integers (bools excluded)."""
        return all(
            isinstance(v, numbers.Integral) and not isinstance(v, bool)
            for v in (self.width, self.height)
        )


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle given by its top-left corner and its size."""
    origin: Point
    size: Size

    @classmethod
    def centered_at(cls, center: Point, size: Size) -> Rectangle:
        """
        Build a rectangle whose geometric center is `center`.

        Half sizes use floor division on both axes, so odd dimensions put the
        extra unit on the right/bottom side.
        """
        origin = Point(center.x - size.width // 2, center.y - size.height // 2)
        return cls(origin=origin, size=size)

    @property
    def x(self) -> int:
        return self.origin.x

    @property
    def y(self) -> int:
        return self.origin.y

    @property
    def width(self) -> int:
        return self.size.width

    @property
    def height(self) -> int:
        return self.size.height

    @property
    def left(self) -> int:
        return self.origin.x

    @property
    def top(self) -> int:
        return self.origin.y

    @property
    def right(self) -> int:
        return self.origin.x + self.size.width

    @property
    def bottom(self) -> int:
        return self.origin.y + self.size.height

    @property
    def corners(self) -> Tuple[Point, Point, Point, Point]:
        """Vertices in order: top-left, top-right, bottom-left, bottom-right."""
        return (
            Point(self.left, self.top),
            Point(self.right, self.top),
            Point(self.left, self.bottom),
            Point(self.right, self.bottom),
        )

    def intersects_with(self, other: Rectangle) -> bool:
        """
        True if the two rectangles share an area.

        The overlap has to be positive on both axes: touching edges and
        degenerate (zero width or height) rectangles never intersect.
        """
        overlap_x = min(self.right, other.right) - max(self.left, other.left)
        overlap_y = min(self.bottom, other.bottom) - max(self.top, other.top)
        return overlap_x > 0 and overlap_y > 0

    def to_array(self) -> npt.NDArray[np.int64]:
        """Bounds as [left, top, right, bottom]."""
        return np.array([self.left, self.top, self.right, self.bottom], dtype=np.int64)
