"""
Circular tag cloud layout.

Rectangles of given sizes are placed one by one around a center point along
an outward spiral, so that none of them overlap and the cloud stays round.
"""
from tagcloud.model import Point, Size, Rectangle, SpiralPointSequence, CircularCloudLayouter

__all__ = [
    "Point",
    "Size",
    "Rectangle",
    "SpiralPointSequence",
    "CircularCloudLayouter",
]
