"""
The MODEL layer contains pure data structures and the layout algorithm.
It has NO knowledge of the rendering (matplotlib).
It deals with Geometry, the Spiral and Placement.
"""
from tagcloud.model.geometry_primitives import Point, Size, Rectangle
from tagcloud.model.spiral import SpiralPointSequence
from tagcloud.model.layouter import CircularCloudLayouter

__all__ = [
    "Point",
    "Size",
    "Rectangle",
    "SpiralPointSequence",
    "CircularCloudLayouter",
]
