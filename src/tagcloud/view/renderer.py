"""
Cloud Renderer
==============
Draws placed rectangles with matplotlib so a layout can be inspected by eye.

The y axis is inverted to match the screen coordinates used by the layouter
(origin at the top-left corner of each rectangle).
"""
from __future__ import annotations

import logging
import os
from datetime import datetime
from typing import Iterable, Optional, TYPE_CHECKING

import matplotlib.pyplot as plt
from matplotlib import patches

from tagcloud.model.geometry_primitives import Point, Rectangle

if TYPE_CHECKING:
    from matplotlib.figure import Figure

logger = logging.getLogger(__name__)


def render_rectangles(
    rectangles: Iterable[Rectangle],
    path: Optional[str] = None,
    *,
    center: Optional[Point] = None,
    title: Optional[str] = None
) -> Figure:
    """
    Plot the rectangles and optionally save the picture.

    Args:
        rectangles: Placed rectangles, drawn in the given order.
        path: Where to save the image. The format follows the file extension.
            Missing parent directories are created.
        center: If given, the layout center is marked with a cross.
        title: Plot title. Defaults to a timestamp.

    Returns:
        The matplotlib figure. The caller owns it and should close it.
    """
    rectangles = list(rectangles)

    plt.rcParams["figure.constrained_layout.use"] = True
    fig, ax = plt.subplots(figsize=(8, 8))

    cmap = plt.get_cmap("viridis", max(len(rectangles), 1))
    for i, rectangle in enumerate(rectangles):
        ax.add_patch(patches.Rectangle(
            (rectangle.left, rectangle.top),
            rectangle.width,
            rectangle.height,
            facecolor=cmap(i),
            edgecolor='black',
            lw=0.5,
            alpha=0.8,
        ))

    if center is not None:
        ax.plot(center.x, center.y, 'r+', markersize=12)

    if rectangles:
        left = min(r.left for r in rectangles)
        right = max(r.right for r in rectangles)
        top = min(r.top for r in rectangles)
        bottom = max(r.bottom for r in rectangles)
        margin = max(right - left, bottom - top, 1) * 0.05
        ax.set_xlim(left - margin, right + margin)
        ax.set_ylim(bottom + margin, top - margin)
    else:
        ax.invert_yaxis()

    ax.set_aspect('equal')
    ax.grid(visible=True, which='major', axis='both', linestyle=':', color='gray', lw=0.5)
    ax.set_title(title or f"{len(rectangles)} rectangles, {datetime.now().strftime('%d.%m.%Y %H:%M:%S')}")
    ax.set_xlabel("X")
    ax.set_ylabel("Y")

    if path:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        fig.savefig(path)
        logger.info(f"Tag cloud visualization saved to file <{path}>")

    return fig
