"""
Demo Application
================
Lays out a reproducible batch of random rectangles and saves a picture.

Why is this file needed?
------------------------
It wires the pieces together the way a real tag cloud tool would:
1. Sets up logging.
2. Produces sizes (here random, normally measured from rendered words).
3. Feeds them to the layouter one by one.
4. Hands the result to the renderer.
"""
import logging
from typing import List, Optional

import matplotlib.pyplot as plt
import numpy as np

from tagcloud.config import (
    DEFAULT_CENTER, DEFAULT_IMAGE_PATH, DEFAULT_LOG_NAME, DEMO_RECTANGLE_COUNT, DEMO_MIN_SIZE, DEMO_MAX_SIZE, DEMO_SEED
)
from tagcloud.logging_config import setup_logging
from tagcloud.model.geometry_primitives import Point, Size, Rectangle
from tagcloud.model.geometry_utils import max_corner_distance
from tagcloud.model.layouter import CircularCloudLayouter
from tagcloud.view.renderer import render_rectangles

logger = logging.getLogger(__name__)


def generate_sizes(
    count: int,
    min_size: tuple[int, int] = DEMO_MIN_SIZE,
    max_size: tuple[int, int] = DEMO_MAX_SIZE,
    seed: Optional[int] = DEMO_SEED
) -> List[Size]:
    """
    Random sizes, larger ones first, like words sorted by frequency.

    Bounds are inclusive. The same seed always gives the same list.
    """
    rng = np.random.default_rng(seed)
    widths = rng.integers(min_size[0], max_size[0], size=count, endpoint=True)
    heights = rng.integers(min_size[1], max_size[1], size=count, endpoint=True)
    sizes = [Size(int(w), int(h)) for w, h in zip(widths, heights)]
    sizes.sort(key=lambda s: s.width * s.height, reverse=True)
    return sizes


def build_cloud(center: Point, sizes: List[Size]) -> List[Rectangle]:
    layouter = CircularCloudLayouter(center)
    for size in sizes:
        layouter.put_next_rectangle(size)
    return list(layouter.rectangles)


def main(
    count: int = DEMO_RECTANGLE_COUNT,
    output: str = DEFAULT_IMAGE_PATH,
    level: int = logging.INFO,
    log_file: Optional[str] = DEFAULT_LOG_NAME
) -> List[Rectangle]:
    log_path = setup_logging(level=level, log_file=log_file)
    if log_path:
        logger.info(f"Writing log to {log_path}")

    center = Point(*DEFAULT_CENTER)
    sizes = generate_sizes(count)
    logger.info(f"Laying out {len(sizes)} rectangles around ({center.x}, {center.y})...")

    rectangles = build_cloud(center, sizes)
    logger.info(f"Max corner distance from center: {max_corner_distance(rectangles, center):.1f}")

    fig = render_rectangles(rectangles, output, center=center)
    plt.close(fig)
    return rectangles


if __name__ == "__main__":
    main()
