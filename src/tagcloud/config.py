"""
Configuration & Path Management
===============================
This module serves as the central registry for layout constants and output paths.

Why is this file needed?
------------------------
1. Tuning: The spiral parameters decide how tight the cloud is. Keeping them
   in one place means the layouter, the demo and the tests agree on them.
2. Paths: The demo writes its picture next to the project, not into whatever
   directory Python happened to be started from.

Exports:
    DEFAULT_ANGLE_STEP (float): Angle increment of the spiral per advance, in radians.
    DEFAULT_SPIRAL_SCALE (float): Radius growth per radian of the spiral.
    DEFAULT_CENTER (tuple[int, int]): Center used by the demo.
    OUTPUT_PATH (str): Absolute path to the directory for rendered images and logs.
    DEFAULT_LOG_NAME (str): Demo log file, relative to OUTPUT_PATH.
"""
import os
from pathlib import Path


def get_output_path(relative_path: str = "") -> str:
    """
    Get absolute path inside the project's output directory.
    """
    # config.py is in src/tagcloud/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), "output", relative_path)


# Spiral
DEFAULT_ANGLE_STEP: float = 0.1
DEFAULT_SPIRAL_SCALE: float = 0.5

# Demo
DEFAULT_CENTER: tuple[int, int] = (500, 500)
DEMO_RECTANGLE_COUNT: int = 100
DEMO_MIN_SIZE: tuple[int, int] = (10, 5)
DEMO_MAX_SIZE: tuple[int, int] = (80, 30)
DEMO_SEED: int = 42

OUTPUT_PATH: str = get_output_path()
DEFAULT_IMAGE_PATH: str = get_output_path("cloud.png")
DEFAULT_LOG_NAME: str = "tagcloud.log"
