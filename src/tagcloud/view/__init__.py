"""
The VIEW layer turns placed rectangles into pictures.
"""
from tagcloud.view.renderer import render_rectangles

__all__ = ["render_rectangles"]
