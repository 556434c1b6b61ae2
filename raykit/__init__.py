"""
RayKit – числовая основа программного трассировщика лучей:
точки/векторы, цвета и холст с выводом в PPM.
"""

from raykit.utils import logger
from raykit.math import EPSILON, approx_eq, Tuple, point, vector
from raykit.image import (
    Color, BLACK, WHITE, RED, GREEN, BLUE,
    Canvas, save_canvas, open_in_viewer,
)

__version__ = "0.1.0"

__all__ = [
    "EPSILON",
    "approx_eq",
    "Tuple",
    "point",
    "vector",
    "Color",
    "BLACK",
    "WHITE",
    "RED",
    "GREEN",
    "BLUE",
    "Canvas",
    "save_canvas",
    "open_in_viewer",
]
