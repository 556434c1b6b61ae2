"""
Пакет image – цвет, холст и запись изображений.
"""

from raykit.image.color import Color, BLACK, WHITE, RED, GREEN, BLUE
from raykit.image.canvas import Canvas, channels_to_bytes
from raykit.image.writer import save_canvas, open_in_viewer

__all__ = ["Color", "BLACK", "WHITE", "RED", "GREEN", "BLUE",
           "Canvas", "channels_to_bytes", "save_canvas", "open_in_viewer"]
