# -*- coding: utf-8 -*-
"""
Холст – сетка цветов фиксированного размера и её сериализация в PPM (P3).

Пиксели хранятся в одном ndarray float32 формы (height, width, 3),
т.е. построчно: плоский индекс = y * width + x.

Перевод канала в байт: ceil(value * 255) с насыщением в [0, 255]
(NaN → 0). Поэтому 1.5 → 255, 0.5 → 128, ‑0.5 → 0.
"""

from __future__ import annotations

from typing import Iterator

import numpy as np
from PIL import Image

from raykit.image.color import Color
from raykit.utils.logger import logger

PPM_MAGIC = "P3"
PPM_MAX_VALUE = 255


def channels_to_bytes(channels: np.ndarray) -> np.ndarray:
    """float‑каналы → uint8: округление вверх и насыщение.

    Умножение идёт в float32, как и хранение цвета: 0.2 * 255 == 51, а не 52.
    """
    with np.errstate(invalid="ignore", over="ignore"):
        scaled = np.ceil(np.asarray(channels, dtype=np.float32)
                         * np.float32(PPM_MAX_VALUE))
    scaled = np.nan_to_num(scaled, nan=0.0, posinf=PPM_MAX_VALUE, neginf=0.0)
    return np.clip(scaled, 0, PPM_MAX_VALUE).astype(np.uint8)


class Canvas:
    """Сетка пикселей width × height, изначально чёрная."""

    __slots__ = ("_width", "_height", "_pixels")

    def __init__(self, width: int, height: int):
        if width < 0 or height < 0:
            raise ValueError(
                f"Canvas dimensions must be non-negative, got {width}x{height}"
            )
        self._width = int(width)
        self._height = int(height)
        self._pixels = np.zeros((self._height, self._width, 3), dtype=np.float32)
        logger.debug(f"[Canvas] Created {self._width}x{self._height}")

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    # -----------------------------------------------------------------
    # доступ к пикселям
    # -----------------------------------------------------------------
    def _check(self, x: int, y: int) -> None:
        assert 0 <= x < self._width, f"x={x} out of range [0, {self._width})"
        assert 0 <= y < self._height, f"y={y} out of range [0, {self._height})"

    def get_pixel(self, x: int, y: int) -> Color:
        self._check(x, y)
        return Color.from_np(self._pixels[y, x])

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        self._check(x, y)
        self._pixels[y, x] = color.as_np()

    def pixels(self) -> Iterator[Color]:
        """Все пиксели построчно, слева направо."""
        for row in self._pixels:
            for rgb in row:
                yield Color.from_np(rgb)

    # -----------------------------------------------------------------
    # PPM
    # -----------------------------------------------------------------
    def ppm_header(self) -> str:
        return f"{PPM_MAGIC}\n{self._width} {self._height}\n{PPM_MAX_VALUE}"

    def ppm_body(self) -> str:
        data = self.to_bytes().reshape(self._height, self._width * 3)
        return "\n".join(" ".join(map(str, row)) for row in data.tolist())

    def to_ppm(self) -> str:
        """Полный документ: заголовок, пустая строка, данные, перевод строки."""
        return f"{self.ppm_header()}\n\n{self.ppm_body()}\n"

    # -----------------------------------------------------------------
    # байты / Pillow
    # -----------------------------------------------------------------
    def to_bytes(self) -> np.ndarray:
        """uint8‑массив (height, width, 3) с тем же округлением, что и в PPM."""
        return channels_to_bytes(self._pixels)

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.to_bytes())

    def __repr__(self) -> str:
        return f"Canvas({self._width}x{self._height})"
