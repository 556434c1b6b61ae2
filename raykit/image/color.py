# raykit/image/color.py
"""
RGB‑цвет (float32). Значения не ограничиваются диапазоном [0, 1] –
обрезка происходит только при сериализации холста.
"""

import numbers
from typing import Iterator, Tuple

import numpy as np

from raykit.math.approx import approx_eq


class Color:
    """Неизменяемый цвет (r, g, b)."""

    __slots__ = ("_v",)

    __array_ufunc__ = None

    def __init__(self, r: float, g: float, b: float):
        self._v = np.array([r, g, b], dtype=np.float32)

    @classmethod
    def from_np(cls, array: np.ndarray) -> "Color":
        r, g, b = np.asarray(array, dtype=np.float32).reshape(3)
        return cls(r, g, b)

    @property
    def r(self) -> float:
        return float(self._v[0])

    @property
    def g(self) -> float:
        return float(self._v[1])

    @property
    def b(self) -> float:
        return float(self._v[2])

    # -----------------------------------------------------------------
    # арифметика
    # -----------------------------------------------------------------
    def __add__(self, other: "Color") -> "Color":
        if not isinstance(other, Color):
            return NotImplemented
        return Color.from_np(self._v + other._v)

    def __neg__(self) -> "Color":
        return Color.from_np(-self._v)

    def __sub__(self, other: "Color") -> "Color":
        if not isinstance(other, Color):
            return NotImplemented
        return self + -other

    def __mul__(self, other) -> "Color":
        """`c * 0.5` – масштаб; `c1 * c2` – покомпонентное (тонирование)."""
        if isinstance(other, Color):
            return Color.from_np(self._v * other._v)
        if not isinstance(other, numbers.Real):
            return NotImplemented
        with np.errstate(over="ignore", invalid="ignore"):
            return Color.from_np(self._v * other)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Color":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        with np.errstate(divide="ignore", over="ignore"):
            inv = np.float32(1.0) / np.float32(scalar)
        return self * inv

    # -----------------------------------------------------------------
    # сравнение
    # -----------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return all(approx_eq(a, b)
                   for a, b in zip(self._v.tolist(), other._v.tolist()))

    __hash__ = None

    # -----------------------------------------------------------------
    # приведение и представление
    # -----------------------------------------------------------------
    def __iter__(self) -> Iterator[float]:
        return iter(self._v.tolist())

    def as_np(self) -> np.ndarray:
        """Копия 3‑компонентного ndarray (float32)."""
        return self._v.copy()

    def to_tuple(self) -> Tuple[float, float, float]:
        return tuple(self._v.tolist())

    def __repr__(self) -> str:
        return f"Color({self.r:.3f}, {self.g:.3f}, {self.b:.3f})"


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
RED = Color(1.0, 0.0, 0.0)
GREEN = Color(0.0, 1.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)
