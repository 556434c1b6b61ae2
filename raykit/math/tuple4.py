# raykit/math/tuple4.py
"""
4‑компонентный кортеж (float64): точка (w = 1) или свободный вектор (w = 0).

Все операции возвращают новый объект; сам Tuple неизменяемый.
Длина (magnitude) считается один раз в конструкторе.
"""

import numbers
from typing import Iterator, Tuple as PyTuple

import numpy as np

from raykit.math.approx import approx_eq


class Tuple:
    """Точка или вектор в однородных координатах (x, y, z, w)."""

    __slots__ = ("_v", "_magnitude")

    # numpy‑скаляры должны отдавать `2.0 * t` в наш __rmul__
    __array_ufunc__ = None

    def __init__(self, x: float, y: float, z: float, w: float):
        self._v = np.array([x, y, z, w], dtype=np.float64)
        with np.errstate(over="ignore", invalid="ignore"):
            self._magnitude = float(np.linalg.norm(self._v))

    # -----------------------------------------------------------------
    # конструкторы
    # -----------------------------------------------------------------
    @staticmethod
    def point(x: float, y: float, z: float) -> "Tuple":
        return Tuple(x, y, z, 1.0)

    @staticmethod
    def vector(x: float, y: float, z: float) -> "Tuple":
        return Tuple(x, y, z, 0.0)

    # -----------------------------------------------------------------
    # свойства (только чтение)
    # -----------------------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    @property
    def z(self) -> float:
        return float(self._v[2])

    @property
    def w(self) -> float:
        return float(self._v[3])

    @property
    def magnitude(self) -> float:
        """Евклидова длина по всем четырём компонентам."""
        return self._magnitude

    def is_point(self) -> bool:
        return bool(self._v[3] == 1.0)

    def is_vector(self) -> bool:
        return bool(self._v[3] == 0.0)

    # -----------------------------------------------------------------
    # арифметика (w не проверяется: point + point даёт w = 2)
    # -----------------------------------------------------------------
    def __add__(self, other: "Tuple") -> "Tuple":
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(*(self._v + other._v))

    def __neg__(self) -> "Tuple":
        return Tuple(*(-self._v))

    def __sub__(self, other: "Tuple") -> "Tuple":
        if not isinstance(other, Tuple):
            return NotImplemented
        return self + -other

    def __mul__(self, scalar: float) -> "Tuple":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        with np.errstate(over="ignore", invalid="ignore"):
            return Tuple(*(self._v * scalar))

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Tuple":
        # деление на 0 даёт inf/NaN, исключение не бросается
        with np.errstate(divide="ignore"):
            inv = np.float64(1.0) / scalar
        return self * inv

    # -----------------------------------------------------------------
    # векторные операции
    # -----------------------------------------------------------------
    def normalized(self) -> "Tuple":
        """Каждая компонента делится на закэшированную длину (0 → NaN)."""
        with np.errstate(divide="ignore", invalid="ignore"):
            return Tuple(*(self._v / self._magnitude))

    def dot(self, other: "Tuple") -> float:
        """Скалярное произведение; пропорционально косинусу угла между векторами."""
        assert self.w == 0.0, f"dot() requires a vector, got w={self.w}"
        assert other.w == 0.0, f"dot() requires a vector, got w={other.w}"
        return float(np.dot(self._v, other._v))

    def cross(self, other: "Tuple") -> "Tuple":
        """Векторное произведение – вектор, перпендикулярный обоим операндам."""
        assert self.w == 0.0, f"cross() requires a vector, got w={self.w}"
        assert other.w == 0.0, f"cross() requires a vector, got w={other.w}"
        return Tuple.vector(*np.cross(self._v[:3], other._v[:3]))

    # -----------------------------------------------------------------
    # сравнение
    # -----------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
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
        """Копия 4‑компонентного ndarray (float64)."""
        return self._v.copy()

    def to_tuple(self) -> PyTuple[float, float, float, float]:
        return tuple(self._v.tolist())

    def __repr__(self) -> str:
        return f"Tuple({self.x:.5f}, {self.y:.5f}, {self.z:.5f}, {self.w:.1f})"


point = Tuple.point
vector = Tuple.vector
