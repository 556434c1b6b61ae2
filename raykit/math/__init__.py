"""
Математический суб‑пакет: Tuple (точка/вектор) и приближённое сравнение.
"""

from raykit.math.approx import EPSILON, approx_eq
from raykit.math.tuple4 import Tuple, point, vector

__all__ = ["EPSILON", "approx_eq", "Tuple", "point", "vector"]
