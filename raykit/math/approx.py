# raykit/math/approx.py
"""
Приближённое сравнение чисел с плавающей точкой.
На нём построено `==` у Tuple и Color.
"""

EPSILON = 0.00001


def approx_eq(a: float, b: float) -> bool:
    """True, если |a - b| строго меньше EPSILON (NaN → всегда False)."""
    return abs(a - b) < EPSILON
