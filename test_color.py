# -*- coding: utf-8 -*-
import math

import numpy as np
import pytest

from raykit.image.color import Color, BLACK, RED


def test_colors_are_rgb_tuples():
    c = Color(-0.5, 0.4, 1.7)
    assert c.r == -0.5
    assert c.g == pytest.approx(0.4)
    assert c.b == pytest.approx(1.7)

def test_channels_are_float32():
    c = Color(0.1, 0.2, 0.3)
    assert c.as_np().dtype == np.float32
    assert c.g == float(np.float32(0.2))

def test_adding_colors():
    assert Color(0.9, 0.6, 0.75) + Color(0.7, 0.1, 0.25) == Color(1.6, 0.7, 1.0)

def test_subtracting_colors():
    a = Color(0.9, 0.6, 0.75)
    b = Color(0.7, 0.1, 0.25)
    assert a - b == Color(0.2, 0.5, 0.5)
    assert a - b == a + (-b)

def test_negating_a_color():
    assert -Color(0.1, -0.2, 0.0) == Color(-0.1, 0.2, 0.0)

def test_multiplying_color_by_scalar():
    c = Color(0.2, 0.3, 0.4)
    assert c * 2.0 == Color(0.4, 0.6, 0.8)
    assert 2 * c == Color(0.4, 0.6, 0.8)

def test_dividing_color_by_scalar():
    assert Color(0.4, 0.6, 0.8) / 2 == Color(0.2, 0.3, 0.4)

def test_dividing_color_by_zero_is_silent():
    c = Color(1.0, 0.0, -1.0) / 0
    assert c.r == math.inf
    assert math.isnan(c.g)
    assert c.b == -math.inf

def test_multiplying_colors_is_componentwise():
    assert Color(1, 0.2, 0.4) * Color(0.9, 1, 0.1) == Color(0.9, 0.2, 0.04)

def test_no_clamping():
    c = RED * 3 - Color(0, 1, 0)
    assert c.to_tuple() == (3.0, -1.0, 0.0)

def test_equality():
    assert BLACK == Color(0, 0, 0.000001)
    assert BLACK != Color(0, 0, 0.001)
    assert BLACK != (0.0, 0.0, 0.0)
    with pytest.raises(TypeError):
        hash(BLACK)

def test_color_and_scalar_only():
    with pytest.raises(TypeError):
        Color(1, 1, 1) * "2"

def test_dividing_color_stays_in_float32():
    values = np.array([0.1, 0.7, 1.3], dtype=np.float32)
    c = Color(*values) / 3
    expected = values * (np.float32(1.0) / np.float32(3))
    assert expected.dtype == np.float32
    assert np.array_equal(c.as_np(), expected)
