# -*- coding: utf-8 -*-
import subprocess
import sys

import numpy as np
import pytest
from PIL import Image

from raykit.image import Canvas, Color, open_in_viewer, save_canvas


@pytest.fixture
def canvas():
    c = Canvas(4, 2)
    c.set_pixel(0, 0, Color(1, 0, 0))
    c.set_pixel(3, 1, Color(0, 0.5, 1))
    return c

def test_save_ppm_writes_text(tmp_path, canvas):
    path = save_canvas(canvas, tmp_path / "out.ppm")
    assert path.read_text(encoding="ascii") == canvas.to_ppm()

def test_save_png_through_pillow(tmp_path, canvas):
    path = save_canvas(canvas, tmp_path / "out.png")
    with Image.open(path) as img:
        assert img.size == (4, 2)
        assert np.array_equal(np.asarray(img.convert("RGB")), canvas.to_bytes())

def test_save_into_missing_directory_raises(tmp_path, canvas):
    with pytest.raises(OSError):
        save_canvas(canvas, tmp_path / "missing" / "out.ppm")

def test_open_in_viewer_failure_is_not_fatal(tmp_path, monkeypatch):
    def _missing(*args, **kwargs):
        raise FileNotFoundError("xdg-open")

    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setattr(subprocess, "run", _missing)
    assert open_in_viewer(tmp_path / "out.ppm") is False

def test_open_in_viewer_success(tmp_path, monkeypatch):
    calls = []
    monkeypatch.setattr(sys, "platform", "darwin")
    monkeypatch.setattr(subprocess, "run", lambda cmd, **kw: calls.append(cmd))
    assert open_in_viewer(tmp_path / "out.ppm") is True
    assert calls[0][0] == "open"
