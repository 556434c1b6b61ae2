# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры: чистый Config в пустом каталоге.
"""

import pytest

from raykit.utils.config import Config


@pytest.fixture
def fresh_config(tmp_path, monkeypatch):
    """Config() без синглтона, с config.json во временном каталоге."""
    monkeypatch.chdir(tmp_path)
    Config.reset()
    yield tmp_path / "config.json"
    Config.reset()
