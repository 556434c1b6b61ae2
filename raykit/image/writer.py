"""
Запись холста на диск и (по желанию) открытие во внешнем просмотрщике.

*.ppm пишется текстом (P3) через Canvas.to_ppm(); любой другой суффикс
(.png, .bmp, ...) отдаётся Pillow.
"""

import os
import subprocess
import sys
from pathlib import Path

from raykit.image.canvas import Canvas
from raykit.utils.logger import logger
from raykit.utils.profiler import Profiler


def save_canvas(canvas: Canvas, path) -> Path:
    """Сохранить холст. Ошибки ввода‑вывода логируются и пробрасываются."""
    p = Path(path).expanduser().resolve()
    with Profiler(f"save {p.name}"):
        try:
            if p.suffix.lower() == ".ppm":
                p.write_text(canvas.to_ppm(), encoding="ascii")
            else:
                canvas.to_image().save(p)
        except (OSError, ValueError) as exc:
            logger.error(f"[Writer] Couldn't write {p}: {exc}")
            raise
    logger.info(f"[Writer] Successfully wrote {canvas} to {p}")
    return p


def _viewer_command(path: Path):
    if sys.platform == "darwin":
        return ["open", str(path)]
    return ["xdg-open", str(path)]


def open_in_viewer(path) -> bool:
    """Попробовать открыть файл системным просмотрщиком; неудача не фатальна."""
    p = Path(path)
    try:
        if sys.platform.startswith("win"):
            os.startfile(str(p))
        else:
            subprocess.run(_viewer_command(p), check=True,
                           stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError) as exc:
        logger.warning(f"[Writer] Couldn't open viewer for {p}: {exc}")
        return False
    return True
