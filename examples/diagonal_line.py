# examples/diagonal_line.py
"""
Минимальный пример: красная диагональ на чёрном холсте → out.ppm.
Размер холста, имя файла и запуск просмотрщика берутся из config.json.
"""

import raykit as rk
from raykit.utils import Config, logger, set_level


def draw_diagonal(canvas: rk.Canvas, color: rk.Color) -> None:
    for i in range(min(canvas.width, canvas.height)):
        canvas.set_pixel(i, i, color)


if __name__ == "__main__":
    cfg = Config()
    set_level(cfg["log_level"])

    canvas = rk.Canvas(*cfg.canvas_size())
    logger.info(f"Drawing diagonal on {canvas}...")
    draw_diagonal(canvas, rk.RED)

    path = rk.save_canvas(canvas, cfg["output"])
    if cfg["open_viewer"]:
        rk.open_in_viewer(path)
