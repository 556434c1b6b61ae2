# raykit/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер пакета.
# ---------------------------------------------------------------

import logging


def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("RayKit")

logger = init_logger()

def set_level(level: str = "INFO"):
    """Поменять уровень логгера по имени ("DEBUG", "INFO", ...)."""
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        logger.warning(f"[Logger] Unknown log level {level!r}, keeping "
                       f"{logging.getLevelName(logger.level)}")
        return
    logger.setLevel(value)
