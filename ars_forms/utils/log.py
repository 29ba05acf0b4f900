from __future__ import annotations
import logging, sys

from .config import PACKAGE_LOGGER, apply_log_level

def get_logger(name: str = PACKAGE_LOGGER, level: int | str | None = None) -> logging.Logger:
    """
    Logger do pacote. O handler fica só no logger raiz 'ars_forms'; os filhos
    herdam dele o nível de ARS_LOG_LEVEL, reaplicado a cada set_settings().
    """
    root = logging.getLogger(PACKAGE_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        fmt = logging.Formatter("[%(levelname)s] %(message)s")
        handler.setFormatter(fmt)
        root.addHandler(handler)
        apply_log_level()
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger
