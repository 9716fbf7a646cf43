# aad/core/logger.py
import logging
import os

from .config import AADConfig

_ROOT = "aad_expr_tree"


def get_aad_logger(name: str = None) -> logging.Logger:
    """
    Return the package logger (or one of its children).

    The root package logger gets a single stream handler on first use; its
    level comes from the AAD_EXPR_LOG_LEVEL environment variable.
    """
    root = logging.getLogger(_ROOT)
    if not root.hasHandlers():
        handler = logging.StreamHandler()
        formatter = logging.Formatter('[%(asctime)s][%(levelname)s][%(name)s] %(message)s')
        handler.setFormatter(formatter)
        root.addHandler(handler)
    level_name = os.getenv(AADConfig.LOG_LEVEL_ENV, AADConfig.DEFAULT_LOG_LEVEL).upper()
    level = getattr(logging, level_name, logging.WARNING)
    root.setLevel(level)
    if name is None or name == _ROOT:
        return root
    if name.startswith(_ROOT + "."):
        return logging.getLogger(name)
    return root.getChild(name)
