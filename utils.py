"""
utils.py

Small helpers shared by the CLI: a minimal logger setup and level parsing.
"""

from typing import Union
import logging


def parse_log_level(level: Union[str, int]) -> int:
    """
    Accept a level name ("DEBUG", "info") or a numeric level.
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise ValueError(f"unknown log level: {level}")
    return value


def setup_basic_logger(name: str = "fieldcalc", level: int = logging.INFO) -> logging.Logger:
    """
    Return a logger configured with a StreamHandler and a compact formatter.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if logger.handlers:
        return logger
    ch = logging.StreamHandler()
    fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    ch.setFormatter(fmt)
    logger.addHandler(ch)
    return logger
