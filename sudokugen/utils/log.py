# -*- coding: utf-8 -*-
"""Logging utilities."""
import logging
import os
import sys
from typing import Optional, Union

from sudokugen.common.constants import LOG_LEVEL_ENV_VAR

_LOG_FORMAT = "%(levelname)s %(asctime)s %(filename)s:%(lineno)d] %(message)s"
_DATE_FORMAT = "%m-%d %H:%M:%S"
_ROOT_LOGGER_NAME = "sudokugen"


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        return resolved
    return level


def _setup_root_logger() -> logging.Logger:
    root = logging.getLogger(_ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
        root.addHandler(handler)
        root.setLevel(_resolve_level(os.environ.get(LOG_LEVEL_ENV_VAR, "INFO")))
        root.propagate = False
    return root


def get_logger(name: Optional[str] = None, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Get a logger under the package logger.

    The package logger owns the only handler; module loggers (`sudokugen.*`)
    propagate to it, so setting its level adjusts every module at once.

    Args:
        name (`str`): The logger name. Defaults to the package logger.
        level (`int` or `str`): Level to set on the returned logger. If None,
            the level is inherited; the package logger starts at the value of
            the `SUDOKUGEN_LOG_LEVEL` environment variable (default `INFO`).

    Returns:
        `logging.Logger`: The logger.
    """
    _setup_root_logger()
    logger = logging.getLogger(name or _ROOT_LOGGER_NAME)
    if level is not None:
        logger.setLevel(_resolve_level(level))
    return logger
