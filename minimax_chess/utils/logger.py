"""
Logging setup for the engine.

All modules log through children of the "minimax_chess" logger
(logging.getLogger(__name__)), so configuring that one logger controls
the whole package.
"""

import logging
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "minimax_chess"


def setup_logger(debug: bool = False, log_file: Optional[Union[str, Path]] = None) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        debug: If True, log at DEBUG level; otherwise INFO level
        log_file: Write to this file instead of stderr

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    for old in list(logger.handlers):
        old.close()
        logger.removeHandler(old)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, mode='w')
    else:
        handler = logging.StreamHandler()

    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
