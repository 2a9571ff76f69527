"""
Utilities Module

Key Components:
    - setup_logger: Configure the package-wide "minimax_chess" logger
"""

from minimax_chess.utils.logger import setup_logger, LOGGER_NAME

__all__ = ['setup_logger', 'LOGGER_NAME']
