"""
Game Module

A single human-versus-bot game decided by king capture.

Key Components:
    - Game: Turn handling, move application and game-end detection
    - IllegalMoveError: Raised for moves the position doesn't allow
"""

from minimax_chess.game.session import Game, IllegalMoveError, KING_CAPTURED, NO_MOVES, SEARCH_FAILED

__all__ = ['Game', 'IllegalMoveError', 'KING_CAPTURED', 'NO_MOVES', 'SEARCH_FAILED']
