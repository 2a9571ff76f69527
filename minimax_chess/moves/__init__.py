"""
Moves Module

Move generation and notation for the engine's 64-cell boards.

Key Components:
    - Move: Immutable move value carrying its resulting board
    - generate_moves: All candidate moves for one side (no check detection)
    - notate: Short algebraic-style notation ("e4", "Nxf7", "exd8=Q")
"""

from minimax_chess.moves.generator import Move, generate_moves, moves_from
from minimax_chess.moves.notation import notate

__all__ = ['Move', 'generate_moves', 'moves_from', 'notate']
