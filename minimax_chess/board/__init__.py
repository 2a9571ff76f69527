"""
Board Representation Module

This module defines the 64-cell board snapshot the engine works on, and
helpers for piece identity, square naming and conversion.

Key Components:
    - Board: tuple of 64 cells (None or a piece symbol), row 0 = rank 8
    - validate_board: Fail fast on malformed snapshots
    - piece_type / piece_color: Orthogonal access to a piece's identity
    - board_from_fen / board_to_fen: Conversion through python-chess
    - board_to_tensor: (12, 8, 8) piece-plane view

Data Flow:
    FEN / list of cells → validate_board() → Board (tuple) → move generator
"""

from minimax_chess.board.representation import (
    Board,
    EMPTY_BOARD,
    STARTING_BOARD,
    InvalidBoardError,
    board_from_fen,
    board_to_fen,
    board_to_tensor,
    captured_king_color,
    index_from_name,
    parse_side,
    piece_color,
    piece_type,
    square_name,
    validate_board,
)

__all__ = [
    'Board',
    'EMPTY_BOARD',
    'STARTING_BOARD',
    'InvalidBoardError',
    'board_from_fen',
    'board_to_fen',
    'board_to_tensor',
    'captured_king_color',
    'index_from_name',
    'parse_side',
    'piece_color',
    'piece_type',
    'square_name',
    'validate_board',
]
