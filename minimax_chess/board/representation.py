"""
Board Representation

This module defines the board snapshot used by the move generator and the
search, plus conversions to python-chess boards, FEN strings and tensors.

Board Layout:
    A board is a tuple of 64 cells. Each cell is either None (empty) or a
    piece symbol: uppercase for White (P, N, B, R, Q, K), lowercase for
    Black (p, n, b, r, q, k).

    - Index 0 = a8, index 7 = h8 (row 0 = rank 8)
    - Index 56 = a1, index 63 = h1 (row 7 = rank 1)
    - file = index % 8, rank = 8 - index // 8

    Note that python-chess numbers squares the other way round (0 = a1),
    so index_to_square() is needed whenever the two meet.

Piece Identity:
    Symbols are only the compact encoding. Search code reads the type and
    color through piece_type() and piece_color(), which return python-chess
    constants (chess.PAWN ... chess.KING, chess.WHITE / chess.BLACK).
"""

import chess
import numpy as np
from typing import Optional, Sequence, Tuple, Union

Board = Tuple[Optional[str], ...]

BOARD_SIZE = 64
PIECE_SYMBOLS = frozenset("PNBRQKpnbrqk")

#fmt: off
STARTING_BOARD: Board = (
    'r', 'n', 'b', 'q', 'k', 'b', 'n', 'r',
    'p', 'p', 'p', 'p', 'p', 'p', 'p', 'p',
    None, None, None, None, None, None, None, None,
    None, None, None, None, None, None, None, None,
    None, None, None, None, None, None, None, None,
    None, None, None, None, None, None, None, None,
    'P', 'P', 'P', 'P', 'P', 'P', 'P', 'P',
    'R', 'N', 'B', 'Q', 'K', 'B', 'N', 'R',
)
#fmt: on

EMPTY_BOARD: Board = (None,) * BOARD_SIZE

SYMBOL_TO_TYPE = {symbol: chess.Piece.from_symbol(symbol).piece_type for symbol in PIECE_SYMBOLS}

# White pieces: channels 0-5, Black pieces: channels 6-11
PIECE_TO_CHANNEL = {
    (chess.PAWN, chess.WHITE): 0,
    (chess.KNIGHT, chess.WHITE): 1,
    (chess.BISHOP, chess.WHITE): 2,
    (chess.ROOK, chess.WHITE): 3,
    (chess.QUEEN, chess.WHITE): 4,
    (chess.KING, chess.WHITE): 5,
    (chess.PAWN, chess.BLACK): 6,
    (chess.KNIGHT, chess.BLACK): 7,
    (chess.BISHOP, chess.BLACK): 8,
    (chess.ROOK, chess.BLACK): 9,
    (chess.QUEEN, chess.BLACK): 10,
    (chess.KING, chess.BLACK): 11,
}


class InvalidBoardError(ValueError):
    """Raised when a board snapshot has the wrong length or an unknown piece code."""


def validate_board(board: Sequence[Optional[str]]) -> Board:
    """
    Check a board snapshot and return it as an immutable tuple.

    Args:
        board: Sequence of 64 cells (None or a piece symbol)

    Returns:
        The same cells as a tuple

    Raises:
        InvalidBoardError: If the board is not 64 cells long or contains
            anything other than None and the twelve piece symbols
    """
    if isinstance(board, (str, bytes)):
        raise InvalidBoardError("Board must be a sequence of cells, not a string")

    try:
        cells = tuple(board)
    except TypeError:
        raise InvalidBoardError(f"Board must be a sequence, got {type(board).__name__}") from None

    if len(cells) != BOARD_SIZE:
        raise InvalidBoardError(
            f"Board must have {BOARD_SIZE} cells, got {len(cells)}"
        )

    for index, cell in enumerate(cells):
        if cell is not None and (not isinstance(cell, str) or cell not in PIECE_SYMBOLS):
            raise InvalidBoardError(
                f"Invalid piece code {cell!r} on {square_name(index)}"
            )

    return cells


def piece_type(symbol: str) -> chess.PieceType:
    """Return the python-chess piece type of a piece symbol."""
    try:
        return SYMBOL_TO_TYPE[symbol]
    except KeyError:
        raise InvalidBoardError(f"Invalid piece code {symbol!r}") from None


def piece_color(symbol: str) -> chess.Color:
    """Return chess.WHITE or chess.BLACK for a piece symbol."""
    return symbol.isupper()


def make_piece(kind: chess.PieceType, color: chess.Color) -> str:
    """Build the piece symbol for a (type, color) pair."""
    return chess.Piece(kind, color).symbol()


def piece_letter(symbol: str) -> str:
    """Uppercase letter used in move notation (P, N, B, R, Q, K)."""
    return chess.piece_symbol(piece_type(symbol)).upper()


def parse_side(side: Union[chess.Color, str]) -> chess.Color:
    """
    Normalise a side to move.

    Accepts python-chess colors as well as 'w' / 'b' / 'white' / 'black'.

    Raises:
        ValueError: If the value does not name a side
    """
    if isinstance(side, bool):
        return side

    if isinstance(side, str):
        name = side.strip().lower()
        if name in ("w", "white"):
            return chess.WHITE
        if name in ("b", "black"):
            return chess.BLACK

    raise ValueError(f"Unknown side: {side!r}")


def side_name(side: chess.Color) -> str:
    """'White' or 'Black'."""
    return chess.COLOR_NAMES[side].capitalize()


# ============================================================================
# Coordinates
# ============================================================================

def index_to_coordinates(index: int) -> Tuple[int, int]:
    """
    Convert a board index to (row, col).

    Row 0 is rank 8, column 0 is the a-file.
    """
    return index // 8, index % 8


def coordinates_to_index(row: int, col: int) -> int:
    """Convert (row, col) back to a board index."""
    return row * 8 + col


def index_to_square(index: int) -> chess.Square:
    """
    Convert a board index to a python-chess square.

    Args:
        index: Board index (0-63) where 0 = a8, 63 = h1

    Returns:
        python-chess square (0-63) where 0 = a1, 63 = h8
    """
    row, col = index_to_coordinates(index)
    return chess.square(col, 7 - row)


def square_to_index(square: chess.Square) -> int:
    """Convert a python-chess square to a board index."""
    return coordinates_to_index(7 - chess.square_rank(square), chess.square_file(square))


def square_name(index: int) -> str:
    """Algebraic name of a board index, e.g. 52 -> 'e2'."""
    return chess.square_name(index_to_square(index))


def index_from_name(name: str) -> int:
    """Board index of an algebraic square name, e.g. 'e2' -> 52."""
    return square_to_index(chess.parse_square(name))


# ============================================================================
# python-chess / FEN conversion
# ============================================================================

def to_chess_board(board: Sequence[Optional[str]], turn: chess.Color = chess.WHITE) -> chess.Board:
    """
    Build a python-chess Board holding the same pieces.

    Castling rights and en passant are not part of the snapshot, so the
    returned board has neither. Useful for printing and FEN export.
    """
    cells = validate_board(board)
    chess_board = chess.Board(fen=None)
    for index, symbol in enumerate(cells):
        if symbol is not None:
            chess_board.set_piece_at(index_to_square(index), chess.Piece.from_symbol(symbol))
    chess_board.turn = turn
    return chess_board


def board_from_chess(chess_board: chess.Board) -> Board:
    """Extract the piece placement of a python-chess Board."""
    cells = [None] * BOARD_SIZE
    for square, piece in chess_board.piece_map().items():
        cells[square_to_index(square)] = piece.symbol()
    return tuple(cells)


def board_from_fen(fen: str) -> Board:
    """
    Parse a FEN string (or just its placement field) into a board.

    Raises:
        InvalidBoardError: If python-chess rejects the FEN
    """
    placement = fen.split()[0] if fen.strip() else fen
    try:
        chess_board = chess.Board(fen=None)
        chess_board.set_board_fen(placement)
    except ValueError as e:
        raise InvalidBoardError(f"Invalid FEN {fen!r}: {e}") from e
    return board_from_chess(chess_board)


def board_to_fen(board: Sequence[Optional[str]], turn: chess.Color = chess.WHITE) -> str:
    """Full FEN for a board snapshot (no castling, no en passant)."""
    return to_chess_board(board, turn).fen()


def render_board(board: Sequence[Optional[str]]) -> str:
    """ASCII diagram (rank 8 on top), as printed by python-chess."""
    return str(to_chess_board(board))


# ============================================================================
# Game-end helpers
# ============================================================================

def kings_present(board: Sequence[Optional[str]]) -> Tuple[bool, bool]:
    """Return (white king on board, black king on board)."""
    return 'K' in board, 'k' in board


def captured_king_color(board: Sequence[Optional[str]]) -> Optional[chess.Color]:
    """
    Color whose king is missing from the board, or None.

    Games end by king capture, so a missing king means that side lost.
    """
    white_king, black_king = kings_present(board)
    if not white_king:
        return chess.WHITE
    if not black_king:
        return chess.BLACK
    return None


# ============================================================================
# Tensor view
# ============================================================================

def board_to_tensor(board: Sequence[Optional[str]]) -> np.ndarray:
    """
    Convert a board to a 12-channel tensor representation.

    Args:
        board: Board snapshot

    Returns:
        numpy array of shape (12, 8, 8) with dtype float32
        - 12 channels: 6 piece types * 2 colors (see PIECE_TO_CHANNEL)
        - Binary values: 1.0 piece exists, 0.0 no piece
    """
    tensor = np.zeros((12, 8, 8), dtype=np.float32)

    for index, symbol in enumerate(board):
        if symbol is None:
            continue
        channel = PIECE_TO_CHANNEL[(piece_type(symbol), piece_color(symbol))]
        row, col = index_to_coordinates(index)
        tensor[channel, row, col] = 1.0

    return tensor
