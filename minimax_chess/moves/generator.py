"""
Move Generation

Enumerates candidate moves for one side of a board snapshot.

Rules Implemented:
    - Sliders (rook, bishop, queen): walk each direction until the edge or
      the first occupied cell; that cell is a capture if it holds an enemy
    - Knight and king: one step to each offset, onto empty or enemy cells
    - Pawn: single push onto an empty cell, double push from the starting
      row when both cells are empty, diagonal captures onto enemy pieces
    - Promotion: a pawn reaching row 0 or row 7 becomes a queen

Not Implemented:
    Check, pins, castling and en passant. Moves that leave the king
    attacked are generated like any other; the game is decided by
    capturing the king.

Ordering:
    Moves come out in board-scan order (index 0 to 63), then direction
    order, then step order. The search relies on this being stable.
"""

import chess
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union
from minimax_chess.board.representation import (
    Board,
    index_to_coordinates,
    coordinates_to_index,
    make_piece,
    parse_side,
    piece_color,
    piece_type,
    square_name,
    validate_board,
)
from minimax_chess.moves.notation import notate

# (row, col) steps. Row -1 is towards rank 8.
ROOK_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))
BISHOP_DIRECTIONS = ((-1, -1), (-1, 1), (1, -1), (1, 1))
QUEEN_DIRECTIONS = ROOK_DIRECTIONS + BISHOP_DIRECTIONS
KNIGHT_OFFSETS = (
    (-2, -1), (-2, 1), (-1, -2), (-1, 2),
    (1, -2), (1, 2), (2, -1), (2, 1),
)
KING_OFFSETS = QUEEN_DIRECTIONS

SLIDING_DIRECTIONS = {
    chess.ROOK: ROOK_DIRECTIONS,
    chess.BISHOP: BISHOP_DIRECTIONS,
    chess.QUEEN: QUEEN_DIRECTIONS,
}
STEPPING_OFFSETS = {
    chess.KNIGHT: KNIGHT_OFFSETS,
    chess.KING: KING_OFFSETS,
}

MAX_SLIDE = 7

# Pawns start on row 6 (White, rank 2) or row 1 (Black, rank 7)
PAWN_START_ROW = {chess.WHITE: 6, chess.BLACK: 1}
PAWN_DIRECTION = {chess.WHITE: -1, chess.BLACK: 1}
PROMOTION_ROWS = (0, 7)


@dataclass(frozen=True)
class Move:
    """
    A candidate move and the position it leads to.

    Attributes:
        from_index: Origin board index
        to_index: Destination board index
        piece: Symbol of the moving piece
        captured: Symbol of the captured piece (None for quiet moves)
        promoted: Symbol the pawn was promoted to (None otherwise)
        notation: Short algebraic notation, e.g. "Nf3"
        board: Resulting board, a new tuple owned by this move
    """

    from_index: int
    to_index: int
    piece: str
    captured: Optional[str]
    promoted: Optional[str]
    notation: str
    board: Board

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    @property
    def captures_king(self) -> bool:
        return self.captured is not None and piece_type(self.captured) == chess.KING

    @property
    def uci(self) -> str:
        """Origin and destination squares, e.g. 'e2e4' or 'a7a8q'."""
        suffix = self.promoted.lower() if self.promoted else ""
        return f"{square_name(self.from_index)}{square_name(self.to_index)}{suffix}"

    def __repr__(self) -> str:
        return f"Move({self.notation}, {self.uci})"


def make_move(
    board: Board,
    from_index: int,
    to_index: int,
) -> Move:
    """
    Build the Move for a piece travelling from one cell to another.

    The caller guarantees the move is geometrically valid; this only
    copies the board, handles promotion and writes the notation.
    """
    piece = board[from_index]
    captured = board[to_index]
    color = piece_color(piece)

    placed = piece
    promoted = None
    if piece_type(piece) == chess.PAWN and to_index // 8 in PROMOTION_ROWS:
        placed = promoted = make_piece(chess.QUEEN, color)

    cells = list(board)
    cells[to_index] = placed
    cells[from_index] = None

    return Move(
        from_index=from_index,
        to_index=to_index,
        piece=piece,
        captured=captured,
        promoted=promoted,
        notation=notate(from_index, to_index, piece, captured, promoted),
        board=tuple(cells),
    )


def _on_board(row: int, col: int) -> bool:
    return 0 <= row < 8 and 0 <= col < 8


def _is_enemy(cell: Optional[str], side: chess.Color) -> bool:
    return cell is not None and piece_color(cell) != side


def _pawn_targets(board: Board, index: int, side: chess.Color) -> List[int]:
    row, col = index_to_coordinates(index)
    direction = PAWN_DIRECTION[side]
    targets = []

    forward = row + direction
    if _on_board(forward, col):
        single = coordinates_to_index(forward, col)
        if board[single] is None:
            targets.append(single)

            if row == PAWN_START_ROW[side]:
                double = coordinates_to_index(row + 2 * direction, col)
                if board[double] is None:
                    targets.append(double)

        for d_col in (-1, 1):
            if _on_board(forward, col + d_col):
                diagonal = coordinates_to_index(forward, col + d_col)
                if _is_enemy(board[diagonal], side):
                    targets.append(diagonal)

    return targets


def _sliding_targets(
    board: Board,
    index: int,
    side: chess.Color,
    directions: Sequence[Tuple[int, int]],
) -> List[int]:
    row, col = index_to_coordinates(index)
    targets = []

    for d_row, d_col in directions:
        for step in range(1, MAX_SLIDE + 1):
            r, c = row + d_row * step, col + d_col * step
            if not _on_board(r, c):
                break
            target = coordinates_to_index(r, c)
            cell = board[target]
            if cell is None:
                targets.append(target)
                continue
            if _is_enemy(cell, side):
                targets.append(target)
            break

    return targets


def _stepping_targets(
    board: Board,
    index: int,
    side: chess.Color,
    offsets: Sequence[Tuple[int, int]],
) -> List[int]:
    row, col = index_to_coordinates(index)
    targets = []

    for d_row, d_col in offsets:
        r, c = row + d_row, col + d_col
        if not _on_board(r, c):
            continue
        target = coordinates_to_index(r, c)
        cell = board[target]
        if cell is None or _is_enemy(cell, side):
            targets.append(target)

    return targets


def piece_targets(board: Board, index: int) -> List[int]:
    """
    Destination indices for the piece standing on `index`.

    Returns an empty list for an empty cell.
    """
    piece = board[index]
    if piece is None:
        return []

    side = piece_color(piece)
    kind = piece_type(piece)

    if kind == chess.PAWN:
        return _pawn_targets(board, index, side)
    if kind in SLIDING_DIRECTIONS:
        return _sliding_targets(board, index, side, SLIDING_DIRECTIONS[kind])
    return _stepping_targets(board, index, side, STEPPING_OFFSETS[kind])


def iter_moves(board: Board, side: chess.Color) -> List[Move]:
    """
    Move generation without input validation.

    Used inside the search, where boards are produced by make_move() and
    are already known to be well formed.
    """
    moves = []
    for index, piece in enumerate(board):
        if piece is None or piece_color(piece) != side:
            continue
        for target in piece_targets(board, index):
            moves.append(make_move(board, index, target))
    return moves


def generate_moves(
    board: Sequence[Optional[str]],
    side: Union[chess.Color, str],
) -> List[Move]:
    """
    Generate every candidate move for `side`.

    Args:
        board: Board snapshot (64 cells); it is never modified
        side: chess.WHITE / chess.BLACK, or 'w' / 'b'

    Returns:
        List of Move objects in board-scan, direction, step order

    Raises:
        InvalidBoardError: If the board is malformed
        ValueError: If side is not a recognised color
    """
    return iter_moves(validate_board(board), parse_side(side))


def moves_from(board: Sequence[Optional[str]], index: int) -> List[Move]:
    """Moves available to the piece on `index` (empty list if none)."""
    cells = validate_board(board)
    if cells[index] is None:
        return []
    return [make_move(cells, index, target) for target in piece_targets(cells, index)]
