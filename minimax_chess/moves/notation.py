"""
Move Notation

Short algebraic-style notation for engine moves.

Format:
    - Pawn push:            e4
    - Pawn capture:         dxe5      (origin file, 'x', destination)
    - Pawn promotion:       e8=Q, dxe8=Q
    - Piece move / capture: Nf3, Bxc6

Limitations:
    There is no disambiguation. If two knights can both reach f3 they are
    both written "Nf3". Check and mate suffixes are never added because the
    engine does not detect check.
"""

import chess
from typing import Optional
from minimax_chess.board.representation import piece_letter, piece_type, square_name


def notate(
    from_index: int,
    to_index: int,
    piece: str,
    captured: Optional[str] = None,
    promoted: Optional[str] = None,
) -> str:
    """
    Render a move in short algebraic-style notation.

    Args:
        from_index: Origin board index
        to_index: Destination board index
        piece: Symbol of the moving piece (before promotion)
        captured: Symbol of the captured piece, if any
        promoted: Symbol of the piece the pawn became, if any

    Returns:
        Notation string, e.g. "e4", "exd5", "Nf3", "Qxh7", "a8=Q"
    """
    destination = square_name(to_index)

    if piece_type(piece) == chess.PAWN:
        notation = destination
        if captured:
            notation = f"{square_name(from_index)[0]}x{destination}"
        if promoted:
            notation += f"={piece_letter(promoted)}"
        return notation

    capture_mark = "x" if captured else ""
    return f"{piece_letter(piece)}{capture_mark}{destination}"
