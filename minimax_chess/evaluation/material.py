"""
Material Evaluation

Scores a position by counting material and nothing else: no piece-square
tables, mobility or king safety.

Piece Values:
    P=1, N=3, B=3, R=5, Q=9, K=1000

    The king is worth far more than everything else combined, so losing it
    dominates any score. This is how the search "sees" the end of the game
    without knowing about check.

Sign:
    White material counts positive and Black material negative. The total
    is then flipped when the evaluator's perspective is Black, so that a
    positive score always favours the maximizing side.
"""

import chess
import numpy as np
from typing import Optional, Sequence
from minimax_chess.board.representation import PIECE_TO_CHANNEL, board_to_tensor, validate_board
from minimax_chess.evaluation.base import Evaluator

PIECE_VALUES = {
    chess.PAWN: 1,
    chess.KNIGHT: 3,
    chess.BISHOP: 3,
    chess.ROOK: 5,
    chess.QUEEN: 9,
    chess.KING: 1000,
}

# Signed value of one piece on each tensor channel (White +, Black -)
CHANNEL_VALUES = np.zeros(12, dtype=np.float64)
for (kind, color), channel in PIECE_TO_CHANNEL.items():
    CHANNEL_VALUES[channel] = PIECE_VALUES[kind] if color == chess.WHITE else -PIECE_VALUES[kind]


def material_balance(board: Sequence[Optional[str]]) -> float:
    """
    White material minus Black material.

    Args:
        board: Board snapshot

    Returns:
        float: Signed material sum (positive = White ahead)
    """
    counts = board_to_tensor(board).sum(axis=(1, 2))
    return float(counts @ CHANNEL_VALUES)


class MaterialEvaluator(Evaluator):
    """
    Evaluation by material count only.

    Attributes:
        perspective: Maximizing color (default Black, the bot's color)
    """

    def evaluate(self, board: Sequence[Optional[str]]) -> float:
        """
        Evaluate position by material.

        Args:
            board: Board snapshot (not validated; see evaluate() below)

        Returns:
            float: Material score, positive when `perspective` is ahead
        """
        balance = material_balance(board)
        # Even positions score 0.0, never -0.0
        return balance if self.perspective == chess.WHITE else 0.0 - balance


_DEFAULT = MaterialEvaluator()


def evaluate(board: Sequence[Optional[str]]) -> float:
    """
    Validate a board and score it for the default (Black) perspective.

    Raises:
        InvalidBoardError: If the board is malformed
    """
    return _DEFAULT.evaluate(validate_board(board))
