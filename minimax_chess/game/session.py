"""
Game Session

Runs one game between a human (or any caller) and the bot.

Flow:
    1. White moves first; the human plays whichever color the bot doesn't
    2. play(from_index, to_index) applies a human move, if it is one of the
       generated moves for the human's pieces
    3. bot_move() runs find_best_move() at the configured depth and applies
       the chosen move
    4. The game ends when a king is captured, when the bot has no moves,
       or when the search fails

There is one board, no undo and no persistence.
"""

import chess
import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union
from minimax_chess.board.representation import (
    BOARD_SIZE,
    Board,
    STARTING_BOARD,
    captured_king_color,
    piece_color,
    side_name,
    validate_board,
)
from minimax_chess.config import EngineConfig
from minimax_chess.moves.generator import Move, iter_moves, moves_from
from minimax_chess.search.minimax import SearchResult, find_best_move, shuffle_moves
from minimax_chess.utils.logger import setup_logger

logger = logging.getLogger(__name__)

KING_CAPTURED = "king captured"
NO_MOVES = "no moves"
SEARCH_FAILED = "search failed"


class IllegalMoveError(ValueError):
    """Raised when a move is not available in the current position."""


class Game:
    """
    A single game against the bot.

    Attributes:
        config: Engine settings (depth, bot color, seed)
        board: Current position
        turn: Color to move
        history: Notation of every move played, in order
        last_result: SearchResult of the bot's most recent search
        winner: Color that captured the opposing king, if any
        end_reason: Why the game ended (None while in progress)
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        board: Optional[Sequence[Optional[str]]] = None,
        log_file: Optional[Union[str, Path]] = None,
    ):
        """
        Start a game.

        Args:
            config: Engine settings (default: EngineConfig())
            board: Starting position (default: the standard start)
            log_file: Log to this file instead of stderr
        """
        self.config = config if config is not None else EngineConfig()
        setup_logger(debug=self.config.debug, log_file=log_file)
        self.board: Board = validate_board(board if board is not None else STARTING_BOARD)
        self.turn: chess.Color = chess.WHITE
        self.history: List[str] = []
        self.last_result: Optional[SearchResult] = None
        self.winner: Optional[chess.Color] = None
        self.end_reason: Optional[str] = None

        self._order = shuffle_moves(self.config.rng())

        logger.info(
            f"New game: bot plays {side_name(self.bot_color)} at depth {self.config.depth}"
        )

    @property
    def bot_color(self) -> chess.Color:
        return self.config.bot_color

    @property
    def human_color(self) -> chess.Color:
        return not self.config.bot_color

    @property
    def is_over(self) -> bool:
        return self.end_reason is not None

    @property
    def bot_to_move(self) -> bool:
        return not self.is_over and self.turn == self.bot_color

    def moves_from(self, index: int) -> List[Move]:
        """
        Moves available to the human piece on `index`.

        Returns an empty list for empty cells, bot pieces, or when it is
        not the human's turn.

        Raises:
            IllegalMoveError: If `index` is not a square (0-63)
        """
        _check_index(index)
        if self.is_over or self.turn != self.human_color:
            return []
        piece = self.board[index]
        if piece is None or piece_color(piece) != self.human_color:
            return []
        return moves_from(self.board, index)

    def play(self, from_index: int, to_index: int) -> Move:
        """
        Apply a human move.

        Raises:
            IllegalMoveError: If the game is over, it is the bot's turn, or
                the move is not generated for the human's pieces
        """
        if self.is_over:
            raise IllegalMoveError("The game is over")
        if self.turn != self.human_color:
            raise IllegalMoveError(f"It is {side_name(self.turn)}'s turn (the bot)")
        _check_index(to_index)

        for move in self.moves_from(from_index):
            if move.to_index == to_index:
                self._apply(move)
                return move

        raise IllegalMoveError(f"No move from index {from_index} to index {to_index}")

    def bot_move(self) -> SearchResult:
        """
        Let the bot search and play its move.

        Returns:
            The SearchResult of the search (best_move is None if the bot had
            no moves, which ends the game)

        Raises:
            IllegalMoveError: If it is not the bot's turn
            SearchError: If the search fails; the game is halted first, as it
                is for any other exception raised by the search
        """
        if not self.bot_to_move:
            raise IllegalMoveError("It is not the bot's turn")

        try:
            result = find_best_move(
                self.board,
                self.config.depth,
                side=self.bot_color,
                order=self._order,
            )
        except Exception:
            self.end_reason = SEARCH_FAILED
            logger.error("Search failed, game halted")
            raise

        self.last_result = result

        if not result.has_move:
            self.end_reason = NO_MOVES
            logger.info(f"Game over: {side_name(self.bot_color)} (bot) has no moves")
            return result

        self._apply(result.best_move)
        return result

    def trace_lines(self) -> List[str]:
        """Last `config.trace_limit` lines of the bot's most recent search trace."""
        if self.last_result is None:
            return []
        return self.last_result.render_trace(self.config.trace_limit)

    def has_moves(self, side: Optional[chess.Color] = None) -> bool:
        """Whether `side` (default: side to move) has any generated move."""
        return bool(iter_moves(self.board, self.turn if side is None else side))

    def _apply(self, move: Move) -> None:
        self.board = move.board
        self.history.append(move.notation)
        logger.info(f"{side_name(self.turn)} plays {move.notation}")

        loser = captured_king_color(self.board)
        if loser is not None:
            self.winner = not loser
            self.end_reason = KING_CAPTURED
            logger.info(f"Game over: {side_name(self.winner)} wins by king capture")
            return

        self.turn = not self.turn


def _check_index(index: int) -> None:
    if not isinstance(index, int) or not 0 <= index < BOARD_SIZE:
        raise IllegalMoveError(f"{index!r} is not a square index (0-{BOARD_SIZE - 1})")
