"""
Minimax Search with Alpha-Beta Pruning

This module implements the search that picks the bot's move. Minimax
explores the game tree to a fixed depth, and alpha-beta pruning skips
branches that cannot change the result.

Key Concepts:
    - Minimax: Recursive algorithm that assumes optimal play by both sides
    - Alpha-Beta: Stop searching a node's siblings once beta <= alpha
    - Fail-soft: A cut node returns its running best, not the bound
    - Trace: Every leaf, bound improvement, cutoff and root move is logged

Terminal Positions:
    There is no checkmate or stalemate detection. A side without moves is
    scored with the static evaluation, and the game is lost by having the
    king captured (worth 1000 in the evaluation).

Root Ordering:
    Root moves are shuffled before searching so equal moves are picked
    fairly. The order function is injectable; tests pass a fixed order.
    Inside the tree, moves are searched in generation order.

Algorithm Complexity:
    - Minimax: O(b^d) where b=branching factor (~35), d=depth
    - Alpha-Beta: O(b^(d/2)) with perfect move ordering

References:
    - Minimax: https://www.chessprogramming.org/Minimax
    - Alpha-Beta: https://www.chessprogramming.org/Alpha-Beta
"""

import chess
import logging
import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple, Union
from minimax_chess.board.representation import Board, parse_side, side_name, validate_board
from minimax_chess.evaluation.base import Evaluator, INFINITY
from minimax_chess.evaluation.material import MaterialEvaluator
from minimax_chess.moves.generator import Move, iter_moves
from minimax_chess.search.trace import SearchTrace, TraceEntry

logger = logging.getLogger(__name__)

MoveOrder = Callable[[List[Move]], List[Move]]


class SearchError(RuntimeError):
    """Raised when a search cannot complete (e.g. recursion limit hit)."""


@dataclass(frozen=True)
class RankedMove:
    """A root move with the score the search returned for it."""

    move: Move
    score: float

    @property
    def notation(self) -> str:
        return self.move.notation


@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of one root search.

    Attributes:
        best_move: Chosen move, or None if the side had no moves
        best_score: Score of the chosen move, or None
        ranked_alternatives: Every root move, highest score first
        trace: Search events in the order they happened

    Note:
        Only best_score is guaranteed exact. Root moves searched after a
        better one may report a bound (<= best_score) because the root
        window is narrowed as the search goes.
    """

    best_move: Optional[Move]
    best_score: Optional[float]
    ranked_alternatives: Tuple[RankedMove, ...] = ()
    trace: Tuple[TraceEntry, ...] = field(default=(), repr=False)

    @property
    def has_move(self) -> bool:
        return self.best_move is not None

    @property
    def chosen_notation(self) -> str:
        return self.best_move.notation if self.best_move else "No Move"

    def alternatives(self, limit: int = 3) -> List[RankedMove]:
        """Best-ranked root moves other than the chosen one."""
        others = [r for r in self.ranked_alternatives if r.move is not self.best_move]
        return others[:limit]

    def render_trace(self, limit: Optional[int] = None) -> List[str]:
        """Human-readable trace lines (last `limit` entries if given)."""
        entries = self.trace
        if limit is not None:
            entries = self.trace[-limit:] if limit > 0 else ()
        return [entry.describe() for entry in entries]


def shuffle_moves(rng: Optional[random.Random] = None) -> MoveOrder:
    """
    Build the default root ordering: a random shuffle.

    Args:
        rng: Random source (a fresh unseeded one if None)

    Returns:
        Function that returns a shuffled copy of a move list
    """
    source = rng if rng is not None else random.Random()

    def order(moves: List[Move]) -> List[Move]:
        shuffled = list(moves)
        source.shuffle(shuffled)
        return shuffled

    return order


def generation_order(moves: List[Move]) -> List[Move]:
    """Keep generation order (deterministic root ordering)."""
    return list(moves)


def _search(
    board: Board,
    depth: int,
    maximizing: bool,
    alpha: float,
    beta: float,
    side: chess.Color,
    evaluator: Evaluator,
    trace: SearchTrace,
) -> float:
    # Base case: Reached leaf node (depth = 0)
    if depth == 0:
        score = evaluator.evaluate(board)
        trace.leaf(depth, score, maximizing)
        return score

    mover = side if maximizing else not side
    moves = iter_moves(board, mover)
    if not moves:
        return evaluator.evaluate(board)

    if maximizing:
        max_eval = -INFINITY
        for move in moves:
            eval_score = _search(move.board, depth - 1, False, alpha, beta, side, evaluator, trace)

            if eval_score > max_eval:
                max_eval = eval_score
                trace.bound_update(depth, eval_score, alpha, beta, True, move.notation, move.piece)
            alpha = max(alpha, eval_score)

            # Beta cutoff: Minimizing player won't allow this branch
            if beta <= alpha:
                trace.prune(depth, alpha, beta, True, move.notation, move.piece)
                break

        return max_eval

    min_eval = INFINITY
    for move in moves:
        eval_score = _search(move.board, depth - 1, True, alpha, beta, side, evaluator, trace)

        if eval_score < min_eval:
            min_eval = eval_score
            trace.bound_update(depth, eval_score, alpha, beta, False, move.notation, move.piece)
        beta = min(beta, eval_score)

        # Alpha cutoff: Maximizing player won't allow this branch
        if beta <= alpha:
            trace.prune(depth, alpha, beta, False, move.notation, move.piece)
            break

    return min_eval


def minimax(
    board: Sequence[Optional[str]],
    depth: int,
    maximizing: bool,
    alpha: float = -INFINITY,
    beta: float = INFINITY,
    side: Union[chess.Color, str] = chess.BLACK,
    evaluator: Optional[Evaluator] = None,
    trace: Optional[SearchTrace] = None,
) -> float:
    """
    Minimax search with alpha-beta pruning.

    Args:
        board: Position to search
        depth: Remaining search depth (0 = evaluate immediately)
        maximizing: True if `side` is to move, False if its opponent is
        alpha: Best score the maximizer can already guarantee
        beta: Best score the minimizer can already guarantee
        side: The maximizing color
        evaluator: Position evaluation (default: material from `side`'s view)
        trace: Trace to append events to (a throwaway one if None)

    Returns:
        float: Score of the position; identical to plain minimax over the
        same tree whenever the true value lies inside (alpha, beta)

    Raises:
        InvalidBoardError: If the board is malformed
        ValueError: If depth is negative or side is unknown
        SearchError: If the search exhausts the recursion limit
    """
    if depth < 0:
        raise ValueError(f"depth must be >= 0, got {depth}")

    cells = validate_board(board)
    maximizing_side = parse_side(side)
    try:
        return _search(
            cells,
            depth,
            maximizing,
            alpha,
            beta,
            maximizing_side,
            evaluator if evaluator is not None else MaterialEvaluator(maximizing_side),
            trace if trace is not None else SearchTrace(),
        )
    except RecursionError as e:
        raise SearchError(f"Search at depth {depth} exceeded the recursion limit") from e


def find_best_move(
    board: Sequence[Optional[str]],
    depth: int,
    side: Union[chess.Color, str] = chess.BLACK,
    evaluator: Optional[Evaluator] = None,
    order: Optional[MoveOrder] = None,
    rng: Optional[random.Random] = None,
) -> SearchResult:
    """
    Find the best move for `side` (the bot, Black by default).

    Args:
        board: Current position
        depth: Search depth in plies (>= 1)
        side: Color to move and maximize for
        evaluator: Position evaluation (default: material from `side`'s view)
        order: Root move ordering; default shuffles with `rng`
        rng: Random source for the default shuffle

    Returns:
        SearchResult. If `side` has no moves, best_move and best_score are
        None; deciding whether the game is over is up to the caller.

    Raises:
        InvalidBoardError: If the board is malformed
        ValueError: If depth < 1 or side is unknown
        SearchError: If the search exhausts the recursion limit
    """
    if depth < 1:
        raise ValueError(f"depth must be >= 1, got {depth}")

    cells = validate_board(board)
    maximizing_side = parse_side(side)
    if evaluator is None:
        evaluator = MaterialEvaluator(maximizing_side)
    if order is None:
        order = shuffle_moves(rng)

    trace = SearchTrace()
    root_moves = order(iter_moves(cells, maximizing_side))

    if not root_moves:
        logger.info(f"{side_name(maximizing_side)} has no moves")
        return SearchResult(None, None, (), ())

    best_move = None
    best_score = -INFINITY
    scored: List[RankedMove] = []

    try:
        for move in root_moves:
            trace.root_move(depth, move.notation, move.piece)

            score = _search(
                move.board,
                depth - 1,
                False,
                best_score,
                INFINITY,
                maximizing_side,
                evaluator,
                trace,
            )
            scored.append(RankedMove(move, score))
            logger.debug(f"Root move {move.notation}: {score}")

            if score > best_score:
                best_score = score
                best_move = move
    except RecursionError as e:
        raise SearchError(f"Search at depth {depth} exceeded the recursion limit") from e

    ranked = sorted(scored, key=lambda r: r.score, reverse=True)

    logger.info(
        f"Best move for {side_name(maximizing_side)}: {best_move.notation} "
        f"(score {best_score}, {len(root_moves)} root moves, {len(trace)} trace entries)"
    )

    return SearchResult(best_move, best_score, tuple(ranked), tuple(trace.entries))
