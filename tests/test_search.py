"""
Unit Tests for Search Module

Tests for minimax search and root move selection, focusing on:
    - Alpha-beta returns the same value as plain minimax
    - The root decision matches plain minimax
    - Tactical sanity (hanging queen, king capture)
    - No-move and error handling
    - Root ordering (injected order, seeded shuffle)
"""

import chess
import math
import random
import pytest
from minimax_chess.board.representation import STARTING_BOARD, InvalidBoardError, board_from_fen
from minimax_chess.evaluation import Evaluator, MaterialEvaluator
from minimax_chess.moves.generator import generate_moves, iter_moves
from minimax_chess.search import (
    SearchError,
    SearchResult,
    SearchTrace,
    TraceKind,
    find_best_move,
    generation_order,
    minimax,
    shuffle_moves,
)

INF = float("inf")

POSITIONS = [
    "4k3/8/8/3q4/4P3/8/8/4K3",
    "k2r4/8/8/8/8/8/3Q4/7K",
    "r3k3/1p6/2n5/8/3B4/8/5PPP/4K2R",
    "4k3/2p1p3/3N4/8/8/8/8/4K3",
]


def full_minimax(board, depth, maximizing, side, evaluator, counter=None):
    """Plain minimax without pruning, used as the reference."""
    if depth == 0:
        if counter is not None:
            counter[0] += 1
        return evaluator.evaluate(board)

    moves = iter_moves(board, side if maximizing else not side)
    if not moves:
        return evaluator.evaluate(board)

    scores = [full_minimax(m.board, depth - 1, not maximizing, side, evaluator, counter) for m in moves]
    return max(scores) if maximizing else min(scores)


def full_root(board, depth, side=chess.BLACK):
    """First best root move (in generation order) under plain minimax."""
    evaluator = MaterialEvaluator(side)
    best_move, best_score = None, -INF
    for move in iter_moves(board, side):
        score = full_minimax(move.board, depth - 1, False, side, evaluator)
        if score > best_score:
            best_move, best_score = move, score
    return best_move, best_score


class TestMinimax:
    """Tests for the minimax search."""

    @pytest.fixture
    def evaluator(self):
        return MaterialEvaluator(chess.BLACK)

    @pytest.mark.parametrize("fen", POSITIONS)
    @pytest.mark.parametrize("depth", [1, 2, 3])
    @pytest.mark.parametrize("maximizing", [True, False])
    def test_alpha_beta_equals_full_minimax(self, evaluator, fen, depth, maximizing):
        board = board_from_fen(fen)

        pruned = minimax(board, depth, maximizing, evaluator=evaluator)
        reference = full_minimax(board, depth, maximizing, chess.BLACK, evaluator)

        assert pruned == reference

    def test_alpha_beta_from_start(self, evaluator):
        pruned = minimax(STARTING_BOARD, 3, True, evaluator=evaluator)
        reference = full_minimax(STARTING_BOARD, 3, True, chess.BLACK, evaluator)
        assert pruned == reference

    def test_pruning_skips_leaves(self, evaluator):
        board = board_from_fen(POSITIONS[2])
        trace = SearchTrace()
        counter = [0]

        minimax(board, 3, True, evaluator=evaluator, trace=trace)
        full_minimax(board, 3, True, chess.BLACK, evaluator, counter)

        assert trace.count(TraceKind.LEAF) < counter[0], "Alpha-beta should evaluate fewer leaves"
        assert trace.count(TraceKind.PRUNE) > 0

    def test_depth_zero_evaluates(self, evaluator):
        board = board_from_fen(POSITIONS[0])
        trace = SearchTrace()

        score = minimax(board, 0, True, evaluator=evaluator, trace=trace)

        assert score == evaluator.evaluate(board)
        assert len(trace) == 1
        assert trace[0].kind == TraceKind.LEAF
        assert trace[0].depth == 0

    def test_no_moves_falls_back_to_evaluation(self, evaluator):
        """A side without moves is scored statically, without a leaf entry."""
        board = board_from_fen("8/p7/P7/8/8/8/8/4K3")
        trace = SearchTrace()

        score = minimax(board, 3, True, evaluator=evaluator, trace=trace)

        assert score == evaluator.evaluate(board)
        assert len(trace) == 0

    def test_default_evaluator_follows_side(self):
        board = board_from_fen(POSITIONS[0])
        assert minimax(board, 0, True, side=chess.WHITE) == -minimax(board, 0, True, side=chess.BLACK)

    def test_negative_depth(self):
        with pytest.raises(ValueError):
            minimax(STARTING_BOARD, -1, True)

    def test_malformed_board(self):
        with pytest.raises(InvalidBoardError):
            minimax(STARTING_BOARD[:10], 2, True)

    def test_recursion_failure_is_wrapped(self):
        class ExplodingEvaluator(Evaluator):
            def evaluate(self, board):
                raise RecursionError("maximum recursion depth exceeded")

        with pytest.raises(SearchError) as excinfo:
            minimax(STARTING_BOARD, 2, True, evaluator=ExplodingEvaluator())

        assert isinstance(excinfo.value.__cause__, RecursionError)

    def test_board_not_modified(self):
        board = list(board_from_fen(POSITIONS[2]))
        snapshot = tuple(board)
        minimax(board, 3, True)
        assert tuple(board) == snapshot


class TestFindBestMove:
    """Tests for root move selection."""

    def test_captures_hanging_queen(self):
        """Depth 1: Black takes the undefended queen and gains 9."""
        board = board_from_fen("k2r4/8/8/8/8/8/3Q4/7K")
        before = MaterialEvaluator(chess.BLACK).evaluate(board)

        result = find_best_move(board, depth=1, order=generation_order)

        assert result.chosen_notation == "Rxd2"
        assert result.best_move.captured == 'Q'
        assert result.best_score == before + 9

    @pytest.mark.parametrize("fen", POSITIONS + [chess.STARTING_BOARD_FEN])
    @pytest.mark.parametrize("depth", [1, 2, 3])
    def test_matches_full_minimax_decision(self, fen, depth):
        board = board_from_fen(fen)

        result = find_best_move(board, depth, order=generation_order)
        expected_move, expected_score = full_root(board, depth)

        assert result.best_score == expected_score
        assert result.best_move == expected_move

    def test_chosen_move_is_best_under_any_order(self):
        board = board_from_fen(POSITIONS[2])
        _, expected_score = full_root(board, 3)

        for seed in range(3):
            result = find_best_move(board, 3, rng=random.Random(seed))
            assert result.best_score == expected_score

    def test_white_side(self):
        """The bot can play White; it maximizes White's material."""
        board = board_from_fen("4k3/8/8/3q4/4P3/8/8/4K3")

        result = find_best_move(board, depth=1, side=chess.WHITE, order=generation_order)

        assert result.chosen_notation == "exd5"
        assert result.best_score == 1001 - 1000

    def test_captures_king_when_possible(self):
        board = board_from_fen("4k3/8/8/8/8/8/8/4r1K1")
        result = find_best_move(board, depth=2, order=generation_order)
        assert result.best_move.captures_king

    def test_no_moves_returns_empty_result(self):
        board = board_from_fen("8/p7/P7/8/8/8/8/4K3")

        result = find_best_move(board, depth=3)

        assert isinstance(result, SearchResult)
        assert result.best_move is None
        assert result.best_score is None
        assert not result.has_move
        assert result.ranked_alternatives == ()
        assert result.chosen_notation == "No Move"

    def test_no_pieces_returns_empty_result(self):
        result = find_best_move(board_from_fen("8/8/8/8/8/8/8/4K3"), depth=2)
        assert not result.has_move

    def test_ranked_alternatives(self):
        board = board_from_fen(POSITIONS[1])
        root_moves = generate_moves(board, chess.BLACK)

        result = find_best_move(board, depth=2, order=generation_order)
        scores = [r.score for r in result.ranked_alternatives]

        assert len(result.ranked_alternatives) == len(root_moves)
        assert scores == sorted(scores, reverse=True)
        assert result.ranked_alternatives[0].move == result.best_move
        assert result.ranked_alternatives[0].score == result.best_score
        assert {r.move.uci for r in result.ranked_alternatives} == {m.uci for m in root_moves}

    def test_alternatives_exclude_chosen(self):
        board = board_from_fen(POSITIONS[1])
        result = find_best_move(board, depth=2, order=generation_order)

        alternatives = result.alternatives(limit=3)

        assert len(alternatives) == 3
        assert all(r.move != result.best_move for r in alternatives)

    def test_tie_goes_to_first_in_order(self):
        """From the start every root move scores 0 at depth 1."""
        result = find_best_move(STARTING_BOARD, depth=1, order=generation_order)
        assert result.chosen_notation == "Na6"

        reversed_order = lambda moves: list(reversed(moves))
        result = find_best_move(STARTING_BOARD, depth=1, order=reversed_order)
        assert result.chosen_notation == "h5"

    def test_even_scores_are_not_negative_zero(self):
        result = find_best_move(STARTING_BOARD, depth=2, order=generation_order)

        assert result.best_score == 0
        assert math.copysign(1.0, result.best_score) == 1.0
        assert all(math.copysign(1.0, r.score) == 1.0 for r in result.ranked_alternatives if r.score == 0)

    def test_injected_order_is_deterministic(self):
        board = board_from_fen(POSITIONS[2])

        first = find_best_move(board, 3, order=generation_order)
        second = find_best_move(board, 3, order=generation_order)

        assert first.best_move == second.best_move
        assert first.trace == second.trace

    def test_seeded_shuffle_is_reproducible(self):
        first = find_best_move(STARTING_BOARD, 2, rng=random.Random(42))
        second = find_best_move(STARTING_BOARD, 2, rng=random.Random(42))
        assert first.chosen_notation == second.chosen_notation

    def test_shuffle_keeps_all_moves(self):
        moves = generate_moves(STARTING_BOARD, chess.BLACK)
        shuffled = shuffle_moves(random.Random(3))(moves)
        assert sorted(m.uci for m in shuffled) == sorted(m.uci for m in moves)
        assert [m.uci for m in moves] == [m.uci for m in generate_moves(STARTING_BOARD, chess.BLACK)]

    def test_trace_is_fresh_per_call(self):
        board = board_from_fen(POSITIONS[0])
        first = find_best_move(board, 2, order=generation_order)
        second = find_best_move(board, 2, order=generation_order)
        assert len(first.trace) == len(second.trace)

    def test_trace_has_one_root_entry_per_move(self):
        board = board_from_fen(POSITIONS[1])
        root_moves = generate_moves(board, chess.BLACK)

        result = find_best_move(board, 1, order=generation_order)
        roots = [e for e in result.trace if e.kind == TraceKind.ROOT_MOVE]

        assert result.trace[0].kind == TraceKind.ROOT_MOVE
        assert [e.notation for e in roots] == [m.notation for m in root_moves]
        assert all(e.depth == 1 for e in roots)
        leaves = [e for e in result.trace if e.kind == TraceKind.LEAF]
        assert len(leaves) == len(root_moves), "Depth 1 evaluates each root child once"

    def test_invalid_depth(self):
        with pytest.raises(ValueError):
            find_best_move(STARTING_BOARD, 0)

    def test_malformed_board(self):
        with pytest.raises(InvalidBoardError):
            find_best_move(['k'] * 65, 2)

    def test_recursion_failure_is_distinguishable(self):
        class ExplodingEvaluator(Evaluator):
            def evaluate(self, board):
                raise RecursionError("maximum recursion depth exceeded")

        with pytest.raises(SearchError) as excinfo:
            find_best_move(STARTING_BOARD, 2, evaluator=ExplodingEvaluator())

        assert isinstance(excinfo.value.__cause__, RecursionError)

    def test_result_is_immutable(self):
        result = find_best_move(board_from_fen(POSITIONS[0]), 1)
        with pytest.raises(AttributeError):
            result.best_score = 0
