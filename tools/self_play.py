#!/usr/bin/env python3
"""
Self-Play Runner

Plays the bot against itself from the starting position and reports how
the games ended. Both sides search at the same depth; each side maximizes
its own material.

Usage:
    python tools/self_play.py [--games 5] [--depth 2] [--max-plies 80] [--seed 1] [--verbose] [--debug]
"""

import sys
import argparse
import random
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import chess
from tqdm import tqdm

from minimax_chess.board.representation import STARTING_BOARD, captured_king_color, render_board, side_name
from minimax_chess.config import EngineConfig
from minimax_chess.search.minimax import find_best_move, shuffle_moves
from minimax_chess.search.trace import format_score
from minimax_chess.utils.logger import setup_logger


def play_game(config: EngineConfig, max_plies: int, rng: random.Random, verbose: bool = False) -> dict:
    """
    Play one bot-versus-bot game.

    Args:
        config: Search depth and trace limit for both sides
        max_plies: Stop the game after this many plies
        rng: Random source for root move shuffling
        verbose: If True, print every move with its score and the tail of
            its search trace

    Returns:
        Dictionary with the winner (or None), reason, plies and moves
    """
    board = STARTING_BOARD
    turn = chess.WHITE
    order = shuffle_moves(rng)
    moves = []

    for ply in range(max_plies):
        result = find_best_move(board, config.depth, side=turn, order=order)

        if not result.has_move:
            return {'winner': None, 'reason': f"{side_name(turn)} has no moves", 'plies': ply, 'moves': moves}

        board = result.best_move.board
        moves.append(result.chosen_notation)

        if verbose:
            print(f"  {ply + 1:>3}. {side_name(turn):<5} {result.chosen_notation:<8} {format_score(result.best_score)}")
            for line in result.render_trace(config.trace_limit):
                print(f"        {line}")

        loser = captured_king_color(board)
        if loser is not None:
            return {'winner': not loser, 'reason': "king captured", 'plies': ply + 1, 'moves': moves}

        turn = not turn

    if verbose:
        print(render_board(board))

    return {'winner': None, 'reason': "ply limit", 'plies': max_plies, 'moves': moves}


def main():
    parser = argparse.ArgumentParser(
        description="Play the minimax bot against itself"
    )
    parser.add_argument("--games", type=int, default=5, help="Number of games (default: 5)")
    parser.add_argument("--depth", type=int, default=2, help="Search depth (default: 2)")
    parser.add_argument("--max-plies", type=int, default=80, help="Ply limit per game (default: 80)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for root move shuffling")
    parser.add_argument("--verbose", action="store_true", help="Print every move and its trace")
    parser.add_argument("--trace-limit", type=int, default=5, help="Trace lines per move with --verbose (default: 5)")
    parser.add_argument("--debug", action="store_true", help="Log root move scores")

    args = parser.parse_args()

    if args.games < 1 or args.max_plies < 1:
        print("Error: --games and --max-plies must be positive")
        sys.exit(1)

    try:
        config = EngineConfig(depth=args.depth, seed=args.seed, trace_limit=args.trace_limit, debug=args.debug)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    setup_logger(debug=config.debug, log_file=Path.home() / ".minimax_chess" / "self_play.log")
    rng = config.rng()

    print("=" * 60)
    print(f"SELF-PLAY - depth {args.depth}, {args.games} games, max {args.max_plies} plies")
    print("=" * 60)

    results = []
    start_time = time.time()
    try:
        for game in tqdm(range(args.games), desc="Games", disable=args.verbose):
            if args.verbose:
                print(f"\nGame {game + 1}:")
            results.append(play_game(config, args.max_plies, rng, verbose=args.verbose))
    except KeyboardInterrupt:
        print("\n\nSelf-play interrupted by user")
        sys.exit(1)
    total_time = time.time() - start_time

    white_wins = sum(1 for r in results if r['winner'] == chess.WHITE)
    black_wins = sum(1 for r in results if r['winner'] == chess.BLACK)
    unfinished = len(results) - white_wins - black_wins

    print()
    print(f"{'Game':<6} {'Result':<8} {'Plies':<6} Reason")
    print("-" * 60)
    for i, r in enumerate(results, 1):
        outcome = side_name(r['winner']) if r['winner'] is not None else "-"
        print(f"{i:<6} {outcome:<8} {r['plies']:<6} {r['reason']}")
    print("-" * 60)
    print(f"White wins: {white_wins}  Black wins: {black_wins}  Unfinished: {unfinished}")
    print(f"Total time: {total_time:.1f}s")


if __name__ == "__main__":
    main()
