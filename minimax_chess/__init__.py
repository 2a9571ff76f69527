"""
minimax_chess

An explainable chess bot: minimax search with alpha-beta pruning over a
material-only evaluation, with a trace of every decision the search made.

## Architecture

The engine is organized into several key modules:

1. **board**: Board representation
   - 64-cell snapshot (row 0 = rank 8), piece identity helpers
   - FEN conversion through python-chess, tensor view

2. **moves**: Move generation and notation
   - Candidate moves with simple queen promotion
   - No check detection: games end by king capture

3. **evaluation**: Position evaluation
   - Abstract Evaluator interface (swappable design)
   - MaterialEvaluator: P=1, N=B=3, R=5, Q=9, K=1000

4. **search**: Search algorithms
   - Minimax with alpha-beta pruning
   - Root search with shuffled move order
   - SearchTrace: leaf evaluations, bound updates, prunes, root moves

5. **game**: A single human-versus-bot game

## Quick Start

```python
from minimax_chess import STARTING_BOARD, find_best_move, generate_moves
import chess

# White opens 1. e4
board = next(m.board for m in generate_moves(STARTING_BOARD, chess.WHITE) if m.notation == "e4")

# Bot (Black) replies
result = find_best_move(board, depth=3)
print(f"Best move: {result.chosen_notation} (score: {result.best_score:+.2f})")
for line in result.render_trace(limit=10):
    print(line)
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from minimax_chess.board import STARTING_BOARD, InvalidBoardError, board_from_fen, validate_board
from minimax_chess.config import EngineConfig
from minimax_chess.evaluation import Evaluator, MaterialEvaluator, evaluate
from minimax_chess.game import Game, IllegalMoveError
from minimax_chess.moves import Move, generate_moves, notate
from minimax_chess.search import SearchError, SearchResult, SearchTrace, find_best_move, minimax

__all__ = [
    'STARTING_BOARD',
    'InvalidBoardError',
    'board_from_fen',
    'validate_board',
    'EngineConfig',
    'Evaluator',
    'MaterialEvaluator',
    'evaluate',
    'Game',
    'IllegalMoveError',
    'Move',
    'generate_moves',
    'notate',
    'SearchError',
    'SearchResult',
    'SearchTrace',
    'find_best_move',
    'minimax',
]
