"""
Search Module

Minimax with alpha-beta pruning, plus the trace that explains each
decision the search made.

Key Components:
    - minimax: Core recursive search with alpha-beta pruning
    - find_best_move: Root-level search returning a SearchResult
    - SearchTrace / TraceEntry: Flat log of leaves, bound updates, prunes
      and root moves
"""

from minimax_chess.search.minimax import (
    RankedMove,
    SearchError,
    SearchResult,
    find_best_move,
    generation_order,
    minimax,
    shuffle_moves,
)
from minimax_chess.search.trace import SearchTrace, TraceEntry, TraceKind, format_score

__all__ = [
    'RankedMove',
    'SearchError',
    'SearchResult',
    'SearchTrace',
    'TraceEntry',
    'TraceKind',
    'find_best_move',
    'format_score',
    'generation_order',
    'minimax',
    'shuffle_moves',
]
