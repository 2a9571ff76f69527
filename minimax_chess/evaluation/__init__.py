"""
Evaluation Module

Position evaluation for the engine. Evaluators are swappable: the search
works with anything implementing the Evaluator interface.

Key Components:
    - Evaluator (ABC): Abstract base class defining the evaluation interface
    - MaterialEvaluator: Material count (P=1, N=B=3, R=5, Q=9, K=1000)
    - evaluate: Validated material score from Black's (the bot's) perspective

Data Flow:
    Board → evaluator.evaluate() → float
                                   Positive = maximizing side ahead
                                   Negative = minimizing side ahead
"""

from minimax_chess.evaluation.base import Evaluator, INFINITY
from minimax_chess.evaluation.material import MaterialEvaluator, PIECE_VALUES, evaluate

__all__ = ['Evaluator', 'INFINITY', 'MaterialEvaluator', 'PIECE_VALUES', 'evaluate']
