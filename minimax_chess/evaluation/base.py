"""
Abstract Evaluator Interface

This module defines the abstract base class for all position evaluators.
The search only talks to this interface, so evaluators can be swapped
without touching the search code.

Key Principles:
    1. Evaluators are stateless
    2. evaluate() scores a board from the perspective of the maximizing side
    3. Positive = good for the maximizing side, Negative = good for its opponent

Convention:
    - Material units (pawn = 1, queen = 9)
    - Return 0 for materially equal positions
"""

import chess
from abc import ABC, abstractmethod
from typing import Optional, Sequence

INFINITY = float("inf")


class Evaluator(ABC):
    """
    Abstract base class for position evaluation.

    Attributes:
        perspective: The color whose advantage counts as positive. The
            search maximizes for this color.
    """

    def __init__(self, perspective: chess.Color = chess.BLACK):
        self.perspective = perspective

    @abstractmethod
    def evaluate(self, board: Sequence[Optional[str]]) -> float:
        """
        Score a board from the perspective of `self.perspective`.

        Args:
            board: Board snapshot (64 cells)

        Returns:
            float: Positive if `perspective` is ahead
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(perspective={chess.COLOR_NAMES[self.perspective]})"
