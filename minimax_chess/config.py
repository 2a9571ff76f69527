"""
Engine configuration.
"""

import chess
import random
from dataclasses import dataclass
from typing import Optional


@dataclass
class EngineConfig:
    """Configuration for the bot and the game session.

    Groups the search and presentation settings in one place so a game
    can be reproduced from its config.
    """

    depth: int = 3
    """Search depth in plies for the bot's move"""

    bot_color: chess.Color = chess.BLACK
    """Color played by the bot (the maximizing side)"""

    seed: Optional[int] = None
    """Seed for the root move shuffle (None for random)"""

    trace_limit: int = 100
    """Number of trailing trace entries worth showing to a user"""

    debug: bool = False
    """Log at DEBUG level (per root move scores)"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.depth, int) or isinstance(self.depth, bool):
            raise ValueError(f"depth must be an integer, got {self.depth!r}")

        if self.depth < 1:
            raise ValueError(f"depth must be at least 1, got {self.depth}")

        if self.bot_color not in (chess.WHITE, chess.BLACK):
            raise ValueError(f"bot_color must be chess.WHITE or chess.BLACK, got {self.bot_color!r}")

        if self.trace_limit < 0:
            raise ValueError(f"trace_limit must be non-negative, got {self.trace_limit}")

    def rng(self) -> random.Random:
        """Random source for root move ordering."""
        return random.Random(self.seed)

    def __repr__(self) -> str:
        """String representation of config."""
        return (
            f"EngineConfig(\n"
            f"  Search: depth={self.depth}, bot={chess.COLOR_NAMES[self.bot_color]}, seed={self.seed}\n"
            f"  Trace: last {self.trace_limit} entries\n"
            f"  Debug: {self.debug}\n"
            f")"
        )
