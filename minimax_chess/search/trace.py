"""
Search Trace

A flat, append-only record of the notable decisions made during one
root search, kept so the bot's choice can be explained afterwards.

Entry Kinds:
    - ROOT_MOVE:  A root move is about to be searched
    - LEAF:       A position at depth 0 was evaluated
    - MAX_UPDATE: A maximizing node found a better score
    - MIN_UPDATE: A minimizing node found a better score
    - PRUNE:      Remaining siblings were cut off (beta <= alpha)

Depth values count down from the root search depth to 0, so a consumer can
rebuild the shape of the tree from the flat list.

Ownership:
    One SearchTrace belongs to one find_best_move() call. It is passed
    explicitly through the recursion; there is no module-level log.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional


class TraceKind(Enum):
    """Kind of trace entry."""
    ROOT_MOVE = "ROOT_MOVE"
    LEAF = "EVAL"
    MAX_UPDATE = "MAX_UPDATE"
    MIN_UPDATE = "MIN_UPDATE"
    PRUNE = "PRUNE"


BETA_CUTOFF = "Beta Cutoff (Too Good)"
ALPHA_CUTOFF = "Alpha Cutoff (Too Bad)"


def format_score(score: Optional[float]) -> str:
    """
    Format a score for display: '+3.00', '-1.00', '0.00', or '--'.
    """
    if not isinstance(score, (int, float)) or isinstance(score, bool):
        return "--"
    if score == 0:
        score = 0.0
    sign = "+" if score > 0 else ""
    return f"{sign}{score:.2f}"


@dataclass(frozen=True)
class TraceEntry:
    """
    One recorded search event.

    Attributes:
        kind: Which event this is
        depth: Remaining depth at the node that produced the event
        score: Score involved (leaf value or the improved child score)
        alpha: Alpha bound at the time of the event
        beta: Beta bound at the time of the event
        notation: Move being considered, if any
        piece: Symbol of the moving piece, if any
        maximizing: True for maximizing nodes, False for minimizing
        narrows_bound: For updates, whether the score tightens alpha (max)
            or beta (min)
        reason: Cutoff description for PRUNE entries
    """

    kind: TraceKind
    depth: int
    score: Optional[float] = None
    alpha: Optional[float] = None
    beta: Optional[float] = None
    notation: Optional[str] = None
    piece: Optional[str] = None
    maximizing: Optional[bool] = None
    narrows_bound: bool = False
    reason: Optional[str] = None

    def describe(self) -> str:
        """One human-readable line for this entry."""
        move = f" ({self.notation})" if self.notation else ""

        if self.kind == TraceKind.ROOT_MOVE:
            return f"Checking Root Move: {self.notation}"

        if self.kind == TraceKind.LEAF:
            return f"Depth {self.depth}: Evaluated Leaf Node. Score: {format_score(self.score)}"

        if self.kind == TraceKind.PRUNE:
            return f"Depth {self.depth}: PRUNED! {self.reason}{move}."

        if self.kind == TraceKind.MAX_UPDATE:
            player, label = "MAXIMIZER", "Max"
        else:
            player, label = "MINIMIZER", "Min"
        bound = " (A/B Update)" if self.narrows_bound else ""
        return (
            f"Depth {self.depth}: {player} found better {label} score "
            f"{format_score(self.score)}{bound}{move}."
        )


class SearchTrace:
    """
    Ordered log of TraceEntry values for one root search.

    Attributes:
        entries: Entries in the order they were recorded
    """

    def __init__(self):
        self.entries: List[TraceEntry] = []

    def clear(self) -> None:
        self.entries.clear()

    def leaf(self, depth: int, score: float, maximizing: bool) -> None:
        self.entries.append(
            TraceEntry(TraceKind.LEAF, depth, score=score, maximizing=maximizing)
        )

    def bound_update(
        self,
        depth: int,
        score: float,
        alpha: float,
        beta: float,
        maximizing: bool,
        notation: Optional[str] = None,
        piece: Optional[str] = None,
    ) -> None:
        """
        Record that a node's running best improved.

        alpha and beta are the bounds *before* the improvement is applied,
        which is what decides whether the score narrows the window.
        """
        if maximizing:
            kind, narrows = TraceKind.MAX_UPDATE, score > alpha
        else:
            kind, narrows = TraceKind.MIN_UPDATE, score < beta
        self.entries.append(
            TraceEntry(
                kind,
                depth,
                score=score,
                alpha=alpha,
                beta=beta,
                notation=notation,
                piece=piece,
                maximizing=maximizing,
                narrows_bound=narrows,
            )
        )

    def prune(
        self,
        depth: int,
        alpha: float,
        beta: float,
        maximizing: bool,
        notation: Optional[str] = None,
        piece: Optional[str] = None,
    ) -> None:
        self.entries.append(
            TraceEntry(
                TraceKind.PRUNE,
                depth,
                alpha=alpha,
                beta=beta,
                notation=notation,
                piece=piece,
                maximizing=maximizing,
                reason=BETA_CUTOFF if maximizing else ALPHA_CUTOFF,
            )
        )

    def root_move(self, depth: int, notation: str, piece: Optional[str] = None) -> None:
        self.entries.append(
            TraceEntry(TraceKind.ROOT_MOVE, depth, notation=notation, piece=piece, maximizing=True)
        )

    def count(self, kind: TraceKind) -> int:
        """Number of entries of one kind."""
        return sum(1 for entry in self.entries if entry.kind == kind)

    def tail(self, limit: int) -> List[TraceEntry]:
        """The last `limit` entries (all of them if there are fewer)."""
        if limit <= 0:
            return []
        return self.entries[-limit:]

    def render(self, limit: Optional[int] = None) -> List[str]:
        """
        Describe the trace line by line.

        Args:
            limit: Only render the last `limit` entries (None = all)
        """
        entries = self.entries if limit is None else self.tail(limit)
        return [entry.describe() for entry in entries]

    def __iter__(self) -> Iterator[TraceEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, index):
        return self.entries[index]

    def __repr__(self) -> str:
        return f"SearchTrace(entries={len(self.entries)})"
