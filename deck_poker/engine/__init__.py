"""Best-hand search engine."""

from .search import (
    REVEAL_ORDER,
    DepthResult,
    Evaluation,
    reveal_depths,
    classify_depth,
    evaluate,
    best_hand,
)

__all__ = [
    "REVEAL_ORDER",
    "DepthResult",
    "Evaluation",
    "reveal_depths",
    "classify_depth",
    "evaluate",
    "best_hand",
]
