"""Best-hand search across deck reveal depths.

A reveal depth ``k`` uses the first ``k`` deck cards as mandatory cards and
fills the rest of the five cards from the hand. Depths are tried in the
order 0, 5, 4, 3, 2, 1: the cheap extremes first, so a straight flush can
end the search early.

Within a depth, categories are checked from strongest to weakest and a
check is skipped once the best category found so far already reaches it.
"""

import logging
from dataclasses import dataclass, field
from functools import cached_property
from typing import Dict, List, Optional, Sequence, Tuple

from deck_poker.rules.detectors import (
    FlushCards,
    detect_count_groups,
    detect_flush,
    detect_straight,
)
from deck_poker.rules.hands import HandCategory, reached_hand
from deck_poker.rules.ranks import Card

logger = logging.getLogger(__name__)

# Order in which reveal depths are tried
REVEAL_ORDER: Tuple[int, ...] = (0, 5, 4, 3, 2, 1)


@dataclass(frozen=True)
class DepthResult:
    """Best category confirmed at one reveal depth.

    Attributes:
        depth: Number of leading deck cards used
        category: Best category at this depth that beat the running best,
            or the running best itself when nothing improved it
    """

    depth: int
    category: HandCategory


@dataclass(frozen=True)
class Evaluation:
    """Outcome of a best-hand search.

    Attributes:
        category: Best category over all depths
        depth: Reveal depth where ``category`` was first confirmed, None for
            a plain highest card
        trace: Per-depth results in the order they were evaluated
    """

    category: HandCategory
    depth: Optional[int] = None
    trace: List[DepthResult] = field(default_factory=list)


class _DepthFeatures:
    """Detector results for one reveal depth, computed on first use."""

    def __init__(self, hand: Sequence[Card], deck: Sequence[Card]):
        self.hand = hand
        self.deck = deck

    @cached_property
    def flush(self) -> Optional[FlushCards]:
        return detect_flush(self.hand, self.deck)

    @cached_property
    def groups(self) -> Dict[int, int]:
        return detect_count_groups(self.hand, self.deck)

    @cached_property
    def straight(self) -> bool:
        return detect_straight(self.hand, self.deck)

    def is_straight_flush(self) -> bool:
        flush = self.flush
        return flush is not None and detect_straight(flush.hand, flush.deck)


# Category checks, strongest first (straight flush is handled separately)
_CATEGORY_CHECKS = (
    (HandCategory.FOUR_OF_A_KIND, lambda f: 4 in f.groups),
    (HandCategory.FULL_HOUSE, lambda f: 3 in f.groups and 2 in f.groups),
    (HandCategory.FLUSH, lambda f: f.flush is not None),
    (HandCategory.STRAIGHT, lambda f: f.straight),
    (HandCategory.THREE_OF_A_KIND, lambda f: 3 in f.groups),
    (HandCategory.TWO_PAIRS, lambda f: f.groups.get(2) == 2),
    (HandCategory.ONE_PAIR, lambda f: f.groups.get(2) == 1),
)


def reveal_depths(deck_size: int) -> List[int]:
    """Reveal depths to try for a deck of the given size.

    Depths past the end of the deck would repeat the full-deck prefix, so
    they are dropped.
    """
    return [depth for depth in REVEAL_ORDER if depth <= deck_size]


def classify_depth(
    hand: Sequence[Card], deck: Sequence[Card], best: HandCategory = HandCategory.HIGHEST_CARD
) -> HandCategory:
    """Find the best category for one reveal depth.

    Args:
        hand: The five hand cards
        deck: Mandatory deck prefix for this depth
        best: Best category found so far; weaker checks are skipped

    Returns:
        The category confirmed at this depth if it beats ``best``,
        otherwise ``best``
    """
    features = _DepthFeatures(hand, deck)

    if features.is_straight_flush():
        return HandCategory.STRAIGHT_FLUSH

    for category, check in _CATEGORY_CHECKS:
        if reached_hand(best, category):
            return best
        if check(features):
            return category

    return best


def evaluate(hand: Sequence[Card], deck: Sequence[Card]) -> Evaluation:
    """Search every reveal depth for the best hand category.

    Args:
        hand: The five hand cards
        deck: Up to five deck cards, in reveal order

    Returns:
        Evaluation with the best category, the depth it was found at and
        the per-depth trace
    """
    best = HandCategory.HIGHEST_CARD
    best_depth: Optional[int] = None
    trace: List[DepthResult] = []

    for depth in reveal_depths(len(deck)):
        category = classify_depth(hand, deck[:depth], best)
        trace.append(DepthResult(depth=depth, category=category))
        logger.debug("depth %d: %s", depth, category.label)

        if category > best:
            best, best_depth = category, depth

        if best == HandCategory.STRAIGHT_FLUSH:
            logger.debug("straight flush at depth %d, stopping search", depth)
            break

    return Evaluation(category=best, depth=best_depth, trace=trace)


def best_hand(hand: Sequence[Card], deck: Sequence[Card]) -> HandCategory:
    """Find the best hand category for a hand and a deck.

    Args:
        hand: The five hand cards
        deck: Up to five deck cards, in reveal order

    Returns:
        The best HandCategory over all reveal depths

    Example:
        >>> cards = make_cards_from_string("TH JH QC QD QS QH KH AH 2S 6S")
        >>> best_hand(cards[:5], cards[5:])
        <HandCategory.STRAIGHT_FLUSH: 8>
    """
    return evaluate(hand, deck).category
