"""Deck Poker - best poker hand from a hand and a revealed deck.

Ranks the best hand category reachable from five hand cards plus up to
five deck cards revealed in order from the front of the deck.
"""

__version__ = "0.1.0"
__author__ = "Deck Poker Team"

from deck_poker.engine import Evaluation, best_hand, evaluate
from deck_poker.rules import Card, HandCategory, Suit, Value
from deck_poker.validation import CardParseError, parse_cards

__all__ = [
    "__version__",
    "Card",
    "Value",
    "Suit",
    "HandCategory",
    "Evaluation",
    "best_hand",
    "evaluate",
    "CardParseError",
    "parse_cards",
]
