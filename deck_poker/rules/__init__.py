"""Poker rules implementations.

This module provides:
- Card values, suits and feature histograms (ranks.py)
- Hand categories and their ordering (hands.py)
- Flush, straight and count-group detection (detectors.py)
"""

from .ranks import (
    Value,
    Suit,
    Card,
    VALUE_SYMBOLS,
    SUIT_SYMBOLS,
    CARD_VALUES,
    CARD_SUITS,
    get_value,
    get_suit,
    collect,
    card_by_suit,
    CardParseError,
    InvalidCardError,
    UnexpectedValueError,
    UnexpectedSuitError,
    create_standard_deck,
    sort_cards,
    make_cards_from_string,
)

from .hands import (
    HandCategory,
    reached_hand,
    describe_categories,
)

from .detectors import (
    HAND_SIZE,
    FlushCards,
    detect_flush,
    detect_straight,
    detect_count_groups,
)

__all__ = [
    # Ranks
    "Value",
    "Suit",
    "Card",
    "VALUE_SYMBOLS",
    "SUIT_SYMBOLS",
    "CARD_VALUES",
    "CARD_SUITS",
    "get_value",
    "get_suit",
    "collect",
    "card_by_suit",
    "CardParseError",
    "InvalidCardError",
    "UnexpectedValueError",
    "UnexpectedSuitError",
    "create_standard_deck",
    "sort_cards",
    "make_cards_from_string",
    # Hands
    "HandCategory",
    "reached_hand",
    "describe_categories",
    # Detectors
    "HAND_SIZE",
    "FlushCards",
    "detect_flush",
    "detect_straight",
    "detect_count_groups",
]
