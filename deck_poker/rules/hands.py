"""Poker hand categories and their ordering.

Categories (low to high):
- Highest card
- One pair
- Two pairs
- Three of a kind
- Straight (five consecutive values, Ace high only)
- Flush (five cards of one suit)
- Full house (three of a kind + a pair)
- Four of a kind
- Straight flush

Only the category is ranked; kickers and values inside a category are not
compared.
"""

from enum import IntEnum
from typing import Dict


class HandCategory(IntEnum):
    """Poker hand categories, totally ordered by strength."""

    HIGHEST_CARD = 0
    ONE_PAIR = 1
    TWO_PAIRS = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8

    @property
    def label(self) -> str:
        """Kebab-case label, e.g. 'straight-flush'."""
        return self.name.lower().replace("_", "-")

    @classmethod
    def from_label(cls, label: str) -> "HandCategory":
        """Look up a category by its label.

        Raises:
            ValueError: If no category has that label
        """
        for category in cls:
            if category.label == label:
                return category
        raise ValueError(f"Unknown hand category: {label}")

    def __str__(self) -> str:
        return self.label


def reached_hand(current: HandCategory, target: HandCategory) -> bool:
    """Check if the current category already reaches the target.

    Args:
        current: Best category found so far
        target: Category about to be checked

    Returns:
        True if current ranks at or above target
    """
    return current >= target


def describe_categories() -> Dict[HandCategory, str]:
    """Get a one-line description for each category.

    Returns:
        Dict mapping HandCategory to description string, weakest first
    """
    return {
        HandCategory.HIGHEST_CARD: "No combination, the highest card plays",
        HandCategory.ONE_PAIR: "Two cards of the same value",
        HandCategory.TWO_PAIRS: "Two different pairs",
        HandCategory.THREE_OF_A_KIND: "Three cards of the same value",
        HandCategory.STRAIGHT: "Five consecutive values (Ace high only, no A-2-3-4-5)",
        HandCategory.FLUSH: "Five cards of the same suit",
        HandCategory.FULL_HOUSE: "Three of a kind plus a pair",
        HandCategory.FOUR_OF_A_KIND: "Four cards of the same value",
        HandCategory.STRAIGHT_FLUSH: "Five consecutive values of the same suit",
    }
