"""Parsing and validation of the ten-card input line.

The input is ten two-character tokens separated by whitespace, e.g.
``"TH JH QC QD QS QH KH AH 2S 6S"``. The first five tokens are the hand and
the last five the deck, both kept in the order given.
"""

from dataclasses import dataclass
from typing import Iterable, List

from deck_poker.rules.ranks import (
    Card,
    CardParseError,
    InvalidCardError,
    UnexpectedSuitError,
    UnexpectedValueError,
)

# Tokens expected on one input line
CARDS_PER_LINE = 10
# Tokens that belong to the hand; the rest are the deck
HAND_CARDS = 5

__all__ = [
    "CARDS_PER_LINE",
    "HAND_CARDS",
    "CardParseError",
    "WrongCardCountError",
    "InvalidCardError",
    "UnexpectedValueError",
    "UnexpectedSuitError",
    "ParsedCards",
    "parse_card",
    "parse_cards",
    "format_cards",
]


class WrongCardCountError(CardParseError):
    """The line does not hold exactly ten tokens."""

    def __init__(self, count: int):
        self.count = count
        super().__init__("Ten cards expected")


@dataclass(frozen=True)
class ParsedCards:
    """A validated input line split into hand and deck."""

    hand: List[Card]
    deck: List[Card]


def parse_card(token: str) -> Card:
    """Validate and parse one card token.

    Raises:
        InvalidCardError: If the token is not two characters
        UnexpectedValueError: If the value symbol is unknown
        UnexpectedSuitError: If the suit symbol is unknown
    """
    return Card.from_string(token)


def parse_cards(text: str) -> ParsedCards:
    """Parse a line of ten card tokens into a hand and a deck.

    Args:
        text: Whitespace-separated card tokens

    Returns:
        ParsedCards with the first five cards as hand, the last five as deck

    Raises:
        CardParseError: On the first problem found, checking the token count
            first and then each token in order
    """
    tokens = text.split()
    if len(tokens) != CARDS_PER_LINE:
        raise WrongCardCountError(len(tokens))

    cards = [parse_card(token) for token in tokens]
    return ParsedCards(hand=cards[:HAND_CARDS], deck=cards[HAND_CARDS:])


def format_cards(cards: Iterable[Card]) -> str:
    """Render cards as space-separated tokens."""
    return " ".join(str(card) for card in cards)
