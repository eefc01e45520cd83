"""Card value/suit definitions and feature utilities.

Value order (high to low): A > K > Q > J > T > 9 > 8 > 7 > 6 > 5 > 4 > 3 > 2

Ace is high only; it never wraps around below 2.

This module provides:
- Value and suit enumerations
- Card representation and token parsing errors
- Feature projections and histograms
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Dict, Hashable, Iterable, List, TypeVar


class Value(IntEnum):
    """Card values ordered by strength (higher value = stronger card)."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14  # Highest value, never low


class Suit(IntEnum):
    """Card suits. Suits are unordered; the integer only fixes iteration order."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3


# Value symbols used by the two-character card tokens
VALUE_SYMBOLS = {
    Value.TWO: "2",
    Value.THREE: "3",
    Value.FOUR: "4",
    Value.FIVE: "5",
    Value.SIX: "6",
    Value.SEVEN: "7",
    Value.EIGHT: "8",
    Value.NINE: "9",
    Value.TEN: "T",
    Value.JACK: "J",
    Value.QUEEN: "Q",
    Value.KING: "K",
    Value.ACE: "A",
}

# Suit symbols used by the two-character card tokens
SUIT_SYMBOLS = {
    Suit.CLUBS: "C",
    Suit.DIAMONDS: "D",
    Suit.HEARTS: "H",
    Suit.SPADES: "S",
}

SYMBOL_TO_VALUE = {v: k for k, v in VALUE_SYMBOLS.items()}
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}

# Scan order for straights: Ace first, 2 last, no wraparound
CARD_VALUES = tuple(sorted(Value, reverse=True))

# Suit order tried by the flush detector
CARD_SUITS = tuple(Suit)


class CardParseError(ValueError):
    """Raised when text cannot be turned into cards."""

    pass


class InvalidCardError(CardParseError):
    """A token is not two characters long."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid card: {token}")


class UnexpectedValueError(CardParseError):
    """A token starts with an unknown value symbol."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Unexpected card value: {symbol}")


class UnexpectedSuitError(CardParseError):
    """A token ends with an unknown suit symbol."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Unexpected card suit: {symbol}")


@dataclass(frozen=True, order=True)
class Card:
    """A playing card with value and suit.

    Cards are plain value objects: two cards with the same value and suit are
    equal and hash the same. Ordered by value first, then by suit.
    """

    value: Value
    suit: Suit

    def __str__(self) -> str:
        return f"{VALUE_SYMBOLS[self.value]}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return f"Card({self})"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from a token like 'TH' or 'AS'.

        Args:
            s: Two-character card token, value symbol then suit symbol

        Returns:
            Card object

        Raises:
            InvalidCardError: If the token is not two characters
            UnexpectedValueError: If the value symbol is unknown
            UnexpectedSuitError: If the suit symbol is unknown
        """
        if len(s) != 2:
            raise InvalidCardError(s)

        value_char, suit_char = s[0], s[1]
        if value_char not in SYMBOL_TO_VALUE:
            raise UnexpectedValueError(value_char)
        if suit_char not in SYMBOL_TO_SUIT:
            raise UnexpectedSuitError(suit_char)

        return cls(value=SYMBOL_TO_VALUE[value_char], suit=SYMBOL_TO_SUIT[suit_char])


F = TypeVar("F", bound=Hashable)


def get_value(card: Card) -> Value:
    """Project a card onto its value."""
    return card.value


def get_suit(card: Card) -> Suit:
    """Project a card onto its suit."""
    return card.suit


def collect(cards: Iterable[Card], extractor: Callable[[Card], F]) -> Dict[F, int]:
    """Count occurrences of a card feature.

    Args:
        cards: Cards to inspect
        extractor: Feature projection, e.g. get_value or get_suit

    Returns:
        Dict mapping each feature seen to its count

    Example:
        >>> collect(make_cards_from_string("2H 3C 2D"), get_value)
        {<Value.TWO: 2>: 2, <Value.THREE: 3>: 1}
    """
    counts: Dict[F, int] = {}
    for card in cards:
        feature = extractor(card)
        counts[feature] = counts.get(feature, 0) + 1
    return counts


def card_by_suit(suit: Suit) -> Callable[[Card], bool]:
    """Predicate matching cards of the given suit."""
    return lambda card: card.suit == suit


def create_standard_deck() -> List[Card]:
    """Create a standard 52-card deck.

    Returns:
        List of 52 Card objects (13 values x 4 suits)
    """
    return [Card(value=value, suit=suit) for value in CARD_VALUES for suit in CARD_SUITS]


def sort_cards(cards: Iterable[Card], reverse: bool = False) -> List[Card]:
    """Sort cards by value, then by suit."""
    return sorted(cards, reverse=reverse)


def make_cards_from_string(s: str) -> List[Card]:
    """Parse cards from a string like "TH JH QC QD QS".

    Args:
        s: Whitespace-separated card tokens

    Returns:
        List of Card objects, in the order given

    Raises:
        CardParseError: On the first token that is not a valid card
    """
    return [Card.from_string(token) for token in s.split()]
