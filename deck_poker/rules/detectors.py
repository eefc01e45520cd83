"""Hand shape detection over a fixed hand and a revealed deck prefix.

Every detector takes the same two card lists:
- ``deck``: cards revealed from the deck. All of them are mandatory and must
  be part of the final five cards.
- ``hand``: the player's cards. They are optional fillers, used only to bring
  the total up to five.

Detectors:
- Flush: a suit that absorbs every deck card and reaches five cards
- Straight: five consecutive values scanned from Ace down to 2
- Count groups: how many values reach each multiplicity (pairs, trips, quads)
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from .ranks import (
    CARD_SUITS,
    CARD_VALUES,
    Card,
    Suit,
    card_by_suit,
    collect,
    get_suit,
    get_value,
)

# Number of cards in a poker hand
HAND_SIZE = 5


@dataclass(frozen=True)
class FlushCards:
    """Cards that can form a flush.

    Attributes:
        hand: Hand cards of the flush suit (may be more than needed)
        deck: The full mandatory deck subset
        suit: The flush suit
    """

    hand: List[Card]
    deck: List[Card]
    suit: Suit


def detect_flush(hand: Sequence[Card], deck: Sequence[Card]) -> Optional[FlushCards]:
    """Find a suit that can form a flush.

    Suits are tried in a fixed order (clubs, diamonds, hearts, spades) and
    the first one that works is returned.

    Args:
        hand: Optional filler cards
        deck: Mandatory cards

    Returns:
        FlushCards for the first suit that takes every deck card and reaches
        five cards, None if no suit does
    """
    hand_suits = collect(hand, get_suit)
    deck_suits = collect(deck, get_suit)

    for suit in CARD_SUITS:
        count_deck = deck_suits.get(suit, 0)

        # Deck cards cannot be dropped
        if count_deck < len(deck):
            continue

        count_hand = hand_suits.get(suit, 0)
        if count_deck + count_hand >= HAND_SIZE:
            return FlushCards(
                hand=[card for card in hand if card_by_suit(suit)(card)],
                deck=list(deck),
                suit=suit,
            )

    return None


def detect_straight(hand: Sequence[Card], deck: Sequence[Card]) -> bool:
    """Check if the cards can form a straight.

    Values are scanned from Ace down to 2 while counting a run of
    consecutive values. A value extends the run if it is in the deck, or if
    it is in the hand and filler budget is left. Anything else resets both
    the run and the budget.

    Ace only counts high, so A-2-3-4-5 is never a straight.

    Args:
        hand: Optional filler cards
        deck: Mandatory cards

    Returns:
        True if a run of five values is found
    """
    hand_values = collect(hand, get_value)
    deck_values = collect(deck, get_value)

    # Two mandatory cards cannot share a slot in a straight
    if any(count > 1 for count in deck_values.values()):
        return False

    budget = HAND_SIZE - len(deck)
    hand_cards_left = budget
    sequence = 0
    for value in CARD_VALUES:
        if value in deck_values:
            sequence += 1
        elif hand_cards_left and value in hand_values:
            hand_cards_left -= 1
            sequence += 1
        else:
            sequence = 0
            hand_cards_left = budget

        if sequence == HAND_SIZE:
            return True

    return False


def detect_count_groups(hand: Sequence[Card], deck: Sequence[Card]) -> Dict[int, int]:
    """Group values by how many times they can appear in five cards.

    Every deck card is counted. Hand cards fill the remaining slots
    greedily: values already in the deck first (largest combined count
    first), then the rest by hand count. Ties go to the higher value.

    Args:
        hand: Optional filler cards
        deck: Mandatory cards

    Returns:
        Dict mapping a multiplicity (> 1) to the number of values reaching it,
        e.g. {2: 2} for two pairs, {3: 1, 2: 1} for a full house
    """
    deck_values = collect(deck, get_value)
    hand_values = collect(hand, get_value)

    def priority(value):
        in_deck = deck_values.get(value, 0)
        return (in_deck > 0, in_deck + hand_values[value], value)

    merged = dict(deck_values)
    slots = HAND_SIZE - len(deck)
    for value in sorted(hand_values, key=priority, reverse=True):
        if slots <= 0:
            break
        taken = min(hand_values[value], slots)
        merged[value] = merged.get(value, 0) + taken
        slots -= taken

    groups: Dict[int, int] = {}
    for count in merged.values():
        if count > 1:
            groups[count] = groups.get(count, 0) + 1
    return groups
