"""Text and JSON views of an evaluation, shared by the CLI, REPL and web server."""

from deck_poker.engine import Evaluation
from deck_poker.validation import ParsedCards, format_cards


def format_result(cards: ParsedCards, result: Evaluation) -> str:
    """Render one evaluation as a result line."""
    return (
        f"Hand: {format_cards(cards.hand)} "
        f"Deck: {format_cards(cards.deck)} "
        f"Best hand: {result.category.label}"
    )


def format_trace(result: Evaluation) -> str:
    """Render the per-depth trace of an evaluation."""
    return "\n".join(
        f"  depth {step.depth}: {step.category.label}" for step in result.trace
    )


def result_to_dict(cards: ParsedCards, result: Evaluation) -> dict:
    """JSON-ready view of one evaluation."""
    return {
        "hand": [str(card) for card in cards.hand],
        "deck": [str(card) for card in cards.deck],
        "category": result.category.label,
        "rank": int(result.category),
        "depth": result.depth,
        "trace": [
            {"depth": step.depth, "category": step.category.label} for step in result.trace
        ],
    }
