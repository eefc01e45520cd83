#!/usr/bin/env python3
"""
Interactive best-hand finder.

Usage:
   python playground/play_tui.py
   python playground/play_tui.py --verbose

Input tips:
- Ten cards separated by spaces: five hand cards, then five deck cards
  e.g. "TH JH QC QD QS QH KH AH 2S 6S"
- Values: 2 3 4 5 6 7 8 9 T J Q K A, suits: C D H S
- "quit" / "exit" or Ctrl-D: exit
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional

from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text
from rich import box

from deck_poker.config import AppConfig, configure_logging
from deck_poker.engine import Evaluation, evaluate
from deck_poker.formatting import format_result
from deck_poker.rules import HandCategory, Suit
from deck_poker.validation import CardParseError, ParsedCards, parse_cards


# ==============================================================================
# Constants & Config
# ==============================================================================

QUIT_WORDS = {"quit", "exit", "q"}

COLOR_HEART = "red1"
COLOR_DIAMOND = "red1"
COLOR_CLUB = "green1"
COLOR_SPADE = "cyan1"

SUIT_STYLES = {
    Suit.HEARTS: f"bold {COLOR_HEART}",
    Suit.DIAMONDS: f"bold {COLOR_DIAMOND}",
    Suit.CLUBS: f"bold {COLOR_CLUB}",
    Suit.SPADES: f"bold {COLOR_SPADE}",
}

console = Console()
logger = logging.getLogger(__name__)


# ==============================================================================
# UI Helpers
# ==============================================================================

def render_trace(result: Evaluation) -> Table:
    """Table of the category found at each reveal depth."""
    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("Depth", justify="right")
    table.add_column("Category")
    for step in result.trace:
        style = "bold yellow" if step.depth == result.depth else ""
        table.add_row(str(step.depth), step.category.label, style=style)
    return table


def render_result(cards: ParsedCards, result: Evaluation) -> Text:
    """Result line with each card coloured by its suit."""
    text = Text(format_result(cards, result))
    for card in (*cards.hand, *cards.deck):
        text.highlight_words([str(card)], style=SUIT_STYLES[card.suit])
    style = "bold magenta" if result.category == HandCategory.STRAIGHT_FLUSH else "bold"
    text.highlight_words([result.category.label], style=style)
    return text


def show_result(line: str, verbose: bool) -> None:
    """Evaluate one input line and print it.

    Raises:
        CardParseError: If the line is not ten valid cards
    """
    cards = parse_cards(line)
    result = evaluate(cards.hand, cards.deck)
    console.print(render_result(cards, result))

    if verbose:
        console.print(render_trace(result))


# ==============================================================================
# Main Loop
# ==============================================================================

def repl(prompt: str, verbose: bool = False) -> None:
    """Read lines until EOF or a quit word, printing each result."""
    while True:
        try:
            line = Prompt.ask(prompt, console=console)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        line = line.strip()
        if line.lower() in QUIT_WORDS:
            break

        try:
            show_result(line, verbose)
        except CardParseError as e:
            logger.debug("rejected input %r", line)
            console.print(f"[red]{e}[/red]")

        console.print()


def main(argv: Optional[list] = None):
    parser = argparse.ArgumentParser(description="Deck Poker: interactive best-hand finder")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show the result of every reveal depth")
    parser.add_argument("--prompt", type=str, default=None, help="Prompt text (default from DECK_POKER_PROMPT)")
    args = parser.parse_args(argv)

    try:
        config = AppConfig.from_env()
    except ValueError as e:
        parser.error(str(e))
    configure_logging(config.log_level)

    console.print("[dim]Enter five hand cards and five deck cards, 'quit' to exit.[/dim]")
    repl(args.prompt or config.prompt, verbose=args.verbose)


if __name__ == "__main__":
    main()
