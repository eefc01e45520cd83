#!/usr/bin/env python
"""Evaluate hand/deck lines and print the best hand category.

Each line holds ten card tokens: five hand cards followed by five deck
cards in reveal order.

Usage:
    deck-poker TH JH QC QD QS QH KH AH 2S 6S
    deck-poker --file hands.txt --json
    cat hands.txt | deck-poker --file - --verbose
    python -m deck_poker.scripts.evaluate --help
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, TextIO

from deck_poker.config import AppConfig, configure_logging
from deck_poker.engine import evaluate
from deck_poker.formatting import format_result, format_trace, result_to_dict
from deck_poker.validation import CardParseError, parse_cards

logger = logging.getLogger(__name__)


def iter_lines(stream: TextIO) -> Iterator[str]:
    """Yield input lines, skipping blanks and # comments."""
    for line in stream:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        yield line


def run(lines: Iterable[str], out: TextIO, verbose: bool = False, as_json: bool = False) -> int:
    """Evaluate every line and write the results.

    Args:
        lines: Input lines, ten card tokens each
        out: Stream for results and error messages
        verbose: Also write the per-depth trace
        as_json: Write one JSON object per line instead of text

    Returns:
        Number of lines that failed to parse
    """
    failures = 0
    for line in lines:
        try:
            cards = parse_cards(line)
        except CardParseError as e:
            failures += 1
            logger.info("rejected input %r: %s", line, e)
            if as_json:
                print(json.dumps({"input": line, "error": str(e)}), file=out)
            else:
                print(f"Error: {e}", file=out)
            continue

        result = evaluate(cards.hand, cards.deck)
        if as_json:
            print(json.dumps(result_to_dict(cards, result)), file=out)
        else:
            print(format_result(cards, result), file=out)
            if verbose:
                print(format_trace(result), file=out)
    return failures


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the evaluation script."""
    parser = argparse.ArgumentParser(
        description="Find the best poker hand from a hand and a revealed deck",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  deck-poker TH JH QC QD QS QH KH AH 2S 6S
  deck-poker --file hands.txt
  deck-poker --file - --json < hands.txt
        """,
    )

    parser.add_argument(
        "cards",
        nargs="*",
        help="Ten card tokens: five hand cards then five deck cards (e.g. TH JH QC QD QS QH KH AH 2S 6S)",
    )

    parser.add_argument(
        "--file",
        "-f",
        type=str,
        default=None,
        help="Read one line of ten cards per evaluation from a file ('-' for stdin)",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Print the result of every reveal depth"
    )

    parser.add_argument("--json", action="store_true", help="Print JSON objects instead of text")

    args = parser.parse_args(argv)

    if args.cards and args.file:
        parser.error("pass cards either as arguments or with --file, not both")
    if not args.cards and not args.file:
        parser.error("no cards given (pass ten card tokens or --file)")

    try:
        config = AppConfig.from_env()
    except ValueError as e:
        parser.error(str(e))
    configure_logging("DEBUG" if args.verbose else config.log_level)

    if args.cards:
        failures = run([" ".join(args.cards)], sys.stdout, verbose=args.verbose, as_json=args.json)
    elif args.file == "-":
        failures = run(iter_lines(sys.stdin), sys.stdout, verbose=args.verbose, as_json=args.json)
    else:
        path = Path(args.file)
        if not path.is_file():
            parser.error(f"file not found: {path}")
        with path.open(encoding="utf-8") as stream:
            failures = run(iter_lines(stream), sys.stdout, verbose=args.verbose, as_json=args.json)

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
