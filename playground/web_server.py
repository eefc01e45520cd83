#!/usr/bin/env python3
import logging
from typing import List, Optional

import uvicorn
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from deck_poker import __version__
from deck_poker.config import AppConfig, configure_logging
from deck_poker.engine import evaluate
from deck_poker.formatting import result_to_dict
from deck_poker.rules import HandCategory, describe_categories
from deck_poker.validation import (
    HAND_CARDS,
    CardParseError,
    ParsedCards,
    parse_card,
    parse_cards,
)

logger = logging.getLogger(__name__)

MAX_DECK_CARDS = 5

app = FastAPI(title="Deck Poker", version=__version__)


class EvaluateRequest(BaseModel):
    cards: Optional[str] = None  # "TH JH QC QD QS QH KH AH 2S 6S"
    hand: Optional[List[str]] = None
    deck: Optional[List[str]] = None


def _parse_request(req: EvaluateRequest) -> ParsedCards:
    if req.cards is not None:
        if req.hand is not None or req.deck is not None:
            raise HTTPException(status_code=400, detail="Pass either cards or hand/deck, not both")
        return parse_cards(req.cards)

    if req.hand is None:
        raise HTTPException(status_code=400, detail="Missing cards")
    deck = req.deck or []
    if len(req.hand) != HAND_CARDS:
        raise HTTPException(status_code=400, detail="Five hand cards expected")
    if len(deck) > MAX_DECK_CARDS:
        raise HTTPException(status_code=400, detail="At most five deck cards expected")
    return ParsedCards(
        hand=[parse_card(token) for token in req.hand],
        deck=[parse_card(token) for token in deck],
    )


@app.get("/api/categories")
def api_categories():
    descriptions = describe_categories()
    return [
        {
            "name": category.name,
            "label": category.label,
            "rank": int(category),
            "description": descriptions[category],
        }
        for category in HandCategory
    ]


@app.post("/api/evaluate")
def api_evaluate(req: EvaluateRequest):
    try:
        cards = _parse_request(req)
    except CardParseError as e:
        raise HTTPException(status_code=400, detail=str(e))

    result = evaluate(cards.hand, cards.deck)
    logger.debug("evaluated %s -> %s", req, result.category.label)
    return result_to_dict(cards, result)


if __name__ == "__main__":
    try:
        config = AppConfig.from_env()
    except ValueError as e:
        raise SystemExit(f"Error: {e}")
    try:
        configure_logging(config.log_level)
        print(f"Starting server at http://{config.host}:{config.port}")
        uvicorn.run(app, host=config.host, port=config.port)
    except KeyboardInterrupt:
        pass
