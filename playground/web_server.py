import logging
import os
from typing import List

import uvicorn
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from poker_hands.engine.rounds import RoundConfig, tally_rounds
from poker_hands.rules import (
    InvalidHandFormat,
    Score,
    classify,
    compare_hands,
    describe_score,
    parse_hand,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Poker Hands Playground")


def _score_payload(score: Score) -> dict:
    return {
        "category": score.category.name,
        "rank": score.rank.name,
        "description": describe_score(score),
    }


def _parse_or_400(text: str):
    try:
        return parse_hand(text)
    except InvalidHandFormat as e:
        raise HTTPException(status_code=400, detail=str(e))


class ClassifyRequest(BaseModel):
    hand: str


class CompareRequest(BaseModel):
    hand_a: str
    hand_b: str


class TallyRequest(BaseModel):
    lines: List[str]
    skip_invalid: bool = False


@app.get("/api/health")
def api_health():
    return {"status": "ok"}


@app.post("/api/classify")
def api_classify(req: ClassifyRequest):
    hand = _parse_or_400(req.hand)
    return {"hand": str(hand), **_score_payload(classify(hand))}


@app.post("/api/compare")
def api_compare(req: CompareRequest):
    hand_a = _parse_or_400(req.hand_a)
    hand_b = _parse_or_400(req.hand_b)
    outcome = compare_hands(hand_a, hand_b)
    return {
        "hand_a": {"hand": str(hand_a), **_score_payload(classify(hand_a))},
        "hand_b": {"hand": str(hand_b), **_score_payload(classify(hand_b))},
        "outcome": outcome.name,
    }


@app.post("/api/tally")
def api_tally(req: TallyRequest):
    try:
        tally = tally_rounds(req.lines, RoundConfig(skip_invalid=req.skip_invalid))
    except InvalidHandFormat as e:
        raise HTTPException(status_code=400, detail=str(e))
    return tally.as_dict()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    try:
        host = os.getenv("POKER_HANDS_HOST", "0.0.0.0")
        port = int(os.getenv("POKER_HANDS_PORT", "8000"))
        logger.info("Starting server at http://%s:%d", host, port)
        uvicorn.run(app, host=host, port=port)
    except KeyboardInterrupt:
        pass
