"""HTTP 规则服务 - 对外提供发牌、牌型识别、压牌判定"""

import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException, status
from pydantic import BaseModel, Field

from src.engine.card import Card, RegularCard, card_points
from src.engine.errors import CardParseError
from src.engine.hand import Hand
from src.engine.notation import parse_card_list
from src.game.config import GameConfig
from src.game.deck import deal_hands

logger = logging.getLogger(__name__)


# ============================================================
#  请求模型
# ============================================================

class ClassifyRequest(BaseModel):
    """牌型识别请求"""
    cards: List[str] = Field(..., description="牌面文本，如 ['H2', 'S2', 'Phoenix']")


class CompareRequest(BaseModel):
    """压牌判定请求"""
    hand: List[str] = Field(..., description="准备出的牌")
    previous: List[str] = Field(..., description="上家出的牌")


# ============================================================
#  序列化工具
# ============================================================

def card_to_dict(c: Card) -> dict:
    """将 Card 序列化为前端可用的 dict"""
    if isinstance(c, RegularCard):
        return {
            "rank": int(c.rank),
            "suit": c.suit.value,
            "display": c.display,
            "score": c.score(),
        }
    return {
        "special": c.kind.value,
        "display": c.display,
        "score": c.score(),
    }


def hand_to_dict(hand: Hand) -> dict:
    """将 Hand 及其判定结果序列化"""
    hand_type = hand.hand_type()
    value = hand.relevant_card_value()
    return {
        "cards": [card_to_dict(c) for c in hand.cards],
        "hand_type": hand_type.value if hand_type is not None else None,
        "relevant_value": int(value) if value is not None else None,
        "is_bomb": hand.is_bomb(),
    }


def _parse_hand(texts: List[str]) -> Hand:
    try:
        return Hand(parse_card_list(texts))
    except CardParseError as e:
        logger.warning("拒绝请求: %s", e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


# ============================================================
#  FastAPI 应用
# ============================================================

app = FastAPI(title="Tichu 牌型裁判")


@app.get("/")
async def root():
    """健康检查"""
    return {"status": "ok", "service": "tichu-rules"}


@app.get("/api/deal")
async def deal(seed: Optional[int] = None):
    """洗牌并发出四手牌；给定 seed 时结果可复现"""
    hands = deal_hands(GameConfig(seed=seed))
    return {
        "seed": seed,
        "hands": [
            {
                "cards": [card_to_dict(c) for c in cards],
                "points": card_points(cards),
            }
            for cards in hands
        ],
    }


@app.post("/api/classify")
async def classify(req: ClassifyRequest):
    """识别一手牌的牌型与主牌点数"""
    return hand_to_dict(_parse_hand(req.cards))


@app.post("/api/compare")
async def compare(req: CompareRequest):
    """判断 hand 能否压过 previous"""
    hand = _parse_hand(req.hand)
    previous = _parse_hand(req.previous)
    return {
        "hand": hand_to_dict(hand),
        "previous": hand_to_dict(previous),
        "can_be_played": hand.can_be_played_on(previous),
    }
