"""牌堆 - 建牌、洗牌、发牌"""

import logging
import random
from typing import List, Optional, Tuple

from src.engine.card import (
    Card, Rank, Suit, RegularCard, SpecialCard, SpecialCardType, sort_cards,
)
from src.engine.errors import DealError
from src.game.config import DECK_SIZE, GameConfig

logger = logging.getLogger(__name__)

# 一名玩家的手牌：发牌后排好序，不再改变
PlayerHand = Tuple[Card, ...]


def create_deck() -> List[Card]:
    """创建一副56张 Tichu 牌（按全序排列）"""
    deck: List[Card] = [SpecialCard(kind) for kind in SpecialCardType]
    for rank in Rank:
        for suit in Suit:
            deck.append(RegularCard(rank=rank, suit=suit))

    assert len(deck) == DECK_SIZE, f"牌数错误: {len(deck)}"
    return deck


class Deck:
    """一副牌。发牌从末尾取，取走的牌不会再出现"""

    def __init__(self, cards: Optional[List[Card]] = None):
        self._cards: List[Card] = list(cards) if cards is not None else create_deck()

    @classmethod
    def shuffled(cls, rng: Optional[random.Random] = None) -> "Deck":
        """洗好的一副牌；rng 可注入，便于复现"""
        rng = rng or random.Random()
        cards = create_deck()
        rng.shuffle(cards)
        logger.debug("洗牌完成: %d 张", len(cards))
        return cls(cards)

    @property
    def cards(self) -> List[Card]:
        return list(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def deal(self, num_cards: int) -> PlayerHand:
        """从牌堆末尾取 num_cards 张，排序后返回"""
        if num_cards > len(self._cards):
            raise DealError(f"牌堆只剩 {len(self._cards)} 张，无法发 {num_cards} 张")
        split = len(self._cards) - num_cards
        dealt = self._cards[split:]
        del self._cards[split:]
        logger.debug("发出 %d 张，剩余 %d 张", num_cards, len(self._cards))
        return tuple(sort_cards(dealt))


def deal_hands(
    config: GameConfig, rng: Optional[random.Random] = None
) -> List[PlayerHand]:
    """按配置洗牌并给每位玩家发牌"""
    if rng is None:
        rng = random.Random(config.seed)
    deck = Deck.shuffled(rng)
    return [deck.deal(config.cards_per_player) for _ in range(config.num_players)]
