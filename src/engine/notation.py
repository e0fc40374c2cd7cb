"""牌面文本 - 解析命令行 / HTTP 请求中的牌（如 H2, ♠A, D10, Phoenix）"""

from typing import Iterable, List, Optional

from .card import (
    Card, Rank, Suit, SpecialCard, SpecialCardType, RegularCard, RANK_DISPLAY,
)
from .errors import CardParseError

_SUIT_MAP = {
    "H": Suit.HEART, "♥": Suit.HEART,
    "D": Suit.DIAMOND, "♦": Suit.DIAMOND,
    "S": Suit.SPADE, "♠": Suit.SPADE,
    "C": Suit.CLUBS, "♣": Suit.CLUBS,
}

_RANK_MAP = {v: k for k, v in RANK_DISPLAY.items()}
_RANK_MAP["T"] = Rank.TEN

_SPECIAL_MAP = {
    "DRAGON": SpecialCardType.DRAGON,
    "PHOENIX": SpecialCardType.PHOENIX,
    "ONE": SpecialCardType.ONE,
    "MAHJONG": SpecialCardType.ONE,
    "DOG": SpecialCardType.DOG,
}


def _rank_from_display(text: str) -> Optional[Rank]:
    """从显示文本反查 Rank（如 'A' → Rank.ACE）"""
    return _RANK_MAP.get(text.upper())


def parse_card(text: str) -> Card:
    """解析单张牌文本，失败抛出 CardParseError"""
    text = text.strip()
    special = _SPECIAL_MAP.get(text.upper())
    if special is not None:
        return SpecialCard(special)
    if len(text) < 2:
        raise CardParseError(f"无法识别的牌: {text!r}")

    suit = _SUIT_MAP.get(text[0].upper())
    if suit is None:
        raise CardParseError(f"无法识别的花色: {text!r}")
    rank = _rank_from_display(text[1:])
    if rank is None:
        raise CardParseError(f"无法识别的点数: {text!r}")
    return RegularCard(rank=rank, suit=suit)


def parse_card_list(texts: Iterable[str]) -> List[Card]:
    """
    逐张解析一手牌。
    整副牌中每张牌只有一张，同一张牌出现两次视为非法输入。
    """
    cards: List[Card] = []
    for text in texts:
        card = parse_card(text)
        if card in cards:
            raise CardParseError(f"重复的牌: {card.display}")
        cards.append(card)
    return cards


def parse_cards(text: str) -> List[Card]:
    """解析空格或逗号分隔的多张牌（不允许重复）"""
    return parse_card_list(text.replace(",", " ").split())


def format_cards(cards: List[Card]) -> str:
    """牌列表 → 空格分隔文本（可被 parse_cards 解析回来）"""
    return " ".join(c.display for c in cards)
