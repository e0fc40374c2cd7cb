"""一手牌 - 排好序、不可变的候选牌型"""

from typing import Iterable, Iterator, Optional, Tuple

from .card import Card, Rank
from .hand_type import HandType
from .hand_detector import (
    detect_hand_type, relevant_card_value, can_beat, num_phoenixes,
)


class Hand:
    """
    一手待出的牌。构造时按 Card 全序排序，之后不再改变。
    牌型不保存在 Hand 上，每次按需识别。
    """

    __slots__ = ("_cards",)

    def __init__(self, cards: Iterable[Card]):
        self._cards: Tuple[Card, ...] = tuple(sorted(cards))

    @classmethod
    def single_card(cls, card: Card) -> "Hand":
        return cls((card,))

    @property
    def cards(self) -> Tuple[Card, ...]:
        return self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self._cards == other._cards

    def __hash__(self) -> int:
        return hash(self._cards)

    def __repr__(self) -> str:
        return f"Hand({' '.join(c.display for c in self._cards)})"

    def hand_type(self) -> Optional[HandType]:
        return detect_hand_type(self._cards)

    def relevant_card_value(self) -> Optional[Rank]:
        return relevant_card_value(self._cards)

    def num_phoenixes(self) -> int:
        return num_phoenixes(self._cards)

    def is_bomb(self) -> bool:
        hand_type = self.hand_type()
        return hand_type is not None and hand_type.is_bomb

    def can_be_played_on(self, other: "Hand") -> bool:
        """self 能否压在 other 上（炸弹规则见 can_beat）"""
        return can_beat(self._cards, other._cards)
