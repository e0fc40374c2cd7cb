"""牌的定义 - Tichu 56张牌的数据模型（52张普通牌 + 4张特殊牌）"""

from abc import ABC, abstractmethod
from enum import IntEnum, Enum
from dataclasses import dataclass
from functools import total_ordering
from typing import Iterable, List, Optional, Tuple

from .errors import InvariantViolation


class Rank(IntEnum):
    """普通牌点数（数值即大小，也用于顺子的连续性计算）"""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


class Suit(str, Enum):
    """花色枚举：不参与大小比较，只用于同花顺炸弹"""
    HEART = "♥"
    DIAMOND = "♦"
    SPADE = "♠"
    CLUBS = "♣"


class SpecialCardType(str, Enum):
    """特殊牌：整副牌中每种只有一张"""
    DRAGON = "Dragon"
    PHOENIX = "Phoenix"
    ONE = "One"
    DOG = "Dog"


# 点数显示映射
RANK_DISPLAY = {
    Rank.TWO: "2", Rank.THREE: "3", Rank.FOUR: "4",
    Rank.FIVE: "5", Rank.SIX: "6", Rank.SEVEN: "7",
    Rank.EIGHT: "8", Rank.NINE: "9", Rank.TEN: "10",
    Rank.JACK: "J", Rank.QUEEN: "Q", Rank.KING: "K", Rank.ACE: "A",
}

# 排序用的声明顺序
_SUIT_ORDER = {s: i for i, s in enumerate(Suit)}
_SPECIAL_ORDER = {t: i for i, t in enumerate(SpecialCardType)}

# 排序键第一位：特殊牌永远排在普通牌之前
_SPECIAL_GROUP = 0
_REGULAR_GROUP = 1


@total_ordering
class Card(ABC):
    """
    一张牌。只有两种实现：RegularCard 与 SpecialCard。

    全序规则：所有特殊牌 < 所有普通牌；特殊牌之间按
    Dragon < Phoenix < One < Dog；普通牌按 (点数, 花色)。
    葫芦的主牌定位依赖"凤凰排在下标0"这一点。
    """

    __slots__ = ()

    @abstractmethod
    def sort_key(self) -> Tuple[int, int, int]:
        ...

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    @property
    @abstractmethod
    def display(self) -> str:
        ...

    def value(self) -> Optional[Rank]:
        """普通牌的点数，特殊牌为 None"""
        return None

    def suit_of(self) -> Optional[Suit]:
        """普通牌的花色，特殊牌为 None"""
        return None

    def numeric_value(self) -> Optional[int]:
        """参与顺子计算的数值：One=1，普通牌=点数，其余 None"""
        return None

    def is_valid_in_multi_card_hand(self) -> bool:
        """Dragon 和 Dog 只能单出"""
        return True

    def score(self) -> int:
        """回合结束时的牌分"""
        return 0

    def is_special(self, kind: "SpecialCardType") -> bool:
        return False

    def can_be_played_on_top_of_single_card(self, other: "Card") -> bool:
        """
        单张比较：self 能否压在 other 上。

        只在单张出牌时使用，不是全体牌的全序。规则按优先级：
          1. 两张普通牌比点数
          2. Dragon 压一切
          3. Phoenix 压普通牌、One、Dog，但输给 Dragon
          4. One 只压 Dog
          5. Dog 谁都压不过
          6. 其余组合取反向比较的否定

        第6条成立的前提是每种特殊牌在整副牌中只有一张。
        两张相同的特殊牌互相比较说明上游破坏了这个前提，抛出 InvariantViolation。
        """
        if isinstance(self, RegularCard) and isinstance(other, RegularCard):
            return self.rank > other.rank

        if isinstance(self, SpecialCard):
            if isinstance(other, SpecialCard) and other.kind == self.kind:
                raise InvariantViolation(
                    f"特殊牌 {self.kind.value} 只有一张，不能与自身比较"
                )
            return _special_beats(self.kind, other)

        # 普通牌压单张凤凰也走第6条，结果为 False，与原始规则表中
        # (普通牌, Phoenix) => true 不同，这里有意按规则列表处理
        if isinstance(self, RegularCard) and isinstance(other, SpecialCard):
            return not other.can_be_played_on_top_of_single_card(self)

        raise InvariantViolation(f"未知的牌型组合: {self!r} / {other!r}")


@dataclass(frozen=True)
class RegularCard(Card):
    """普通牌：点数 + 花色"""
    rank: Rank
    suit: Suit

    def sort_key(self) -> Tuple[int, int, int]:
        return (_REGULAR_GROUP, int(self.rank), _SUIT_ORDER[self.suit])

    @property
    def display(self) -> str:
        return f"{self.suit.value}{RANK_DISPLAY[self.rank]}"

    def __repr__(self) -> str:
        return self.display

    def value(self) -> Optional[Rank]:
        return self.rank

    def suit_of(self) -> Optional[Suit]:
        return self.suit

    def numeric_value(self) -> Optional[int]:
        return int(self.rank)

    def score(self) -> int:
        if self.rank in (Rank.KING, Rank.TEN):
            return 10
        if self.rank == Rank.FIVE:
            return 5
        return 0


@dataclass(frozen=True)
class SpecialCard(Card):
    """特殊牌：Dragon / Phoenix / One / Dog"""
    kind: SpecialCardType

    def sort_key(self) -> Tuple[int, int, int]:
        return (_SPECIAL_GROUP, _SPECIAL_ORDER[self.kind], 0)

    @property
    def display(self) -> str:
        return self.kind.value

    def __repr__(self) -> str:
        return self.display

    def numeric_value(self) -> Optional[int]:
        if self.kind == SpecialCardType.ONE:
            return 1
        return None

    def is_valid_in_multi_card_hand(self) -> bool:
        return self.kind in (SpecialCardType.PHOENIX, SpecialCardType.ONE)

    def score(self) -> int:
        if self.kind == SpecialCardType.DRAGON:
            return 25
        if self.kind == SpecialCardType.PHOENIX:
            return -25
        return 0

    def is_special(self, kind: SpecialCardType) -> bool:
        return self.kind == kind


def _special_beats(kind: SpecialCardType, other: Card) -> bool:
    """特殊牌压单张的规则表（other 不会是同一种特殊牌）"""
    if kind == SpecialCardType.DRAGON:
        return True
    if kind == SpecialCardType.PHOENIX:
        return not other.is_special(SpecialCardType.DRAGON)
    if kind == SpecialCardType.ONE:
        return other.is_special(SpecialCardType.DOG)
    if kind == SpecialCardType.DOG:
        return False
    raise InvariantViolation(f"未知的特殊牌: {kind!r}")


DRAGON = SpecialCard(SpecialCardType.DRAGON)
PHOENIX = SpecialCard(SpecialCardType.PHOENIX)
ONE = SpecialCard(SpecialCardType.ONE)
DOG = SpecialCard(SpecialCardType.DOG)


def sort_cards(cards: Iterable[Card]) -> List[Card]:
    """按全序排序（从小到大，特殊牌在前）"""
    return sorted(cards)


def card_points(cards: Iterable[Card]) -> int:
    """一组牌的牌分合计"""
    return sum(c.score() for c in cards)
