"""牌型定义 - Tichu 8种合法牌型"""

from enum import Enum


class HandType(str, Enum):
    """牌型枚举"""
    SINGLE_CARD = "SINGLE_CARD"                 # 单张
    PAIR = "PAIR"                               # 对子
    TRIPLE = "TRIPLE"                           # 三条
    STRAIGHT = "STRAIGHT"                       # 顺子 (≥5张)
    STRAIGHT_OF_PAIRS = "STRAIGHT_OF_PAIRS"     # 连对
    FULL_HOUSE = "FULL_HOUSE"                   # 葫芦 (三带二)
    QUADRUPLE_BOMB = "QUADRUPLE_BOMB"           # 四张炸弹
    STRAIGHT_BOMB = "STRAIGHT_BOMB"             # 同花顺炸弹

    @property
    def is_bomb(self) -> bool:
        return self in BOMB_TYPES


BOMB_TYPES = frozenset({HandType.QUADRUPLE_BOMB, HandType.STRAIGHT_BOMB})
