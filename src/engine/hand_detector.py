"""牌型检测器 - 识别一组已排序的牌的牌型、主牌点数及压牌关系"""

import logging
from collections import Counter
from typing import Optional, Sequence

from .card import Card, Rank, RegularCard, SpecialCardType
from .hand_type import HandType

logger = logging.getLogger(__name__)

# 连对中每个点数需要的张数
_PAIR_SIZE = 2
# 顺子最少张数
_MIN_STRAIGHT_LENGTH = 5
# 连对最少张数（两对）
_MIN_STRAIGHT_OF_PAIRS_LENGTH = 4


def detect_hand_type(cards: Sequence[Card]) -> Optional[HandType]:
    """
    识别一组牌的牌型。
    cards 必须已按 Card 全序排好（Hand 保证这一点）。
    返回 HandType 或 None（非法牌型）。
    """
    if len(cards) > 1 and not all(c.is_valid_in_multi_card_hand() for c in cards):
        return None

    # 按检测优先级依次尝试，炸弹必须先于普通牌型
    if _is_quadruple_bomb(cards):
        result = HandType.QUADRUPLE_BOMB
    elif _is_straight_bomb(cards):
        result = HandType.STRAIGHT_BOMB
    elif _is_single_card(cards):
        result = HandType.SINGLE_CARD
    elif _is_pair(cards):
        result = HandType.PAIR
    elif _is_triple(cards):
        result = HandType.TRIPLE
    elif _is_straight(cards):
        result = HandType.STRAIGHT
    elif _is_straight_of_pairs(cards):
        result = HandType.STRAIGHT_OF_PAIRS
    elif _is_full_house(cards):
        result = HandType.FULL_HOUSE
    else:
        result = None

    logger.debug("detect_hand_type %s -> %s", list(cards), result)
    return result


# ============================================================
#  辅助函数
# ============================================================

def _is_phoenix(card: Card) -> bool:
    return card.is_special(SpecialCardType.PHOENIX)


def _all_regular(cards: Sequence[Card]) -> bool:
    return all(isinstance(c, RegularCard) for c in cards)


def num_phoenixes(cards: Sequence[Card]) -> int:
    """凤凰张数（整副牌只有一张，但算法不依赖这一点）"""
    return sum(1 for c in cards if _is_phoenix(c))


# ============================================================
#  炸弹检测
# ============================================================

def _is_quadruple_bomb(cards: Sequence[Card]) -> bool:
    """四张炸弹：4张同点数普通牌，凤凰不能替代"""
    if len(cards) != 4 or not _all_regular(cards):
        return False
    return len({c.value() for c in cards}) == 1


def _is_straight_bomb(cards: Sequence[Card]) -> bool:
    """同花顺炸弹：不含凤凰的同花色顺子（One 没有花色，不能入炸弹）"""
    return (
        _is_straight(cards)
        and num_phoenixes(cards) == 0
        and len({c.suit_of() for c in cards}) == 1
    )


# ============================================================
#  基础牌型检测
# ============================================================

def _is_single_card(cards: Sequence[Card]) -> bool:
    return len(cards) == 1


def _is_pair(cards: Sequence[Card]) -> bool:
    """对子：两张同点数普通牌，或凤凰 + 任意普通牌"""
    if len(cards) != 2:
        return False
    first, second = cards
    if _all_regular(cards):
        return first.value() == second.value()
    return _is_phoenix(first) and isinstance(second, RegularCard)


def _is_triple(cards: Sequence[Card]) -> bool:
    """三条：三张同点数普通牌，或凤凰 + 一对普通牌"""
    if len(cards) != 3:
        return False
    if _all_regular(cards):
        return len({c.value() for c in cards}) == 1
    first, second, third = cards
    return (
        _is_phoenix(first)
        and _all_regular(cards[1:])
        and second.value() == third.value()
    )


def _is_full_house(cards: Sequence[Card]) -> bool:
    """
    葫芦：三条 + 对子。
    凤凰可以替补三条或对子中的一张；三条点数不能等于对子点数。
    凤凰排在下标0，所以有凤凰时只需看后4张。
    """
    if len(cards) != 5:
        return False
    if _all_regular(cards):
        v = [c.value() for c in cards]
        return v[0] == v[1] and v[3] == v[4] and (v[2] == v[1] or v[2] == v[3])
    if _is_phoenix(cards[0]) and _all_regular(cards[1:]):
        v1, v2, v3, v4 = (c.value() for c in cards[1:])
        shape_ok = (
            (v1 == v2 == v3)
            or (v1 == v2 and v3 == v4)
            or (v2 == v3 == v4)
        )
        return shape_ok and v1 != v4
    return False


# ============================================================
#  顺子类检测
# ============================================================

def _is_straight(cards: Sequence[Card]) -> bool:
    """
    顺子：≥5张，相邻两张数值不能相同；
    相邻数值之间的空档总数不能超过凤凰张数。
    凤凰没有数值，计算空档时跳过。
    """
    if len(cards) < _MIN_STRAIGHT_LENGTH:
        return False
    values = [c.numeric_value() for c in cards]
    gaps = 0
    for left, right in zip(values, values[1:]):
        if left is None or right is None:
            continue
        if left == right:
            return False
        gaps += right - left - 1
    return num_phoenixes(cards) >= gaps


def _is_straight_of_pairs(cards: Sequence[Card]) -> bool:
    """
    连对：从最小数值到最大数值，每个数值恰好两张，缺的由凤凰补。
    某个数值超过两张则非法；没有任何带数值的牌也非法。
    张数必须为偶数且至少两对，多余的凤凰不能凑成连对。
    """
    if len(cards) < _MIN_STRAIGHT_OF_PAIRS_LENGTH or len(cards) % _PAIR_SIZE:
        return False
    counts = Counter(
        v for v in (c.numeric_value() for c in cards) if v is not None
    )
    if not counts:
        return False

    needed = 0
    for value in range(min(counts), max(counts) + 1):
        have = counts.get(value, 0)
        if have > _PAIR_SIZE:
            return False
        needed += _PAIR_SIZE - have
    return num_phoenixes(cards) >= needed


# ============================================================
#  主牌点数与比较
# ============================================================

def relevant_card_value(
    cards: Sequence[Card], hand_type: Optional[HandType] = None
) -> Optional[Rank]:
    """
    同牌型比较时使用的主牌点数。
    葫芦取三条的点数：无凤凰时为下标2，有凤凰时为下标3；
    其余牌型取最大的一张（最后一张）。
    非法牌型或单张特殊牌返回 None。
    """
    if hand_type is None:
        hand_type = detect_hand_type(cards)
    if hand_type is None:
        return None

    if hand_type == HandType.FULL_HOUSE:
        deciding = cards[3] if _is_phoenix(cards[0]) else cards[2]
    else:
        deciding = cards[-1]
    return deciding.value()


def _higher_value_than(
    current: Sequence[Card], cur_type: HandType,
    previous: Sequence[Card], prev_type: HandType,
) -> bool:
    mine = relevant_card_value(current, cur_type)
    theirs = relevant_card_value(previous, prev_type)
    if mine is None or theirs is None:
        return False
    return mine > theirs


def can_beat(current: Sequence[Card], previous: Sequence[Card]) -> bool:
    """
    判断 current 能否压过 previous。
    规则：
    1. 炸弹压一切非炸弹；炸弹之间张数多者大，张数相同比主牌点数
    2. 非炸弹压不过炸弹
    3. 非炸弹：同牌型、同张数，比主牌点数
    4. 单张之间用单张比较规则（特殊牌也能比较）
    """
    cur_type = detect_hand_type(current)
    if cur_type is None:
        return False
    prev_type = detect_hand_type(previous)

    # 炸弹逻辑
    if cur_type.is_bomb:
        if prev_type is None or not prev_type.is_bomb:
            return True
        if len(current) != len(previous):
            return len(current) > len(previous)
        return _higher_value_than(current, cur_type, previous, prev_type)

    # 同类型同长度比较
    if cur_type != prev_type or len(current) != len(previous):
        return False

    if cur_type == HandType.SINGLE_CARD:
        mine, theirs = current[0], previous[0]
        if mine == theirs:
            return False  # 同一张牌不能压自己
        return mine.can_be_played_on_top_of_single_card(theirs)

    return _higher_value_than(current, cur_type, previous, prev_type)
