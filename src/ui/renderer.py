"""终端渲染器 - 在终端中展示发牌结果与牌型判定"""

from typing import List, Optional, Sequence

from src.engine.card import Card, RegularCard, SpecialCardType, Suit, card_points
from src.engine.hand import Hand
from src.engine.hand_type import HandType


# 颜色常量 (ANSI)
RED = "\033[91m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
CYAN = "\033[96m"
BOLD = "\033[1m"
DIM = "\033[2m"
RESET = "\033[0m"

# 牌型中文名
HAND_TYPE_NAME = {
    HandType.SINGLE_CARD: "单张",
    HandType.PAIR: "对子",
    HandType.TRIPLE: "三条",
    HandType.STRAIGHT: "顺子",
    HandType.STRAIGHT_OF_PAIRS: "连对",
    HandType.FULL_HOUSE: "葫芦",
    HandType.QUADRUPLE_BOMB: "四张炸弹 💣",
    HandType.STRAIGHT_BOMB: "同花顺炸弹 💣",
}

# 特殊牌颜色
SPECIAL_COLOR = {
    SpecialCardType.DRAGON: RED + BOLD,
    SpecialCardType.PHOENIX: YELLOW + BOLD,
    SpecialCardType.ONE: CYAN,
    SpecialCardType.DOG: DIM,
}


def hand_type_name(hand_type: Optional[HandType]) -> str:
    if hand_type is None:
        return "不成牌型"
    return HAND_TYPE_NAME[hand_type]


class TerminalRenderer:
    """终端渲染器"""

    def __init__(self, color: bool = True):
        self.color = color

    def _paint(self, text: str, style: str) -> str:
        if not self.color:
            return text
        return f"{style}{text}{RESET}"

    # ============================================================
    #  牌面渲染
    # ============================================================

    def format_cards(self, cards: Sequence[Card]) -> str:
        """将牌列表格式化为彩色字符串"""
        parts = []
        for c in cards:
            if isinstance(c, RegularCard):
                # 红色花色高亮
                if c.suit in (Suit.HEART, Suit.DIAMOND):
                    parts.append(self._paint(c.display, RED))
                else:
                    parts.append(c.display)
            else:
                parts.append(self._paint(c.display, SPECIAL_COLOR[c.kind]))
        return " ".join(parts)

    def print_header(self, title: str) -> None:
        """打印带框的标题"""
        line = "═" * 60
        print(f"\n{self._paint(line, YELLOW + BOLD)}")
        print(self._paint(f"  {title}", YELLOW + BOLD))
        print(f"{self._paint(line, YELLOW + BOLD)}\n")

    # ============================================================
    #  发牌展示
    # ============================================================

    def show_deal(self, hands: List[Sequence[Card]]) -> None:
        """展示发牌结果"""
        self.print_header("🃏 发牌完成")
        for i, cards in enumerate(hands):
            print(f"  玩家{i} ({len(cards)}张, {card_points(cards)}分): "
                  f"{self.format_cards(cards)}")
        print()

    # ============================================================
    #  牌型判定展示
    # ============================================================

    def describe_hand(self, hand: Hand) -> str:
        """一手牌的判定结果，如 '♥2 ♥3 ♥4 ♥5 ♥6 → 同花顺炸弹 (主牌 6)'"""
        hand_type = hand.hand_type()
        text = f"{self.format_cards(hand.cards)} → {hand_type_name(hand_type)}"
        value = hand.relevant_card_value()
        if value is not None:
            text += f" (主牌 {value.name})"
        return text

    def show_hand(self, hand: Hand) -> None:
        print(f"  {self.describe_hand(hand)}")

    def show_comparison(self, hand: Hand, previous: Hand, result: bool) -> None:
        """展示压牌判定"""
        print(f"  出牌: {self.describe_hand(hand)}")
        print(f"  上家: {self.describe_hand(previous)}")
        verdict = self._paint("能压过", GREEN + BOLD) if result else self._paint("压不过", DIM)
        print(f"  结果: {verdict}")
