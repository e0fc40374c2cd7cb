# 规则引擎模块
from .card import (
    Card, RegularCard, SpecialCard, Rank, Suit, SpecialCardType,
    DRAGON, PHOENIX, ONE, DOG, sort_cards, card_points,
)
from .errors import RulesError, InvariantViolation, CardParseError, DealError
from .hand_type import HandType, BOMB_TYPES
from .hand_detector import detect_hand_type, relevant_card_value, can_beat
from .hand import Hand
from .notation import parse_card, parse_card_list, parse_cards, format_cards
