# 发牌模块
from .config import GameConfig, DECK_SIZE
from .deck import Deck, PlayerHand, create_deck, deal_hands
