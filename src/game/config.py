"""发牌配置 - 玩家人数、每人张数、随机种子（可由环境变量覆盖）"""

import os
from dataclasses import dataclass
from typing import Optional

# 整副牌：52张普通牌 + 4张特殊牌
DECK_SIZE = 56

DEFAULT_NUM_PLAYERS = 4
DEFAULT_CARDS_PER_PLAYER = 14


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name, "")
    if raw == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"环境变量 {name} 必须是整数: {raw!r}") from e


@dataclass(frozen=True)
class GameConfig:
    """发牌参数"""
    num_players: int = DEFAULT_NUM_PLAYERS
    cards_per_player: int = DEFAULT_CARDS_PER_PLAYER
    seed: Optional[int] = None       # None = 每次随机

    def __post_init__(self) -> None:
        if self.num_players < 1:
            raise ValueError(f"玩家人数必须 ≥1: {self.num_players}")
        if self.cards_per_player < 1:
            raise ValueError(f"每人张数必须 ≥1: {self.cards_per_player}")
        total = self.num_players * self.cards_per_player
        if total > DECK_SIZE:
            raise ValueError(f"牌数不足: 需要 {total} 张，整副只有 {DECK_SIZE} 张")

    @classmethod
    def from_env(cls) -> "GameConfig":
        """
        读取环境变量：
          TICHU_NUM_PLAYERS / TICHU_CARDS_PER_PLAYER / TICHU_SEED
        """
        return cls(
            num_players=_env_int("TICHU_NUM_PLAYERS", DEFAULT_NUM_PLAYERS),
            cards_per_player=_env_int("TICHU_CARDS_PER_PLAYER", DEFAULT_CARDS_PER_PLAYER),
            seed=_env_int("TICHU_SEED", None),
        )
