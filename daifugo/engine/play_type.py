"""牌型定义 - 大富豪3种合法牌型"""

from enum import Enum
from dataclasses import dataclass
from typing import List

from .card import Card


class PlayType(str, Enum):
    """牌型枚举"""
    SINGLE = "SINGLE"       # 单张
    MULTIPLE = "MULTIPLE"   # 同点数多张（对子/三条/四条）
    STAIRS = "STAIRS"       # 阶梯（≥3张同花色连续）


@dataclass
class Play:
    """一手出牌的结构化表示"""
    type: PlayType
    cards: List[Card]
    strength: int          # 比较牌力（单张/多张为该点数，阶梯为最大牌）

    @property
    def size(self) -> int:
        return len(self.cards)

    @property
    def is_stairs(self) -> bool:
        return self.type == PlayType.STAIRS

    def __repr__(self) -> str:
        cards_str = " ".join(c.display for c in self.cards)
        return f"[{self.type.value}] {cards_str}"
