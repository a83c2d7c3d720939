"""玩家模型 - 大富豪四人玩家的数据结构"""

from dataclasses import dataclass, field
from typing import List

from daifugo.engine.card import Card, sort_hand


@dataclass
class Player:
    """一个玩家"""
    id: int                          # 座位号 0~3
    name: str                        # 显示名
    is_human: bool = False
    hand: List[Card] = field(default_factory=list)

    @property
    def hand_size(self) -> int:
        return len(self.hand)

    @property
    def is_finished(self) -> bool:
        """手牌出完即上岸，之后轮转时跳过"""
        return not self.hand

    def sort_hand(self) -> None:
        """手牌排序"""
        self.hand = sort_hand(self.hand)

    def remove_cards(self, cards: List[Card]) -> None:
        """按牌的身份标识从手牌中移除指定的牌"""
        keys = {c.key for c in cards}
        self.hand = [c for c in self.hand if c.key not in keys]

    def has_cards(self, cards: List[Card]) -> bool:
        """检查手牌中是否包含指定的牌（同一张牌不能出现两次）"""
        keys = [c.key for c in cards]
        if len(set(keys)) != len(keys):
            return False
        in_hand = {c.key for c in self.hand}
        return all(k in in_hand for k in keys)
