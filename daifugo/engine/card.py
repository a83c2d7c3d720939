"""牌的定义 - 大富豪52张扑克牌的数据模型"""

from enum import IntEnum, Enum
from dataclasses import dataclass
from typing import List, Optional
import random


class Rank(IntEnum):
    """点数枚举（数值越大牌越大，2 最大）"""
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
    TWO = 15


class Suit(str, Enum):
    """花色枚举（定义顺序即手牌排序顺序）"""
    CLUB = "♣"
    DIAMOND = "♦"
    HEART = "♥"
    SPADE = "♠"


# 手牌内同点数的花色排序
SUIT_ORDER = {suit: i for i, suit in enumerate(Suit)}

# 点数显示映射
RANK_DISPLAY = {
    Rank.THREE: "3", Rank.FOUR: "4", Rank.FIVE: "5",
    Rank.SIX: "6", Rank.SEVEN: "7", Rank.EIGHT: "8",
    Rank.NINE: "9", Rank.TEN: "10", Rank.JACK: "J",
    Rank.QUEEN: "Q", Rank.KING: "K", Rank.ACE: "A",
    Rank.TWO: "2",
}


@dataclass(frozen=True)
class Card:
    """一张扑克牌（点数+花色唯一确定一张牌）"""
    rank: Rank
    suit: Suit

    @property
    def strength(self) -> int:
        """牌力：点数在 3 < 4 < ... < A < 2 中的位置（0~12）"""
        return int(self.rank) - Rank.THREE

    @property
    def key(self) -> tuple:
        """牌的身份标识，用于从手牌中移除"""
        return (int(self.rank), self.suit.value)

    @property
    def display(self) -> str:
        return f"{self.suit.value}{RANK_DISPLAY[self.rank]}"

    def __repr__(self) -> str:
        return self.display

    def __lt__(self, other: "Card") -> bool:
        return sort_key(self) < sort_key(other)


def sort_key(card: Card) -> tuple:
    """手牌排序键：(牌力, 花色顺序)"""
    return (card.strength, SUIT_ORDER[card.suit])


def build_deck() -> List[Card]:
    """创建一副52张标准扑克牌（不含大小王，不洗牌）"""
    deck: List[Card] = []
    for suit in Suit:
        for rank in Rank:
            deck.append(Card(rank=rank, suit=suit))

    assert len(deck) == 52, f"牌数错误: {len(deck)}"
    return deck


def shuffle(deck: List[Card], rng: Optional[random.Random] = None) -> List[Card]:
    """洗牌：返回一个新的均匀随机排列，不修改原列表"""
    shuffled = deck.copy()
    (rng or random).shuffle(shuffled)
    return shuffled


def deal(deck: List[Card], player_count: int) -> List[List[Card]]:
    """按座位轮流发牌（第 i 张给 i % player_count 号玩家）"""
    if player_count <= 0 or len(deck) % player_count != 0:
        raise ValueError(f"{len(deck)} 张牌无法平均分给 {player_count} 名玩家")

    hands: List[List[Card]] = [[] for _ in range(player_count)]
    for i, card in enumerate(deck):
        hands[i % player_count].append(card)
    return hands


def sort_hand(hand: List[Card]) -> List[Card]:
    """按 (牌力, 花色) 从小到大排序手牌，最弱的牌总在最前"""
    return sorted(hand, key=sort_key)


def cards_label(cards: List[Card]) -> str:
    """牌列表 → 连续文本（如 ♣3♦3）"""
    return "".join(c.display for c in cards)
