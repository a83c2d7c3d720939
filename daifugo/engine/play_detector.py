"""牌型检测器 - 识别一组牌的牌型并判断能否出牌"""

from typing import List, Optional

from .card import Card
from .play_type import PlayType, Play


def classify(cards: List[Card]) -> Optional[PlayType]:
    """
    识别一组牌的牌型。
    返回 PlayType 或 None（非法组合）。
    同点数检测先于阶梯检测。
    """
    if not cards:
        return None
    # 同一张牌选了两次视为非法
    if len({c.key for c in cards}) != len(cards):
        return None

    if len(cards) == 1:
        return PlayType.SINGLE
    if is_same_rank(cards):
        return PlayType.MULTIPLE
    if is_stairs(cards):
        return PlayType.STAIRS
    return None


def detect_play(cards: List[Card]) -> Optional[Play]:
    """识别牌型并构建 Play，非法组合返回 None"""
    play_type = classify(cards)
    if play_type is None:
        return None
    return Play(play_type, list(cards), comparison_strength(cards, play_type))


# ============================================================
#  辅助函数
# ============================================================

def is_same_rank(cards: List[Card]) -> bool:
    """所有牌点数相同"""
    if not cards:
        return False
    rank = cards[0].rank
    return all(c.rank == rank for c in cards)


def is_stairs(cards: List[Card]) -> bool:
    """阶梯：≥3张、同花色、牌力排序后逐一连续"""
    if len(cards) < 3:
        return False

    suit = cards[0].suit
    if any(c.suit != suit for c in cards):
        return False

    strengths = sorted(c.strength for c in cards)
    return all(
        strengths[i + 1] - strengths[i] == 1
        for i in range(len(strengths) - 1)
    )


def comparison_strength(cards: List[Card], play_type: PlayType) -> int:
    """比较牌力：阶梯取最大牌，单张/多张取该点数"""
    if not cards:
        return -1
    if play_type == PlayType.STAIRS:
        return max(c.strength for c in cards)
    return cards[0].strength


# ============================================================
#  牌型比较
# ============================================================

def can_beat(current: Play, previous: Play) -> bool:
    """
    判断 current 能否压过 previous。
    规则：同牌型、同张数，比较牌力（必须严格更大）。
    """
    if current.type != previous.type:
        return False
    if current.size != previous.size:
        return False
    return current.strength > previous.strength


def can_play(cards: List[Card], pile: Optional[Play]) -> bool:
    """判断这组牌能否打到场上（pile 为 None 表示场上无牌）"""
    play = detect_play(cards)
    if play is None:
        return False
    if pile is None:
        return True
    return can_beat(play, pile)
