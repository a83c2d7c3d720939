# 游戏引擎模块
from .card import (
    Card, Rank, Suit, build_deck, shuffle, deal, sort_hand, cards_label,
)
from .play_type import PlayType, Play
from .play_detector import classify, detect_play, comparison_strength, can_beat, can_play
