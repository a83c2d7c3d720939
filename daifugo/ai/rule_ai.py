"""规则引擎 AI - 枚举所有合法出牌，选最省牌、最小的一手"""

import logging
from typing import Dict, List, Optional, TYPE_CHECKING

from daifugo.engine.card import Card, sort_hand
from daifugo.engine.play_type import Play
from daifugo.engine.play_detector import can_play, detect_play, is_stairs

if TYPE_CHECKING:
    from daifugo.game.player import Player
    from daifugo.game.game_state import GameState

logger = logging.getLogger(__name__)


def enumerate_legal_plays(hand: List[Card], pile: Optional[Play]) -> List[Play]:
    """
    枚举手牌中所有能打到场上的组合。
    顺序：单张 → 同点数前缀组合 → 同花色连续阶梯。
    """
    plays: List[Play] = []

    # 单张
    for card in hand:
        if can_play([card], pile):
            plays.append(detect_play([card]))

    # 同点数：每组取前 2、3、…、n 张
    for group in _group_by(hand, lambda c: c.rank).values():
        for n in range(2, len(group) + 1):
            combo = group[:n]
            if can_play(combo, pile):
                plays.append(detect_play(combo))

    # 阶梯：同花色排序后所有长度 ≥3 的连续窗口
    for group in _group_by(hand, lambda c: c.suit).values():
        if len(group) < 3:
            continue
        ordered = sort_hand(group)
        for start in range(len(ordered)):
            for length in range(3, len(ordered) - start + 1):
                combo = ordered[start:start + length]
                if is_stairs(combo) and can_play(combo, pile):
                    plays.append(detect_play(combo))

    return plays


def choose_cpu_play(hand: List[Card], pile: Optional[Play]) -> Optional[Play]:
    """
    选最弱的合法出牌：先比张数，再比牌力，都越小越好。
    没有合法出牌返回 None（不出）。
    """
    plays = enumerate_legal_plays(hand, pile)
    if not plays:
        return None
    return sorted(plays, key=lambda p: (p.size, p.strength))[0]


def _group_by(cards: List[Card], key) -> Dict:
    """按 key 分组，保持首次出现的顺序"""
    groups: Dict = {}
    for c in cards:
        groups.setdefault(key(c), []).append(c)
    return groups


class RuleAI:
    """基于简单规则的 CPU 策略"""

    def decide_play(self, player: "Player", state: "GameState") -> Optional[List[Card]]:
        """出牌决策：返回要出的牌列表，None=不出(PASS)"""
        if not player.hand:
            return None

        play = choose_cpu_play(player.hand, state.pile_play)
        logger.debug("%s 决策: %s", player.name, play if play else "PASS")
        return list(play.cards) if play else None
