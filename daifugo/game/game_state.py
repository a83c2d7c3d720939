"""游戏状态 - 一局大富豪的完整状态与事件记录"""

from enum import Enum
from dataclasses import dataclass, field
from typing import List, Optional, Any

from daifugo.engine.play_type import Play
from daifugo.game.player import Player


class GamePhase(str, Enum):
    """游戏阶段"""
    WAITING = "WAITING"         # 等待开始
    PLAYING = "PLAYING"         # 出牌中
    FINISHED = "FINISHED"       # 已结束


@dataclass
class GameEvent:
    """游戏事件记录"""
    action: str                        # "start", "play", "pass", "clear", "win", "lose"
    message: str                       # 给玩家看的文字
    player_id: Optional[int] = None
    data: Any = None                   # Play / None


@dataclass
class Pile:
    """场上当前的一手牌及出牌人"""
    play: Play
    player_index: int


@dataclass
class GameState:
    """一局游戏的完整状态"""
    players: List[Player]
    phase: GamePhase = GamePhase.WAITING

    # 出牌相关
    current_player: int = 0          # 当前出牌玩家
    pile: Optional[Pile] = None
    pass_count: int = 0              # 连续不出次数
    last_played_by: Optional[int] = None

    # 结算相关
    finish_order: List[int] = field(default_factory=list)   # 出完牌的先后顺序

    # 事件日志（按时间顺序追加）
    events: List[GameEvent] = field(default_factory=list)

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.FINISHED

    @property
    def active_players(self) -> List[Player]:
        """手里还有牌的玩家"""
        return [p for p in self.players if p.hand]

    @property
    def pile_play(self) -> Optional[Play]:
        return self.pile.play if self.pile else None

    @property
    def log(self) -> List[str]:
        """最新的在前"""
        return [e.message for e in reversed(self.events)]
