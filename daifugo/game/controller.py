"""游戏控制器 - 驱动大富豪一局游戏：出牌、不出、轮转、结算"""

import logging
import random
from typing import List, Optional, Protocol

from daifugo.engine.card import Card, Rank, Suit, build_deck, shuffle, deal, cards_label
from daifugo.engine.play_type import Play
from daifugo.engine.play_detector import detect_play, can_play
from daifugo.ai.rule_ai import RuleAI
from daifugo.game.errors import IllegalPlay, InvalidCombination
from daifugo.game.player import Player
from daifugo.game.game_state import GameState, GamePhase, GameEvent, Pile

logger = logging.getLogger(__name__)

PLAYER_COUNT = 4
HUMAN_INDEX = 0
DEFAULT_PLAYER_NAMES = ["你", "CPU 1", "CPU 2", "CPU 3"]

# 持有此牌的玩家先出
STARTING_CARD = Card(rank=Rank.THREE, suit=Suit.CLUB)


class CpuStrategy(Protocol):
    """CPU 决策接口（策略模式）"""

    def decide_play(self, player: Player, state: GameState) -> Optional[List[Card]]:
        """决定出牌：返回要出的牌列表，None=不出(PASS)"""
        ...


class GameEngine:
    """
    规则引擎：持有唯一的 GameState，所有状态变化都经由这里。
    表现层只调用查询/命令接口，不直接改状态。
    """

    def __init__(
        self,
        player_names: Optional[List[str]] = None,
        strategy: Optional[CpuStrategy] = None,
        human_index: int = HUMAN_INDEX,
        rng: Optional[random.Random] = None,
    ):
        names = player_names or DEFAULT_PLAYER_NAMES
        assert len(names) == PLAYER_COUNT
        assert 0 <= human_index < PLAYER_COUNT
        self.player_names = list(names)
        self.human_index = human_index
        self.strategy = strategy or RuleAI()
        self.rng = rng
        self.state = GameState(players=self._make_players())

    def _make_players(self) -> List[Player]:
        return [
            Player(id=i, name=name, is_human=(i == self.human_index))
            for i, name in enumerate(self.player_names)
        ]

    def _emit(self, event: GameEvent) -> None:
        """记录事件（日志按时间追加，展示时倒序）"""
        self.state.events.append(event)
        logger.info(event.message)

    # ============================================================
    #  开局
    # ============================================================

    def new_game(self, deck: Optional[List[Card]] = None) -> GameState:
        """
        洗牌发牌，整理手牌，确定先手。
        传入 deck 时按给定顺序发牌（不再洗牌）。
        """
        if deck is None:
            deck = shuffle(build_deck(), self.rng)

        self.state = GameState(players=self._make_players())
        for player, hand in zip(self.state.players, deal(deck, PLAYER_COUNT)):
            player.hand = hand
            player.sort_hand()

        self.state.current_player = self.find_starting_player()
        self.state.phase = GamePhase.PLAYING
        self._emit(GameEvent("start", "新的一局开始了。"))
        return self.state

    def find_starting_player(self) -> int:
        """持有 ♣3 的玩家先出；找不到时（非标准牌组）由 0 号先出"""
        for player in self.state.players:
            if player.has_cards([STARTING_CARD]):
                return player.id
        return 0

    # ============================================================
    #  出牌 / 不出
    # ============================================================

    def apply_play(self, player_index: int, cards: List[Card]) -> Play:
        """
        执行出牌。任何前置条件不满足都抛 IllegalPlay，状态保持不变。
        不负责轮转，调用方随后检查结算并推进回合。
        """
        s = self.state
        self._check_turn(player_index)
        player = s.players[player_index]

        if not cards or not player.has_cards(cards):
            raise IllegalPlay(f"{player.name} 手中没有这些牌: {cards_label(cards)}")

        play = detect_play(cards)
        if play is None:
            raise InvalidCombination(f"不是合法牌型: {cards_label(cards)}")

        if not can_play(cards, s.pile_play):
            raise IllegalPlay(f"压不过场上的牌: {cards_label(cards)} vs {s.pile_play}")

        player.remove_cards(cards)
        s.pile = Pile(play=play, player_index=player_index)
        s.pass_count = 0
        s.last_played_by = player_index

        message = f"{player.name}出了{cards_label(play.cards)}"
        if play.is_stairs:
            message += "（阶梯）"
        self._emit(GameEvent("play", message + "。", player_index, play))

        if player.is_finished:
            s.finish_order.append(player_index)
        return play

    def apply_pass(self, player_index: int) -> bool:
        """
        执行不出。除最后出牌人外其余在场玩家都不出时清空场面，
        出牌权回到最后出牌人。返回是否清空了场面。
        """
        s = self.state
        self._check_turn(player_index)
        player = s.players[player_index]

        s.pass_count += 1
        self._emit(GameEvent("pass", f"{player.name}选择不出。", player_index))

        if s.pass_count < len(s.active_players) - 1:
            return False

        s.pile = None
        s.pass_count = 0
        if s.last_played_by is not None:
            s.current_player = s.last_played_by
        self._emit(GameEvent("clear", "场上的牌被清空，下一位玩家可以自由出牌。"))
        return True

    def _check_turn(self, player_index: int) -> None:
        s = self.state
        if s.is_game_over:
            raise IllegalPlay("对局已结束")
        if s.phase != GamePhase.PLAYING:
            raise IllegalPlay("对局尚未开始")
        if not 0 <= player_index < len(s.players):
            raise IllegalPlay(f"没有座位号为 {player_index} 的玩家")
        if player_index != s.current_player:
            raise IllegalPlay(
                f"还没轮到 {s.players[player_index].name}，"
                f"当前是 {s.players[s.current_player].name}"
            )

    # ============================================================
    #  轮转与结算
    # ============================================================

    def advance_turn(self) -> None:
        """顺时针轮到下一位还有牌的玩家；最多转一圈，找不到就不动"""
        s = self.state
        if s.is_game_over:
            return
        n = len(s.players)
        for step in range(1, n + 1):
            nxt = (s.current_player + step) % n
            if s.players[nxt].hand:
                s.current_player = nxt
                return

    def check_game_over(self) -> bool:
        """玩家出完牌即胜利；只剩一人有牌时游戏结束"""
        s = self.state
        if s.is_game_over:
            return True

        human = s.players[self.human_index]
        if not human.hand:
            s.phase = GamePhase.FINISHED
            self._emit(GameEvent("win", "你赢了！恭喜！", self.human_index))
            return True

        if len(s.active_players) <= 1:
            s.phase = GamePhase.FINISHED
            self._emit(GameEvent("lose", "游戏结束，CPU 先出完了牌。"))
            return True

        return False

    def _end_play_turn(self) -> bool:
        """出牌后：先结算，未结束再轮转。返回是否结束"""
        if self.check_game_over():
            return True
        self.advance_turn()
        return False

    def _end_pass_turn(self, cleared: bool) -> None:
        """不出后：场面被清空则由最后出牌人（若已上岸则其下家）领出，否则正常轮转"""
        s = self.state
        if cleared and s.last_played_by is not None:
            if not s.players[s.current_player].hand:
                self.advance_turn()
            return
        self.advance_turn()

    # ============================================================
    #  CPU 回合
    # ============================================================

    def take_cpu_turn(self) -> None:
        """当前 CPU 玩家决策并执行一手"""
        s = self.state
        pid = s.current_player
        player = s.players[pid]
        cards = self.strategy.decide_play(player, s)

        if cards is None:
            self._end_pass_turn(self.apply_pass(pid))
        else:
            self.apply_play(pid, cards)
            self._end_play_turn()

    def run_cpu_turns_until_human_or_over(self) -> None:
        """连续执行 CPU 回合，直到轮到玩家或对局结束"""
        s = self.state
        while s.phase == GamePhase.PLAYING and s.current_player != self.human_index:
            self.take_cpu_turn()

    # ============================================================
    #  查询接口
    # ============================================================

    def get_players(self) -> List[Player]:
        return self.state.players

    def get_current_player_index(self) -> int:
        return self.state.current_player

    def get_pile(self) -> Optional[Pile]:
        return self.state.pile

    def is_game_over(self) -> bool:
        return self.state.is_game_over

    def can_play(self, cards: List[Card]) -> bool:
        """当前场面下这组牌能否出（供界面判断按钮是否可用）"""
        return can_play(cards, self.state.pile_play)

    def get_hand(self, player_index: int) -> List[Card]:
        return list(self.state.players[player_index].hand)

    @property
    def log(self) -> List[str]:
        return self.state.log

    def standings(self) -> List[Player]:
        """名次：先出完的在前，剩余玩家按剩余张数、座位号排列"""
        s = self.state
        finished = [s.players[i] for i in s.finish_order]
        remaining = sorted(s.active_players, key=lambda p: (p.hand_size, p.id))
        return finished + remaining

    # ============================================================
    #  命令接口（玩家操作）
    # ============================================================

    def start_new_game(self) -> GameState:
        """开新局，若先手是 CPU 则一直打到轮到玩家"""
        self.new_game()
        self.run_cpu_turns_until_human_or_over()
        return self.state

    def restart(self) -> GameState:
        """丢弃当前对局，重新开始"""
        return self.start_new_game()

    def submit_play(self, cards: List[Card]) -> Play:
        """玩家出牌，随后连续执行 CPU 回合"""
        play = self.apply_play(self.human_index, cards)
        if not self._end_play_turn():
            self.run_cpu_turns_until_human_or_over()
        return play

    def submit_pass(self) -> None:
        """玩家不出，随后连续执行 CPU 回合"""
        self._end_pass_turn(self.apply_pass(self.human_index))
        self.run_cpu_turns_until_human_or_over()
