"""终端可视化渲染器 - 在终端中展示大富豪对局并读取玩家输入"""

import os
from typing import List, Optional

from daifugo.engine.card import Card, Suit
from daifugo.engine.play_type import PlayType
from daifugo.game.player import Player
from daifugo.game.game_state import GameState


# 颜色常量 (ANSI)
RED = "\033[91m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
CYAN = "\033[96m"
BOLD = "\033[1m"
DIM = "\033[2m"
RESET = "\033[0m"

# 牌型中文名
PLAY_TYPE_NAME = {
    PlayType.SINGLE: "单张",
    PlayType.MULTIPLE: "多张",
    PlayType.STAIRS: "阶梯",
}

# 日志最多显示条数
LOG_LINES = 8


class TerminalRenderer:
    """终端可视化渲染器"""

    def __init__(self, color: bool = True):
        self.color = color

    def clear(self) -> None:
        """清屏"""
        os.system("clear" if os.name != "nt" else "cls")

    def _paint(self, text: str, *codes: str) -> str:
        if not self.color or not codes:
            return text
        return "".join(codes) + text + RESET

    # ============================================================
    #  牌面渲染
    # ============================================================

    def format_cards(self, cards: List[Card]) -> str:
        """将牌列表格式化为彩色字符串"""
        parts = []
        for c in cards:
            if c.suit in (Suit.HEART, Suit.DIAMOND):
                parts.append(self._paint(c.display, RED))
            else:
                parts.append(c.display)
        return " ".join(parts)

    def format_hand(self, cards: List[Card]) -> str:
        """带序号的手牌，序号用于输入选择"""
        return "  ".join(
            f"{self._paint(str(i), DIM)}:{self.format_cards([c])}"
            for i, c in enumerate(cards)
        )

    def format_player(self, player: Player, is_current: bool) -> str:
        marker = self._paint("▶ ", YELLOW, BOLD) if is_current else "  "
        status = "已出完" if player.is_finished else f"剩余 {player.hand_size} 张"
        return f"{marker}{self._paint(player.name, BOLD)}  {status}"

    # ============================================================
    #  整体画面
    # ============================================================

    def render(self, state: GameState, human_index: int) -> str:
        """把当前对局状态渲染为多行文本"""
        lines = [self._paint("═" * 48, YELLOW)]

        for p in state.players:
            if p.id != human_index:
                lines.append(self.format_player(p, p.id == state.current_player))

        lines.append("")
        if state.pile is None:
            lines.append("  场上: " + self._paint("还没有牌", DIM))
        else:
            owner = state.players[state.pile.player_index]
            type_name = PLAY_TYPE_NAME[state.pile.play.type]
            lines.append(
                f"  场上: {owner.name} [{type_name}] "
                f"{self.format_cards(state.pile.play.cards)}"
            )

        current = state.players[state.current_player]
        if state.is_game_over:
            lines.append(self._paint("  对局已结束", CYAN, BOLD))
        else:
            lines.append(f"  轮到: {self._paint(current.name, GREEN, BOLD)}")

        human = state.players[human_index]
        lines.append("")
        lines.append(f"  你的手牌 ({human.hand_size}张):")
        lines.append("  " + self.format_hand(human.hand))

        lines.append(self._paint("─" * 48, DIM))
        for message in state.log[:LOG_LINES]:
            lines.append(f"  {message}")
        return "\n".join(lines)

    def show(self, state: GameState, human_index: int) -> None:
        print(self.render(state, human_index))

    # ============================================================
    #  输入解析
    # ============================================================

    @staticmethod
    def parse_selection(text: str, hand: List[Card]) -> Optional[List[Card]]:
        """
        解析 "0 3 5" 或 "0,3,5" 形式的序号输入。
        序号越界或重复返回 None。
        """
        tokens = text.replace(",", " ").split()
        if not tokens:
            return None
        try:
            indices = [int(t) for t in tokens]
        except ValueError:
            return None
        if len(set(indices)) != len(indices):
            return None
        if any(i < 0 or i >= len(hand) for i in indices):
            return None
        return [hand[i] for i in indices]
