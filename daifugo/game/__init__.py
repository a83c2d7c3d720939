# 游戏流程控制模块
from .errors import GameError, IllegalPlay, InvalidCombination
from .player import Player
from .game_state import GameState, GamePhase, GameEvent, Pile
from .controller import GameEngine, CpuStrategy
