"""对局异常 - 调用方违反出牌前置条件时抛出"""


class GameError(Exception):
    """对局异常基类"""


class IllegalPlay(GameError):
    """非法操作：不在自己回合、对局已结束、手牌中没有这些牌、压不过场上的牌"""


class InvalidCombination(IllegalPlay):
    """所选的牌不构成任何合法牌型（单张/多张/阶梯）"""
