# 终端界面模块
from .renderer import TerminalRenderer
