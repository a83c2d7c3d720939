# CPU 策略模块
from .rule_ai import RuleAI, choose_cpu_play, enumerate_legal_plays
