"""大富豪 - 主入口（终端对局 / 浏览器服务）"""

import argparse
import logging
import random
import sys

from daifugo.game.controller import GameEngine
from daifugo.game.errors import GameError
from daifugo.ui.renderer import TerminalRenderer

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
DEFAULT_LOG_LEVEL = "WARNING"

HELP_TEXT = "输入手牌序号出牌（如 0 3 5），p=不出，r=重新开始，q=退出"


def setup_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """配置日志输出"""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def run_terminal_game(seed=None, clear_screen=None) -> None:
    """在终端里和三个 CPU 对局；clear_screen 默认在交互终端中开启"""
    if clear_screen is None:
        clear_screen = sys.stdout.isatty()
    rng = random.Random(seed) if seed is not None else None
    engine = GameEngine(rng=rng)
    renderer = TerminalRenderer(color=sys.stdout.isatty())
    engine.start_new_game()
    notice = ""

    while True:
        if clear_screen:
            renderer.clear()
        renderer.show(engine.state, engine.human_index)
        if notice:
            print(f"\n  {notice}")
            notice = ""
        print(f"\n  {HELP_TEXT}")
        try:
            text = input("> ").strip().lower()
        except EOFError:
            return

        if text == "q":
            return
        if text == "r":
            engine.restart()
            continue
        if engine.is_game_over():
            notice = "对局已结束，输入 r 重新开始或 q 退出。"
            continue

        try:
            if text == "p":
                engine.submit_pass()
                continue
            cards = renderer.parse_selection(text, engine.get_hand(engine.human_index))
            if cards is None:
                notice = "输入无效。"
            elif not engine.can_play(cards):
                notice = "这些牌现在不能出。"
            else:
                engine.submit_play(cards)
        except GameError as e:
            notice = str(e)


def run_server(host: str, port: int, log_level: str) -> None:
    """启动浏览器对局服务"""
    import uvicorn
    uvicorn.run("daifugo.web.server:app", host=host, port=port, log_level=log_level.lower())


def build_parser() -> argparse.ArgumentParser:
    """命令行参数：--log-level 在主命令和子命令上都可用"""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS, default=argparse.SUPPRESS,
        help=f"日志级别 (默认 {DEFAULT_LOG_LEVEL})",
    )

    parser = argparse.ArgumentParser(description="大富豪：你和三个 CPU 对局", parents=[common])
    sub = parser.add_subparsers(dest="command")

    play = sub.add_parser("play", parents=[common], help="在终端中对局 (默认)")
    play.add_argument("--seed", type=int, default=None, help="洗牌随机种子")

    serve = sub.add_parser("serve", parents=[common], help="启动浏览器对局服务")
    serve.add_argument("--host", default="127.0.0.1", help="监听地址 (默认 127.0.0.1)")
    serve.add_argument("--port", type=int, default=8000, help="端口 (默认 8000)")
    return parser


def main(argv=None):
    """命令行入口"""
    args = build_parser().parse_args(argv)
    log_level = getattr(args, "log_level", DEFAULT_LOG_LEVEL)
    setup_logging(log_level)

    if args.command == "serve":
        run_server(args.host, args.port, log_level)
    else:
        run_terminal_game(seed=getattr(args, "seed", None))


if __name__ == "__main__":
    main()
