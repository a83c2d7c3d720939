"""WebSocket 后端服务 - 把浏览器操作转发给规则引擎并推送最新局面"""

import json
import logging
from pathlib import Path
from typing import List

from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse

from daifugo.engine.card import Card, Rank, Suit
from daifugo.engine.play_type import Play
from daifugo.game.errors import GameError
from daifugo.game.player import Player
from daifugo.game.game_state import Pile
from daifugo.game.controller import GameEngine

logger = logging.getLogger(__name__)


# ============================================================
#  序列化工具
# ============================================================

def card_to_dict(c: Card) -> dict:
    """将 Card 序列化为前端可用的 dict"""
    return {
        "rank": int(c.rank),
        "suit": c.suit.value,
        "display": c.display,
    }


def card_from_dict(d: dict) -> Card:
    """前端传回的牌 → Card（点数或花色不合法时抛 ValueError）"""
    return Card(rank=Rank(int(d["rank"])), suit=Suit(d["suit"]))


def player_to_dict(p: Player, reveal_hand: bool = False) -> dict:
    """将 Player 序列化，只有玩家自己的手牌会全部发送"""
    data = {
        "id": p.id,
        "name": p.name,
        "is_human": p.is_human,
        "hand_size": p.hand_size,
    }
    if reveal_hand:
        data["hand"] = [card_to_dict(c) for c in p.hand]
    return data


def play_to_dict(play: Play) -> dict:
    return {
        "type": play.type.value,
        "cards": [card_to_dict(c) for c in play.cards],
        "strength": play.strength,
    }


def pile_to_dict(pile: Pile) -> dict:
    data = play_to_dict(pile.play)
    data["player_id"] = pile.player_index
    return data


def state_to_dict(engine: GameEngine) -> dict:
    """当前局面快照"""
    s = engine.state
    return {
        "type": "state",
        "players": [
            player_to_dict(p, reveal_hand=(p.id == engine.human_index))
            for p in engine.get_players()
        ],
        "current_player": engine.get_current_player_index(),
        "pile": pile_to_dict(s.pile) if s.pile else None,
        "is_game_over": engine.is_game_over(),
        "log": engine.log,
        "standings": [p.id for p in engine.standings()] if engine.is_game_over() else [],
    }


# ============================================================
#  FastAPI 应用
# ============================================================

STATIC_DIR = Path(__file__).parent / "static"

app = FastAPI(title="大富豪")
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


def create_engine() -> GameEngine:
    """每个浏览器连接一个独立对局"""
    return GameEngine()


@app.get("/")
async def index():
    """返回前端页面"""
    return FileResponse(str(STATIC_DIR / "index.html"))


def handle_message(engine: GameEngine, msg: dict) -> dict:
    """
    执行一条前端指令，返回要回发的消息。
    action: start / restart / play / pass / check
    """
    action = msg.get("action")

    if action == "start":
        engine.start_new_game()
    elif action == "restart":
        engine.restart()
    elif action == "play":
        engine.submit_play(_parse_cards(msg))
    elif action == "pass":
        engine.submit_pass()
    elif action == "check":
        cards = _parse_cards(msg)
        return {
            "type": "check",
            "playable": engine.can_play(cards),
            "cards": [card_to_dict(c) for c in cards],
        }
    else:
        return {"type": "error", "message": f"未知指令: {action}"}

    return state_to_dict(engine)


def _parse_cards(msg: dict) -> List[Card]:
    return [card_from_dict(d) for d in msg.get("cards", [])]


@app.websocket("/ws")
async def websocket_endpoint(ws: WebSocket):
    """WebSocket 端点：一个连接对应一局游戏"""
    await ws.accept()
    engine = create_engine()
    try:
        while True:
            data = await ws.receive_text()
            try:
                msg = json.loads(data)
                reply = handle_message(engine, msg)
            except GameError as e:
                logger.warning("非法操作: %s", e)
                reply = {"type": "error", "message": str(e)}
            except (ValueError, KeyError, TypeError, AttributeError) as e:
                logger.warning("无法解析的消息: %r (%s)", data, e)
                reply = {"type": "error", "message": "消息格式错误"}
            await ws.send_text(json.dumps(reply, ensure_ascii=False))
    except WebSocketDisconnect:
        logger.info("连接断开")
