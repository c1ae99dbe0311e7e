"""HTTP 服务 - 以 JSON 接口暴露内存中的具名牌堆"""

import logging
import os
import random
import threading
import uuid
from dataclasses import dataclass, field
from typing import Dict, List, Literal, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from src.cards.card import Card, InvalidCardError, compare_rank_suit, compare_suit_rank
from src.cards.card_stack import CardStack, Orientation

logger = logging.getLogger(__name__)

# 排序方式 → 比较函数
SORT_ORDERS = {
    "suit_rank": compare_suit_rank,
    "rank_suit": compare_rank_suit,
}


# ============================================================
#  请求模型
# ============================================================

class CardIn(BaseModel):
    suit: str
    rank: str


class CreateStackIn(BaseModel):
    kind: Literal["empty", "sorted", "shuffled", "list"] = "empty"
    orientation: Orientation = Orientation.FACE_DOWN
    cards: List[CardIn] = []


class DrawIn(BaseModel):
    n: int = 1


class OrientationIn(BaseModel):
    orientation: Orientation


class SortIn(BaseModel):
    order: Literal["suit_rank", "rank_suit"] = "suit_rank"


# ============================================================
#  序列化工具
# ============================================================

def card_to_dict(c: Card) -> dict:
    """将 Card 序列化为 dict"""
    return {
        "suit": c.suit.name,
        "rank": c.rank.name,
        "short_name": c.short_name,
        "long_name": c.long_name,
    }


def stack_to_dict(stack_id: str, stack: CardStack) -> dict:
    """将 CardStack 序列化（contents 为按朝向排列的快照）"""
    return {
        "id": stack_id,
        "orientation": stack.orientation.value,
        "count": stack.count,
        "contents": [card_to_dict(c) for c in stack.contents],
    }


def card_from_model(data: CardIn) -> Card:
    """请求体 → Card，非法花色/点数转为 422"""
    try:
        return Card.from_names(data.suit, data.rank)
    except InvalidCardError as e:
        logger.warning("拒绝非法牌: %s", e)
        raise HTTPException(status_code=422, detail=str(e))


# ============================================================
#  牌堆注册表（每个牌堆一把锁）
# ============================================================

def create_rng() -> random.Random:
    """随机源：设置 CARD_STACK_SEED 时可复现"""
    seed = os.getenv("CARD_STACK_SEED", "")
    if seed:
        return random.Random(int(seed))
    return random.Random()


@dataclass
class StackEntry:
    stack: CardStack
    lock: threading.Lock = field(default_factory=threading.Lock)


class StackRegistry:
    """按 id 保存牌堆"""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng if rng is not None else create_rng()
        self._entries: Dict[str, StackEntry] = {}
        self._lock = threading.Lock()

    def create(self, req: CreateStackIn) -> str:
        cards = [card_from_model(c) for c in req.cards]
        # 由注册表随机源派生，设置种子后可复现
        rng = random.Random(self._rng.random())
        if req.kind == "sorted":
            stack = CardStack.get_sorted_standard_deck(req.orientation, rng=rng)
        elif req.kind == "shuffled":
            stack = CardStack.get_shuffled_standard_deck(req.orientation, rng=rng)
        elif req.kind == "list":
            stack = CardStack.from_list(cards, req.orientation, rng=rng)
        else:
            stack = CardStack.get_empty_stack(req.orientation, rng=rng)

        stack_id = uuid.uuid4().hex
        with self._lock:
            self._entries[stack_id] = StackEntry(stack=stack)
        logger.info("创建牌堆 %s: kind=%s %r", stack_id, req.kind, stack)
        return stack_id

    def get(self, stack_id: str) -> StackEntry:
        with self._lock:
            entry = self._entries.get(stack_id)
        if entry is None:
            raise HTTPException(status_code=404, detail=f"stack {stack_id} not found")
        return entry

    def remove(self, stack_id: str) -> None:
        with self._lock:
            entry = self._entries.pop(stack_id, None)
        if entry is None:
            raise HTTPException(status_code=404, detail=f"stack {stack_id} not found")
        logger.info("删除牌堆 %s", stack_id)


# ============================================================
#  FastAPI 应用
# ============================================================

def create_app(registry: Optional[StackRegistry] = None) -> FastAPI:
    """创建应用；测试可注入带固定种子的注册表"""
    app = FastAPI(title="Card Stacks")
    reg = registry if registry is not None else StackRegistry()

    @app.post("/stacks", status_code=201)
    def create_stack(req: CreateStackIn):
        stack_id = reg.create(req)
        entry = reg.get(stack_id)
        with entry.lock:
            return stack_to_dict(stack_id, entry.stack)

    @app.get("/stacks/{stack_id}")
    def get_stack(stack_id: str):
        entry = reg.get(stack_id)
        with entry.lock:
            return stack_to_dict(stack_id, entry.stack)

    @app.delete("/stacks/{stack_id}", status_code=204)
    def delete_stack(stack_id: str):
        reg.remove(stack_id)

    @app.post("/stacks/{stack_id}/draw")
    def draw(stack_id: str, req: DrawIn):
        entry = reg.get(stack_id)
        with entry.lock:
            drawn = entry.stack.draw(req.n)
            return {
                "drawn": [card_to_dict(c) for c in drawn],
                "stack": stack_to_dict(stack_id, entry.stack),
            }

    @app.post("/stacks/{stack_id}/cards")
    def add_card(stack_id: str, req: CardIn):
        card = card_from_model(req)
        entry = reg.get(stack_id)
        with entry.lock:
            entry.stack.add_card(card)
            return stack_to_dict(stack_id, entry.stack)

    @app.post("/stacks/{stack_id}/flip")
    def flip(stack_id: str):
        entry = reg.get(stack_id)
        with entry.lock:
            entry.stack.flip()
            return stack_to_dict(stack_id, entry.stack)

    @app.put("/stacks/{stack_id}/orientation")
    def set_orientation(stack_id: str, req: OrientationIn):
        entry = reg.get(stack_id)
        with entry.lock:
            entry.stack.orientation = req.orientation
            return stack_to_dict(stack_id, entry.stack)

    @app.post("/stacks/{stack_id}/shuffle")
    def shuffle(stack_id: str):
        entry = reg.get(stack_id)
        with entry.lock:
            entry.stack.shuffle()
            return stack_to_dict(stack_id, entry.stack)

    @app.post("/stacks/{stack_id}/sort")
    def sort(stack_id: str, req: SortIn):
        entry = reg.get(stack_id)
        with entry.lock:
            entry.stack.sort(SORT_ORDERS[req.order])
            return stack_to_dict(stack_id, entry.stack)

    return app


app = create_app()
