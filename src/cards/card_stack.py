"""牌堆 - 可表示整副牌、手牌或弃牌堆，"顶部"随朝向而定"""

import logging
import random
from enum import Enum
from functools import cmp_to_key
from typing import Iterable, List, Optional

from src.cards.card import Card, Comparison, standard_cards

logger = logging.getLogger(__name__)

# 每次洗牌重复的最大遍数
MAX_SHUFFLE_PASSES = 5


class Orientation(str, Enum):
    """牌堆朝向"""
    FACE_UP = "FACE_UP"         # 牌面朝上：顶部在内部列表末尾
    FACE_DOWN = "FACE_DOWN"     # 牌面朝下：顶部在内部列表开头


class CardStack:
    """一叠牌，可为空，也可包含任意张牌（允许重复）。

    内部列表始终按固定顺序存放（下标 0 为前端），朝向只决定哪一端是
    "顶部"：FACE_DOWN 时前端为顶，FACE_UP 时末端为顶。直接给
    ``orientation`` 赋值与 ``flip()`` 效果相同，都不会移动牌。

    请通过 ``get_empty_stack`` / ``get_sorted_standard_deck`` /
    ``get_shuffled_standard_deck`` / ``from_list`` 创建实例。
    """

    def __init__(self, orientation: Orientation = Orientation.FACE_DOWN,
                 rng: Optional[random.Random] = None):
        self._cards: List[Card] = []
        self.orientation = orientation
        self._rng = rng if rng is not None else random.Random()

    # ============================================================
    #  只读视图
    # ============================================================

    @property
    def contents(self) -> List[Card]:
        """按朝向排列的快照：顶部的牌在最前"""
        cards = list(self._cards)
        if self.orientation == Orientation.FACE_UP:
            cards.reverse()
        return cards

    @property
    def count(self) -> int:
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"CardStack({self.orientation.value}, count={len(self._cards)})"

    def __str__(self) -> str:
        return " ".join(c.short_name.strip() for c in self.contents)

    # ============================================================
    #  整体操作
    # ============================================================

    def flip(self) -> None:
        """翻转牌堆朝向"""
        if self.orientation == Orientation.FACE_DOWN:
            self.orientation = Orientation.FACE_UP
        else:
            self.orientation = Orientation.FACE_DOWN

    def shuffle(self) -> None:
        """洗牌：随机洗 1~5 遍，每遍都是一次 Fisher-Yates 均匀置换"""
        passes = self._rng.randint(1, MAX_SHUFFLE_PASSES)
        for _ in range(passes):
            self._rng.shuffle(self._cards)
        logger.debug("洗牌 %d 遍 (%d 张)", passes, len(self._cards))

    def sort(self, comparison: Comparison) -> None:
        """按给定比较函数排序（升序），牌面朝上时再把内部列表反转。

        反转后 ``contents`` 在两种朝向下都呈升序。
        """
        self._cards.sort(key=cmp_to_key(comparison))
        if self.orientation == Orientation.FACE_UP:
            self._cards.reverse()

    # ============================================================
    #  摸牌 / 放牌（按朝向分派到两端）
    # ============================================================

    def draw(self, n: int) -> List[Card]:
        """从顶部摸至多 n 张牌，按摸出顺序返回。

        不足 n 张时返回剩下的全部；n <= 0 或空牌堆返回空列表。
        """
        if self.orientation == Orientation.FACE_DOWN:
            drawn = self._draw_from_front(n)
        else:
            drawn = self._draw_from_back(n)
        logger.debug("摸牌 %d/%d 张，剩余 %d 张", len(drawn), max(n, 0), len(self._cards))
        return drawn

    def add_card(self, card: Card) -> None:
        """把一张牌放到顶部"""
        if self.orientation == Orientation.FACE_DOWN:
            self._add_to_front(card)
        else:
            self._add_to_back(card)

    def _take(self, n: int) -> int:
        return min(max(n, 0), len(self._cards))

    def _draw_from_front(self, n: int) -> List[Card]:
        k = self._take(n)
        drawn = self._cards[:k]
        del self._cards[:k]
        return drawn

    def _draw_from_back(self, n: int) -> List[Card]:
        k = self._take(n)
        if k == 0:
            return []
        drawn = self._cards[-k:]
        del self._cards[-k:]
        drawn.reverse()
        return drawn

    def _add_to_front(self, card: Card) -> None:
        self._cards.insert(0, card)

    def _add_to_back(self, card: Card) -> None:
        self._cards.append(card)

    # ============================================================
    #  工厂方法
    # ============================================================

    @classmethod
    def get_empty_stack(cls, orientation: Orientation,
                        rng: Optional[random.Random] = None) -> "CardStack":
        """空牌堆"""
        return cls(orientation, rng=rng)

    @classmethod
    def get_sorted_standard_deck(cls, orientation: Orientation,
                                 rng: Optional[random.Random] = None) -> "CardStack":
        """标准52张，内部按花色再按点数排列（与朝向无关）"""
        stack = cls(orientation, rng=rng)
        stack._cards.extend(standard_cards())
        return stack

    @classmethod
    def get_shuffled_standard_deck(cls, orientation: Orientation,
                                   rng: Optional[random.Random] = None) -> "CardStack":
        """洗好的标准52张"""
        stack = cls.get_sorted_standard_deck(orientation, rng=rng)
        stack.shuffle()
        return stack

    @classmethod
    def from_list(cls, cards: Iterable[Card], orientation: Orientation,
                  rng: Optional[random.Random] = None) -> "CardStack":
        """由列表创建牌堆，列表第一张成为顶部的牌（两种朝向皆然）。

        牌面朝下时内部顺序与输入一致；牌面朝上时内部顺序为输入的反序。
        """
        stack = cls(orientation, rng=rng)
        stack._cards = list(cards)
        if orientation == Orientation.FACE_UP:
            stack._cards.reverse()
        return stack
