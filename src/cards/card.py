"""牌的定义 - 标准52张法式扑克牌的数据模型"""

from enum import IntEnum
from dataclasses import dataclass
from typing import Any, Callable, Iterator


class Suit(IntEnum):
    """花色枚举（声明顺序即比较顺序）"""
    HEARTS = 0
    SPADES = 1
    DIAMONDS = 2
    CLUBS = 3


class Rank(IntEnum):
    """点数枚举（A 最小，K 最大）"""
    ACE = 1
    DEUCE = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13


# 花色符号映射
SUIT_SYMBOL = {
    Suit.SPADES: "♤",
    Suit.CLUBS: "♧",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
}

# 点数符号映射（未列出的点数直接用数字）
RANK_SYMBOL = {
    Rank.ACE: "A",
    Rank.TEN: "T",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}


class InvalidCardError(ValueError):
    """构造牌时花色或点数不在枚举范围内"""

    def __init__(self, param: str, value: Any, message: str):
        super().__init__(f"{message} ({param}={value!r})")
        self.param = param
        self.value = value


def rank_symbol(rank: Rank) -> str:
    return RANK_SYMBOL.get(rank, str(int(rank)))


@dataclass(frozen=True)
class Card:
    """一张扑克牌（不可变，不含大小王）"""
    suit: Suit
    rank: Rank

    def __post_init__(self):
        """校验花色与点数（分别检查，先花色后点数）"""
        if not isinstance(self.suit, Suit):
            raise InvalidCardError("suit", self.suit, "Invalid card suit.")
        if not isinstance(self.rank, Rank):
            raise InvalidCardError("rank", self.rank, "Invalid card rank.")

    @property
    def long_name(self) -> str:
        """完整名称，如 "Jack of Spades" """
        return f"{self.rank.name.title()} of {self.suit.name.title()}"

    @property
    def short_name(self) -> str:
        """简短名称，点数符号 + 花色符号 + 空格，如 "J♤ " """
        return f"{rank_symbol(self.rank)}{SUIT_SYMBOL[self.suit]} "

    @classmethod
    def from_names(cls, suit: str, rank: str) -> "Card":
        """按枚举名构造（不区分大小写），如 ("hearts", "ace")"""
        try:
            s = Suit[str(suit).strip().upper()]
        except KeyError:
            raise InvalidCardError("suit", suit, "Invalid card suit.") from None
        try:
            r = Rank[str(rank).strip().upper()]
        except KeyError:
            raise InvalidCardError("rank", rank, "Invalid card rank.") from None
        return cls(suit=s, rank=r)

    def __str__(self) -> str:
        return self.short_name

    def __repr__(self) -> str:
        return f"Card({self.suit.name}, {self.rank.name})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.suit == other.suit and self.rank == other.rank

    def __hash__(self) -> int:
        return hash(self.suit) ^ hash(self.rank)

    def __lt__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return compare_suit_rank(self, other) < 0


# ============================================================
#  比较策略：返回负数 / 0 / 正数
# ============================================================

def _cmp(a: int, b: int) -> int:
    return (a > b) - (a < b)


def compare_suit_rank(a: Card, b: Card) -> int:
    """先比花色（声明顺序），再比点数"""
    return _cmp(a.suit, b.suit) or _cmp(a.rank, b.rank)


def compare_rank_suit(a: Card, b: Card) -> int:
    """先比点数，再比花色（声明顺序）"""
    return _cmp(a.rank, b.rank) or _cmp(a.suit, b.suit)


Comparison = Callable[[Card, Card], int]

# 挂到 Card 上，便于 stack.sort(Card.COMPARE_SUIT_RANK) 的写法
Card.COMPARE_SUIT_RANK = staticmethod(compare_suit_rank)
Card.COMPARE_RANK_SUIT = staticmethod(compare_rank_suit)


def standard_cards() -> Iterator[Card]:
    """按花色、点数顺序生成一副标准52张牌"""
    for suit in Suit:
        for rank in Rank:
            yield Card(suit=suit, rank=rank)
