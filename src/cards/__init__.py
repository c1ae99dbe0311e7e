# 牌与牌堆模块
from .card import (
    Card, Rank, Suit, InvalidCardError,
    compare_suit_rank, compare_rank_suit, standard_cards,
)
from .card_stack import CardStack, Orientation
