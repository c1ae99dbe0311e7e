"""Card 单元测试 - 构造校验、名称、相等与哈希、两种比较策略"""

import itertools
from functools import cmp_to_key

import pytest
from src.cards.card import (
    Card, Rank, Suit, InvalidCardError,
    compare_suit_rank, compare_rank_suit, standard_cards,
)


# ============================================================
#  辅助：快速构造牌
# ============================================================

def c(rank: Rank, suit: Suit = Suit.HEARTS) -> Card:
    """快捷构造一张牌"""
    return Card(suit, rank)


ALL_CARDS = list(standard_cards())


# ============================================================
#  构造
# ============================================================

class TestConstruction:

    @pytest.mark.parametrize("suit", [-1, 4, 0, "HEARTS", None])
    def test_invalid_suit(self, suit):
        with pytest.raises(InvalidCardError) as exc:
            Card(suit, Rank.ACE)
        assert exc.value.param == "suit"
        assert exc.value.value == suit

    @pytest.mark.parametrize("rank", [0, 14, 1, "ACE", None])
    def test_invalid_rank(self, rank):
        with pytest.raises(InvalidCardError) as exc:
            Card(Suit.CLUBS, rank)
        assert exc.value.param == "rank"
        assert exc.value.value == rank

    def test_suit_checked_first(self):
        with pytest.raises(InvalidCardError) as exc:
            Card(7, 99)
        assert exc.value.param == "suit"

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            Card(Suit.CLUBS, 14)

    def test_error_message_names_param_and_value(self):
        with pytest.raises(InvalidCardError) as exc:
            Card(Suit.CLUBS, 14)
        msg = str(exc.value)
        assert "rank" in msg
        assert "14" in msg

    def test_immutable(self):
        card = c(Rank.ACE)
        with pytest.raises(AttributeError):
            card.rank = Rank.KING

    def test_from_names(self):
        assert Card.from_names("hearts", "ace") == Card(Suit.HEARTS, Rank.ACE)
        assert Card.from_names("CLUBS", "Deuce") == Card(Suit.CLUBS, Rank.DEUCE)

    def test_from_names_unknown(self):
        with pytest.raises(InvalidCardError) as exc:
            Card.from_names("stars", "ace")
        assert exc.value.param == "suit"
        with pytest.raises(InvalidCardError) as exc:
            Card.from_names("hearts", "joker")
        assert exc.value.param == "rank"
        assert exc.value.value == "joker"


# ============================================================
#  名称
# ============================================================

class TestNames:

    def test_long_name(self):
        assert Card(Suit.SPADES, Rank.JACK).long_name == "Jack of Spades"
        assert Card(Suit.HEARTS, Rank.DEUCE).long_name == "Deuce of Hearts"

    @pytest.mark.parametrize("card, expected", [
        (Card(Suit.SPADES, Rank.JACK), "J♤ "),
        (Card(Suit.CLUBS, Rank.ACE), "A♧ "),
        (Card(Suit.DIAMONDS, Rank.TEN), "T♦ "),
        (Card(Suit.HEARTS, Rank.SEVEN), "7♥ "),
        (Card(Suit.HEARTS, Rank.QUEEN), "Q♥ "),
        (Card(Suit.CLUBS, Rank.KING), "K♧ "),
        (Card(Suit.SPADES, Rank.DEUCE), "2♤ "),
    ])
    def test_short_name(self, card, expected):
        assert card.short_name == expected

    def test_str_is_short_name(self):
        card = Card(Suit.DIAMONDS, Rank.NINE)
        assert str(card) == card.short_name


# ============================================================
#  相等与哈希
# ============================================================

class TestEquality:

    def test_equal_cards(self):
        card1 = Card(Suit.CLUBS, Rank.ACE)
        card2 = Card(Suit.CLUBS, Rank.ACE)
        assert card1 == card2
        assert hash(card1) == hash(card2)

    def test_different_cards(self):
        assert Card(Suit.CLUBS, Rank.ACE) != Card(Suit.DIAMONDS, Rank.DEUCE)
        assert Card(Suit.CLUBS, Rank.ACE) != Card(Suit.HEARTS, Rank.ACE)
        assert Card(Suit.CLUBS, Rank.ACE) != Card(Suit.CLUBS, Rank.KING)

    def test_not_equal_to_other_types(self):
        assert Card(Suit.CLUBS, Rank.ACE) != (Suit.CLUBS, Rank.ACE)

    def test_usable_in_set(self):
        assert len(set(ALL_CARDS + ALL_CARDS)) == 52


# ============================================================
#  比较策略
# ============================================================

class TestComparisons:

    ace_of_clubs = Card(Suit.CLUBS, Rank.ACE)
    deuce_of_clubs = Card(Suit.CLUBS, Rank.DEUCE)
    ace_of_hearts = Card(Suit.HEARTS, Rank.ACE)
    deuce_of_hearts = Card(Suit.HEARTS, Rank.DEUCE)

    def test_suit_rank(self):
        assert compare_suit_rank(self.ace_of_clubs, self.ace_of_clubs) == 0
        # 同花色不同点数
        assert compare_suit_rank(self.ace_of_clubs, self.deuce_of_clubs) < 0
        assert compare_suit_rank(self.deuce_of_clubs, self.ace_of_clubs) > 0
        # 同点数不同花色
        assert compare_suit_rank(self.ace_of_hearts, self.ace_of_clubs) < 0
        assert compare_suit_rank(self.ace_of_clubs, self.ace_of_hearts) > 0
        # 花色优先
        assert compare_suit_rank(self.ace_of_clubs, self.deuce_of_hearts) > 0
        assert compare_suit_rank(self.deuce_of_hearts, self.ace_of_clubs) < 0

    def test_rank_suit(self):
        assert compare_rank_suit(self.ace_of_clubs, self.ace_of_clubs) == 0
        assert compare_rank_suit(self.ace_of_clubs, self.deuce_of_clubs) < 0
        assert compare_rank_suit(self.deuce_of_clubs, self.ace_of_clubs) > 0
        assert compare_rank_suit(self.ace_of_hearts, self.ace_of_clubs) < 0
        assert compare_rank_suit(self.ace_of_clubs, self.ace_of_hearts) > 0
        # 点数优先
        assert compare_rank_suit(self.ace_of_clubs, self.deuce_of_hearts) < 0
        assert compare_rank_suit(self.deuce_of_hearts, self.ace_of_clubs) > 0

    def test_exposed_on_card(self):
        assert Card.COMPARE_SUIT_RANK(self.ace_of_hearts, self.ace_of_clubs) < 0
        assert Card.COMPARE_RANK_SUIT(self.deuce_of_hearts, self.ace_of_clubs) > 0

    @pytest.mark.parametrize("cmp", [compare_suit_rank, compare_rank_suit])
    def test_total_order(self, cmp):
        """反对称、仅相同牌为0，且与排序结果一致（传递性）"""
        for a, b in itertools.product(ALL_CARDS, repeat=2):
            r = cmp(a, b)
            assert (r == 0) == (a == b)
            assert r == -cmp(b, a)

        ordered = sorted(ALL_CARDS, key=cmp_to_key(cmp))
        for i, a in enumerate(ordered):
            for b in ordered[i + 1:]:
                assert cmp(a, b) < 0

    def test_default_order_is_suit_rank(self):
        assert sorted(reversed(ALL_CARDS)) == ALL_CARDS
        assert Card(Suit.HEARTS, Rank.KING) < Card(Suit.SPADES, Rank.ACE)
