"""Tests for Hand evaluation."""

from hypothesis import assume, given
from hypothesis import strategies as st

from conftest import card_strategy, cards_strategy, make_hand
from wildcat.cards import Card, Rank, Suit
from wildcat.hand import Hand, hand_value, is_blackjack

NON_ACE_RANKS = [rank for rank in Rank if rank != Rank.ACE]


class TestHandValue:
    """Tests for hand_value and Hand.value."""

    def test_empty_hand(self):
        """Test empty hand properties."""
        hand = Hand()
        assert len(hand) == 0
        assert hand.value == 0
        assert not hand.is_soft
        assert not hand.is_blackjack
        assert not hand.is_busted

    def test_hard_hand_value(self):
        assert make_hand("10S", "6H").value == 16

    def test_soft_hand_value(self):
        hand = make_hand("AS", "6H")
        assert hand.value == 17
        assert hand.is_soft

    def test_soft_to_hard_transition(self):
        """Test ace switching from 11 to 1."""
        hand = make_hand("AS")
        assert hand.value == 11

        hand.add_card(Card(Rank.FIVE, Suit.HEARTS))
        assert hand.value == 16
        assert hand.is_soft

        hand.add_card(Card(Rank.EIGHT, Suit.CLUBS))
        assert hand.value == 14
        assert not hand.is_soft

    def test_four_aces(self):
        """Test that four Aces reduce one at a time down to 14."""
        assert hand_value(make_hand("AS", "AH", "AD", "AC")) == 14

    def test_multiple_aces_with_nine(self):
        hand = make_hand("AS", "AH", "AC", "9D")
        assert hand.value == 12

    def test_bust_is_final_once_aces_reduced(self, bust_hand):
        assert bust_hand.is_busted
        assert bust_hand.value == 26

        hand = make_hand("AS", "9H", "5C", "KD")
        assert hand.value == 25
        assert hand.is_busted


class TestBlackjack:
    """Tests for natural blackjack detection."""

    def test_blackjack(self, blackjack_hand):
        assert blackjack_hand.is_blackjack
        assert blackjack_hand.value == 21
        assert is_blackjack(blackjack_hand.cards)

    def test_ten_and_ace_any_order(self):
        assert make_hand("10D", "AC").is_blackjack

    def test_three_card_21_is_not_blackjack(self):
        hand = make_hand("7S", "7H", "7C")
        assert hand.value == 21
        assert not hand.is_blackjack

    def test_two_card_non_21(self):
        assert not make_hand("AS", "9H").is_blackjack


class TestHandState:
    """Tests for Hand bookkeeping."""

    def test_can_double(self):
        hand = make_hand("5S", "6H")
        assert hand.can_double
        hand.add_card(Card(Rank.TWO, Suit.CLUBS))
        assert not hand.can_double

    def test_clear_hand(self, blackjack_hand):
        blackjack_hand.is_doubled = True
        blackjack_hand.clear()
        assert len(blackjack_hand) == 0
        assert blackjack_hand.value == 0
        assert not blackjack_hand.is_doubled

    def test_str_marks_bust(self, bust_hand):
        assert "(BUST)" in str(bust_hand)


class TestHandProperties:
    """Property-based checks of the evaluator."""

    @given(cards_strategy(), card_strategy(ranks=NON_ACE_RANKS))
    def test_non_ace_never_lowers_hard_value(self, cards, extra):
        # A soft total can drop when its Ace is forced down to 1
        assume(not Hand(cards=list(cards)).is_soft)
        assert hand_value(cards + [extra]) >= hand_value(cards)

    def test_soft_total_can_drop(self):
        assert hand_value(make_hand("AS", "5H", "5C", "9D")) < hand_value(make_hand("AS", "5H", "5C"))

    @given(cards_strategy())
    def test_value_at_least_all_aces_as_one(self, cards):
        low = sum(1 if card.is_ace else card.value for card in cards)
        assert hand_value(cards) >= low

    @given(cards_strategy())
    def test_value_over_21_only_when_every_ace_reduced(self, cards):
        low = sum(1 if card.is_ace else card.value for card in cards)
        if hand_value(cards) > 21:
            assert hand_value(cards) == low

    @given(cards_strategy(min_cards=2, max_cards=2))
    def test_blackjack_needs_ace_and_ten(self, cards):
        ranks = {card.rank for card in cards}
        expected = Rank.ACE in ranks and any(card.rank.is_ten_value for card in cards)
        assert is_blackjack(cards) == expected

    @given(st.integers(min_value=0, max_value=4))
    def test_aces_only(self, count):
        cards = [Card(Rank.ACE, suit) for suit in list(Suit)[:count]]
        expected = 0 if count == 0 else 11 + (count - 1)
        assert hand_value(cards) == expected
