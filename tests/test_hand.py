from __future__ import annotations

import pytest

from art_dealer.cards import Card, Rank, Suit
from art_dealer.hand import Hand, InvalidHandError, format_hand_for_log


def _codes(hand: Hand) -> list[str]:
    return [card.code for card in hand]


def test_from_codes_accepts_spaces_and_commas() -> None:
    hand = Hand.from_codes("AS, 10H  QC,2D")
    assert _codes(hand) == ["AS", "10H", "QC", "2D"]
    assert hand.is_complete


def test_repeated_card_is_rejected() -> None:
    with pytest.raises(InvalidHandError):
        Hand.from_codes("AS 2D AS")


def test_fifth_card_is_rejected() -> None:
    hand = Hand.from_codes("AS 2D 3C 4H")
    with pytest.raises(InvalidHandError):
        hand.add_card(Card(Rank.FIVE, Suit.HEARTS))
    assert len(hand) == 4


def test_key_ignores_order_but_equality_does_not() -> None:
    first = Hand.from_codes("AS 2D 3C 4H")
    second = Hand.from_codes("4H 3C 2D AS")
    assert first.key == second.key
    assert first.same_cards(second)
    assert first != second
    assert first == Hand.from_codes("AS 2D 3C 4H")


def test_highest_rank_counts_ace_high() -> None:
    assert Hand.from_codes("KD AS 2C").highest_rank() is Rank.ACE
    assert Hand.from_codes("4C 9D 9S 2H").highest_rank() is Rank.NINE
    assert Hand().highest_rank() is None


def test_same_suit_and_rising_run() -> None:
    assert Hand.from_codes("3C 4C 5C 6C").same_suit()
    assert not Hand.from_codes("3C 4C 5D 6C").same_suit()
    assert Hand.from_codes("JC QC KC AC").rising_run()
    assert not Hand.from_codes("3C 5C 4C 6C").rising_run()


def test_sort_by_rank_is_stable() -> None:
    hand = Hand.from_codes("KD 3C KS 3H")
    hand.sort_by_rank()
    assert _codes(hand) == ["3C", "3H", "KD", "KS"]


def test_format_hand_for_log_marks_selected_cards() -> None:
    hand = Hand.from_codes("2H 3C")
    assert format_hand_for_log(hand, (True, False)) == "TWO of HEARTS*,THREE of CLUBS"
    assert format_hand_for_log(hand, (False, True), marker=" [x]") == "TWO of HEARTS,THREE of CLUBS [x]"
    assert format_hand_for_log(hand) == "TWO of HEARTS,THREE of CLUBS"
