from __future__ import annotations

import pytest

from art_dealer.cards import Card, Rank, Suit, iter_full_deck


@pytest.mark.parametrize(
    ("code", "rank", "suit"),
    [
        ("AS", Rank.ACE, Suit.SPADES),
        ("10h", Rank.TEN, Suit.HEARTS),
        ("TD", Rank.TEN, Suit.DIAMONDS),
        ("qc", Rank.QUEEN, Suit.CLUBS),
        ("ace of spades", Rank.ACE, Suit.SPADES),
        ("KING of HEARTS", Rank.KING, Suit.HEARTS),
    ],
)
def test_from_code_parses_short_and_long_forms(code: str, rank: Rank, suit: Suit) -> None:
    assert Card.from_code(code) == Card(rank, suit)


@pytest.mark.parametrize("code", ["", "A", "ZZ", "10", "1H", "ACE of STARS"])
def test_from_code_rejects_unknown_cards(code: str) -> None:
    with pytest.raises(ValueError):
        Card.from_code(code)


def test_rank_projections() -> None:
    assert Rank.ACE.ace_high == 14
    assert Rank.ACE.ace_low == 1
    assert Rank.TWO.ace_high == Rank.TWO.ace_low == 2
    assert Rank.TEN.ace_low == 10
    assert (Rank.JACK.ace_high, Rank.QUEEN.ace_high, Rank.KING.ace_high) == (11, 12, 13)
    assert Rank.KING.ace_low == 13


def test_rank_order_puts_ace_first() -> None:
    ordered = Rank.ordered()
    assert ordered[0] is Rank.ACE
    assert ordered[-1] is Rank.KING
    assert [rank.order for rank in ordered] == list(range(13))


def test_suit_colors() -> None:
    assert {suit for suit in Suit if suit.is_red} == {Suit.HEARTS, Suit.DIAMONDS}
    assert {suit for suit in Suit if suit.is_black} == {Suit.CLUBS, Suit.SPADES}


def test_card_labels() -> None:
    card = Card(Rank.QUEEN, Suit.SPADES)
    assert card.code == "QS"
    assert card.label() == "Q♠"
    assert card.log_token() == "QUEEN of SPADES"


def test_full_deck_has_unique_cards() -> None:
    deck = list(iter_full_deck())
    assert len(deck) == 52
    assert len(set(deck)) == 52
