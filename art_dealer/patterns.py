"""Dealer selection rules.

Each pattern maps a submitted hand to the cards the dealer would also pick.
Rules never mutate cards; the picks are reported through :class:`Evaluation`
as a tuple of acceptance events plus a boolean mask indexed by hand position.
The one exception to "no side effects" is :attr:`Pattern.ARITHMETIC_RUN`,
which sorts the submitted hand in place before checking it, so the caller sees
the sorted order afterwards.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from itertools import combinations
from logging import getLogger
from typing import Callable, Final

import numpy as np

from .cards import Card, Rank, Suit
from .hand import HAND_SIZE, Hand

__all__ = [
    "Pattern",
    "Acceptance",
    "Evaluation",
    "PATTERN_COUNT",
    "SUM_TARGET",
    "evaluate",
]

logger = getLogger(__name__)

SUM_TARGET: Final[int] = 11

Positions = tuple[int, ...]
Rule = Callable[[Hand], list[Positions]]


class Pattern(IntEnum):
    """The twelve dealer patterns, numbered in play order."""

    RED_SUITS = 1
    CLUBS = 2
    FACE_CARDS = 3
    SINGLE_DIGITS = 4
    SINGLE_DIGIT_PRIMES = 5
    HIGHEST_RANK = 6
    RISING_STRAIGHT_FLUSH = 7
    ARITHMETIC_RUN = 8
    SUM_TO_ELEVEN = 9
    BLACKJACK_PAIR = 10
    ROYAL_SUIT = 11
    BLACK_JACKS_AND_ACES = 12

    @classmethod
    def from_index(cls, index: int) -> "Pattern":
        """Return the pattern numbered ``index``; unknown numbers map to rule 1."""

        try:
            return cls(index)
        except ValueError:
            logger.debug("unknown pattern %r, using %s", index, cls.RED_SUITS.name)
            return cls.RED_SUITS

    @property
    def title(self) -> str:
        return _TITLES[self]


_TITLES = {
    Pattern.RED_SUITS: "Red suits",
    Pattern.CLUBS: "Clubs",
    Pattern.FACE_CARDS: "Face cards",
    Pattern.SINGLE_DIGITS: "Single digits",
    Pattern.SINGLE_DIGIT_PRIMES: "Single-digit primes",
    Pattern.HIGHEST_RANK: "Highest rank",
    Pattern.RISING_STRAIGHT_FLUSH: "Rising straight flush",
    Pattern.ARITHMETIC_RUN: "Ranks two apart",
    Pattern.SUM_TO_ELEVEN: "Cards summing to eleven",
    Pattern.BLACKJACK_PAIR: "Aces and eights",
    Pattern.ROYAL_SUIT: "One-suit royalty",
    Pattern.BLACK_JACKS_AND_ACES: "Black jacks and aces",
}

PATTERN_COUNT: Final[int] = len(Pattern)


@dataclass(frozen=True, slots=True)
class Acceptance:
    """A group of hand positions the dealer accepted together."""

    positions: Positions
    cards: tuple[Card, ...]


@dataclass(frozen=True, slots=True)
class Evaluation:
    """Outcome of evaluating one hand against one pattern."""

    pattern: Pattern
    cards: tuple[Card, ...]
    acceptances: tuple[Acceptance, ...]
    mask: tuple[bool, ...]

    @property
    def selected(self) -> tuple[Card, ...]:
        """Accepted cards in hand order."""

        return tuple(card for card, picked in zip(self.cards, self.mask) if picked)

    @property
    def full(self) -> bool:
        """``True`` when a complete hand was accepted in its entirety."""

        return len(self.cards) == HAND_SIZE and all(self.mask)


def _filter(predicate: Callable[[Card], bool]) -> Rule:
    def rule(hand: Hand) -> list[Positions]:
        positions = tuple(index for index, card in enumerate(hand) if predicate(card))
        return [positions] if positions else []

    return rule


def _all_or_nothing(predicate: Callable[[Hand], bool]) -> Rule:
    def rule(hand: Hand) -> list[Positions]:
        if len(hand) != HAND_SIZE or not predicate(hand):
            return []
        return [tuple(range(len(hand)))]

    return rule


_FACES = frozenset({Rank.JACK, Rank.QUEEN, Rank.KING})
_SINGLE_DIGITS = frozenset(
    {Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE, Rank.SIX, Rank.SEVEN, Rank.EIGHT, Rank.NINE}
)
_PRIMES = frozenset({Rank.TWO, Rank.THREE, Rank.FIVE, Rank.SEVEN})
_ROYALTY = frozenset({Rank.ACE, Rank.KING, Rank.QUEEN, Rank.JACK})


def _highest_rank(hand: Hand) -> list[Positions]:
    top = hand.highest_rank()
    if top is None:
        return []
    return [tuple(index for index, card in enumerate(hand) if card.rank is top)]


def _rising_straight_flush(hand: Hand) -> bool:
    return hand.same_suit() and hand.rising_run()


def _arithmetic_run(hand: Hand) -> list[Positions]:
    hand.sort_by_rank()
    if len(hand) != HAND_SIZE:
        return []
    values = np.array([card.rank.ace_high for card in hand], dtype=np.int16)
    if not bool(np.all(np.diff(values) == 2)):
        return []
    return [tuple(range(len(hand)))]


def _sum_to_eleven(hand: Hand) -> list[Positions]:
    values = np.array([card.rank.ace_low for card in hand], dtype=np.int16)
    countable = (values >= 1) & (values <= 10)
    accepted: list[Positions] = []
    for size in range(len(hand), 1, -1):
        for combo in combinations(range(len(hand)), size):
            members = list(combo)
            if not bool(countable[members].all()):
                continue
            if int(values[members].sum()) == SUM_TARGET:
                accepted.append(combo)
    return accepted


def _blackjack_pair(hand: Hand) -> bool:
    counts = Counter(card.rank for card in hand)
    return counts[Rank.ACE] == 2 and counts[Rank.EIGHT] == 2


def _royal_suit(hand: Hand) -> bool:
    return hand.same_suit() and all(card.rank in _ROYALTY for card in hand)


def _black_jacks_and_aces(hand: Hand) -> bool:
    aces = sum(1 for card in hand if card.rank is Rank.ACE)
    black_jacks = sum(1 for card in hand if card.rank is Rank.JACK and card.suit in (Suit.CLUBS, Suit.SPADES))
    return aces == 2 and black_jacks == 2


_RULES: dict[Pattern, Rule] = {
    Pattern.RED_SUITS: _filter(lambda card: card.suit.is_red),
    Pattern.CLUBS: _filter(lambda card: card.suit is Suit.CLUBS),
    Pattern.FACE_CARDS: _filter(lambda card: card.rank in _FACES),
    Pattern.SINGLE_DIGITS: _filter(lambda card: card.rank in _SINGLE_DIGITS),
    Pattern.SINGLE_DIGIT_PRIMES: _filter(lambda card: card.rank in _PRIMES),
    Pattern.HIGHEST_RANK: _highest_rank,
    Pattern.RISING_STRAIGHT_FLUSH: _all_or_nothing(_rising_straight_flush),
    Pattern.ARITHMETIC_RUN: _arithmetic_run,
    Pattern.SUM_TO_ELEVEN: _sum_to_eleven,
    Pattern.BLACKJACK_PAIR: _all_or_nothing(_blackjack_pair),
    Pattern.ROYAL_SUIT: _all_or_nothing(_royal_suit),
    Pattern.BLACK_JACKS_AND_ACES: _all_or_nothing(_black_jacks_and_aces),
}


def evaluate(pattern: Pattern | int, hand: Hand) -> Evaluation:
    """Return the dealer's picks from ``hand`` under ``pattern``."""

    active = pattern if isinstance(pattern, Pattern) else Pattern.from_index(pattern)
    groups = _RULES[active](hand)
    cards = hand.cards
    mask = np.zeros(len(cards), dtype=bool)
    acceptances = []
    for positions in groups:
        mask[list(positions)] = True
        acceptances.append(Acceptance(positions, tuple(cards[index] for index in positions)))
    return Evaluation(
        pattern=active,
        cards=cards,
        acceptances=tuple(acceptances),
        mask=tuple(bool(flag) for flag in mask),
    )
