"""Hands of up to four cards and their derived queries."""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Sequence

from .cards import Card, Rank

__all__ = ["HAND_SIZE", "Hand", "InvalidHandError", "format_hand_for_log"]

HAND_SIZE = 4

_CODE_SEPARATOR = re.compile(r"[\s,]+")


class InvalidHandError(ValueError):
    """Raised when a hand would hold too many cards or a repeated card."""


class Hand:
    """Ordered collection of unique cards submitted by the player.

    ``==`` compares positions. Duplicate detection within a round uses
    :attr:`key`, which ignores order.
    """

    __slots__ = ("_cards",)

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: list[Card] = []
        for card in cards:
            self.add_card(card)

    @classmethod
    def from_codes(cls, text: str | Sequence[str]) -> "Hand":
        """Build a hand from codes such as ``"AS 10H, QC"``."""

        tokens = _CODE_SEPARATOR.split(text.strip()) if isinstance(text, str) else list(text)
        return cls(Card.from_code(token) for token in tokens if token)

    def add_card(self, card: Card) -> None:
        if len(self._cards) >= HAND_SIZE:
            raise InvalidHandError(f"a hand holds at most {HAND_SIZE} cards")
        if card in self._cards:
            raise InvalidHandError(f"{card.log_token()} is already in the hand")
        self._cards.append(card)

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    @property
    def is_complete(self) -> bool:
        return len(self._cards) == HAND_SIZE

    @property
    def key(self) -> frozenset[Card]:
        """Order-independent identity used to spot a reused hand."""

        return frozenset(self._cards)

    def same_cards(self, other: "Hand") -> bool:
        return self.key == other.key

    def highest_rank(self) -> Rank | None:
        """Return the highest rank present, counting the ace high."""

        if not self._cards:
            return None
        return max((card.rank for card in self._cards), key=lambda rank: rank.ace_high)

    def same_suit(self) -> bool:
        """Return ``True`` when every card shares the first card's suit."""

        if not self._cards:
            return False
        suit = self._cards[0].suit
        return all(card.suit is suit for card in self._cards)

    def rising_run(self) -> bool:
        """Return ``True`` when ace-high values climb by exactly one as stored."""

        values = [card.rank.ace_high for card in self._cards]
        return all(later - earlier == 1 for earlier, later in zip(values, values[1:]))

    def sort_by_rank(self) -> None:
        """Sort in place by rank order; ties keep their relative order."""

        self._cards.sort(key=lambda card: card.rank.order)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __getitem__(self, index: int) -> Card:
        return self._cards[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self._cards == other._cards

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Hand({' '.join(card.code for card in self._cards)})"


def format_hand_for_log(
    hand: Iterable[Card],
    mask: Sequence[bool] | None = None,
    *,
    marker: str = "*",
) -> str:
    """Return ``RANK of SUIT`` tokens joined by commas, marking selected cards."""

    tokens = []
    for index, card in enumerate(hand):
        token = card.log_token()
        if mask is not None and index < len(mask) and mask[index]:
            token += marker
        tokens.append(token)
    return ",".join(tokens)
