"""Card abstractions and helpers for Art Dealer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

__all__ = ["Suit", "Rank", "Card", "iter_full_deck"]


class Suit(str, Enum):
    """Enumeration of the four suits in a standard deck."""

    CLUBS = "C"
    DIAMONDS = "D"
    HEARTS = "H"
    SPADES = "S"

    @property
    def is_red(self) -> bool:
        return self in (Suit.HEARTS, Suit.DIAMONDS)

    @property
    def is_black(self) -> bool:
        return not self.is_red

    @property
    def symbol(self) -> str:
        return _SUIT_SYMBOLS[self]


_SUIT_SYMBOLS = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}


class Rank(str, Enum):
    """Enumeration of ranks in comparison order, ace lowest."""

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"

    @classmethod
    def ordered(cls) -> tuple["Rank", ...]:
        """Return ranks in declaration order (ACE < 2 < ... < KING)."""

        return tuple(cls)

    @property
    def order(self) -> int:
        """Zero-based position in :meth:`ordered`."""

        return _RANK_ORDER[self]

    @property
    def ace_high(self) -> int:
        """Numeric value with the ace counted as 14."""

        return 14 if self is Rank.ACE else self.order + 1

    @property
    def ace_low(self) -> int:
        """Numeric value with the ace counted as 1."""

        return self.order + 1


_RANK_ORDER = {rank: index for index, rank in enumerate(Rank)}


@dataclass(frozen=True, slots=True)
class Card:
    """Value object describing a physical playing card."""

    rank: Rank
    suit: Suit

    @classmethod
    def from_code(cls, code: str) -> "Card":
        """Parse ``code`` such as ``"10H"``, ``"qs"`` or ``"ACE of SPADES"``."""

        text = code.strip()
        if " of " in text.lower():
            rank_name, _, suit_name = text.upper().partition(" OF ")
            try:
                return cls(Rank[rank_name.strip()], Suit[suit_name.strip()])
            except KeyError:
                raise ValueError(f"invalid card '{code}'") from None
        text = text.upper()
        if len(text) < 2:
            raise ValueError(f"invalid card code '{code}'")
        rank_code, suit_code = text[:-1], text[-1]
        if rank_code == "T":
            rank_code = "10"
        try:
            return cls(Rank(rank_code), Suit(suit_code))
        except ValueError:
            raise ValueError(f"invalid card code '{code}'") from None

    @property
    def code(self) -> str:
        return f"{self.rank.value}{self.suit.value}"

    def label(self) -> str:
        """Create a display label suitable for CLI representations."""

        return f"{self.rank.value}{self.suit.symbol}"

    def log_token(self) -> str:
        """Return the ``RANK of SUIT`` form used in hand logs."""

        return f"{self.rank.name} of {self.suit.name}"

    def __str__(self) -> str:
        return self.code


def iter_full_deck() -> Iterable[Card]:
    """Yield all 52 cards of a fresh deck."""

    for suit in Suit:
        for rank in Rank.ordered():
            yield Card(rank=rank, suit=suit)
