"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Sequence

from rich.console import RenderableType
from rich.panel import Panel

from ..cards import Card, Suit
from ..state import RoundSnapshot
from .views import RoundStatusView

_SUIT_COLORS = {
    Suit.SPADES: "cyan",
    Suit.HEARTS: "red",
    Suit.DIAMONDS: "magenta",
    Suit.CLUBS: "green",
}


def format_card(card: Card, *, selected: bool = False) -> str:
    """Return a Rich-rendered label for ``card``."""

    color = _SUIT_COLORS.get(card.suit, "white")
    label = f"[{color}]{card.label()}[/{color}]"
    if selected:
        return f"[reverse]{label}[/reverse]"
    return label


def format_cards(cards: Sequence[Card], mask: Sequence[bool] | None = None) -> str:
    if not cards:
        return "—"
    flags = mask if mask is not None else [False] * len(cards)
    return " ".join(format_card(card, selected=flag) for card, flag in zip(cards, flags))


def render_status(
    snapshot: RoundSnapshot,
    *,
    total_patterns: int,
    wins_required: int,
    cards: Sequence[Card] = (),
    mask: Sequence[bool] = (),
    title: str = "Art Dealer",
) -> RenderableType:
    """Return a Rich panel describing the current round."""

    view = RoundStatusView(
        snapshot=snapshot,
        total_patterns=total_patterns,
        wins_required=wins_required,
        cards=tuple(cards),
        mask=tuple(mask),
        card_formatter=format_cards,
    )
    return Panel(view.render(), title=title, padding=(0, 1), border_style="cyan")
