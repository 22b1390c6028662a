"""Composable view primitives for the Art Dealer CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table

from ..cards import Card
from ..state import GamePhase, RoundSnapshot


@dataclass(slots=True)
class RoundStatusView:
    """Renderable summarising the active round and the last hand played."""

    snapshot: RoundSnapshot
    total_patterns: int
    wins_required: int
    cards: tuple[Card, ...]
    mask: tuple[bool, ...]
    card_formatter: Callable[[Sequence[Card], Sequence[bool] | None], str]

    def _phase_markup(self) -> str:
        phase = self.snapshot.phase
        if phase is GamePhase.GAME_WON:
            return "[bold green]Game won[/bold green]"
        if phase is GamePhase.QUIT:
            return "[dim]Finished[/dim]"
        return phase.value.replace("_", " ").title()

    def _metadata_panel(self) -> Panel:
        grid = Table.grid(expand=True)
        grid.add_column(justify="left")
        grid.add_row(f"[cyan]Pattern[/cyan]: {self.snapshot.pattern} of {self.total_patterns}")
        grid.add_row(f"[cyan]Wins[/cyan]: {self.snapshot.wins} of {self.wins_required}")
        grid.add_row(f"[cyan]Hands used[/cyan]: {self.snapshot.used_hands}")
        grid.add_row(f"[cyan]Status[/cyan]: {self._phase_markup()}")
        return Panel(grid, title="Round", box=box.SQUARE, border_style="blue")

    def render(self) -> RenderableType:
        table = Table(box=box.ROUNDED, expand=True)
        table.add_column("Your hand", justify="left")
        table.add_column("Dealer picks", justify="left")

        picked = [card for card, flag in zip(self.cards, self.mask) if flag]
        if self.cards:
            table.add_row(
                self.card_formatter(self.cards, self.mask),
                self.card_formatter(picked, None),
            )
        else:
            table.add_row("[dim]No hand yet[/dim]", "—")

        return Group(table, self._metadata_panel())
