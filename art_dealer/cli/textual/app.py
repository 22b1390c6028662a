"""Textual-powered interactive Art Dealer interface."""

from __future__ import annotations

import random
from contextlib import suppress
from dataclasses import dataclass

from rich import box
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from textual import events, on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import Footer, Header, Input, OptionList, Static
from textual.widgets.option_list import Option

from ...cards import iter_full_deck
from ...hand import HAND_SIZE, Hand
from ...patterns import Evaluation
from ...progress import ProgressStore
from ...scoreboard import SessionHistory
from ...state import GameConfig, GamePhase, RoundMachine, RoundSnapshot, SubmissionResult, SubmissionStatus
from ..render import format_card, format_cards, render_status

MAX_HAND_ROWS = 14

STATUS_BORDERS = {
    SubmissionStatus.ACCEPTED: "green",
    SubmissionStatus.DUPLICATE: "yellow",
    SubmissionStatus.INVALID: "red",
    SubmissionStatus.CANCELLED: "grey50",
    SubmissionStatus.NOT_PLAYING: "grey50",
}


@dataclass(frozen=True, slots=True)
class HandEntry:
    """One evaluated hand as shown in the hand log."""

    pattern: int
    cards: str
    picked: int
    won: bool
    also: tuple[str, ...] = ()

    @classmethod
    def from_result(cls, pattern: int, result: SubmissionResult) -> HandEntry | None:
        evaluation = result.evaluation
        if evaluation is None:
            return None
        # the first acceptance is already shown by the mask
        also = tuple(
            " ".join(format_card(card) for card in acceptance.cards) for acceptance in evaluation.acceptances[1:]
        )
        return cls(
            pattern=pattern,
            cards=format_cards(evaluation.cards, evaluation.mask),
            picked=len(evaluation.selected),
            won=result.won_hand,
            also=also,
        )


class HandLog(Static):
    """Previous hands, grouped under the pattern they were played against."""

    entries: reactive[tuple[HandEntry, ...]] = reactive((), init=False)

    def on_mount(self) -> None:  # pragma: no cover - widget lifecycle glue
        self._draw(self.entries)

    def record(self, pattern: int, result: SubmissionResult) -> None:
        entry = HandEntry.from_result(pattern, result)
        if entry is not None:
            self.entries = (*self.entries, entry)[-MAX_HAND_ROWS:]

    def clear(self) -> None:
        self.entries = ()

    def watch_entries(self, value: tuple[HandEntry, ...]) -> None:
        self._draw(value)

    def _draw(self, entries: tuple[HandEntry, ...]) -> None:
        table = Table(box=box.MINIMAL, expand=True, show_edge=False)
        table.add_column("P", justify="right", style="bold")
        table.add_column("Hand", justify="left")
        table.add_column("Picked", justify="right")
        previous: int | None = None
        for entry in entries:
            if previous is not None and entry.pattern != previous:
                table.add_section()
            label = str(entry.pattern) if entry.pattern != previous else ""
            previous = entry.pattern
            picked = f"[bold green]{entry.picked}[/bold green]" if entry.won else str(entry.picked)
            table.add_row(label, Text.from_markup(entry.cards), Text.from_markup(picked))
            for line in entry.also:
                table.add_row("", Text.from_markup(f"[dim]also[/dim] {line}"), "")
        if not entries:
            table.add_row("", Text.from_markup("[dim]Previous hands will appear here[/dim]"), "")
        self.update(Panel(table, title="Hands", border_style="magenta"))


class RoundPanel(Static):
    """Active pattern, wins so far and the dealer's picks from the last hand."""

    def show(self, snapshot: RoundSnapshot, config: GameConfig, evaluation: Evaluation | None) -> None:
        body = render_status(
            snapshot,
            total_patterns=config.total_patterns,
            wins_required=config.wins_required,
            cards=evaluation.cards if evaluation else (),
            mask=evaluation.mask if evaluation else (),
            title="Table",
        )
        self.update(Panel(body, title=f"Pattern {snapshot.pattern}", border_style="cyan"))


class ScorePanel(Static):
    """Per-pattern session tallies."""

    def update_scores(self, history: SessionHistory) -> None:
        table = Table(box=box.SIMPLE_HEAVY, expand=True)
        table.add_column("Pattern", justify="left")
        table.add_column("Hands", justify="right")
        table.add_column("Picked", justify="right")
        table.add_column("Full", justify="right")
        table.add_column("Repeats", justify="right")
        for entry in history.totals():
            label = str(entry.pattern)
            if entry.won:
                label = f"[bold green]{label}[/bold green]"
            table.add_row(
                label,
                str(entry.hands),
                str(entry.cards_selected),
                str(entry.full_acceptances),
                str(entry.duplicates),
            )
        if not history.tallies:
            table.add_row(Text.from_markup("[dim]No hands yet[/dim]"), "-", "-", "-", "-")
        self.update(
            Panel(
                table,
                title="Session",
                subtitle=f"patterns won: {history.patterns_won}",
                border_style="bright_blue",
            )
        )


class StatusStrip(Static):
    """Feedback for the last submission, bordered by its outcome."""

    def show(self, message: str, status: SubmissionStatus = SubmissionStatus.ACCEPTED) -> None:
        body = Text.from_markup(message or "[dim]Ready[/dim]")
        self.update(Panel(body, border_style=STATUS_BORDERS[status]))


class EndGameChoice(OptionList):
    """Restart-or-quit prompt shown once the last pattern is beaten."""

    class Decision(Message):
        def __init__(self, restart: bool) -> None:
            super().__init__()
            self.restart = restart

    def __init__(self) -> None:
        super().__init__(
            Option("[bold]R[/bold]estart from pattern 1", id="restart"),
            Option("[bold]Q[/bold]uit", id="quit"),
        )
        self.highlighted = 0

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:  # pragma: no cover - Textual glue
        event.stop()
        self.post_message(self.Decision(event.option.id == "restart"))

    def on_key(self, event: events.Key) -> None:  # pragma: no cover - driven by UI interaction
        if event.key in ("r", "q"):
            event.stop()
            self.post_message(self.Decision(event.key == "r"))


class ArtDealerApp(App):
    """Textual Art Dealer game UI."""

    CSS = """
    Screen {
        layout: vertical;
        height: 100%;
    }

    #main {
        layout: horizontal;
        height: 1fr;
        width: 1fr;
    }

    #left, #right {
        layout: vertical;
        width: 1fr;
        height: 1fr;
        padding: 0 1;
        overflow-y: auto;
    }

    EndGameChoice {
        border: heavy $accent;
        padding: 1 1;
        width: 100%;
        height: auto;
        max-height: 6;
    }

    StatusStrip, Input {
        width: 100%;
    }

    RoundPanel, HandLog, ScorePanel {
        width: 100%;
        min-height: 6;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit_game", "Quit"),
        Binding("ctrl+c", "quit_game", "Quit", show=False),
        Binding("ctrl+r", "deal_random", "Random hand"),
        Binding("escape", "cancel_hand", "Cancel"),
    ]

    def __init__(self, *, config: GameConfig, store: ProgressStore, seed: int | None) -> None:
        super().__init__()
        if seed is None:
            seed = random.SystemRandom().randrange(0, 2**63)
        self.seed = seed
        self.rng = random.Random(seed)
        self.config = config
        self.machine = RoundMachine(config=config, store=store)
        self.history = SessionHistory()
        self.last_evaluation: Evaluation | None = None

        # Widgets initialised in compose
        self.status_strip: StatusStrip | None = None
        self.round_panel: RoundPanel | None = None
        self.hand_log: HandLog | None = None
        self.score_panel: ScorePanel | None = None
        self.hand_input: Input | None = None
        self.actions_container: Vertical | None = None
        self._end_choice: EndGameChoice | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        self.status_strip = StatusStrip(id="status")
        yield self.status_strip

        self.round_panel = RoundPanel(id="round")
        self.hand_input = Input(placeholder="Four cards, e.g. AS 10H QC 2D", id="hand")
        self.actions_container = Vertical(id="actions")
        left = Vertical(self.round_panel, self.hand_input, self.actions_container, id="left")

        self.hand_log = HandLog(id="hands")
        self.score_panel = ScorePanel(id="scores")
        right = Vertical(self.hand_log, self.score_panel, id="right")

        yield Horizontal(left, right, id="main")
        yield Footer()

    async def on_mount(self) -> None:
        snapshot = self.machine.snapshot()
        self._set_status(f"Pattern [bold]{snapshot.pattern}[/bold]: pick {HAND_SIZE} cards the dealer will love")
        self._refresh_ui()
        if self.hand_input:
            self.hand_input.focus()

    @on(Input.Submitted)
    def _on_hand_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        text = event.value.strip()
        if not text:
            self._submit(None)
            return
        try:
            hand = Hand.from_codes(text)
        except ValueError as exc:
            self._set_status(f"[red]{exc}[/red] Please try again.", SubmissionStatus.INVALID)
            return
        event.input.value = ""
        self._submit(hand)

    def _submit(self, hand: Hand | None) -> None:
        pattern = self.machine.pattern
        result = self.machine.submit(hand)
        self.history.record(pattern, result)
        if result.evaluation is not None:
            self.last_evaluation = result.evaluation
        if self.hand_log:
            self.hand_log.record(pattern, result)
        self._set_status(self._describe(result), result.status)
        self._refresh_ui()
        if result.game_won:
            self.run_worker(self._offer_restart(), group="input", exclusive=True)

    def _describe(self, result: SubmissionResult) -> str:
        status = result.status
        if status is SubmissionStatus.CANCELLED:
            return "[dim]Selection cancelled.[/dim]"
        if status is SubmissionStatus.INVALID:
            return f"[red]A hand needs exactly {HAND_SIZE} different cards.[/red]"
        if status is SubmissionStatus.DUPLICATE:
            return "[yellow]Nice try. You'll have to select a unique hand to win this round.[/yellow]"
        if status is SubmissionStatus.NOT_PLAYING:
            return "[dim]The game is over. Restart or quit.[/dim]"

        snapshot = result.snapshot
        if result.game_won:
            return "[bold green]You won the game![/bold green]"
        if result.round_won:
            return f"[green]You've beat this round.[/green] Let's see if you can figure out pattern {snapshot.pattern}."
        if result.won_hand:
            return (
                f"[green]Congratulations! You won this time![/green] "
                f"{snapshot.wins} of {self.config.wins_required} wins needed to move on."
            )
        return f"The dealer picked {len(result.selected)} of your cards."

    async def _offer_restart(self) -> None:
        await self._dismiss_choice()
        choice = EndGameChoice()
        self._end_choice = choice
        if self.actions_container is not None:
            await self.actions_container.mount(choice)
            choice.focus()

    @on(EndGameChoice.Decision)
    def _on_end_game_decision(self, message: EndGameChoice.Decision) -> None:
        message.stop()
        self.run_worker(self._apply_decision(message.restart), group="input", exclusive=True)

    async def _apply_decision(self, restart: bool) -> None:
        await self._dismiss_choice()
        if not restart:
            await self.action_quit_game()
            return
        snapshot = self.machine.restart()
        self.history.clear()
        self.last_evaluation = None
        if self.hand_log:
            self.hand_log.clear()
        self._set_status(f"New game. Pattern [bold]{snapshot.pattern}[/bold].")
        self._refresh_ui()
        if self.hand_input:
            self.hand_input.focus()

    async def _dismiss_choice(self) -> None:
        choice = self._end_choice
        if choice is None:
            return
        self._end_choice = None
        with suppress(Exception):  # pragma: no cover - widget may already be gone
            await choice.remove()

    async def action_deal_random(self) -> None:
        cards = self.rng.sample(list(iter_full_deck()), HAND_SIZE)
        if self.hand_input:
            self.hand_input.value = " ".join(card.code for card in cards)
            self.hand_input.focus()

    async def action_cancel_hand(self) -> None:
        if self.hand_input:
            self.hand_input.value = ""
        self._submit(None)

    async def action_quit_game(self) -> None:
        self.machine.quit()
        self.exit()

    def _refresh_ui(self) -> None:
        snapshot = self.machine.snapshot()
        if self.round_panel:
            self.round_panel.show(snapshot, self.config, self.last_evaluation)
        if self.score_panel:
            self.score_panel.update_scores(self.history)
        phase = "" if snapshot.phase is GamePhase.PLAYING else f" • {snapshot.phase.value.replace('_', ' ')}"
        self.title = f"Art Dealer • Pattern {snapshot.pattern} • Wins {snapshot.wins}{phase}"

    def _set_status(self, message: str, status: SubmissionStatus = SubmissionStatus.ACCEPTED) -> None:
        if self.status_strip:
            self.status_strip.show(message, status)


def run_textual_app(*, config: GameConfig, store: ProgressStore, seed: int | None) -> None:
    """Launch the Textual UI."""

    app = ArtDealerApp(config=config, store=store, seed=seed)
    app.run()
