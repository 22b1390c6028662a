"""Typer entry-point wiring for the Art Dealer CLI."""

from __future__ import annotations

from pathlib import Path

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from ..hand import Hand, format_hand_for_log
from ..logs import configure_logging
from ..patterns import PATTERN_COUNT, Pattern, evaluate
from ..progress import DEFAULT_SAVE_FILE, FileProgressStore
from ..state import GameConfig
from .render import format_card, format_cards
from .textual import run_textual_app

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()

SAVE_FILE_OPTION = typer.Option(
    Path(DEFAULT_SAVE_FILE),
    "--save-file",
    envvar="ART_DEALER_SAVE_FILE",
    help="File holding the last pattern won.",
)


def _parse_hand(codes: list[str]) -> Hand:
    try:
        return Hand.from_codes(codes)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command()
def play(
    save_file: Path = SAVE_FILE_OPTION,
    patterns: int = typer.Option(PATTERN_COUNT, min=1, max=PATTERN_COUNT, help="Number of patterns to play."),
    hand_log: Path | None = typer.Option(None, "--hand-log", help="Append every evaluated hand to this file."),
    seed: int | None = typer.Option(None, help="Random seed for dealt hands (omit for randomness)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
) -> None:
    """Play interactively in the terminal."""

    configure_logging(verbose=verbose, hand_log=hand_log, interactive=True)
    run_textual_app(
        config=GameConfig(total_patterns=patterns),
        store=FileProgressStore(save_file),
        seed=seed,
    )


@app.command("evaluate")
def evaluate_cli(
    pattern: int = typer.Argument(..., help="Pattern number (unknown numbers behave as pattern 1)."),
    cards: list[str] = typer.Argument(..., help="Card codes such as AS 10H QC 2D."),
) -> None:
    """Show which cards the dealer picks from a hand."""

    hand = _parse_hand(cards)
    result = evaluate(pattern, hand)

    table = Table(title=f"Pattern {int(result.pattern)}: {result.pattern.title}", box=box.SIMPLE_HEAVY)
    table.add_column("#", justify="right")
    table.add_column("Accepted", justify="left")
    for index, acceptance in enumerate(result.acceptances, start=1):
        table.add_row(str(index), " ".join(format_card(card) for card in acceptance.cards))
    if not result.acceptances:
        table.add_row("-", "[dim]nothing[/dim]")

    console.print(table)
    console.print(f"Hand: {format_cards(result.cards, result.mask)}")
    console.print(format_hand_for_log(result.cards, result.mask), markup=False, highlight=False)
    if result.full:
        console.print("[bold green]Full acceptance[/bold green]")


@app.command("patterns")
def patterns_cli() -> None:
    """List the dealer patterns."""

    table = Table(title="Patterns", box=box.SIMPLE_HEAVY)
    table.add_column("#", justify="right")
    table.add_column("Pattern", justify="left")
    for pattern in Pattern:
        table.add_row(str(int(pattern)), pattern.title)
    console.print(table)


@app.command("reset")
def reset_cli(save_file: Path = SAVE_FILE_OPTION) -> None:
    """Forget saved progress so the next game starts at pattern 1."""

    configure_logging()
    FileProgressStore(save_file).reset()
    console.print(f"[cyan]Progress in {save_file} reset.[/cyan]")


def main() -> None:
    """Entry-point for ``python -m art_dealer.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
