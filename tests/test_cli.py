from __future__ import annotations

from typer.testing import CliRunner

from art_dealer.cli.main import app

runner = CliRunner()


def test_patterns_lists_every_rule() -> None:
    result = runner.invoke(app, ["patterns"])

    assert result.exit_code == 0
    assert "Red suits" in result.output
    assert "Black jacks and aces" in result.output


def test_evaluate_prints_log_line() -> None:
    result = runner.invoke(app, ["evaluate", "1", "2H", "3C", "KD", "5S"])

    assert result.exit_code == 0
    assert "TWO of HEARTS*,THREE of CLUBS,KING of DIAMONDS*,FIVE of SPADES" in result.output


def test_evaluate_reports_full_acceptance() -> None:
    result = runner.invoke(app, ["evaluate", "8", "7D", "3C", "9S", "5H"])

    assert result.exit_code == 0
    assert "Full acceptance" in result.output


def test_evaluate_rejects_unknown_cards() -> None:
    result = runner.invoke(app, ["evaluate", "1", "2H", "ZZ"])

    assert result.exit_code != 0


def test_reset_clears_saved_progress(tmp_path) -> None:
    save_file = tmp_path / "LastWon.txt"
    save_file.write_text("4", encoding="utf-8")

    result = runner.invoke(app, ["reset", "--save-file", str(save_file)])

    assert result.exit_code == 0
    assert save_file.read_text(encoding="utf-8") == "0"
