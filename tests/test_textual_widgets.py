from __future__ import annotations

from art_dealer.cli.textual.app import STATUS_BORDERS, ArtDealerApp, HandEntry
from art_dealer.hand import Hand
from art_dealer.state import RoundMachine, SubmissionStatus


def test_hand_entry_records_picks_for_pattern() -> None:
    machine = RoundMachine()
    result = machine.submit(Hand.from_codes("2H 3C KD 5S"))

    entry = HandEntry.from_result(1, result)

    assert entry is not None
    assert (entry.pattern, entry.picked, entry.won) == (1, 2, False)
    assert entry.also == ()


def test_hand_entry_lists_extra_acceptances() -> None:
    machine = RoundMachine()
    machine.pattern = 9
    result = machine.submit(Hand.from_codes("4C 4D 7H 7S"))

    entry = HandEntry.from_result(9, result)

    assert entry is not None
    assert entry.won is True
    assert len(entry.also) == len(result.evaluation.acceptances) - 1


def test_hand_entry_skips_results_without_evaluation() -> None:
    machine = RoundMachine()

    assert HandEntry.from_result(1, machine.submit(None)) is None


def test_every_status_has_a_border() -> None:
    assert set(STATUS_BORDERS) == set(SubmissionStatus)


def test_random_hand_is_bound_to_ctrl_r() -> None:
    bindings = {binding.key: binding.action for binding in ArtDealerApp.BINDINGS}

    assert bindings["ctrl+r"] == "deal_random"
    assert "r" not in bindings
