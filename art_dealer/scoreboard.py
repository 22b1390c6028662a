"""Helpers for tracking submissions across a play session."""

from __future__ import annotations

from dataclasses import dataclass, field

from .state import SubmissionResult, SubmissionStatus

__all__ = ["PatternTally", "SessionHistory"]


@dataclass(slots=True)
class PatternTally:
    """Counts accumulated while playing one pattern."""

    pattern: int
    hands: int = 0
    full_acceptances: int = 0
    duplicates: int = 0
    cards_selected: int = 0
    won: bool = False


@dataclass(slots=True)
class SessionHistory:
    """Mutable tracker that accumulates submission results for a session."""

    tallies: dict[int, PatternTally] = field(default_factory=dict)

    def _tally(self, pattern: int) -> PatternTally:
        if pattern not in self.tallies:
            self.tallies[pattern] = PatternTally(pattern)
        return self.tallies[pattern]

    def record(self, pattern: int, result: SubmissionResult) -> None:
        """Record ``result`` for a hand submitted while ``pattern`` was active."""

        if result.status is SubmissionStatus.DUPLICATE:
            self._tally(pattern).duplicates += 1
            return
        if result.status is not SubmissionStatus.ACCEPTED:
            return
        tally = self._tally(pattern)
        tally.hands += 1
        tally.cards_selected += len(result.selected)
        if result.won_hand:
            tally.full_acceptances += 1
        if result.round_won:
            tally.won = True

    def totals(self) -> list[PatternTally]:
        """Return tallies ordered by pattern number."""

        return [self.tallies[pattern] for pattern in sorted(self.tallies)]

    @property
    def patterns_won(self) -> int:
        return sum(1 for tally in self.tallies.values() if tally.won)

    def clear(self) -> None:
        self.tallies.clear()
