"""Round progression state for Art Dealer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from logging import getLogger

from .cards import Card
from .hand import HAND_SIZE, Hand, format_hand_for_log
from .patterns import PATTERN_COUNT, Evaluation, Pattern, evaluate
from .progress import MemoryProgressStore, ProgressStore

__all__ = [
    "GameConfig",
    "GamePhase",
    "SubmissionStatus",
    "RoundSnapshot",
    "SubmissionResult",
    "RoundMachine",
]

logger = getLogger(__name__)
hand_logger = getLogger("art_dealer.hands")


class GamePhase(str, Enum):
    """High-level phases of a game."""

    PLAYING = "playing"
    ROUND_WON = "round_won"
    GAME_WON = "game_won"
    QUIT = "quit"


class SubmissionStatus(str, Enum):
    """How a submitted hand was handled."""

    ACCEPTED = "accepted"
    DUPLICATE = "duplicate"
    INVALID = "invalid"
    CANCELLED = "cancelled"
    NOT_PLAYING = "not_playing"


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Runtime configuration for a game."""

    total_patterns: int = PATTERN_COUNT
    wins_required: int = 2

    def __post_init__(self) -> None:
        if not 1 <= self.total_patterns <= PATTERN_COUNT:
            raise ValueError(f"total_patterns must be within [1, {PATTERN_COUNT}]")
        if self.wins_required <= 0:
            raise ValueError("wins_required must be positive")


@dataclass(frozen=True, slots=True)
class RoundSnapshot:
    """Immutable view of the round state after a transition."""

    pattern: int
    wins: int
    phase: GamePhase
    used_hands: int


@dataclass(frozen=True, slots=True)
class SubmissionResult:
    """Everything the caller needs to render the outcome of a submission."""

    status: SubmissionStatus
    snapshot: RoundSnapshot
    pattern: Pattern | None = None
    evaluation: Evaluation | None = None
    log_line: str = ""
    won_hand: bool = False
    round_won: bool = False
    game_won: bool = False

    @property
    def selected(self) -> tuple[Card, ...]:
        if self.evaluation is None:
            return ()
        return self.evaluation.selected


@dataclass(slots=True)
class RoundMachine:
    """Tracks the active pattern, wins in the round and hands already used."""

    config: GameConfig = field(default_factory=GameConfig)
    store: ProgressStore = field(default_factory=MemoryProgressStore)
    pattern: int = field(init=False, default=1)
    wins: int = field(init=False, default=0)
    phase: GamePhase = field(init=False, default=GamePhase.PLAYING)
    used_hands: set[frozenset[Card]] = field(init=False, default_factory=set)

    def __post_init__(self) -> None:
        self.pattern = self._initial_pattern()

    def _initial_pattern(self) -> int:
        last_won = self.store.load()
        if not 0 <= last_won < self.config.total_patterns:
            logger.warning("saved progress %r is out of range, starting at pattern 1", last_won)
            return 1
        return last_won + 1

    @property
    def is_last_pattern(self) -> bool:
        return self.pattern >= self.config.total_patterns

    def snapshot(self) -> RoundSnapshot:
        return RoundSnapshot(
            pattern=self.pattern,
            wins=self.wins,
            phase=self.phase,
            used_hands=len(self.used_hands),
        )

    def submit(self, hand: Hand | None) -> SubmissionResult:
        """Evaluate ``hand`` against the active pattern and apply transitions."""

        if hand is None:
            return SubmissionResult(SubmissionStatus.CANCELLED, self.snapshot())
        if self.phase is not GamePhase.PLAYING:
            return SubmissionResult(SubmissionStatus.NOT_PLAYING, self.snapshot())
        if len(hand) != HAND_SIZE:
            return SubmissionResult(SubmissionStatus.INVALID, self.snapshot())
        if hand.key in self.used_hands:
            return SubmissionResult(SubmissionStatus.DUPLICATE, self.snapshot())

        active = Pattern.from_index(self.pattern)
        evaluation = evaluate(active, hand)
        self.used_hands.add(hand.key)
        log_line = format_hand_for_log(evaluation.cards, evaluation.mask)
        hand_logger.info("pattern %d: %s", self.pattern, log_line)

        won_hand = self._fold_acceptances(evaluation)
        round_won = game_won = False
        if won_hand:
            self.wins += 1
            logger.info("full acceptance %d/%d on pattern %d", self.wins, self.config.wins_required, self.pattern)
            if self.wins >= self.config.wins_required:
                round_won = True
                game_won = self._complete_round()

        return SubmissionResult(
            status=SubmissionStatus.ACCEPTED,
            snapshot=self.snapshot(),
            pattern=active,
            evaluation=evaluation,
            log_line=log_line,
            won_hand=won_hand,
            round_won=round_won,
            game_won=game_won,
        )

    def _fold_acceptances(self, evaluation: Evaluation) -> bool:
        covered: set[int] = set()
        for acceptance in evaluation.acceptances:
            covered.update(acceptance.positions)
            logger.debug("dealer accepted positions %s", acceptance.positions)
            if len(covered) == HAND_SIZE:
                return True
        return False

    def _complete_round(self) -> bool:
        self.phase = GamePhase.ROUND_WON
        if self.is_last_pattern:
            self.phase = GamePhase.GAME_WON
            logger.info("pattern %d won, game complete", self.pattern)
            return True
        self.store.save(self.pattern)
        logger.info("pattern %d won, advancing to %d", self.pattern, self.pattern + 1)
        self.pattern += 1
        self._reset_round()
        self.phase = GamePhase.PLAYING
        return False

    def _reset_round(self) -> None:
        self.wins = 0
        self.used_hands.clear()

    def restart(self) -> RoundSnapshot:
        """Start over at pattern 1 after the game has been won."""

        if self.phase is not GamePhase.GAME_WON:
            raise RuntimeError("restart is only available once the game is won")
        self.store.reset()
        self.pattern = 1
        self._reset_round()
        self.phase = GamePhase.PLAYING
        return self.snapshot()

    def quit(self) -> RoundSnapshot:
        self.phase = GamePhase.QUIT
        return self.snapshot()
