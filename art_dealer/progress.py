"""Persistence of the last fully-won pattern."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from pathlib import Path
from typing import Protocol

__all__ = ["DEFAULT_SAVE_FILE", "ProgressStore", "FileProgressStore", "MemoryProgressStore"]

logger = getLogger(__name__)

DEFAULT_SAVE_FILE = "LastWon.txt"


class ProgressStore(Protocol):
    """Durable storage for a single integer: the last pattern won (0 for none)."""

    def load(self) -> int: ...

    def save(self, last_won: int) -> None: ...

    def reset(self) -> None: ...


@dataclass(slots=True)
class FileProgressStore:
    """Store progress as a decimal integer on the first line of a text file."""

    path: Path

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    def load(self) -> int:
        try:
            if not self.path.exists():
                return 0
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("could not read progress from %s: %s", self.path, exc)
            return 0
        lines = text.strip().splitlines()
        if not lines:
            return 0
        try:
            return int(lines[0].strip())
        except ValueError:
            logger.warning("ignoring corrupt progress file %s: %r", self.path, lines[0])
            return 0

    def save(self, last_won: int) -> None:
        try:
            self.path.write_text(f"{last_won}", encoding="utf-8")
        except OSError as exc:
            logger.warning("could not save progress to %s: %s", self.path, exc)

    def reset(self) -> None:
        self.save(0)


@dataclass(slots=True)
class MemoryProgressStore:
    """In-process store, useful for tests and embedding."""

    value: int = 0
    saves: int = 0

    def load(self) -> int:
        return self.value

    def save(self, last_won: int) -> None:
        self.value = last_won
        self.saves += 1

    def reset(self) -> None:
        self.value = 0
