from __future__ import annotations

import logging

import pytest

from art_dealer.progress import FileProgressStore, MemoryProgressStore


def test_missing_file_means_no_progress(tmp_path) -> None:
    assert FileProgressStore(tmp_path / "LastWon.txt").load() == 0


def test_save_then_load_round_trips(tmp_path) -> None:
    path = tmp_path / "LastWon.txt"
    FileProgressStore(path).save(5)

    assert path.read_text(encoding="utf-8") == "5"
    assert FileProgressStore(path).load() == 5


def test_reset_writes_zero(tmp_path) -> None:
    store = FileProgressStore(tmp_path / "LastWon.txt")
    store.save(7)
    store.reset()

    assert store.load() == 0


@pytest.mark.parametrize("content", ["", "\n", "abc", "3.5"])
def test_corrupt_or_empty_file_falls_back_to_zero(tmp_path, content: str) -> None:
    path = tmp_path / "LastWon.txt"
    path.write_text(content, encoding="utf-8")

    assert FileProgressStore(path).load() == 0


def test_corrupt_file_is_logged(tmp_path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="art_dealer")
    path = tmp_path / "LastWon.txt"
    path.write_text("garbage", encoding="utf-8")

    FileProgressStore(path).load()

    assert "corrupt progress file" in caplog.text


def test_unwritable_location_is_not_fatal(tmp_path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="art_dealer")
    store = FileProgressStore(tmp_path)

    store.save(3)

    assert store.load() == 0
    assert "could not save progress" in caplog.text
    assert "could not read progress" in caplog.text


def test_memory_store_counts_saves() -> None:
    store = MemoryProgressStore()
    store.save(2)
    store.save(3)
    store.reset()

    assert (store.value, store.saves) == (0, 2)


def test_undecodable_file_falls_back_to_zero(tmp_path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="art_dealer")
    path = tmp_path / "LastWon.txt"
    path.write_bytes(b"\xff\xfe\x00garbage")

    assert FileProgressStore(path).load() == 0
    assert "could not read progress" in caplog.text
