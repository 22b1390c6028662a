"""Sanity tests ensuring the package imports correctly."""

from __future__ import annotations

import importlib

import pytest


@pytest.mark.parametrize(
    "module_name",
    [
        "art_dealer",
        "art_dealer.cards",
        "art_dealer.hand",
        "art_dealer.patterns",
        "art_dealer.state",
        "art_dealer.progress",
        "art_dealer.cli.main",
    ],
)
def test_modules_import(module_name: str) -> None:
    """Ensure all foundational modules can be imported."""

    assert importlib.import_module(module_name)
