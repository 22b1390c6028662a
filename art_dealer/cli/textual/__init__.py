"""Textual front-end for Art Dealer."""

from .app import ArtDealerApp, run_textual_app

__all__ = ["ArtDealerApp", "run_textual_app"]
