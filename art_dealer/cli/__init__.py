"""Command line interface for Art Dealer."""
