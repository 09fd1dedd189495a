"""Command-line interface for checkout-ago."""
