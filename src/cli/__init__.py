"""Command-line interface for SystemLogger."""
