"""Command-line interface for setlib."""
