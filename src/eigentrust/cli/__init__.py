"""Command-line interface for eigentrust."""
