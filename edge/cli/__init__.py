"""Command-line interface for Edge."""
