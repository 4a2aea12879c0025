"""Command-line interface for pretty_print."""
