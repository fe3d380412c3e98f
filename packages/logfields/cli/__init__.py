"""Command-line interface for logfields."""
