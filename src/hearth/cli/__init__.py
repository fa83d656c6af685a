"""Command-line interface for Hearth."""
