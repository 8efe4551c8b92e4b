"""Command-line interface for sessiongate."""
