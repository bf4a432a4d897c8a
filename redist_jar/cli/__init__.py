"""Command-line helpers for redist-jar."""
